"""
Fuzzy name search over the hero collection.

Queries are always compared as literal text. Nothing here builds or runs a
regular expression, so characters like "(", "*" or "\\" in a query are just
characters to look for.
"""

import logging
import unicodedata
from collections.abc import Sequence
from typing import NamedTuple

from .models import Hero

logger = logging.getLogger(__name__)

EXACT_SCORE = 3.0
PREFIX_SCORE = 2.0
SUBSTRING_SCORE = 1.0
SUBSEQUENCE_SCORE = 0.5
NO_MATCH = -1.0


class Match(NamedTuple):
    """A hero paired with its score for the duration of one search."""

    hero: Hero
    score: float


def is_subsequence(query: str, target: str) -> bool:
    """
    Check whether every character of query appears in target in order.

    Single left-to-right pass over target: the query cursor advances each
    time the current target character matches it.
    """
    if not query:
        return True

    cursor = 0
    for char in target:
        if char == query[cursor]:
            cursor += 1
            if cursor == len(query):
                return True
    return False


def fuzzy_score(query: str, target: str) -> float:
    """
    Score how well a query matches a target name (case-insensitive).

    Returns:
        3 for an exact match, 2 for a prefix, 1 for a substring,
        0.5 for an in-order subsequence, -1 for no match.
    """
    q = query.lower()
    t = target.lower()

    if t == q:
        return EXACT_SCORE
    if t.startswith(q):
        return PREFIX_SCORE
    if q in t:
        return SUBSTRING_SCORE
    if is_subsequence(q, t):
        return SUBSEQUENCE_SCORE
    return NO_MATCH


def _id_sort_key(hero_id: int | str) -> tuple:
    # Numeric ids sort numerically; anything else sorts after them by text
    try:
        return (0, int(str(hero_id)), "")
    except ValueError:
        return (1, 0, str(hero_id))


def _collation_key(name: str) -> str:
    # Accents fold onto their base letter so "Étoile" sorts among the E names
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def _match_sort_key(match: Match) -> tuple:
    name = match.hero.name
    return (
        -match.score,
        _collation_key(name),
        name.casefold(),
        name,
        _id_sort_key(match.hero.id),
    )


def rank_heroes(query: str, heroes: Sequence[Hero]) -> list[Hero]:
    """
    Rank heroes by how well their names match a query.

    A blank query returns every hero in collection order. Otherwise heroes
    that don't match at all are dropped and the rest are ordered by score
    (best first), then name, then numeric id.

    Args:
        query: Raw search text; surrounding whitespace is ignored.
        heroes: The hero collection. Never modified.

    Returns:
        A new list of heroes.
    """
    needle = query.strip()
    if not needle:
        return list(heroes)

    matches = []
    for hero in heroes:
        score = fuzzy_score(needle, hero.name)
        if score >= 0:
            matches.append(Match(hero, score))

    matches.sort(key=_match_sort_key)
    logger.debug(f"Search {needle!r}: {len(matches)} of {len(heroes)} heroes matched")
    return [match.hero for match in matches]
