"""
Deterministic battle stories from two heroes' stat blocks.

The story is assembled from fixed sentence fragments chosen by how far apart
the two heroes' total power is. Same inputs, same story, every time.
"""

import logging

from .models import Combatant, StatName

logger = logging.getLogger(__name__)

MAX_STORY_LENGTH = 800
ELLIPSIS = "..."

# Power difference thresholds between tiers
EVEN_MATCH_LIMIT = 20
CLEAR_ADVANTAGE_LIMIT = 50

# Stats checked for the dominant tier, and the margin a stat needs to count
DOMINANT_STATS = (StatName.STRENGTH, StatName.SPEED, StatName.COMBAT)
DOMINANT_STAT_MARGIN = 20


def _evenly_matched(
    hero1: Combatant,
    hero2: Combatant,
    winner: Combatant,
) -> list[str]:
    return [
        "the two heroes were nearly evenly matched! Both fighters displayed incredible prowess. ",
        f"{hero1.name} (power: {hero1.total_power}) traded fierce blows with "
        f"{hero2.name} (power: {hero2.total_power}). ",
        f"After an intense struggle, {winner.name} emerged victorious by the narrowest of margins, ",
        "earning the respect of their worthy opponent.",
    ]


def _clear_advantage(winner: Combatant, loser: Combatant) -> list[str]:
    stat, value = winner.powerstats.top_stat()
    return [
        f"{winner.name} held a clear advantage with superior abilities. ",
        f"Despite {loser.name}'s valiant effort, {winner.name}'s combination of ",
        f"{stat.value} ({value}) and overall power ({winner.total_power}) ",
        f"proved decisive. {loser.name} fought bravely but was ultimately overwhelmed.",
    ]


def _dominant(winner: Combatant, loser: Combatant) -> list[str]:
    standout = [
        stat.value
        for stat in DOMINANT_STATS
        if winner.powerstats.value(stat) > loser.powerstats.value(stat) + DOMINANT_STAT_MARGIN
    ]
    abilities = ", ".join(standout) + ". " if standout else "abilities across the board. "
    return [
        f"{winner.name} completely dominated the fight! ",
        f"With overwhelming power ({winner.total_power} vs {loser.total_power}), ",
        f"{winner.name} showcased superior ",
        abilities,
        f"{loser.name} never stood a chance against such overwhelming might.",
    ]


def pick_winner(hero1: Combatant, hero2: Combatant) -> tuple[Combatant, Combatant]:
    """
    Return (winner, loser) by total power.

    An exact tie goes to hero1.
    """
    if hero1.total_power >= hero2.total_power:
        return hero1, hero2
    return hero2, hero1


def truncate_story(story: str, limit: int = MAX_STORY_LENGTH) -> str:
    """Cut a story down to at most `limit` characters, ending in an ellipsis."""
    if len(story) <= limit:
        return story
    return story[: limit - len(ELLIPSIS)] + ELLIPSIS


def narrate_battle(hero1: Combatant, hero2: Combatant) -> str:
    """
    Generate a battle story for two heroes.

    Args:
        hero1: First combatant. Wins exact ties on total power.
        hero2: Second combatant.

    Returns:
        A story of at most 800 characters naming both heroes.
    """
    power_diff = abs(hero1.total_power - hero2.total_power)
    winner, loser = pick_winner(hero1, hero2)

    parts = [f"In an epic battle between {hero1.name} and {hero2.name}, "]
    if power_diff < EVEN_MATCH_LIMIT:
        parts.extend(_evenly_matched(hero1, hero2, winner))
    elif power_diff < CLEAR_ADVANTAGE_LIMIT:
        parts.extend(_clear_advantage(winner, loser))
    else:
        parts.extend(_dominant(winner, loser))

    story = truncate_story("".join(parts))
    logger.debug(f"Narrated {hero1.name} vs {hero2.name} (diff {power_diff}, winner {winner.name})")
    return story
