"""
Hero catalog service.

Holds the one loaded hero collection and answers the lookups the search and
narration functions leave to their callers: by id, by name, by either.
"""

import logging
from pathlib import Path

from .comparison import compare_stats
from .data_loader import HeroDataLoader
from .models import Combatant, HeadToHead, Hero, same_id
from .narration import narrate_battle
from .search import rank_heroes

logger = logging.getLogger(__name__)


class HeroCatalog:
    """
    Read-only access to the hero collection.

    The collection is loaded on first use and then shared by every caller.
    Nothing writes to it afterwards, so concurrent reads need no locking.
    """

    def __init__(
        self,
        data_file: str | Path | None = None,
        heroes: tuple[Hero, ...] | list[Hero] | None = None,
    ):
        """
        Initialize the catalog.

        Args:
            data_file: Path to the dataset file.
            heroes: Pre-loaded heroes. If given, data_file is never read.
        """
        if data_file is None and heroes is None:
            raise ValueError("HeroCatalog needs a data_file or a hero collection")

        self.data_loader = HeroDataLoader(data_file) if data_file is not None else None
        self._heroes: tuple[Hero, ...] = tuple(heroes) if heroes is not None else ()
        self._by_id: dict[str, Hero] = {h.id_key: h for h in self._heroes}
        self._loaded = heroes is not None

    def initialize(self, force_reload: bool = False) -> dict[str, int]:
        """
        Load the dataset if it hasn't been loaded yet.

        Args:
            force_reload: Re-read the data file even if already loaded.

        Returns:
            Dictionary with the hero count.

        Raises:
            DatasetLoadError: The dataset is missing or malformed.
        """
        if self._loaded and not (force_reload and self.data_loader):
            return self.stats()

        heroes = self.data_loader.load_heroes()
        self._heroes = heroes
        self._by_id = {h.id_key: h for h in heroes}
        self._loaded = True

        stats = self.stats()
        logger.info(f"Initialized hero catalog: {stats}")
        return stats

    def stats(self) -> dict[str, int]:
        return {"heroes": len(self._heroes)}

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def get_all_heroes(self) -> tuple[Hero, ...]:
        """Every hero, in dataset order."""
        self.initialize()
        return self._heroes

    def get_hero_by_id(self, hero_id: int | str) -> Hero | None:
        """
        Get a hero by id.

        Ids match on their string form, so 1 and "1" find the same hero.
        """
        self.initialize()
        return self._by_id.get(str(hero_id))

    def find_hero(
        self,
        name: str | None = None,
        hero_id: int | str | None = None,
    ) -> Hero | None:
        """
        Find the first hero whose name matches (case-insensitive) or whose
        id matches.

        Args:
            name: Hero name; compared case-insensitively, no fuzzy matching.
            hero_id: Hero id; compared as a string.

        Returns:
            The first matching hero in dataset order, or None.
        """
        name_lc = name.lower() if name else None
        for hero in self.get_all_heroes():
            if name_lc is not None and hero.name.lower() == name_lc:
                return hero
            if hero_id is not None and same_id(hero.id, hero_id):
                return hero
        return None

    def find_hero_by_name_or_id(self, value: str) -> Hero | None:
        """Resolve a single user-supplied string that may be a name or an id."""
        return self.find_hero(name=value, hero_id=value)

    # =========================================================================
    # SEARCH & BATTLE
    # =========================================================================

    def search(self, query: str, limit: int | None = None) -> list[Hero]:
        """
        Fuzzy search hero names. A blank query returns everyone.

        Raises:
            ValueError: If limit is given and is less than 1.
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        results = rank_heroes(query, self.get_all_heroes())
        if limit is not None:
            results = results[:limit]
        return results

    def battle(self, hero1: Combatant, hero2: Combatant) -> str:
        return narrate_battle(hero1, hero2)

    def head_to_head(self, hero1: Combatant, hero2: Combatant) -> HeadToHead:
        return compare_stats(hero1, hero2)
