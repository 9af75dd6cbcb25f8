"""
Pydantic models for superhero records.

Hero records are loaded once from the dataset and never modified afterwards,
so every model here is frozen. All six powerstats are required: a record
missing one is rejected when it is constructed, not when it is scored.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# ENUMS
# =============================================================================


class StatName(str, Enum):
    """Powerstat names, in the fixed order used for scans and reports."""

    INTELLIGENCE = "intelligence"
    STRENGTH = "strength"
    SPEED = "speed"
    DURABILITY = "durability"
    POWER = "power"
    COMBAT = "combat"


STAT_ORDER: tuple[StatName, ...] = tuple(StatName)


# =============================================================================
# HERO MODELS
# =============================================================================


class Powerstats(BaseModel):
    """The six-stat block every hero carries. Values are not clamped."""

    model_config = ConfigDict(frozen=True)

    intelligence: int
    strength: int
    speed: int
    durability: int
    power: int
    combat: int

    @property
    def total(self) -> int:
        """Total power: the sum of all six stats."""
        return sum(self.value(stat) for stat in STAT_ORDER)

    def value(self, stat: StatName | str) -> int:
        """Get a single stat by name."""
        return getattr(self, StatName(stat).value)

    def top_stat(self) -> tuple[StatName, int]:
        """
        Return the highest stat and its value.

        Ties go to whichever stat comes first in STAT_ORDER.
        """
        best = STAT_ORDER[0]
        for stat in STAT_ORDER[1:]:
            if self.value(stat) > self.value(best):
                best = stat
        return best, self.value(best)

    def as_dict(self) -> dict[str, int]:
        return {stat.value: self.value(stat) for stat in STAT_ORDER}


class Combatant(BaseModel):
    """
    Anything that can be sent into a battle: a name and a stat block.

    The compare endpoint accepts bare combatants; dataset records are full
    Hero objects.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    powerstats: Powerstats

    @property
    def total_power(self) -> int:
        return self.powerstats.total


class Hero(Combatant):
    """
    A superhero record from the dataset.

    Names are not guaranteed unique; ids are, once normalized to strings.
    """

    id: int | str
    image: str = ""

    @property
    def id_key(self) -> str:
        """Normalized id used for equality across int/str representations."""
        return str(self.id)

    def has_id(self, other_id: int | str) -> bool:
        return same_id(self.id, other_id)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary for JSON output."""
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "powerstats": self.powerstats.as_dict(),
        }

    def summary(self) -> dict:
        """Brief summary for list results."""
        return {
            "id": self.id,
            "name": self.name,
            "total_power": self.total_power,
        }


def same_id(a: int | str, b: int | str) -> bool:
    """Two ids refer to the same hero iff their string forms match."""
    return str(a) == str(b)


# =============================================================================
# REQUEST/OUTPUT MODELS
# =============================================================================


class CompareRequest(BaseModel):
    """Body of a battle comparison request."""

    hero1: Combatant
    hero2: Combatant


class StatResult(BaseModel):
    """Outcome of a single stat in a head-to-head comparison."""

    model_config = ConfigDict(frozen=True)

    stat: StatName
    hero1_value: int
    hero2_value: int
    winner: str | None  # None on a tie


class HeadToHead(BaseModel):
    """Stat-by-stat comparison of two combatants."""

    model_config = ConfigDict(frozen=True)

    hero1: str
    hero2: str
    stats: list[StatResult]
    hero1_wins: int
    hero2_wins: int
    score: str  # e.g. "4-2", leader's category wins first
    category_winner: str | None
    hero1_total: int
    hero2_total: int
    overall_winner: str | None
