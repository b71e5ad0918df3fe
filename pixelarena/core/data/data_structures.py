"""Unified data structures for the combat and progression engine.

This module provides clear definitions for the different data representations
flowing through the engine.

Data Flow:
1. Character (snapshot) -> effective Character (equipment applied)
2. effective Character -> CombatStats (per fight, never stored)
3. CombatStats x2 -> CombatResult (details + timeline)
4. CombatResult -> LevelUpResult (XP award, level-ups)

Every structure is a value object. Characters are frozen so that callers merge
results back explicitly instead of relying on in-place mutation.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from ..config import GAME_RULES
from .game_enums import CombatWinner, ItemRarity, ItemSlot, STAT_NAMES


@dataclass(frozen=True)
class Character:
    """Immutable snapshot of a fighter.

    Identity fields (name, seed, gender) are cosmetic and never read by the
    combat math. ``inventory`` holds item ids only; the catalog owns the items.
    """
    name: str
    level: int = 1
    experience: int = 0

    strength: int = 10
    vitality: int = 10
    dexterity: int = 10
    luck: int = 10
    intelligence: int = 10
    focus: int = 10

    # Derived from vitality when omitted: max_hp = base_hp + vitality * hp_per_vitality, hp = max_hp
    hp: Optional[int] = None
    max_hp: Optional[int] = None

    inventory: tuple[str, ...] = ()
    stat_points: int = 0

    seed: str = ""
    gender: str = "male"
    wins: int = 0
    losses: int = 0
    fights_left: int = 5
    character_id: Optional[str] = None

    def __post_init__(self):
        # Lists are accepted for convenience but stored as tuples
        if not isinstance(self.inventory, tuple):
            object.__setattr__(self, "inventory", tuple(self.inventory))
        if self.max_hp is None:
            health = GAME_RULES.health
            object.__setattr__(self, "max_hp", health.base_hp + self.vitality * health.hp_per_vitality)
        if self.hp is None:
            object.__setattr__(self, "hp", self.max_hp)

    def get_stat(self, stat: str) -> int:
        """Return a raw stat by name.

        Raises:
            ValueError: If ``stat`` is not one of the six raw stats
        """
        if stat not in STAT_NAMES:
            raise ValueError(f"Unknown stat: {stat}")
        return getattr(self, stat)

    def raw_stat_total(self) -> int:
        """Sum of the six raw stats."""
        return sum(getattr(self, stat) for stat in STAT_NAMES)

    def evolve(self, **changes) -> "Character":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


@dataclass(frozen=True)
class CombatStats:
    """Combat-ready values derived from a character for one fight."""
    total_power: float
    offense: float
    defense: float
    speed: float
    crit_chance: float
    magic_power: float
    focus: float


@dataclass(frozen=True)
class CombatSnapshot:
    """HP of both sides right after one log line."""
    attacker_hp: int
    defender_hp: int


@dataclass
class CombatResult:
    """Outcome of a simulated fight.

    ``details`` and ``timeline`` are parallel lists: timeline[i] is the HP
    state after details[i].
    """
    winner: CombatWinner
    rounds: int
    details: list[str] = field(default_factory=list)
    timeline: list[CombatSnapshot] = field(default_factory=list)

    def record(self, detail: str, attacker_hp: int, defender_hp: int) -> None:
        """Append one log line together with its HP snapshot."""
        self.details.append(detail)
        self.timeline.append(CombatSnapshot(attacker_hp, defender_hp))


@dataclass(frozen=True)
class XpProgress:
    """Progress inside the current level."""
    current_xp_in_level: int
    xp_for_next_level: Union[int, float]
    percentage: float
    is_max_level: bool


@dataclass(frozen=True)
class LevelUpResult:
    """Result of granting experience to a character."""
    updated_character: Character
    leveled_up: bool
    levels_gained: int
    new_level: int


@dataclass(frozen=True)
class Item:
    """Catalog entry for an equippable item."""
    item_id: str
    name: str
    slot: ItemSlot
    rarity: ItemRarity
    required_level: int = 1
    stats: dict[str, int] = field(default_factory=dict)

    def bonus(self, stat: str) -> int:
        """Bonus this item gives to ``stat`` (or ``"hp"``), 0 when absent."""
        return self.stats.get(stat, 0)
