"""Centralized game enums and constants.

This module contains all core game enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class StatKey(Enum):
    """The six raw RPG attributes a character carries."""
    STRENGTH = "strength"
    VITALITY = "vitality"
    DEXTERITY = "dexterity"
    LUCK = "luck"
    INTELLIGENCE = "intelligence"
    FOCUS = "focus"


class CombatWinner(Enum):
    """Outcome of a simulated fight, from the attacker's point of view."""
    ATTACKER = "attacker"
    DEFENDER = "defender"
    DRAW = "draw"


class CombatArchetype(Enum):
    """Play style inferred from the dominant derived combat stat."""
    BALANCED = auto()
    BERSERKER = auto()
    TANK = auto()
    SPEEDSTER = auto()
    MAGE = auto()


class CombatActor(Enum):
    """Which side of a fight a parsed log line belongs to."""
    PLAYER = "player"
    OPPONENT = "opponent"


class CombatActionType(Enum):
    """Kinds of actions recognised in a combat log line."""
    HIT = "hit"
    CRIT = "crit"
    MAGIC = "magic"
    MISS = "miss"
    COUNTER = "counter"


class ItemSlot(Enum):
    """Equipment slots."""
    WEAPON = "weapon"
    ARMOR = "armor"
    ACCESSORY = "accessory"


class ItemRarity(Enum):
    """Item rarities, ordered from most to least common."""
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"


class MatchType(Enum):
    """How close a matchmaking pick is to the player's power."""
    BALANCED = "balanced"
    SIMILAR = "similar"


class Gender(Enum):
    """Cosmetic gender used for sprite generation."""
    MALE = "male"
    FEMALE = "female"


# Ordered stat names, used wherever all six stats are walked in sequence
STAT_NAMES: tuple[str, ...] = tuple(stat.value for stat in StatKey)

# Convenience mappings for display
COMBAT_ARCHETYPE_LABELS = {
    CombatArchetype.BALANCED: "⚖️ Balanced",
    CombatArchetype.BERSERKER: "⚔️ Berserker",
    CombatArchetype.TANK: "🛡️ Tank",
    CombatArchetype.SPEEDSTER: "⚡ Speedster",
    CombatArchetype.MAGE: "🔮 Mage",
}

MATCH_TYPE_LABELS = {
    MatchType.BALANCED: "BALANCED MATCH",
    MatchType.SIMILAR: "FAIR MATCH",
}

ITEM_RARITY_ORDER: tuple[ItemRarity, ...] = (
    ItemRarity.COMMON,
    ItemRarity.UNCOMMON,
    ItemRarity.RARE,
    ItemRarity.EPIC,
)
