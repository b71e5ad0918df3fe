"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: Character snapshots, combat results and progression records
- game_enums.py: Centralized enums for stats, outcomes, items and matchmaking
"""

from .data_structures import (
    Character,
    CombatResult,
    CombatSnapshot,
    CombatStats,
    Item,
    LevelUpResult,
    XpProgress,
)
from .game_enums import (
    COMBAT_ARCHETYPE_LABELS,
    ITEM_RARITY_ORDER,
    MATCH_TYPE_LABELS,
    STAT_NAMES,
    CombatActionType,
    CombatActor,
    CombatArchetype,
    CombatWinner,
    Gender,
    ItemRarity,
    ItemSlot,
    MatchType,
    StatKey,
)

__all__ = [
    "Character",
    "CombatResult",
    "CombatSnapshot",
    "CombatStats",
    "Item",
    "LevelUpResult",
    "XpProgress",
    "COMBAT_ARCHETYPE_LABELS",
    "ITEM_RARITY_ORDER",
    "MATCH_TYPE_LABELS",
    "STAT_NAMES",
    "CombatActionType",
    "CombatActor",
    "CombatArchetype",
    "CombatWinner",
    "Gender",
    "ItemRarity",
    "ItemSlot",
    "MatchType",
    "StatKey",
]
