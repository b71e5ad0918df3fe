"""Configuration loaded from the bundled YAML data.

- combat_balance.py: tuning constants for the stat transform and combat resolver
- game_rules.py: stat pool, daily fights, XP awards and the XP curve
- loader.py: shared YAML helpers
"""

from .combat_balance import COMBAT_BALANCE, CombatBalance, load_combat_balance
from .game_rules import GAME_RULES, GameRules, load_game_rules
from .loader import DATA_DIR, data_path

__all__ = [
    "COMBAT_BALANCE",
    "CombatBalance",
    "load_combat_balance",
    "GAME_RULES",
    "GameRules",
    "load_game_rules",
    "DATA_DIR",
    "data_path",
]
