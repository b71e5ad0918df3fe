"""Pixel Arena: combat simulation and progression engine for an arena RPG."""

from .core.data import Character, CombatResult, CombatWinner
from .game.combat import compute_combat_stats, simulate_combat
from .game.progression import calculate_fight_xp, gain_xp

__version__ = "0.1.0"

__all__ = [
    "Character",
    "CombatResult",
    "CombatWinner",
    "compute_combat_stats",
    "simulate_combat",
    "calculate_fight_xp",
    "gain_xp",
]
