"""
Experience curve and level progression.

XP needed to leave a level grows as ``base_xp * level ** exponent``
(100 * level^1.8 by default): gentle early on, steep late.

- Level 1->2: 100 XP
- Level 2->3: 348 XP
- Level 10->11: 6,309 XP
- Level 50->51: 114,458 XP

Level ``max_level`` (99) is absorbing: nothing is required beyond it and
surplus XP is kept but has no effect.
"""

import math
from typing import Optional, Union

from ...core.config import GAME_RULES, GameRules
from ...core.data import Character, LevelUpResult, XpProgress
from ...core.random_source import RandomSource, default_random


def get_max_level(rules: Optional[GameRules] = None) -> int:
    """Highest reachable level."""
    return (rules or GAME_RULES).progression.max_level


def xp_required_for_next_level(level: int, rules: Optional[GameRules] = None) -> Union[int, float]:
    """XP needed to go from ``level`` to ``level + 1``; ``math.inf`` at the cap."""
    progression = (rules or GAME_RULES).progression
    if level >= progression.max_level:
        return math.inf
    return math.floor(progression.base_xp * level ** progression.exponent)


def total_xp_for_level(level: int, rules: Optional[GameRules] = None) -> Union[int, float]:
    """Cumulative XP needed to reach ``level`` from level 1 (0 at level 1)."""
    if level <= 1:
        return 0
    return sum(xp_required_for_next_level(i, rules) for i in range(1, level))


def get_xp_progress(level: int, experience: int, rules: Optional[GameRules] = None) -> XpProgress:
    """Progress inside the current level, for display."""
    if level >= get_max_level(rules):
        return XpProgress(
            current_xp_in_level=experience,
            xp_for_next_level=0,
            percentage=100.0,
            is_max_level=True,
        )

    xp_for_next_level = xp_required_for_next_level(level, rules)
    current_xp_in_level = experience - total_xp_for_level(level, rules)
    percentage = min(100.0, current_xp_in_level / xp_for_next_level * 100)

    return XpProgress(
        current_xp_in_level=max(0, current_xp_in_level),
        xp_for_next_level=xp_for_next_level,
        percentage=percentage,
        is_max_level=False,
    )


def format_xp_display(level: int, experience: int, rules: Optional[GameRules] = None) -> str:
    """``"current / needed XP"`` or ``"MAX LEVEL"``."""
    progress = get_xp_progress(level, experience, rules)
    if progress.is_max_level:
        return "MAX LEVEL"
    return f"{progress.current_xp_in_level} / {progress.xp_for_next_level} XP"


def gain_xp(character: Character, xp_gained: int, rules: Optional[GameRules] = None) -> LevelUpResult:
    """Add experience and apply every level-up it pays for.

    Several levels can be gained in one call. The level never exceeds the cap,
    whatever the surplus.
    """
    max_level = get_max_level(rules)
    starting_level = character.level
    level = starting_level
    experience = character.experience + xp_gained

    while level < max_level and experience >= total_xp_for_level(level + 1, rules):
        level += 1

    levels_gained = level - starting_level
    return LevelUpResult(
        updated_character=character.evolve(level=level, experience=experience),
        leveled_up=levels_gained > 0,
        levels_gained=levels_gained,
        new_level=level,
    )


def calculate_fight_xp(
    player_level: int,
    won: bool,
    rng: Optional[RandomSource] = None,
    rules: Optional[GameRules] = None,
) -> int:
    """XP awarded for a fight.

    ``floor(base * (1 + (level - 1) * level_bonus) * variance)`` where base is
    the win or loss award and variance is uniform in ``[1 - v, 1 + v]``.
    Stochastic by design; it sits outside the deterministic combat core.
    """
    rng = rng or default_random()
    combat = (rules or GAME_RULES).combat

    base_xp = combat.xp_win if won else combat.xp_loss
    level_factor = 1 + (player_level - 1) * combat.xp_level_bonus
    variance = (1 - combat.xp_variance) + rng() * combat.xp_variance * 2

    return math.floor(base_xp * level_factor * variance)
