"""Character progression.

- experience.py: XP curve, XP awards and level-ups
- stat_allocation.py: stat points granted on level-up and how they are spent
"""

from .experience import (
    calculate_fight_xp,
    format_xp_display,
    gain_xp,
    get_max_level,
    get_xp_progress,
    total_xp_for_level,
    xp_required_for_next_level,
)
from .stat_allocation import (
    STAT_KEYS,
    apply_stat_point,
    auto_allocate_stat_points,
    auto_allocate_stat_points_random,
    grant_stat_points,
    hp_for_vitality,
    points_for_levels,
)

__all__ = [
    "calculate_fight_xp",
    "format_xp_display",
    "gain_xp",
    "get_max_level",
    "get_xp_progress",
    "total_xp_for_level",
    "xp_required_for_next_level",
    "STAT_KEYS",
    "apply_stat_point",
    "auto_allocate_stat_points",
    "auto_allocate_stat_points_random",
    "grant_stat_points",
    "hp_for_vitality",
    "points_for_levels",
]
