"""Combat system.

- stat_transform.py: raw stats to derived combat stats
- combat_resolver.py: the seeded round-based battle loop
- combat_log.py: log line wording and parsing
"""

from .combat_log import (
    DRAW_LINE,
    ROUND_LIMIT_LINE,
    CombatAction,
    closing_line,
    format_attack_line,
    opening_line,
    parse_combat_detail,
)
from .combat_resolver import (
    AttackOutcome,
    CombatResolver,
    Fighter,
    round_half_up,
    simulate_combat,
)
from .stat_transform import (
    compute_combat_stats,
    get_combat_archetype,
    get_combat_balance_label,
    level_multiplier,
    scale_stat,
)

__all__ = [
    "DRAW_LINE",
    "ROUND_LIMIT_LINE",
    "CombatAction",
    "closing_line",
    "format_attack_line",
    "opening_line",
    "parse_combat_detail",
    "AttackOutcome",
    "CombatResolver",
    "Fighter",
    "round_half_up",
    "simulate_combat",
    "compute_combat_stats",
    "get_combat_archetype",
    "get_combat_balance_label",
    "level_multiplier",
    "scale_stat",
]
