"""Stat points: granting, spending and automatic allocation.

Levelling up grants stat points; players spend them by hand, bots spend them
automatically. Spending a point on vitality also raises max HP.
"""

from typing import Optional

from ...core.config import GAME_RULES, GameRules
from ...core.data import Character, STAT_NAMES
from ...core.random_source import RandomSource, default_random

STAT_KEYS = STAT_NAMES


def hp_for_vitality(vitality: int, rules: Optional[GameRules] = None) -> int:
    """Max HP for a vitality value: ``base_hp + vitality * hp_per_vitality``."""
    health = (rules or GAME_RULES).health
    return health.base_hp + vitality * health.hp_per_vitality


def points_for_levels(levels_gained: int, rules: Optional[GameRules] = None) -> int:
    """Stat points earned for ``levels_gained`` level-ups."""
    if levels_gained <= 0:
        return 0
    return levels_gained * (rules or GAME_RULES).stats.points_per_level


def grant_stat_points(character: Character, points: int) -> Character:
    """Add unspent points; non-positive amounts leave the character unchanged."""
    if points <= 0:
        return character
    return character.evolve(stat_points=character.stat_points + points)


def apply_stat_point(character: Character, stat: str) -> Character:
    """Spend one point on ``stat``.

    Without points available the character is returned unchanged. A point in
    vitality recomputes max HP and heals by the same delta, capped at the new
    maximum.

    Raises:
        ValueError: If ``stat`` is not a raw stat name
    """
    if stat not in STAT_KEYS:
        raise ValueError(f"Unknown stat: {stat}")
    if character.stat_points <= 0:
        return character

    updated = character.evolve(
        stat_points=character.stat_points - 1,
        **{stat: character.get_stat(stat) + 1},
    )

    if stat == "vitality":
        new_max_hp = hp_for_vitality(updated.vitality)
        delta = new_max_hp - updated.max_hp
        updated = updated.evolve(max_hp=new_max_hp, hp=min(updated.hp + delta, new_max_hp))

    return updated


def auto_allocate_stat_points(
    character: Character, points: int, rng: Optional[RandomSource] = None
) -> Character:
    """Grant ``points`` and spend each on the currently lowest stat.

    Ties are broken with one draw from ``rng`` per point.
    """
    rng = rng or default_random()
    updated = grant_stat_points(character, points)

    for _ in range(max(0, points)):
        updated = apply_stat_point(updated, _pick_lowest_stat(updated, rng))

    return updated


def auto_allocate_stat_points_random(
    character: Character, points: int, rng: Optional[RandomSource] = None
) -> Character:
    """Grant ``points`` and spend each on a uniformly random stat."""
    rng = rng or default_random()
    updated = grant_stat_points(character, points)

    for _ in range(max(0, points)):
        index = min(int(rng() * len(STAT_KEYS)), len(STAT_KEYS) - 1)
        updated = apply_stat_point(updated, STAT_KEYS[index])

    return updated


def _pick_lowest_stat(character: Character, rng: RandomSource) -> str:
    values = {stat: character.get_stat(stat) for stat in STAT_KEYS}
    lowest_value = min(values.values())
    lowest = [stat for stat, value in values.items() if value == lowest_value]
    return lowest[int(rng() * len(lowest))]
