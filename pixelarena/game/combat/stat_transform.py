"""Stat transform: raw RPG attributes to combat-ready values.

1. Diminishing returns above the baseline: ``b + (raw - b) ** 0.85``
2. A small, capped level multiplier
3. Per-stat weights (crit chance is not level scaled and is capped)
4. Total power as a weighted sum with a partial focus contribution
"""

from typing import Optional

from ...core.config import COMBAT_BALANCE, CombatBalance
from ...core.data import COMBAT_ARCHETYPE_LABELS, Character, CombatArchetype, CombatStats


def scale_stat(raw: float, balance: Optional[CombatBalance] = None) -> float:
    """Apply the diminishing-returns curve; identity at or below the baseline."""
    balance = balance or COMBAT_BALANCE
    baseline = balance.stat_baseline
    if raw <= baseline:
        return raw
    return baseline + (raw - baseline) ** balance.diminishing_exponent


def level_multiplier(level: int, balance: Optional[CombatBalance] = None) -> float:
    """``1 + min(max_bonus, (level - 1) * per_level)``."""
    scaling = (balance or COMBAT_BALANCE).level_scaling
    return 1 + min(scaling.max_bonus, (level - 1) * scaling.per_level)


def compute_combat_stats(character: Character, balance: Optional[CombatBalance] = None) -> CombatStats:
    """Derive the combat stats of a character snapshot. Pure and total."""
    balance = balance or COMBAT_BALANCE
    weights = balance.stat_weights
    multiplier = level_multiplier(character.level, balance)

    offense = scale_stat(character.strength, balance) * weights.offense * multiplier
    defense = scale_stat(character.vitality, balance) * weights.defense * multiplier
    speed = scale_stat(character.dexterity, balance) * weights.speed * multiplier
    magic_power = scale_stat(character.intelligence, balance) * weights.magic_power * multiplier
    focus = scale_stat(character.focus, balance) * weights.focus * multiplier
    crit_chance = min(weights.crit_cap, scale_stat(character.luck, balance) * weights.crit_chance)

    total_power = (
        offense + defense + speed + magic_power + crit_chance
        + focus * weights.total_power_focus_weight
    )

    return CombatStats(
        total_power=total_power,
        offense=offense,
        defense=defense,
        speed=speed,
        crit_chance=crit_chance,
        magic_power=magic_power,
        focus=focus,
    )


def get_combat_archetype(stats: CombatStats) -> CombatArchetype:
    """Classify a fighter by its dominant stat among offense, defense, speed and magic."""
    values = (stats.offense, stats.defense, stats.speed, stats.magic_power)
    if len(set(values)) == 1:
        return CombatArchetype.BALANCED

    highest = max(values)
    if highest == stats.offense:
        return CombatArchetype.BERSERKER
    if highest == stats.defense:
        return CombatArchetype.TANK
    if highest == stats.speed:
        return CombatArchetype.SPEEDSTER
    return CombatArchetype.MAGE


def get_combat_balance_label(stats: CombatStats) -> str:
    """Display label of the archetype, e.g. ``"🛡️ Tank"``."""
    return COMBAT_ARCHETYPE_LABELS[get_combat_archetype(stats)]
