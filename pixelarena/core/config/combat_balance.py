"""Combat balance tuning.

The constants shaping every fight (stat curve, weights, level scaling, hit,
crit, magic and variance rules) are loaded from
``assets/data/balance/combat_balance.yaml`` and exposed as frozen dataclasses.
They are tuning values pinned by the balance tests, not derived quantities.
"""

from dataclasses import dataclass
from typing import Optional

from .loader import data_path, load_yaml_section, require

DEFAULT_COMBAT_BALANCE_PATH = data_path("balance", "combat_balance.yaml")


@dataclass(frozen=True)
class StatWeights:
    offense: float
    defense: float
    speed: float
    magic_power: float
    focus: float
    crit_chance: float
    crit_cap: float
    total_power_focus_weight: float


@dataclass(frozen=True)
class LevelScaling:
    per_level: float
    max_bonus: float


@dataclass(frozen=True)
class ComebackRules:
    hp_threshold_ratio: float
    hit_bonus: float
    damage_multiplier: float


@dataclass(frozen=True)
class InitiativeRules:
    base_chance: float
    speed_weight: float
    min_chance: float
    max_chance: float


@dataclass(frozen=True)
class HitChanceRules:
    base: float
    speed_weight: float
    focus_weight: float
    min: float
    max: float


@dataclass(frozen=True)
class DamageRules:
    offense_weight: float
    defense_weight: float
    min: float
    crit_multiplier: float


@dataclass(frozen=True)
class MagicRules:
    base_chance: float
    power_weight: float
    focus_weight: float
    max_chance: float
    damage_weight: float


@dataclass(frozen=True)
class FocusVarianceRules:
    base_range: float
    stability_weight: float
    max_stability: float


@dataclass(frozen=True)
class FocusSurgeRules:
    chance_weight: float
    max_chance: float
    damage_multiplier: float


@dataclass(frozen=True)
class CombatBalance:
    """Every tuning constant used by the stat transform and the resolver."""
    stat_baseline: float
    diminishing_exponent: float
    round_limit: int
    stat_weights: StatWeights
    level_scaling: LevelScaling
    comeback: ComebackRules
    initiative: InitiativeRules
    hit_chance: HitChanceRules
    damage: DamageRules
    magic: MagicRules
    focus_variance: FocusVarianceRules
    focus_surge: FocusSurgeRules


_GROUPS = {
    "stat_weights": StatWeights,
    "level_scaling": LevelScaling,
    "comeback": ComebackRules,
    "initiative": InitiativeRules,
    "hit_chance": HitChanceRules,
    "damage": DamageRules,
    "magic": MagicRules,
    "focus_variance": FocusVarianceRules,
    "focus_surge": FocusSurgeRules,
}


def load_combat_balance(path: Optional[str] = None) -> CombatBalance:
    """Load combat balance from YAML.

    Args:
        path: YAML file to read; the bundled file when omitted

    Returns:
        CombatBalance with all groups populated

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If a group or a constant is missing
        ValueError: If a value is not numeric
    """
    path = path or DEFAULT_COMBAT_BALANCE_PATH
    section = load_yaml_section(path, "combat_balance")

    groups = {}
    for group_name, group_cls in _GROUPS.items():
        raw = require(section, group_name, path)
        values = {}
        for name in group_cls.__dataclass_fields__:
            values[name] = _as_number(require(raw, name, path, group_name), path, f"{group_name}.{name}")
        groups[group_name] = group_cls(**values)

    round_limit = _as_number(require(section, "round_limit", path), path, "round_limit")
    if round_limit < 1:
        raise ValueError(f"round_limit must be at least 1 in {path}")

    return CombatBalance(
        stat_baseline=_as_number(require(section, "stat_baseline", path), path, "stat_baseline"),
        diminishing_exponent=_as_number(
            require(section, "diminishing_exponent", path), path, "diminishing_exponent"
        ),
        round_limit=int(round_limit),
        **groups,
    )


def _as_number(value, path: str, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Expected a number for {name} in {path}, got {value!r}")
    return value


COMBAT_BALANCE: CombatBalance = load_combat_balance()
