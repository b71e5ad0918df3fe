"""Game rules shared by character creation, fights and progression.

Loaded from ``assets/data/rules/game_rules.yaml``. These are read-only inputs
to the engine: daily fight allowance, XP awards, the stat pool and the XP curve.
"""

from dataclasses import dataclass
from typing import Optional

from .loader import data_path, load_yaml_section, require

DEFAULT_GAME_RULES_PATH = data_path("rules", "game_rules.yaml")


@dataclass(frozen=True)
class StatRules:
    total_points: int
    base_value: int
    min_value: int
    max_value: int
    points_per_level: int


@dataclass(frozen=True)
class CombatRules:
    max_daily_fights: int
    xp_win: int
    xp_loss: int
    xp_level_bonus: float
    xp_variance: float


@dataclass(frozen=True)
class ProgressionRules:
    max_level: int
    base_xp: int
    exponent: float


@dataclass(frozen=True)
class HealthRules:
    base_hp: int
    hp_per_vitality: int


@dataclass(frozen=True)
class GameRules:
    stats: StatRules
    combat: CombatRules
    progression: ProgressionRules
    health: HealthRules


def load_game_rules(path: Optional[str] = None) -> GameRules:
    """Load game rules from YAML.

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If a section or a rule is missing
        ValueError: If the stat bounds are inconsistent
    """
    path = path or DEFAULT_GAME_RULES_PATH
    section = load_yaml_section(path, "game_rules")

    def build(cls, key):
        raw = require(section, key, path)
        return cls(**{name: require(raw, name, path, key) for name in cls.__dataclass_fields__})

    rules = GameRules(
        stats=build(StatRules, "stats"),
        combat=build(CombatRules, "combat"),
        progression=build(ProgressionRules, "progression"),
        health=build(HealthRules, "health"),
    )

    stats = rules.stats
    if not stats.min_value <= stats.base_value <= stats.max_value:
        raise ValueError(f"Stat base value must lie between min and max in {path}")
    if rules.progression.max_level < 1:
        raise ValueError(f"max_level must be at least 1 in {path}")

    return rules


GAME_RULES: GameRules = load_game_rules()
