"""
Character creation and stored-record hydration.

New characters start with every stat at the base value and then go through a
series of single-point transfers between stats, so builds vary while the stat
total stays fixed and each stat stays inside the allowed range.
"""

from typing import Any, Mapping, Optional, Union

from ...core.config import GAME_RULES, GameRules
from ...core.data import Character, Gender, STAT_NAMES
from ...core.random_source import RandomSource, default_random
from ..progression.stat_allocation import hp_for_vitality

DEFAULT_NAME = "HERO"
STAT_TRANSFERS = 12
SEED_LENGTH = 8

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

# Stored key -> Character field. Both spellings are accepted.
_RECORD_KEYS = {
    "name": "name",
    "level": "level",
    "experience": "experience",
    "strength": "strength",
    "vitality": "vitality",
    "dexterity": "dexterity",
    "luck": "luck",
    "intelligence": "intelligence",
    "focus": "focus",
    "hp": "hp",
    "maxHp": "max_hp",
    "max_hp": "max_hp",
    "inventory": "inventory",
    "statPoints": "stat_points",
    "stat_points": "stat_points",
    "seed": "seed",
    "gender": "gender",
    "wins": "wins",
    "losses": "losses",
    "fightsLeft": "fights_left",
    "fights_left": "fights_left",
    "id": "character_id",
    "characterId": "character_id",
    "character_id": "character_id",
}


def generate_seed(rng: Optional[RandomSource] = None) -> str:
    """Short base-36 seed used to derive the character's sprite."""
    rng = rng or default_random()
    return "".join(_BASE36[min(int(rng() * 36), 35)] for _ in range(SEED_LENGTH))


def generate_initial_stats(
    name: str,
    gender: Union[Gender, str] = Gender.MALE,
    rng: Optional[RandomSource] = None,
    rules: Optional[GameRules] = None,
) -> Character:
    """Build a fresh level 1 character with a randomized, balanced spread.

    Each transfer moves one point from a random donor stat to a random
    receiver stat; transfers that would leave the allowed range are skipped.

    Args:
        name: Display name; ``"HERO"`` when empty
        gender: Cosmetic gender
        rng: Random source for the spread and the seed
        rules: Game rules; the bundled rules when omitted

    Returns:
        A Character with full HP and the daily fight allowance
    """
    rng = rng or default_random()
    rules = rules or GAME_RULES
    stat_rules = rules.stats

    stats = {stat: stat_rules.base_value for stat in STAT_NAMES}
    for _ in range(STAT_TRANSFERS):
        donor = STAT_NAMES[min(int(rng() * len(STAT_NAMES)), len(STAT_NAMES) - 1)]
        receiver = STAT_NAMES[min(int(rng() * len(STAT_NAMES)), len(STAT_NAMES) - 1)]
        if donor == receiver:
            continue
        if stats[donor] <= stat_rules.min_value or stats[receiver] >= stat_rules.max_value:
            continue
        stats[donor] -= 1
        stats[receiver] += 1

    max_hp = hp_for_vitality(stats["vitality"], rules)
    gender_value = gender.value if isinstance(gender, Gender) else gender

    return Character(
        name=name or DEFAULT_NAME,
        level=1,
        experience=0,
        hp=max_hp,
        max_hp=max_hp,
        seed=generate_seed(rng),
        gender=gender_value,
        fights_left=rules.combat.max_daily_fights,
        **stats,
    )


def hydrate_legacy_record(record: Mapping[str, Any], rules: Optional[GameRules] = None) -> Character:
    """Turn a stored record into a complete Character.

    Older records predate focus, stat points, inventories and stored max HP.
    Missing values are filled here so that nothing downstream has to guess.

    Raises:
        KeyError: If the record has no name
    """
    rules = rules or GAME_RULES
    if "name" not in record:
        raise KeyError("Character record is missing 'name'")

    fields: dict[str, Any] = {}
    for key, value in record.items():
        field_name = _RECORD_KEYS.get(key)
        if field_name is not None and value is not None:
            fields[field_name] = value

    fields.setdefault("focus", rules.stats.base_value)
    fields.setdefault("stat_points", 0)
    fields.setdefault("inventory", ())
    fields.setdefault("max_hp", hp_for_vitality(fields.get("vitality", rules.stats.base_value), rules))
    fields.setdefault("hp", fields["max_hp"])

    return Character(**fields)
