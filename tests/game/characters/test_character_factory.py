"""
Unit tests for character creation and stored-record hydration.
"""

import pytest

from pixelarena.core.data import STAT_NAMES, Gender
from pixelarena.core.random_source import ScriptedRandom, mulberry32
from pixelarena.game.characters import generate_initial_stats, hydrate_legacy_record


class TestGenerateInitialStats:
    """New characters are varied but always balanced."""

    @pytest.mark.parametrize("seed", range(30))
    def test_total_and_bounds(self, seed):
        character = generate_initial_stats("Hero", Gender.FEMALE, rng=mulberry32(seed))

        assert character.raw_stat_total() == 60
        assert all(6 <= character.get_stat(stat) <= 14 for stat in STAT_NAMES)
        assert character.max_hp == character.hp == 100 + character.vitality * 8

    def test_fresh_character_state(self):
        character = generate_initial_stats("Hero", Gender.FEMALE, rng=mulberry32(1))

        assert character.level == 1
        assert character.experience == 0
        assert character.stat_points == 0
        assert character.fights_left == 5
        assert character.gender == "female"
        assert len(character.seed) == 8
        assert character.seed.isalnum()

    def test_default_name(self):
        assert generate_initial_stats("", rng=mulberry32(1)).name == "HERO"

    def test_transfers_stop_at_bounds(self):
        """Always strength -> focus: four transfers land, the rest are skipped."""
        character = generate_initial_stats("Hero", "male", rng=ScriptedRandom([0.0, 0.99], cycle=True))

        assert character.strength == 6
        assert character.focus == 14
        assert character.vitality == 10
        assert character.hp == 180
        assert character.seed == "0z0z0z0z"

    def test_spreads_vary(self):
        spreads = {
            tuple(generate_initial_stats("Hero", rng=mulberry32(seed)).get_stat(stat) for stat in STAT_NAMES)
            for seed in range(20)
        }

        assert len(spreads) > 1


class TestHydrateLegacyRecord:
    """Stored records are normalised once, at the boundary."""

    def test_camel_case_record_without_newer_fields(self):
        record = {
            "name": "Old",
            "level": 3,
            "experience": 500,
            "strength": 12,
            "vitality": 12,
            "dexterity": 9,
            "luck": 9,
            "intelligence": 8,
            "fightsLeft": 2,
            "lastFightReset": 1700000000000,
            "fightHistory": [],
            "id": "abc",
        }
        character = hydrate_legacy_record(record)

        assert character.focus == 10
        assert character.stat_points == 0
        assert character.inventory == ()
        assert character.max_hp == 196
        assert character.hp == 196
        assert character.fights_left == 2
        assert character.character_id == "abc"

    def test_snake_case_record(self):
        record = {"name": "New", "max_hp": 200, "hp": 150, "stat_points": 2, "inventory": ["mana_ring"]}
        character = hydrate_legacy_record(record)

        assert character.max_hp == 200
        assert character.hp == 150
        assert character.stat_points == 2
        assert character.inventory == ("mana_ring",)

    def test_explicit_nulls_are_treated_as_missing(self):
        character = hydrate_legacy_record({"name": "Old", "focus": None, "maxHp": None})

        assert character.focus == 10
        assert character.max_hp == 180

    def test_missing_name(self):
        with pytest.raises(KeyError):
            hydrate_legacy_record({"level": 2})
