"""
Edge case and error handling tests.

Tests boundary conditions and invalid inputs across the engine.
"""
import dataclasses

import pytest

from pixelarena.core.config import COMBAT_BALANCE
from pixelarena.core.data import Character, CombatWinner
from pixelarena.core.random_source import ScriptedRandom
from pixelarena.game.combat import simulate_combat
from pixelarena.game.items import ItemCatalog, apply_equipment
from pixelarena.game.progression import apply_stat_point, gain_xp


class TestCombatBoundaries:

    def test_exhausted_script_propagates(self, hero, villain, empty_catalog):
        """The resolver never invents draws."""
        with pytest.raises(IndexError):
            simulate_combat(hero, villain, ScriptedRandom([0.0, 0.0]), catalog=empty_catalog)

    def test_one_hp_fighters(self, empty_catalog):
        rng = ScriptedRandom([0.0, 0.0, 0.99, 0.99, 0.5, 0.99])
        result = simulate_combat(
            Character(name="A", hp=1), Character(name="B", hp=1), rng, catalog=empty_catalog
        )

        assert result.winner == CombatWinner.ATTACKER

    def test_extreme_stats_stay_bounded(self, empty_catalog):
        """Huge stats still yield clamped chances and a finished fight."""
        titan = Character(name="Titan", strength=500, dexterity=500, luck=500, focus=500, level=99)
        result = simulate_combat(titan, Character(name="Mouse"), ScriptedRandom([0.5], cycle=True),
                                 catalog=empty_catalog)

        assert result.winner == CombatWinner.ATTACKER
        assert result.rounds == 1

    def test_long_round_limit(self, hero, villain, empty_catalog):
        balance = dataclasses.replace(COMBAT_BALANCE, round_limit=500)
        result = simulate_combat(hero, villain, ScriptedRandom([0.99], cycle=True),
                                 balance=balance, catalog=empty_catalog)

        assert result.rounds == 500
        assert len(result.details) == 1002


class TestInvalidInputs:

    def test_negative_xp_does_not_level_down(self):
        character = Character(name="Hero", level=3, experience=500)
        result = gain_xp(character, -400)

        assert result.new_level == 3
        assert not result.leveled_up

    def test_unknown_stat_point(self):
        with pytest.raises(ValueError):
            apply_stat_point(Character(name="Hero", stat_points=1), "mana")

    def test_inventory_with_empty_ids(self):
        catalog = ItemCatalog({})
        hero = Character(name="Hero", inventory=("", ""))

        assert apply_equipment(hero, catalog) is hero
