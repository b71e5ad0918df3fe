"""
Unit tests for the FightManager.

Scripts start with the combat draws, followed by the XP variance draw and,
for bots, the stat allocation draws.
"""

import pytest

from pixelarena.core.data import Character, CombatWinner
from pixelarena.core.events import EventType
from pixelarena.core.random_source import ScriptedRandom
from pixelarena.game.managers import FightManager

PLAIN_HIT = [0.0, 0.99, 0.99, 0.5, 0.99]
WIN = [0.0] + PLAIN_HIT
LOSS = [0.99] + PLAIN_HIT
NEUTRAL_XP = [0.5]


@pytest.fixture
def weak_villain():
    return Character(name="Villain", hp=11, character_id="villain")


class TestResolveFight:

    def test_win_levels_up_and_grants_points(self, hero, weak_villain, empty_catalog):
        manager = FightManager(catalog=empty_catalog)
        outcome = manager.resolve_fight(hero, weak_villain, ScriptedRandom(WIN + NEUTRAL_XP))

        assert outcome.won
        assert outcome.combat.winner == CombatWinner.ATTACKER
        assert outcome.xp_gained == 100
        assert outcome.level_up.new_level == 2
        assert outcome.stat_points_granted == 1

        updated = outcome.updated_character
        assert updated.level == 2
        assert updated.experience == 100
        assert updated.stat_points == 1
        assert updated.wins == 1
        assert updated.losses == 0
        assert updated.fights_left == 4
        assert outcome.opponent_name == "Villain"

    def test_loss(self, empty_catalog):
        hero = Character(name="Hero", hp=11)
        manager = FightManager(catalog=empty_catalog)
        outcome = manager.resolve_fight(hero, Character(name="Villain"), ScriptedRandom(LOSS + NEUTRAL_XP))

        assert not outcome.won
        assert outcome.xp_gained == 25
        assert not outcome.level_up.leveled_up
        assert outcome.updated_character.losses == 1
        assert outcome.updated_character.stat_points == 0

    def test_bots_spend_points_immediately(self, hero, weak_villain, empty_catalog):
        manager = FightManager(catalog=empty_catalog, auto_allocate=True)
        outcome = manager.resolve_fight(hero, weak_villain, ScriptedRandom(WIN + NEUTRAL_XP + [0.99]))

        updated = outcome.updated_character
        assert updated.stat_points == 0
        assert updated.focus == 11

    def test_no_fights_left(self, weak_villain):
        tired = Character(name="Hero", fights_left=0)

        with pytest.raises(ValueError, match="no fights left"):
            FightManager().resolve_fight(tired, weak_villain, ScriptedRandom([0.5]))

    def test_inputs_are_not_modified(self, hero, weak_villain, empty_catalog):
        FightManager(catalog=empty_catalog).resolve_fight(hero, weak_villain, ScriptedRandom(WIN + NEUTRAL_XP))

        assert hero.experience == 0
        assert weak_villain.hp == 11


class TestFightEvents:

    def test_progression_events(self, event_manager, hero, weak_villain, empty_catalog):
        received = []
        event_manager.subscribe_all(received.append)
        manager = FightManager(event_manager=event_manager, catalog=empty_catalog)

        manager.resolve_fight(hero, weak_villain, ScriptedRandom(WIN + NEUTRAL_XP))
        event_manager.process_events()

        types = [event.event_type for event in received]
        assert types[:3] == [EventType.COMBAT_STARTED, EventType.ATTACK_RESOLVED, EventType.COMBAT_ENDED]
        assert EventType.XP_GAINED in types
        assert types[-1] == EventType.CHARACTER_LEVELED_UP

        level_up = received[-1]
        assert level_up.old_level == 1
        assert level_up.new_level == 2
        assert level_up.stat_points_granted == 1

    def test_no_level_up_event_without_level_up(self, event_manager, empty_catalog):
        received = []
        event_manager.subscribe(EventType.CHARACTER_LEVELED_UP, received.append)
        manager = FightManager(event_manager=event_manager, catalog=empty_catalog)

        manager.resolve_fight(
            Character(name="Hero", hp=11), Character(name="Villain"), ScriptedRandom(LOSS + NEUTRAL_XP)
        )
        event_manager.process_events()

        assert received == []


class TestOpenLootbox:

    def test_adds_rolled_item(self, hero, small_catalog):
        manager = FightManager(catalog=small_catalog)
        updated, item = manager.open_lootbox(hero, ScriptedRandom([0.3, 0.0]))

        assert item.item_id == "sword"
        assert updated.inventory == ("sword",)
        assert hero.inventory == ()

    def test_owned_items_are_not_rolled_again(self, small_catalog):
        owner = Character(name="Hero", inventory=("sword",))
        updated, item = FightManager(catalog=small_catalog).open_lootbox(owner, ScriptedRandom([0.3, 0.0]))

        assert item.item_id == "vest"
        assert updated.inventory == ("sword", "vest")

    def test_nothing_eligible(self, small_catalog):
        owner = Character(name="Hero", inventory=("sword", "vest"))
        updated, item = FightManager(catalog=small_catalog).open_lootbox(owner, ScriptedRandom([0.5]))

        assert item is None
        assert updated is owner

    def test_publishes_item_looted(self, event_manager, hero, small_catalog):
        received = []
        event_manager.subscribe(EventType.ITEM_LOOTED, received.append)
        manager = FightManager(event_manager=event_manager, catalog=small_catalog)

        manager.open_lootbox(hero, ScriptedRandom([0.3, 0.99]))
        event_manager.process_events()

        assert len(received) == 1
        assert received[0].item_id == "vest"
        assert received[0].rarity == "common"
