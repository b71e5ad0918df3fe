"""
Unit tests for the LogManager.

Tests buffering, filtering and the event subscriptions that feed the log.
"""

import pytest

from pixelarena.core.events import CharacterLeveledUp, DebugMessage, ItemLooted, LogMessage, LogSaveRequested
from pixelarena.game.managers import LogCategory, LogLevel, LogManager


@pytest.fixture
def log_manager(event_manager, tmp_path):
    return LogManager(event_manager, log_dir=str(tmp_path / "logs"))


def texts(entries):
    return [entry.text for entry in entries]


class TestBuffering:

    def test_messages_are_buffered(self, log_manager):
        log_manager.system("booted")
        log_manager.combat("Hero vs Villain")

        assert texts(log_manager.get_messages()) == ["booted", "Hero vs Villain"]

    def test_buffer_is_bounded(self, event_manager):
        manager = LogManager(event_manager, max_messages=3)
        for index in range(5):
            manager.system(str(index))

        assert texts(manager.get_messages()) == ["2", "3", "4"]

    def test_count_returns_most_recent(self, log_manager):
        for index in range(4):
            log_manager.system(str(index))

        assert texts(log_manager.get_messages(count=2)) == ["2", "3"]

    def test_format(self, log_manager):
        log_manager.progression("Hero reached level 2")

        assert log_manager.get_messages()[0].format() == "[PRG] Hero reached level 2"

    def test_clear(self, log_manager):
        log_manager.system("x")
        log_manager.clear()

        assert log_manager.get_messages() == []


class TestFiltering:

    def test_debug_hidden_by_default(self, log_manager):
        log_manager.debug("noise")
        log_manager.warning("careful")

        assert texts(log_manager.get_messages()) == ["careful"]

    def test_toggle_debug(self, log_manager):
        log_manager.debug("noise")

        log_manager.toggle_debug()
        assert log_manager.is_debug_enabled()
        assert texts(log_manager.get_messages()) == ["noise"]

        log_manager.toggle_debug()
        assert not log_manager.is_debug_enabled()
        assert log_manager.get_messages() == []

    def test_disabled_category(self, log_manager):
        log_manager.loot("sword")
        log_manager.disable_category(LogCategory.LOOT)

        assert log_manager.get_messages() == []

    def test_explicit_categories(self, log_manager):
        log_manager.loot("sword")
        log_manager.progression("Hero gained 100 XP")

        assert texts(log_manager.get_messages(categories={LogCategory.PROGRESSION})) == ["Hero gained 100 XP"]

    def test_error_level_hides_info(self, log_manager):
        log_manager.system("info")
        log_manager.error("broken")
        log_manager.set_log_level(LogLevel.ERROR)

        assert texts(log_manager.get_messages()) == ["broken"]


class TestEventSubscriptions:

    def test_log_message_event(self, event_manager, log_manager):
        event_manager.publish(LogMessage(
            round_number=3, message="Hero won", category="combat", level=LogLevel.INFO, source="test"
        ))
        event_manager.process_events()

        entry = log_manager.get_messages()[0]
        assert entry.text == "Hero won"
        assert entry.category == LogCategory.COMBAT

    def test_unknown_category_falls_back_to_system(self, event_manager, log_manager):
        event_manager.publish(LogMessage(
            round_number=0, message="??", category="weather", level=LogLevel.INFO, source="test"
        ))
        event_manager.process_events()

        assert log_manager.get_messages()[0].category == LogCategory.SYSTEM

    def test_debug_message_event(self, event_manager, log_manager):
        event_manager.publish(DebugMessage(round_number=0, message="draw 0.42", source="Resolver"))
        event_manager.process_events()
        log_manager.toggle_debug()

        assert texts(log_manager.get_messages()) == ["[Resolver] draw 0.42"]

    def test_level_up_and_loot_events(self, event_manager, log_manager):
        event_manager.publish(CharacterLeveledUp(
            round_number=0, character_name="Hero", old_level=1, new_level=3, stat_points_granted=2
        ))
        event_manager.publish(ItemLooted(round_number=0, character_name="Hero", item_id="mana_ring", rarity="common"))
        event_manager.process_events()

        assert texts(log_manager.get_messages()) == [
            "Hero reached level 3 (+2 stat points)",
            "Hero looted mana_ring (common)",
        ]


class TestSaveLog:

    def test_save_writes_every_message(self, log_manager):
        log_manager.combat("Hero vs Villain")
        log_manager.debug("hidden but saved")

        path = log_manager.save_log_to_file()

        content = open(path, encoding="utf-8").read()
        assert "[COMBAT] Hero vs Villain" in content
        assert "[DEBUG] hidden but saved" in content
        assert texts(log_manager.get_messages())[-1] == f"Engine log saved to {path}"

    def test_save_failure_is_logged(self, event_manager, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("", encoding="utf-8")
        manager = LogManager(event_manager, log_dir=str(blocker))

        assert manager.save_log_to_file() is None
        assert manager.get_messages()[-1].category == LogCategory.ERROR

    def test_failed_save_request_logs_one_error(self, event_manager, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("", encoding="utf-8")
        manager = LogManager(event_manager, log_dir=str(blocker))

        event_manager.publish(LogSaveRequested(round_number=0))
        event_manager.process_events()

        errors = manager.get_messages(categories={LogCategory.ERROR})
        assert len(errors) == 1
        assert errors[0].text.startswith("Failed to save log file:")

    def test_save_requested_event(self, event_manager, log_manager, tmp_path):
        event_manager.publish(LogSaveRequested(round_number=0))
        event_manager.process_events()

        assert len(list((tmp_path / "logs").iterdir())) == 1
