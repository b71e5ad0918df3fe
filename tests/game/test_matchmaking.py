"""
Unit tests for opponent selection.
"""

from pixelarena.core.data import Character, MatchType
from pixelarena.core.random_source import ScriptedRandom
from pixelarena.game.matchmaking import calculate_total_power, find_opponent, get_match_difficulty_label


def candidate(name: str, level: int = 1, strength: int = 10) -> Character:
    return Character(name=name, level=level, strength=strength, character_id=name.lower())


class TestFindOpponent:

    def test_no_candidates(self, hero):
        assert find_opponent(hero, []) is None

    def test_only_exact_level(self, hero):
        assert find_opponent(hero, [candidate("Elder", level=2)]) is None

    def test_player_is_excluded(self, hero):
        clone = hero.evolve(name="Hero again")

        assert find_opponent(hero, [hero, clone]) is None

    def test_picks_among_three_closest(self, hero):
        pool = [
            candidate("Far", strength=30),
            candidate("Close", strength=11),
            candidate("Exact", strength=10),
            candidate("Near", strength=13),
            candidate("Farther", strength=40),
        ]

        picked = {
            find_opponent(hero, pool, ScriptedRandom([roll])).opponent.name
            for roll in (0.0, 0.4, 0.9)
        }

        assert picked == {"Exact", "Close", "Near"}

    def test_balanced_when_difference_is_small(self, hero):
        result = find_opponent(hero, [candidate("Near", strength=13)], ScriptedRandom([0.0]))

        assert result.match_type == MatchType.BALANCED
        assert result.power_diff == 3

    def test_similar_when_difference_is_large(self, hero):
        result = find_opponent(hero, [candidate("Strong", strength=14)], ScriptedRandom([0.0]))

        assert result.match_type == MatchType.SIMILAR
        assert result.power_diff == 4

    def test_focus_does_not_count(self, hero):
        """Two characters that differ only in focus are a balanced match."""
        rival = Character(name="Rival", focus=15, character_id="rival")
        result = find_opponent(hero, [rival], ScriptedRandom([0.0]))

        assert result.power_diff == 0
        assert result.match_type == MatchType.BALANCED

    def test_focus_does_not_change_ranking(self, hero):
        pool = [
            Character(name="Focused", focus=20, character_id="focused"),
            candidate("Strong", strength=12),
        ]

        result = find_opponent(hero, pool, ScriptedRandom([0.0]))

        assert result.opponent.name == "Focused"


class TestTotalPower:

    def test_sums_five_stats(self):
        character = Character(name="Hero", strength=14, vitality=12, dexterity=8, luck=7, intelligence=9, focus=14)

        assert calculate_total_power(character) == 50

    def test_baseline(self, hero):
        assert calculate_total_power(hero) == 50


class TestMatchDifficultyLabel:

    def test_labels(self):
        assert get_match_difficulty_label(MatchType.BALANCED) == "BALANCED MATCH"
        assert get_match_difficulty_label(MatchType.SIMILAR) == "FAIR MATCH"
