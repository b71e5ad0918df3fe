"""
Unit tests for fantasy name generation.
"""

import re

from pixelarena.core.random_source import mulberry32
from pixelarena.game.characters import MAX_NAME_LENGTH, generate_character_name

NOW = lambda: 1700000000.0  # noqa: E731


class TestGenerateCharacterName:

    def test_names_are_single_alphabetic_words(self):
        rng = mulberry32(5)
        for _ in range(100):
            name = generate_character_name(rng)
            assert re.fullmatch(r"[A-Za-z]+", name)
            assert len(name) <= MAX_NAME_LENGTH

    def test_names_are_varied(self):
        rng = mulberry32(11)
        names = {generate_character_name(rng) for _ in range(50)}

        assert len(names) > 10

    def test_registry_keeps_names_unique(self):
        """Even a constant random source never repeats a name."""
        registry = set()
        names = [generate_character_name(lambda: 0.1, registry, NOW) for _ in range(50)]

        assert len(set(names)) == 50
        assert registry == set(names)
        assert all(len(name) <= MAX_NAME_LENGTH for name in names)

    def test_suffix_only_on_collision(self):
        registry = set()
        first = generate_character_name(lambda: 0.1, registry, NOW)
        second = generate_character_name(lambda: 0.1, registry, NOW)

        trimmed = first[:8]
        assert first != second
        assert second.startswith(trimmed)
        assert len(trimmed) + 2 <= len(second) <= len(trimmed) + 3
        assert second.isalpha()

    def test_without_registry_nothing_is_remembered(self):
        assert generate_character_name(lambda: 0.1) == generate_character_name(lambda: 0.1)
