"""Character creation.

- character_factory.py: initial stat spread and stored-record hydration
- name_generator.py: syllable-based fantasy names with collision suffixes
"""

from .character_factory import DEFAULT_NAME, generate_initial_stats, generate_seed, hydrate_legacy_record
from .name_generator import MAX_NAME_LENGTH, generate_character_name

__all__ = [
    "DEFAULT_NAME",
    "generate_initial_stats",
    "generate_seed",
    "hydrate_legacy_record",
    "MAX_NAME_LENGTH",
    "generate_character_name",
]
