"""
Basic test fixtures for the pixel arena test suite.

Provides characters, catalogs and an event manager shared by the unit and
integration tests.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from pixelarena.core.data import Character, Item, ItemRarity, ItemSlot
from pixelarena.core.events import EventManager
from pixelarena.game.items import ItemCatalog


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager()


@pytest.fixture
def hero():
    """Level 1 character with every stat at 10 and full HP."""
    return Character(name="Hero", character_id="hero")


@pytest.fixture
def villain():
    """Mirror of the hero under another name."""
    return Character(name="Villain", character_id="villain")


@pytest.fixture
def empty_catalog():
    """Catalog without any item, so inventories contribute nothing."""
    return ItemCatalog({})


@pytest.fixture
def small_catalog():
    """A handful of items covering every slot and the hp bonus."""
    return ItemCatalog.from_items([
        Item("sword", "Sword", ItemSlot.WEAPON, ItemRarity.COMMON, 1, {"strength": 2}),
        Item("vest", "Vest", ItemSlot.ARMOR, ItemRarity.COMMON, 1, {"vitality": 2, "hp": 10}),
        Item("ring", "Ring", ItemSlot.ACCESSORY, ItemRarity.UNCOMMON, 2, {"intelligence": 3}),
        Item("crown", "Crown", ItemSlot.ACCESSORY, ItemRarity.EPIC, 8, {"luck": 4, "focus": 2}),
    ])
