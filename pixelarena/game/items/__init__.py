"""Items: catalog, equipment resolution and lootbox rolls.

- item_catalog.py: YAML-backed lookup of item ids
- equipment.py: inventory bonuses applied to a character before a fight
- lootbox.py: level-weighted rarity rolls
"""

from .item_catalog import ITEM_CATALOG, ItemCatalog, load_item_catalog
from .equipment import apply_equipment, get_equipment_bonuses, get_inventory_items, get_item_by_id
from .lootbox import (
    LOOTBOX_RARITY_WEIGHTS,
    get_eligible_lootbox_items,
    get_lootbox_rarity_weights,
    roll_lootbox,
)

__all__ = [
    "ITEM_CATALOG",
    "ItemCatalog",
    "load_item_catalog",
    "apply_equipment",
    "get_equipment_bonuses",
    "get_inventory_items",
    "get_item_by_id",
    "LOOTBOX_RARITY_WEIGHTS",
    "get_eligible_lootbox_items",
    "get_lootbox_rarity_weights",
    "roll_lootbox",
]
