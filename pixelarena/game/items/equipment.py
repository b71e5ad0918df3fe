"""Equipment resolution.

Turns a character's inventory into an *effective* character: item bonuses are
summed and added to the raw stats before the stat transform runs. Bonuses are
additive, so inventory order never matters. Unknown ids contribute nothing; an
unresolvable item must never block a fight from resolving.
"""

from typing import Optional

from ...core.data import Character, Item, STAT_NAMES
from ..progression.stat_allocation import hp_for_vitality
from .item_catalog import ITEM_CATALOG, ItemCatalog


def _resolve_catalog(catalog: Optional[ItemCatalog]) -> ItemCatalog:
    # An empty catalog is falsy, so test against None explicitly
    return ITEM_CATALOG if catalog is None else catalog


def get_item_by_id(item_id: Optional[str], catalog: Optional[ItemCatalog] = None) -> Optional[Item]:
    """Look up an item, None for missing or unknown ids."""
    return _resolve_catalog(catalog).get(item_id)


def get_inventory_items(character: Character, catalog: Optional[ItemCatalog] = None) -> list[Item]:
    """Resolve a character's inventory, skipping unknown ids."""
    catalog = _resolve_catalog(catalog)
    items = []
    for item_id in character.inventory:
        item = catalog.get(item_id)
        if item is not None:
            items.append(item)
    return items


def get_equipment_bonuses(character: Character, catalog: Optional[ItemCatalog] = None) -> dict[str, int]:
    """Sum the stat and HP bonuses of every resolvable inventory item."""
    totals: dict[str, int] = {}
    for item in get_inventory_items(character, catalog):
        for key, value in item.stats.items():
            totals[key] = totals.get(key, 0) + value
    return totals


def apply_equipment(character: Character, catalog: Optional[ItemCatalog] = None) -> Character:
    """Return the effective character with equipment bonuses applied.

    Raw stats gain their summed bonuses. The ``hp`` bonus raises both max HP and
    current HP, and current HP is clamped to the new maximum. A character
    without a stored max HP falls back on the vitality formula.
    """
    bonus = get_equipment_bonuses(character, catalog)
    if not bonus:
        return character

    base_max_hp = character.max_hp or hp_for_vitality(character.vitality)
    bonus_hp = bonus.get("hp", 0)
    max_hp = base_max_hp + bonus_hp
    hp = min(character.hp + bonus_hp, max_hp)

    stats = {stat: getattr(character, stat) + bonus.get(stat, 0) for stat in STAT_NAMES}
    return character.evolve(hp=hp, max_hp=max_hp, **stats)
