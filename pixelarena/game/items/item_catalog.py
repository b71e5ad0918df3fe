"""Item catalog loaded from YAML.

The catalog is static game data: item id -> name, slot, rarity, level
requirement and stat bonuses. Templates are loaded from
``assets/data/items/item_catalog.yaml`` and converted to ``Item`` records.
"""

from typing import Iterator, Mapping, Optional

from ...core.config.loader import data_path, load_yaml_section, require
from ...core.data import Item, ItemRarity, ItemSlot

DEFAULT_ITEM_CATALOG_PATH = data_path("items", "item_catalog.yaml")

BONUS_KEYS = frozenset(
    ("strength", "vitality", "dexterity", "luck", "intelligence", "focus", "hp")
)


class ItemCatalog:
    """Read-only lookup of items by id."""

    def __init__(self, items: Mapping[str, Item]):
        self._items: dict[str, Item] = dict(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get(self, item_id: Optional[str]) -> Optional[Item]:
        """Look up an item, returning None for empty or unknown ids."""
        if not item_id:
            return None
        return self._items.get(item_id)

    def require(self, item_id: str) -> Item:
        """Look up an item that must exist.

        Raises:
            KeyError: If the id is not in the catalog
        """
        if item_id not in self._items:
            raise KeyError(f"No item found with id: {item_id}")
        return self._items[item_id]

    def items(self) -> list[Item]:
        """All items in catalog order."""
        return list(self._items.values())

    @classmethod
    def from_items(cls, items: list[Item]) -> "ItemCatalog":
        return cls({item.item_id: item for item in items})


def load_item_catalog(path: Optional[str] = None) -> ItemCatalog:
    """Load the item catalog from YAML.

    Args:
        path: YAML file to read; the bundled catalog when omitted

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If an item misses a required field
        ValueError: If a slot, rarity or stat key is not recognised
    """
    path = path or DEFAULT_ITEM_CATALOG_PATH
    section = load_yaml_section(path, "items")

    items = {}
    for item_id, entry in section.items():
        try:
            slot = ItemSlot(require(entry, "slot", path, item_id))
            rarity = ItemRarity(require(entry, "rarity", path, item_id))
        except ValueError as e:
            raise ValueError(f"Invalid item '{item_id}' in {path}: {e}")

        stats = dict(entry.get("stats") or {})
        unknown = set(stats) - BONUS_KEYS
        if unknown:
            raise ValueError(f"Unknown stat bonus for '{item_id}' in {path}: {sorted(unknown)}")

        items[item_id] = Item(
            item_id=item_id,
            name=entry.get("name", item_id),
            slot=slot,
            rarity=rarity,
            required_level=int(entry.get("required_level", 1)),
            stats={key: int(value) for key, value in stats.items()},
        )

    return ItemCatalog(items)


ITEM_CATALOG: ItemCatalog = load_item_catalog()
