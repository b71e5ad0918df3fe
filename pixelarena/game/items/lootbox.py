"""Lootbox rolls.

A roll first picks a rarity with level-dependent weights, then picks an item
uniformly inside that rarity. Only items the character is high enough level
for, and does not already own, are eligible.
"""

from typing import Iterable, Optional

from ...core.data import ITEM_RARITY_ORDER, Item, ItemRarity
from ...core.random_source import RandomSource, default_random

LOOTBOX_RARITY_WEIGHTS: dict[ItemRarity, float] = {
    ItemRarity.COMMON: 0.8,
    ItemRarity.UNCOMMON: 0.2,
    ItemRarity.RARE: 0.0,
    ItemRarity.EPIC: 0.0,
}

# (minimum level, weights) checked from the highest tier down
_LEVEL_TIERS: tuple[tuple[int, dict[ItemRarity, float]], ...] = (
    (10, {ItemRarity.COMMON: 0.45, ItemRarity.UNCOMMON: 0.3, ItemRarity.RARE: 0.18, ItemRarity.EPIC: 0.07}),
    (7, {ItemRarity.COMMON: 0.5, ItemRarity.UNCOMMON: 0.3, ItemRarity.RARE: 0.15, ItemRarity.EPIC: 0.05}),
    (4, {ItemRarity.COMMON: 0.65, ItemRarity.UNCOMMON: 0.25, ItemRarity.RARE: 0.1, ItemRarity.EPIC: 0.0}),
)


def get_lootbox_rarity_weights(level: int) -> dict[ItemRarity, float]:
    """Rarity weights for a character level."""
    for min_level, weights in _LEVEL_TIERS:
        if level >= min_level:
            return dict(weights)
    return dict(LOOTBOX_RARITY_WEIGHTS)


def get_eligible_lootbox_items(
    items: Iterable[Item], level: int, exclude_ids: Iterable[str] = ()
) -> list[Item]:
    """Items unlocked at ``level`` that are not excluded."""
    excluded = set(exclude_ids)
    return [item for item in items if item.required_level <= level and item.item_id not in excluded]


def roll_lootbox(
    items: Iterable[Item],
    rng: Optional[RandomSource] = None,
    exclude_ids: Iterable[str] = (),
    level: int = 1,
) -> Optional[Item]:
    """Roll one item, or None when nothing is eligible.

    Two draws are made: one for the rarity, one for the item within it.
    Rarities without eligible items are skipped; when every remaining rarity
    has zero weight, the available rarities are weighted equally.
    """
    rng = rng or default_random()
    eligible = get_eligible_lootbox_items(items, level, exclude_ids)
    if not eligible:
        return None

    by_rarity: dict[ItemRarity, list[Item]] = {rarity: [] for rarity in ITEM_RARITY_ORDER}
    for item in eligible:
        by_rarity[item.rarity].append(item)

    available = [rarity for rarity in ITEM_RARITY_ORDER if by_rarity[rarity]]
    weights = get_lootbox_rarity_weights(level)
    weighted = [rarity for rarity in available if weights.get(rarity, 0) > 0]

    if weighted:
        selection = weighted
        selection_weights = [weights[rarity] for rarity in weighted]
    else:
        selection = available
        selection_weights = [1.0] * len(available)

    roll = rng() * sum(selection_weights)
    chosen = selection[0]
    cursor = 0.0
    for rarity, weight in zip(selection, selection_weights):
        cursor += weight
        if roll <= cursor:
            chosen = rarity
            break

    pool = by_rarity[chosen]
    return pool[int(rng() * len(pool))]
