"""Game systems built on the core.

- combat/: stat transform, battle loop and combat log
- items/: catalog, equipment and lootboxes
- progression/: XP curve, level-ups and stat points
- characters/: character creation and names
- managers/: fight orchestration and logging
- matchmaking.py: same-level opponent selection
- balance.py: seeded fight batches for fairness audits
"""
