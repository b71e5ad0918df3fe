"""
Fight orchestration.

FightManager runs one arena fight end to end: combat simulation, XP award,
level-ups, stat points and the player's fight record. Players and bots go
through the same path; bots additionally spend their new stat points
automatically.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from ...core.config import COMBAT_BALANCE, GAME_RULES, CombatBalance, GameRules
from ...core.data import Character, CombatResult, CombatWinner, Item, LevelUpResult
from ...core.events import CharacterLeveledUp, ItemLooted, LogMessage, XpGained
from ...core.random_source import RandomSource, default_random
from ..combat.combat_resolver import CombatResolver
from ..items.item_catalog import ITEM_CATALOG
from ..items.lootbox import roll_lootbox
from ..progression.experience import calculate_fight_xp, gain_xp
from ..progression.stat_allocation import auto_allocate_stat_points, grant_stat_points, points_for_levels
from .log_manager import LogLevel

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ..items.item_catalog import ItemCatalog


@dataclass(frozen=True)
class FightOutcome:
    """Everything a fight changed, for the caller to persist."""
    combat: CombatResult
    won: bool
    xp_gained: int
    level_up: LevelUpResult
    stat_points_granted: int
    updated_character: Character
    opponent_name: str


class FightManager:
    """Resolves arena fights for a player or a bot."""

    def __init__(
        self,
        event_manager: Optional["EventManager"] = None,
        balance: Optional[CombatBalance] = None,
        catalog: Optional["ItemCatalog"] = None,
        rules: Optional[GameRules] = None,
        auto_allocate: bool = False,
    ):
        """
        Args:
            event_manager: Optional bus for combat and progression events
            balance: Combat tuning; bundled balance when omitted
            catalog: Item catalog for equipment and lootboxes; bundled catalog when omitted
            rules: Game rules; bundled rules when omitted
            auto_allocate: Spend stat points from level-ups immediately (bots)
        """
        self.event_manager = event_manager
        self.rules = rules or GAME_RULES
        self.auto_allocate = auto_allocate
        self.catalog = ITEM_CATALOG if catalog is None else catalog
        self.resolver = CombatResolver(
            balance=balance or COMBAT_BALANCE,
            catalog=catalog,
            event_manager=event_manager,
        )

    def resolve_fight(
        self,
        player: Character,
        opponent: Character,
        rng: Optional[RandomSource] = None,
    ) -> FightOutcome:
        """Fight ``opponent`` as the attacker and apply the consequences to ``player``.

        A draw counts as a loss. The opponent's snapshot is never modified.

        Raises:
            ValueError: If the player has no fights left today
        """
        if player.fights_left <= 0:
            raise ValueError(f"{player.name} has no fights left today")

        rng = rng or default_random()

        combat = self.resolver.simulate(player, opponent, rng)
        won = combat.winner == CombatWinner.ATTACKER

        xp_gained = calculate_fight_xp(player.level, won, rng, self.rules)
        level_up = gain_xp(player, xp_gained, self.rules)

        points = points_for_levels(level_up.levels_gained, self.rules)
        if points and self.auto_allocate:
            updated = auto_allocate_stat_points(level_up.updated_character, points, rng)
        else:
            updated = grant_stat_points(level_up.updated_character, points)

        updated = updated.evolve(
            fights_left=max(0, player.fights_left - 1),
            wins=player.wins + (1 if won else 0),
            losses=player.losses + (0 if won else 1),
        )

        self._publish_progression(player, updated, xp_gained, level_up, points, combat.rounds)

        return FightOutcome(
            combat=combat,
            won=won,
            xp_gained=xp_gained,
            level_up=level_up,
            stat_points_granted=points,
            updated_character=updated,
            opponent_name=opponent.name,
        )

    def open_lootbox(
        self, character: Character, rng: Optional[RandomSource] = None
    ) -> tuple[Character, Optional[Item]]:
        """Roll a lootbox for ``character`` and add the item to its inventory.

        Items already owned are never rolled again. When nothing is eligible
        the character is returned unchanged with None.
        """
        item = roll_lootbox(self.catalog, rng, exclude_ids=character.inventory, level=character.level)
        if item is None:
            return character, None

        updated = character.evolve(inventory=character.inventory + (item.item_id,))
        if self.event_manager is not None:
            self.event_manager.publish(
                ItemLooted(
                    round_number=0,
                    character_name=character.name,
                    item_id=item.item_id,
                    rarity=item.rarity.value,
                ),
                source="FightManager"
            )
        return updated, item

    def _publish_progression(
        self,
        player: Character,
        updated: Character,
        xp_gained: int,
        level_up: LevelUpResult,
        points: int,
        round_number: int,
    ) -> None:
        if self.event_manager is None:
            return

        self.event_manager.publish(
            XpGained(
                round_number=round_number,
                character_name=player.name,
                xp_gained=xp_gained,
                total_experience=updated.experience,
            ),
            source="FightManager"
        )
        self.event_manager.publish(
            LogMessage(
                round_number=round_number,
                message=f"{player.name} gained {xp_gained} XP",
                category="PROGRESSION",
                level=LogLevel.INFO,
                source="FightManager"
            ),
            source="FightManager"
        )

        if level_up.leveled_up:
            self.event_manager.publish(
                CharacterLeveledUp(
                    round_number=round_number,
                    character_name=player.name,
                    old_level=player.level,
                    new_level=level_up.new_level,
                    stat_points_granted=points,
                ),
                source="FightManager"
            )
