"""
Combat resolution: the round-based battle loop.

This module turns two character snapshots into a play-by-play log, an HP
timeline and an outcome. It is deterministic for a given random source: every
stochastic decision draws from the single injected ``rng`` in a fixed order,
so a scripted sequence reproduces a fight exactly.

Draw order per attack: hit, crit, magic, variance, focus surge. A miss stops
after the hit draw. Each round starts with one initiative draw.
"""

import math
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from ...core.config import COMBAT_BALANCE, CombatBalance
from ...core.data import Character, CombatResult, CombatStats, CombatWinner
from ...core.events import AttackResolved, CombatEnded, CombatStarted, LogMessage
from ...core.random_source import RandomSource, default_random, roll_percent
from ..items.equipment import apply_equipment
from .combat_log import closing_line, format_attack_line, opening_line
from .stat_transform import compute_combat_stats

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ..items.item_catalog import ItemCatalog


@dataclass
class Fighter:
    """Mutable per-fight state of one side."""
    name: str
    stats: CombatStats
    hp: int
    max_hp: int

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def snapshot_hp(self) -> int:
        """HP as shown in the timeline: an integer within [0, max_hp]."""
        return int(max(0, min(self.max_hp, self.hp)))


@dataclass(frozen=True)
class AttackOutcome:
    """What one attack did."""
    hit: bool
    damage: int = 0
    critical: bool = False
    magic_surge: bool = False
    focus_surge: bool = False


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


class CombatResolver:
    """Resolves fights between two characters."""

    def __init__(
        self,
        balance: Optional[CombatBalance] = None,
        catalog: Optional["ItemCatalog"] = None,
        event_manager: Optional["EventManager"] = None,
    ):
        """
        Args:
            balance: Tuning constants; the bundled balance when omitted
            catalog: Item catalog used to apply equipment; the bundled one when omitted
            event_manager: Optional bus receiving combat events. Events are only
                queued; nothing happens until the owner processes them.
        """
        self.balance = balance or COMBAT_BALANCE
        self.catalog = catalog
        self.event_manager = event_manager

    # ------------------------------------------------------------------ #
    # Formulas
    # ------------------------------------------------------------------ #
    def initiative_chance(self, attacker: CombatStats, defender: CombatStats) -> float:
        """Probability that the attacker swings first in a round."""
        rules = self.balance.initiative
        chance = rules.base_chance + (attacker.speed - defender.speed) * rules.speed_weight
        return max(rules.min_chance, min(rules.max_chance, chance))

    def is_comeback(self, fighter: Fighter) -> bool:
        """True when the fighter is below the comeback HP threshold."""
        return fighter.hp < fighter.max_hp * self.balance.comeback.hp_threshold_ratio

    def hit_chance(self, actor: CombatStats, target: CombatStats, comeback: bool = False) -> float:
        """Hit chance in percent, clamped to the configured range."""
        rules = self.balance.hit_chance
        chance = (
            rules.base
            + (actor.speed - target.speed) * rules.speed_weight
            + (actor.focus - target.focus) * rules.focus_weight
        )
        if comeback:
            chance += self.balance.comeback.hit_bonus
        return max(rules.min, min(rules.max, chance))

    def magic_chance(self, actor: CombatStats) -> float:
        """Magic surge chance in percent."""
        rules = self.balance.magic
        return min(
            rules.max_chance,
            rules.base_chance + actor.magic_power * rules.power_weight + actor.focus * rules.focus_weight,
        )

    def variance_range(self, actor: CombatStats) -> float:
        """Width of the damage variance window; narrower for focused fighters."""
        rules = self.balance.focus_variance
        stability = min(rules.max_stability, actor.focus * rules.stability_weight)
        return rules.base_range - stability

    def focus_surge_chance(self, actor: CombatStats) -> float:
        """Focus surge chance in percent."""
        rules = self.balance.focus_surge
        return min(rules.max_chance, actor.focus * rules.chance_weight)

    def base_damage(self, actor: CombatStats, target: CombatStats, critical: bool = False) -> float:
        """Offense against defense, floored at the minimum damage."""
        rules = self.balance.damage
        crit_multiplier = rules.crit_multiplier if critical else 1.0
        raw = actor.offense * rules.offense_weight * crit_multiplier - target.defense * rules.defense_weight
        return max(rules.min, raw)

    # ------------------------------------------------------------------ #
    # Resolution
    # ------------------------------------------------------------------ #
    def resolve_attack(self, actor: Fighter, target: Fighter, rng: RandomSource) -> AttackOutcome:
        """Resolve one attack and subtract its damage from the target."""
        comeback = self.is_comeback(actor)

        if rng() * 100 >= self.hit_chance(actor.stats, target.stats, comeback):
            return AttackOutcome(hit=False)

        critical = roll_percent(rng, actor.stats.crit_chance)
        magic_surge = roll_percent(rng, self.magic_chance(actor.stats))

        spread = self.variance_range(actor.stats)
        variance_factor = (1 - spread / 2) + rng() * spread

        focus_surge = roll_percent(rng, self.focus_surge_chance(actor.stats))

        magic_bonus = actor.stats.magic_power * self.balance.magic.damage_weight if magic_surge else 0.0
        comeback_multiplier = self.balance.comeback.damage_multiplier if comeback else 1.0
        surge_multiplier = self.balance.focus_surge.damage_multiplier if focus_surge else 1.0

        damage = round_half_up(
            (self.base_damage(actor.stats, target.stats, critical) + magic_bonus)
            * variance_factor
            * comeback_multiplier
            * surge_multiplier
        )
        target.hp -= damage

        return AttackOutcome(
            hit=True,
            damage=damage,
            critical=critical,
            magic_surge=magic_surge,
            focus_surge=focus_surge,
        )

    def simulate(
        self, attacker: Character, defender: Character, rng: Optional[RandomSource] = None
    ) -> CombatResult:
        """Simulate a full fight.

        Equipment is applied to both sides, then rounds are played until one
        side drops to 0 HP or the round limit is reached.

        Args:
            attacker: The character starting the fight
            defender: The character being challenged
            rng: Uniform [0, 1) source; ``random.random`` when omitted

        Returns:
            CombatResult whose details and timeline have the same length
        """
        rng = rng or default_random()

        red = self._make_fighter(attacker)
        blue = self._make_fighter(defender)

        result = CombatResult(winner=CombatWinner.DRAW, rounds=0)

        def record(detail: str) -> None:
            result.record(detail, red.snapshot_hp(), blue.snapshot_hp())

        record(opening_line(red.name, blue.name))
        self._publish(CombatStarted(
            round_number=0,
            attacker_name=red.name,
            defender_name=blue.name,
            attacker_hp=red.snapshot_hp(),
            defender_hp=blue.snapshot_hp(),
        ))

        while red.is_alive and blue.is_alive and result.rounds < self.balance.round_limit:
            result.rounds += 1

            if rng() < self.initiative_chance(red.stats, blue.stats):
                order = ((red, blue), (blue, red))
            else:
                order = ((blue, red), (red, blue))

            for is_counter, (actor, target) in enumerate(order):
                outcome = self.resolve_attack(actor, target, rng)
                record(format_attack_line(result.rounds, actor.name, outcome, bool(is_counter)))
                self._publish(AttackResolved(
                    round_number=result.rounds,
                    actor_name=actor.name,
                    target_name=target.name,
                    hit=outcome.hit,
                    damage=outcome.damage,
                    critical=outcome.critical,
                    magic_surge=outcome.magic_surge,
                    focus_surge=outcome.focus_surge,
                    is_counter=bool(is_counter),
                    target_hp=target.snapshot_hp(),
                ))
                if not target.is_alive:
                    break

        result.winner = self._decide_winner(red, blue)
        both_down = not red.is_alive and not blue.is_alive
        record(closing_line(result.winner, red.name, blue.name, both_down))

        self._publish(CombatEnded(
            round_number=result.rounds,
            attacker_name=red.name,
            defender_name=blue.name,
            winner=result.winner,
            attacker_hp=red.snapshot_hp(),
            defender_hp=blue.snapshot_hp(),
        ))
        self._emit_log(
            f"{red.name} vs {blue.name}: {result.winner.value} after {result.rounds} rounds",
            result.rounds,
        )

        return result

    def _make_fighter(self, character: Character) -> Fighter:
        effective = apply_equipment(character, self.catalog)
        return Fighter(
            name=effective.name,
            stats=compute_combat_stats(effective, self.balance),
            hp=effective.hp,
            # A snapshot carrying more HP than its max keeps its HP intact
            max_hp=max(effective.max_hp, effective.hp),
        )

    @staticmethod
    def _decide_winner(attacker: Fighter, defender: Fighter) -> CombatWinner:
        if not attacker.is_alive and not defender.is_alive:
            return CombatWinner.DRAW
        if not attacker.is_alive:
            return CombatWinner.DEFENDER
        if not defender.is_alive:
            return CombatWinner.ATTACKER
        return CombatWinner.DRAW

    def _publish(self, event) -> None:
        if self.event_manager is not None:
            self.event_manager.publish(event, source="CombatResolver")

    def _emit_log(self, message: str, round_number: int = 0) -> None:
        if self.event_manager is None:
            return
        from ..managers.log_manager import LogLevel

        self.event_manager.publish(
            LogMessage(
                round_number=round_number,
                message=message,
                category="COMBAT",
                level=LogLevel.INFO,
                source="CombatResolver"
            ),
            source="CombatResolver"
        )


def simulate_combat(
    attacker: Character,
    defender: Character,
    rng: Optional[RandomSource] = None,
    *,
    balance: Optional[CombatBalance] = None,
    catalog: Optional["ItemCatalog"] = None,
    event_manager: Optional["EventManager"] = None,
) -> CombatResult:
    """Simulate a fight between two characters. See ``CombatResolver.simulate``."""
    resolver = CombatResolver(balance=balance, catalog=catalog, event_manager=event_manager)
    return resolver.simulate(attacker, defender, rng)
