"""
Balance auditing through batches of seeded fights.

Each fight gets its own mulberry32 source seeded with ``seed + index`` so any
single fight of a batch can be replayed in isolation. Outcomes are collected
into numpy arrays and aggregated there.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

import numpy as np

from ..core.config import COMBAT_BALANCE, CombatBalance
from ..core.data import Character, CombatWinner
from ..core.random_source import mulberry32
from .combat.combat_resolver import CombatResolver

if TYPE_CHECKING:
    from .items.item_catalog import ItemCatalog

_WINNER_CODES = {
    CombatWinner.ATTACKER: 0,
    CombatWinner.DEFENDER: 1,
    CombatWinner.DRAW: 2,
}


@dataclass(frozen=True)
class MatchupReport:
    """Aggregated outcome of a batch of fights between the same two characters."""
    fights: int
    attacker_wins: int
    defender_wins: int
    draws: int
    mean_rounds: float
    std_rounds: float
    mean_attacker_hp: float
    mean_defender_hp: float

    @property
    def attacker_win_rate(self) -> float:
        return self.attacker_wins / self.fights

    @property
    def defender_win_rate(self) -> float:
        return self.defender_wins / self.fights

    @property
    def draw_rate(self) -> float:
        return self.draws / self.fights


class BalanceSimulator:
    """Runs seeded fight batches to audit fairness."""

    def __init__(self, balance: Optional[CombatBalance] = None, catalog: Optional["ItemCatalog"] = None):
        self.resolver = CombatResolver(balance=balance or COMBAT_BALANCE, catalog=catalog)

    def run_matchup(self, attacker: Character, defender: Character, fights: int = 100, seed: int = 0) -> MatchupReport:
        """Fight ``attacker`` against ``defender`` ``fights`` times.

        Raises:
            ValueError: If ``fights`` is not positive
        """
        if fights <= 0:
            raise ValueError(f"fights must be positive, got {fights}")

        winners = np.empty(fights, dtype=np.int8)
        rounds = np.empty(fights, dtype=np.int32)
        final_hp = np.empty((fights, 2), dtype=np.int32)

        for index in range(fights):
            result = self.resolver.simulate(attacker, defender, mulberry32(seed + index))
            last = result.timeline[-1]
            winners[index] = _WINNER_CODES[result.winner]
            rounds[index] = result.rounds
            final_hp[index] = (last.attacker_hp, last.defender_hp)

        counts = np.bincount(winners, minlength=len(_WINNER_CODES))
        mean_hp = final_hp.mean(axis=0)

        return MatchupReport(
            fights=fights,
            attacker_wins=int(counts[_WINNER_CODES[CombatWinner.ATTACKER]]),
            defender_wins=int(counts[_WINNER_CODES[CombatWinner.DEFENDER]]),
            draws=int(counts[_WINNER_CODES[CombatWinner.DRAW]]),
            mean_rounds=float(rounds.mean()),
            std_rounds=float(rounds.std()),
            mean_attacker_hp=float(mean_hp[0]),
            mean_defender_hp=float(mean_hp[1]),
        )

    def run_mirror(self, character: Character, fights: int = 100, seed: int = 0) -> MatchupReport:
        """Fight a character against an identical copy of itself."""
        return self.run_matchup(character, character.evolve(name=f"{character.name}_mirror"), fights, seed)
