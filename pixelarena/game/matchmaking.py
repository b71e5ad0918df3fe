"""
Opponent selection.

Matchmaking only pairs characters of the exact same level. Among them, the
candidates whose matchmaking power is closest to the player's are preferred, and
one of the closest few is picked at random for variety. Fetching candidates is
the caller's job; this module only chooses among them.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.data import MATCH_TYPE_LABELS, Character, MatchType
from ..core.random_source import RandomSource, default_random

TOP_CANDIDATES = 3
BALANCED_POWER_DIFF = 3

# Focus is left out of matchmaking power
POWER_STATS = ("strength", "vitality", "dexterity", "luck", "intelligence")


@dataclass(frozen=True)
class MatchmakingResult:
    """The chosen opponent and how close the match is."""
    opponent: Character
    match_type: MatchType
    power_diff: int


def calculate_total_power(character: Character) -> int:
    """Matchmaking power: the sum of every raw stat except focus."""
    return sum(getattr(character, stat) for stat in POWER_STATS)


def _is_same_character(player: Character, candidate: Character) -> bool:
    if player.character_id is not None and candidate.character_id is not None:
        return player.character_id == candidate.character_id
    return candidate is player


def find_opponent(
    player: Character,
    candidates: Iterable[Character],
    rng: Optional[RandomSource] = None,
) -> Optional[MatchmakingResult]:
    """Pick an opponent for ``player`` from ``candidates``.

    Returns:
        MatchmakingResult, or None when no candidate shares the player's level
    """
    rng = rng or default_random()
    player_power = calculate_total_power(player)

    eligible = [
        candidate for candidate in candidates
        if candidate.level == player.level and not _is_same_character(player, candidate)
    ]
    if not eligible:
        return None

    ranked = sorted(
        ((abs(calculate_total_power(candidate) - player_power), candidate) for candidate in eligible),
        key=lambda pair: pair[0],
    )
    top = ranked[:TOP_CANDIDATES]
    power_diff, opponent = top[min(int(rng() * len(top)), len(top) - 1)]

    match_type = MatchType.BALANCED if power_diff <= BALANCED_POWER_DIFF else MatchType.SIMILAR
    return MatchmakingResult(opponent=opponent, match_type=match_type, power_diff=power_diff)


def get_match_difficulty_label(match_type: MatchType) -> str:
    """Display label for a match type, ``"MATCH"`` for anything unknown."""
    return MATCH_TYPE_LABELS.get(match_type, "MATCH")
