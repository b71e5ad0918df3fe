"""Combat log lines: formatting them during a fight and reading them back.

The log is the replay format consumed by the arena view, so the wording is
fixed. The closing lines are kept in French as the game ships them.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from ...core.data import CombatActionType, CombatActor, CombatWinner

if TYPE_CHECKING:
    from .combat_resolver import AttackOutcome

DRAW_LINE = "Match nul !"
ROUND_LIMIT_LINE = "Limite de rounds atteinte !"
VICTORY_SUFFIX = "gagne !"

_SUMMARY_MARKERS = (" vs ", "gagne", "match", "limite")


@dataclass(frozen=True)
class CombatAction:
    """One parsed log line: who acted and how."""
    actor: CombatActor
    type: CombatActionType


def opening_line(attacker_name: str, defender_name: str) -> str:
    return f"{attacker_name} vs {defender_name}"


def format_attack_line(round_number: int, actor_name: str, outcome: "AttackOutcome", is_counter: bool) -> str:
    """Render one attack.

    Examples:
        ``Round 3: Hero hit CRIT! 21 DMG``
        ``Round 3: Villain counters with MAGIC SURGE! 20 DMG``
        ``Round 4: Hero missed counter!``
    """
    prefix = f"Round {round_number}: {actor_name}"
    if not outcome.hit:
        return f"{prefix} missed counter!" if is_counter else f"{prefix} missed!"

    crit = " CRIT!" if outcome.critical else ""
    if outcome.magic_surge:
        verb = "counters with MAGIC SURGE!" if is_counter else "uses MAGIC SURGE!"
    else:
        verb = "counter" if is_counter else "hit"
    return f"{prefix} {verb}{crit} {outcome.damage} DMG"


def closing_line(winner: CombatWinner, attacker_name: str, defender_name: str, both_down: bool = False) -> str:
    """Final log line for a finished fight."""
    if winner == CombatWinner.ATTACKER:
        return f"{attacker_name} {VICTORY_SUFFIX}"
    if winner == CombatWinner.DEFENDER:
        return f"{defender_name} {VICTORY_SUFFIX}"
    return DRAW_LINE if both_down else ROUND_LIMIT_LINE


def parse_combat_detail(detail: str, player_name: str, opponent_name: str) -> Optional[CombatAction]:
    """Classify a log line for animation.

    Summary lines return None, as do lines naming neither fighter. The player
    is matched before the opponent, and the type is the first of miss, magic,
    crit, counter, hit found in the line (case-insensitive).
    """
    lowered = detail.lower()
    if any(marker in lowered for marker in _SUMMARY_MARKERS):
        return None

    if player_name.lower() in lowered:
        actor = CombatActor.PLAYER
    elif opponent_name.lower() in lowered:
        actor = CombatActor.OPPONENT
    else:
        return None

    if "missed" in lowered:
        return CombatAction(actor, CombatActionType.MISS)
    if "magic surge" in lowered:
        return CombatAction(actor, CombatActionType.MAGIC)
    if "crit" in lowered:
        return CombatAction(actor, CombatActionType.CRIT)
    if "counter" in lowered:
        return CombatAction(actor, CombatActionType.COUNTER)
    if "hit" in lowered:
        return CombatAction(actor, CombatActionType.HIT)
    return None
