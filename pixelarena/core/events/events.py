"""Engine events and their payloads.

This module defines all events that managers can subscribe to, following the
publisher-subscriber architecture of the event bus.

Event Design Principles:
- Events are immutable dataclasses
- All events carry the combat round they relate to (0 outside a fight)
- Events carry plain values (names, HP, damage) rather than live objects
- Events use proper enums instead of magic strings
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ..data import CombatWinner

if TYPE_CHECKING:
    from ...game.managers.log_manager import LogLevel


class EventType(Enum):
    """Types of engine events that managers can subscribe to."""
    # Combat Events
    COMBAT_STARTED = auto()
    ATTACK_RESOLVED = auto()
    COMBAT_ENDED = auto()

    # Progression Events
    XP_GAINED = auto()
    CHARACTER_LEVELED_UP = auto()

    # Item Events
    ITEM_LOOTED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()
    LOG_SAVE_REQUESTED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all engine events."""
    round_number: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class CombatStarted(GameEvent):
    """Event emitted before the first round of a fight."""
    attacker_name: str
    defender_name: str
    attacker_hp: int
    defender_hp: int

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.COMBAT_STARTED)


@dataclass(frozen=True)
class AttackResolved(GameEvent):
    """Event emitted after every attack, hit or miss."""
    actor_name: str
    target_name: str
    hit: bool
    damage: int
    critical: bool
    magic_surge: bool
    focus_surge: bool
    is_counter: bool
    target_hp: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ATTACK_RESOLVED)


@dataclass(frozen=True)
class CombatEnded(GameEvent):
    """Event emitted once a fight reaches a terminal state."""
    attacker_name: str
    defender_name: str
    winner: CombatWinner
    attacker_hp: int
    defender_hp: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBAT_ENDED)


@dataclass(frozen=True)
class XpGained(GameEvent):
    """Event emitted when a character is awarded experience."""
    character_name: str
    xp_gained: int
    total_experience: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.XP_GAINED)


@dataclass(frozen=True)
class CharacterLeveledUp(GameEvent):
    """Event emitted when an XP award crosses one or more level thresholds."""
    character_name: str
    old_level: int
    new_level: int
    stat_points_granted: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.CHARACTER_LEVELED_UP)


@dataclass(frozen=True)
class ItemLooted(GameEvent):
    """Event emitted when a lootbox roll yields an item."""
    character_name: str
    item_id: str
    rarity: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ITEM_LOOTED)


# Logging Events
@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    level: "LogLevel"
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)


@dataclass(frozen=True)
class LogSaveRequested(GameEvent):
    """Event emitted when the log buffer should be written to disk."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)
