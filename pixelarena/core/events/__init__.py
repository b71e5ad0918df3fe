"""Event system for publisher-subscriber communication.

This package contains the complete event-driven architecture:
- event_manager.py: Publisher-subscriber event routing and coordination
- events.py: Event definitions for inter-component communication
"""

from .event_manager import EventManager
from .events import (
    GameEvent,
    EventType,
    CombatStarted,
    AttackResolved,
    CombatEnded,
    XpGained,
    CharacterLeveledUp,
    ItemLooted,
    LogMessage,
    DebugMessage,
    LogSaveRequested,
)

__all__ = [
    "EventManager",
    "GameEvent",
    "EventType",
    "CombatStarted",
    "AttackResolved",
    "CombatEnded",
    "XpGained",
    "CharacterLeveledUp",
    "ItemLooted",
    "LogMessage",
    "DebugMessage",
    "LogSaveRequested",
]
