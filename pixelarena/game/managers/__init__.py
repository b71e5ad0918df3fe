"""Engine managers.

- fight_manager.py: end-to-end fight resolution with XP and level-ups
- log_manager.py: event-driven logging with categories and levels
"""

from .fight_manager import FightManager, FightOutcome
from .log_manager import LogCategory, LogEntry, LogLevel, LogManager

__all__ = [
    "FightManager",
    "FightOutcome",
    "LogCategory",
    "LogEntry",
    "LogLevel",
    "LogManager",
]
