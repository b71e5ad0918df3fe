"""
Event bus for decoupled engine communication.

The combat resolver and the fight manager publish; the log manager and any
caller subscribe. Publishing only queues: a simulated fight stays free of side
effects until its owner calls ``process_events``.
"""

import threading
from collections import defaultdict, deque
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


EventSubscriber = Callable[["GameEvent"], None]
ErrorHandler = Callable[["GameEvent", str, Exception], None]


class EventManager:
    """Queued publisher/subscriber bus, delivered in publication order."""

    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        """
        Args:
            error_handler: Called with the event, the subscriber name and the
                exception when a subscriber raises. Without one, the exception
                propagates out of ``process_events``.
        """
        self.error_handler = error_handler

        self._subscribers: dict["EventType", list[tuple[str, EventSubscriber]]] = defaultdict(list)
        self._universal_subscribers: list[tuple[str, EventSubscriber]] = []
        self._queue: deque[tuple["GameEvent", str]] = deque()
        self._lock = threading.RLock()

    @property
    def pending(self) -> int:
        """Number of events waiting for ``process_events``."""
        with self._lock:
            return len(self._queue)

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to events of one type."""
        name = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        with self._lock:
            self._subscribers[event_type].append((name, subscriber))

    def subscribe_all(self, subscriber: EventSubscriber, subscriber_name: Optional[str] = None) -> None:
        """Subscribe to every event type."""
        name = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        with self._lock:
            self._universal_subscribers.append((name, subscriber))

    def publish(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Queue an event.

        Args:
            event: The event to publish
            source: Name of the publishing component, reported when a subscriber fails
        """
        with self._lock:
            self._queue.append((event, source or "unknown"))

    def process_events(self, max_events: Optional[int] = None) -> int:
        """Deliver queued events in publication order.

        Events published by subscribers while processing are delivered in the
        same call, unless ``max_events`` is reached first.

        Args:
            max_events: Maximum number of events to deliver (None for all)

        Returns:
            Number of events delivered
        """
        delivered = 0
        while max_events is None or delivered < max_events:
            with self._lock:
                if not self._queue:
                    break
                event, source = self._queue.popleft()
                subscribers = list(self._subscribers.get(event.event_type, []))
                subscribers.extend(self._universal_subscribers)

            for name, subscriber in subscribers:
                try:
                    subscriber(event)
                except Exception as e:
                    if self.error_handler is None:
                        raise
                    self.error_handler(event, f"{name} (from {source})", e)
            delivered += 1

        return delivered
