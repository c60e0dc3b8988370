"""
Simple synchronous event bus feeding view models to the projection layer.
"""

import logging
from collections.abc import Callable

from models.events import ProjectionEvent

logger_event_bus = logging.getLogger(__name__)

Subscriber = Callable[[ProjectionEvent], None]


class EventBus:
    """Publish/subscribe bus keyed by event type. Handlers run in subscription order."""

    def __init__(self):
        self.subscribers: dict[str, list[Subscriber]] = {}

    def subscribe(self, event_type: str, callback: Subscriber) -> None:
        """Subscribe to an event type."""
        if not callable(callback):
            raise TypeError("Callback must be callable.")
        event_type = str(getattr(event_type, "value", event_type))
        if event_type not in self.subscribers:
            self.subscribers[event_type] = []
        if callback not in self.subscribers[event_type]:
            self.subscribers[event_type].append(callback)
            logger_event_bus.debug(f"Callback {_name(callback)} subscribed to {event_type}")
        else:
            logger_event_bus.warning(f"Callback {_name(callback)} already subscribed to {event_type}")

    def unsubscribe(self, event_type: str, callback: Subscriber) -> None:
        """Unsubscribe a specific callback from an event type."""
        event_type = str(getattr(event_type, "value", event_type))
        if event_type in self.subscribers:
            try:
                self.subscribers[event_type].remove(callback)
                logger_event_bus.debug(f"Callback {_name(callback)} unsubscribed from {event_type}")
                if not self.subscribers[event_type]:
                    del self.subscribers[event_type]
            except ValueError:
                logger_event_bus.warning(f"Callback {_name(callback)} not found for event type {event_type}")

    def publish(self, event: ProjectionEvent) -> int:
        """Publish an event to subscribers. Returns how many handlers ran cleanly."""
        if not isinstance(event, ProjectionEvent):
            logger_event_bus.error(f"Attempted to publish invalid event type: {type(event)}")
            return 0

        event_type = event.event_type.value
        logger_event_bus.debug(f"Event published: {event_type}")
        delivered = 0
        # Copy so a handler may unsubscribe itself while being called
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(event)
                delivered += 1
            except Exception as e:
                logger_event_bus.error(
                    f"Error in subscriber callback '{_name(callback)}' for event {event_type}: {e}",
                    exc_info=False,
                )
        return delivered


def _name(callback: Subscriber) -> str:
    return getattr(callback, "__name__", repr(callback))
