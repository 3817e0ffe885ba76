"""
Simple synchronous event bus used as the store's observer hook.
"""

import logging
from collections.abc import Callable
from enum import Enum

from models.events import InventoryEvent

logger_event_bus = logging.getLogger(__name__)  # Use a specific logger


class EventBus:
    """Dispatches inventory events to subscribers in subscription order."""

    def __init__(self):
        self.subscribers: dict[str, list[Callable[[InventoryEvent], None]]] = {}

    def subscribe(self, event_type: str, callback: Callable[[InventoryEvent], None]) -> None:
        """Subscribe to an event type."""
        event_type = _event_key(event_type)
        if not callable(callback):
            raise TypeError("Callback must be callable.")
        if event_type not in self.subscribers:
            self.subscribers[event_type] = []
        if callback not in self.subscribers[event_type]:  # Avoid duplicate subscriptions
            self.subscribers[event_type].append(callback)
            logger_event_bus.debug(f"Callback {_callback_name(callback)} subscribed to {event_type}")
        else:
            logger_event_bus.warning(f"Callback {_callback_name(callback)} already subscribed to {event_type}")

    def unsubscribe(self, event_type: str, callback: Callable[[InventoryEvent], None]) -> None:
        """Unsubscribe a specific callback from an event type."""
        event_type = _event_key(event_type)
        if event_type in self.subscribers:
            try:
                self.subscribers[event_type].remove(callback)
                logger_event_bus.debug(f"Callback {_callback_name(callback)} unsubscribed from {event_type}")
                if not self.subscribers[event_type]:  # Clean up empty list
                    del self.subscribers[event_type]
            except ValueError:
                logger_event_bus.warning(
                    f"Callback {_callback_name(callback)} not found for event type {event_type}"
                )

    def publish(self, event: InventoryEvent) -> None:
        """Publish an event to subscribers. A failing subscriber does not stop the others."""
        if not isinstance(event, InventoryEvent):
            logger_event_bus.error(f"Attempted to publish invalid event type: {type(event)}")
            return

        event_type = event.event_type.value
        logger_event_bus.info(f"Event published: {event_type} from store '{event.store_name}'")
        # Copy so callbacks may unsubscribe themselves while being dispatched
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(event)
            except Exception as exc:
                logger_event_bus.error(
                    f"Error in subscriber callback '{_callback_name(callback)}' for event {event_type}: {exc}",
                    exc_info=False,
                )


def _event_key(event_type) -> str:
    """Enum members and their plain values address the same subscriber list."""
    if isinstance(event_type, Enum):
        return event_type.value
    return event_type


def _callback_name(callback) -> str:
    return getattr(callback, "__name__", repr(callback))
