"""Asset event notifier.

ONLY event fan-out - delivers AssetUploaded and AssetDeleting to registered
observers. Observers can never fail the orchestration that publishes.
"""

import logging
from typing import Any, Callable, Dict, List, Type, Union

from ..core.events.asset_events import AssetDeleting, AssetUploaded
from ..utils import resolve

logger = logging.getLogger(__name__)

AssetEvent = Union[AssetUploaded, AssetDeleting]
EventHandler = Callable[[Any], Any]


class AssetEventNotifier:
    """Observer registry for asset events.

    Handlers may be plain functions or coroutine functions. They run in
    registration order and are awaited one after another.
    """

    SUPPORTED_EVENTS = (AssetUploaded, AssetDeleting)

    def __init__(self):
        self._handlers: Dict[Type, List[EventHandler]] = {
            event_type: [] for event_type in self.SUPPORTED_EVENTS
        }

    def register(self, event_type: Type, handler: EventHandler) -> None:
        """Register a handler for an event type."""
        if event_type not in self._handlers:
            raise ValueError(f"Unsupported event type: {getattr(event_type, '__name__', event_type)}")
        if not callable(handler):
            raise TypeError("Event handler must be callable")
        self._handlers[event_type].append(handler)

    def unregister(self, event_type: Type, handler: EventHandler) -> bool:
        """Remove a handler. Returns False if it was not registered."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def on_uploaded(self, handler: EventHandler) -> EventHandler:
        """Register an AssetUploaded handler; usable as a decorator."""
        self.register(AssetUploaded, handler)
        return handler

    def on_deleting(self, handler: EventHandler) -> EventHandler:
        """Register an AssetDeleting handler; usable as a decorator."""
        self.register(AssetDeleting, handler)
        return handler

    def handler_count(self, event_type: Type) -> int:
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: AssetEvent) -> int:
        """Deliver an event to its handlers.

        Returns:
            Number of handlers that completed without raising
        """
        delivered = 0
        for handler in list(self._handlers.get(type(event), [])):
            try:
                await resolve(handler(event))
                delivered += 1
            except Exception as e:
                logger.error(
                    f"Asset event handler failed for {event.event_type}: {str(e)}",
                    exc_info=True
                )
        return delivered


def create_event_notifier() -> AssetEventNotifier:
    """Create asset event notifier."""
    return AssetEventNotifier()
