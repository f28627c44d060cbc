# core/events.py
"""
Event Channels: synchronous, per-instance fan-out for editor entities.

An entity owns one dispatcher, declares the channels it emits on, and
interested parties (wires, undo tooling, views) subscribe listeners.
Dispatch calls every listener in registration order before returning.
"""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class EventId:
    """Channel identifiers emitted by IO nodes."""
    ON_MOVE = "onMove"
    ON_OUTLET_MOVE = "onOutletMove"


class EventChannelError(Exception):
    """Base exception for event channel misuse."""
    pass


class UnknownChannelError(EventChannelError):
    """Raised when listening on or dispatching to an undeclared channel."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Unknown event channel: {event_id}")


class SimulationEventDispatcher:
    """Holds the listeners of each declared channel."""

    def __init__(self):
        self._channels: Dict[str, List[Listener]] = {}

    def register_channel(self, event_id: str) -> None:
        """Declares a channel. Declaring an existing channel is a no-op."""
        if event_id not in self._channels:
            self._channels[event_id] = []
            logger.debug("Registered channel %s", event_id)

    def has_channel(self, event_id: str) -> bool:
        return event_id in self._channels

    def listeners(self, event_id: str) -> List[Listener]:
        return list(self._get_channel(event_id))

    def add_listener(self, event_id: str, listener: Listener) -> None:
        self._get_channel(event_id).append(listener)

    def remove_listener(self, event_id: str, listener: Listener) -> None:
        channel = self._get_channel(event_id)
        if listener in channel:
            channel.remove(listener)

    def dispatch(self, event_id: str, payload: Any = None) -> None:
        """Calls every listener of the channel with the payload, in order."""
        # Snapshot so listeners may unsubscribe while being notified
        listeners = list(self._get_channel(event_id))
        logger.debug("Dispatching %s to %d listener(s)", event_id, len(listeners))
        for listener in listeners:
            listener(payload)

    def _get_channel(self, event_id: str) -> List[Listener]:
        try:
            return self._channels[event_id]
        except KeyError:
            raise UnknownChannelError(event_id) from None
