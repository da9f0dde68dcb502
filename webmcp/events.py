"""Synchronous publish/subscribe channel for lifecycle and call notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

READY = "webmcp:ready"
TOOLS_CHANGED = "webmcp:toolschanged"
TOOL_REGISTERED = "webmcp:toolregistered"
TOOL_UNREGISTERED = "webmcp:toolunregistered"
TOOL_CALL = "toolcall"

#: Subscribing to this type receives every published event.
ANY = "*"

_UNSET = object()


@dataclass
class Event:
    """A named notification with a free-form ``detail`` payload."""

    type: str
    detail: Dict[str, Any] = field(default_factory=dict)
    cancelable: bool = False
    default_prevented: bool = False

    def prevent_default(self) -> None:
        """Mark the event as claimed; ignored on non-cancelable events."""
        if self.cancelable:
            self.default_prevented = True


@dataclass
class ToolCallEvent(Event):
    """Cancelable notification published right before a tool handler runs.

    A listener claims the call with ``prevent_default()`` and then attaches a
    substitute result with ``respond_with()``. Responses offered before the
    call is claimed are ignored; after the claim the first response wins.
    """

    type: str = TOOL_CALL
    cancelable: bool = True
    _response: Any = field(default=_UNSET, repr=False)

    @property
    def name(self) -> str:
        return self.detail["name"]

    @property
    def parameters(self) -> Dict[str, Any]:
        return self.detail["parameters"]

    @property
    def agent_id(self) -> str:
        return self.detail["agentId"]

    @property
    def response(self) -> Any:
        return None if self._response is _UNSET else self._response

    @property
    def has_response(self) -> bool:
        return self._response is not _UNSET

    def respond_with(self, response: Any) -> bool:
        """Attach a substitute result to a claimed call.

        Returns False when the call is not claimed yet or already has a response.
        """
        if not self.default_prevented:
            logger.debug("Ignoring response for unclaimed tool call %r", self.detail.get("name"))
            return False
        if self._response is not _UNSET:
            logger.debug("Ignoring second response for tool call %r", self.detail.get("name"))
            return False
        self._response = response
        return True


Listener = Callable[[Event], Any]


class EventChannel:
    """Delivers events synchronously to subscribers in subscription order.

    A listener that raises is reported on the ``webmcp.events`` logger and
    never interrupts the publisher or the remaining listeners.
    """

    def __init__(self) -> None:
        self._subscriptions: List[Tuple[str, Listener]] = []

    def subscribe(self, event_type: str, listener: Listener) -> Callable[[], bool]:
        """Register ``listener`` for ``event_type`` and return an unsubscribe callable."""
        if not callable(listener):
            raise TypeError("listener must be callable")
        self._subscriptions.append((event_type, listener))
        return lambda: self.unsubscribe(event_type, listener)

    def unsubscribe(self, event_type: str, listener: Listener) -> bool:
        try:
            self._subscriptions.remove((event_type, listener))
        except ValueError:
            return False
        return True

    def listener_count(self, event_type: Optional[str] = None) -> int:
        if event_type is None:
            return len(self._subscriptions)
        return sum(1 for subscribed, _ in self._subscriptions if subscribed == event_type)

    def publish(self, event: Event) -> Event:
        """Deliver ``event`` to its typed and wildcard listeners in subscription order."""
        # Snapshot so listeners may (un)subscribe while being notified.
        targets = [
            listener
            for subscribed, listener in self._subscriptions
            if subscribed == event.type or subscribed == ANY
        ]

        for listener in targets:
            try:
                listener(event)
            except Exception:
                logger.exception("Unhandled error in %r listener %r", event.type, listener)
        return event

    def emit(self, event_type: str, **detail: Any) -> Event:
        """Shortcut for publishing a plain, non-cancelable event."""
        return self.publish(Event(type=event_type, detail=detail))
