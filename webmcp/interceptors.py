"""Ordered pre-call interceptors that may claim a call before its handler runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from webmcp.config import DEFAULT_AGENT_ID
from webmcp.events import EventChannel, ToolCallEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToolCall:
    """The pending call an interceptor gets to inspect."""

    name: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    agent_id: str = DEFAULT_AGENT_ID


@dataclass(frozen=True, slots=True)
class ShortCircuit:
    """Returned by an interceptor to claim a call with a substitute result."""

    result: Any = None


Predicate = Callable[[ToolCall], bool]
InterceptHandler = Callable[[ToolCall], Optional[ShortCircuit]]


@dataclass(slots=True)
class _Entry:
    handler: InterceptHandler
    when: Optional[Predicate] = None


class InterceptorChain:
    """
    Predicate/handler pairs consulted in registration order.

    A handler returns None to let the call pass or a ``ShortCircuit`` to
    claim it; the first claim wins and the rest of the chain is skipped.
    """

    def __init__(self) -> None:
        self._entries: List[_Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, handler: InterceptHandler, when: Optional[Predicate] = None) -> InterceptHandler:
        """Append an interceptor; returns ``handler`` so it can be passed to ``remove``."""
        if not callable(handler):
            raise TypeError("interceptor must be callable")
        self._entries.append(_Entry(handler=handler, when=when))
        return handler

    def remove(self, handler: InterceptHandler) -> bool:
        for idx, entry in enumerate(self._entries):
            if entry.handler is handler:
                del self._entries[idx]
                return True
        return False

    def run(self, call: ToolCall) -> Optional[ShortCircuit]:
        for entry in list(self._entries):
            if entry.when is not None and not entry.when(call):
                continue
            outcome = entry.handler(call)
            if isinstance(outcome, ShortCircuit):
                logger.debug("Tool call %r short-circuited by %r", call.name, entry.handler)
                return outcome
        return None


class EventChannelInterceptor:
    """Publishes each call as a cancelable ``toolcall`` event.

    A listener that calls ``prevent_default()`` claims the call; its
    ``respond_with()`` value (or None) becomes the result.
    """

    def __init__(self, events: EventChannel) -> None:
        self.events = events

    def __call__(self, call: ToolCall) -> Optional[ShortCircuit]:
        event = ToolCallEvent(
            detail={"name": call.name, "parameters": call.parameters, "agentId": call.agent_id}
        )
        self.events.publish(event)
        if event.default_prevented:
            return ShortCircuit(event.response)
        return None
