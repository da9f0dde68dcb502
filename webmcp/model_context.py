"""
The capability object exposed to agents, and its one-time installation.

A ``Host`` stands for the well-known location the capability is attached to.
Applications build their own host at their composition root and pass it
around; ``get_default_host()`` keeps one process-wide instance for call
sites that expect ambient access.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from webmcp.dispatcher import InvocationDispatcher
from webmcp.events import READY, EventChannel
from webmcp.interceptors import InterceptorChain
from webmcp.registry import ToolRegistry
from webmcp.schema import validate_context

logger = logging.getLogger(__name__)


class ModelContext:
    """Single surface through which tools are registered, listed and executed."""

    def __init__(self, events: Optional[EventChannel] = None) -> None:
        self.events = events if events is not None else EventChannel()
        self._registry = ToolRegistry(events=self.events)
        self._dispatcher = InvocationDispatcher(self._registry, events=self.events)

    @property
    def interceptors(self) -> InterceptorChain:
        return self._dispatcher.interceptors

    # ---------------------------------------------------------- registration
    def provide_context(self, context: Mapping[str, Any]) -> bool:
        """Replace the entire tool set with ``context["tools"]``."""
        tools = validate_context(context)
        self._registry.replace_all(tools)
        return True

    def register_tool(self, tool: Any) -> bool:
        """Add one tool, overwriting any tool with the same name."""
        self._registry.add(tool)
        return True

    def unregister_tool(self, name: str) -> bool:
        return self._registry.remove(name)

    # --------------------------------------------------------------- queries
    def get_tools(self) -> List[str]:
        return self._registry.names()

    def get_tool(self, name: str) -> Optional[Dict[str, Any]]:
        return self._registry.describe(name)

    # ------------------------------------------------------------- execution
    async def execute_tool(
        self,
        name: str,
        parameters: Optional[Dict[str, Any]] = None,
        agent_id: Optional[str] = None,
    ) -> Any:
        return await self._dispatcher.execute_tool(name, parameters, agent_id)


@dataclass(slots=True)
class Host:
    """Well-known location holding the event channel and the installed capability."""

    events: EventChannel = field(default_factory=EventChannel)
    model_context: Optional[ModelContext] = None


_default_host: Optional[Host] = None


def get_default_host() -> Host:
    """Return the process-wide host, creating it on first use."""
    global _default_host
    if _default_host is None:
        _default_host = Host()
    return _default_host


def reset_default_host() -> None:
    """Drop the process-wide host (used by tests)."""
    global _default_host
    _default_host = None


def install_model_context(host: Optional[Host] = None) -> ModelContext:
    """
    Attach a ``ModelContext`` to ``host`` and announce it with ``webmcp:ready``.

    Installation is idempotent: if the host already carries a capability
    object it is returned unchanged and no event is published.

    Parameters
    ----------
    host : Host, optional
        Target host; the process-wide default host when omitted.

    Returns
    -------
    ModelContext
        The host's single capability object.
    """
    if host is None:
        host = get_default_host()
    if host.model_context is not None:
        return host.model_context

    host.model_context = ModelContext(events=host.events)
    host.events.emit(READY)
    logger.info("WebMCP initialized successfully")
    return host.model_context
