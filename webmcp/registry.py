"""In-process tool registry: the single source of truth for what is callable."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from webmcp.errors import ValidationError
from webmcp.events import TOOL_REGISTERED, TOOL_UNREGISTERED, TOOLS_CHANGED, EventChannel
from webmcp.schema import validate_batch, validate_descriptor
from webmcp.tools import ToolDescriptor

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Ordered mapping of tool name to descriptor.

    Enumeration follows registration order. Overwriting a name through
    ``add`` keeps its original slot.
    """

    def __init__(self, events: Optional[EventChannel] = None) -> None:
        self._tools: Dict[str, ToolDescriptor] = {}
        self.events = events if events is not None else EventChannel()

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    # ------------------------------------------------------------- mutation
    def replace_all(self, descriptors: Iterable[Any]) -> None:
        """
        Swap the whole tool set for ``descriptors``.

        The full batch is validated before anything changes, so a bad entry
        leaves the previous tool set untouched. An empty batch clears the
        registry.

        Raises
        ------
        ValidationError
            For the first malformed descriptor in the batch.
        """
        incoming = list(descriptors)
        try:
            admitted = validate_batch(incoming)
        except ValidationError as exc:
            logger.error("Error registering tool %r: %s", exc.tool_name, exc)
            raise

        tools: Dict[str, ToolDescriptor] = {}
        for descriptor in admitted:
            tools[descriptor.name] = descriptor
        self._tools = tools

        logger.debug("Tool set replaced: %s", list(tools))
        self.events.emit(TOOLS_CHANGED, tools=self.names())

    def add(self, descriptor: Any) -> None:
        """Admit one descriptor, silently overwriting an existing tool of the same name."""
        try:
            tool = validate_descriptor(descriptor)
        except ValidationError as exc:
            logger.error("Error registering tool %r: %s", exc.tool_name, exc)
            raise

        if tool.name in self._tools:
            logger.debug("Overwriting tool %r", tool.name)
        self._tools[tool.name] = tool
        self.events.emit(TOOL_REGISTERED, name=tool.name)

    def remove(self, name: str) -> bool:
        """Remove ``name``; returns True only if an entry existed."""
        if not isinstance(name, str):
            raise ValidationError("name", "Tool name must be a string")

        existed = self._tools.pop(name, None) is not None
        if existed:
            logger.debug("Tool %r unregistered", name)
            self.events.emit(TOOL_UNREGISTERED, name=name)
        return existed

    # -------------------------------------------------------------- queries
    def names(self) -> List[str]:
        return list(self._tools)

    def describe(self, name: str) -> Optional[Dict[str, Any]]:
        """Public view of a tool without its handler, or None if unknown."""
        tool = self._tools.get(name)
        if tool is None:
            return None
        return tool.public_view()

    def lookup(self, name: str) -> Optional[ToolDescriptor]:
        """Full descriptor, handler included; reserved for the dispatcher."""
        return self._tools.get(name)
