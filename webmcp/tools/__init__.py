"""Tool descriptors and handler signatures shared by the registry and dispatcher."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from webmcp.context import AgentContext


class ToolHandler(Protocol):
    """Callable signature every tool implementation must follow.

    The return value may be a plain result or an awaitable resolving to one.
    """

    def __call__(self, params: Dict[str, Any], context: "AgentContext") -> Any:
        ...


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """Declarative record of a tool plus its executable implementation.

    Frozen so an admitted descriptor cannot be edited past validation.
    """

    name: str
    description: str
    handler: ToolHandler
    input_schema: Mapping[str, Any] = field(default_factory=dict)

    def public_view(self) -> Dict[str, Any]:
        """Return the wire view of the tool; the handler is never included."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(dict(self.input_schema)),
        }


def make_tool(
    name: str,
    description: str,
    handler: ToolHandler,
    input_schema: Mapping[str, Any] | None = None,
) -> ToolDescriptor:
    """
    Build a descriptor and run it through the structural validator.

    Parameters
    ----------
    name : str
        Unique tool identifier.
    description : str
        Human-readable summary shown to agents.
    handler : ToolHandler
        ``handler(params, context)`` implementation.
    input_schema : Mapping, optional
        JSON-Schema-like description of accepted parameters. Defaults to an
        empty object schema.

    Returns
    -------
    ToolDescriptor
        A descriptor that is guaranteed to pass admission.
    """
    from webmcp.schema import validate_descriptor

    if input_schema is None:
        input_schema = {"type": "object", "properties": {}}
    return validate_descriptor(
        ToolDescriptor(name=name, description=description, handler=handler, input_schema=input_schema)
    )


def text_result(text: str) -> Dict[str, List[Dict[str, str]]]:
    """Wrap ``text`` in the MCP text-content result shape."""
    return {"content": [{"type": "text", "text": text}]}
