"""Structural admission checks for tool descriptors.

Validation never looks inside ``inputSchema``: whether a live call's
parameters satisfy the schema is left to the tool's own handler.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from webmcp.errors import ValidationError
from webmcp.tools import ToolDescriptor


def _field(descriptor: Any, attr: str, *aliases: str) -> Any:
    """Read ``attr`` from a descriptor, or the first present key from a mapping."""
    if isinstance(descriptor, ToolDescriptor):
        return getattr(descriptor, attr, None)
    for key in (*aliases, attr):
        if key in descriptor:
            return descriptor[key]
    return None


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def validate_descriptor(descriptor: Any) -> ToolDescriptor:
    """
    Check a descriptor and return it in normalised ``ToolDescriptor`` form.

    Mappings may use the protocol keys ``inputSchema`` and ``execute`` as well
    as ``input_schema`` and ``handler``.

    Raises
    ------
    ValidationError
        On the first failing check, in the order descriptor, name,
        description, input_schema, handler.
    """
    if descriptor is None or not isinstance(descriptor, (ToolDescriptor, Mapping)):
        raise ValidationError("descriptor", "Tool must be an object")

    name = _field(descriptor, "name")
    if not _is_non_empty_str(name):
        raise ValidationError("name", "Tool must have a string name")

    description = _field(descriptor, "description")
    if not _is_non_empty_str(description):
        raise ValidationError("description", "Tool must have a string description", tool_name=name)

    input_schema = _field(descriptor, "input_schema", "inputSchema")
    if input_schema is None or not isinstance(input_schema, Mapping):
        raise ValidationError("input_schema", "Tool must have an inputSchema object", tool_name=name)

    handler = _field(descriptor, "handler", "execute")
    if not callable(handler):
        raise ValidationError("handler", "Tool must have an execute function", tool_name=name)

    if isinstance(descriptor, ToolDescriptor):
        return descriptor
    return ToolDescriptor(name=name, description=description, handler=handler, input_schema=input_schema)


def validate_batch(descriptors: Iterable[Any]) -> List[ToolDescriptor]:
    """Validate every descriptor before returning any of them."""
    return [validate_descriptor(descriptor) for descriptor in descriptors]


def validate_context(context: Any) -> List[Any]:
    """
    Check a ``provide_context`` payload and return its raw tool list.

    Raises
    ------
    ValidationError
        ``context`` kind if the payload is not a mapping, ``tools`` kind if it
        does not carry a list of tools.
    """
    if context is None or not isinstance(context, Mapping):
        raise ValidationError("context", "Context must be an object")
    tools: Optional[Any] = context.get("tools")
    if not isinstance(tools, (list, tuple)):
        raise ValidationError("tools", "Context must have a tools array")
    return list(tools)
