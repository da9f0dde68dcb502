"""Error taxonomy for registry admission, dispatch and agent interaction."""

from __future__ import annotations

from typing import Optional


class WebMCPError(Exception):
    """Base class for every error raised by this package itself."""


class ValidationError(WebMCPError, TypeError):
    """A descriptor (or provide_context payload) is structurally malformed.

    ``kind`` names the failing check: ``descriptor``, ``name``,
    ``description``, ``input_schema``, ``handler``, ``context`` or ``tools``.
    """

    def __init__(self, kind: str, message: str, tool_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.tool_name = tool_name


class NotFoundError(WebMCPError, LookupError):
    """``execute_tool`` was asked for a name the registry does not hold."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Tool "{name}" not found')
        self.name = name


class InteractionError(WebMCPError, TypeError):
    """``request_user_interaction`` was given something that cannot be called."""
