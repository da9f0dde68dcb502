"""webmcp: tool registry and interceptable dispatch for agent-facing hosts."""

from webmcp.context import AgentContext
from webmcp.errors import InteractionError, NotFoundError, ValidationError, WebMCPError
from webmcp.events import Event, EventChannel, ToolCallEvent
from webmcp.interceptors import InterceptorChain, ShortCircuit, ToolCall
from webmcp.model_context import Host, ModelContext, get_default_host, install_model_context
from webmcp.tools import ToolDescriptor, make_tool, text_result

__all__ = [
    "AgentContext",
    "Event",
    "EventChannel",
    "Host",
    "InteractionError",
    "InterceptorChain",
    "ModelContext",
    "NotFoundError",
    "ShortCircuit",
    "ToolCall",
    "ToolCallEvent",
    "ToolDescriptor",
    "ValidationError",
    "WebMCPError",
    "get_default_host",
    "install_model_context",
    "make_tool",
    "text_result",
]

__version__ = "0.1.0"
