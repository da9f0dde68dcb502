from typing import Any, Dict, List

import pytest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from webmcp.events import ANY, Event, EventChannel
from webmcp.model_context import Host, ModelContext, install_model_context, reset_default_host


class EventRecorder:
    """Collects every event published on a channel."""

    def __init__(self, channel: EventChannel):
        self.events: List[Event] = []
        channel.subscribe(ANY, self.events.append)

    def of_type(self, event_type: str) -> List[Event]:
        return [event for event in self.events if event.type == event_type]

    def types(self) -> List[str]:
        return [event.type for event in self.events]


def make_descriptor(tool_name: str, handler=None, **overrides: Any) -> Dict[str, Any]:
    """Build a valid mapping descriptor; keyword overrides replace fields."""
    descriptor: Dict[str, Any] = {
        "name": tool_name,
        "description": f"{tool_name} tool",
        "inputSchema": {"type": "object", "properties": {}},
        "execute": handler or (lambda params, context: params),
    }
    descriptor.update(overrides)
    return descriptor


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    Keep developer .env settings and the default host out of tests.
    """
    monkeypatch.delenv("WEBMCP_DEFAULT_AGENT_ID", raising=False)
    monkeypatch.delenv("WEBMCP_LOG_LEVEL", raising=False)
    reset_default_host()
    yield
    reset_default_host()


@pytest.fixture
def channel() -> EventChannel:
    return EventChannel()


@pytest.fixture
def host() -> Host:
    return Host()


@pytest.fixture
def recorder(host: Host) -> EventRecorder:
    return EventRecorder(host.events)


@pytest.fixture
def model_context(host: Host, recorder: EventRecorder) -> ModelContext:
    return install_model_context(host)
