import logging

from webmcp.config import get_default_agent_id, get_log_level


def test_log_level(monkeypatch):
    assert get_log_level() == logging.INFO

    monkeypatch.setenv("WEBMCP_LOG_LEVEL", "debug")
    assert get_log_level() == logging.DEBUG

    monkeypatch.setenv("WEBMCP_LOG_LEVEL", "chatty")
    assert get_log_level() == logging.INFO


def test_default_agent_id(monkeypatch):
    assert get_default_agent_id() == "default"

    monkeypatch.setenv("WEBMCP_DEFAULT_AGENT_ID", "copilot")
    assert get_default_agent_id() == "copilot"
