"""
Central configuration for the webmcp runtime.
Loads environment variables from a .env file at import time.
"""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# --- Load .env early so everything importing config sees the vars ---
load_dotenv()

#: Environment variable names
LOG_LEVEL_ENV = "WEBMCP_LOG_LEVEL"
DEFAULT_AGENT_ID_ENV = "WEBMCP_DEFAULT_AGENT_ID"

#: Agent id used when a caller does not identify itself.
DEFAULT_AGENT_ID = "default"

DEFAULT_LOG_LEVEL = "INFO"


def get_log_level() -> int:
    """Resolve ``WEBMCP_LOG_LEVEL`` to a logging level, falling back to INFO."""
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_default_agent_id() -> str:
    """Agent id applied to calls that do not carry one."""
    return os.getenv(DEFAULT_AGENT_ID_ENV) or DEFAULT_AGENT_ID
