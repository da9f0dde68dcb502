"""Per-call capability object handed to tool handlers."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable

from webmcp.config import DEFAULT_AGENT_ID
from webmcp.errors import InteractionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AgentContext:
    """Identity of the invoking agent, built fresh for every call."""

    agent_id: str = DEFAULT_AGENT_ID

    async def request_user_interaction(self, operation: Callable[[], Any]) -> Any:
        """
        Run ``operation`` as a user-facing step and return its outcome.

        ``operation`` takes no arguments and may return an awaitable (for
        example while it waits on user input). Its result or failure is
        passed back unchanged.

        Raises
        ------
        InteractionError
            If ``operation`` is not callable.
        """
        if not callable(operation):
            raise InteractionError("callback must be a function")

        try:
            result = operation()
            if inspect.isawaitable(result):
                result = await result
        except Exception:
            logger.exception("Error during user interaction (agent %r)", self.agent_id)
            raise
        return result
