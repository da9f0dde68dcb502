"""Resolves tool calls by name and runs them through the interceptor chain."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Dict, Optional

from webmcp.config import get_default_agent_id
from webmcp.context import AgentContext
from webmcp.errors import NotFoundError
from webmcp.events import EventChannel
from webmcp.interceptors import EventChannelInterceptor, InterceptorChain, ToolCall
from webmcp.registry import ToolRegistry

logger = logging.getLogger(__name__)


class InvocationDispatcher:
    """
    Mediates every invocation of a registered tool.

    For each call the dispatcher looks the tool up, builds a fresh
    ``AgentContext``, publishes the cancelable ``toolcall`` event, consults
    the interceptor chain and only then invokes the handler. The event is
    published for every call whatever chain is supplied, so event listeners
    always get the first chance to claim a call.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        events: Optional[EventChannel] = None,
        interceptors: Optional[InterceptorChain] = None,
    ) -> None:
        self.registry = registry
        self.events = events if events is not None else registry.events
        self.interceptors = interceptors if interceptors is not None else InterceptorChain()
        self._notify = EventChannelInterceptor(self.events)

    async def execute_tool(
        self,
        name: str,
        parameters: Optional[Dict[str, Any]] = None,
        agent_id: Optional[str] = None,
    ) -> Any:
        """
        Invoke tool ``name`` on behalf of ``agent_id``.

        Parameters
        ----------
        name : str
            Registered tool name.
        parameters : dict, optional
            Passed to the handler as-is; defaults to an empty dict.
        agent_id : str, optional
            Identity of the caller; defaults to the configured agent id.

        Returns
        -------
        Any
            The substitute result of a claiming interceptor, or the handler's
            (awaited) result.

        Raises
        ------
        NotFoundError
            If no tool named ``name`` is registered. No notification is
            published in that case.
        Exception
            Whatever the handler raised, unchanged.
        """
        tool = self.registry.lookup(name)
        if tool is None:
            raise NotFoundError(name)

        if parameters is None:
            parameters = {}
        if agent_id is None:
            agent_id = get_default_agent_id()

        context = AgentContext(agent_id=agent_id)
        call = ToolCall(name=name, parameters=parameters, agent_id=agent_id)
        claimed = self._notify(call)
        if claimed is None:
            claimed = self.interceptors.run(call)
        if claimed is not None:
            return claimed.result

        logger.debug("Executing tool %r for agent %r", name, agent_id)
        try:
            result = tool.handler(parameters, context)
            if inspect.isawaitable(result):
                result = await result
        except Exception:
            logger.exception('Error executing tool "%s"', name)
            raise
        return result
