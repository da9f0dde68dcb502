"""
Command-line entry-point for the webmcp runtime.

Responsibilities
- Configure logging from the environment
- Install the capability object on the default host (idempotent)
- Register a small demonstration tool set
- Execute one tool call and print its JSON result
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from webmcp.config import get_log_level
from webmcp.context import AgentContext
from webmcp.errors import WebMCPError
from webmcp.model_context import Host, ModelContext, install_model_context
from webmcp.tools import ToolDescriptor, make_tool, text_result

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


# --------------------------------------------------------------------------- #
# Demonstration tool set
# --------------------------------------------------------------------------- #

def _echo_tool(params: Dict[str, Any], context: AgentContext) -> Dict[str, Any]:
    return params


async def _confirm_tool(params: Dict[str, Any], context: AgentContext) -> Dict[str, Any]:
    prompt = params.get("prompt", "Proceed?")
    approved = await context.request_user_interaction(lambda: bool(params.get("approve", True)))
    verdict = "approved" if approved else "declined"
    return text_result(f"{prompt} -> {verdict} for agent {context.agent_id}")


def build_demo_tools(model_context: ModelContext) -> List[ToolDescriptor]:
    """Return the tools the CLI registers; ``list-tools`` reads ``model_context``."""

    def _list_tools(params: Dict[str, Any], context: AgentContext) -> Dict[str, Any]:
        names = model_context.get_tools()
        return text_result("Registered tools: " + ", ".join(names))

    return [
        make_tool(
            "echo",
            "Return the given parameters unchanged.",
            _echo_tool,
            {"type": "object", "additionalProperties": True},
        ),
        make_tool("list-tools", "List the names of all registered tools.", _list_tools),
        make_tool(
            "confirm",
            "Ask the user to confirm an action before continuing.",
            _confirm_tool,
            {
                "type": "object",
                "properties": {
                    "prompt": {"type": "string", "description": "Question shown to the user"},
                    "approve": {"type": "boolean", "description": "Answer used in non-interactive runs"},
                },
            },
        ),
    ]


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="webmcp", description="Run a registered tool.")
    parser.add_argument("tool", nargs="?", help="Name of the tool to execute")
    parser.add_argument("--params", default="{}", help="JSON object passed to the tool")
    parser.add_argument("--agent-id", default=None, help="Identity of the invoking agent")
    parser.add_argument("--list", action="store_true", help="List registered tools and exit")
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None, host: Optional[Host] = None) -> int:
    """
    Execute one CLI invocation and return the process exit status.

    Returns
    -------
    int
        0 on success, 1 if the tool's own logic failed, 2 for usage,
        validation or lookup errors.
    """
    args = _parse_args(argv)
    model_context = install_model_context(host)
    model_context.provide_context({"tools": build_demo_tools(model_context)})

    if args.list or not args.tool:
        for name in model_context.get_tools():
            print(json.dumps(model_context.get_tool(name)))
        return 0

    try:
        params = json.loads(args.params)
    except json.JSONDecodeError as exc:
        print(f"Invalid --params JSON: {exc}", file=sys.stderr)
        return 2
    if not isinstance(params, dict):
        print("--params must be a JSON object", file=sys.stderr)
        return 2

    try:
        result = asyncio.run(model_context.execute_tool(args.tool, params, args.agent_id))
    except WebMCPError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except Exception as exc:
        print(f"Tool failed: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, default=str))
    return 0


def main() -> None:
    configure_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
