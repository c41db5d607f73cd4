"""Route tool invocations from the MCP server to the tool functions."""

import re
from typing import Any, Awaitable, Callable, Dict, List, Optional

import mcp.types as types

from . import tools
from .catalog import TOOLS, TOOLS_BY_NAME

import logging
logger = logging.getLogger(__name__)


Handler = Callable[..., Awaitable[List[types.TextContent]]]

HANDLERS: Dict[str, Handler] = {
    "run_playwright_test": tools.run_playwright_test,
    "create_test_file": tools.create_test_file,
    "frappe_login": tools.frappe_login,
    "frappe_api_call": tools.frappe_api_call,
    "run_test_suite": tools.run_test_suite,
}


class UnknownToolError(ValueError):
    """The requested tool name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def to_handler_kwargs(tool: types.Tool, arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Keep only the arguments the tool declares and rename them to keyword arguments.

    Undeclared keys are dropped. Missing ones are left for the tool's defaults, or
    surface as a tool failure when required.
    """
    declared = (tool.inputSchema or {}).get("properties") or {}
    kwargs = {}
    for key, value in (arguments or {}).items():
        if key not in declared:
            logger.debug(f"{tool.name}: ignoring undeclared argument {key!r}")
            continue
        kwargs[to_snake_case(key)] = value
    return kwargs


def list_tools() -> List[types.Tool]:
    return list(TOOLS)


async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
    """
    Invoke the tool called `name` once and return its result.

    Raises:
        UnknownToolError: `name` is not in the catalog.
    """
    tool = TOOLS_BY_NAME.get(name)
    handler = HANDLERS.get(name)
    if tool is None or handler is None:
        raise UnknownToolError(name)

    logger.info(f"Calling tool {name}")
    return await handler(**to_handler_kwargs(tool, arguments))


__all__ = ["HANDLERS", "UnknownToolError", "to_snake_case", "to_handler_kwargs", "list_tools", "call_tool"]
