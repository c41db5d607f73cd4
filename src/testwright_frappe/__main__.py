#region Overview
"""
## TestWright-Frappe MCP server

Runs over stdio. Start it with `testwright-frappe` or `python -m testwright_frappe`
and register it with an MCP client like any other stdio server:

```
{
    "mcpServers": {
        "testwright-frappe": {
            "command": "testwright-frappe"
        }
    }
}
```

## How calls are handled

Each tool call is independent. Tools that need a browser start a fresh
headless Chrome for that one call and quit it before answering, also when the
call fails. Nothing is kept between calls, so an agent that wants to stay
logged in passes the cookie string from `frappe_login` to `frappe_api_call`.

Failures inside a tool (page not reachable, selector not found, assertion
failed, non-zero exit of the test runner) are reported as normal text results
starting with a failure marker. Only an unknown tool name is returned as an
MCP error.

## Configuration

Read from the environment, or from a `.env` file in the working directory:

* `CHROME_EXECUTABLE_PATH`, `CHROMEDRIVER_PATH`: override the browser and driver
  (otherwise Selenium Manager finds them).
* `TESTWRIGHT_TESTS_DIR`: where `create_test_file` writes and `run_test_suite`
  looks (default `./tests`).
* `TESTWRIGHT_TEST_RUNNER`: command for `run_test_suite` (default `npx playwright test`).
* `TESTWRIGHT_MAX_BROWSER_SESSIONS`: cap on simultaneous browsers (default 0, no cap).
* `TESTWRIGHT_LOG_LEVEL`: logging level for stderr (default INFO).
"""
#endregion

#region Imports
import os
import sys
import asyncio
import logging
from typing import Any, Dict, List, Optional

from mcp.server.lowlevel import Server
import mcp.server.stdio
import mcp.types as types
#endregion

#region Import from your package
from testwright_frappe import dispatcher
from testwright_frappe.constants import SERVER_NAME, SERVER_VERSION
#endregion

#region Logger
logger = logging.getLogger(__name__)
#endregion

#region Server Initialization
server = Server(SERVER_NAME, version=SERVER_VERSION)
#endregion

#region Handlers
@server.list_tools()
async def list_tools() -> List[types.Tool]:
    return dispatcher.list_tools()


# Missing or mistyped arguments surface as the tool's own failure text.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
    return await dispatcher.call_tool(name, arguments)
#endregion

#region Entry Point
def configure_logging() -> None:
    """Send logs to stderr; stdout carries the MCP protocol."""
    level = (os.getenv("TESTWRIGHT_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def main() -> None:
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("TestWright-Frappe MCP Server running...")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run() -> None:
    configure_logging()
    asyncio.run(main())
#endregion


if __name__ == "__main__":
    run()
