"""
The fixed tool catalog announced to MCP clients.

Built once at import time and never changed. Argument names on the wire are
camelCase; the dispatcher maps them onto the tools' keyword arguments.
"""

from typing import Dict, List

import mcp.types as types

from .actions.fetch import HTTP_METHODS
from .constants import DEFAULT_TEST_PATTERN


TOOLS: List[types.Tool] = [
    types.Tool(
        name="run_playwright_test",
        description=(
            "Run a test against the Frappe application. Opens `url` in a fresh browser, then runs "
            "`testCode` as the body of a Python function with `page` (the Selenium WebDriver on that "
            "page) and `expect` (expect(actual).toBe(x) / .toContain(x)) in scope."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "testName": {"type": "string", "description": "Name of the test"},
                "url": {"type": "string", "description": "URL of the Frappe application"},
                "testCode": {"type": "string", "description": "Test code to execute"},
                "headless": {"type": "boolean", "description": "Run in headless mode", "default": True},
            },
            "required": ["testName", "url", "testCode"],
        },
    ),
    types.Tool(
        name="create_test_file",
        description="Create a new test file for Frappe testing in the tests directory",
        inputSchema={
            "type": "object",
            "properties": {
                "fileName": {"type": "string", "description": "Name of the test file"},
                "testContent": {"type": "string", "description": "Content of the test file"},
            },
            "required": ["fileName", "testContent"],
        },
    ),
    types.Tool(
        name="frappe_login",
        description="Login to Frappe application and return the session cookies",
        inputSchema={
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "Frappe application URL"},
                "username": {"type": "string", "description": "Username"},
                "password": {"type": "string", "description": "Password"},
            },
            "required": ["url", "username", "password"],
        },
    ),
    types.Tool(
        name="frappe_api_call",
        description="Make API call to Frappe from inside the application page",
        inputSchema={
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "Frappe application URL"},
                "method": {"type": "string", "description": "HTTP method", "enum": list(HTTP_METHODS)},
                "endpoint": {"type": "string", "description": "API endpoint"},
                "data": {"type": "object", "description": "Request data", "default": {}},
                "cookies": {"type": "string", "description": "Session cookies", "default": ""},
            },
            "required": ["url", "method", "endpoint"],
        },
    ),
    types.Tool(
        name="run_test_suite",
        description="Run all tests in the test directory",
        inputSchema={
            "type": "object",
            "properties": {
                "pattern": {"type": "string", "description": "Test file pattern", "default": DEFAULT_TEST_PATTERN},
                "headless": {"type": "boolean", "description": "Run in headless mode", "default": True},
            },
        },
    ),
]

TOOLS_BY_NAME: Dict[str, types.Tool] = {tool.name: tool for tool in TOOLS}


__all__ = ["TOOLS", "TOOLS_BY_NAME"]
