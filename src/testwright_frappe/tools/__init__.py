# testwright_frappe/tools/__init__.py
"""
MCP tool implementations.

Every tool is an async function taking snake_case keyword arguments and
returning a one-block text result. Failures inside a tool come back as text
too (see decorators.action_result); only an unknown tool name is a protocol
error.
"""

from .script_runner import run_playwright_test
from .files import create_test_file
from .frappe import frappe_login, frappe_api_call
from .suite import run_test_suite

__all__ = [
    'run_playwright_test',
    'create_test_file',
    'frappe_login',
    'frappe_api_call',
    'run_test_suite',
]
