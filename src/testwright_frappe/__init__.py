"""
TestWright-Frappe: browser automation for Frappe applications, exposed as MCP tools.

Every tool call is self-contained. A call that needs a browser launches its own
headless Chrome, does one thing with it and quits it again before returning,
whether the action worked or not. Nothing is shared between calls, so several
agents can use the same server without coordinating.

Tools:
    run_playwright_test  Run a snippet of test code against a page.
    create_test_file     Write a test file into the tests directory.
    frappe_login         Log in through /login and return the session cookies.
    frappe_api_call      Call a Frappe endpoint from inside the logged-in page.
    run_test_suite       Run the test-runner CLI over the tests directory.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
