"""
Global constants and configuration defaults.
Loads a .env file from the working directory on import, so every setting below
can come from there.
"""

import os

from dotenv import load_dotenv
load_dotenv()

# ============================================================================
# Server Identity
# ============================================================================

SERVER_NAME = "testwright-frappe"
"""Name announced to MCP clients."""

SERVER_VERSION = "1.0.0"
"""Version announced to MCP clients."""


# ============================================================================
# Timeouts
# ============================================================================

LOGIN_REDIRECT_TIMEOUT_SECS = 10
"""How long frappe_login waits for the browser to leave /login."""

ELEMENT_WAIT_SECS = float(os.getenv("TESTWRIGHT_ELEMENT_WAIT_SECS", "30"))
"""Maximum time to wait for a form element to appear."""

SCRIPT_TIMEOUT_SECS = float(os.getenv("TESTWRIGHT_SCRIPT_TIMEOUT_SECS", "300"))
"""Maximum time an in-page async script (the API fetch) may take."""


# ============================================================================
# Concurrency
# ============================================================================

MAX_BROWSER_SESSIONS = int(os.getenv("TESTWRIGHT_MAX_BROWSER_SESSIONS", "0"))
"""Upper bound on simultaneously open browsers. 0 means no limit."""


# ============================================================================
# Frappe Login Form
# ============================================================================

USERNAME_SELECTORS = ('input[name="usr"]', 'input[type="email"]')
PASSWORD_SELECTORS = ('input[name="pwd"]', 'input[type="password"]')
SUBMIT_SELECTORS = ('button[type="submit"]', '.btn-login')

LOGIN_PATH = "/login"


# ============================================================================
# Test Suite
# ============================================================================

DEFAULT_TEST_PATTERN = "*.spec.js"
DEFAULT_TEST_RUNNER = "npx playwright test"
HEADED_FLAG = "--headed"


__all__ = [
    "SERVER_NAME",
    "SERVER_VERSION",
    "LOGIN_REDIRECT_TIMEOUT_SECS",
    "ELEMENT_WAIT_SECS",
    "SCRIPT_TIMEOUT_SECS",
    "MAX_BROWSER_SESSIONS",
    "USERNAME_SELECTORS",
    "PASSWORD_SELECTORS",
    "SUBMIT_SELECTORS",
    "LOGIN_PATH",
    "DEFAULT_TEST_PATTERN",
    "DEFAULT_TEST_RUNNER",
    "HEADED_FLAG",
]
