"""Browser lifecycle: driver creation and single-use sessions."""

from .driver import create_webdriver
from .session import browser_session, run_in_browser, quit_driver

__all__ = [
    "create_webdriver",
    "browser_session",
    "run_in_browser",
    "quit_driver",
]
