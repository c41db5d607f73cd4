"""
Single-use browser sessions.

A session is one Chrome process, one WebDriver and one page. It is opened for a
single tool call and quit before the call returns, on success and on error
alike. Sessions are never shared or reused.

Selenium is blocking, so run_in_browser() drives the session from a worker
thread and the event loop stays free for other tool calls.
"""

import asyncio
import threading
import contextlib
from typing import Any, Callable, Iterator, Optional, TypeVar

from selenium import webdriver
from selenium.common.exceptions import WebDriverException

import logging
logger = logging.getLogger(__name__)

from .. import constants
from ..config import get_env_config
from ..utils.diagnostics import collect_diagnostics
from . import driver as driver_factory


T = TypeVar("T")

_slots_lock = threading.Lock()
_slots: Optional[threading.BoundedSemaphore] = None
_slots_size: Optional[int] = None


def _session_slots() -> Optional[threading.BoundedSemaphore]:
    """Return the process-wide session limiter, or None when sessions are unlimited."""
    global _slots, _slots_size
    limit = constants.MAX_BROWSER_SESSIONS
    if limit <= 0:
        return None
    with _slots_lock:
        if _slots is None or _slots_size != limit:
            _slots = threading.BoundedSemaphore(limit)
            _slots_size = limit
        return _slots


def quit_driver(driver) -> None:
    """Quit a driver, logging rather than raising if the browser is already gone."""
    try:
        driver.quit()
    except WebDriverException as e:
        logger.warning(f"Error while closing browser: {e}")
    except Exception as e:
        # dead chromedriver: urllib3 retries, connection refused, OSError
        logger.warning(f"Error while stopping chromedriver: {e}")


@contextlib.contextmanager
def browser_session(headless: bool = True, config: Optional[dict] = None) -> Iterator[webdriver.Chrome]:
    """
    Launch a browser, yield its driver and always quit it afterwards.

    Errors raised by the body are logged with diagnostics and re-raised.
    """
    if config is None:
        config = get_env_config()

    slots = _session_slots()
    if slots is not None:
        slots.acquire()
    try:
        driver = driver_factory.create_webdriver(headless=headless, config=config)
        try:
            yield driver
        except Exception as e:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(collect_diagnostics(driver, e, config))
            raise
        finally:
            quit_driver(driver)
    finally:
        if slots is not None:
            slots.release()


async def run_in_browser(
    body: Callable[..., T],
    *args: Any,
    headless: bool = True,
    **kwargs: Any,
) -> T:
    """
    Run body(driver, *args, **kwargs) inside a fresh browser session.

    The session is opened, used and quit entirely on a worker thread.
    """
    def _run() -> T:
        with browser_session(headless=headless) as driver:
            return body(driver, *args, **kwargs)

    return await asyncio.to_thread(_run)


__all__ = [
    "browser_session",
    "run_in_browser",
    "quit_driver",
]
