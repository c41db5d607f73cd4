"""Diagnostics and debugging information utility functions."""

import sys
import platform
from typing import Optional
from selenium import webdriver
import selenium


def collect_diagnostics(
    driver: Optional[webdriver.Chrome] = None,
    exc: Optional[Exception] = None,
    config: Optional[dict] = None
) -> str:
    """
    Collect diagnostic information about the browser, driver, and environment.

    Args:
        driver: Selenium WebDriver instance (may be None if launch failed)
        exc: Exception that occurred (can be None)
        config: Configuration dictionary

    Returns:
        str: Formatted diagnostic information
    """
    config = config or {}

    parts = [
        f"OS                : {platform.system()} {platform.release()}",
        f"Python            : {sys.version.split()[0]}",
        f"Selenium          : {getattr(selenium, '__version__', '?')}",
        f"Chrome binary     : {config.get('chrome_path') or '<selenium manager>'}",
        f"Chromedriver      : {config.get('chromedriver_path') or '<selenium manager>'}",
        f"Driver initialized: {driver is not None}",
    ]

    if driver:
        from ..browser.driver import get_chromedriver_capability_version

        cap = getattr(driver, "capabilities", None) or {}
        parts.append(f"Browser version   : {cap.get('browserVersion') or '<unknown>'}")
        parts.append(f"Driver version    : {get_chromedriver_capability_version(driver) or '<unknown>'}")
        try:
            parts.append(f"Current URL       : {driver.current_url}")
        except Exception:
            parts.append("Current URL       : <unavailable>")

    if exc:
        parts += [
            "---- ERROR ----",
            f"Error type        : {type(exc).__name__}",
            f"Error message     : {exc}",
        ]

    return "\n".join(parts)


__all__ = ['collect_diagnostics']
