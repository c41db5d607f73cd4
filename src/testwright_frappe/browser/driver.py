"""WebDriver creation."""

import shutil
import subprocess
from typing import Optional
from selenium import webdriver

import logging
logger = logging.getLogger(__name__)

from ..config import chromedriver_log_path


def build_chrome_options(headless: bool, config: dict):
    """
    Chrome options for a throwaway session.

    Each driver gets Chrome's own temporary profile, so cookies and storage never
    leak from one session into another.
    """
    from selenium.webdriver.chrome.options import Options

    options = Options()
    chrome_path = config.get("chrome_path")
    if chrome_path:
        options.binary_location = chrome_path

    if headless:
        options.add_argument("--headless=new")
    options.add_argument(f"--window-size={config.get('window_size') or '1280,720'}")
    options.add_argument("--no-first-run")
    options.add_argument("--no-default-browser-check")
    options.add_argument("--disable-dev-shm-usage")
    return options


def create_webdriver(headless: bool, config: dict) -> webdriver.Chrome:
    """Launch a fresh Chrome and return the Selenium driver attached to it."""
    from selenium.webdriver.chrome.service import Service as ChromeService

    options = build_chrome_options(headless, config)

    log_file = chromedriver_log_path()
    service_kwargs = {}
    if config.get("chromedriver_path"):
        service_kwargs["executable_path"] = config["chromedriver_path"]

    # Handle differing Selenium versions that accept log_output vs. log_path
    try:
        service = ChromeService(log_output=log_file, **service_kwargs)  # newer Selenium
    except TypeError:
        service = ChromeService(log_path=log_file, **service_kwargs)    # older Selenium

    driver = webdriver.Chrome(service=service, options=options)
    logger.debug(f"Launched Chrome (headless={headless}), chromedriver log: {log_file}")
    return driver


def get_chromedriver_capability_version(driver: Optional[webdriver.Chrome] = None) -> Optional[str]:
    """
    Best effort Chromedriver version string.
    - If a driver is provided, prefer driver.capabilities['chrome']['chromedriverVersion'].
    - Else, fall back to `chromedriver --version` if available in PATH.
    """
    try:
        if driver:
            caps = getattr(driver, "capabilities", None) or {}
            v = (caps.get("chrome") or {}).get("chromedriverVersion") or caps.get("chromedriverVersion")
            if isinstance(v, str) and v:
                # Typically like "114.0.5735.90 (some hash)"
                return v.split(" ")[0]
        path = shutil.which("chromedriver")
        if path:
            out = subprocess.check_output([path, "--version"], stderr=subprocess.STDOUT).decode().strip()
            return out
    except (OSError, subprocess.SubprocessError, AttributeError):
        pass
    return None


__all__ = [
    "build_chrome_options",
    "create_webdriver",
    "get_chromedriver_capability_version",
]
