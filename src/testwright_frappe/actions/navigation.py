"""Navigation and URL waits."""

from urllib.parse import urlparse
from selenium import webdriver
from selenium.webdriver.support.ui import WebDriverWait
from selenium.common.exceptions import TimeoutException


def navigate_to_url(driver: webdriver.Chrome, url: str) -> None:
    """Load `url` in the session's page. Raises WebDriverException if it cannot be reached."""
    driver.get(url)


def wait_for_path_to_leave(driver: webdriver.Chrome, fragment: str, timeout: float) -> str:
    """
    Wait until the current URL's path no longer contains `fragment`.

    Returns the URL that satisfied the wait. A timeout is final; nothing is retried.
    """
    def _left(d):
        current = d.current_url or ""
        return current if fragment not in urlparse(current).path else False

    try:
        return WebDriverWait(driver, timeout, poll_frequency=0.1).until(_left)
    except TimeoutException:
        raise TimeoutException(
            f"Timed out after {timeout}s waiting to leave {fragment} (still at {driver.current_url})"
        ) from None


__all__ = ["navigate_to_url", "wait_for_path_to_leave"]
