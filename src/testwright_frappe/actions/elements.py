"""Element finding and interaction."""

from typing import Sequence
from selenium import webdriver
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait
from selenium.common.exceptions import (
    TimeoutException,
    StaleElementReferenceException,
)

from .. import constants


def get_by_selector(selector_type: str):
    return {
        'css': By.CSS_SELECTOR,
        'xpath': By.XPATH,
        'id': By.ID,
        'name': By.NAME,
        'tag': By.TAG_NAME,
        'class': By.CLASS_NAME,
    }.get(selector_type.lower())


def _first_match(driver, selectors: Sequence[str], by: str, clickable: bool):
    """
    Return the first element found by the earliest selector in `selectors`, or False.

    Priority follows the order of `selectors`, not document order.
    """
    for selector in selectors:
        for el in driver.find_elements(by, selector):
            try:
                if clickable and not (el.is_displayed() and el.is_enabled()):
                    continue
            except StaleElementReferenceException:
                continue
            return el
    return False


def find_first_element(
    driver: webdriver.Chrome,
    selectors: Sequence[str],
    selector_type: str = "css",
    timeout: float = None,
    clickable: bool = False,
) -> WebElement:
    """
    Wait for any of a prioritized list of selectors to match and return that element.

    Raises:
        ValueError: unsupported selector_type or empty selector list.
        TimeoutException: nothing matched within `timeout` seconds.
    """
    by = get_by_selector(selector_type)
    if not by:
        raise ValueError(f"Unsupported selector type: {selector_type}")
    if not selectors:
        raise ValueError("At least one selector is required")
    if timeout is None:
        timeout = constants.ELEMENT_WAIT_SECS

    try:
        return WebDriverWait(driver, timeout, poll_frequency=0.1).until(
            lambda d: _first_match(d, selectors, by, clickable)
        )
    except TimeoutException:
        raise TimeoutException(
            f"Timed out after {timeout}s waiting for element matching: {', '.join(selectors)}"
        ) from None


def fill_first(driver: webdriver.Chrome, selectors: Sequence[str], text: str, timeout: float = None) -> WebElement:
    """Clear the first matching input and type `text` into it."""
    el = find_first_element(driver, selectors, timeout=timeout)
    el.clear()
    el.send_keys(text)
    return el


def click_first(driver: webdriver.Chrome, selectors: Sequence[str], timeout: float = None) -> WebElement:
    """Click the first matching element that is displayed and enabled."""
    el = find_first_element(driver, selectors, timeout=timeout, clickable=True)
    el.click()
    return el


__all__ = [
    "get_by_selector",
    "find_first_element",
    "fill_first",
    "click_first",
]
