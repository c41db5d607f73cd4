"""Frappe-specific tools: form login and authenticated API calls."""

import json
from typing import Any, Dict, Optional

from .. import constants
from ..actions import (
    navigate_to_url,
    fill_first,
    click_first,
    wait_for_path_to_leave,
    serialize_cookies,
    parse_cookie_string,
    add_cookies,
    build_fetch_options,
    in_page_fetch,
)
from ..browser import run_in_browser
from ..decorators import action_result

import logging
logger = logging.getLogger(__name__)


def _login(driver, url: str, username: str, password: str) -> str:
    navigate_to_url(driver, f"{url}{constants.LOGIN_PATH}")

    fill_first(driver, constants.USERNAME_SELECTORS, username)
    fill_first(driver, constants.PASSWORD_SELECTORS, password)
    click_first(driver, constants.SUBMIT_SELECTORS)

    landed = wait_for_path_to_leave(driver, constants.LOGIN_PATH, constants.LOGIN_REDIRECT_TIMEOUT_SECS)
    logger.info(f"Logged in to {url}, redirected to {landed}")

    return serialize_cookies(driver.get_cookies())


@action_result(on_error=lambda err, args: f"Login failed: {err}")
async def frappe_login(url: str, username: str, password: str) -> str:
    """
    Log in through the Frappe /login form and return the session cookies.

    Success is the browser leaving /login within LOGIN_REDIRECT_TIMEOUT_SECS.
    A timeout is a failed login; there is no retry.
    """
    cookie_string = await run_in_browser(_login, url, username, password, headless=True)
    return f"Login successful. Session cookies: {cookie_string}"


def _api_call(driver, url: str, endpoint: str, options: dict, cookies: str) -> dict:
    jar = parse_cookie_string(cookies, url)
    if jar:
        add_cookies(driver, jar)

    # The page, not a plain HTTP client, holds window.csrf_token
    navigate_to_url(driver, url)
    return in_page_fetch(driver, f"{url}{endpoint}", options)


@action_result(on_error=lambda err, args: f"API call failed: {err}")
async def frappe_api_call(
    url: str,
    method: str,
    endpoint: str,
    data: Optional[Dict[str, Any]] = None,
    cookies: str = "",
) -> str:
    """
    Call `<url><endpoint>` from inside a page of `url`.

    `cookies` is a "name=value; name=value" string such as frappe_login returns.
    Returns {"status", "data"} as indented JSON.
    """
    options = build_fetch_options(method, data if data is not None else {})
    response = await run_in_browser(_api_call, url, endpoint, options, cookies or "", headless=True)
    return json.dumps(response, indent=2, ensure_ascii=False)


__all__ = ["frappe_login", "frappe_api_call"]
