"""Low-level browser actions used by the tools. All functions are synchronous."""

from .elements import get_by_selector, find_first_element, fill_first, click_first
from .navigation import navigate_to_url, wait_for_path_to_leave
from .cookies import serialize_cookies, parse_cookie_string, add_cookies
from .fetch import HTTP_METHODS, InPageRequestError, build_fetch_options, in_page_fetch

__all__ = [
    "get_by_selector",
    "find_first_element",
    "fill_first",
    "click_first",
    "navigate_to_url",
    "wait_for_path_to_leave",
    "serialize_cookies",
    "parse_cookie_string",
    "add_cookies",
    "HTTP_METHODS",
    "InPageRequestError",
    "build_fetch_options",
    "in_page_fetch",
]
