"""Cookie string conversion and injection."""

from typing import Dict, Iterable, List
from urllib.parse import urlparse
from selenium import webdriver


def serialize_cookies(cookies: Iterable[dict]) -> str:
    """Render cookies as a `name=value; name=value` header string, in the given order."""
    return "; ".join(f"{c['name']}={c['value']}" for c in cookies)


def parse_cookie_string(cookie_string: str, url: str) -> List[Dict[str, str]]:
    """
    Split a `name=value; name=value` string into cookie dicts scoped to `url`'s host.

    Pairs are separated by "; " and split on their first "=". Every cookie gets
    the hostname of `url` as domain and "/" as path.
    """
    if not cookie_string:
        return []

    domain = urlparse(url).hostname or ""
    cookies = []
    for pair in cookie_string.split("; "):
        name, _, value = pair.partition("=")
        cookies.append({"name": name, "value": value, "domain": domain, "path": "/"})
    return cookies


def add_cookies(driver: webdriver.Chrome, cookies: Iterable[dict]) -> int:
    """
    Attach cookies to the session before any page of their domain is loaded.

    WebDriver's add_cookie only works for the current document's domain, so this
    goes through the DevTools Network domain instead.
    """
    count = 0
    for cookie in cookies:
        result = driver.execute_cdp_cmd("Network.setCookie", dict(cookie)) or {}
        if result.get("success") is False:
            raise ValueError(f"Browser rejected cookie {cookie['name']!r} for domain {cookie['domain']!r}")
        count += 1
    return count


__all__ = ["serialize_cookies", "parse_cookie_string", "add_cookies"]
