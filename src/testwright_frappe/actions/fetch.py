"""HTTP requests issued from inside the page, so they carry its cookies and CSRF token."""

import json
from typing import Any, Dict, Optional
from selenium import webdriver

from .. import constants


HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")

# Runs as an async WebDriver script: arguments[0] is the URL, arguments[1] the
# fetch init, the last argument is the completion callback.
_FETCH_SCRIPT = """
const done = arguments[arguments.length - 1];
const url = arguments[0];
const init = arguments[1];
init.headers['X-Frappe-CSRF-Token'] = window.csrf_token || '';
fetch(url, init)
  .then(async (res) => {
    const data = await res.json();
    done({ status: res.status, data: data });
  })
  .catch((err) => done({ error: String(err && err.message ? err.name + ': ' + err.message : err) }));
"""


class InPageRequestError(RuntimeError):
    """The in-page fetch or the JSON decoding of its response failed."""


def build_fetch_options(method: str, data: Optional[Dict[str, Any]] = None) -> dict:
    """
    Build the fetch() init for a Frappe API request.

    GET requests never carry a body; every other method sends `data` as JSON.
    The CSRF header is filled in by the page script.
    """
    method = (method or "").upper()
    if method not in HTTP_METHODS:
        raise ValueError(f"Unsupported HTTP method: {method!r} (expected one of {', '.join(HTTP_METHODS)})")

    options = {
        "method": method,
        "headers": {"Content-Type": "application/json"},
        "credentials": "include",
    }
    if method != "GET":
        options["body"] = json.dumps({} if data is None else data)
    return options


def in_page_fetch(driver: webdriver.Chrome, url: str, options: dict) -> dict:
    """Run fetch(url, options) in the current page and return {"status", "data"}."""
    driver.set_script_timeout(constants.SCRIPT_TIMEOUT_SECS)
    result = driver.execute_async_script(_FETCH_SCRIPT, url, options)
    if not isinstance(result, dict):
        raise InPageRequestError(f"Unexpected script result: {result!r}")
    if "error" in result:
        raise InPageRequestError(result["error"])
    return {"status": result.get("status"), "data": result.get("data")}


__all__ = ["HTTP_METHODS", "InPageRequestError", "build_fetch_options", "in_page_fetch"]
