"""
run_playwright_test: execute caller-supplied test code against a live page.

The code is compiled as the body of a function with two parameters:

    page    the Selenium WebDriver, already navigated to the target URL
    expect  expect(actual) returning an Expectation with toBe() and toContain()

Example body:

    expect(page.title).toContain("Login")
    expect(len(page.find_elements("css selector", "input[name=usr]"))).toBe(1)

The code runs in this process with full access to the interpreter and the
browser. There is no sandbox.
"""

import ast
import traceback
from typing import Any, Callable

from ..actions import navigate_to_url
from ..browser import run_in_browser
from ..decorators import action_result


class ExpectationError(AssertionError):
    """Raised by Expectation when a check does not hold."""


class Expectation:
    """Minimal assertion helper bound to one actual value."""

    def __init__(self, actual: Any):
        self.actual = actual

    def toBe(self, expected: Any) -> None:
        # True == 1 in Python; toBe keeps booleans and numbers apart
        if isinstance(self.actual, bool) != isinstance(expected, bool) or self.actual != expected:
            raise ExpectationError(f"Expected {expected} but got {self.actual}")

    def toContain(self, expected: Any) -> None:
        try:
            contained = expected in self.actual
        except TypeError:
            contained = False
        if not contained:
            raise ExpectationError(f"Expected to contain {expected}")

    # snake_case spellings for test code written in Python style
    to_be = toBe
    to_contain = toContain


def expect(actual: Any) -> Expectation:
    return Expectation(actual)


_WRAPPER = "def __test_body__(page, expect):\n    pass\n"


def compile_test_body(test_code: str, test_name: str = "test") -> Callable[[Any, Callable], Any]:
    """
    Compile `test_code` into a function taking (page, expect).

    The code is parsed as sent and its statements become the function body, so
    string literals are left untouched and `return` is allowed.
    SyntaxError propagates to the caller.
    """
    filename = f"<test {test_name}>"
    statements = ast.parse(test_code or "", filename=filename).body
    module = ast.parse(_WRAPPER, filename=filename)
    if statements:
        module.body[0].body = statements
    ast.fix_missing_locations(module)
    namespace: dict = {"__name__": "__testwright_test__"}
    exec(compile(module, filename, "exec"), namespace)
    return namespace["__test_body__"]


def _execute_test(driver, url: str, test_fn: Callable) -> None:
    navigate_to_url(driver, url)
    test_fn(driver, expect)


def _test_failed(err: Exception, args: dict) -> str:
    return f'✗ Test "{args.get("test_name")}" failed:\n{err}\n{traceback.format_exc()}'


@action_result(on_error=_test_failed)
async def run_playwright_test(test_name: str, url: str, test_code: str, headless: bool = True) -> str:
    """
    Open `url` in a fresh browser and run `test_code` against it.

    Returns the pass line; any navigation, compile or assertion error becomes the
    fail line with message and traceback.
    """
    test_fn = compile_test_body(test_code, test_name)
    await run_in_browser(_execute_test, url, test_fn, headless=bool(headless))
    return f'✓ Test "{test_name}" passed successfully'


__all__ = [
    "Expectation",
    "ExpectationError",
    "expect",
    "compile_test_body",
    "run_playwright_test",
]
