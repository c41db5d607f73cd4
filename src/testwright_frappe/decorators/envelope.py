# testwright_frappe/decorators/envelope.py

import asyncio
import inspect
import functools
from typing import Any, Callable, Dict, List

import mcp.types as types

import logging
logger = logging.getLogger(__name__)


__all__ = [
    "action_result",
    "text_result",
]


ErrorFormatter = Callable[[Exception, Dict[str, Any]], str]


def text_result(text: str) -> List[types.TextContent]:
    """Wrap a string in the single-block content list every tool returns."""
    return [types.TextContent(type="text", text=text)]


def action_result(on_error: ErrorFormatter):
    """
    Decorator for tool handlers:
      - The handler is an async callable taking keyword arguments and returning a str.
      - On success: the string becomes a one-block text result.
      - On error: on_error(exception, kwargs) builds the text instead, so the failure
        reaches the client as an ordinary result rather than a protocol error.
    asyncio.CancelledError is re-raised untouched.
    """

    def decorator(func: Callable):
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"{func.__name__} must be a coroutine function")

        @functools.wraps(func)
        async def wrapper(**kwargs):
            try:
                text = await func(**kwargs)
            except asyncio.CancelledError:
                # Preserve cooperative cancellation semantics
                raise
            except Exception as e:
                logger.warning(f"{func.__name__} failed: {e.__class__.__name__}: {e}")
                text = on_error(e, kwargs)
            return text_result("" if text is None else str(text))

        return wrapper

    return decorator
