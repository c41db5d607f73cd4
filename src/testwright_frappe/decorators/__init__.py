# testwright_frappe/decorators/__init__.py
#
# Re-exports decorators from their respective modules.

from .envelope import action_result, text_result

__all__ = [
    "action_result",
    "text_result",
]
