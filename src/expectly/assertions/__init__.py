"""Reporter and message formatting for expectations."""

from .base import assert_that, require
from .formatting import PLACEHOLDER, format_message, inspect_value

__all__ = [
    "PLACEHOLDER",
    "assert_that",
    "format_message",
    "inspect_value",
    "require",
]
