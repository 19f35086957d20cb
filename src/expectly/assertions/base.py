"""Reporter used by every predicate to pass or raise."""

from __future__ import annotations

from typing import Any

from expectly.assertions.formatting import format_message
from expectly.errors import ExpectationFailedError, ExpectationUsageError


def assert_that(
    condition: Any,
    template: str,
    *values: Any,
    diff: tuple[Any, Any] | None = None,
) -> None:
    """Return if ``condition`` is truthy, otherwise raise a failure.

    Parameters
    ----------
    condition
        Outcome of the check.
    template
        Message with ``%s`` placeholders, filled in order from ``values``.
    *values
        Values rendered into the message.
    diff
        Optional ``(actual, expected)`` pair. When given, the raised error is
        diff-enabled and carries both raw values.

    Raises
    ------
    ExpectationFailedError
        If ``condition`` is falsy.
    """
    if condition:
        return

    message = format_message(template, *values)
    if diff is None:
        raise ExpectationFailedError(message)

    actual, expected = diff
    raise ExpectationFailedError(message, diff_enabled=True, actual=actual, expected=expected)


def require(condition: Any, template: str, *values: Any) -> None:
    """Return if ``condition`` is truthy, otherwise raise a usage error."""
    if condition:
        return
    raise ExpectationUsageError(format_message(template, *values))
