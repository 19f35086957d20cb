"""Error types raised by expectations."""

from typing import Any


class ExpectationError(Exception):
    """Base class for everything an expectation raises."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ExpectationUsageError(ExpectationError, TypeError):
    """Raised when a predicate is called with arguments it does not accept.

    Signals misuse of the assertion API itself, independent of whether the
    check would have passed.
    """


class ExpectationFailedError(ExpectationError, AssertionError):
    """Raised when the check performed by a predicate evaluates false.

    Attributes
    ----------
    message
        Rendered failure message.
    diff_enabled
        True only for equality mismatches. Test runners use it to decide
        whether to render a structural diff of ``actual`` against ``expected``.
    actual
        Observed value, set when ``diff_enabled`` is true.
    expected
        Expected value, set when ``diff_enabled`` is true.
    """

    def __init__(
        self,
        message: str,
        *,
        diff_enabled: bool = False,
        actual: Any = None,
        expected: Any = None,
    ) -> None:
        self.diff_enabled = diff_enabled
        self.actual = actual
        self.expected = expected
        super().__init__(message)


__all__ = ["ExpectationError", "ExpectationFailedError", "ExpectationUsageError"]
