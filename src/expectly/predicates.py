"""Type checks and containment helpers consumed by :class:`~expectly.Expectation`."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from expectly.equality import Comparator, is_equal, is_number, is_sequence

logger = logging.getLogger(__name__)


def is_function(value: Any) -> bool:
    return callable(value)


def is_array(value: Any) -> bool:
    return is_sequence(value)


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_regex(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_classinfo(value: Any) -> bool:
    """True for a class or a tuple of classes, as accepted by ``isinstance``."""
    if isinstance(value, type):
        return True
    return isinstance(value, tuple) and bool(value) and all(isinstance(v, type) for v in value)


def type_of(value: Any) -> str:
    """Return the primitive type name of ``value``.

    One of ``"string"``, ``"number"``, ``"boolean"``, ``"function"`` or
    ``"object"``. ``None`` and containers are all ``"object"``.
    """
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if callable(value):
        return "function"
    return "object"


def is_a(value: Any, type_or_name: type | tuple[type, ...] | str) -> bool:
    """Check ``value`` against a class or a primitive type name.

    ``"array"`` matches lists and tuples, which are also ``"object"``.
    """
    if isinstance(type_or_name, str):
        if type_or_name == "array" and is_array(value):
            return True
        return type_of(value) == type_or_name
    return isinstance(value, type_or_name)


def array_contains(array: Any, value: Any, compare_values: Comparator = is_equal) -> bool:
    """True if an element of ``array`` matches ``value``.

    When ``value`` is itself a list or tuple and no element matches it as a
    whole, every one of its items must match some element instead.
    """
    if any(compare_values(item, value) for item in array):
        return True
    if is_array(value):
        return all(any(compare_values(item, v) for item in array) for v in value)
    return False


def object_contains(mapping: Mapping[Any, Any], value: Any, compare_values: Comparator = is_equal) -> bool:
    """True if every entry of ``value`` is present in ``mapping``.

    A non-mapping ``value`` never matches.
    """
    if not is_object(value):
        return False
    return all(key in mapping and compare_values(mapping[key], item) for key, item in value.items())


def string_contains(string: str, value: Any) -> bool:
    return str(value) in string


def _error_matches(error: Exception, expected: Any) -> bool:
    if expected is None:
        return True
    if is_classinfo(expected):
        return isinstance(error, expected)
    message = str(error)
    if is_regex(expected):
        return expected.search(message) is not None
    if is_string(expected):
        return expected in message
    return False


def function_throws(
    fn: Callable[..., Any],
    context: Any,
    args: list[Any],
    expected: Any = None,
) -> bool:
    """Invoke ``fn`` once and report whether it raised a matching error.

    ``context``, when not ``None``, is passed as the first positional
    argument. Only the invocation itself is trapped; matching the captured
    error against ``expected`` happens outside of it.
    """
    call_args = list(args) if context is None else [context, *args]
    try:
        fn(*call_args)
    except Exception as error:
        logger.debug("Captured %s from %r", type(error).__name__, fn)
        captured = error
    else:
        return False
    return _error_matches(captured, expected)


__all__ = [
    "array_contains",
    "function_throws",
    "is_a",
    "is_array",
    "is_classinfo",
    "is_function",
    "is_object",
    "is_regex",
    "is_string",
    "object_contains",
    "string_contains",
    "type_of",
]
