"""Structural deep equality used by ``to_equal`` and the containment checks."""

from __future__ import annotations

import dataclasses
import datetime
import math
import numbers
import re
from collections.abc import Mapping, Set
from typing import Any, Callable

Comparator = Callable[[Any, Any], bool]

_SCALAR_TEXT = (str, bytes)
_TEMPORAL = (datetime.date, datetime.time, datetime.timedelta)


def is_number(value: Any) -> bool:
    """True for real numbers, excluding ``bool``."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_identical(a: Any, b: Any) -> bool:
    """Strict identity without coercion.

    Scalars compare by value within the same kind, so ``1 == 1.0`` holds but
    ``True`` is not ``1`` and NaN is never identical to anything, itself
    included. Every other value compares by object identity.
    """
    if _is_nan(a) or _is_nan(b):
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, _SCALAR_TEXT) and type(a) is type(b):
        return a == b
    return a is b


def is_equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` and ``b`` are structurally equal.

    - Numbers compare by value (``1 == 1.0``) and NaN equals NaN; ``bool`` is
      never equal to a number.
    - Lists and tuples are interchangeable and compare element-wise in order.
    - Mappings compare by key set and values, regardless of order.
    - Compiled patterns compare by pattern and flags.
    - Dates, times and datetimes must be of the same type and equal.
    - Dataclasses and plain objects of the same type compare field-wise.
    - Anything else must be of the same type and ``==``.
    """
    return _equal(a, b, set())


def _equal(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    if a is b:
        return True

    if is_number(a) and is_number(b):
        return a == b or (_is_nan(a) and _is_nan(b))

    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if isinstance(a, _SCALAR_TEXT) or isinstance(b, _SCALAR_TEXT):
        return type(a) is type(b) and a == b

    if isinstance(a, re.Pattern) or isinstance(b, re.Pattern):
        return (
            isinstance(a, re.Pattern)
            and isinstance(b, re.Pattern)
            and a.pattern == b.pattern
            and a.flags == b.flags
        )

    if isinstance(a, _TEMPORAL) or isinstance(b, _TEMPORAL):
        return type(a) is type(b) and a == b

    # A pair already under comparison is assumed equal so cycles terminate.
    key = (id(a), id(b))
    if key in seen:
        return True
    seen.add(key)

    if is_sequence(a) and is_sequence(b):
        return len(a) == len(b) and all(_equal(x, y, seen) for x, y in zip(a, b))

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(_equal(a[k], b[k], seen) for k in a)

    if isinstance(a, Set) and isinstance(b, Set):
        return a == b

    if type(a) is not type(b) or callable(a):
        return False

    if dataclasses.is_dataclass(a) and not isinstance(a, type):
        return all(
            _equal(getattr(a, f.name), getattr(b, f.name), seen)
            for f in dataclasses.fields(a)
            if f.compare
        )

    if type(a).__eq__ is object.__eq__ and hasattr(a, "__dict__"):
        return _equal(vars(a), vars(b), seen)

    return bool(a == b)


__all__ = ["Comparator", "is_equal", "is_identical", "is_number", "is_sequence"]
