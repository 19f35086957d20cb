"""Fluent expectations.

An :class:`Expectation` wraps an observed value so assertions read in a
natural order, without having to remember which argument is the actual value
and which the expected one::

    expect(result).to_exist().to_be_a("number").to_be_less_than(10)

Every predicate returns the expectation itself so checks can be chained.
Misusing a predicate (for instance ordering a string) raises
:class:`~expectly.errors.ExpectationUsageError`; a genuine mismatch raises
:class:`~expectly.errors.ExpectationFailedError`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from typing_extensions import Self

from expectly.assertions import assert_that, require
from expectly.equality import Comparator, is_equal, is_identical, is_number
from expectly.predicates import (
    array_contains,
    function_throws,
    is_a,
    is_array,
    is_classinfo,
    is_function,
    is_object,
    is_regex,
    is_string,
    object_contains,
    string_contains,
)
from expectly.spy import is_spy


def _resolve_include_options(
    compare_values: Comparator | str | None,
    message: str | None,
) -> tuple[Comparator, str | None]:
    """Resolve the optional comparator of ``to_include``/``to_exclude``.

    A string in the comparator slot is the message.
    """
    if isinstance(compare_values, str):
        return is_equal, compare_values
    return compare_values or is_equal, message


class Expectation:
    """Wrapper around an observed value exposing chainable predicates.

    Attributes
    ----------
    actual
        The observed value.
    context
        Only for callable subjects. Object passed as the first positional
        argument when the subject is invoked by a throw predicate, ``None`` for
        no binding.
    args
        Only for callable subjects. Arguments used to invoke it.
    """

    def __init__(self, actual: Any) -> None:
        self.actual = actual

        if is_function(actual):
            self.context: Any = None
            self.args: list[Any] = []

    def __repr__(self) -> str:
        return f"expect({self.actual!r})"

    # Configuration

    def with_context(self, context: Any) -> Self:
        require(
            is_function(self.actual),
            'The "actual" argument in expect(actual).with_context() must be callable',
        )

        self.context = context

        return self

    def with_args(self, *args: Any) -> Self:
        require(
            is_function(self.actual),
            'The "actual" argument in expect(actual).with_args() must be callable',
        )

        if args:
            self.args.extend(args)

        return self

    # Existence

    def to_exist(self, message: str | None = None) -> Self:
        assert_that(
            self.actual,
            message or "Expected %s to exist",
            self.actual,
        )

        return self

    def to_not_exist(self, message: str | None = None) -> Self:
        assert_that(
            not self.actual,
            message or "Expected %s to not exist",
            self.actual,
        )

        return self

    # Identity and equality

    def to_be(self, value: Any, message: str | None = None) -> Self:
        assert_that(
            is_identical(self.actual, value),
            message or "Expected %s to be %s",
            self.actual,
            value,
        )

        return self

    def to_not_be(self, value: Any, message: str | None = None) -> Self:
        assert_that(
            not is_identical(self.actual, value),
            message or "Expected %s to not be %s",
            self.actual,
            value,
        )

        return self

    def to_equal(self, value: Any, message: str | None = None) -> Self:
        assert_that(
            is_equal(self.actual, value),
            message or "Expected %s to equal %s",
            self.actual,
            value,
            diff=(self.actual, value),
        )

        return self

    def to_not_equal(self, value: Any, message: str | None = None) -> Self:
        assert_that(
            not is_equal(self.actual, value),
            message or "Expected %s to not equal %s",
            self.actual,
            value,
        )

        return self

    # Exceptions

    def _check_throw_expected(self, expected: Any, name: str) -> None:
        require(
            is_function(self.actual),
            f'The "actual" argument in expect(actual).{name}() must be callable, %s was given',
            self.actual,
        )

        require(
            expected is None or is_string(expected) or is_regex(expected) or is_classinfo(expected),
            f'The "value" argument in {name}(value) must be an exception class, a string or a '
            "compiled pattern, %s was given",
            expected,
        )

    def to_throw(self, expected: Any = None, message: str | None = None) -> Self:
        self._check_throw_expected(expected, "to_throw")

        thrown = function_throws(self.actual, self.context, self.args, expected)

        if expected is None:
            assert_that(thrown, message or "Expected %s to throw an error", self.actual)
        else:
            assert_that(thrown, message or "Expected %s to throw %s", self.actual, expected)

        return self

    def to_not_throw(self, expected: Any = None, message: str | None = None) -> Self:
        self._check_throw_expected(expected, "to_not_throw")

        thrown = function_throws(self.actual, self.context, self.args, expected)

        if expected is None:
            assert_that(not thrown, message or "Expected %s to not throw an error", self.actual)
        else:
            assert_that(not thrown, message or "Expected %s to not throw %s", self.actual, expected)

        return self

    # Types

    def to_be_a(self, value: type | tuple[type, ...] | str, message: str | None = None) -> Self:
        require(
            is_classinfo(value) or is_string(value),
            'The "value" argument in to_be_a(value) must be a class or a string',
        )

        assert_that(
            is_a(self.actual, value),
            message or "Expected %s to be a %s",
            self.actual,
            value,
        )

        return self

    def to_not_be_a(self, value: type | tuple[type, ...] | str, message: str | None = None) -> Self:
        require(
            is_classinfo(value) or is_string(value),
            'The "value" argument in to_not_be_a(value) must be a class or a string',
        )

        assert_that(
            not is_a(self.actual, value),
            message or "Expected %s to not be a %s",
            self.actual,
            value,
        )

        return self

    # Strings

    def _check_match_args(self, pattern: Any, name: str) -> None:
        require(
            is_string(self.actual),
            f'The "actual" argument in expect(actual).{name}() must be a string',
        )

        require(
            is_regex(pattern),
            f'The "value" argument in {name}(value) must be a compiled pattern',
        )

    def to_match(self, pattern: Any, message: str | None = None) -> Self:
        self._check_match_args(pattern, "to_match")

        assert_that(
            pattern.search(self.actual) is not None,
            message or "Expected %s to match %s",
            self.actual,
            pattern,
        )

        return self

    def to_not_match(self, pattern: Any, message: str | None = None) -> Self:
        self._check_match_args(pattern, "to_not_match")

        assert_that(
            pattern.search(self.actual) is None,
            message or "Expected %s to not match %s",
            self.actual,
            pattern,
        )

        return self

    # Ordering

    def _check_numbers(self, value: Any, name: str) -> None:
        require(
            is_number(self.actual),
            f'The "actual" argument in expect(actual).{name}() must be a number',
        )

        require(
            is_number(value),
            f'The "value" argument in {name}(value) must be a number',
        )

    def to_be_less_than(self, value: Any, message: str | None = None) -> Self:
        self._check_numbers(value, "to_be_less_than")

        assert_that(
            self.actual < value,
            message or "Expected %s to be less than %s",
            self.actual,
            value,
        )

        return self

    def to_be_less_than_or_equal_to(self, value: Any, message: str | None = None) -> Self:
        self._check_numbers(value, "to_be_less_than_or_equal_to")

        assert_that(
            self.actual <= value,
            message or "Expected %s to be less than or equal to %s",
            self.actual,
            value,
        )

        return self

    def to_be_greater_than(self, value: Any, message: str | None = None) -> Self:
        self._check_numbers(value, "to_be_greater_than")

        assert_that(
            self.actual > value,
            message or "Expected %s to be greater than %s",
            self.actual,
            value,
        )

        return self

    def to_be_greater_than_or_equal_to(self, value: Any, message: str | None = None) -> Self:
        self._check_numbers(value, "to_be_greater_than_or_equal_to")

        assert_that(
            self.actual >= value,
            message or "Expected %s to be greater than or equal to %s",
            self.actual,
            value,
        )

        return self

    # Containment

    def _contains(self, value: Any, compare_values: Comparator, name: str) -> bool:
        require(
            is_array(self.actual) or is_object(self.actual) or is_string(self.actual),
            f'The "actual" argument in expect(actual).{name}() must be a list, a tuple, '
            "a mapping or a string",
        )

        if is_array(self.actual):
            return array_contains(self.actual, value, compare_values)
        if is_object(self.actual):
            return object_contains(self.actual, value, compare_values)
        return string_contains(self.actual, value)

    def to_include(
        self,
        value: Any,
        compare_values: Comparator | str | None = None,
        message: str | None = None,
    ) -> Self:
        compare_values, message = _resolve_include_options(compare_values, message)

        assert_that(
            self._contains(value, compare_values, "to_include"),
            message or "Expected %s to include %s",
            self.actual,
            value,
        )

        return self

    def to_exclude(
        self,
        value: Any,
        compare_values: Comparator | str | None = None,
        message: str | None = None,
    ) -> Self:
        compare_values, message = _resolve_include_options(compare_values, message)

        assert_that(
            not self._contains(value, compare_values, "to_exclude"),
            message or "Expected %s to exclude %s",
            self.actual,
            value,
        )

        return self

    # Spies

    def _check_spy(self, name: str) -> None:
        require(
            is_spy(self.actual),
            f'The "actual" argument in expect(actual).{name}() must be a spy',
        )

    def to_have_been_called(self, message: str | None = None) -> Self:
        self._check_spy("to_have_been_called")

        assert_that(
            len(self.actual.calls) > 0,
            message or "spy was not called",
        )

        return self

    def to_not_have_been_called(self, message: str | None = None) -> Self:
        self._check_spy("to_not_have_been_called")

        assert_that(
            len(self.actual.calls) == 0,
            message or "spy was not supposed to be called",
        )

        return self

    def to_have_been_called_with(self, *expected_args: Any, **expected_kwargs: Any) -> Self:
        self._check_spy("to_have_been_called_with")

        expected = list(expected_args)
        matched = any(
            is_equal(call.arguments, expected)
            and is_equal(getattr(call, "keywords", {}), expected_kwargs)
            for call in self.actual.calls
        )

        if expected_kwargs:
            assert_that(matched, "spy was never called with %s and %s", expected, expected_kwargs)
        else:
            assert_that(matched, "spy was never called with %s", expected)

        return self

    # Aliases
    to_be_an = to_be_a
    to_not_be_an = to_not_be_a
    to_be_truthy = to_exist
    to_be_falsy = to_not_exist
    to_be_fewer_than = to_be_less_than
    to_be_more_than = to_be_greater_than
    to_contain = to_include
    to_not_contain = to_exclude


ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "to_be_an": "to_be_a",
        "to_not_be_an": "to_not_be_a",
        "to_be_truthy": "to_exist",
        "to_be_falsy": "to_not_exist",
        "to_be_fewer_than": "to_be_less_than",
        "to_be_more_than": "to_be_greater_than",
        "to_contain": "to_include",
        "to_not_contain": "to_exclude",
    }
)


def expect(actual: Any) -> Expectation:
    """Wrap ``actual`` in an :class:`Expectation`."""
    return Expectation(actual)


__all__ = ["ALIASES", "Expectation", "expect"]
