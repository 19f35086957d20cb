"""Tests for the reporter and message templating."""

import pytest

from expectly.assertions import assert_that, format_message, inspect_value, require
from expectly.config import ExpectConfig, config_scope
from expectly.errors import ExpectationError, ExpectationFailedError, ExpectationUsageError


class TestFormatMessage:
    def test_substitutes_in_order(self):
        assert format_message("Expected %s to be %s", 1, 2) == "Expected 1 to be 2"

    def test_strings_are_quoted(self):
        assert format_message("got %s", "abc") == "got 'abc'"

    def test_containers(self):
        assert format_message("%s", {"a": [1, None]}) == "{'a': [1, None]}"

    def test_missing_values_leave_placeholder(self):
        assert format_message("%s and %s", 1) == "1 and %s"

    def test_surplus_values_are_dropped(self):
        assert format_message("plain", 1, 2) == "plain"

    def test_other_percent_sequences_untouched(self):
        assert format_message("100%d %s", 5) == "100%d 5"

    def test_rendering_respects_config(self):
        with config_scope(ExpectConfig(max_string=3)):
            rendered = inspect_value("abcdef")

        assert "abcdef" not in rendered
        assert rendered.startswith("'abc")


class TestAssertThat:
    def test_passes_silently(self):
        assert assert_that(True, "never %s", 1) is None

    def test_raises_failure(self):
        with pytest.raises(ExpectationFailedError) as excinfo:
            assert_that(0, "value was %s", 0)

        assert excinfo.value.message == "value was 0"
        assert str(excinfo.value) == "value was 0"
        assert excinfo.value.diff_enabled is False

    def test_diff_payload(self):
        with pytest.raises(ExpectationFailedError) as excinfo:
            assert_that(False, "mismatch", diff=([1], [2]))

        assert excinfo.value.diff_enabled is True
        assert excinfo.value.actual == [1]
        assert excinfo.value.expected == [2]


class TestRequire:
    def test_passes_silently(self):
        assert require(True, "unused") is None

    def test_raises_usage_error(self):
        with pytest.raises(ExpectationUsageError, match="bad 'x'"):
            require(False, "bad %s", "x")

    def test_error_hierarchy(self):
        assert issubclass(ExpectationUsageError, TypeError)
        assert issubclass(ExpectationUsageError, ExpectationError)
        assert not issubclass(ExpectationUsageError, AssertionError)
        assert issubclass(ExpectationFailedError, AssertionError)
        assert issubclass(ExpectationFailedError, ExpectationError)
