"""pytest plugin attaching structural diffs to expectation failures.

Loaded automatically through the ``pytest11`` entry point.
"""

from __future__ import annotations

from typing import Any

import pytest

from expectly.diff import render_diff
from expectly.errors import ExpectationFailedError

DIFF_SECTION = "expectly diff (- expected, + actual)"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[Any]):
    outcome = yield
    report = outcome.get_result()

    if call.excinfo is None:
        return

    error = call.excinfo.value
    if isinstance(error, ExpectationFailedError) and error.diff_enabled:
        report.sections.append((DIFF_SECTION, render_diff(error.actual, error.expected)))
