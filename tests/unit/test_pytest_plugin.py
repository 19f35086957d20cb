"""Tests for the pytest report hook."""

from types import SimpleNamespace

from expectly import ExpectationFailedError
from expectly.pytest_plugin import DIFF_SECTION, pytest_runtest_makereport


def _run_hook(excinfo):
    report = SimpleNamespace(sections=[])
    outcome = SimpleNamespace(get_result=lambda: report)
    call = SimpleNamespace(excinfo=excinfo)

    hook = pytest_runtest_makereport(item=None, call=call)
    next(hook)
    try:
        hook.send(outcome)
    except StopIteration:
        pass
    return report


def test_adds_diff_section_for_diff_enabled_failures():
    error = ExpectationFailedError("boom", diff_enabled=True, actual=[1], expected=[2])

    report = _run_hook(SimpleNamespace(value=error))

    assert len(report.sections) == 1
    title, body = report.sections[0]
    assert title == DIFF_SECTION
    assert "- [2]" in body
    assert "+ [1]" in body


def test_ignores_failures_without_diff():
    report = _run_hook(SimpleNamespace(value=ExpectationFailedError("boom")))

    assert report.sections == []


def test_ignores_passing_tests():
    report = _run_hook(None)

    assert report.sections == []


def test_ignores_other_exceptions():
    report = _run_hook(SimpleNamespace(value=ValueError("x")))

    assert report.sections == []
