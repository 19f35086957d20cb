"""Structural diffs for diff-enabled failures."""

from __future__ import annotations

import difflib
from typing import Any

from rich.console import Console
from rich.pretty import pretty_repr
from rich.text import Text

from expectly.config import ExpectConfig, get_config
from expectly.errors import ExpectationFailedError

_LINE_STYLES = {"+": "green", "-": "red", "?": "cyan"}


def _lines(value: Any, config: ExpectConfig) -> list[str]:
    if isinstance(value, str):
        return value.splitlines()
    return pretty_repr(
        value,
        max_width=config.max_width,
        max_length=config.max_length,
        max_string=config.max_string,
    ).splitlines()


def render_diff(actual: Any, expected: Any, *, config: ExpectConfig | None = None) -> str:
    """Return an ``ndiff`` of ``expected`` against ``actual``.

    Lines prefixed with ``-`` are expected, ``+`` are actual. Output longer
    than ``config.diff_max_lines`` is truncated with a trailing marker.
    """
    config = config or get_config()
    lines = list(difflib.ndiff(_lines(expected, config), _lines(actual, config)))

    max_lines = config.diff_max_lines
    if max_lines is not None and len(lines) > max_lines:
        kept = lines[: max_lines - 1]
        kept.append(f"... ({len(lines) - len(kept)} more lines truncated)")
        lines = kept

    return "\n".join(lines)


def print_failure(
    error: ExpectationFailedError,
    console: Console | None = None,
    *,
    config: ExpectConfig | None = None,
) -> None:
    """Print a failure message and, for diff-enabled failures, its diff."""
    config = config or get_config()
    console = console or Console(stderr=True)

    console.print(Text(error.message, style="bold red"))
    if not error.diff_enabled:
        return

    console.print(Text("- expected  + actual", style="dim"))
    for line in render_diff(error.actual, error.expected, config=config).splitlines():
        style = _LINE_STYLES.get(line[:1]) if config.diff_color else None
        console.print(Text(line, style=style or ""))


__all__ = ["print_failure", "render_diff"]
