"""Message templating for assertion failures."""

from __future__ import annotations

import re
from typing import Any

from rich.pretty import pretty_repr

from expectly.config import ExpectConfig, get_config

PLACEHOLDER = "%s"
_PLACEHOLDER_RE = re.compile(re.escape(PLACEHOLDER))


def inspect_value(value: Any, config: ExpectConfig | None = None) -> str:
    """Render a value for inclusion in a failure message.

    Strings come out quoted, everything else goes through rich's pretty
    printer, bounded by the active configuration.
    """
    config = config or get_config()
    return pretty_repr(
        value,
        max_width=config.max_width,
        max_length=config.max_length,
        max_string=config.max_string,
    )


def format_message(template: str, *values: Any, config: ExpectConfig | None = None) -> str:
    """Substitute each ``%s`` in ``template`` with the next rendered value.

    Placeholders without a matching value are left as-is and surplus values
    are dropped.
    """
    rendered = iter([inspect_value(value, config) for value in values])
    return _PLACEHOLDER_RE.sub(lambda match: next(rendered, match.group(0)), template)


__all__ = ["PLACEHOLDER", "format_message", "inspect_value"]
