"""Project configuration for value rendering and diffs.

Settings are read from the ``[tool.expectly]`` table of the nearest
``pyproject.toml``::

    [tool.expectly]
    max_width = 100
    max_string = 200
    diff_color = false

A configuration can be overridden for a block of code with
:func:`config_scope`.
"""

from __future__ import annotations

import logging
import tomllib
from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

PYPROJECT_NAME = "pyproject.toml"
TOOL_SECTION = "expectly"


class ExpectConfig(BaseModel):
    """Rendering options for failure messages and diffs.

    Attributes
    ----------
    max_width
        Width used when pretty-printing values into messages.
    max_string
        Truncate rendered strings longer than this, if set.
    max_length
        Truncate rendered containers with more items than this, if set.
    diff_color
        Colourise diffs printed through rich.
    diff_max_lines
        Truncate diffs longer than this many lines, if set.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_width: int = Field(default=80, gt=0)
    max_string: int | None = Field(default=None, gt=0)
    max_length: int | None = Field(default=None, gt=0)
    diff_color: bool = True
    diff_max_lines: int | None = Field(default=200, gt=0)


CONFIG_CONTEXT: ContextVar[ExpectConfig | None] = ContextVar("expect_config", default=None)


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_NAME
        if candidate.is_file():
            return candidate
    return None


def _read_tool_section(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        logger.warning("Ignoring unparsable %s: %s", path, exc)
        return {}
    return data.get("tool", {}).get(TOOL_SECTION, {})


def load_config(start: Path | None = None) -> ExpectConfig:
    """Load configuration from the nearest ``pyproject.toml``.

    Falls back to defaults when no file or no ``[tool.expectly]`` table is
    found.

    Raises
    ------
    pydantic.ValidationError
        If the table holds unknown keys or invalid values.
    """
    path = find_pyproject(start)
    if path is None:
        logger.debug("No %s found, using default configuration", PYPROJECT_NAME)
        return ExpectConfig()

    section = _read_tool_section(path)
    logger.debug("Loaded [tool.%s] from %s: %s", TOOL_SECTION, path, section)
    return ExpectConfig.model_validate(section)


@lru_cache(maxsize=1)
def _project_config() -> ExpectConfig:
    try:
        return load_config()
    except ValidationError as exc:
        logger.warning("Ignoring invalid [tool.%s] configuration: %s", TOOL_SECTION, exc)
        return ExpectConfig()


def get_config() -> ExpectConfig:
    """Return the scoped configuration, else the project one."""
    scoped = CONFIG_CONTEXT.get()
    if scoped is not None:
        return scoped
    return _project_config()


def clear_config_cache() -> None:
    """Forget the cached project configuration."""
    _project_config.cache_clear()


@contextmanager
def config_scope(config: ExpectConfig) -> Iterator[ExpectConfig]:
    token = CONFIG_CONTEXT.set(config)
    try:
        yield config
    finally:
        CONFIG_CONTEXT.reset(token)


__all__ = [
    "CONFIG_CONTEXT",
    "ExpectConfig",
    "clear_config_cache",
    "config_scope",
    "find_pyproject",
    "get_config",
    "load_config",
]
