"""Spies: callables that record how they were called.

A spy is recognised by capability, not by type: any object whose
``__is_spy__`` attribute is ``True`` and which exposes ``calls`` is accepted
by the spy predicates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CallRecord:
    """A single recorded invocation.

    Attributes
    ----------
    context
        Bound object the spy was called through, if any.
    arguments
        Positional arguments, in order.
    keywords
        Keyword arguments.
    """

    context: Any = None
    arguments: list[Any] = field(default_factory=list)
    keywords: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class SpyLike(Protocol):
    """Interface read by the spy predicates."""

    calls: list[CallRecord]


def _noop(*args: Any, **kwargs: Any) -> None:
    return None


class Spy:
    """Callable that records its calls and delegates to a configurable behaviour."""

    __is_spy__ = True

    def __init__(
        self,
        fn: Callable[..., Any] | None = None,
        restore: Callable[[], None] | None = None,
    ) -> None:
        self.calls: list[CallRecord] = []
        self._original: Callable[..., Any] = fn or _noop
        self._behaviour = self._original
        self._restore = restore or _noop
        self.name = getattr(fn, "__name__", "spy")

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append(CallRecord(arguments=list(args), keywords=dict(kwargs)))
        return self._behaviour(*args, **kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return _BoundSpy(self, instance)

    def __repr__(self) -> str:
        return f"<Spy {self.name} calls={len(self.calls)}>"

    def and_call(self, fn: Callable[..., Any]) -> Spy:
        """Delegate future calls to ``fn``."""
        self._behaviour = fn
        return self

    def and_call_through(self) -> Spy:
        """Delegate future calls back to the wrapped function."""
        return self.and_call(self._original)

    def and_return(self, value: Any) -> Spy:
        return self.and_call(lambda *args, **kwargs: value)

    def and_throw(self, error: BaseException) -> Spy:
        def throw(*args: Any, **kwargs: Any) -> Any:
            raise error

        return self.and_call(throw)

    def get_last_call(self) -> CallRecord | None:
        return self.calls[-1] if self.calls else None

    def reset(self) -> Spy:
        self.calls.clear()
        return self

    def restore(self) -> None:
        self._restore()

    def destroy(self) -> None:
        self.restore()
        self.reset()


class _BoundSpy:
    """A spy accessed through an instance, recording that instance as context."""

    __is_spy__ = True

    def __init__(self, spy: Spy, instance: Any) -> None:
        self._spy = spy
        self._instance = instance

    @property
    def calls(self) -> list[CallRecord]:
        return self._spy.calls

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self._spy.calls.append(
            CallRecord(context=self._instance, arguments=list(args), keywords=dict(kwargs))
        )
        return self._spy._behaviour(self._instance, *args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._spy, name)


_spies: list[Spy] = []


def is_spy(value: Any) -> bool:
    """True if ``value`` exposes the spy capability."""
    return getattr(value, "__is_spy__", False) is True and isinstance(value, SpyLike)


def create_spy(
    fn: Callable[..., Any] | None = None,
    restore: Callable[[], None] | None = None,
) -> Spy:
    """Create a spy, optionally calling through to ``fn``.

    Passing an existing spy returns it unchanged.
    """
    if is_spy(fn):
        return fn  # type: ignore[return-value]
    return Spy(fn, restore)


def spy_on(target: Any, name: str) -> Spy:
    """Replace ``target.name`` with a spy that calls through to the original.

    The original attribute is put back by :meth:`Spy.restore` or
    :func:`restore_spies`.
    """
    original = getattr(target, name)
    if is_spy(original):
        return original

    had_own = name in vars(target)
    raw = vars(target)[name] if had_own else None

    def restore() -> None:
        if vars(target).get(name) is not installed:
            return
        if had_own:
            setattr(target, name, raw)
        else:
            delattr(target, name)
        logger.debug("Restored %s on %r", name, target)

    spy = Spy(original, restore)
    # Static and class methods are already resolved in `original`; keep the
    # spy from binding an instance.
    installed: Any = staticmethod(spy) if isinstance(raw, (staticmethod, classmethod)) else spy
    setattr(target, name, installed)
    _spies.append(spy)
    logger.debug("Installed spy for %s on %r", name, target)
    return spy


def restore_spies() -> None:
    """Restore every attribute replaced by :func:`spy_on`."""
    while _spies:
        _spies.pop().destroy()


__all__ = ["CallRecord", "Spy", "SpyLike", "create_spy", "is_spy", "restore_spies", "spy_on"]
