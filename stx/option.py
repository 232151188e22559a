"""An optional value that is either ``Some`` holding a value, or ``None``."""

from __future__ import annotations

import copy as _copy
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_NOTHING: Any = object()


class PanicError(Exception):
    """Raised when an operation meets a state it cannot handle."""


class Option(Generic[T]):
    """Either ``Some`` carrying a value, or ``None`` carrying nothing.

    ``Option(value)`` builds a ``Some``; ``Option()`` builds a ``None``.
    Python's ``None`` is a valid value, so ``Option(None)`` is a ``Some``.
    """

    __slots__ = ("_is_some", "_value")

    def __init__(self, value: T = _NOTHING) -> None:
        if value is _NOTHING:
            self._is_some = False
            self._value: Any = None
        else:
            self._is_some = True
            self._value = value

    def is_some(self) -> bool:
        """Return True if this option holds a value."""
        return self._is_some

    def is_none(self) -> bool:
        """Return True if this option holds no value."""
        return not self._is_some

    def __bool__(self) -> bool:
        return self._is_some

    def contains(self, cmp: Any) -> bool:
        """Return True if this is a ``Some`` whose value equals ``cmp``."""
        return self._is_some and self._value == cmp

    def exists(self, predicate: Callable[[T], Any]) -> bool:
        """Return the predicate's verdict on the value, or False for ``None``."""
        return self._is_some and bool(predicate(self._value))

    def value(self) -> T:
        """Return the contained value itself, without copying it."""
        if not self._is_some:
            raise PanicError("value accessed on an Option that is None")
        return self._value

    def expect(self, msg: str) -> T:
        """Return the contained value, or raise PanicError carrying ``msg``."""
        if not self._is_some:
            raise PanicError(msg)
        return self._value

    def unwrap(self) -> T:
        """Return the contained value, or raise PanicError for ``None``."""
        if not self._is_some:
            raise PanicError("called unwrap on an Option that is None")
        return self._value

    def unwrap_or(self, alt: T) -> T:
        """Return the contained value, or ``alt``."""
        return self._value if self._is_some else alt

    def unwrap_or_else(self, op: Callable[[], T]) -> T:
        """Return the contained value, or the result of calling ``op``."""
        return self._value if self._is_some else op()

    def map(self, op: Callable[[T], U]) -> Option[U]:
        """Apply ``op`` to the contained value, keeping ``None`` as it is."""
        if self._is_some:
            return Option(op(self._value))
        return Option()

    def map_or(self, op: Callable[[T], U], alt: U) -> U:
        """Apply ``op`` to the contained value, or return ``alt``."""
        return op(self._value) if self._is_some else alt

    def map_or_else(self, op: Callable[[T], U], alt_fn: Callable[[], U]) -> U:
        """Apply ``op`` to the contained value, or return ``alt_fn()``."""
        return op(self._value) if self._is_some else alt_fn()

    def and_(self, cmp: Option[U]) -> Option[U]:
        """Return ``None`` if this is ``None``, otherwise ``cmp``."""
        return cmp if self._is_some else Option()

    def and_then(self, op: Callable[[T], Option[U]]) -> Option[U]:
        """Return ``None`` if this is ``None``, otherwise ``op(value)``."""
        return op(self._value) if self._is_some else Option()

    def filter(self, predicate: Callable[[T], Any]) -> Option[T]:
        """Keep the value only if ``predicate`` holds for it."""
        if self._is_some and predicate(self._value):
            return Option(self._value)
        return Option()

    def or_(self, alt: Option[T]) -> Option[T]:
        """Return this option if it holds a value, otherwise ``alt``."""
        return Option(self._value) if self._is_some else alt

    def or_else(self, op: Callable[[], Option[T]]) -> Option[T]:
        """Return this option if it holds a value, otherwise ``op()``."""
        return Option(self._value) if self._is_some else op()

    def take(self) -> Option[T]:
        """Move the value out, leaving ``None`` in its place."""
        if not self._is_some:
            return Option()
        taken = Option(self._value)
        self._is_some = False
        self._value = None
        return taken

    def replace(self, replacement: T) -> Option[T]:
        """Put ``replacement`` in place, returning the old option."""
        old = self.take()
        self._is_some = True
        self._value = replacement
        return old

    def expect_none(self, msg: str) -> None:
        """Raise PanicError carrying ``msg`` if this option holds a value."""
        if self._is_some:
            raise PanicError(msg)

    def unwrap_none(self) -> None:
        """Raise PanicError if this option holds a value."""
        if self._is_some:
            raise PanicError("called unwrap_none on an Option that is Some")

    def unwrap_or_default(self, default_factory: Callable[[], T]) -> T:
        """Return the contained value, or a default made by ``default_factory``."""
        return self._value if self._is_some else default_factory()

    def match(self, some_fn: Callable[[T], R], none_fn: Callable[[], R]) -> R:
        """Call ``some_fn`` with the value, or ``none_fn`` with nothing."""
        return some_fn(self._value) if self._is_some else none_fn()

    def copy(self) -> Option[T]:
        """Return an independent copy of the option and its contents."""
        if self._is_some:
            return Option(_copy.deepcopy(self._value))
        return Option()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self._is_some and other._is_some:
            return bool(self._value == other._value)
        return self._is_some == other._is_some

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._is_some:
            return f"Some({self._value!r})"
        return "None"