"""Shorthand constructors for ``Option`` values."""

from __future__ import annotations

from typing import Any, TypeVar

from stx.option import Option

T = TypeVar("T")


def make_some(value: T) -> Option[T]:
    """Return an ``Option`` holding ``value``."""
    return Option(value)


def make_none() -> Option[Any]:
    """Return an ``Option`` holding nothing."""
    return Option()