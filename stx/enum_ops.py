"""Bitwise operations on enumeration members through their integer values."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

E = TypeVar("E", bound=Enum)


def _bit_mask(enum_type: type) -> int:
    """Mask covering every bit used by any member of ``enum_type``."""
    width = max(
        (int(member.value).bit_length() for member in enum_type.__members__.values()),
        default=0,
    )
    return (1 << width) - 1


def enum_uv(a: Enum) -> Any:
    """Return the underlying value of an enumeration member."""
    return a.value


def enum_uv_or(a: E, b: E) -> int:
    """Bitwise OR of the underlying values of two members."""
    return enum_uv(a) | enum_uv(b)


def enum_or(a: E, b: E) -> E:
    """Bitwise OR of two members, as a member of their type."""
    return type(a)(enum_uv_or(a, b))


def enum_uv_and(a: E, b: E) -> int:
    """Bitwise AND of the underlying values of two members."""
    return enum_uv(a) & enum_uv(b)


def enum_and(a: E, b: E) -> E:
    """Bitwise AND of two members, as a member of their type."""
    return type(a)(enum_uv_and(a, b))


def enum_uv_toggle(a: Enum) -> int:
    """Bitwise complement of a member's value, within the bits its type uses."""
    return ~enum_uv(a) & _bit_mask(type(a))


def enum_toggle(a: E) -> E:
    """Bitwise complement of a member, as a member of its type."""
    return type(a)(enum_uv_toggle(a))