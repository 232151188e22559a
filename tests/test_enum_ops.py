import enum

import pytest

from stx.enum_ops import (
    enum_and,
    enum_or,
    enum_toggle,
    enum_uv,
    enum_uv_and,
    enum_uv_or,
    enum_uv_toggle,
)


class Perm(enum.IntFlag):
    R = 1
    W = 2
    X = 4


class Level(enum.IntEnum):
    LOW = 1
    HIGH = 2


def test_enum_uv_returns_value():
    assert enum_uv(Perm.W) == Perm.W.value
    assert enum_uv(Level.HIGH) == Level.HIGH.value


def test_enum_or_matches_flag_union():
    assert enum_or(Perm.R, Perm.W) == Perm.R | Perm.W
    assert isinstance(enum_or(Perm.R, Perm.W), Perm)
    assert enum_uv_or(Perm.R, Perm.W) == int(Perm.R | Perm.W)


def test_enum_or_is_idempotent():
    assert enum_or(Perm.X, Perm.X) == Perm.X


def test_enum_and():
    both = Perm.R | Perm.W
    assert enum_and(both, Perm.W) == Perm.W
    assert enum_uv_and(both, Perm.X) == 0
    assert isinstance(enum_and(both, Perm.W), Perm)


def test_enum_toggle_complements_within_members():
    assert enum_toggle(Perm.R) == Perm.W | Perm.X
    assert enum_uv_toggle(Perm.R) == int(Perm.W | Perm.X)


@pytest.mark.parametrize("member", list(Perm))
def test_enum_toggle_twice_is_identity(member):
    assert enum_toggle(enum_toggle(member)) == member


@pytest.mark.parametrize("member", list(Perm))
def test_toggle_and_original_are_disjoint(member):
    assert enum_uv_and(member, enum_toggle(member)) == 0


def test_int_enum_or_to_invalid_member_raises():
    with pytest.raises(ValueError):
        enum_or(Level.LOW, Level.HIGH)


def test_int_enum_and_of_same_member():
    assert enum_and(Level.HIGH, Level.HIGH) is Level.HIGH