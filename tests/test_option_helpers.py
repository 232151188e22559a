import pytest

from stx.option import Option, PanicError
from stx.option_helpers import make_none, make_some


def test_make_some_equals_some():
    m = make_some(9)
    assert m == Option(9)
    assert m.is_some()


def test_make_some_keeps_identity():
    payload = [1, 2, 3]
    assert make_some(payload).unwrap() is payload


def test_make_some_of_python_none_is_some():
    opt = make_some(None)
    assert opt.is_some()
    assert opt.unwrap() is None


def test_make_none_is_none():
    m = make_none()
    assert m.is_none()
    assert m == Option()


def test_make_none_unwrap_raises():
    with pytest.raises(PanicError):
        make_none().unwrap()


def test_make_some_and_make_none_differ():
    assert not (make_some(4) == make_none())
    assert make_some(4).unwrap_or(20) == 4
    assert make_none().unwrap_or(20) == 20


def test_make_none_gives_fresh_objects():
    a = make_none()
    b = make_none()
    a.replace(3)
    assert a == Option(3)
    assert b.is_none()