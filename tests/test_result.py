import pytest

from strawcore.optional import Optional
from strawcore.result import Result, ResultError


def test_ok_state():
    r = Result.ok(7)
    assert r.is_ok()
    assert not r.is_err()
    assert bool(r) is True
    assert r.value() == 7
    assert r.unwrap() == 7


def test_err_state():
    r = Result.err("boom")
    assert r.is_err()
    assert not r.is_ok()
    assert bool(r) is False
    assert r.error() == "boom"


def test_unwrap_on_error_raises():
    r = Result.err("boom")
    with pytest.raises(ResultError):
        r.unwrap()
    with pytest.raises(ResultError):
        r.value()


def test_error_on_ok_raises():
    with pytest.raises(ResultError):
        Result.ok(1).error()


def test_unwrap_or():
    assert Result.ok(3).unwrap_or(9) == 3
    assert Result.err("e").unwrap_or(9) == 9


def test_into_optional():
    assert Result.ok("x").into_optional() == Optional("x")
    assert not Result.err("e").into_optional().has_value()


def test_map_ok_and_err():
    mapped = Result.ok("abc").map(str.upper)
    assert mapped.is_ok()
    assert mapped.unwrap() == "ABC"
    failed = Result.err("bad").map(str.upper)
    assert failed.is_err()
    assert failed.error() == "bad"


def test_void_success():
    r = Result.ok()
    assert r.is_ok()
    assert r.unwrap() is None


def test_equality():
    assert Result.ok(5) == Result.ok(5)
    assert Result.ok(5) != Result.err(5)
    assert Result.ok(5) == 5
    assert Result.err("e") == "e"


def test_direct_construction_rejected():
    with pytest.raises(TypeError):
        Result()