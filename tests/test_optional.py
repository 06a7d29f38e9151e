import pytest

from strawcore.optional import (
    EmptyOptionalError,
    NullType,
    NullValue,
    Optional,
    non_max,
    non_zero,
)


def test_empty_optional_has_no_value():
    opt = Optional()
    assert opt.has_value() is False
    assert not opt
    with pytest.raises(EmptyOptionalError):
        opt.value()


def test_value_returns_held_value():
    opt = Optional("abc")
    assert opt.has_value()
    assert opt.value() == "abc"
    assert opt.value() == "abc"


def test_too_many_arguments():
    with pytest.raises(TypeError):
        Optional(1, 2)


def test_none_is_empty():
    assert Optional(None).has_value() is False


def test_unwrap_empties():
    opt = Optional(7)
    assert opt.unwrap() == 7
    assert not opt.has_value()
    with pytest.raises(EmptyOptionalError):
        opt.unwrap()


def test_unwrap_or_and_value_or():
    full = Optional(3)
    empty = Optional()
    assert full.unwrap_or(9) == 3
    assert full.has_value()
    assert empty.unwrap_or(9) == 9
    assert full.value_or(9) == 3
    assert empty.value_or(9) == 9


def test_emplace_and_reset():
    opt = Optional()
    opt.emplace(4)
    assert opt.value() == 4
    opt.emplace(5)
    assert opt.value() == 5
    opt.reset()
    assert not opt.has_value()


def test_map():
    assert Optional(2).map(lambda x: x * 10) == Optional(20)
    assert Optional().map(lambda x: x * 10).has_value() is False


def test_and_then():
    assert Optional(2).and_then(lambda x: Optional(x + 1)) == Optional(3)
    assert Optional(2).and_then(lambda x: Optional()).has_value() is False
    assert Optional().and_then(lambda x: Optional(x)).has_value() is False


def test_and_then_requires_optional():
    with pytest.raises(TypeError):
        Optional(2).and_then(lambda x: x)


def test_flatten():
    assert Optional(Optional(5)).flatten() == Optional(5)
    assert Optional().flatten().has_value() is False
    with pytest.raises(TypeError):
        Optional(5).flatten()


def test_cast():
    assert Optional(3).cast(str) == Optional("3")
    assert Optional().cast(str).has_value() is False


def test_equality_between_optionals():
    assert Optional() == Optional()
    assert Optional(1) == Optional(1)
    assert Optional(1) != Optional(2)
    assert Optional(1) != Optional()


def test_equality_with_raw_value():
    assert Optional(1) == 1
    assert 1 == Optional(1)
    assert Optional() != 1
    assert not (Optional() == 1)


def test_ordering_between_optionals():
    assert Optional() < Optional(1)
    assert Optional(1) > Optional()
    assert Optional(1) < Optional(2)
    assert Optional() <= Optional()
    assert Optional() >= Optional()
    assert not (Optional() < Optional())
    assert not (Optional() > Optional())


def test_ordering_with_raw_value():
    assert Optional() < 5
    assert Optional() <= 5
    assert not (Optional() > 5)
    assert not (Optional() >= 5)
    assert Optional(6) > 5
    assert Optional(5) >= 5


def test_null_type_instances_collapse_in_a_set():
    first = NullType()
    second = NullType()
    assert len({first, second}) == 1
    assert [first].count(second) == 1


def test_null_value_truthiness():
    assert not NullValue(0)
    assert NullValue(0, 3)
    assert NullValue(0).is_null()
    assert NullValue(0, 3) == 3


def test_null_value_increment_decrement():
    nv = NullValue(0, 1)
    assert nv.decrement() is nv
    assert nv.is_null()
    nv.increment()
    assert int(nv) == 1


def test_non_zero():
    assert non_zero().is_null()
    assert non_zero(4) == 4
    assert not non_zero(4).is_null()


def test_non_max():
    assert non_max(bits=8).null == 255
    assert non_max(255, 8).is_null()
    assert not non_max(0, 8).is_null()
    with pytest.raises(ValueError):
        non_max(0, 0)


def test_optional_of_null_value():
    assert Optional(non_zero(0)).has_value() is False
    opt = Optional(non_zero(6))
    assert opt.value() == 6
    assert opt.unwrap() == 6
    assert not opt.has_value()