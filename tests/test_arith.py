import pytest
from hypothesis import given, strategies as st

from romanparsec.Arith import (
    INT64_MAX, INT64_MIN, check_int64, checked_add, checked_div, checked_mul,
    checked_neg, checked_sub,
)
from romanparsec.Errors import ArithmeticOverflow, DivisionByZero
from romanparsec.Language import DivisionMode

int64s = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)


def fits(v):
    return INT64_MIN <= v <= INT64_MAX


@given(int64s, int64s)
def test_checked_add(a, b):
    if fits(a + b):
        assert checked_add(a, b) == a + b
    else:
        with pytest.raises(ArithmeticOverflow):
            checked_add(a, b)


@given(int64s, int64s)
def test_checked_sub(a, b):
    if fits(a - b):
        assert checked_sub(a, b) == a - b
    else:
        with pytest.raises(ArithmeticOverflow):
            checked_sub(a, b)


@given(int64s, int64s)
def test_checked_mul(a, b):
    if fits(a * b):
        assert checked_mul(a, b) == a * b
    else:
        with pytest.raises(ArithmeticOverflow):
            checked_mul(a, b)


@pytest.mark.parametrize("a, b", [
    (INT64_MIN, 1), (1, INT64_MIN), (INT64_MIN // 2, 2), (-(2 ** 31), 2 ** 32),
    (INT64_MAX, -1), (-3074457345618258602, 3),
])
def test_checked_mul_edges_in_range(a, b):
    assert checked_mul(a, b) == a * b


@pytest.mark.parametrize("a, b", [
    (INT64_MIN, -1), (-1, INT64_MIN), (2 ** 32, 2 ** 31), (-3074457345618258603, 3),
    (10 ** 18, 1000),
])
def test_checked_mul_edges_overflow(a, b):
    with pytest.raises(ArithmeticOverflow):
        checked_mul(a, b)


def test_checked_neg():
    assert checked_neg(5) == -5
    assert checked_neg(INT64_MAX) == -INT64_MAX
    with pytest.raises(ArithmeticOverflow):
        checked_neg(INT64_MIN)


@pytest.mark.parametrize("a, b, floor, trunc", [
    (5, 2, 2, 2),
    (-5, 2, -3, -2),
    (5, -2, -3, -2),
    (-5, -2, 2, 2),
    (6, -3, -2, -2),
    (0, -7, 0, 0),
])
def test_checked_div_modes(a, b, floor, trunc):
    assert checked_div(a, b) == floor
    assert checked_div(a, b, DivisionMode.FLOOR) == floor
    assert checked_div(a, b, DivisionMode.TRUNCATE) == trunc


def test_checked_div_by_zero():
    with pytest.raises(DivisionByZero):
        checked_div(1, 0)
    with pytest.raises(DivisionByZero):
        checked_div(0, 0, DivisionMode.TRUNCATE)


def test_checked_div_overflow():
    with pytest.raises(ArithmeticOverflow):
        checked_div(INT64_MIN, -1)
    assert checked_div(INT64_MIN, 1) == INT64_MIN


def test_check_int64():
    assert check_int64(INT64_MAX) == INT64_MAX
    with pytest.raises(ArithmeticOverflow):
        check_int64(INT64_MAX + 1, "numeral")
