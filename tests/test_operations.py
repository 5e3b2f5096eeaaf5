"""Tests for the integer operation functions."""
import pytest

from calc.operations import add, divide, multiply, subtract


def test_add():
    assert add(1, 2) == 3
    assert add(-1, 1) == 0
    assert add(-2, -3) == -5


def test_subtract():
    assert subtract(5, 3) == 2
    assert subtract(3, 5) == -2
    assert subtract(-1, -3) == 2


def test_multiply():
    assert multiply(7, 0) == 0
    assert multiply(-4, 5) == -20
    assert multiply(-4, -5) == 20


def test_multiply_large_values_do_not_wrap():
    assert multiply(1_000_000, 3000) == 3_000_000_000
    assert multiply(2**62, 4) == 2**64


def test_divide_exact():
    assert divide(10, 2) == 5
    assert divide(-9, -3) == 3


def test_divide_returns_int():
    assert isinstance(divide(7, 2), int)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (-10, 3, -3),
        (1, 4, 0),
        (-1, 4, 0),
        (0, -5, 0),
    ],
)
def test_divide_truncates_toward_zero(a, b, expected):
    assert divide(a, b) == expected


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(5, 0)


def test_divide_zero_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(0, 0)
