import math

import pytest

from core import DivisionByZero, Operation


def test_precedence_tiers():
    assert Operation.MULTIPLY.precedence == 1
    assert Operation.DIVIDE.precedence == 1
    assert Operation.ADD.precedence == 2
    assert Operation.SUBTRACT.precedence == 2


@pytest.mark.parametrize("operation,left,right,expected", [
    (Operation.ADD, 2, 3, 5.0),
    (Operation.SUBTRACT, 2, 3, -1.0),
    (Operation.MULTIPLY, 2.5, 4, 10.0),
    (Operation.DIVIDE, 1, 4, 0.25),
    (Operation.DIVIDE, -9, 3, -3.0),
])
def test_apply(operation, left, right, expected):
    result = operation.apply(left, right)
    assert result == expected
    assert type(result) is float


@pytest.mark.parametrize("divisor", [0, 0.0, -0.0])
def test_divide_by_zero(divisor):
    with pytest.raises(DivisionByZero) as exc:
        Operation.DIVIDE.apply(7, divisor)
    assert exc.value.left == 7.0


def test_zero_divided_by_zero_is_division_by_zero():
    with pytest.raises(DivisionByZero):
        Operation.DIVIDE.apply(0, 0)


def test_overflow_goes_to_infinity():
    assert Operation.MULTIPLY.apply(1e308, 10) == math.inf
    assert Operation.SUBTRACT.apply(-1e308, 1e308) == -math.inf
    assert math.isnan(Operation.SUBTRACT.apply(math.inf, math.inf))


def test_from_symbol_and_aliases():
    assert Operation.from_symbol("+") is Operation.ADD
    assert Operation.from_symbol("x") is Operation.MULTIPLY
    assert Operation.from_symbol("*") is Operation.MULTIPLY
    assert Operation.from_symbol("÷") is Operation.DIVIDE
    assert Operation.from_symbol(":") is Operation.DIVIDE
    assert str(Operation.SUBTRACT) == "-"


def test_from_symbol_unknown():
    with pytest.raises(ValueError):
        Operation.from_symbol("^")


def test_precedence_fixed_after_import(monkeypatch):
    from config.config import OPERATION_CONFIG

    monkeypatch.setitem(OPERATION_CONFIG["precedence"], "x", 5)
    assert Operation.MULTIPLY.precedence == 1
