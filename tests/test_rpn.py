import pytest
from hypothesis import given
from hypothesis import strategies as st

from wordcalc.rpn import (
    CalculatorError,
    DivisionByZeroError,
    InsufficientOperandsError,
    RPNCalculator,
    TooManyOperandsError,
    parse_number,
)

_ints = st.integers(min_value=-10**6, max_value=10**6)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42.0), ("-3.5", -3.5), (".5", 0.5), ("7.", 7.0), ("-0", 0.0)],
)
def test_parse_number_valid(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "-", ".", "+", "1.2.3", "abc", "1e5", "+4"])
def test_parse_number_invalid(text):
    with pytest.raises(ValueError):
        parse_number(text)


def test_documented_example():
    assert RPNCalculator().evaluate("3 2 5 * +") == 13.0


def test_extra_spaces_ignored():
    assert RPNCalculator().evaluate("  4   5  +  ") == 9.0


def test_single_number():
    assert RPNCalculator().evaluate("-2.5") == -2.5


@given(_ints, _ints)
def test_addition(a, b):
    assert RPNCalculator().evaluate(f"{a} {b} +") == a + b


@given(_ints, _ints)
def test_subtraction(a, b):
    assert RPNCalculator().evaluate(f"{a} {b} -") == a - b


@given(_ints, _ints)
def test_multiplication(a, b):
    assert RPNCalculator().evaluate(f"{a} {b} *") == a * b


@given(_ints, _ints.filter(lambda n: n != 0))
def test_division(a, b):
    assert RPNCalculator().evaluate(f"{a} {b} /") == a / b


@pytest.mark.parametrize("expression", ["", "   ", "+", "1 +"])
def test_insufficient_operands(expression):
    with pytest.raises(InsufficientOperandsError) as excinfo:
        RPNCalculator().evaluate(expression)
    assert excinfo.value.code == 1


def test_too_many_operands():
    with pytest.raises(TooManyOperandsError) as excinfo:
        RPNCalculator().evaluate("1 2")
    assert excinfo.value.code == 2


@pytest.mark.parametrize("expression", ["1 0 /", "5 -0 /", "4 2 2 - /"])
def test_division_by_zero(expression):
    with pytest.raises(DivisionByZeroError) as excinfo:
        RPNCalculator().evaluate(expression)
    assert excinfo.value.code == 3


def test_unknown_operator_is_error():
    with pytest.raises(InsufficientOperandsError):
        RPNCalculator().evaluate("2 3 ^")


def test_errors_share_base_class():
    with pytest.raises(CalculatorError):
        RPNCalculator().evaluate("1 2 3 +")


def test_operator_judged_by_first_character():
    calc = RPNCalculator()
    assert calc.evaluate("6 3 -x") == calc.evaluate("6 3 -")


def test_long_token_truncated():
    calc = RPNCalculator()
    assert calc.evaluate("1" * 40) == float("1" * 31)


def test_calculator_reusable_after_error():
    calc = RPNCalculator()
    with pytest.raises(TooManyOperandsError):
        calc.evaluate("1 2")
    assert calc.evaluate("4") == 4.0