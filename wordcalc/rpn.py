"""Evaluation of expressions in reverse Polish notation."""

from __future__ import annotations

import operator
import re
from typing import Callable, Dict

from wordcalc.stack import Stack

_NUMBER = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_MAX_TOKEN_LENGTH = 31

_OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


class CalculatorError(Exception):
    """An expression could not be evaluated."""

    code = 0


class InsufficientOperandsError(CalculatorError):
    """An operator lacked operands, or a token was not understood."""

    code = 1


class TooManyOperandsError(CalculatorError):
    """More than one value was left after evaluation."""

    code = 2


class DivisionByZeroError(CalculatorError):
    """A division had zero as its divisor."""

    code = 3


def parse_number(text: str) -> float:
    """Parse an optionally negative decimal number without exponent.

    Raises ValueError when ``text`` is not such a number.
    """
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    return float(text)


class RPNCalculator:
    """A calculator for space-separated postfix expressions."""

    def __init__(self) -> None:
        self._stack: Stack[float] = Stack()

    def evaluate(self, expression: str) -> float:
        """Evaluate a postfix expression such as ``"3 2 5 * +"``."""
        self._stack = Stack()
        for token in expression.split(" "):
            if token:
                self._apply(token[:_MAX_TOKEN_LENGTH])
        if self._stack.is_empty():
            raise InsufficientOperandsError("expression produced no result")
        result = self._stack.pop()
        if not self._stack.is_empty():
            raise TooManyOperandsError("operands left over after evaluation")
        return result

    def _apply(self, token: str) -> None:
        try:
            self._stack.push(parse_number(token))
            return
        except ValueError:
            pass
        right = self._pop_operand(token)
        left = self._pop_operand(token)
        symbol = token[0]
        function = _OPERATORS.get(symbol)
        if function is None:
            raise InsufficientOperandsError(f"invalid token {token!r}")
        if symbol == "/" and right == 0:
            raise DivisionByZeroError("division by zero")
        self._stack.push(function(left, right))

    def _pop_operand(self, token: str) -> float:
        if self._stack.is_empty():
            raise InsufficientOperandsError(f"not enough operands for {token!r}")
        return self._stack.pop()