"""Evaluation of infix expressions by conversion to postfix."""

from __future__ import annotations

from wordcalc.rpn import CalculatorError, RPNCalculator
from wordcalc.stack import Stack

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_OPERAND_CHARS = frozenset("0123456789.")


class MismatchedParenthesesError(CalculatorError):
    """Parentheses in the expression do not pair up."""

    code = 1


class InvalidCharacterError(CalculatorError):
    """The expression holds a character that is not understood."""

    code = 1


def _is_operator(char: str) -> bool:
    return char in _PRECEDENCE


def _should_pop(incoming: str, top: str) -> bool:
    if incoming == "^":
        # Exponentiation is right-associative.
        return _PRECEDENCE[incoming] < _PRECEDENCE[top]
    return _PRECEDENCE[incoming] <= _PRECEDENCE[top]


def to_postfix(expression: str) -> str:
    """Convert an infix expression to a space-separated postfix one.

    Spaces in the input are ignored, so adjacent digits separated only by
    spaces join into one operand.
    """
    operators: Stack[str] = Stack()
    output: list[str] = []

    for char in expression:
        if char == " ":
            continue
        if char in _OPERAND_CHARS:
            output.append(char)
        elif char == "(":
            operators.push(char)
        elif char == ")":
            while operators and operators.peek() != "(":
                output.append(" ")
                output.append(operators.pop())
            if not operators:
                raise MismatchedParenthesesError("unmatched ')'")
            operators.pop()
        elif _is_operator(char):
            output.append(" ")
            while operators and _is_operator(operators.peek()):
                if not _should_pop(char, operators.peek()):
                    break
                output.append(operators.pop())
                output.append(" ")
            operators.push(char)
        else:
            raise InvalidCharacterError(f"invalid character {char!r}")

    while operators:
        output.append(" ")
        top = operators.pop()
        if top == "(":
            raise MismatchedParenthesesError("unmatched '('")
        output.append(top)

    return "".join(output)


class InfixCalculator(RPNCalculator):
    """A calculator for infix expressions such as ``"3 + 4 * 2"``."""

    def evaluate_infix(self, expression: str) -> float:
        """Evaluate an infix expression and return its value."""
        return self.evaluate(to_postfix(expression))