"""Evaluation of postfix expressions over single-digit operands."""

from __future__ import annotations


class PostfixError(ValueError):
    """Raised for a malformed postfix expression or an unknown operator."""


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def apply_operator(left: int, right: int, operator: str) -> int:
    """Apply a binary operator; ``/`` truncates toward zero and ``^`` is bitwise xor."""
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return _truncating_div(left, right)
    if operator == "^":
        return left ^ right
    raise PostfixError(f"unknown operator {operator!r}")


OPERATORS = frozenset("+-*/^")


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression whose operands are single digits.

    Whitespace is ignored. The value on top of the stack at the end is returned.
    """
    stack: list[int] = []
    for char in expression:
        if char.isspace():
            continue
        if char in OPERATORS:
            if len(stack) < 2:
                raise PostfixError(f"operator {char!r} needs two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_operator(left, right, char))
        elif "0" <= char <= "9":
            stack.append(ord(char) - ord("0"))
        else:
            raise PostfixError(f"unexpected character {char!r}")
    if not stack:
        raise PostfixError("empty expression")
    return stack[-1]