"""Infix arithmetic on single digits and bracket matching."""

from __future__ import annotations

_OPERATIONS = {
    "+": lambda a, b: a + b,
    "*": lambda a, b: a * b,
}

_PAIRS = {")": "(", "]": "[", "}": "{"}


def _apply(op: str, operands: list[int]) -> None:
    if len(operands) < 2:
        raise ValueError(f"operator {op!r} lacks an operand")
    a = operands.pop()
    b = operands.pop()
    operands.append(_OPERATIONS[op](a, b))


def evaluate(expression: str) -> int:
    """Evaluate an expression of single digits, ``+``, ``*`` and parentheses.

    ``*`` binds tighter than ``+``; any other character is ignored.
    """
    operators: list[str] = []
    operands: list[int] = []
    for ch in expression:
        if "0" <= ch <= "9":
            operands.append(int(ch))
        elif ch == "(":
            operators.append(ch)
        elif ch == ")":
            while operators and operators[-1] != "(":
                _apply(operators.pop(), operands)
            if not operators:
                raise ValueError("unmatched ')'")
            operators.pop()
        elif ch == "+":
            while operators and operators[-1] != "(":
                _apply(operators.pop(), operands)
            operators.append(ch)
        elif ch == "*":
            while operators and operators[-1] == "*":
                _apply(operators.pop(), operands)
            operators.append(ch)
    while operators:
        op = operators.pop()
        if op == "(":
            raise ValueError("unmatched '('")
        _apply(op, operands)
    if not operands:
        raise ValueError("empty expression")
    return operands[-1]


def is_balanced(text: str) -> bool:
    """Return whether the brackets ``()[]{}`` in ``text`` nest correctly."""
    stack: list[str] = []
    for ch in text:
        if ch in "([{":
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack[-1] != _PAIRS[ch]:
                return False
            stack.pop()
    return not stack