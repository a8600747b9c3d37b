"""Stack-based expression tools: notation conversion, evaluation and bracket matching."""

from __future__ import annotations

from collections.abc import Iterable

_OPERATORS = frozenset("+-*/")
_SIMPLE_PRECEDENCE = {"*": 3, "/": 3, "+": 2, "-": 2}
_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())
_SWAP_PARENS = str.maketrans("()", ")(")


class ExpressionError(ValueError):
    """Raised for a malformed expression."""


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def simple_infix_to_postfix(infix: str) -> str:
    """Convert an infix expression without parentheses to postfix.

    Every character that is not one of ``+ - * /`` is copied as an operand.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in infix:
        if ch not in _OPERATORS:
            output.append(ch)
            continue
        while stack and _SIMPLE_PRECEDENCE[ch] <= _SIMPLE_PRECEDENCE[stack[-1]]:
            output.append(stack.pop())
        stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def _pops_before(top: str, incoming: str) -> bool:
    if top in "*/":
        return True
    if top in "+-":
        return incoming not in "*/"
    return False


def to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError(f"unmatched ')' in {expression!r}")
            stack.pop()
        elif ch in _OPERATORS:
            while stack and _pops_before(stack[-1], ch):
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ExpressionError(f"unexpected character {ch!r} in {expression!r}")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError(f"unmatched '(' in {expression!r}")
        output.append(top)
    return "".join(output)


def to_prefix(expression: str) -> str:
    """Convert an infix expression of single-character operands to prefix."""
    mirrored = expression[::-1].translate(_SWAP_PARENS)
    return to_postfix(mirrored)[::-1]


def _apply(op: str, left: int, right: int) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _evaluate(tokens: Iterable[str], expression: str, operands_reversed: bool) -> int:
    stack: list[int] = []
    for ch in tokens:
        if _is_digit(ch):
            stack.append(int(ch))
        elif ch in _OPERATORS:
            if len(stack) < 2:
                raise ExpressionError(f"operator {ch!r} lacks operands in {expression!r}")
            first = stack.pop()
            second = stack.pop()
            if operands_reversed:
                stack.append(_apply(ch, first, second))
            else:
                stack.append(_apply(ch, second, first))
        else:
            raise ExpressionError(f"unexpected character {ch!r} in {expression!r}")
    if len(stack) != 1:
        raise ExpressionError(f"malformed expression {expression!r}")
    return stack[0]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits; division truncates toward zero."""
    return _evaluate(expression, expression, operands_reversed=False)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single digits; division truncates toward zero."""
    return _evaluate(reversed(expression), expression, operands_reversed=True)


def brackets_balanced(expression: str) -> bool:
    """Return True if ``()``, ``[]`` and ``{}`` are properly nested and matched."""
    stack: list[str] = []
    for ch in expression:
        if ch in _OPENING:
            stack.append(ch)
        elif ch in _CLOSING:
            if not stack or stack.pop() != _CLOSING[ch]:
                return False
    return not stack


def parentheses_balanced(expression: str) -> bool:
    """Return True if round parentheses are matched; other characters are ignored."""
    depth = 0
    for ch in expression:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0