"""Small algorithms built on a stack: base conversion, bracket matching, postfix."""

from __future__ import annotations

import string

_DIGITS = "0123456789ABCDEF"
_OPERANDS = frozenset(string.ascii_letters + string.digits)
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_PAIRS = {")": "(", "]": "[", "}": "{"}


def to_base(n: int, base: int) -> str:
    """Write the non-negative integer ``n`` in ``base`` (2 to 16)."""
    if not 2 <= base <= 16:
        raise ValueError(f"invalid base {base}: must be between 2 and 16")
    if n < 0:
        raise ValueError(f"cannot convert negative number {n}")
    if n == 0:
        return "0"
    stack = []
    while n > 0:
        n, remainder = divmod(n, base)
        stack.append(_DIGITS[remainder])
    return "".join(reversed(stack))


def is_valid_brackets(text: str) -> bool:
    """Return whether every (), [] and {} in ``text`` is properly matched."""
    stack = []
    for ch in text:
        if ch in "([{":
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack.pop() != _PAIRS[ch]:
                return False
    return not stack


def infix_to_postfix(expr: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    stack: list[str] = []
    result: list[str] = []
    for ch in expr:
        if ch in _OPERANDS:
            result.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack:
                top = stack.pop()
                if top == "(":
                    break
                result.append(top)
        elif ch in _PRECEDENCE:
            while (
                stack
                and stack[-1] != "("
                and _PRECEDENCE.get(stack[-1], 0) >= _PRECEDENCE[ch]
            ):
                result.append(stack.pop())
            stack.append(ch)
    result.extend(op for op in reversed(stack) if op != "(")
    return "".join(result)