"""Tokens and a tokenizer for arithmetic expressions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class TokenKind(enum.Enum):
    """The kinds of token an arithmetic expression is made of."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    CARET = "^"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    NUM = "num"
    EOF = "eof"


class OperPrec(enum.IntEnum):
    """Operator precedence levels, from lowest to highest."""

    DEFAULT_ZERO = 0
    ADD_SUB = 1
    MUL_DIV = 2
    POWER = 3
    NEGATIVE = 4


_PRECEDENCE = {
    TokenKind.ADD: OperPrec.ADD_SUB,
    TokenKind.SUBTRACT: OperPrec.ADD_SUB,
    TokenKind.MULTIPLY: OperPrec.MUL_DIV,
    TokenKind.DIVIDE: OperPrec.MUL_DIV,
    TokenKind.CARET: OperPrec.POWER,
}

_SINGLE_CHAR = {
    kind.value: kind
    for kind in TokenKind
    if kind not in (TokenKind.NUM, TokenKind.EOF)
}


@dataclass(frozen=True)
class Token:
    """A single token; ``value`` is set only for numbers."""

    kind: TokenKind
    value: Optional[float] = None

    def oper_prec(self) -> OperPrec:
        """Return the precedence of this token as an operator."""
        return _PRECEDENCE.get(self.kind, OperPrec.DEFAULT_ZERO)


class TokenizeError(ValueError):
    """Raised when the expression holds something that is not a token."""


class Tokenizer:
    """Reads an expression character by character and produces tokens."""

    def __init__(self, expr: str) -> None:
        self._expr = expr
        self._pos = 0

    def _peek(self) -> Optional[str]:
        if self._pos < len(self._expr):
            return self._expr[self._pos]
        return None

    def _advance(self) -> Optional[str]:
        ch = self._peek()
        if ch is not None:
            self._pos += 1
        return ch

    def next_token(self) -> Token:
        """Return the next token; EOF is returned once the input is used up."""
        ch = self._advance()
        if ch is None:
            return Token(TokenKind.EOF)
        if "0" <= ch <= "9":
            return self._read_number(ch)
        kind = _SINGLE_CHAR.get(ch)
        if kind is None:
            raise TokenizeError(f"unexpected character {ch!r} at {self._pos - 1}")
        return Token(kind)

    def _read_number(self, first: str) -> Token:
        start = self._pos - 1
        digits = [first]
        while (ch := self._peek()) is not None:
            if ch.isnumeric() or ch == ".":
                digits.append(ch)
                self._pos += 1
            elif ch == "(":
                raise TokenizeError(f"number directly followed by '(' at {self._pos}")
            else:
                break
        text = "".join(digits)
        try:
            value = float(text)
        except ValueError:
            raise TokenizeError(f"malformed number {text!r} at {start}") from None
        return Token(TokenKind.NUM, value)


def tokenize(expr: str) -> list[Token]:
    """Return all tokens of ``expr``, ending with a single EOF token."""
    tokenizer = Tokenizer(expr)
    tokens = []
    while True:
        token = tokenizer.next_token()
        tokens.append(token)
        if token.kind is TokenKind.EOF:
            return tokens