"""Syntax tree nodes for arithmetic expressions and their evaluation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Negative:
    operand: "Node"


@dataclass(frozen=True)
class Add:
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Subtract:
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Multiply:
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Divide:
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Caret:
    left: "Node"
    right: "Node"


Node = Union[Number, Negative, Add, Subtract, Multiply, Divide, Caret]


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def _divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _power(base: float, exponent: float) -> float:
    if base == 0 and exponent < 0:
        if _is_odd_integer(exponent):
            return math.copysign(math.inf, base)
        return math.inf
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def evaluate(node: Node) -> float:
    """Compute the numeric value of an expression tree (IEEE float semantics)."""
    match node:
        case Number(value):
            return float(value)
        case Negative(operand):
            return -evaluate(operand)
        case Add(left, right):
            return evaluate(left) + evaluate(right)
        case Subtract(left, right):
            return evaluate(left) - evaluate(right)
        case Multiply(left, right):
            return evaluate(left) * evaluate(right)
        case Divide(left, right):
            return _divide(evaluate(left), evaluate(right))
        case Caret(left, right):
            return _power(evaluate(left), evaluate(right))
    raise TypeError(f"not an expression node: {node!r}")