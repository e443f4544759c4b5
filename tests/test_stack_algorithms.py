from collections import Counter

import pytest

from dsalgo.stack_algorithms import infix_to_postfix, is_valid_brackets, to_base


@pytest.mark.parametrize("n, base", [(42, 2), (42, 8), (42, 16), (255, 16), (12345, 7)])
def test_to_base_round_trip(n, base):
    assert int(to_base(n, base), base) == n


def test_to_base_zero():
    assert to_base(0, 10) == "0"


def test_to_base_uses_upper_case_hex():
    assert to_base(255, 16) == "FF"


def test_to_base_decimal_matches_str():
    assert to_base(987654, 10) == str(987654)


@pytest.mark.parametrize("base", [1, 17, 0])
def test_to_base_invalid_base(base):
    with pytest.raises(ValueError):
        to_base(42, base)


def test_to_base_negative_number():
    with pytest.raises(ValueError):
        to_base(-1, 10)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()", True),
        ("{}[]", True),
        ("{[()]}", True),
        ("(]", False),
        ("([)]", False),
        ("{[}", False),
        ("", True),
    ],
)
def test_is_valid_brackets(text, expected):
    assert is_valid_brackets(text) is expected


def test_brackets_ignore_other_characters():
    assert is_valid_brackets("a(b)c") is True
    assert is_valid_brackets("a)b(") is False


def test_postfix_simple():
    assert infix_to_postfix("A + B * C") == "ABC*+"


def test_postfix_parentheses():
    assert infix_to_postfix("(A + B) * C") == "AB+C*"


@pytest.mark.parametrize(
    "expr",
    ["A + B * C + D", "(A + B) * (C + D)", "A * B + C / D", "(A + B) * C"],
)
def test_postfix_keeps_operands_and_operators(expr):
    postfix = infix_to_postfix(expr)
    operands = [ch for ch in expr if ch.isalnum()]
    assert [ch for ch in postfix if ch.isalnum()] == operands
    assert Counter(ch for ch in postfix if ch in "+-*/") == Counter(
        ch for ch in expr if ch in "+-*/"
    )
    assert "(" not in postfix and ")" not in postfix


def test_postfix_single_operand():
    assert infix_to_postfix("x") == "x"