import pytest

from dsalgo.lexer import OperPrec, Token, TokenizeError, Tokenizer, TokenKind, tokenize


def test_positive_integer():
    tokenizer = Tokenizer("34")
    assert tokenizer.next_token() == Token(TokenKind.NUM, 34.0)


def test_decimal_number():
    tokenizer = Tokenizer("34.5")
    assert tokenizer.next_token() == Token(TokenKind.NUM, 34.5)


def test_invalid_char():
    tokenizer = Tokenizer("#$%")
    with pytest.raises(TokenizeError):
        tokenizer.next_token()


def test_eof_repeats_after_end():
    tokenizer = Tokenizer("7")
    assert tokenizer.next_token() == Token(TokenKind.NUM, 7.0)
    assert tokenizer.next_token().kind is TokenKind.EOF
    assert tokenizer.next_token().kind is TokenKind.EOF


def test_tokenize_expression_kinds():
    kinds = [token.kind for token in tokenize("2*3+(4-5)")]
    assert kinds == [
        TokenKind.NUM,
        TokenKind.MULTIPLY,
        TokenKind.NUM,
        TokenKind.ADD,
        TokenKind.LEFT_PAREN,
        TokenKind.NUM,
        TokenKind.SUBTRACT,
        TokenKind.NUM,
        TokenKind.RIGHT_PAREN,
        TokenKind.EOF,
    ]


def test_tokenize_empty_is_only_eof():
    assert tokenize("") == [Token(TokenKind.EOF)]


def test_number_followed_by_paren_is_error():
    with pytest.raises(TokenizeError):
        tokenize("3(4)")


def test_malformed_number_is_error():
    with pytest.raises(TokenizeError):
        tokenize("1.2.3")


def test_whitespace_is_not_a_token():
    with pytest.raises(TokenizeError):
        tokenize("1 + 2")


@pytest.mark.parametrize(
    "kind, prec",
    [
        (TokenKind.ADD, OperPrec.ADD_SUB),
        (TokenKind.SUBTRACT, OperPrec.ADD_SUB),
        (TokenKind.MULTIPLY, OperPrec.MUL_DIV),
        (TokenKind.DIVIDE, OperPrec.MUL_DIV),
        (TokenKind.CARET, OperPrec.POWER),
        (TokenKind.LEFT_PAREN, OperPrec.DEFAULT_ZERO),
        (TokenKind.EOF, OperPrec.DEFAULT_ZERO),
    ],
)
def test_oper_prec(kind, prec):
    assert Token(kind).oper_prec() is prec


def test_precedence_ordering():
    lowest = Token(TokenKind.EOF).oper_prec()
    add = Token(TokenKind.ADD).oper_prec()
    mul = Token(TokenKind.MULTIPLY).oper_prec()
    power = Token(TokenKind.CARET).oper_prec()
    assert lowest < add < mul < power < OperPrec.NEGATIVE