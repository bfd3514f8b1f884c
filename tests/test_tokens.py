import pytest

from tinycomp.tokens import Token, TokenType


@pytest.mark.parametrize(
    "kind, expected",
    [
        (TokenType.PLUS, "Token +"),
        (TokenType.MINUS, "Token -"),
        (TokenType.STAR, "Token *"),
        (TokenType.SLASH, "Token /"),
    ],
)
def test_operator_tokens_print_their_symbol(kind, expected):
    assert str(Token(kind)) == expected


def test_intlit_prints_value():
    assert str(Token(TokenType.INTLIT, 42)) == "Token intlit, value 42"


def test_operator_ignores_intvalue_in_output():
    assert str(Token(TokenType.PLUS, 99)) == str(Token(TokenType.PLUS))


@pytest.mark.parametrize(
    "number, intvalue, expected",
    [
        (1, 0, "Token +"),
        (2, 0, "Token -"),
        (3, 0, "Token *"),
        (4, 0, "Token /"),
        (5, 3, "Token intlit, value 3"),
    ],
)
def test_token_kind_numbering_starts_with_eof(number, intvalue, expected):
    assert TokenType(0) is TokenType.EOF
    assert str(Token(TokenType(number), intvalue)) == expected


def test_tokens_compare_by_value():
    assert Token(TokenType.INTLIT, 7) == Token(TokenType.INTLIT, 7)
    assert Token(TokenType.INTLIT, 7) != Token(TokenType.INTLIT, 8)


def test_default_intvalue_is_zero():
    assert Token(TokenType.SEMI).intvalue == 0