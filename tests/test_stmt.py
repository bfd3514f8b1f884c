import io

import pytest

from tinycomp.codegen import CodeGenerator
from tinycomp.parser import ParseError, TokenStream
from tinycomp.stmt import statements
from tinycomp.tokens import Token, TokenType

_OPS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    ";": TokenType.SEMI,
    "print": TokenType.PRINT,
}


def stream(text):
    tokens = [
        Token(_OPS[w]) if w in _OPS else Token(TokenType.INTLIT, int(w))
        for w in text.split()
    ]
    return TokenStream(tokens)


def compile_text(text):
    s = stream(text)
    gen = CodeGenerator(io.StringIO())
    statements(s, gen)
    return s, gen.out.getvalue()


def test_two_statements():
    s, out = compile_text("print 2 + 3 ; print 4 ;")
    assert out.count("\tcall printint\n") == 2
    assert s.current().kind is TokenType.EOF


def test_single_statement_output():
    _, out = compile_text("print 4 ;")
    assert out.splitlines() == [
        "\tmovq $4, %r8",
        "\tmovq %r8, %rdi",
        "\tcall printint",
    ]


def test_registers_reset_between_statements():
    _, out = compile_text(" ".join(["print 1 + 2 ;"] * 6))
    assert out.count("\tcall printint\n") == 6
    assert "%r10" not in out


def test_missing_print_keyword():
    with pytest.raises(ParseError, match="print expected"):
        compile_text("2 + 3 ;")


def test_missing_semicolon():
    with pytest.raises(ParseError):
        compile_text("print 2 3")