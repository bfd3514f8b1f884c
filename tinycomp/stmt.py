"""Parsing and code generation for a list of print statements."""

from __future__ import annotations

from .codegen import CodeGenerator
from .parser import TokenStream, binexpr
from .tokens import TokenType


def statements(stream: TokenStream, generator: CodeGenerator) -> None:
    """Compile ``print <expr> ;`` statements until the end of input."""
    while True:
        stream.match(TokenType.PRINT, "print")
        tree = binexpr(stream, 0)
        reg = generator.generate(tree)
        generator.print_int(reg)
        generator.free_all()
        stream.semi()
        if stream.current().kind is TokenType.EOF:
            return