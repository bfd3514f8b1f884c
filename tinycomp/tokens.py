"""Token kinds and the token record produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token the scanner can produce."""

    EOF = 0
    PLUS = 1
    MINUS = 2
    STAR = 3
    SLASH = 4
    INTLIT = 5
    SEMI = 6
    PRINT = 7


_PRINTABLE = {
    TokenType.EOF: "EOF",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.INTLIT: "intlit",
    TokenType.SEMI: ";",
    TokenType.PRINT: "print",
}


@dataclass(frozen=True)
class Token:
    """A scanned token; ``intvalue`` is meaningful only for integer literals."""

    kind: TokenType
    intvalue: int = 0

    def __str__(self) -> str:
        text = f"Token {_PRINTABLE[self.kind]}"
        if self.kind is TokenType.INTLIT:
            text += f", value {self.intvalue}"
        return text