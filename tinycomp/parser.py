"""Expression parsers working over a stream of tokens."""

from __future__ import annotations

from typing import Iterable, Iterator

from .tokens import Token, TokenType
from .tree import ASTNode, NodeOp, make_leaf, make_node


class ParseError(Exception):
    """Raised when the token stream does not form a valid expression."""


class TokenStream:
    """A cursor over tokens; past the end it yields EOF tokens forever."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._current = self._next()

    def _next(self) -> Token:
        return next(self._tokens, Token(TokenType.EOF))

    def current(self) -> Token:
        """Return the token under the cursor."""
        return self._current

    def advance(self) -> Token:
        """Move to the next token and return it."""
        self._current = self._next()
        return self._current

    def match(self, kind: TokenType, what: str) -> None:
        """Consume the current token if it is ``kind``, else raise."""
        if self._current.kind is not kind:
            raise ParseError(f"{what} expected")
        self.advance()

    def semi(self) -> None:
        """Consume a semicolon."""
        self.match(TokenType.SEMI, ";")


_ARITH_OPS = {
    TokenType.PLUS: NodeOp.ADD,
    TokenType.MINUS: NodeOp.SUBTRACT,
    TokenType.STAR: NodeOp.MULTIPLY,
    TokenType.SLASH: NodeOp.DIVIDE,
}

_PRECEDENCE = {
    TokenType.PLUS: 10,
    TokenType.MINUS: 10,
    TokenType.STAR: 20,
    TokenType.SLASH: 20,
}


def _syntax_error(kind: TokenType) -> ParseError:
    return ParseError(f"syntax error, token {int(kind)}")


def arithop(kind: TokenType) -> NodeOp:
    """Convert a binary operator token kind into an AST operation."""
    try:
        return _ARITH_OPS[kind]
    except KeyError:
        raise _syntax_error(kind) from None


def op_precedence(kind: TokenType) -> int:
    """Return the precedence of a binary operator token kind."""
    try:
        return _PRECEDENCE[kind]
    except KeyError:
        raise _syntax_error(kind) from None


def _primary(stream: TokenStream) -> ASTNode:
    token = stream.current()
    if token.kind is not TokenType.INTLIT:
        raise _syntax_error(token.kind)
    node = make_leaf(NodeOp.INTLIT, token.intvalue)
    stream.advance()
    return node


def binexpr(stream: TokenStream, ptp: int = 0) -> ASTNode:
    """Parse by operator precedence; the expression must end with ``;``.

    ``ptp`` is the precedence of the operator to the left of this
    sub-expression. The terminating semicolon is left unconsumed.
    """
    left = _primary(stream)
    kind = stream.current().kind
    if kind is TokenType.SEMI:
        return left
    while op_precedence(kind) > ptp:
        stream.advance()
        right = binexpr(stream, _PRECEDENCE[kind])
        left = make_node(arithop(kind), left, right, 0)
        kind = stream.current().kind
        if kind is TokenType.SEMI:
            return left
    return left


def multiplicative_expr(stream: TokenStream) -> ASTNode:
    """Parse a run of ``*`` and ``/`` operations, left-associatively."""
    left = _primary(stream)
    kind = stream.current().kind
    while kind in (TokenType.STAR, TokenType.SLASH):
        stream.advance()
        right = _primary(stream)
        left = make_node(arithop(kind), left, right, 0)
        kind = stream.current().kind
    return left


def additive_expr(stream: TokenStream) -> ASTNode:
    """Parse a whole expression up to EOF by recursive descent."""
    left = multiplicative_expr(stream)
    kind = stream.current().kind
    while kind is not TokenType.EOF:
        op = arithop(kind)
        stream.advance()
        right = multiplicative_expr(stream)
        left = make_node(op, left, right, 0)
        kind = stream.current().kind
    return left


def right_assoc_expr(stream: TokenStream) -> ASTNode:
    """Parse up to EOF with no precedence, grouping to the right."""
    left = _primary(stream)
    kind = stream.current().kind
    if kind is TokenType.EOF:
        return left
    op = arithop(kind)
    stream.advance()
    right = right_assoc_expr(stream)
    return make_node(op, left, right, 0)