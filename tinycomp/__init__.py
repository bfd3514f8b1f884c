"""A tiny integer-expression compiler: tokens, AST, parsers, interpreter and assembly generator."""

__version__ = "0.1.0"