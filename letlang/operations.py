"""Shared definitions for AST operation identifiers.

This module centralizes the operator constants used by the parser and
interpreter. Binary (arithmetic) and logical operators share the same
lookahead slot in the grammar, so the token-kind lookup tables live here
next to the enumeration they map into.


File: operations.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

from enum import Enum

from letlang.lexer import TokenKind


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Boolean
    AND = "and"
    OR = "or"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the operator as written in source.
        """
        return self.value


BINARY_OPS: dict[TokenKind, Op] = {
    TokenKind.PLUS: Op.ADD,
    TokenKind.MINUS: Op.SUB,
    TokenKind.ASTERISK: Op.MUL,
    TokenKind.SLASH: Op.DIV,
}

LOGICAL_OPS: dict[TokenKind, Op] = {
    TokenKind.AND: Op.AND,
    TokenKind.OR: Op.OR,
}


__all__ = ["Op", "BINARY_OPS", "LOGICAL_OPS"]
