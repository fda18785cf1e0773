"""
Expression parsing utilities for Letlang.

These functions operate on a `letlang.parser.Parser` instance and
implement the recursive descent logic for expressions.

An expression is a term optionally followed by one operator and another
expression:

    <expression> ::= <term> [ <operator> <expression> ]
    <operator>   ::= + | - | * | / | and | or
    <term>       ::= <boolean> | <integer> | <string> | <identifier>

Every operator therefore groups to the right and none binds tighter than
another: ``1 * 2 + 3`` is ``1 * (2 + 3)``. Parentheses are lexed but no rule
consumes them.


File: expressions.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from letlang.lexer import TokenKind
from letlang.nodes import (
    BinaryExpression,
    Boolean,
    Expression,
    Identifier,
    Integer,
    LogicalExpression,
    String,
    Term,
)
from letlang.operations import BINARY_OPS, LOGICAL_OPS

if TYPE_CHECKING:
    from letlang.parser import Parser


def parse_term(parser: 'Parser') -> Term | None:
    """Parse a literal or identifier, or return None if none starts here."""
    tok = parser.curr_token

    if tok.type == TokenKind.BOOLEAN:
        parser.eat(TokenKind.BOOLEAN)
        return Boolean(tok.value, tok.line)

    if tok.type == TokenKind.INTEGER:
        parser.eat(TokenKind.INTEGER)
        return Integer(tok.value, tok.line)

    if tok.type == TokenKind.STRING:
        parser.eat(TokenKind.STRING)
        return String(tok.value, tok.line)

    if tok.type == TokenKind.IDENTIFIER:
        parser.eat(TokenKind.IDENTIFIER)
        return Identifier(tok.value, tok.line)

    return None


def parse_expr(parser: 'Parser') -> Expression | None:
    """
    Parse a term and any operator/term pairs that follow it.

    Terms and operators are collected in one pass and folded from the right,
    so long chains build the right-associative tree without recursing once
    per operator.
    """
    left = parser.term()
    if left is None:
        return None

    operands = [left]
    operators = []
    op_tok = parser.accept(*BINARY_OPS, *LOGICAL_OPS)
    while op_tok is not None:
        operators.append(op_tok)
        operands.append(_required_term(parser))
        op_tok = parser.accept(*BINARY_OPS, *LOGICAL_OPS)

    node = operands.pop()
    for op_tok, left in zip(reversed(operators), reversed(operands)):
        if op_tok.type in BINARY_OPS:
            node = BinaryExpression(left, BINARY_OPS[op_tok.type], node, op_tok.line)
        else:
            node = LogicalExpression(left, LOGICAL_OPS[op_tok.type], node, op_tok.line)
    return node


def _required_term(parser: 'Parser') -> Term:
    node = parser.term()
    if node is None:
        raise _expected_term(parser)
    return node


def _expected_term(parser: 'Parser'):
    tok = parser.curr_token
    return parser.error(
        f"Unexpected token: {parser.describe(tok)}, "
        f"expected integer, boolean, string or identifier",
        tok,
    )


# ---- Entry point ----

def parse_required_expr(parser: 'Parser') -> Expression:
    """Parse an expression, raising ParseError if none starts here."""
    node = parser.try_expr()
    if node is None:
        raise _expected_term(parser)
    return node
