"""Statement parsing utilities for Letlang.

These functions operate on a `letlang.parser.Parser` instance and handle
the three statement forms of the language. Every statement begins with a
keyword and ends with a semicolon.


File: statements.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from letlang.lexer import TokenKind
from letlang.nodes import Identifier, Let, Print, Return, Statement

if TYPE_CHECKING:
    from letlang.parser import Parser


def parse_statement(parser: 'Parser') -> Statement:
    """
    Parse a single statement.

    Syntax:
        <let> | <print> | <return>

    Args:
        parser: The parser instance.

    Returns:
        Statement: the AST node.
    """
    tok = parser.curr_token
    if tok.type == TokenKind.RETURN:
        return parser.parse_return()
    elif tok.type == TokenKind.LET:
        return parser.parse_let()
    elif tok.type == TokenKind.PRINT:
        return parser.parse_print()
    else:
        raise parser.error(
            f"Unexpected token: {parser.describe(tok)}, expected a statement "
            f"('let', 'print' or 'return')",
            tok,
        )


def parse_let(parser: 'Parser') -> Let:
    """
    Parse a `let` binding.

    Syntax:
        let <identifier> = <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        Let: the binding node.
    """
    tok = parser.eat(TokenKind.LET)
    id_tok = parser.eat(TokenKind.IDENTIFIER)
    parser.eat(TokenKind.EQUAL)
    expr_node = parser.expr()
    parser.eat(TokenKind.SEMICOLON)
    return Let(Identifier(id_tok.value, id_tok.line), expr_node, tok.line)


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a `print` statement.

    Syntax:
        print [<expression>] ;
    """
    tok = parser.eat(TokenKind.PRINT)
    expr_node = parser.try_expr()
    parser.eat(TokenKind.SEMICOLON)
    return Print(expr_node, tok.line)


def parse_return(parser: 'Parser') -> Return:
    """
    Parse a `return` statement.

    Syntax:
        return [<expression>] ;
    """
    tok = parser.eat(TokenKind.RETURN)
    expr_node = parser.try_expr()
    parser.eat(TokenKind.SEMICOLON)
    return Return(expr_node, tok.line)
