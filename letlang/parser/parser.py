"""
Main parser entry point for Letlang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`letlang.parser.expressions` and `letlang.parser.statements`.

The parser owns a queue of tokens and consumes it from the front with a
single token of lookahead. It does not recover from errors: the first
mismatch raises :class:`ParseError` and aborts the parse.


File: parser.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

from collections import deque
from typing import Iterable

from letlang.exceptions import ParseError
from letlang.lexer import TOKEN_LITERALS, Token, TokenKind
from letlang.nodes import Expression, Program, Statement, Term

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Letlang parser."""

    def __init__(self, tokens: Iterable[Token], file: str):
        """
        Initialize the parser with a sequence of tokens.

        Parameters:
            tokens (Iterable[Token]): Tokens ending with an EOF token.
            file (str): The name of the script.
        """
        self.tokens = deque(tokens)
        self.source_file = file

    @property
    def curr_token(self) -> Token:
        """
        The lookahead token.

        Raises:
            ParseError: If the queue is exhausted, which only happens when
                the token sequence was not terminated by EOF.
        """
        if not self.tokens:
            raise ParseError("Unexpected end of input", file=self.source_file)
        return self.tokens[0]

    def describe(self, token: Token) -> str:
        """
        Describe a token for error messages.
        """
        if token.type == TokenKind.EOF:
            return "end of input (EOF)"
        return f"value {token.value!r} of type {token.type.value}"

    def error(self, message: str, token: Token) -> ParseError:
        """
        Build a ParseError located at ``token``.
        """
        return ParseError(message, token.line, self.source_file)

    def eat(self, token_type: TokenKind) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenKind): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            expected = TOKEN_LITERALS.get(token_type)
            expected = f"'{expected}' of type {token_type.value}" if expected else token_type.value
            raise self.error(
                f"Expected token {expected}, but got {self.describe(tok)}", tok
            )
        return self.tokens.popleft()

    def accept(self, *token_types: TokenKind) -> Token | None:
        """
        Consume and return the current token if it has one of the given types.
        """
        if self.curr_token.type in token_types:
            return self.tokens.popleft()
        return None


    # Expression wrappers
    def term(self) -> Term | None:
        """
        Parse a literal or identifier, if one starts here.
        """
        return _expr.parse_term(self)

    def try_expr(self) -> Expression | None:
        """
        Parse an expression, if one starts here.
        """
        return _expr.parse_expr(self)

    def expr(self) -> Expression:
        """
        Parse a required expression.
        """
        return _expr.parse_required_expr(self)


    # Statement wrappers
    def statement(self) -> Statement:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_let(self) -> Statement:
        """
        Parse a 'let' binding.
        """
        return _stmt.parse_let(self)

    def parse_print(self) -> Statement:
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_return(self) -> Statement:
        """
        Parse a 'return' statement ending the run.
        """
        return _stmt.parse_return(self)


    def parse(self) -> Program:
        """
        Parse the full input into a program.

        The EOF token must be the last token consumed.
        """
        statements = []
        while self.curr_token.type != TokenKind.EOF:
            statements.append(self.statement())
        self.eat(TokenKind.EOF)
        return Program(tuple(statements))
