"""Lexer for Letlang.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its kind, value and source line number.

Tokens cover literals (integers, strings, booleans), the statement keywords
(``let``, ``print``, ``return``), the arithmetic and logical operators and a
handful of punctuation characters. Whitespace is skipped and produces no
token. The sequence always ends with exactly one ``EOF`` token.

Words are scanned as a maximal run of ASCII letters and digits and only then
looked up in the keyword, boolean and logical-operator tables, in that order.
A word found in none of them becomes an identifier.


File: lexer.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

import re
from enum import Enum
from typing import Iterator

from letlang.exceptions import LexError
from letlang.values import INT_MAX


class TokenKind(str, Enum):
    """
    Enumeration of token kinds.
    """

    EOF = "EOF"

    # Arithmetic operators
    PLUS = "PLUS"
    MINUS = "MINUS"
    ASTERISK = "ASTERISK"
    SLASH = "SLASH"

    # Punctuation
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    SEMICOLON = "SEMICOLON"
    EQUAL = "EQUAL"

    # Literals and names
    INTEGER = "INTEGER"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    IDENTIFIER = "IDENTIFIER"

    # Keywords
    RETURN = "RETURN"
    LET = "LET"
    PRINT = "PRINT"

    # Logical operators
    AND = "AND"
    OR = "OR"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Token:
    """
    Represents a lexical token with a kind and value.
    """
    __slots__ = ("type", "value", "line")

    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenKind): The token kind.
            value (Any): The token payload.
            line (int): The source line the token starts on.
        """
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "line", line)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type.value}, {self.value!r}, line={self.line})"


KEYWORDS: dict[str, TokenKind] = {
    "return": TokenKind.RETURN,
    "let": TokenKind.LET,
    "print": TokenKind.PRINT,
}

BOOLEANS: dict[str, bool] = {
    "true": True,
    "false": False,
}

LOGICAL_OPERATORS: dict[str, TokenKind] = {
    "and": TokenKind.AND,
    "or": TokenKind.OR,
}

SYMBOLS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ";": TokenKind.SEMICOLON,
    "=": TokenKind.EQUAL,
}

# Source text of every fixed token, used when reporting what was expected.
TOKEN_LITERALS: dict[TokenKind, str] = {
    **{kind: text for text, kind in SYMBOLS.items()},
    **{kind: text for text, kind in KEYWORDS.items()},
    **{kind: text for text, kind in LOGICAL_OPERATORS.items()},
}

# Characters of an unterminated string shown in its error message.
EXCERPT_LENGTH = 20

token_specification: list[tuple[str, str]] = [
    # Literals
    ('INTEGER',      r'[0-9]+'),
    ('WORD',         r'[A-Za-z][A-Za-z0-9]*'),
    ('STRING',       r'"[^"]*"|\'[^\']*\''),
    ('UNTERMINATED', r'["\']'),

    # Operators and punctuation
    ('SYMBOL',       r'[-+*/();=]'),

    # Miscellaneous
    ('SKIP',         r'\s+'),
    ('MISMATCH',     r'.'),
]

tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


def _word_token(word: str, line: int) -> Token:
    if word in KEYWORDS:
        return Token(KEYWORDS[word], word, line)
    if word in BOOLEANS:
        return Token(TokenKind.BOOLEAN, BOOLEANS[word], line)
    if word in LOGICAL_OPERATORS:
        return Token(LOGICAL_OPERATORS[word], word, line)
    return Token(TokenKind.IDENTIFIER, word, line)


def iter_tokens(code: str, file: str | None = None) -> Iterator[Token]:
    """
    Lazily scan source code, yielding one token at a time.

    The final token is always ``EOF``; nothing is yielded after it.

    Parameters:
        code (str): The source code to tokenize.
        file (str): The name of the script, used in error messages.

    Raises:
        LexError: On an unexpected character, an unterminated string literal
            or an integer literal outside the signed 32-bit range.
    """
    line_num = 1

    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'SKIP':
            line_num += value.count('\n')
            continue
        if kind == 'MISMATCH':
            raise LexError(f"Unexpected character {value!r}", line_num, file)
        if kind == 'UNTERMINATED':
            text = code[match_obj.end():].split('\n', 1)[0]
            if len(text) > EXCERPT_LENGTH:
                text = text[:EXCERPT_LENGTH] + '...'
            raise LexError(f"Unterminated string literal {value}{text}", line_num, file)

        if kind == 'INTEGER':
            number = int(value)
            if number > INT_MAX:
                raise LexError(f"Integer literal {value} out of range", line_num, file)
            yield Token(TokenKind.INTEGER, number, line_num)
        elif kind == 'WORD':
            yield _word_token(value, line_num)
        elif kind == 'STRING':
            yield Token(TokenKind.STRING, value[1:-1], line_num)
            line_num += value.count('\n')
        else:
            yield Token(SYMBOLS[value], value, line_num)

    yield Token(TokenKind.EOF, None, line_num)


def tokenize(code: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): The name of the script, used in error messages.

    Returns:
        list[Token]: A list of Token instances ending with ``EOF``.

    Raises:
        LexError: If the source cannot be tokenized.
    """
    return list(iter_tokens(code, file))
