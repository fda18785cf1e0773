"""Tests for the Letlang lexer."""

import pytest

from letlang.exceptions import LexError
from letlang.lexer import TokenKind, iter_tokens, tokenize
from letlang.tests.utils import kinds_and_values


def test_let_statement_tokens():
    assert kinds_and_values("let x = 42;") == [
        (TokenKind.LET, "let"),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.EQUAL, "="),
        (TokenKind.INTEGER, 42),
        (TokenKind.SEMICOLON, ";"),
        (TokenKind.EOF, None),
    ]


def test_operators_and_punctuation():
    kinds = [kind for kind, _ in kinds_and_values("+ - * / ( ) ; =")]
    assert kinds == [
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.ASTERISK,
        TokenKind.SLASH,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.SEMICOLON,
        TokenKind.EQUAL,
        TokenKind.EOF,
    ]


def test_keyword_boolean_and_logical_tables():
    assert kinds_and_values("return print true false and or") == [
        (TokenKind.RETURN, "return"),
        (TokenKind.PRINT, "print"),
        (TokenKind.BOOLEAN, True),
        (TokenKind.BOOLEAN, False),
        (TokenKind.AND, "and"),
        (TokenKind.OR, "or"),
        (TokenKind.EOF, None),
    ]


def test_words_are_maximal_runs():
    assert kinds_and_values("letx x1 andy True") == [
        (TokenKind.IDENTIFIER, "letx"),
        (TokenKind.IDENTIFIER, "x1"),
        (TokenKind.IDENTIFIER, "andy"),
        (TokenKind.IDENTIFIER, "True"),
        (TokenKind.EOF, None),
    ]


def test_digits_then_letters_split():
    assert kinds_and_values("12ab") == [
        (TokenKind.INTEGER, 12),
        (TokenKind.IDENTIFIER, "ab"),
        (TokenKind.EOF, None),
    ]


def test_string_literals_are_verbatim():
    assert kinds_and_values('"it\'s" \'say "hi"\' "a\\nb"') == [
        (TokenKind.STRING, "it's"),
        (TokenKind.STRING, 'say "hi"'),
        (TokenKind.STRING, "a\\nb"),
        (TokenKind.EOF, None),
    ]


def test_empty_source_is_just_eof():
    tokens = tokenize("  \n\t ")
    assert len(tokens) == 1
    assert tokens[0].type == TokenKind.EOF


def test_unicode_whitespace_is_skipped():
    assert kinds_and_values("return\u00a01;\u2003\n") == [
        (TokenKind.RETURN, "return"),
        (TokenKind.INTEGER, 1),
        (TokenKind.SEMICOLON, ";"),
        (TokenKind.EOF, None),
    ]


def test_line_numbers():
    tokens = tokenize('let a = 1;\n\nprint "x\ny";\nreturn a;')
    lines = [(tok.type, tok.line) for tok in tokens]
    assert lines[0] == (TokenKind.LET, 1)
    assert lines[5] == (TokenKind.PRINT, 3)
    assert lines[6] == (TokenKind.STRING, 3)
    assert lines[7] == (TokenKind.SEMICOLON, 4)
    assert lines[8] == (TokenKind.RETURN, 5)
    assert lines[-1] == (TokenKind.EOF, 5)


def test_tokens_are_immutable():
    token = tokenize("x")[0]
    with pytest.raises(AttributeError):
        token.value = "y"


def test_iter_tokens_is_lazy_and_restartable():
    source = "let x = 1; @"
    gen = iter_tokens(source)
    assert next(gen).type == TokenKind.LET
    assert next(gen).type == TokenKind.IDENTIFIER
    again = iter_tokens(source)
    assert next(again).type == TokenKind.LET


def test_nothing_after_eof():
    gen = iter_tokens("1")
    assert [tok.type for tok in gen] == [TokenKind.INTEGER, TokenKind.EOF]
    assert list(gen) == []


def test_unexpected_character():
    with pytest.raises(LexError, match="Unexpected character '@' on line 2"):
        tokenize("let x = 1;\nlet y = @;")


@pytest.mark.parametrize("char", ["_", "!", "{", "<", "é"])
def test_characters_outside_token_set(char):
    with pytest.raises(LexError):
        tokenize(f"let x{char} = 1;")


def test_unterminated_string():
    with pytest.raises(LexError, match="Unterminated string literal"):
        tokenize('let x = "abc;')


def test_mismatched_quotes_are_unterminated():
    with pytest.raises(LexError, match="Unterminated"):
        tokenize("print 'abc\";")


def test_integer_at_upper_bound():
    assert kinds_and_values("2147483647")[0] == (TokenKind.INTEGER, 2147483647)


def test_integer_overflow():
    with pytest.raises(LexError, match="2147483648 out of range"):
        tokenize("return 2147483648;")


def test_unterminated_string_message_is_short():
    source = 'let x = "' + "a" * 100 + '\nreturn 1;'
    with pytest.raises(LexError) as exc_info:
        tokenize(source)
    message = str(exc_info.value)
    assert '"' + "a" * 20 + "..." in message
    assert "a" * 21 not in message
    assert "return" not in message


def test_unterminated_string_short_text_kept_whole():
    with pytest.raises(LexError, match='Unterminated string literal "abc; on line 1'):
        tokenize('let x = "abc;\nreturn 1;')
