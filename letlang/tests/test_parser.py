"""Tests for the Letlang parser."""

import pytest

from letlang.exceptions import ParseError
from letlang.lexer import Token, TokenKind
from letlang.nodes import (
    BinaryExpression,
    Boolean,
    Identifier,
    Integer,
    Let,
    LogicalExpression,
    Print,
    Program,
    Return,
    String,
    format_node,
)
from letlang.operations import Op
from letlang.parser import Parser
from letlang.tests.utils import parse_source


def test_statements_ast():
    program = parse_source('let x = 7; print x; print; return "done"; return;')
    assert program == Program((
        Let(Identifier("x"), Integer(7)),
        Print(Identifier("x")),
        Print(None),
        Return(String("done")),
        Return(None),
    ))


def test_empty_program():
    assert parse_source("") == Program(())


def test_nodes_keep_line_numbers():
    program = parse_source("let a = 1;\nreturn a;")
    let_stmt, ret = program.statements
    assert let_stmt.line == 1
    assert ret.line == 2
    assert ret.value.line == 2


def test_right_associative_without_precedence():
    add_first = parse_source("return 1 + 2 * 3;").statements[0].value
    assert add_first == BinaryExpression(
        Integer(1), Op.ADD, BinaryExpression(Integer(2), Op.MUL, Integer(3))
    )
    mul_first = parse_source("return 2 * 3 + 1;").statements[0].value
    assert mul_first == BinaryExpression(
        Integer(2), Op.MUL, BinaryExpression(Integer(3), Op.ADD, Integer(1))
    )
    sub_chain = parse_source("return 10 - 4 - 3;").statements[0].value
    assert format_node(sub_chain) == "10 - (4 - 3)"


def test_logical_and_arithmetic_share_one_level():
    node = parse_source("return true and 1 + 2;").statements[0].value
    assert node == LogicalExpression(
        Boolean(True), Op.AND, BinaryExpression(Integer(1), Op.ADD, Integer(2))
    )
    node = parse_source("return 1 + x or false;").statements[0].value
    assert isinstance(node, BinaryExpression)
    assert isinstance(node.right, LogicalExpression)
    assert node.right.operator == Op.OR


def test_format_node_round_trips_source_shape():
    program = parse_source("let s = 'a' + b; print; return false or true;")
    assert format_node(program) == (
        'let s = "a" + b;\n'
        "print;\n"
        "return false or true;"
    )


def test_statement_must_start_with_keyword():
    with pytest.raises(ParseError, match="expected a statement"):
        parse_source("x = 1;")


def test_missing_semicolon():
    with pytest.raises(ParseError, match="Expected token ';' of type SEMICOLON, but got end of input"):
        parse_source("return 1")


def test_let_requires_identifier():
    with pytest.raises(ParseError, match="Expected token IDENTIFIER, but got value 'print'"):
        parse_source("let print = 1;")


def test_let_requires_expression():
    with pytest.raises(ParseError, match="expected integer, boolean, string or identifier"):
        parse_source("let x = ;")


def test_operator_requires_right_operand():
    with pytest.raises(ParseError, match="expected integer, boolean, string or identifier"):
        parse_source("return 1 + ;")


def test_parenthesised_grouping_is_rejected():
    with pytest.raises(ParseError, match=r"'\('"):
        parse_source("return (1 + 2);")


def test_closing_paren_is_rejected():
    with pytest.raises(ParseError):
        parse_source("return 1 );")


def test_two_operators_in_a_row():
    with pytest.raises(ParseError):
        parse_source("return 1 + * 2;")


def test_error_reports_line_and_file():
    with pytest.raises(ParseError, match="on line 2 in <test>") as exc_info:
        parse_source("print 1;\nlet = 2;")
    assert exc_info.value.line == 2


def test_first_error_aborts_parse():
    with pytest.raises(ParseError, match="line 1"):
        parse_source("let 1 = 2;\nlet = 3;")


def test_token_sequence_without_eof():
    parser = Parser([Token(TokenKind.RETURN, "return", 1)], "<test>")
    with pytest.raises(ParseError, match="Unexpected end of input"):
        parser.parse()


def test_long_operator_chain_parses_right_associative():
    count = 5000
    program = parse_source("return " + " + ".join(["1"] * count) + ";")
    node = program.statements[0].value
    depth = 0
    while isinstance(node, BinaryExpression):
        assert node.left == Integer(1)
        assert node.operator == Op.ADD
        node = node.right
        depth += 1
    assert depth == count - 1
    assert node == Integer(1)


def test_long_chain_formats_with_nested_parentheses():
    count = 3000
    node = parse_source("return " + " or ".join(["true"] * count) + ";").statements[0].value
    text = format_node(node)
    assert text.startswith("true or (true or (")
    assert text.endswith("true" + ")" * (count - 2))


def test_missing_term_inside_chain():
    with pytest.raises(ParseError, match="expected integer, boolean, string or identifier"):
        parse_source("return 1 + 2 + ;")
