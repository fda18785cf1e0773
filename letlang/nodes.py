"""AST nodes for Letlang.

The parser builds a :class:`Program` out of these frozen dataclasses and the
interpreter walks it. Nodes are never mutated or shared once built.

Every node carries the source ``line`` it started on. The line is excluded
from equality so that trees can be compared structurally.


File: nodes.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field

from letlang.operations import Op


# ---- Terms ----

@dataclass(frozen=True)
class Integer:
    value: int
    line: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class String:
    value: str
    line: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Boolean:
    value: bool
    line: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Identifier:
    name: str
    line: int | None = field(default=None, compare=False)


# ---- Composites ----

@dataclass(frozen=True)
class BinaryExpression:
    """Arithmetic operation: ``+``, ``-``, ``*`` or ``/``."""
    left: Expression
    operator: Op
    right: Expression
    line: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class LogicalExpression:
    """Logical operation: ``and`` or ``or``."""
    left: Expression
    operator: Op
    right: Expression
    line: int | None = field(default=None, compare=False)


Term = Integer | String | Boolean | Identifier
Expression = Term | BinaryExpression | LogicalExpression


# ---- Statements ----

@dataclass(frozen=True)
class Let:
    identifier: Identifier
    value: Expression
    line: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Print:
    value: Expression | None
    line: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Return:
    value: Expression | None
    line: int | None = field(default=None, compare=False)


Statement = Let | Print | Return


@dataclass(frozen=True)
class Program:
    """An ordered sequence of statements."""
    statements: tuple[Statement, ...] = ()


def format_node(node) -> str:
    """
    Convert an expression or statement back to readable source for debugging.

    Composite expressions on the right of an operator are wrapped in
    parentheses so the right-associative grouping is visible.
    """
    match node:
        case Integer(value=value):
            return str(value)
        case String(value=value):
            quote = "'" if '"' in value else '"'
            return f"{quote}{value}{quote}"
        case Boolean(value=value):
            return "true" if value else "false"
        case Identifier(name=name):
            return name
        case BinaryExpression() | LogicalExpression():
            # Walk the right spine iteratively; long chains nest deeply.
            pieces = []
            depth = 0
            while isinstance(node, (BinaryExpression, LogicalExpression)):
                pieces.append(f"{format_node(node.left)} {node.operator.value} ")
                node = node.right
                if isinstance(node, (BinaryExpression, LogicalExpression)):
                    pieces.append("(")
                    depth += 1
            pieces.append(format_node(node))
            pieces.append(")" * depth)
            return "".join(pieces)
        case Let(identifier=ident, value=value):
            return f"let {ident.name} = {format_node(value)};"
        case Print(value=None):
            return "print;"
        case Print(value=value):
            return f"print {format_node(value)};"
        case Return(value=None):
            return "return;"
        case Return(value=value):
            return f"return {format_node(value)};"
        case Program(statements=statements):
            return "\n".join(format_node(stmt) for stmt in statements)
    return f"<node {type(node).__name__}>"
