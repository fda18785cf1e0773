"""Interpreter.

This is a tree-walk interpreter for evaluating the program tree produced by
the parser. It supports integer arithmetic, string concatenation, boolean
logic, `let` bindings, `print` output and `return`.

1. Execution Model
Statements run in order via `execute()`; expressions are evaluated by
`eval_expr()`, which walks operator chains iteratively. A `return` statement
raises `ReturnControlFlow`, which `run()` catches to produce the run's
result. Statements after an executed `return` are never evaluated. A program that never returns yields 0.

2. Environment
The interpreter owns a single flat dictionary `vars` mapping names to values.
It is append-only: `let` binds a name once and rebinding is an error.

3. Expression Evaluation
Both operands of every operator are always evaluated, left first. Logical
operators do not short-circuit. Operators are dispatched by pattern matching
on the operand pair; any other pairing is a type mismatch.

4. Error Handling
Runtime errors (redefinition, undefined variables, type mismatches, division
by zero, integer overflow) are surfaced as typed exceptions carrying the line
number and file.


File: interpreter.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

import sys
from typing import TextIO

from letlang.exceptions import (
    DivisionByZeroException,
    IntegerOverflowException,
    ReturnControlFlow,
    TypeMismatchException,
    UndefinedVariableException,
    UnknownOpException,
    VariableRedefinedException,
)
from letlang.nodes import (
    BinaryExpression,
    Boolean,
    Expression,
    Identifier,
    Integer,
    Let,
    LogicalExpression,
    Print,
    Program,
    Return,
    String,
)
from letlang.operations import Op
from letlang.values import (
    INT_MAX,
    INT_MIN,
    BooleanValue,
    IntegerValue,
    StringValue,
    Value,
    type_name,
)


class Interpreter:
    """Tree-walk interpreter for Letlang."""

    def __init__(self, file: str, out: TextIO | None = None):
        """
        Initialize the interpreter with an empty environment.

        Parameters:
            file (str): The name of the script, used in error messages.
            out (TextIO): Stream receiving `print` output. Defaults to the
                current ``sys.stdout``.
        """
        self.vars: dict[str, Value] = {}
        self.file = file
        self.out = out

    def run(self, program: Program) -> Value:
        """
        Execute a program and return its result.

        Returns:
            Value: The value of the first executed `return`, or integer 0.
        """
        try:
            self.execute(program.statements)
        except ReturnControlFlow as ret:
            return ret.value
        return IntegerValue(0)

    def execute(self, statements):
        """
        Executes a sequence of statements.

        Raises:
            ReturnControlFlow: When a `return` statement is executed.
            ScriptRuntimeError: On any evaluation error.
        """
        for stmt in statements:
            match stmt:
                case Let(identifier=ident, value=expr_node):
                    value = self.eval_expr(expr_node)
                    if ident.name in self.vars:
                        raise VariableRedefinedException(ident.name, stmt.line, self.file)
                    self.vars[ident.name] = value

                case Print(value=expr_node):
                    value = StringValue("") if expr_node is None else self.eval_expr(expr_node)
                    self.emit(value.display())

                case Return(value=expr_node):
                    value = IntegerValue(0) if expr_node is None else self.eval_expr(expr_node)
                    raise ReturnControlFlow(value)

                case _:
                    raise TypeError(f"Unknown statement type: {type(stmt).__name__}")

    def emit(self, text: str) -> None:
        """
        Write one line of output and flush it.
        """
        out = self.out if self.out is not None else sys.stdout
        out.write(text + "\n")
        out.flush()

    def eval_expr(self, node: Expression) -> Value:
        """
        Recursively evaluate an expression node and return its computed value.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            TypeMismatchException: If an operator is applied to unsupported operand types.
            DivisionByZeroException: If the divisor of `/` is zero.
            IntegerOverflowException: If an integer result leaves the 32-bit range.
        """
        match node:
            # Literals
            case Integer(value=value):
                return IntegerValue(value)
            case String(value=value):
                return StringValue(value)
            case Boolean(value=value):
                return BooleanValue(value)

            # Variables
            case Identifier(name=name):
                if name not in self.vars:
                    raise UndefinedVariableException(name, node.line, self.file)
                return self.vars[name]

            # Operations
            case BinaryExpression() | LogicalExpression():
                return self.eval_chain(node)

        raise TypeError(f"Invalid expression node: {node!r}")

    def eval_chain(self, node: Expression) -> Value:
        """
        Evaluate an operator expression and its nested right operands.

        Left operands are evaluated first, in source order, walking down the
        right spine; the innermost right operand comes last. The operators are
        then applied from the innermost outwards. This gives the same order
        of evaluation and errors as recursing on the right operand, without
        one stack frame per operator.
        """
        pending = []
        while isinstance(node, (BinaryExpression, LogicalExpression)):
            pending.append((node, self.eval_expr(node.left)))
            node = node.right

        result = self.eval_expr(node)
        for expr_node, lhs in reversed(pending):
            if isinstance(expr_node, BinaryExpression):
                result = self.binary_op(expr_node.operator, lhs, result, expr_node.line)
            else:
                result = self.logical_op(expr_node.operator, lhs, result, expr_node.line)
        return result

    def binary_op(self, op: Op, lhs: Value, rhs: Value, line=None) -> Value:
        """
        Apply an arithmetic operator to two evaluated operands.

        `+` concatenates display forms when either side is a string; every
        other combination requires two integers.
        """
        match op, lhs, rhs:
            case (Op.ADD, StringValue(), _) | (Op.ADD, _, StringValue()):
                return StringValue(lhs.display() + rhs.display())
            case Op.ADD, IntegerValue(value=a), IntegerValue(value=b):
                return self._checked(op, a + b, line)
            case Op.SUB, IntegerValue(value=a), IntegerValue(value=b):
                return self._checked(op, a - b, line)
            case Op.MUL, IntegerValue(value=a), IntegerValue(value=b):
                return self._checked(op, a * b, line)
            case Op.DIV, IntegerValue(value=a), IntegerValue(value=b):
                if b == 0:
                    raise DivisionByZeroException(line, self.file)
                quotient = abs(a) // abs(b)
                if (a < 0) != (b < 0):
                    quotient = -quotient
                return self._checked(op, quotient, line)
            case (Op.ADD | Op.SUB | Op.MUL | Op.DIV), _, _:
                raise TypeMismatchException(
                    op.value, type_name(lhs), type_name(rhs), line, self.file
                )
        raise UnknownOpException(op, line, self.file)

    def logical_op(self, op: Op, lhs: Value, rhs: Value, line=None) -> Value:
        """
        Apply `and` / `or` to two evaluated boolean operands.
        """
        match op, lhs, rhs:
            case Op.AND, BooleanValue(value=a), BooleanValue(value=b):
                return BooleanValue(a and b)
            case Op.OR, BooleanValue(value=a), BooleanValue(value=b):
                return BooleanValue(a or b)
            case (Op.AND | Op.OR), _, _:
                raise TypeMismatchException(
                    op.value, type_name(lhs), type_name(rhs), line, self.file
                )
        raise UnknownOpException(op, line, self.file)

    def _checked(self, op: Op, result: int, line) -> IntegerValue:
        if not INT_MIN <= result <= INT_MAX:
            raise IntegerOverflowException(op.value, result, line, self.file)
        return IntegerValue(result)
