"""Errors.

Every error raised while lexing, parsing or evaluating a Letlang script
derives from :class:`LetlangError`. The three families mirror the three
pipeline stages: :class:`LexError`, :class:`ParseError` and
:class:`ScriptRuntimeError`.


File: exceptions.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""


def _locate(message: str, line=None, file=None) -> str:
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class LetlangError(Exception):
    """
    Base class for all script errors.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        super().__init__(_locate(message, line, file))


class LexError(LetlangError):
    """
    Error for characters the lexer cannot turn into a token.
    """


class ParseError(LetlangError):
    """
    Error for token sequences that do not match the grammar.
    """


class ScriptRuntimeError(LetlangError, RuntimeError):
    """
    Error raised while evaluating a program.
    """


class VariableRedefinedException(ScriptRuntimeError):
    """
    Error for a `let` binding a name that is already bound.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Variable '{varname}' already defined", line, file)


class UndefinedVariableException(ScriptRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Variable '{varname}' not defined", line, file)


class TypeMismatchException(ScriptRuntimeError):
    """
    Error for operands of the wrong type.
    """
    def __init__(self, op, lhs_type, rhs_type, line=None, file=None):
        self.op = op
        self.lhs_type = lhs_type
        self.rhs_type = rhs_type
        super().__init__(
            f"Type mismatch: unsupported operand types for '{op}': "
            f"{lhs_type} and {rhs_type}",
            line,
            file,
        )


class DivisionByZeroException(ScriptRuntimeError):
    """
    Error for an integer division whose right operand is zero.
    """
    def __init__(self, line=None, file=None):
        super().__init__("Division by zero", line, file)


class IntegerOverflowException(ScriptRuntimeError):
    """
    Error for integer results outside the signed 32-bit range.
    """
    def __init__(self, op, result, line=None, file=None):
        self.op = op
        self.result = result
        super().__init__(
            f"Integer overflow: result of '{op}' ({result}) is out of range",
            line,
            file,
        )


class UnknownOpException(ScriptRuntimeError):
    """
    Error for unknown operations.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        super().__init__(f"Unknown operation '{op}'", line, file)


class ReturnControlFlow(Exception):
    """
    Control flow handling for return statements.
    """
    def __init__(self, value):
        self.value = value
