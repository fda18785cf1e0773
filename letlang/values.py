"""Runtime values.

A Letlang value is exactly one of :class:`IntegerValue`, :class:`StringValue`
or :class:`BooleanValue`. The interpreter pattern-matches on these classes, so
the set is closed: there is no null or unit value.


File: values.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass

# Integers are signed 32-bit.
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class IntegerValue:
    """A signed 32-bit integer."""
    value: int

    def display(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StringValue:
    """Raw text."""
    value: str

    def display(self) -> str:
        return self.value


@dataclass(frozen=True)
class BooleanValue:
    """A truth value, displayed as ``true`` or ``false``."""
    value: bool

    def display(self) -> str:
        return "true" if self.value else "false"


Value = IntegerValue | StringValue | BooleanValue


def type_name(value: Value) -> str:
    """
    Return the script-level name of a value's type for error messages.
    """
    match value:
        case IntegerValue():
            return "integer"
        case StringValue():
            return "string"
        case BooleanValue():
            return "boolean"
    raise TypeError(f"Not a Letlang value: {value!r}")
