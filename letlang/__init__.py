"""Letlang.

A minimal scripting language: a lexer, a recursive descent parser and a
tree-walk interpreter.


File: __init__.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"

from letlang.exceptions import (
    LetlangError,
    LexError,
    ParseError,
    ScriptRuntimeError,
)
from letlang.runner import parse_source, run_file, run_program, run_source

__all__ = [
    "LetlangError",
    "LexError",
    "ParseError",
    "ScriptRuntimeError",
    "parse_source",
    "run_file",
    "run_program",
    "run_source",
]
