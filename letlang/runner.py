"""Pipeline functions.

Source text goes through three sequential passes: the lexer drains the whole
source into a token list, the parser turns that list into a :class:`Program`,
and the interpreter evaluates the program to a single value.


File: runner.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""

from pathlib import Path
from typing import TextIO

from letlang.interpreter import Interpreter
from letlang.lexer import tokenize
from letlang.nodes import Program
from letlang.parser import Parser
from letlang.values import Value


def parse_source(source: str, file: str = "<string>") -> Program:
    """
    Tokenize and parse source code.

    Raises:
        LexError: If the source cannot be tokenized.
        ParseError: If the tokens do not form a program.
    """
    tokens = tokenize(source, file)
    return Parser(tokens, file).parse()


def run_program(program: Program, file: str = "<string>", out: TextIO | None = None) -> Value:
    """
    Evaluate a parsed program against a fresh environment.

    Raises:
        ScriptRuntimeError: On any evaluation error.
    """
    return Interpreter(file, out).run(program)


def run_source(source: str, file: str = "<string>", out: TextIO | None = None) -> Value:
    """
    Run source code end to end and return the result value.
    """
    return run_program(parse_source(source, file), file, out)


def run_file(path, out: TextIO | None = None) -> Value:
    """
    Read a script file as UTF-8 and run it.
    """
    path = Path(path)
    return run_source(path.read_text(encoding="utf-8"), str(path), out)
