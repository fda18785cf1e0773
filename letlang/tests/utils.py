"""
Utility functions shared across Letlang tests.
"""
from pathlib import Path
import subprocess
import sys

from letlang.interpreter import Interpreter
from letlang.lexer import tokenize
from letlang.parser import Parser

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def kinds_and_values(source: str) -> list[tuple]:
    """
    Tokenize source and return (kind, value) pairs.
    """
    return [(tok.type, tok.value) for tok in tokenize(source)]


def parse_source(source: str):
    """
    Parse source code and return the program tree.
    """
    return Parser(tokenize(source, "<test>"), "<test>").parse()


def run_source(source: str):
    """
    Run source code and return (result value, interpreter).
    """
    interpreter = Interpreter("<test>")
    result = interpreter.run(parse_source(source))
    return result, interpreter


def run_cli(path: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Run let.py on a script in a subprocess.
    """
    return subprocess.run(
        [sys.executable, str(PROJECT_ROOT / "let.py"), str(path), *args],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
    )
