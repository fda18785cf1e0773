"""
Letlang command line interface.

Workflow:
1. The source script is read from the file given on the command line.
2. The Lexer tokenizes the source code into tokens.
3. The Parser processes the tokens into a program tree.
4. The Interpreter walks the tree, printing `print` output as it goes.
5. The display form of the run's result is printed last.

Errors are reported on stderr as ``<ErrorType>: <message>`` and the process
exits with status 1. Setting ``LETDEBUG`` dumps the tokens and program tree
to stderr before evaluation.


File: cli.py
Author: Letlang contributors
Copyright: © 2025 Letlang contributors.
Version: 0.1.0
License: MIT
"""
import os
import sys

from letlang.exceptions import LetlangError
from letlang.interpreter import Interpreter
from letlang.lexer import tokenize
from letlang.nodes import format_node
from letlang.parser import Parser


def print_usage(stream=None):
    """
    Print usage.
    """
    stream = stream if stream is not None else sys.stdout
    lines = [
        "",
        "Letlang Interpreter",
        "",
        "Usage:",
        "    letlang <script>",
        "",
        "Arguments:",
        "    <script>",
        "        Path to a Letlang source file to execute. Output of `print`",
        "        statements is written first, followed by the program's result.",
        "",
        "Example:",
        "    letlang hello.let",
        "",
        "Options:",
        "    -h, --help",
        "        Show this help message and exit.",
        "",
    ]
    stream.write("\n".join(lines) + "\n")


def debug_print_tokens_ast(tokens, program):
    """
    Print tokenized source and program tree to stderr.
    """
    err = sys.stderr
    err.write("\nTokens:\n\n")
    for token in tokens:
        err.write(f"{token!r}\n")
    err.write("\nAST:\n\n")
    err.write(format_node(program) + "\n\n")


def run_script(script_name: str) -> int:
    """
    Run a Letlang script and print its result.

    Returns:
        int: The process exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"{type(e).__name__}: {e}\n")
        return 1

    try:
        tokens = tokenize(code, script_name)
        program = Parser(tokens, script_name).parse()

        if os.environ.get('LETDEBUG'):
            debug_print_tokens_ast(tokens, program)

        result = Interpreter(script_name).run(program)
    except LetlangError as e:
        sys.stdout.flush()
        sys.stderr.write(f"{type(e).__name__}: {e}\n")
        return 1

    print(result.display())
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage(sys.stderr)
    return 1


def entry() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))
