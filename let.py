"""
Letlang Interpreter

This is the main entry point for the Letlang interpreter. See
:mod:`letlang.cli` for the workflow.
"""
import sys

from letlang.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv))
