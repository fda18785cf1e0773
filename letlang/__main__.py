"""Run a Letlang script with ``python -m letlang <script>``."""
import sys

from letlang.cli import main

sys.exit(main(sys.argv))
