"""
Entry point for running betwixt as a module.

Usage:
    python -m betwixt between "{" "}" --text "a {b} c"
"""

import sys

from betwixt.cli import main

if __name__ == "__main__":
    sys.exit(main())
