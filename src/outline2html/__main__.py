"""Module entry point for running with python -m outline2html."""

import sys

from outline2html.cli import main

if __name__ == "__main__":
    sys.exit(main())
