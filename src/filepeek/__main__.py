"""Module entry point so ``python -m filepeek`` launches the CLI."""

import sys

from filepeek.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
