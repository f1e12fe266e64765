"""Entry point for running the quote checker as a module."""

import sys

from .quote_check import main

if __name__ == "__main__":
    sys.exit(main())
