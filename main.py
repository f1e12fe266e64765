"""Command-line entrypoint for the quote scanner."""

from __future__ import annotations

from quote_scanner.quote_check.quote_check import main

if __name__ == "__main__":
    raise SystemExit(main())
