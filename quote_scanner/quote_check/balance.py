"""Per-line quote parity check.

Quote characters are grouped into three families and counted. A line is
balanced when every family count is even. Nesting and ordering are not
checked: ``"'"'`` counts as balanced.
"""

from __future__ import annotations

DOUBLE = "double"
SINGLE = "single"
BACKTICK = "backtick"

QUOTE_FAMILIES: dict[str, str] = {
    '"': DOUBLE,
    "\u201c": DOUBLE,
    "\u201d": DOUBLE,
    "'": SINGLE,
    "\u2018": SINGLE,
    "\u2019": SINGLE,
    "`": BACKTICK,
}


def count_quote_families(line: str) -> dict[str, int]:
    """Return the number of quote characters per family found in ``line``."""
    counts = {DOUBLE: 0, SINGLE: 0, BACKTICK: 0}
    for char in line:
        family = QUOTE_FAMILIES.get(char)
        if family is not None:
            counts[family] += 1
    return counts


def odd_quote_families(line: str) -> list[str]:
    """Return the families with an odd count, in double/single/backtick order."""
    return [family for family, count in count_quote_families(line).items() if count % 2]


def has_balanced_quotes(line: str) -> bool:
    return not odd_quote_families(line)
