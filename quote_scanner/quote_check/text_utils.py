"""Small text helpers shared by the scanner and the report builders."""

from __future__ import annotations

import re

from .quote_check_config import ELLIPSIS


def truncate_string(text: str, max_len: int) -> str:
    """Shorten ``text`` to at most ``max_len`` characters.

    Longer strings are cut to ``max_len - 3`` characters followed by a literal
    ``"..."``. When ``max_len`` leaves no room for content the result is the
    ellipsis alone.
    """
    if len(text) <= max_len:
        return text
    if max_len <= len(ELLIPSIS):
        return ELLIPSIS
    return text[: max_len - len(ELLIPSIS)] + ELLIPSIS


def find_first_match(line: str, pattern: re.Pattern[str]) -> int:
    """Return the 1-based column of the first match, or 1 when nothing matches."""
    match = pattern.search(line)
    if match is None:
        return 1
    return match.start() + 1
