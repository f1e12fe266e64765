"""Heuristics that decide whether a detector match is an accepted use.

These checks look at a single raw line of text. They know nothing about the
grammar of the file being scanned, so they over-suppress (a ``#`` inside a
string literal hides a smart quote elsewhere on the line) and under-suppress
(a smart quote in a string followed by a trailing comment is still hidden,
whatever its position). Downstream users rely on exactly these triggers, so
any change here is a behaviour change and must be called out as one.
"""

from __future__ import annotations

import unicodedata

from quote_scanner.models import IssueKind

from .detectors import Detector

COMMENT_MARKERS = ("//", "/*", "#")

# Straight-apostrophe forms, checked even though the detector fires on
# curly apostrophes.
CONTRACTION_MARKERS = ("'s", "'t", "'re")

# Inclusive code-point ranges in the Latin script whose Unicode names do not
# mention LATIN, mostly modifier letters and letterlike symbols.
_LATIN_WITHOUT_NAME = (
    (0x00AA, 0x00AA),
    (0x00BA, 0x00BA),
    (0x02B0, 0x02B8),
    (0x02E0, 0x02E4),
    (0x1D2C, 0x1D5C),
    (0x1D9B, 0x1DBE),
    (0x212A, 0x212B),
    (0x2132, 0x2132),
    (0x214E, 0x214E),
    (0xA7F2, 0xA7F9),
    (0xAB5C, 0xAB5F),
    (0xAB69, 0xAB69),
    (0x10780, 0x107BA),
)


def _is_latin_letter(char: str) -> bool:
    code_point = ord(char)
    if any(start <= code_point <= end for start, end in _LATIN_WITHOUT_NAME):
        return True
    return "LATIN" in unicodedata.name(char, "")


def contains_international_text(line: str) -> bool:
    """Return True when ``line`` holds a letter outside the Latin script."""
    for char in line:
        if unicodedata.category(char).startswith("L") and not _is_latin_letter(char):
            return True
    return False


def contains_comment_marker(line: str) -> bool:
    return any(marker in line for marker in COMMENT_MARKERS)


def contains_contraction(line: str) -> bool:
    return any(marker in line for marker in CONTRACTION_MARKERS)


def is_legitimate_use(line: str, detector: Detector) -> bool:
    """Return True when a match of ``detector`` on ``line`` should be suppressed.

    - smart_quotes: the line contains a comment marker anywhere, or
      international text.
    - smart_single_quotes: the line contains a straight contraction.
    - every other kind is always reported.
    """
    if detector.kind == IssueKind.SMART_QUOTES.value:
        return contains_comment_marker(line) or contains_international_text(line)
    if detector.kind == IssueKind.SMART_SINGLE_QUOTES.value:
        return contains_contraction(line)
    return False
