"""Enumerations used by the quote scanner issue models."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity attached to every reported issue.

    Only these two values are ever produced; report consumers may rely on it.
    """

    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class IssueKind(str, Enum):
    """Issue kinds produced by the built-in checks.

    Values:
        SMART_QUOTES .. UNMATCHED_QUOTES: pattern registry detectors
        UNBALANCED_QUOTES: per-line quote parity check
        LINE_LENGTH: line exceeds the configured maximum
        FILE_ERROR: the file could not be opened
        SCAN_ERROR: reading failed part way through the file
    """

    SMART_QUOTES = "smart_quotes"
    SMART_SINGLE_QUOTES = "smart_single_quotes"
    BACKTICKS_IN_STRINGS = "backticks_in_strings"
    MIXED_QUOTES = "mixed_quotes"
    UNMATCHED_QUOTES = "unmatched_quotes"
    UNBALANCED_QUOTES = "unbalanced_quotes"
    LINE_LENGTH = "line_length"
    FILE_ERROR = "file_error"
    SCAN_ERROR = "scan_error"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]
