"""Pattern registry for quotation-mark detectors.

Each detector pairs a compiled regular expression with a description. The
registry is plain immutable data: :func:`build_default_detectors` performs no
I/O and always returns the same ordered tuple, which is then carried by the
scan configuration rather than held in module-level mutable state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from quote_scanner.models import IssueKind

LEFT_DOUBLE_QUOTE = "\u201c"
RIGHT_DOUBLE_QUOTE = "\u201d"
LEFT_SINGLE_QUOTE = "\u2018"
RIGHT_SINGLE_QUOTE = "\u2019"
BACKTICK = "`"


@dataclass(frozen=True)
class Detector:
    """A named quoting rule.

    ``replacement`` is declared for a future fix mode and is not used by the
    scanner.
    """

    kind: str
    description: str
    pattern: re.Pattern[str]
    replacement: str = ""

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


def build_default_detectors() -> tuple[Detector, ...]:
    """Return the built-in detectors in the order they are checked."""
    return (
        Detector(
            kind=IssueKind.SMART_QUOTES.value,
            description="Smart quotes (curly quotes)",
            pattern=re.compile(f"[{LEFT_DOUBLE_QUOTE}{RIGHT_DOUBLE_QUOTE}]"),
            replacement='"',
        ),
        Detector(
            kind=IssueKind.SMART_SINGLE_QUOTES.value,
            description="Smart single quotes (curly apostrophes)",
            pattern=re.compile(f"[{LEFT_SINGLE_QUOTE}{RIGHT_SINGLE_QUOTE}]"),
            replacement="'",
        ),
        Detector(
            kind=IssueKind.BACKTICKS_IN_STRINGS.value,
            description="Backticks in string literals (potential template literal)",
            pattern=re.compile(r'"[^"]*' + BACKTICK + r'[^"]*"'),
        ),
        Detector(
            kind=IssueKind.MIXED_QUOTES.value,
            description="Mixed quote types in same string",
            pattern=re.compile(r"\"[^\"]*'[^\"]*\"|'[^']*\"[^']*'"),
        ),
        Detector(
            kind=IssueKind.UNMATCHED_QUOTES.value,
            description="Unmatched quotes",
            # Exactly one quote of either kind on the whole line.
            pattern=re.compile(r"^[^\"]*\"[^\"]*\Z|^[^']*'[^']*\Z"),
        ),
    )


DEFAULT_DETECTORS = build_default_detectors()


def detector_kinds(detectors: tuple[Detector, ...]) -> list[str]:
    return [detector.kind for detector in detectors]
