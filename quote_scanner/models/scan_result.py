"""Per-file collection of issues."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .enums import Severity
from .issue import Issue


@dataclass
class ScanResult:
    """Issues found in a single file, in detection order."""

    path: Path
    issues: list[Issue] = field(default_factory=list)

    def has_issues(self) -> bool:
        return bool(self.issues)

    def has_errors(self) -> bool:
        return any(issue.severity is Severity.ERROR for issue in self.issues)

    def count_by_severity(self) -> dict[Severity, int]:
        counts = {severity: 0 for severity in Severity}
        for issue in self.issues:
            counts[issue.severity] += 1
        return counts
