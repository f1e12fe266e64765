"""Public model exports for the project.

Tests and other modules should import
``from quote_scanner.models import Issue, Severity``.
"""

from __future__ import annotations

from .enums import IssueKind, Severity
from .issue import Issue
from .scan_result import ScanResult

__all__ = ["Issue", "IssueKind", "ScanResult", "Severity"]
