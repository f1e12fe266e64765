from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from quote_scanner.models import Issue, IssueKind, ScanResult, Severity


def test_issue_accepts_enum_kind_and_severity_string() -> None:
    issue = Issue(
        line=3,
        column=7,
        kind=IssueKind.SMART_QUOTES,
        message="  Smart quotes (curly quotes) ",
        context="print(“hi”)\n",
        severity="warning",
    )

    assert issue.kind == "smart_quotes"
    assert issue.message == "Smart quotes (curly quotes)"
    assert issue.context == "print(“hi”)"
    assert issue.severity is Severity.WARNING
    assert not issue.is_error


def test_issue_rejects_unknown_severity() -> None:
    with pytest.raises(ValidationError):
        Issue(line=1, column=1, kind="smart_quotes", message="x", severity="info")


def test_issue_rejects_negative_line_and_empty_kind() -> None:
    with pytest.raises(ValidationError):
        Issue(line=-1, column=1, kind="smart_quotes", message="x")
    with pytest.raises(ValidationError) as exc_info:
        Issue(line=1, column=1, kind="  ", message="x")
    assert "kind must not be empty" in str(exc_info.value)


def test_issue_is_frozen() -> None:
    issue = Issue(line=1, column=1, kind="line_length", message="too long")
    with pytest.raises(ValidationError):
        issue.line = 2  # type: ignore[misc]


def test_file_level_issue() -> None:
    issue = Issue(
        line=0,
        column=0,
        kind=IssueKind.FILE_ERROR,
        message="Could not open file: nope",
        severity=Severity.ERROR,
    )
    assert issue.is_file_level
    assert issue.is_error
    assert issue.context == ""


def test_scan_result_counts() -> None:
    result = ScanResult(
        path=Path("example.go"),
        issues=[
            Issue(line=1, column=1, kind="smart_quotes", message="a"),
            Issue(line=2, column=1, kind="unbalanced_quotes", message="b", severity=Severity.ERROR),
            Issue(line=2, column=1, kind="mixed_quotes", message="c"),
        ],
    )

    assert result.has_issues()
    assert result.has_errors()
    assert result.count_by_severity() == {Severity.WARNING: 2, Severity.ERROR: 1}
    assert not ScanResult(path=Path("clean.go")).has_errors()
