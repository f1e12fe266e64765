"""Utilities for rendering quote check results.

The plain-text report is what the CLI prints. The Markdown and CSV builders
back the optional ``--report`` output; keeping them here makes it easy to
test them independently from the scanning routines.
"""

from __future__ import annotations

from typing import Iterable

from quote_scanner.models import ScanResult, Severity

SEVERITY_MARKERS = {
    Severity.WARNING: "!",
    Severity.ERROR: "x",
}

CSV_HEADER = ["Path", "Line", "Column", "Kind", "Severity", "Message", "Context"]


def build_text_report(results: Iterable[ScanResult], *, verbose: bool = False) -> str:
    """Render results as the human-readable console report.

    Files appear in the order given; each is followed by a blank line.
    """

    result_list = [result for result in results if result.issues]
    if not result_list:
        return "No quotation mark issues found!"

    lines: list[str] = [f"Found quotation mark issues in {len(result_list)} file(s):", ""]
    for result in result_list:
        lines.append(str(result.path))
        for issue in result.issues:
            marker = SEVERITY_MARKERS[issue.severity]
            lines.append(
                f"  {marker} Line {issue.line}:{issue.column} - {issue.kind}: {issue.message}"
            )
            if issue.context:
                lines.append(f"     Context: {issue.context}")
        lines.append("")

    if verbose:
        total = sum(len(result.issues) for result in result_list)
        lines.append(f"Total issues found: {total}")

    return "\n".join(lines)


def _escape_cell(value: str) -> str:
    return value.replace("|", "\\|")


def build_report_markdown(results: Iterable[ScanResult]) -> str:
    """Convert the collected scan results into Markdown output."""

    result_list = list(results)
    total_issues = sum(len(result.issues) for result in result_list)
    error_count = sum(
        result.count_by_severity()[Severity.ERROR] for result in result_list
    )

    lines: list[str] = []
    lines.append("# Quote Check Report")
    lines.append("")
    lines.append(f"- Files with issues: {len(result_list)}")
    lines.append(f"- Total issues found: {total_issues}")
    lines.append(f"- Errors: {error_count}")
    lines.append(f"- Warnings: {total_issues - error_count}")

    if not result_list:
        lines.append("")
        lines.append("_No quotation mark issues found._")
        return "\n".join(lines)

    lines.append("")
    lines.append("## File Details")
    for result in result_list:
        lines.append("")
        lines.append(f"### {result.path}")
        lines.append("")
        lines.append(f"Found {len(result.issues)} issue(s).")
        lines.append("")
        lines.append("| Line | Column | Severity | Kind | Message | Context |")
        lines.append("| --- | --- | --- | --- | --- | --- |")
        for issue in result.issues:
            context = f"`{_escape_cell(issue.context)}`" if issue.context else "-"
            lines.append(
                f"| {issue.line} | {issue.column} | {issue.severity.value} | `{issue.kind}` "
                f"| {_escape_cell(issue.message)} | {context} |"
            )

    return "\n".join(lines)


def build_report_csv(results: Iterable[ScanResult]) -> list[list[str]]:
    """Convert the collected scan results into CSV rows.

    The first row contains the column headers.
    """

    rows: list[list[str]] = [list(CSV_HEADER)]
    for result in results:
        for issue in result.issues:
            rows.append(
                [
                    str(result.path),
                    str(issue.line),
                    str(issue.column),
                    issue.kind,
                    issue.severity.value,
                    issue.message,
                    issue.context,
                ]
            )
    return rows
