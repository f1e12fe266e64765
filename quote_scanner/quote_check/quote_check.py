"""Quotation-mark checks for source and documentation files.

This module walks the files selected by the include/exclude patterns, runs
the per-line checks (line length, pattern registry filtered through the
legitimacy heuristics, quote balance) and prints a human-readable report.
Optionally a Markdown report and a CSV file are written as well.
"""

from __future__ import annotations

import argparse
import csv
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from dotenv import load_dotenv

from quote_scanner.models import Issue, IssueKind, ScanResult, Severity

from .balance import odd_quote_families
from .configuration import ScanConfiguration, load_config
from .errors import QuoteScannerError
from .file_discovery import discover_files, split_patterns
from .legitimacy import is_legitimate_use
from .quote_check_config import (
    CONTEXT_MAX_LENGTH,
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_INCLUDE_PATTERNS,
    DEFAULT_MAX_LINE_LENGTH,
    ENV_CONFIG_PATH,
    ENV_MAX_LINE_LENGTH,
    LINE_LENGTH_CONTEXT_MAX_LENGTH,
)
from .report_utils import build_report_csv, build_report_markdown, build_text_report
from .text_utils import find_first_match, truncate_string

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_WARNINGS = 2


@dataclass
class ScanSummary:
    """Outcome of a full run across all discovered files."""

    results: list[ScanResult]
    files_scanned: int
    report_path: Path | None = None
    csv_path: Path | None = None

    @property
    def total_issues(self) -> int:
        return sum(len(result.issues) for result in self.results)

    @property
    def has_errors(self) -> bool:
        return any(result.has_errors() for result in self.results)


def _check_line_length(line: str, line_number: int, max_length: int) -> Issue | None:
    if len(line) <= max_length:
        return None
    return Issue(
        line=line_number,
        column=max_length + 1,
        kind=IssueKind.LINE_LENGTH,
        message=f"Line exceeds maximum length ({len(line)} > {max_length})",
        context=truncate_string(line, LINE_LENGTH_CONTEXT_MAX_LENGTH),
        severity=Severity.WARNING,
    )


def _check_balance(line: str, line_number: int) -> Issue | None:
    odd_families = odd_quote_families(line)
    if not odd_families:
        return None
    return Issue(
        line=line_number,
        column=1,
        kind=IssueKind.UNBALANCED_QUOTES,
        message=f"Unbalanced quotes detected ({', '.join(odd_families)})",
        context=truncate_string(line, CONTEXT_MAX_LENGTH),
        severity=Severity.ERROR,
    )


def scan_line(line: str, line_number: int, config: ScanConfiguration) -> list[Issue]:
    """Run every per-line check against ``line``.

    Issues are returned in check order: line length, each detector of the
    registry (skipping matches the legitimacy filter accepts), then balance.
    """

    issues: list[Issue] = []

    length_issue = _check_line_length(line, line_number, config.max_line_length)
    if length_issue is not None:
        issues.append(length_issue)

    for detector in config.detectors:
        if not detector.matches(line):
            continue
        if is_legitimate_use(line, detector):
            continue
        issues.append(
            Issue(
                line=line_number,
                column=find_first_match(line, detector.pattern),
                kind=detector.kind,
                message=detector.description,
                context=truncate_string(line, CONTEXT_MAX_LENGTH),
                severity=Severity.WARNING,
            )
        )

    balance_issue = _check_balance(line, line_number)
    if balance_issue is not None:
        issues.append(balance_issue)

    return issues


def scan_file(file_path: Path, config: ScanConfiguration) -> ScanResult:
    """Scan a single file and return every issue found, in line order.

    Lines are split on ``\\n`` only and decoded one at a time, so a trailing
    ``\\r`` is dropped but a lone ``\\r`` stays inside its line. A file that
    cannot be opened yields one ``file_error`` issue. A failure while reading
    (including invalid UTF-8) stops the scan and appends one ``scan_error``
    issue after the issues from the lines already scanned.
    """

    result = ScanResult(path=file_path)

    try:
        handle = open(file_path, "rb")
    except OSError as exc:
        LOGGER.warning("Could not open %s: %s", file_path, exc)
        result.issues.append(
            Issue(
                line=0,
                column=0,
                kind=IssueKind.FILE_ERROR,
                message=f"Could not open file: {exc}",
                severity=Severity.ERROR,
            )
        )
        return result

    with handle:
        line_number = 0
        try:
            for raw_line in handle:
                raw_line = raw_line.removesuffix(b"\n").removesuffix(b"\r")
                line = raw_line.decode("utf-8")
                line_number += 1
                result.issues.extend(scan_line(line, line_number, config))
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning(
                "Error scanning %s after %d line(s): %s", file_path, line_number, exc
            )
            result.issues.append(
                Issue(
                    line=0,
                    column=0,
                    kind=IssueKind.SCAN_ERROR,
                    message=f"Error scanning file: {exc}",
                    severity=Severity.ERROR,
                )
            )

    LOGGER.debug("Scanned %s: %d issue(s)", file_path, len(result.issues))
    return result


def scan_files(paths: Sequence[Path], config: ScanConfiguration) -> list[ScanResult]:
    """Scan ``paths`` and return one result per path, in the same order."""

    if config.max_workers <= 1 or len(paths) <= 1:
        return [scan_file(path, config) for path in paths]

    # The configuration is frozen, so workers share it without locking.
    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        return list(executor.map(lambda path: scan_file(path, config), paths))


def write_reports(results: list[ScanResult], report_path: Path) -> Path:
    """Write the Markdown report and a sibling CSV file; return the CSV path."""

    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(build_report_markdown(results), encoding="utf-8")

    csv_path = report_path.with_suffix(".csv")
    with csv_path.open("w", encoding="utf-8", newline="") as csv_file:
        writer = csv.writer(csv_file)
        writer.writerows(build_report_csv(results))
    return csv_path


def run_quote_checks(
    config: ScanConfiguration,
    *,
    root: Path | None = None,
    report_path: Optional[Path] = None,
) -> ScanSummary:
    """Discover files, scan them and collect the results that have issues.

    Args:
            config: Scan configuration snapshot
            root: Directory that relative patterns are resolved against
            report_path: When given, write a Markdown report there plus a CSV
                         file with the same stem

    Raises:
            FileDiscoveryError: if a pattern cannot be expanded
    """

    files = discover_files(config.include_patterns, config.exclude_patterns, root=root)
    LOGGER.debug("Found %d file(s) to scan", len(files))

    if config.fix:
        LOGGER.info("--fix was requested but automatic fixes are not available")

    all_results = scan_files(files, config)
    results = [result for result in all_results if result.has_issues()]
    summary = ScanSummary(results=results, files_scanned=len(files))

    LOGGER.debug(
        "Completed scan: %d issue(s) in %d of %d file(s)",
        summary.total_issues,
        len(results),
        len(files),
    )

    if report_path is not None:
        summary.csv_path = write_reports(results, report_path)
        summary.report_path = report_path

    return summary


def determine_exit_code(summary: ScanSummary, config: ScanConfiguration) -> int:
    """Map a run outcome to the process exit status.

    0 when nothing was found, 1 when an error-severity issue was found and
    ``exit_on_error`` is set, 2 for any other run with issues.
    """

    if summary.has_errors and config.exit_on_error:
        return EXIT_ERRORS
    if summary.total_issues > 0:
        return EXIT_WARNINGS
    return EXIT_OK


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        LOGGER.warning("Ignoring %s=%r (not an integer)", name, value)
        return default


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scan source files for smart quotes, mixed or unbalanced quotes and long lines.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Exit codes:
  0  no issues found
  1  an error-severity issue was found (with --exit-on-error), or startup failed
  2  issues were found but none blocks the run

Environment Variables:
  {ENV_CONFIG_PATH}           Default for --config
  {ENV_MAX_LINE_LENGTH}  Default for --max-line-length (default: {DEFAULT_MAX_LINE_LENGTH})
        """,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to a JSON configuration file (default: env {ENV_CONFIG_PATH})",
    )
    parser.add_argument(
        "--include",
        default=None,
        help=f"Comma-separated file patterns to include (default: {','.join(DEFAULT_INCLUDE_PATTERNS)})",
    )
    parser.add_argument(
        "--exclude",
        default=None,
        help=f"Comma-separated file patterns to exclude (default: {','.join(DEFAULT_EXCLUDE_PATTERNS)})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        default=None,
        help="Accepted for compatibility; automatic fixes are not implemented",
    )
    parser.add_argument(
        "--exit-on-error",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Exit with status 1 when error-severity issues are found (default: enabled)",
    )
    parser.add_argument(
        "--max-line-length",
        type=int,
        default=None,
        help=f"Maximum line length before warning (default: env {ENV_MAX_LINE_LENGTH} or {DEFAULT_MAX_LINE_LENGTH})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of files to scan concurrently (default: 1)",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Also write a Markdown report to this path, plus a CSV alongside it",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        default=None,
        help="Path to a .env file to load before reading environment defaults",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def build_configuration(args: argparse.Namespace) -> ScanConfiguration:
    """Combine defaults, the optional config file and CLI flags.

    Precedence, lowest first: built-in defaults, environment defaults,
    configuration file, explicit command-line flags.

    Raises:
            ConfigurationError: if the config file or any value is invalid
    """

    config = ScanConfiguration()

    env_max_length = _env_int(ENV_MAX_LINE_LENGTH, DEFAULT_MAX_LINE_LENGTH)
    if env_max_length != DEFAULT_MAX_LINE_LENGTH:
        config = config.with_overrides(max_line_length=env_max_length)

    config_path = args.config or os.environ.get(ENV_CONFIG_PATH) or None
    if config_path:
        config = load_config(config_path, config)

    return config.with_overrides(
        include_patterns=split_patterns(args.include) if args.include is not None else None,
        exclude_patterns=split_patterns(args.exclude) if args.exclude is not None else None,
        max_line_length=args.max_line_length,
        verbose=args.verbose,
        fix=args.fix,
        exit_on_error=args.exit_on_error,
        max_workers=args.workers,
    )


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    # Existing environment variables win over values in the .env file.
    if args.dotenv is not None:
        load_dotenv(dotenv_path=args.dotenv)
    else:
        load_dotenv()

    try:
        config = build_configuration(args)
        summary = run_quote_checks(config, report_path=args.report)
    except QuoteScannerError as exc:
        LOGGER.error("%s", exc)
        return EXIT_ERRORS

    if config.verbose:
        print(f"Found {summary.files_scanned} files to scan")
    print(build_text_report(summary.results, verbose=config.verbose))

    if summary.report_path is not None:
        print(f"Quote check report written to {summary.report_path.resolve()}")
        if summary.csv_path is not None:
            print(f"CSV report written to {summary.csv_path.resolve()}")

    return determine_exit_code(summary, config)


if __name__ == "__main__":
    raise SystemExit(main())
