"""Quote check package exports.

This package exposes the key helpers used by other parts of the project
so callers can import from ``quote_scanner.quote_check``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .balance import count_quote_families, has_balanced_quotes
    from .configuration import ScanConfiguration, load_config
    from .detectors import Detector, build_default_detectors
    from .errors import ConfigurationError, FileDiscoveryError, QuoteScannerError
    from .file_discovery import discover_files, expand_braces, split_patterns
    from .legitimacy import contains_international_text, is_legitimate_use
    from .quote_check import (
        determine_exit_code,
        run_quote_checks,
        scan_file,
        scan_files,
        scan_line,
    )
    from .report_utils import build_report_csv, build_report_markdown, build_text_report
    from .text_utils import find_first_match, truncate_string

__all__ = [
    "build_default_detectors",
    "build_report_csv",
    "build_report_markdown",
    "build_text_report",
    "contains_international_text",
    "count_quote_families",
    "determine_exit_code",
    "discover_files",
    "expand_braces",
    "find_first_match",
    "has_balanced_quotes",
    "is_legitimate_use",
    "load_config",
    "run_quote_checks",
    "scan_file",
    "scan_files",
    "scan_line",
    "split_patterns",
    "truncate_string",
    "ConfigurationError",
    "Detector",
    "FileDiscoveryError",
    "QuoteScannerError",
    "ScanConfiguration",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "build_default_detectors": (".detectors", "build_default_detectors"),
    "build_report_csv": (".report_utils", "build_report_csv"),
    "build_report_markdown": (".report_utils", "build_report_markdown"),
    "build_text_report": (".report_utils", "build_text_report"),
    "contains_international_text": (".legitimacy", "contains_international_text"),
    "count_quote_families": (".balance", "count_quote_families"),
    "determine_exit_code": (".quote_check", "determine_exit_code"),
    "discover_files": (".file_discovery", "discover_files"),
    "expand_braces": (".file_discovery", "expand_braces"),
    "find_first_match": (".text_utils", "find_first_match"),
    "has_balanced_quotes": (".balance", "has_balanced_quotes"),
    "is_legitimate_use": (".legitimacy", "is_legitimate_use"),
    "load_config": (".configuration", "load_config"),
    "run_quote_checks": (".quote_check", "run_quote_checks"),
    "scan_file": (".quote_check", "scan_file"),
    "scan_files": (".quote_check", "scan_files"),
    "scan_line": (".quote_check", "scan_line"),
    "split_patterns": (".file_discovery", "split_patterns"),
    "truncate_string": (".text_utils", "truncate_string"),
    "ConfigurationError": (".errors", "ConfigurationError"),
    "Detector": (".detectors", "Detector"),
    "FileDiscoveryError": (".errors", "FileDiscoveryError"),
    "QuoteScannerError": (".errors", "QuoteScannerError"),
    "ScanConfiguration": (".configuration", "ScanConfiguration"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    Submodules are only imported when used, which keeps ``python -m`` start-up
    light and avoids import-order problems between the check modules.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"quote_scanner.quote_check{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
