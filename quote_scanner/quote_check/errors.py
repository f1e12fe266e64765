"""Exceptions that abort a whole scan run.

Per-file problems are never raised; they are recorded as ``file_error`` or
``scan_error`` issues on the file's result instead.
"""

from __future__ import annotations


class QuoteScannerError(Exception):
    """Base class for startup-fatal scanner errors."""


class ConfigurationError(QuoteScannerError):
    """Raised when a configuration file cannot be loaded or validated."""


class FileDiscoveryError(QuoteScannerError):
    """Raised when an include or exclude pattern cannot be expanded."""
