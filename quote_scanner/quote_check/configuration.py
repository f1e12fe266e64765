"""Scan configuration and the configuration-file loader.

``ScanConfiguration`` is a frozen snapshot built once at startup. Updates,
whether from a JSON configuration file or from CLI flags, always produce a
new validated snapshot; nothing mutates a configuration after creation, so a
single instance can be shared by concurrent file scans.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .detectors import DEFAULT_DETECTORS, Detector
from .errors import ConfigurationError
from .file_discovery import split_patterns
from .quote_check_config import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_INCLUDE_PATTERNS,
    DEFAULT_MAX_LINE_LENGTH,
)

LOGGER = logging.getLogger(__name__)


def _normalise_patterns(value: object) -> object:
    if value is None:
        return value
    if isinstance(value, str):
        return split_patterns(value)
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return value


class ScanConfiguration(BaseModel):
    """Read-only options for one scanner run.

    Attributes:
        include_patterns: Glob patterns selecting files to scan.
        exclude_patterns: Patterns removing paths from the include results.
        max_line_length: Lines longer than this produce a ``line_length`` warning.
        verbose: Print file and issue totals alongside the report.
        fix: Accepted for compatibility; no fixes are applied.
        exit_on_error: Exit with status 1 when any error-severity issue is found.
        detectors: Pattern registry run against every line.
        max_workers: Number of files scanned concurrently.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    include_patterns: tuple[str, ...] = DEFAULT_INCLUDE_PATTERNS
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    max_line_length: int = Field(default=DEFAULT_MAX_LINE_LENGTH, ge=1)
    verbose: bool = False
    fix: bool = False
    exit_on_error: bool = True
    detectors: tuple[Detector, ...] = DEFAULT_DETECTORS
    max_workers: int = Field(default=1, ge=1)

    @field_validator("include_patterns", "exclude_patterns", mode="before")
    def _split_patterns(cls, value: object) -> object:
        return _normalise_patterns(value)

    def with_overrides(self, **overrides: Any) -> "ScanConfiguration":
        """Return a new validated configuration with ``overrides`` applied.

        Keys whose value is ``None`` are ignored so unset CLI flags keep the
        current value.
        """
        values = dict(self)
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return type(self)(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc


class ConfigFileSettings(BaseModel):
    """Keys accepted in a JSON configuration file.

    Names mirror the command-line flags. Pattern keys accept a list of
    globs or a single comma-separated string.
    """

    model_config = ConfigDict(extra="forbid")

    include: list[str] | None = None
    exclude: list[str] | None = None
    max_line_length: int | None = Field(default=None, ge=1)
    verbose: bool | None = None
    fix: bool | None = None
    exit_on_error: bool | None = None
    workers: int | None = Field(default=None, ge=1)

    @field_validator("include", "exclude", mode="before")
    def _split_patterns(cls, value: object) -> object:
        return _normalise_patterns(value)

    def as_overrides(self) -> dict[str, Any]:
        return {
            "include_patterns": self.include,
            "exclude_patterns": self.exclude,
            "max_line_length": self.max_line_length,
            "verbose": self.verbose,
            "fix": self.fix,
            "exit_on_error": self.exit_on_error,
            "max_workers": self.workers,
        }


def load_config(config_path: Path | str, config: ScanConfiguration) -> ScanConfiguration:
    """Apply the settings in a JSON configuration file to ``config``.

    Returns a new configuration; ``config`` itself is left untouched. Keys
    missing from the file keep their current values.

    Raises:
            ConfigurationError: when the file is missing, unreadable, not a
                JSON object, or holds unknown or invalid settings
    """

    path = Path(config_path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Could not read config file {path}: {exc}") from exc

    try:
        data = json.loads(raw_text) if raw_text.strip() else {}
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a JSON object, got {type(data).__name__}"
        )

    try:
        settings = ConfigFileSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {path}: {exc}") from exc

    overrides = settings.as_overrides()
    applied = sorted(key for key, value in overrides.items() if value is not None)
    LOGGER.debug("Loaded config %s (settings: %s)", path, ", ".join(applied) or "none")
    return config.with_overrides(**overrides)
