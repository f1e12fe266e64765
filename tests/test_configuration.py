from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from quote_scanner.quote_check.configuration import ScanConfiguration, load_config
from quote_scanner.quote_check.detectors import detector_kinds
from quote_scanner.quote_check.errors import ConfigurationError
from quote_scanner.quote_check.quote_check_config import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_INCLUDE_PATTERNS,
)


def _write_config(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "quote-scanner.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults() -> None:
    config = ScanConfiguration()

    assert config.include_patterns == DEFAULT_INCLUDE_PATTERNS
    assert config.exclude_patterns == DEFAULT_EXCLUDE_PATTERNS
    assert config.max_line_length == 120
    assert config.verbose is False
    assert config.fix is False
    assert config.exit_on_error is True
    assert config.max_workers == 1
    assert len(detector_kinds(config.detectors)) == 5


def test_configuration_is_frozen() -> None:
    config = ScanConfiguration()
    with pytest.raises(ValidationError):
        config.max_line_length = 10  # type: ignore[misc]


def test_patterns_accept_comma_separated_string() -> None:
    config = ScanConfiguration(include_patterns="**/*.{go,js}, *.md")
    assert config.include_patterns == ("**/*.{go,js}", "*.md")


def test_with_overrides_ignores_none_and_validates() -> None:
    config = ScanConfiguration()

    updated = config.with_overrides(max_line_length=80, verbose=None)

    assert updated.max_line_length == 80
    assert updated.verbose is False
    assert config.max_line_length == 120
    assert updated.detectors == config.detectors

    with pytest.raises(ConfigurationError):
        config.with_overrides(max_line_length=0)


def test_load_config_applies_settings(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {
            "include": ["src/**/*.py"],
            "exclude": "build/**,dist/**",
            "max_line_length": 99,
            "exit_on_error": False,
            "fix": True,
            "workers": 4,
        },
    )
    original = ScanConfiguration()

    config = load_config(path, original)

    assert config.include_patterns == ("src/**/*.py",)
    assert config.exclude_patterns == ("build/**", "dist/**")
    assert config.max_line_length == 99
    assert config.exit_on_error is False
    assert config.fix is True
    assert config.max_workers == 4
    assert config.verbose is False
    assert original.max_line_length == 120


def test_load_config_empty_object_changes_nothing(tmp_path: Path) -> None:
    path = _write_config(tmp_path, {})
    original = ScanConfiguration(max_line_length=70)

    assert load_config(path, original) == original


def test_load_config_empty_file_changes_nothing(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("", encoding="utf-8")

    assert load_config(path, ScanConfiguration()) == ScanConfiguration()


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Could not read config file"):
        load_config(tmp_path / "nope.json", ScanConfiguration())


def test_load_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not valid JSON"):
        load_config(path, ScanConfiguration())


@pytest.mark.parametrize(
    "data",
    [
        ["not", "an", "object"],
        {"unknown_key": 1},
        {"max_line_length": 0},
        {"workers": "many"},
    ],
)
def test_load_config_rejects_invalid_settings(tmp_path: Path, data: object) -> None:
    path = _write_config(tmp_path, data)

    with pytest.raises(ConfigurationError):
        load_config(path, ScanConfiguration())
