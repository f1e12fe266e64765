"""Pydantic model representing a single quotation-mark finding.

Issues are created by the scanning pipeline and never modified afterwards,
so the model is frozen. ``kind`` stays a plain string: the built-in kinds
are listed in :class:`IssueKind`, but custom detectors may use their own.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import Severity


class Issue(BaseModel):
    """One finding in a scanned file.

    Contract:
    - line: 1-based line number, or 0 for file-level problems
    - column: 1-based character offset (best effort), 0 for file-level problems
    - kind: detector or structural kind (e.g. "smart_quotes", "file_error")
    - message: human-readable description
    - context: truncated excerpt of the offending line (may be empty)
    - severity: one of the Severity enum values
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    line: int = Field(ge=0)
    column: int = Field(default=1, ge=0)
    kind: str
    message: str
    context: str = ""
    severity: Severity = Severity.WARNING

    @field_validator("kind", mode="before")
    def _normalise_kind(cls, value: object) -> str:
        if isinstance(value, Enum):
            value = value.value
        return str(value or "").strip()

    @field_validator("message", mode="before")
    def _strip_message(cls, value: object) -> str:
        return str(value or "").strip()

    @field_validator("context", mode="before")
    def _normalise_context(cls, value: object) -> str:
        # Leading whitespace is part of the excerpt; only line endings go.
        return str(value or "").rstrip("\r\n")

    @model_validator(mode="after")
    def final_checks(self) -> "Issue":
        if not self.kind:
            raise ValueError("kind must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        return self

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_file_level(self) -> bool:
        return self.line == 0
