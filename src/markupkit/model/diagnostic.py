"""Diagnostic model: structured messages for lenient tokenizer and parser recoveries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about malformed input that was recovered from.

    Attributes:
        code: Identifier for the recovery branch that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        offset: Character offset into the source, if known.
        line: 1-based line of ``offset``.
        column: 1-based column of ``offset``.
    """

    code: str
    severity: Severity
    message: str
    offset: int | None = None
    line: int | None = None
    column: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [line={self.line} col={self.column}]"
        return f"{self.severity.value}{location}: {self.message} ({self.code})"
