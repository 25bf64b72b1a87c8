"""Diagnostic model: structured messages reported alongside generated CSS."""

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
    """A single finding about one language's conversion.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        language: The language file involved, if applicable.
        selector: The selector involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    language: str | None = None
    selector: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        location = ""
        if self.language:
            location = f" [language={self.language}]"
        return f"{self.severity.value}{location}: {self.message}"
