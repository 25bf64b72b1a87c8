"""LanguageResult: outcome of generating one language's stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from localizecss.model.diagnostic import Diagnostic


@dataclass
class LanguageResult:
    """Result produced by the runner for a single language file."""

    language: str
    output_path: Path
    rule_count: int = 0
    written: bool = False
    css: str = ""
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def missing(self) -> list[str]:
        """Selectors from the default language absent in this language."""
        return [d.selector for d in self.diagnostics if d.rule == "missing_translation" and d.selector]

    @property
    def failed(self) -> bool:
        return any(d.is_error for d in self.diagnostics)
