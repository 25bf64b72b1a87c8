"""Core data model types for localizecss."""

from localizecss.model.diagnostic import Diagnostic, Severity
from localizecss.model.record import TranslationRecord
from localizecss.model.result import LanguageResult
from localizecss.model.style_map import StyleMap

__all__ = [
    "Diagnostic",
    "LanguageResult",
    "Severity",
    "StyleMap",
    "TranslationRecord",
]
