"""Completeness check: compare a language against the default language."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from localizecss.model.diagnostic import Diagnostic, Severity
from localizecss.model.style_map import StyleMap

__all__ = ["check_completeness", "find_missing", "report_missing"]

logger = logging.getLogger(__name__)


def find_missing(style_map: StyleMap, default_selectors: Sequence[str]) -> list[str]:
    """Default selectors absent from *style_map*, in default order."""
    return [s for s in default_selectors if s not in style_map]


def check_completeness(
    language: str, style_map: StyleMap, default_selectors: Sequence[str]
) -> list[Diagnostic]:
    """Return one WARNING diagnostic per selector missing from *language*."""
    return [
        Diagnostic(
            rule="missing_translation",
            severity=Severity.WARNING,
            message=f"Missing translation for {selector}",
            language=language,
            selector=selector,
        )
        for selector in find_missing(style_map, default_selectors)
    ]


def report_missing(
    language: str,
    diagnostics: Sequence[Diagnostic],
    log: logging.Logger | None = None,
) -> None:
    """Log a header naming *language* followed by each missing selector.

    The block goes out as a single record so that reports from concurrent
    languages never interleave. Nothing is logged when no selector is missing.
    """
    log = log or logger
    missing = [d.selector for d in diagnostics if d.rule == "missing_translation"]
    if not missing:
        return
    log.warning(
        "Items missing: %s\n%s", language, "\n".join(f"  {s}" for s in missing)
    )
