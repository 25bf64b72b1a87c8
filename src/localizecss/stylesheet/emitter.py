"""Serialize a StyleMap to CSS text and write it out."""

from __future__ import annotations

import logging
from pathlib import Path

from localizecss.config import ENCODING
from localizecss.model.diagnostic import Diagnostic, Severity
from localizecss.model.style_map import StyleMap

__all__ = ["render_css", "scope_prefix", "write_stylesheet"]

logger = logging.getLogger(__name__)


def scope_prefix(language: str, default_language: str = "") -> str:
    """Ancestor selector for *language*; empty for the default language."""
    if language == default_language:
        return ""
    return f'body[lang="{language}"] '


def render_css(style_map: StyleMap, prefix: str = "") -> str:
    """Concatenate ``<prefix><selector>{<declaration>}`` rules in map order."""
    return "".join(
        f"{prefix}{selector}{{{declaration}}}"
        for selector, declaration in style_map.items()
    )


def write_stylesheet(
    path: str | Path, css: str, language: str | None = None
) -> Diagnostic | None:
    """Write *css* to *path*.

    Returns None on success, or an ERROR diagnostic when the file cannot be
    written. The failure is logged, not raised.
    """
    path = Path(path)
    try:
        path.write_text(css, encoding=ENCODING)
    except OSError as exc:
        logger.error("Cannot write %s: %s", path, exc)
        return Diagnostic(
            rule="output_write_failed",
            severity=Severity.ERROR,
            message=f"Cannot write {path}: {exc}",
            language=language,
        )
    logger.debug("Wrote %s (%d bytes)", path, len(css))
    return None
