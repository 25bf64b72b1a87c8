"""Fold translation records into a StyleMap."""

from __future__ import annotations

from collections.abc import Iterable

from localizecss.model.record import TranslationRecord
from localizecss.model.style_map import StyleMap

__all__ = ["build_declaration", "build_style_map"]


def build_declaration(record: TranslationRecord) -> str:
    """Return the declaration block for *record*, e.g. ``content:"Hola"``."""
    declaration = f'content:"{record.word}"'
    if record.extra_css:
        declaration += ";" + record.extra_css
    return declaration


def build_style_map(records: Iterable[TranslationRecord]) -> StyleMap:
    """Build a StyleMap keyed by selector; the last record for a selector wins."""
    declarations: dict[str, str] = {}
    for record in records:
        declarations[record.selector] = build_declaration(record)
    return StyleMap(declarations)
