"""TranslationRecord: one parsed row of a translation CSV."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationRecord:
    """A selector paired with the word to inject and optional extra CSS."""

    selector: str
    word: str
    extra_css: str = ""
