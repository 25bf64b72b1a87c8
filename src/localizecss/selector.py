"""Selector normalization: every selector targets a pseudo-element."""

from __future__ import annotations

import re

__all__ = ["normalize_selector", "DEFAULT_PSEUDO_ELEMENT"]

DEFAULT_PSEUDO_ELEMENT = ":before"

_PSEUDO_RE = re.compile(r":(before|after)$")


def normalize_selector(selector: str) -> str:
    """Return *selector* with a ``:before`` suffix unless it already ends in
    ``:before`` or ``:after``."""
    if _PSEUDO_RE.search(selector):
        return selector
    return selector + DEFAULT_PSEUDO_ELEMENT
