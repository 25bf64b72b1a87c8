"""Naive CSV reader for translation tables.

Each row is ``selector,word[,extra-css]``. Fields are split on every comma;
everything after the second field is rejoined as the extra CSS, so commas
survive there but nowhere else. There is no quoting.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from localizecss.config import ENCODING
from localizecss.model.record import TranslationRecord
from localizecss.selector import normalize_selector

__all__ = ["load_csv", "parse_line", "parse_lines"]

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","


def parse_line(line: str) -> TranslationRecord | None:
    """Parse one row. Returns None for blank rows and rows with no selector."""
    line = line.rstrip("\r\n")
    if not line:
        return None
    selector, _, rest = line.partition(FIELD_SEPARATOR)
    if not selector:
        return None
    word, _, extra_css = rest.partition(FIELD_SEPARATOR)
    return TranslationRecord(
        selector=normalize_selector(selector),
        word=word,
        extra_css=extra_css,
    )


def parse_lines(lines: Iterable[str], skip_lines: int = 0) -> list[TranslationRecord]:
    """Turn raw CSV lines into records, ignoring the first *skip_lines* lines."""
    records: list[TranslationRecord] = []
    for index, line in enumerate(lines):
        if index < skip_lines:
            continue
        record = parse_line(line)
        if record is not None:
            records.append(record)
    return records


def load_csv(path: str | Path, skip_lines: int = 0) -> list[TranslationRecord]:
    """Read and parse the CSV at *path*.

    An unreadable or undecodable file yields no records rather than an error.
    """
    path = Path(path)
    try:
        with path.open(encoding=ENCODING, newline="") as fh:
            return parse_lines(fh, skip_lines)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s, treating as empty: %s", path, exc)
        return []
