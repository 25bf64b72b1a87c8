"""Locate the language CSV files in a source directory."""

from __future__ import annotations

from pathlib import Path

from localizecss.config import SOURCE_EXTENSION
from localizecss.errors import DirectoryListingError

__all__ = ["discover_languages"]


def discover_languages(source_dir: str | Path) -> list[str]:
    """Return the base names of all ``*.csv`` regular files in *source_dir*.

    Raises DirectoryListingError if the directory cannot be listed.
    """
    source = Path(source_dir)
    try:
        entries = list(source.iterdir())
    except OSError as exc:
        raise DirectoryListingError(source, exc.strerror or str(exc)) from exc

    languages = [
        entry.name[: -len(SOURCE_EXTENSION)]
        for entry in entries
        if entry.name.endswith(SOURCE_EXTENSION)
        and len(entry.name) > len(SOURCE_EXTENSION)
        and entry.is_file()
    ]
    return sorted(languages)
