"""Error types raised by localizecss."""

from __future__ import annotations

from pathlib import Path


class LocalizeError(Exception):
    """Base class for localizecss failures."""


class DirectoryListingError(LocalizeError):
    """Raised when the source directory cannot be listed."""

    def __init__(self, directory: str | Path, reason: str = "") -> None:
        self.directory = Path(directory)
        self.reason = reason
        message = f"Cannot list source directory: {self.directory}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
