"""localizecss: compile per-language CSV translation tables into CSS."""
from __future__ import annotations

__version__ = "0.1.0"

from localizecss.config import LocalizeConfig  # noqa: E402
from localizecss.runner import LocalizeRunner  # noqa: E402

__all__ = [
    "LocalizeConfig",
    "LocalizeRunner",
    "__version__",
]
