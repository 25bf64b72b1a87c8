from __future__ import annotations

from dataclasses import dataclass

SOURCE_EXTENSION = ".csv"
OUTPUT_EXTENSION = ".css"
ENCODING = "utf-8"


@dataclass(frozen=True)
class LocalizeConfig:
    skip_lines: int = 0
    default_language: str = ""
    source_dir: str = "./localize"
    dest_dir: str = "./docs/localize"
    dry_run: bool = False

    def __post_init__(self) -> None:
        # Bad or negative skip counts mean "skip nothing".
        if not isinstance(self.skip_lines, int) or self.skip_lines < 0:
            object.__setattr__(self, "skip_lines", 0)
