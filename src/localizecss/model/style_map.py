"""StyleMap: selector to declaration-block mapping for one language."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class StyleMap:
    """Insertion-ordered, read-only mapping of selector -> declaration block.

    Order follows the first appearance of each selector in the CSV; a later
    row with the same selector replaces the declaration in place.
    """

    declarations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "declarations", MappingProxyType(dict(self.declarations))
        )

    @property
    def selectors(self) -> tuple[str, ...]:
        return tuple(self.declarations)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self.declarations.items())

    def get(self, selector: str) -> str | None:
        return self.declarations.get(selector)

    def __contains__(self, selector: object) -> bool:
        return selector in self.declarations

    def __len__(self) -> int:
        return len(self.declarations)
