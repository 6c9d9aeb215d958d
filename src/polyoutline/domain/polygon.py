"""Polygon representation.

A Polygon pairs one outer Outline with zero or more hole Outlines. It adds no
geometry of its own; angle and convexity queries are made on its rings.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from polyoutline.domain.outline import Outline


@dataclass(frozen=True)
class Polygon:
    """An outer boundary with holes.

    Rings are stored as given. Holes are expected to wind opposite to the
    outer boundary so that the polygon interior stays on the left of every
    edge; this is not checked.

    Attributes:
        outline: Outer boundary
        holes: Hole boundaries, in insertion order
    """

    outline: Outline
    holes: tuple[Outline, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "holes", tuple(self.holes))

    def has_holes(self) -> bool:
        """Check if the polygon has at least one hole."""
        return len(self.holes) > 0

    def rings(self) -> Iterator[Outline]:
        """Iterate over the outer boundary, then each hole."""
        yield self.outline
        yield from self.holes

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the polygon
        """
        return {
            "outline": self.outline.to_dict(),
            "holes": [h.to_dict() for h in self.holes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        outline = Outline.from_dict(data["outline"])
        holes = tuple(Outline.from_dict(h) for h in data.get("holes", []))
        return cls(outline=outline, holes=holes)
