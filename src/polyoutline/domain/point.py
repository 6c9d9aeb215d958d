"""Point and winding direction types.

This module defines the value types outlines are built from:
- Point: An immutable 2D point that doubles as a 2D vector
- WindingDirection: Enum for the rotational order of a vertex ring
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Rotational order in which a ring's vertices are listed.

    With a right-handed, y-up coordinate system:
    - Outer boundaries keep the interior on the left when wound counter-clockwise
    - Holes keep the polygon interior on the left when wound clockwise
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Differences of points are
    returned as Points too, so the same type serves as a 2D vector.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def dot(self, other: "Point") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross_z(self, other: "Point") -> float:
        """Z component of the 3D cross product ``self x other``."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def length_reciprocal(self) -> float:
        """``1 / length``, or infinity for the zero vector."""
        length = self.length()
        if length == 0.0:
            return math.inf
        return 1.0 / length

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])
