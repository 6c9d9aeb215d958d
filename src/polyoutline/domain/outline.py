"""Circular vertex rings and per-vertex angle queries.

An Outline is one closed boundary ring: the outer boundary of a polygon or one
of its holes. The ring is closed implicitly, so the vertex after the last one
is the first, and every integer index resolves to exactly one vertex.

Every query assumes the vertices are ordered so that the polygon interior lies
on the left of each edge ``i -> i+1``. This is not checked here; see
``polyoutline.core.validator`` for an explicit check.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from polyoutline.core.geometry import (
    TAU,
    angle_cos_sin,
    floor_mod,
    normalize_angle,
    signed_area,
)
from polyoutline.domain.point import Point, WindingDirection
from polyoutline.exceptions import EmptyOutlineError


def oriented(
    points: Iterable[Point | tuple[float, float]],
    order: WindingDirection,
) -> tuple[Point | tuple[float, float], ...]:
    """Arrange vertices so the interior ends up on the left.

    Args:
        points: Vertices in the order they were produced
        order: Winding of ``points`` as given

    Returns:
        The vertices unchanged for COUNTER_CLOCKWISE, reversed for CLOCKWISE
    """
    vertices = tuple(points)
    if order is WindingDirection.CLOCKWISE:
        return vertices[::-1]
    return vertices


@dataclass(frozen=True)
class Outline:
    """A closed, circularly indexed ring of vertices.

    Accepts Points or (x, y) pairs in any finite iterable; they are stored as a
    tuple of Points in the order delivered. Empty and short outlines are
    accepted, but indexing an empty outline raises EmptyOutlineError.

    Attributes:
        vertices: Vertices of the ring, without a closing duplicate
    """

    vertices: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        vertices = tuple(
            v if isinstance(v, Point) else Point(*v) for v in self.vertices
        )
        object.__setattr__(self, "vertices", vertices)

    @classmethod
    def from_vertices(
        cls,
        points: Iterable[Point | tuple[float, float]],
        order: WindingDirection = WindingDirection.COUNTER_CLOCKWISE,
    ) -> "Outline":
        """Build an outline from vertices of known winding.

        Clockwise input is reversed so the stored ring keeps its interior on
        the left. The tag is not kept on the outline.

        Args:
            points: Vertices in their original order
            order: Winding of ``points`` as given

        Returns:
            Outline instance
        """
        return cls(oriented(points, order))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __getitem__(self, i: int) -> Point:
        return self.at(i)

    def at(self, i: int) -> Point:
        """Vertex at index ``i``, wrapping around in both directions.

        Args:
            i: Index of vertex. May be negative or exceed the vertex count

        Returns:
            The vertex at ``i`` modulo the vertex count

        Raises:
            EmptyOutlineError: If the outline has no vertices
        """
        try:
            return self.vertices[floor_mod(i, len(self.vertices))]
        except ZeroDivisionError:
            raise EmptyOutlineError(i) from None

    def prev_that_next(self, i: int) -> tuple[Point, Point, Point]:
        """Tuple of the ``i-1``, ``i`` and ``i+1`` vertices."""
        return (self.at(i - 1), self.at(i), self.at(i + 1))

    def to_neighbors(self, i: int) -> tuple[Point, Point]:
        """Vectors from vertex ``i`` to its previous and to its next vertex."""
        prev, that, next_ = self.prev_that_next(i)
        return (prev - that, next_ - that)

    def inner_angle_cos_sin(self, i: int) -> tuple[float, float]:
        """Cosine and sine of the inner angle at vertex ``i``.

        The angle is measured counter-clockwise from the vector to the next
        vertex to the vector to the previous one. A zero-length neighbor edge
        makes both values NaN.

        Returns:
            Tuple of (cos, sin)
        """
        to_prev, to_next = self.to_neighbors(i)
        return angle_cos_sin(to_prev, to_next)

    def convex(self, i: int) -> bool:
        """Test if the angle at vertex ``i`` is convex (less than pi)."""
        _, sin = self.inner_angle_cos_sin(i)
        return sin > 0.0

    def concave(self, i: int) -> bool:
        """Test if the angle at vertex ``i`` is concave.

        Straight (sin == 0) and undefined (NaN) vertices count as concave.
        """
        return not self.convex(i)

    def inner_angle(self, i: int) -> float:
        """Inner angle at vertex ``i`` in radians, within [0, 2*pi).

        Reflex vertices report angles greater than pi. NaN when a neighbor
        edge has zero length.
        """
        cos, sin = self.inner_angle_cos_sin(i)
        return normalize_angle(math.atan2(sin, cos))

    def outer_angle(self, i: int) -> float:
        """Outer angle at vertex ``i``: ``2*pi`` minus the inner angle."""
        return TAU - self.inner_angle(i)

    def convex_vertices(self) -> list[int]:
        """Indices of convex vertices, in stored order."""
        return [i for i in range(len(self.vertices)) if self.convex(i)]

    def concave_vertices(self) -> list[int]:
        """Indices of concave vertices, in stored order."""
        return [i for i in range(len(self.vertices)) if self.concave(i)]

    def signed_area(self) -> float:
        """Signed area of the ring; positive when wound counter-clockwise."""
        return signed_area(self.vertices)

    def winding(self) -> WindingDirection | None:
        """Winding direction implied by the signed area.

        Returns:
            COUNTER_CLOCKWISE or CLOCKWISE, or None for a zero-area ring
        """
        area = self.signed_area()
        if area > 0.0:
            return WindingDirection.COUNTER_CLOCKWISE
        if area < 0.0:
            return WindingDirection.CLOCKWISE
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the outline
        """
        return {"vertices": [v.to_dict() for v in self.vertices]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Outline":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an outline

        Returns:
            Outline instance
        """
        return cls(Point.from_dict(v) for v in data["vertices"])
