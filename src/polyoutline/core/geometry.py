"""Geometric helpers shared by outline queries.

This module provides the small amount of pure math the outline model is built on:
- Floor modulo for circular vertex indexing
- Normalized cosine/sine of the angle between two neighbor vectors
- Angle normalization into [0, 2*pi)
- Signed area calculation (shoelace formula)

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polyoutline.domain.point import Point

TAU = 2.0 * math.pi


def floor_mod(i: int, n: int) -> int:
    """Reduce index ``i`` into ``range(n)``.

    Python's ``%`` already floors, so the result is non-negative for any
    signed ``i`` and positive ``n``. Raises ZeroDivisionError when ``n`` is 0.

    Examples:
        >>> floor_mod(-1, 4)
        3
        >>> floor_mod(-19, 4)
        1
        >>> floor_mod(7, 4)
        3
    """
    return i % n


def angle_cos_sin(to_prev: "Point", to_next: "Point") -> tuple[float, float]:
    """Cosine and sine of the counter-clockwise angle from ``to_next`` to ``to_prev``.

    Both vectors are normalized through their reciprocal lengths, so a
    zero-length vector makes the result NaN rather than raising.

    Args:
        to_prev: Vector from a vertex to its predecessor
        to_next: Vector from a vertex to its successor

    Returns:
        Tuple of (cos, sin)
    """
    norm_coef = to_prev.length_reciprocal() * to_next.length_reciprocal()
    cos = norm_coef * to_prev.dot(to_next)
    sin = norm_coef * to_next.cross_z(to_prev)
    return (cos, sin)


def normalize_angle(angle: float) -> float:
    """Shift an ``atan2`` result from (-pi, pi] into [0, 2*pi).

    Tiny negative inputs that round up to exactly 2*pi after the shift map
    to 0.0. NaN passes through unchanged.
    """
    if angle < 0.0:
        angle += TAU
        if angle >= TAU:
            return 0.0
    return angle


def signed_area(points: Sequence["Point"]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> from polyoutline.domain import Point
        >>> square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        >>> signed_area(square)
        1.0
        >>> signed_area(square[::-1])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0
