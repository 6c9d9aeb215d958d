"""Domain models for polyoutline.

This module contains the value types describing polygon boundaries. All models
are immutable (frozen dataclasses) and safe to share between threads for
read-only use.

Key classes:
- Point: A 2D point, also used as a 2D vector
- WindingDirection: Rotational order of a ring's vertices
- Outline: A closed, circularly indexed vertex ring with angle queries
- Polygon: An outer outline with hole outlines
"""

from polyoutline.domain.outline import Outline, oriented
from polyoutline.domain.point import Point, WindingDirection
from polyoutline.domain.polygon import Polygon

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Outline",
    "Polygon",
    # Helpers
    "oriented",
]
