"""Core algorithms for polyoutline.

This package contains:

- Geometry helpers (floor modulo, neighbor angle cos/sin, signed area)
- Outline validation (polyoutline.core.validator), an opt-in check of the
  preconditions the outline queries rely on

Key functions:
- floor_mod: Circular index reduction
- angle_cos_sin: Normalized cos/sin between two neighbor vectors
- normalize_angle: Map an atan2 result into [0, 2*pi)
- signed_area: Polygon area using the shoelace formula
"""

from polyoutline.core.geometry import (
    TAU,
    angle_cos_sin,
    floor_mod,
    normalize_angle,
    signed_area,
)

__all__ = [
    "TAU",
    "angle_cos_sin",
    "floor_mod",
    "normalize_angle",
    "signed_area",
]
