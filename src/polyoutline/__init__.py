"""polyoutline - Circular polygon outlines with local angle queries.

polyoutline represents the boundary of a simple polygon as an implicitly closed,
circularly indexed ring of 2D vertices, and answers per-vertex questions about
it: neighbors, convexity, inner and outer angles. A Polygon pairs one outer
outline with any number of hole outlines.

Example:
    >>> from polyoutline.domain import Outline
    >>> triangle = Outline([(0, 0), (1, 0), (1, 1)])
    >>> triangle.convex(1)
    True
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
