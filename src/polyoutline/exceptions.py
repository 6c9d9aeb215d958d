"""Exception hierarchy for polyoutline."""


class PolyOutlineError(Exception):
    """Base exception for all polyoutline errors."""

    pass


class GeometryError(PolyOutlineError):
    """Errors in geometric calculations."""

    pass


class OutlineError(GeometryError):
    """Error with outline data or operations."""

    pass


class EmptyOutlineError(OutlineError, ZeroDivisionError):
    """Vertex lookup on an outline that has no vertices.

    Circular indexing reduces an index modulo the vertex count, which is
    undefined for zero vertices, so this is also a ZeroDivisionError.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Cannot resolve vertex {index} of an empty outline")


class DegenerateOutlineError(OutlineError):
    """Outline failed precondition validation."""

    def __init__(self, issues: list) -> None:
        self.issues = list(issues)
        summary = "; ".join(issue.message for issue in self.issues)
        super().__init__(f"Degenerate outline ({len(self.issues)} issues): {summary}")
