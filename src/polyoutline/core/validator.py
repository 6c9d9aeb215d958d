"""Outline precondition checks.

Outline queries assume a ring with at least three vertices, no zero-length
edges, and the polygon interior on the left of every edge. None of this is
enforced at construction. OutlineValidator checks these preconditions on
request so callers can reject bad input before handing it to angle-sensitive
code. Self-intersection is not checked.
"""

from dataclasses import dataclass
from enum import Enum

from polyoutline.config import GeometryConfig, PolyOutlineSettings
from polyoutline.domain import Outline, Polygon, WindingDirection
from polyoutline.exceptions import DegenerateOutlineError
from polyoutline.utils import ValidationLogger, configure_logging


class IssueKind(str, Enum):
    """Kind of precondition an outline violates."""

    TOO_FEW_VERTICES = "too_few_vertices"
    ZERO_LENGTH_EDGE = "zero_length_edge"
    WRONG_WINDING = "wrong_winding"


@dataclass(frozen=True)
class OutlineIssue:
    """A single precondition violation.

    Attributes:
        kind: Which precondition failed
        message: Human-readable description
        index: Vertex index the issue starts at (None for whole-ring issues)
        ring: Label of the ring the issue was found on
    """

    kind: IssueKind
    message: str
    index: int | None = None
    ring: str = "outline"


class OutlineValidator:
    """Checks outlines and polygons against the query preconditions."""

    def __init__(
        self,
        config: GeometryConfig | None = None,
        logger: ValidationLogger | None = None,
    ) -> None:
        self.config = config if config is not None else GeometryConfig()
        self.logger = logger if logger is not None else ValidationLogger()

    @classmethod
    def from_settings(cls, settings: PolyOutlineSettings) -> "OutlineValidator":
        """Create a validator and configure logging from library settings."""
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )
        return cls(settings.geometry, ValidationLogger(logger))

    def check(
        self,
        outline: Outline,
        expected: WindingDirection | None = None,
        label: str = "outline",
    ) -> list[OutlineIssue]:
        """Collect every precondition the outline violates.

        Args:
            outline: Outline to check
            expected: Winding the ring should have; skipped when None
            label: Ring label used in issues and log records

        Returns:
            List of issues, empty if the outline is usable
        """
        issues: list[OutlineIssue] = []
        n = len(outline)

        if n < self.config.min_vertices:
            issues.append(
                OutlineIssue(
                    kind=IssueKind.TOO_FEW_VERTICES,
                    message=f"{label}: {n} vertices, need at least {self.config.min_vertices}",
                    ring=label,
                )
            )

        for i in range(n):
            edge = outline.at(i + 1) - outline.at(i)
            if edge.length() <= self.config.edge_length_tolerance:
                issues.append(
                    OutlineIssue(
                        kind=IssueKind.ZERO_LENGTH_EDGE,
                        message=f"{label}: edge {i} -> {(i + 1) % n} has zero length",
                        index=i,
                        ring=label,
                    )
                )

        if expected is not None and self.config.check_winding and n > 0:
            actual = outline.winding()
            if actual is not expected:
                found = actual.name if actual is not None else "zero area"
                issues.append(
                    OutlineIssue(
                        kind=IssueKind.WRONG_WINDING,
                        message=f"{label}: expected {expected.name}, found {found}",
                        ring=label,
                    )
                )

        if issues:
            self.logger.log_outline_rejected(label, n, issues)
        else:
            self.logger.log_outline_checked(label, n)

        return issues

    def validate(
        self,
        outline: Outline,
        expected: WindingDirection | None = None,
        label: str = "outline",
    ) -> Outline:
        """Check an outline and raise on any issue.

        Returns:
            The same outline, for chaining

        Raises:
            DegenerateOutlineError: If any precondition is violated
        """
        issues = self.check(outline, expected=expected, label=label)
        if issues:
            raise DegenerateOutlineError(issues)
        return outline

    def check_polygon(self, polygon: Polygon) -> list[OutlineIssue]:
        """Check the outer ring as counter-clockwise and every hole as clockwise.

        Returns:
            Issues from all rings, outer ring first
        """
        issues = self.check(
            polygon.outline,
            expected=WindingDirection.COUNTER_CLOCKWISE,
            label="outline",
        )
        for idx, hole in enumerate(polygon.holes):
            issues.extend(
                self.check(hole, expected=WindingDirection.CLOCKWISE, label=f"hole[{idx}]")
            )
        return issues

    def validate_polygon(self, polygon: Polygon) -> Polygon:
        """Check a polygon and raise on any issue.

        Raises:
            DegenerateOutlineError: If any ring violates a precondition
        """
        issues = self.check_polygon(polygon)
        if issues:
            raise DegenerateOutlineError(issues)
        return polygon
