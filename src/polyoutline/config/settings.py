"""Configuration settings for polyoutline."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Thresholds for outline precondition validation.

    Outline construction never applies these; they are read only by
    OutlineValidator.
    """

    min_vertices: int = Field(
        default=3,
        ge=1,
        description="Fewest vertices an outline may have to be considered a polygon ring",
    )
    edge_length_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        description="Edges at or below this length are reported as zero-length",
    )
    check_winding: bool = Field(
        default=True,
        description="Compare each ring's signed-area winding against the expected one",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file output when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolyOutlineSettings(BaseModel):
    """Main library settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyOutlineSettings:
    """Get default library settings."""
    return PolyOutlineSettings()
