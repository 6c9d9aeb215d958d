"""Configuration management for polyoutline.

This module provides configuration management using Pydantic models.

Key classes:
- GeometryConfig: Outline validation thresholds
- LoggingConfig: Logging settings
- PolyOutlineSettings: Main library settings
"""

from polyoutline.config.settings import (
    GeometryConfig,
    LoggingConfig,
    PolyOutlineSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "PolyOutlineSettings",
    "get_default_settings",
]
