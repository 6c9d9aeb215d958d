"""Utility functions for polyoutline.

This module provides logging setup and the validation logger.
"""

from polyoutline.utils.logging import (
    ValidationLogger,
    ValidationStats,
    configure_logging,
)

__all__ = [
    "ValidationLogger",
    "ValidationStats",
    "configure_logging",
]
