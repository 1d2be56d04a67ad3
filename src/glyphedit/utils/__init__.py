"""Utility functions for glyphedit.

This module provides:

- Logging setup and configuration
- Edit statistics tracking
"""

from glyphedit.utils.logging import (
    EditLogger,
    EditStats,
    configure_logging,
)

__all__ = [
    "EditLogger",
    "EditStats",
    "configure_logging",
]
