"""Configuration management for glyphedit.

This module provides configuration management using Pydantic models.
Every distance, threshold and limit used by the editing engine lives here
so hosts can tune them without touching the core.

Key classes:
- HitTestConfig: Picking distances and the on-curve penalty
- GestureConfig: Drag threshold
- PenConfig: Pen tool closing and snapping distances
- NudgeConfig: Arrow key step sizes
- ViewportConfig: Zoom limits and fitting
- UndoConfig: Undo history size
- LoggingConfig: Logging settings
- GlyphEditSettings: Main editor settings
"""

from glyphedit.config.settings import (
    GestureConfig,
    GlyphEditSettings,
    HitTestConfig,
    LoggingConfig,
    NudgeConfig,
    PenConfig,
    UndoConfig,
    ViewportConfig,
    get_default_settings,
)

__all__ = [
    "GestureConfig",
    "GlyphEditSettings",
    "HitTestConfig",
    "LoggingConfig",
    "NudgeConfig",
    "PenConfig",
    "UndoConfig",
    "ViewportConfig",
    "get_default_settings",
]
