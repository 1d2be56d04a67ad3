"""Configuration settings for Glyphedit."""

from pathlib import Path

from pydantic import BaseModel, Field


class HitTestConfig(BaseModel):
    """Configuration for hit-testing points and segments.

    Distances are in screen pixels so that picking feels the same at
    every zoom level.
    """

    click_distance: float = Field(
        default=10.0,
        gt=0.0,
        le=100.0,
        description="Maximum distance from the cursor to a point that still hits it",
    )
    segment_distance: float = Field(
        default=6.0,
        gt=0.0,
        le=100.0,
        description="Maximum distance from the cursor to a segment that still hits it",
    )
    on_curve_penalty: float = Field(
        default=5.0,
        ge=0.0,
        le=50.0,
        description="Score added to on-curve candidates so nearby handles win ties",
    )


class GestureConfig(BaseModel):
    """Configuration for the pointer gesture recognizer."""

    drag_threshold: float = Field(
        default=3.0,
        ge=0.0,
        le=50.0,
        description="Screen distance a pressed pointer must travel before a drag begins",
    )


class PenConfig(BaseModel):
    """Configuration for the pen tool."""

    close_path_distance: float = Field(
        default=20.0,
        gt=0.0,
        description="Design-space distance to the first point that closes a path",
    )
    curve_snap_distance: float = Field(
        default=10.0,
        gt=0.0,
        description="Screen distance at which the pen snaps to an existing segment",
    )
    min_close_points: int = Field(
        default=3,
        ge=2,
        description="Points required before clicking the first point closes the path",
    )


class NudgeConfig(BaseModel):
    """Step sizes for keyboard nudges, in design units."""

    step: float = Field(default=1.0, gt=0.0, description="Plain arrow key step")
    shift_step: float = Field(default=10.0, gt=0.0, description="Step with shift held")
    ctrl_step: float = Field(default=100.0, gt=0.0, description="Step with ctrl or cmd held")

    def step_for(self, shift: bool, ctrl: bool) -> float:
        """Get the nudge step for a modifier combination.

        Args:
            shift: Whether shift is held
            ctrl: Whether ctrl (or cmd) is held

        Returns:
            Step in design units, ctrl taking precedence over shift
        """
        if ctrl:
            return self.ctrl_step
        if shift:
            return self.shift_step
        return self.step


class ViewportConfig(BaseModel):
    """Configuration for the design/screen viewport."""

    min_zoom: float = Field(default=0.02, gt=0.0, description="Smallest allowed zoom")
    max_zoom: float = Field(default=50.0, gt=0.0, description="Largest allowed zoom")
    zoom_step: float = Field(
        default=1.1,
        gt=1.0,
        le=4.0,
        description="Multiplier applied by one zoom in/out step",
    )
    fit_padding: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Fraction of the view height used by ascender to descender when fitting",
    )

    def clamp_zoom(self, zoom: float) -> float:
        """Clamp a zoom value into the configured range."""
        return min(max(zoom, self.min_zoom), self.max_zoom)


class UndoConfig(BaseModel):
    """Configuration for the undo history."""

    max_history: int = Field(
        default=128,
        ge=1,
        le=10_000,
        description="Maximum number of undo groups kept",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphEditSettings(BaseModel):
    """Main editor settings."""

    hit_test: HitTestConfig = Field(default_factory=HitTestConfig)
    gesture: GestureConfig = Field(default_factory=GestureConfig)
    pen: PenConfig = Field(default_factory=PenConfig)
    nudge: NudgeConfig = Field(default_factory=NudgeConfig)
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    undo: UndoConfig = Field(default_factory=UndoConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphEditSettings:
    """Get default editor settings."""
    return GlyphEditSettings()
