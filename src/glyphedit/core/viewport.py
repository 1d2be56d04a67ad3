"""Mapping between design space and screen space.

Design space is the font coordinate system (y up, font units); screen space
is the canvas (y down, pixels):

    screen = (x * zoom + offset.x, -y * zoom + offset.y)
"""

from dataclasses import dataclass, field

from fontTools.misc.transform import Transform

from glyphedit.config.settings import ViewportConfig
from glyphedit.domain.geometry import Point, Rect, Vec2
from glyphedit.domain.glyph import FontMetrics


@dataclass
class ViewPort:
    """Pan and zoom of the editing canvas.

    Attributes:
        offset: Screen position of the design-space origin
        zoom: Screen pixels per font unit (always > 0)
    """

    offset: Vec2 = field(default_factory=Vec2)
    zoom: float = 1.0

    def __post_init__(self) -> None:
        if self.zoom <= 0:
            raise ValueError(f"zoom must be positive, got {self.zoom}")

    def affine(self) -> Transform:
        """The design-to-screen transform."""
        return Transform(self.zoom, 0, 0, -self.zoom, self.offset.x, self.offset.y)

    def to_screen(self, point: Point) -> Point:
        x, y = self.affine().transformPoint(point.to_tuple())
        return Point(x, y)

    def screen_to_design(self, point: Point) -> Point:
        x, y = self.affine().inverse().transformPoint(point.to_tuple())
        return Point(x, y)

    def screen_delta_to_design(self, delta: Vec2) -> Vec2:
        """Convert a screen-space displacement to design space."""
        return Vec2(delta.x / self.zoom, -delta.y / self.zoom)

    def rect_to_design(self, rect: Rect) -> Rect:
        return Rect.from_points(
            self.screen_to_design(Point(rect.x0, rect.y0)),
            self.screen_to_design(Point(rect.x1, rect.y1)),
        )

    def set_zoom(
        self,
        zoom: float,
        config: ViewportConfig | None = None,
        anchor: Point | None = None,
    ) -> None:
        """Change the zoom, keeping a screen point fixed.

        Args:
            zoom: Requested zoom, clamped to the configured range
            config: Zoom limits (defaults apply if None)
            anchor: Screen point that stays put (offset origin if None)
        """
        config = config or ViewportConfig()
        new_zoom = config.clamp_zoom(zoom)
        if anchor is not None:
            design = self.screen_to_design(anchor)
            self.offset = Vec2(anchor.x - design.x * new_zoom, anchor.y + design.y * new_zoom)
        self.zoom = new_zoom

    def zoom_in(self, config: ViewportConfig | None = None, anchor: Point | None = None) -> None:
        config = config or ViewportConfig()
        self.set_zoom(self.zoom * config.zoom_step, config, anchor)

    def zoom_out(self, config: ViewportConfig | None = None, anchor: Point | None = None) -> None:
        config = config or ViewportConfig()
        self.set_zoom(self.zoom / config.zoom_step, config, anchor)

    def fit_glyph(
        self,
        metrics: FontMetrics,
        advance_width: float,
        view_size: tuple[float, float],
        config: ViewportConfig | None = None,
    ) -> None:
        """Center a glyph in a view and scale its vertical metrics to fit.

        The ascender-to-descender range fills ``fit_padding`` of the view
        height and the advance width is centered horizontally.

        Args:
            metrics: Font vertical metrics
            advance_width: Advance width of the glyph
            view_size: (width, height) of the view in pixels
            config: Zoom limits and padding (defaults apply if None)
        """
        config = config or ViewportConfig()
        width, height = view_size
        span = metrics.ascender - metrics.descender
        if span <= 0 or height <= 0:
            return
        zoom = config.clamp_zoom(height * config.fit_padding / span)
        center_x = width / 2.0
        center_y = height / 2.0
        self.zoom = zoom
        self.offset = Vec2(
            center_x - advance_width / 2.0 * zoom,
            center_y + (metrics.ascender + metrics.descender) / 2.0 * zoom,
        )

    def clone(self) -> "ViewPort":
        return ViewPort(offset=self.offset, zoom=self.zoom)
