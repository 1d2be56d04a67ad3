"""Reference points for the coordinate panel.

The bounding box of the selection is split into a 3x3 grid; the chosen
Quadrant names which of the nine reference points a coordinate readout
refers to.
"""

from dataclasses import dataclass
from enum import Enum, auto

from glyphedit.domain.geometry import Point, Rect


class Quadrant(Enum):
    """One of nine reference positions on a rectangle.

    Names are visual: TOP is the upper edge as seen on screen.
    """

    TOP_LEFT = auto()
    TOP = auto()
    TOP_RIGHT = auto()
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM = auto()
    BOTTOM_RIGHT = auto()

    def _zones(self) -> tuple[int, int]:
        return _ZONES[self]

    def point_in_rect(self, rect: Rect) -> Point:
        """Reference point in a screen-space rectangle (y grows downwards)."""
        xs = (rect.x0, rect.center().x, rect.x1)
        ys = (rect.y0, rect.center().y, rect.y1)
        x_zone, y_zone = self._zones()
        return Point(xs[x_zone], ys[y_zone])

    def point_in_design_rect(self, rect: Rect) -> Point:
        """Reference point in a design-space rectangle (y grows upwards)."""
        xs = (rect.x0, rect.center().x, rect.x1)
        ys = (rect.y1, rect.center().y, rect.y0)
        x_zone, y_zone = self._zones()
        return Point(xs[x_zone], ys[y_zone])

    @classmethod
    def for_point_in_bounds(cls, point: Point, bounds: Rect) -> "Quadrant":
        """Quadrant of the 3x3 grid over screen-space ``bounds`` containing ``point``.

        Args:
            point: Point to classify
            bounds: Screen-space rectangle divided into thirds

        Returns:
            The quadrant whose cell contains the point; points outside the
            rectangle map to the nearest edge cell
        """
        third_w = bounds.width / 3.0
        third_h = bounds.height / 3.0

        if point.x < bounds.x0 + third_w:
            x_zone = 0
        elif point.x > bounds.x1 - third_w:
            x_zone = 2
        else:
            x_zone = 1

        if point.y < bounds.y0 + third_h:
            y_zone = 0
        elif point.y > bounds.y1 - third_h:
            y_zone = 2
        else:
            y_zone = 1

        return _BY_ZONES[(x_zone, y_zone)]

    def inverse(self) -> "Quadrant":
        """The quadrant diagonally opposite (CENTER maps to itself)."""
        x_zone, y_zone = self._zones()
        return _BY_ZONES[(2 - x_zone, 2 - y_zone)]


_ZONES: dict[Quadrant, tuple[int, int]] = {
    Quadrant.TOP_LEFT: (0, 0),
    Quadrant.TOP: (1, 0),
    Quadrant.TOP_RIGHT: (2, 0),
    Quadrant.LEFT: (0, 1),
    Quadrant.CENTER: (1, 1),
    Quadrant.RIGHT: (2, 1),
    Quadrant.BOTTOM_LEFT: (0, 2),
    Quadrant.BOTTOM: (1, 2),
    Quadrant.BOTTOM_RIGHT: (2, 2),
}
_BY_ZONES: dict[tuple[int, int], Quadrant] = {v: k for k, v in _ZONES.items()}


@dataclass(frozen=True)
class CoordinateSelection:
    """Summary of the selected points for the coordinate panel.

    Attributes:
        count: Number of selected points
        frame: Design-space bounding box of the selected points
        quadrant: Which reference point of the frame is displayed
    """

    count: int = 0
    frame: Rect | None = None
    quadrant: Quadrant = Quadrant.CENTER

    def reference_point(self) -> Point | None:
        """Design-space reference point, or None when nothing is selected."""
        if self.count == 0 or self.frame is None:
            return None
        return self.quadrant.point_in_design_rect(self.frame)

    @property
    def width(self) -> float:
        return self.frame.width if self.frame else 0.0

    @property
    def height(self) -> float:
        return self.frame.height if self.frame else 0.0
