"""fontTools point-pen adapters for interchange contours.

ContourPointPen collects the contours drawn into it as interchange records;
``draw_contour_points`` replays records into any point pen. Together they
connect the editor to every fontTools glyph source and sink that speaks the
point-pen protocol (glyf/CFF glyph sets, UFO glyphs, TTGlyphPointPen, ...).
"""

import logging
from typing import Any

from fontTools.pens.pointPen import AbstractPointPen

from glyphedit.domain.contour import Contour, ContourPoint, ContourTag
from glyphedit.domain.glyph import Glyph
from glyphedit.exceptions import ContourFormatError

logger = logging.getLogger(__name__)

_TAG_FOR_SEGMENT_TYPE = {
    None: ContourTag.OFF_CURVE,
    "move": ContourTag.MOVE,
    "line": ContourTag.LINE,
    "curve": ContourTag.CURVE,
    "qcurve": ContourTag.QCURVE,
}


class ContourPointPen(AbstractPointPen):
    """Point pen that records contours as interchange records.

    Components are not expanded; their references are kept in
    ``components`` so callers can decide how to handle them.

    Example:
        pen = ContourPointPen()
        glyph_set["a"].drawPoints(pen)
        contours = pen.contours
    """

    def __init__(self) -> None:
        self.contours: list[Contour] = []
        self.components: list[tuple[str, tuple[float, ...]]] = []
        self._current: list[ContourPoint] | None = None

    def beginPath(self, identifier: str | None = None, **kwargs: Any) -> None:
        if self._current is not None:
            raise ContourFormatError("beginPath called inside an open path")
        self._current = []

    def endPath(self) -> None:
        if self._current is None:
            raise ContourFormatError("endPath called without beginPath")
        if self._current:
            self.contours.append(Contour(points=self._current))
        self._current = None

    def addPoint(
        self,
        pt: tuple[float, float],
        segmentType: str | None = None,
        smooth: bool = False,
        name: str | None = None,
        identifier: str | None = None,
        **kwargs: Any,
    ) -> None:
        if self._current is None:
            raise ContourFormatError("addPoint called outside a path")
        try:
            tag = _TAG_FOR_SEGMENT_TYPE[segmentType]
        except KeyError as e:
            raise ContourFormatError(f"unknown segment type {segmentType!r}") from e
        self._current.append(ContourPoint(float(pt[0]), float(pt[1]), tag))

    def addComponent(
        self,
        baseGlyphName: str,
        transformation: tuple[float, ...],
        identifier: str | None = None,
        **kwargs: Any,
    ) -> None:
        logger.debug("Keeping component reference to %s", baseGlyphName)
        self.components.append((baseGlyphName, tuple(transformation)))


def draw_contour_points(
    contour: Contour,
    point_pen: AbstractPointPen,
    quadratic: bool | None = None,
) -> None:
    """Replay an interchange contour into a point pen.

    Segment types follow the point-pen rules: an on-curve point preceded by
    an off-curve point is a curve (or qcurve) point even when its record is
    tagged LINE.

    Args:
        contour: Contour to draw
        point_pen: Destination point pen
        quadratic: Emit qcurve instead of curve (detected from tags if None)
    """
    if quadratic is None:
        quadratic = contour.is_quadratic
    curve_type = "qcurve" if quadratic else "curve"
    points = contour.points
    closed = contour.is_closed

    point_pen.beginPath()
    for idx, record in enumerate(points):
        if record.tag is ContourTag.OFF_CURVE:
            segment_type = None
        elif record.tag is ContourTag.MOVE:
            segment_type = "move"
        else:
            has_prev = idx > 0 or closed
            prev = points[idx - 1] if has_prev else None
            if prev is not None and prev.tag is ContourTag.OFF_CURVE:
                segment_type = curve_type
            else:
                segment_type = "line"
        smooth = record.tag in (ContourTag.CURVE, ContourTag.QCURVE)
        point_pen.addPoint((record.x, record.y), segmentType=segment_type, smooth=smooth)
    point_pen.endPath()


def draw_glyph_points(glyph: Glyph, point_pen: AbstractPointPen) -> None:
    """Replay all contours of a glyph into a point pen."""
    for contour in glyph.contours:
        draw_contour_points(contour, point_pen)
