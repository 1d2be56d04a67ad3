"""Domain models for glyphedit.

This module contains the value types the editing engine is built from:
identities, points, point collections, selections and the interchange
records exchanged with font file collaborators. All models are:

- Immutable where possible (using frozen dataclasses)
- Cheap to snapshot (shared immutable storage)
- Independent of fonttools implementation details

Key classes:
- EntityId: Stable identity of points and paths
- PathPoint: A point with an OnCurve or OffCurve kind
- PathPoints: Copy-on-write point storage
- Selection: Ordered set of selected ids
- ContourPoint / Contour: Interchange point records
- Glyph: Interchange-level glyph with metadata
"""

from glyphedit.domain.contour import Contour, ContourPoint, ContourTag
from glyphedit.domain.entity import EntityId
from glyphedit.domain.geometry import Point, Rect, Vec2
from glyphedit.domain.glyph import FontMetrics, Glyph, GlyphMetadata
from glyphedit.domain.point import OffCurve, OnCurve, PathPoint, PointType
from glyphedit.domain.point_list import PathPoints
from glyphedit.domain.quadrant import CoordinateSelection, Quadrant
from glyphedit.domain.selection import Selection

__all__: list[str] = [
    # Enums
    "ContourTag",
    "Quadrant",
    # Geometry
    "Point",
    "Rect",
    "Vec2",
    # Core types
    "EntityId",
    "OnCurve",
    "OffCurve",
    "PointType",
    "PathPoint",
    "PathPoints",
    "Selection",
    "CoordinateSelection",
    # Interchange
    "ContourPoint",
    "Contour",
    "FontMetrics",
    "GlyphMetadata",
    "Glyph",
]
