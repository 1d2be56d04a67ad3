"""Core editing engine for glyphedit.

This module contains:

- Paths and their bezier reconstruction (cubic and quadratic variants)
- Segments, nearest-point queries and exact De Casteljau subdivision
- Hit-testing with the on-curve penalty
- The design/screen viewport
- Pointer gesture recognition
- Edit types, undo grouping and the undo history
- The edit session and the editor that drives it

Key functions:
- find_closest: Closest point query with tie-break scoring
- subdivide_cubic / subdivide_quadratic: Shape-preserving curve split
- path_from_interchange: Build a path from point records

Key classes:
- CubicPath / QuadraticPath: Editable paths
- Mouse / MouseDelegate: Gesture recognizer and its receiver
- UndoState: Bounded undo/redo history
- EditSession: All state for editing one glyph
- Editor: Input routing and undo recording
"""

from glyphedit.core.edit_type import EditType
from glyphedit.core.editor import Editor
from glyphedit.core.hit_test import (
    HitCandidate,
    HitTestResult,
    SegmentHit,
    find_closest,
    find_closest_segment,
)
from glyphedit.core.mouse import (
    Drag,
    GestureState,
    Modifiers,
    Mouse,
    MouseButton,
    MouseDelegate,
    MouseEvent,
)
from glyphedit.core.path import CubicPath, Path, QuadraticPath, path_from_interchange
from glyphedit.core.segment import (
    CubicBez,
    Line,
    QuadBez,
    Segment,
    SegmentInfo,
    subdivide_cubic,
    subdivide_quadratic,
)
from glyphedit.core.session import EditSession, NudgeDirection, SessionSnapshot
from glyphedit.core.undo import UndoState
from glyphedit.core.viewport import ViewPort

__all__ = [
    # Paths
    "CubicPath",
    "Path",
    "QuadraticPath",
    "path_from_interchange",
    # Segments
    "CubicBez",
    "Line",
    "QuadBez",
    "Segment",
    "SegmentInfo",
    "subdivide_cubic",
    "subdivide_quadratic",
    # Hit testing
    "HitCandidate",
    "HitTestResult",
    "SegmentHit",
    "find_closest",
    "find_closest_segment",
    # Gestures
    "Drag",
    "GestureState",
    "Modifiers",
    "Mouse",
    "MouseButton",
    "MouseDelegate",
    "MouseEvent",
    # Editing
    "EditSession",
    "EditType",
    "Editor",
    "NudgeDirection",
    "SessionSnapshot",
    "UndoState",
    "ViewPort",
]
