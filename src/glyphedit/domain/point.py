"""Point representation for editable contours.

This module defines:
- OnCurve / OffCurve: the two point kinds (``PointType``)
- PathPoint: a point with identity, position and kind
"""

from dataclasses import dataclass, replace
from typing import Any

from glyphedit.domain.entity import EntityId
from glyphedit.domain.geometry import Point, Vec2


@dataclass(frozen=True, slots=True)
class OnCurve:
    """A point the outline passes through.

    Attributes:
        smooth: True for tangent-continuous points, False for corners
    """

    smooth: bool = False


@dataclass(frozen=True, slots=True)
class OffCurve:
    """A bezier control handle.

    Attributes:
        auto: True when the handle was computed rather than placed by the user
    """

    auto: bool = False


PointType = OnCurve | OffCurve


@dataclass(frozen=True, slots=True)
class PathPoint:
    """A point of a path.

    Immutable; editing operations build a replacement that keeps the id.

    Attributes:
        id: Stable identity across edits
        position: Location in design space
        type: On-curve or off-curve kind
    """

    id: EntityId
    position: Point
    type: PointType

    @classmethod
    def on_curve(cls, position: Point, smooth: bool = False) -> "PathPoint":
        """Create an on-curve point with a fresh id."""
        return cls(EntityId.next(), position, OnCurve(smooth=smooth))

    @classmethod
    def off_curve(cls, position: Point, auto: bool = False) -> "PathPoint":
        """Create an off-curve point with a fresh id."""
        return cls(EntityId.next(), position, OffCurve(auto=auto))

    @property
    def is_on_curve(self) -> bool:
        return isinstance(self.type, OnCurve)

    @property
    def is_off_curve(self) -> bool:
        return isinstance(self.type, OffCurve)

    @property
    def is_smooth(self) -> bool:
        """Whether this is a smooth on-curve point."""
        return isinstance(self.type, OnCurve) and self.type.smooth

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def moved(self, delta: Vec2) -> "PathPoint":
        """Return this point translated by ``delta``."""
        return replace(self, position=self.position + delta)

    def with_position(self, position: Point) -> "PathPoint":
        return replace(self, position=position)

    def with_type(self, point_type: PointType) -> "PathPoint":
        return replace(self, type=point_type)

    def toggled(self) -> "PathPoint":
        """Flip smooth and corner; off-curve points are returned unchanged."""
        if isinstance(self.type, OnCurve):
            return replace(self, type=OnCurve(smooth=not self.type.smooth))
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with id, x, y, on_curve and flag fields
        """
        if isinstance(self.type, OnCurve):
            kind = {"on_curve": True, "smooth": self.type.smooth}
        else:
            kind = {"on_curve": False, "auto": self.type.auto}
        return {"id": self.id.value, "x": self.x, "y": self.y, **kind}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathPoint":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by ``to_dict``

        Returns:
            PathPoint instance
        """
        if data["on_curve"]:
            point_type: PointType = OnCurve(smooth=data.get("smooth", False))
        else:
            point_type = OffCurve(auto=data.get("auto", False))
        return cls(EntityId(data["id"]), Point(data["x"], data["y"]), point_type)
