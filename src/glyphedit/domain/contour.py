"""Point-record interchange types.

A contour crosses the boundary to font file collaborators as an ordered
list of ``{x, y, tag}`` records. The tag of the first record decides
whether the contour is open (``MOVE``) or closed (anything else).
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from glyphedit.exceptions import ContourFormatError


class ContourTag(Enum):
    """Role of a point record.

    - MOVE: first point of an open contour
    - LINE: corner on-curve point
    - CURVE: smooth on-curve point of a cubic contour
    - QCURVE: smooth on-curve point of a quadratic contour
    - OFF_CURVE: control handle
    """

    MOVE = "move"
    LINE = "line"
    CURVE = "curve"
    OFF_CURVE = "offcurve"
    QCURVE = "qcurve"

    @property
    def is_on_curve(self) -> bool:
        return self is not ContourTag.OFF_CURVE


@dataclass(frozen=True, slots=True)
class ContourPoint:
    """A single interchange record.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        tag: Role of the point
    """

    x: float
    y: float
    tag: ContourTag

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, and tag fields
        """
        return {"x": self.x, "y": self.y, "tag": self.tag.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContourPoint":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, and tag fields

        Returns:
            ContourPoint instance

        Raises:
            ContourFormatError: If a field is missing or has an invalid value
        """
        try:
            x = float(data["x"])
            y = float(data["y"])
            tag = ContourTag(data["tag"])
        except KeyError as e:
            raise ContourFormatError(f"missing field {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise ContourFormatError(str(e)) from e
        return cls(x, y, tag)


@dataclass
class Contour:
    """An ordered list of interchange records forming one outline.

    Attributes:
        points: Point records in contour order
    """

    points: list[ContourPoint] = field(default_factory=list)

    @property
    def is_closed(self) -> bool:
        """Whether the contour is closed (first tag is not MOVE)."""
        return not self.points or self.points[0].tag is not ContourTag.MOVE

    @property
    def is_quadratic(self) -> bool:
        """Whether any record is tagged QCURVE."""
        return any(p.tag is ContourTag.QCURVE for p in self.points)

    def validate(self) -> None:
        """Check the records form a contour a path can be built from.

        Raises:
            ContourFormatError: If the contour is empty, has non-finite
                coordinates, or uses MOVE anywhere but the first record
        """
        if not self.points:
            raise ContourFormatError("contour has no points")
        for idx, point in enumerate(self.points):
            if not (math.isfinite(point.x) and math.isfinite(point.y)):
                raise ContourFormatError(f"non-finite coordinate at point {idx}")
            if idx > 0 and point.tag is ContourTag.MOVE:
                raise ContourFormatError(f"MOVE tag at point {idx}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize and validate a contour.

        Args:
            data: Dictionary with a ``points`` list

        Returns:
            Contour instance

        Raises:
            ContourFormatError: If the data does not describe a valid contour
        """
        if "points" not in data:
            raise ContourFormatError("missing field 'points'")
        contour = cls(points=[ContourPoint.from_dict(p) for p in data["points"]])
        contour.validate()
        return contour
