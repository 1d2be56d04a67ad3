"""Copy-on-write storage for the points of a path.

PathPoints keeps its points in an immutable tuple. ``clone()`` shares that
tuple, so snapshots cost O(1); an ``edit()`` block works on a private list
and swaps in a new tuple when the block completes, leaving every clone
untouched.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from glyphedit.domain.entity import EntityId
from glyphedit.domain.point import PathPoint


class PathPoints:
    """Ordered sequence of path points in geometric traversal order.

    Example:
        snapshot = points.clone()
        with points.edit() as pts:
            pts.append(PathPoint.on_curve(Point(0, 0)))
        assert len(snapshot) == len(points) - 1
    """

    __slots__ = ("_items",)

    def __init__(self, points: Iterable[PathPoint] = ()) -> None:
        self._items: tuple[PathPoint, ...] = tuple(points)

    def clone(self) -> "PathPoints":
        """Return a copy sharing storage with this one."""
        other = PathPoints.__new__(PathPoints)
        other._items = self._items
        return other

    @contextmanager
    def edit(self) -> Iterator[list[PathPoint]]:
        """Mutate the points through a scratch list.

        Changes are committed only if the block exits normally; on an
        exception the collection keeps its previous contents.

        Yields:
            A mutable list holding the current points
        """
        scratch = list(self._items)
        yield scratch
        self._items = tuple(scratch)

    def shares_storage_with(self, other: "PathPoints") -> bool:
        """Whether both collections still reference the same storage."""
        return self._items is other._items

    def find_by_id(self, entity_id: EntityId) -> PathPoint | None:
        for point in self._items:
            if point.id == entity_id:
                return point
        return None

    def index_of(self, entity_id: EntityId) -> int | None:
        """Index of the point with the given id, or None."""
        for idx, point in enumerate(self._items):
            if point.id == entity_id:
                return idx
        return None

    def first_on_curve_index(self) -> int | None:
        for idx, point in enumerate(self._items):
            if point.is_on_curve:
                return idx
        return None

    def to_list(self) -> list[PathPoint]:
        return list(self._items)

    def as_tuple(self) -> tuple[PathPoint, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PathPoint]:
        return iter(self._items)

    def __getitem__(self, index: int) -> PathPoint:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathPoints):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"PathPoints({list(self._items)!r})"
