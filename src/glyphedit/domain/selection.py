"""Selection of points and paths by id."""

from collections.abc import Iterable, Iterator

from glyphedit.domain.entity import EntityId


class Selection:
    """Ordered set of selected entity ids.

    Backed by a frozenset, so ``clone()`` and the set-algebra methods share
    or build immutable storage; in-place operations rebind the storage and
    never affect clones. Iteration is in id order.
    """

    __slots__ = ("_ids",)

    def __init__(self, ids: Iterable[EntityId] = ()) -> None:
        self._ids: frozenset[EntityId] = frozenset(ids)

    @classmethod
    def _wrap(cls, ids: frozenset[EntityId]) -> "Selection":
        sel = cls.__new__(cls)
        sel._ids = ids
        return sel

    def clone(self) -> "Selection":
        return Selection._wrap(self._ids)

    def insert(self, entity_id: EntityId) -> bool:
        """Add an id.

        Returns:
            True if the id was not selected before
        """
        if entity_id in self._ids:
            return False
        self._ids = self._ids | {entity_id}
        return True

    def remove(self, entity_id: EntityId) -> bool:
        """Remove an id.

        Returns:
            True if the id was selected
        """
        if entity_id not in self._ids:
            return False
        self._ids = self._ids - {entity_id}
        return True

    def toggle(self, entity_id: EntityId) -> None:
        if not self.remove(entity_id):
            self.insert(entity_id)

    def clear(self) -> None:
        self._ids = frozenset()

    def contains(self, entity_id: EntityId) -> bool:
        return entity_id in self._ids

    def is_empty(self) -> bool:
        return not self._ids

    def union(self, other: "Selection") -> "Selection":
        return Selection._wrap(self._ids | other._ids)

    def symmetric_difference(self, other: "Selection") -> "Selection":
        return Selection._wrap(self._ids ^ other._ids)

    def intersection(self, other: "Selection") -> "Selection":
        return Selection._wrap(self._ids & other._ids)

    def difference(self, other: "Selection") -> "Selection":
        return Selection._wrap(self._ids - other._ids)

    def retained(self, valid_ids: Iterable[EntityId]) -> "Selection":
        """Return a selection without ids missing from ``valid_ids``."""
        return Selection._wrap(self._ids & frozenset(valid_ids))

    def as_frozenset(self) -> frozenset[EntityId]:
        return self._ids

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[EntityId]:
        return iter(sorted(self._ids))

    def __bool__(self) -> bool:
        return bool(self._ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selection):
            return NotImplemented
        return self._ids == other._ids

    def __repr__(self) -> str:
        return f"Selection({[i.value for i in self]})"
