"""Stable identity for points and paths.

Every point and every path carries an EntityId that survives edits, so a
selection made before a move still names the same points afterwards.
Ids come from a single process-wide counter starting at 1 and are never
reused while the process runs.
"""

import itertools
from dataclasses import dataclass
from typing import Any

_COUNTER = itertools.count(1)


@dataclass(frozen=True, slots=True, order=True)
class EntityId:
    """Opaque identifier of a point or a path.

    Ordered by allocation, which gives selections a deterministic
    iteration order.

    Attributes:
        value: The raw counter value
    """

    value: int

    @classmethod
    def next(cls) -> "EntityId":
        """Allocate a fresh id from the process-wide counter."""
        return cls(next(_COUNTER))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"id": self.value}

    def __repr__(self) -> str:
        return f"EntityId({self.value})"
