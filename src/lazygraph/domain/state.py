"""Caller-owned traversal state: visited set and ID counter.

Both live for one traversal call unless the caller passes the same
instance into several calls, in which case vertices entered earlier are
never re-entered and IDs are never reused. The library itself never keeps
state between calls.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any

from lazygraph.domain.identity import STRUCTURAL, VertexIdentity


class IdCounter:
    """Mutable ID cell. :meth:`next` hands out strictly increasing IDs."""

    __slots__ = ("value",)

    def __init__(self, start: int = 0) -> None:
        self.value = start

    @classmethod
    def from_settings(cls) -> IdCounter:
        """Counter starting at ``traversal.first_id`` from the active settings."""
        from lazygraph.config.settings import get_settings

        return cls(get_settings().traversal.first_id)

    def next(self) -> int:
        """Return the current ID and advance the counter."""
        current = self.value
        self.value += 1
        return current

    def __repr__(self) -> str:
        return f"IdCounter(value={self.value})"


class VisitedSet:
    """Set of entered vertices, keyed by a :class:`VertexIdentity`."""

    __slots__ = ("_members", "identity")

    def __init__(self, identity: VertexIdentity = STRUCTURAL) -> None:
        self.identity = identity
        self._members: dict[Hashable, Any] = {}

    def add(self, vertex: Any) -> None:
        self._members.setdefault(self.identity.key(vertex), vertex)

    def discard(self, vertex: Any) -> None:
        self._members.pop(self.identity.key(vertex), None)

    def __contains__(self, vertex: object) -> bool:
        return self.identity.key(vertex) in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._members.values())

    def __repr__(self) -> str:
        return f"VisitedSet({len(self)} vertices, identity={self.identity!r})"
