"""Vertex identity: the pluggable equality + hash capability.

A lazy graph never decides on its own what makes two vertices "the same".
It carries a :class:`VertexIdentity` strategy, and every identity-keyed
structure (visited sets, shortest-path frontiers, depth indexes) asks that
strategy for keys.

Two strategies ship with the library:

- :data:`STRUCTURAL`: Python ``==`` and ``hash()``.
- :data:`PHYSICAL`: object identity (``is`` and ``id()``), for vertex
  values that are unhashable or whose structural equality is too costly.

Custom strategies subclass :class:`VertexIdentity` and implement
:meth:`~VertexIdentity.equal` and :meth:`~VertexIdentity.hash`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any


class VertexIdentity(ABC):
    """Equality and hash over vertex values."""

    @abstractmethod
    def equal(self, a: Any, b: Any) -> bool:
        """Return True when *a* and *b* denote the same vertex."""

    @abstractmethod
    def hash(self, vertex: Any) -> int:
        """Return a hash consistent with :meth:`equal`."""

    def key(self, vertex: Any) -> Hashable:
        """Wrap *vertex* into a dict/set key that obeys this identity."""
        return VertexKey(self, vertex)

    def __eq__(self, other: object) -> bool:
        # Stateless strategies of the same class are interchangeable.
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class VertexKey:
    """Hashable wrapper delegating ``==`` and ``hash`` to an identity."""

    __slots__ = ("_hash", "identity", "vertex")

    def __init__(self, identity: VertexIdentity, vertex: Any) -> None:
        self.identity = identity
        self.vertex = vertex
        self._hash = identity.hash(vertex)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexKey):
            return NotImplemented
        return self.identity.equal(self.vertex, other.vertex)

    def __repr__(self) -> str:
        return f"VertexKey({self.vertex!r})"


class StructuralIdentity(VertexIdentity):
    """Vertices compare with ``==`` and hash with ``hash()``."""

    def equal(self, a: Any, b: Any) -> bool:
        return bool(a == b)

    def hash(self, vertex: Any) -> int:
        return hash(vertex)

    def key(self, vertex: Any) -> Hashable:
        # The vertex already is a valid key under this identity.
        return vertex


class PhysicalIdentity(VertexIdentity):
    """Vertices compare with ``is`` and hash with ``id()``."""

    def equal(self, a: Any, b: Any) -> bool:
        return a is b

    def hash(self, vertex: Any) -> int:
        return id(vertex)


STRUCTURAL = StructuralIdentity()
PHYSICAL = PhysicalIdentity()
