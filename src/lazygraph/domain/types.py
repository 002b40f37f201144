"""Node, path and traversal-event types.

A lazy graph maps a vertex to a :class:`Node` (or ``None`` when the vertex
is absent). Traversals turn nodes into a stream of
:data:`TraversalEvent` values.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, NamedTuple


@dataclass(frozen=True)
class Node[V, L, E]:
    """The lazily computed content of one vertex.

    Attributes:
        vertex: The vertex this node describes.
        label: Caller-defined vertex label.
        edges: ``(edge_label, target)`` pairs. Consumed lazily, possibly
            infinite, and never realized beyond what a consumer pulls.
    """

    vertex: V
    label: L
    edges: Iterable[tuple[E, V]]


class Step(NamedTuple):
    """One traversed edge: ``(source, edge, target)``."""

    source: Any
    edge: Any
    target: Any


# Newest step first: the last edge walked is ``path[0]``.
type Path = tuple[Step, ...]


class EdgeKind(StrEnum):
    """Classification of an edge at the moment a traversal meets it."""

    FORWARD = "forward"  # toward a vertex not yet explored
    BACKWARD = "backward"  # toward an open ancestor (cycle)
    TRANSVERSE = "transverse"  # toward an explored, non-ancestor vertex


@dataclass(frozen=True, slots=True)
class EnterVertex:
    """First visit of a vertex.

    Attributes:
        vertex: The entered vertex.
        label: Its label.
        id: Unique, strictly increasing traversal ID.
        trail: Path from the traversal root to *vertex*, newest step first.
    """

    vertex: Any
    label: Any
    id: int
    trail: Path = ()


@dataclass(frozen=True, slots=True)
class ExitVertex:
    """All outgoing edges of *vertex* have been processed."""

    vertex: Any


@dataclass(frozen=True, slots=True)
class MeetEdge:
    """An outgoing edge of *source*, classified when traversed."""

    source: Any
    edge: Any
    target: Any
    kind: EdgeKind

    @property
    def step(self) -> Step:
        return Step(self.source, self.edge, self.target)


type TraversalEvent = EnterVertex | ExitVertex | MeetEdge


class Visit(NamedTuple):
    """A vertex as yielded by ``bfs`` / ``dfs``."""

    vertex: Any
    label: Any
    id: int


def chronological(path: Path) -> list[Step]:
    """Return *path* oldest step first."""
    return list(reversed(path))
