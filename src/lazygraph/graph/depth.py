"""Root-relative depth: BFS distance from a fixed root, computed lazily.

A lazy graph has no root, so depth only makes sense relative to one. The
:class:`DepthIndex` owns a BFS event stream from that root and advances it
only as far as needed to answer a lookup. Depths are memoized; the stream
is never rewound.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any

from lazygraph.config.logging import get_logger
from lazygraph.domain.types import EdgeKind, EnterVertex, MeetEdge, Node, TraversalEvent
from lazygraph.graph.model import LazyGraph
from lazygraph.graph.traversal import bfs_full

logger = get_logger(__name__)


class DepthIndex:
    """Memoized BFS distances from *root*, optionally capped at *max_depth*.

    A vertex gets its depth as soon as BFS discovers it, i.e. on the Forward
    edge that first reaches it (``depth(source) + 1``), not when it is later
    dequeued. So the children of a vertex with infinitely many edges are
    indexed one edge at a time.

    BFS enters vertices in non-decreasing distance order. Once it enters a
    vertex at *max_depth*, every vertex within range has been discovered
    and the stream is dropped.

    A lookup for a vertex that BFS has not discovered yet keeps advancing.
    If the vertex is unreachable while some vertex still yields edges
    forever, that lookup does not return.
    """

    def __init__(self, graph: LazyGraph, root: Any, max_depth: int | None = None) -> None:
        self._key = graph.identity.key
        self._max_depth = max_depth
        self._depths: dict[Hashable, int] = {}
        self._events: Iterator[TraversalEvent] | None = bfs_full(
            graph, [root], exit_events=False
        )

    def lookup(self, vertex: Any) -> int | None:
        """Return the depth of *vertex*, or None if it is out of range."""
        k = self._key(vertex)
        while k not in self._depths and self._events is not None:
            self._advance()
        return self._depths.get(k)

    def _advance(self) -> None:
        assert self._events is not None
        event = next(self._events, None)
        if event is None:
            self._close("exhausted")
        elif isinstance(event, EnterVertex):
            d = len(event.trail)
            if self._max_depth is not None and d > self._max_depth:
                self._close("depth limit reached")
                return
            self._depths.setdefault(self._key(event.vertex), d)
            if d == self._max_depth:
                self._close("depth limit reached")
        elif isinstance(event, MeetEdge) and event.kind is EdgeKind.FORWARD:
            d = self._depths[self._key(event.source)] + 1
            if self._max_depth is None or d <= self._max_depth:
                self._depths.setdefault(self._key(event.target), d)

    def _close(self, reason: str) -> None:
        logger.debug("depth_index.closed", reason=reason, indexed=len(self._depths))
        self._events = None


def depth(graph: LazyGraph, root: Any, *, max_depth: int | None = None) -> LazyGraph:
    """Relabel every vertex with its distance from *root*.

    Vertices unreachable from *root* (or farther than *max_depth*) become
    absent. Edges are those of *graph*, unchanged.
    """
    index = DepthIndex(graph, root, max_depth)

    def node(vertex: Any) -> Node[Any, Any, Any] | None:
        d = index.lookup(vertex)
        if d is None:
            return None
        inner = graph(vertex)
        if inner is None:
            return None
        return Node(inner.vertex, d, inner.edges)

    return LazyGraph(node, graph.identity)
