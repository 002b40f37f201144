"""LazyGraph: a graph as a function from vertex to node.

A graph is never materialized: calling ``graph(vertex)`` computes that
vertex's :class:`~lazygraph.domain.types.Node` on demand, or returns
``None`` when the vertex is absent. Graph functions must be deterministic;
traversal correctness assumes that calling the graph twice on the same
vertex yields the same label and the same edges.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from lazygraph.domain.identity import STRUCTURAL, VertexIdentity
from lazygraph.domain.types import Node

type NodeFn = Callable[[Any], Node[Any, Any, Any] | None]
type SourceFn = Callable[[Any], tuple[Any, Iterable[tuple[Any, Any]]] | None]


class LazyGraph:
    """Callable graph value carrying the identity its vertices obey."""

    __slots__ = ("_fn", "identity")

    def __init__(self, fn: NodeFn, identity: VertexIdentity = STRUCTURAL) -> None:
        self._fn = fn
        self.identity = identity

    def __call__(self, vertex: Any) -> Node[Any, Any, Any] | None:
        return self._fn(vertex)

    def __repr__(self) -> str:
        return f"LazyGraph({self._fn!r}, identity={self.identity!r})"

    # ------------------------------------------------------------------
    # Combinator shortcuts
    # ------------------------------------------------------------------

    def __or__(self, other: LazyGraph) -> LazyGraph:
        """``g1 | g2`` is :func:`~lazygraph.graph.combinators.union`."""
        if not isinstance(other, LazyGraph):
            return NotImplemented
        return self.union(other)

    def union(
        self,
        other: LazyGraph,
        *,
        combine: Callable[[Any, Any], Any] | None = None,
    ) -> LazyGraph:
        from lazygraph.graph.combinators import union

        return union(self, other, combine=combine)

    def map(
        self,
        *,
        vertices: Callable[[Any], Any] | None = None,
        edges: Callable[[Any], Any] | None = None,
    ) -> LazyGraph:
        from lazygraph.graph.combinators import map_graph

        return map_graph(self, vertices=vertices, edges=edges)

    def filter(
        self,
        *,
        vertices: Callable[[Any, Any], bool] | None = None,
        edges: Callable[[Any, Any, Any], bool] | None = None,
    ) -> LazyGraph:
        from lazygraph.graph.combinators import filter_graph

        return filter_graph(self, vertices=vertices, edges=edges)

    def limit_depth(self, *, root: Any, max_depth: int) -> LazyGraph:
        from lazygraph.graph.combinators import limit_depth

        return limit_depth(self, root=root, max_depth=max_depth)

    def depth(self, root: Any, *, max_depth: int | None = None) -> LazyGraph:
        from lazygraph.graph.depth import depth

        return depth(self, root, max_depth=max_depth)


# ----------------------------------------------------------------------
# Constructors
# ----------------------------------------------------------------------


def empty(identity: VertexIdentity = STRUCTURAL) -> LazyGraph:
    """The graph that maps every vertex to ``None``."""

    def node(vertex: Any) -> None:
        return None

    return LazyGraph(node, identity)


def singleton(vertex: Any, label: Any, identity: VertexIdentity = STRUCTURAL) -> LazyGraph:
    """A graph with one vertex and no edges."""

    def node(v: Any) -> Node[Any, Any, Any] | None:
        if identity.equal(v, vertex):
            return Node(v, label, ())
        return None

    return LazyGraph(node, identity)


def from_fun(fn: SourceFn, identity: VertexIdentity = STRUCTURAL) -> LazyGraph:
    """Wrap ``fn(vertex) -> (label, edges) | None``.

    *fn* is called each time the vertex is visited; ``None`` means the
    vertex is absent. *edges* is any iterable of ``(edge, target)`` pairs
    and is consumed lazily, so it may be a generator that never ends.
    """

    def node(vertex: Any) -> Node[Any, Any, Any] | None:
        result = fn(vertex)
        if result is None:
            return None
        label, edges = result
        return Node(vertex, label, edges)

    return LazyGraph(node, identity)

