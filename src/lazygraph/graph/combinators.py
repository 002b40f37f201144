"""Lazy combinators: build new graphs out of existing ones.

None of these traverse anything when called. Each returns a
:class:`~lazygraph.graph.model.LazyGraph` whose node function wraps the
node functions of its inputs, so nodes are still only generated when a
consumer visits them.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Any

from lazygraph.domain.errors import IdentityMismatchError
from lazygraph.domain.types import Node
from lazygraph.graph.depth import DepthIndex
from lazygraph.graph.model import LazyGraph


def union(
    g1: LazyGraph,
    g2: LazyGraph,
    *,
    combine: Callable[[Any, Any], Any] | None = None,
) -> LazyGraph:
    """Lazy union of *g1* and *g2*.

    A vertex is absent only if both graphs lack it. When both have it, the
    labels are merged with ``combine(label1, label2)`` (default: keep
    *g1*'s label) and the edges of *g1* come before those of *g2*.

    Edges are concatenated, not deduplicated: ``union(g, g)`` enters the
    same vertices as *g*, but a traversal meets every edge twice, and the
    second copy is reported as Transverse or Backward.

    Raises:
        IdentityMismatchError: The graphs use different vertex identities.
    """
    if g1.identity != g2.identity:
        msg = f"cannot union graphs over {g1.identity!r} and {g2.identity!r}"
        raise IdentityMismatchError(msg)

    def node(vertex: Any) -> Node[Any, Any, Any] | None:
        n1 = g1(vertex)
        n2 = g2(vertex)
        if n1 is None:
            return n2
        if n2 is None:
            return n1
        label = n1.label if combine is None else combine(n1.label, n2.label)
        return Node(n1.vertex, label, itertools.chain(n1.edges, n2.edges))

    return LazyGraph(node, g1.identity)


def map_graph(
    graph: LazyGraph,
    *,
    vertices: Callable[[Any], Any] | None = None,
    edges: Callable[[Any], Any] | None = None,
) -> LazyGraph:
    """Relabel vertices and edges; vertex identities and topology are kept."""

    def node(vertex: Any) -> Node[Any, Any, Any] | None:
        inner = graph(vertex)
        if inner is None:
            return None
        label = inner.label if vertices is None else vertices(inner.label)
        if edges is None:
            return Node(inner.vertex, label, inner.edges)
        return Node(inner.vertex, label, ((edges(e), t) for e, t in inner.edges))

    return LazyGraph(node, graph.identity)


def filter_graph(
    graph: LazyGraph,
    *,
    vertices: Callable[[Any, Any], bool] | None = None,
    edges: Callable[[Any, Any, Any], bool] | None = None,
) -> LazyGraph:
    """Drop vertices and edges that fail their predicate.

    Args:
        graph: The graph to filter.
        vertices: ``vertices(vertex, label)``; failing vertices are absent.
        edges: ``edges(source, edge, target)``; failing edges are dropped
            from their source's outgoing sequence. The target's own
            presence is decided by *vertices* when it is visited.
    """

    def node(vertex: Any) -> Node[Any, Any, Any] | None:
        inner = graph(vertex)
        if inner is None:
            return None
        if vertices is not None and not vertices(inner.vertex, inner.label):
            return None
        if edges is None:
            return inner
        src = inner.vertex
        kept = ((e, t) for e, t in inner.edges if edges(src, e, t))
        return Node(src, inner.label, kept)

    return LazyGraph(node, graph.identity)


def limit_depth(graph: LazyGraph, *, root: Any, max_depth: int) -> LazyGraph:
    """Bound *graph* to the vertices within *max_depth* edges of *root*.

    Depth is the BFS distance from *root* in *graph*; the root has depth 0.
    Any vertex farther away (or unreachable) is absent. Labels and edges of
    the remaining vertices are unchanged. See
    :class:`~lazygraph.graph.depth.DepthIndex` for how far each lookup
    advances the underlying search.
    """
    index = DepthIndex(graph, root, max_depth)

    def node(vertex: Any) -> Node[Any, Any, Any] | None:
        if index.lookup(vertex) is None:
            return None
        return graph(vertex)

    return LazyGraph(node, graph.identity)
