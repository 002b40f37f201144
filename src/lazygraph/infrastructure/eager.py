"""Eager bridges: plain collections and NetworkX graphs in and out.

``enum`` and ``to_networkx`` drain a traversal, so they only terminate on
graphs whose reachable part is finite. ``from_enum`` and ``from_networkx``
go the other way and wrap an eager structure into a lazy graph.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any

import networkx as nx

from lazygraph.config.logging import get_logger
from lazygraph.domain.identity import STRUCTURAL, VertexIdentity
from lazygraph.domain.types import EnterVertex, MeetEdge, Node, Step
from lazygraph.graph.model import LazyGraph
from lazygraph.graph.traversal import dfs_full

logger = get_logger(__name__)


def enum(graph: LazyGraph, root: Any) -> tuple[list[tuple[Any, Any]], list[Step]]:
    """Drain the part of *graph* reachable from *root*.

    Returns ``(vertices, edges)`` where *vertices* holds ``(vertex, label)``
    pairs and *edges* every met edge as a :class:`Step`. The order is that of
    a depth-first traversal, but callers should not rely on it.
    """
    vertices: list[tuple[Any, Any]] = []
    edges: list[Step] = []
    for event in dfs_full(graph, [root]):
        if isinstance(event, EnterVertex):
            vertices.append((event.vertex, event.label))
        elif isinstance(event, MeetEdge):
            edges.append(event.step)
    return vertices, edges


def from_enum(
    vertices: Iterable[tuple[Any, Any]],
    edges: Iterable[tuple[Any, Any, Any]],
    *,
    identity: VertexIdentity = STRUCTURAL,
) -> LazyGraph:
    """Build a lazy view over eager ``(vertex, label)`` and edge collections.

    Only listed vertices are present. Edges whose source is not listed are
    dropped; edge targets that are not listed are absent when visited.
    Both collections are consumed immediately.
    """
    key = identity.key
    labels: dict[Hashable, tuple[Any, Any]] = {}
    for vertex, label in vertices:
        labels[key(vertex)] = (vertex, label)

    adjacency: dict[Hashable, list[tuple[Any, Any]]] = {k: [] for k in labels}
    dropped = 0
    for source, edge, target in edges:
        out = adjacency.get(key(source))
        if out is None:
            dropped += 1
            continue
        out.append((edge, target))
    if dropped:
        logger.debug("from_enum.dropped_edges", count=dropped)

    def node(vertex: Any) -> Node[Any, Any, Any] | None:
        k = key(vertex)
        entry = labels.get(k)
        if entry is None:
            return None
        return Node(entry[0], entry[1], adjacency[k])

    return LazyGraph(node, identity)


def to_networkx(graph: LazyGraph, roots: Iterable[Any]) -> nx.MultiDiGraph:
    """Materialize the part of *graph* reachable from *roots*.

    Node attributes: ``label`` and the traversal ``id``. Edge attributes:
    ``label`` and ``kind`` (the :class:`~lazygraph.domain.types.EdgeKind`
    value). Edges toward absent vertices are left out. Vertices must be
    hashable, as NetworkX requires.
    """
    g: nx.MultiDiGraph = nx.MultiDiGraph()
    met: list[MeetEdge] = []
    for event in dfs_full(graph, roots):
        if isinstance(event, EnterVertex):
            g.add_node(event.vertex, label=event.label, id=event.id)
        elif isinstance(event, MeetEdge):
            met.append(event)

    for edge in met:
        if edge.target in g:
            g.add_edge(edge.source, edge.target, label=edge.edge, kind=str(edge.kind))
    logger.debug(
        "to_networkx.built",
        nodes=g.number_of_nodes(),
        edges=g.number_of_edges(),
    )
    return g


def from_networkx(g: nx.DiGraph) -> LazyGraph:
    """Lazy view over a NetworkX directed graph.

    Vertex labels are the node attribute dicts, edge labels the edge
    attribute dicts. Multigraphs yield one edge per parallel edge. Later
    changes to *g* show through.
    """
    multi = g.is_multigraph()

    def node(vertex: Any) -> Node[Any, Any, Any] | None:
        if vertex not in g:
            return None
        return Node(vertex, g.nodes[vertex], _out_edges(vertex))

    def _out_edges(vertex: Any) -> Iterator[tuple[Any, Any]]:
        for target, data in g.adj[vertex].items():
            if multi:
                for attrs in data.values():
                    yield attrs, target
            else:
                yield data, target

    return LazyGraph(node, STRUCTURAL)
