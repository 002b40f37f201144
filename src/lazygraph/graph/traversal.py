"""Traversal engine: demand-driven BFS and DFS event streams.

Both traversals are generators: each ``next()`` performs just enough work
to produce one event, so a consumer that stops after N events bounds the
number of node generations, even on infinite graphs.

Event classification:

- DFS keeps an explicit frame stack. An edge is Forward when its target
  was never entered, Backward when the target is an open ancestor on the
  stack, Transverse otherwise.
- BFS has no trail of open ancestors, so Backward is never reported. An
  edge is Forward when its target is neither entered nor already queued,
  Transverse otherwise.

Callers that pass the same ``explored`` set and ``ids`` counter into
several traversals get no re-entry and no ID reuse across those calls.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from lazygraph.config.logging import get_logger
from lazygraph.domain.errors import IdentityMismatchError
from lazygraph.domain.state import IdCounter, VisitedSet
from lazygraph.domain.types import (
    EdgeKind,
    EnterVertex,
    ExitVertex,
    MeetEdge,
    Path,
    Step,
    TraversalEvent,
    Visit,
)
from lazygraph.graph.model import LazyGraph

logger = get_logger(__name__)


def _prepare(
    graph: LazyGraph,
    ids: IdCounter | None,
    explored: VisitedSet | None,
) -> tuple[IdCounter, VisitedSet]:
    """Resolve the optional shared state of a traversal call."""
    if explored is None:
        explored = VisitedSet(graph.identity)
    elif explored.identity != graph.identity:
        msg = (
            f"explored set uses {explored.identity!r} but the graph uses "
            f"{graph.identity!r}"
        )
        raise IdentityMismatchError(msg)
    if ids is None:
        ids = IdCounter()
    return ids, explored


# ----------------------------------------------------------------------
# Depth first
# ----------------------------------------------------------------------


@dataclass(slots=True)
class _Frame:
    vertex: Any
    key: Hashable
    edges: Iterator[tuple[Any, Any]]
    trail: Path


def dfs_full(
    graph: LazyGraph,
    roots: Iterable[Any],
    *,
    ids: IdCounter | None = None,
    explored: VisitedSet | None = None,
) -> Iterator[TraversalEvent]:
    """Lazy depth-first traversal from a finite collection of roots.

    Every entered vertex gets exactly one :class:`ExitVertex`, emitted once
    all of its outgoing edges have been classified.

    Raises:
        IdentityMismatchError: *explored* was built for another identity.
    """
    ids, explored = _prepare(graph, ids, explored)
    return _dfs(graph, roots, ids, explored)


def _dfs(
    graph: LazyGraph,
    roots: Iterable[Any],
    ids: IdCounter,
    explored: VisitedSet,
) -> Iterator[TraversalEvent]:
    key = graph.identity.key
    stack: list[_Frame] = []
    # Keys of the frames currently on the stack: the open trail.
    open_keys: set[Hashable] = set()
    entered = 0

    for root in roots:
        if root in explored:
            continue
        node = graph(root)
        if node is None:
            continue
        explored.add(root)
        entered += 1
        yield EnterVertex(root, node.label, ids.next(), ())
        frame = _Frame(root, key(root), iter(node.edges), ())
        stack.append(frame)
        open_keys.add(frame.key)

        while stack:
            frame = stack[-1]
            try:
                edge, target = next(frame.edges)
            except StopIteration:
                stack.pop()
                open_keys.discard(frame.key)
                yield ExitVertex(frame.vertex)
                continue

            target_key = key(target)
            if target in explored:
                kind = EdgeKind.BACKWARD if target_key in open_keys else EdgeKind.TRANSVERSE
                yield MeetEdge(frame.vertex, edge, target, kind)
                continue

            yield MeetEdge(frame.vertex, edge, target, EdgeKind.FORWARD)
            target_node = graph(target)
            if target_node is None:
                continue
            trail = (Step(frame.vertex, edge, target), *frame.trail)
            explored.add(target)
            entered += 1
            yield EnterVertex(target, target_node.label, ids.next(), trail)
            stack.append(_Frame(target, target_key, iter(target_node.edges), trail))
            open_keys.add(target_key)

    logger.debug("traversal.finished", order="dfs", entered=entered)


# ----------------------------------------------------------------------
# Breadth first
# ----------------------------------------------------------------------


def bfs_full(
    graph: LazyGraph,
    roots: Iterable[Any],
    *,
    ids: IdCounter | None = None,
    explored: VisitedSet | None = None,
    exit_events: bool | None = None,
) -> Iterator[TraversalEvent]:
    """Lazy breadth-first traversal from a finite collection of roots.

    IDs are assigned in dequeue order, so with a single root they never
    decrease as the distance from the root grows. When *exit_events* is
    true (default: ``traversal.bfs_exit_events`` from settings) each vertex
    gets an :class:`ExitVertex` right after its edges are enumerated.

    Raises:
        IdentityMismatchError: *explored* was built for another identity.
    """
    ids, explored = _prepare(graph, ids, explored)
    if exit_events is None:
        from lazygraph.config.settings import get_settings

        exit_events = get_settings().traversal.bfs_exit_events
    return _bfs(graph, roots, ids, explored, exit_events)


def _bfs(
    graph: LazyGraph,
    roots: Iterable[Any],
    ids: IdCounter,
    explored: VisitedSet,
    exit_events: bool,
) -> Iterator[TraversalEvent]:
    key = graph.identity.key
    queue: deque[tuple[Any, Path]] = deque()
    queued: set[Hashable] = set()
    for root in roots:
        root_key = key(root)
        if root_key not in queued:
            queued.add(root_key)
            queue.append((root, ()))
    entered = 0

    while queue:
        vertex, trail = queue.popleft()
        if vertex in explored:
            continue
        node = graph(vertex)
        if node is None:
            continue
        explored.add(vertex)
        entered += 1
        yield EnterVertex(vertex, node.label, ids.next(), trail)

        for edge, target in node.edges:
            target_key = key(target)
            if target_key in queued or target in explored:
                yield MeetEdge(vertex, edge, target, EdgeKind.TRANSVERSE)
                continue
            queued.add(target_key)
            yield MeetEdge(vertex, edge, target, EdgeKind.FORWARD)
            queue.append((target, (Step(vertex, edge, target), *trail)))

        if exit_events:
            yield ExitVertex(vertex)

    logger.debug("traversal.finished", order="bfs", entered=entered)


# ----------------------------------------------------------------------
# Vertex-only views
# ----------------------------------------------------------------------


def _visits(events: Iterator[TraversalEvent]) -> Iterator[Visit]:
    for event in events:
        if isinstance(event, EnterVertex):
            yield Visit(event.vertex, event.label, event.id)


def dfs(
    graph: LazyGraph,
    root: Any,
    *,
    ids: IdCounter | None = None,
    explored: VisitedSet | None = None,
) -> Iterator[Visit]:
    """Lazy depth-first ``(vertex, label, id)`` stream from *root*."""
    return _visits(dfs_full(graph, [root], ids=ids, explored=explored))


def bfs(
    graph: LazyGraph,
    root: Any,
    *,
    ids: IdCounter | None = None,
    explored: VisitedSet | None = None,
) -> Iterator[Visit]:
    """Lazy breadth-first ``(vertex, label, id)`` stream from *root*."""
    return _visits(bfs_full(graph, [root], ids=ids, explored=explored, exit_events=False))
