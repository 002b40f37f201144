"""Shortest path: Dijkstra over lazily generated edges.

The frontier is a ``heapq`` keyed by accumulated cost. A vertex is expanded
at most once: when it is popped with its final cost it enters a
:class:`~lazygraph.domain.state.VisitedSet` and its outgoing edges are
generated. Edge costs must be non-negative for the result to be minimal;
negative costs are not rejected, but optimality is then not guaranteed.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Hashable
from typing import Any, NamedTuple

from lazygraph.config.logging import get_logger
from lazygraph.domain.errors import NoPathError
from lazygraph.domain.state import VisitedSet
from lazygraph.domain.types import Path, Step
from lazygraph.graph.model import LazyGraph

logger = get_logger(__name__)

type Distance = Callable[[Any, Any, Any], int]


def _constant(cost: int) -> Distance:
    def distance(_source: Any, _edge: Any, _target: Any) -> int:
        return cost

    return distance


class ShortestPath(NamedTuple):
    """Result of :func:`min_path`.

    Attributes:
        cost: Sum of edge costs along *path*.
        path: The walked edges, newest step first.
    """

    cost: int
    path: Path


def min_path(
    graph: LazyGraph,
    source: Any,
    target: Any,
    *,
    distance: Distance | None = None,
) -> ShortestPath:
    """Return the cheapest path from *source* to *target*.

    Args:
        graph: The graph to search.
        source: Start vertex.
        target: Goal vertex, compared with the graph's identity.
        distance: ``distance(source, edge, target) -> cost``. Defaults to
            a constant ``search.default_edge_cost`` (1) per edge.

    Raises:
        NoPathError: *target* is not reachable from *source*.
    """
    if distance is None:
        from lazygraph.config.settings import get_settings

        distance = _constant(get_settings().search.default_edge_cost)

    identity = graph.identity
    key = identity.key
    finalized = VisitedSet(identity)
    best: dict[Hashable, int] = {key(source): 0}
    # The counter breaks cost ties so vertices never get compared.
    tie = itertools.count()
    frontier: list[tuple[int, int, Any, Path]] = [(0, next(tie), source, ())]

    while frontier:
        cost, _, vertex, path = heapq.heappop(frontier)
        if vertex in finalized:
            continue
        finalized.add(vertex)
        if identity.equal(vertex, target):
            logger.debug(
                "min_path.found",
                cost=cost,
                steps=len(path),
                expanded=len(finalized),
            )
            return ShortestPath(cost, path)

        node = graph(vertex)
        if node is None:
            continue
        for edge, succ in node.edges:
            if succ in finalized:
                continue
            succ_cost = cost + distance(vertex, edge, succ)
            succ_key = key(succ)
            known = best.get(succ_key)
            if known is not None and known <= succ_cost:
                continue
            best[succ_key] = succ_cost
            heapq.heappush(
                frontier,
                (succ_cost, next(tie), succ, (Step(vertex, edge, succ), *path)),
            )

    logger.debug("min_path.exhausted", expanded=len(finalized))
    raise NoPathError(source, target)
