"""Graph builders shared across test modules."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import Any

from lazygraph.graph.model import LazyGraph, from_fun


def adjacency_graph(
    adjacency: dict[Any, Iterable[tuple[Any, Any]]],
    labels: dict[Any, Any] | None = None,
) -> LazyGraph:
    """Graph over ``{vertex: [(edge, target), ...]}``.

    Labels default to the lowercased vertex name. Targets that are not keys
    of *adjacency* are absent.
    """
    labels = labels or {}

    def source(vertex: Any) -> tuple[Any, list[tuple[Any, Any]]] | None:
        if vertex not in adjacency:
            return None
        return labels.get(vertex, str(vertex).lower()), list(adjacency[vertex])

    return from_fun(source)


class CountingGraph:
    """Infinite graph over positive integers that records node generations.

    ``n`` has edges ``("succ", n + 1)`` and ``("double", 2 * n)``.
    """

    def __init__(self) -> None:
        self.calls: list[int] = []
        self.graph = from_fun(self._source)

    def _source(self, n: int) -> tuple[str, list[tuple[str, int]]] | None:
        self.calls.append(n)
        if n < 1:
            return None
        return f"n{n}", [("succ", n + 1), ("double", 2 * n)]


class FanGraph:
    """Infinitely branching tree over tuples that records node generations.

    Vertex ``v`` is labelled ``len(v)`` and has the edges ``(i, v + (i,))``
    for every ``i >= 0``; the root is ``()``.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[int, ...]] = []
        self.graph = from_fun(self._source)

    def _source(self, v: tuple[int, ...]) -> tuple[int, Iterator[tuple[int, tuple[int, ...]]]]:
        self.calls.append(v)
        return len(v), ((i, (*v, i)) for i in itertools.count())
