"""Shared pytest fixtures for lazygraph tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from lazygraph.config.settings import use_settings
from lazygraph.graph.model import LazyGraph
from tests.helpers import CountingGraph, FanGraph, adjacency_graph


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test with default settings, free of env vars and stray TOML.

    CWD moves to a temp directory so walk-up discovery finds nothing, and
    the lazily loaded process settings are dropped before and after.
    """
    for var in list(os.environ):
        if var.startswith("LAZYGRAPH_"):
            monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    use_settings(None)
    yield
    use_settings(None)


@pytest.fixture
def diamond() -> LazyGraph:
    """A -> B, A -> C, B -> D, C -> D."""
    return adjacency_graph(
        {
            "A": [("ab", "B"), ("ac", "C")],
            "B": [("bd", "D")],
            "C": [("cd", "D")],
            "D": [],
        }
    )


@pytest.fixture
def cycle() -> LazyGraph:
    """A -> B -> C -> A."""
    return adjacency_graph(
        {
            "A": [("ab", "B")],
            "B": [("bc", "C")],
            "C": [("ca", "A")],
        }
    )


@pytest.fixture
def weighted() -> LazyGraph:
    """A -> B (1), B -> C (1), A -> C (5); edge labels are costs."""
    return adjacency_graph(
        {
            "A": [(1, "B"), (5, "C")],
            "B": [(1, "C")],
            "C": [],
        }
    )


@pytest.fixture
def naturals() -> CountingGraph:
    return CountingGraph()


@pytest.fixture
def fan() -> FanGraph:
    return FanGraph()
