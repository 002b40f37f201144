"""lazygraph: lazy, possibly infinite directed graphs and their traversals."""

__version__ = "0.1.0"

from .config.logging import configure_from_settings, configure_logging
from .domain.errors import ConfigError, IdentityMismatchError, LazyGraphError, NoPathError
from .domain.identity import (
    PHYSICAL,
    STRUCTURAL,
    PhysicalIdentity,
    StructuralIdentity,
    VertexIdentity,
)
from .domain.state import IdCounter, VisitedSet
from .domain.types import (
    EdgeKind,
    EnterVertex,
    ExitVertex,
    MeetEdge,
    Node,
    Path,
    Step,
    TraversalEvent,
    Visit,
    chronological,
)
from .graph.combinators import filter_graph, limit_depth, map_graph, union
from .graph.depth import depth
from .graph.model import LazyGraph, empty, from_fun, singleton
from .graph.shortest_path import ShortestPath, min_path
from .graph.traversal import bfs, bfs_full, dfs, dfs_full
from .infrastructure.eager import enum, from_enum, from_networkx, to_networkx
from .output.dot import render, render_events, write_dot

__all__ = [
    # Graph model
    "LazyGraph",
    "Node",
    "empty",
    "singleton",
    "from_fun",
    # Identity and traversal state
    "VertexIdentity",
    "StructuralIdentity",
    "PhysicalIdentity",
    "STRUCTURAL",
    "PHYSICAL",
    "IdCounter",
    "VisitedSet",
    # Traversals
    "bfs",
    "bfs_full",
    "dfs",
    "dfs_full",
    "EdgeKind",
    "EnterVertex",
    "ExitVertex",
    "MeetEdge",
    "TraversalEvent",
    "Visit",
    "Step",
    "Path",
    "chronological",
    # Paths and depth
    "min_path",
    "ShortestPath",
    "depth",
    # Combinators
    "union",
    "map_graph",
    "filter_graph",
    "limit_depth",
    # Eager bridges
    "enum",
    "from_enum",
    "to_networkx",
    "from_networkx",
    # DOT output
    "render",
    "render_events",
    "write_dot",
    # Logging
    "configure_logging",
    "configure_from_settings",
    # Exceptions
    "LazyGraphError",
    "NoPathError",
    "IdentityMismatchError",
    "ConfigError",
]
