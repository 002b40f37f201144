"""DOT (graphviz) rendering of traversal event streams.

Vertex labels and edge labels are read as attribute mappings, e.g.
``{"label": "root", "color": "red", "shape": "box"}``; integers and floats
(``weight``) are written bare, everything else quoted. Attribute names
that are not plain identifiers are quoted as well. A label that is not
a mapping is rendered as its ``str()`` under the ``label`` attribute, and
``None`` renders no attributes.

Nodes are named ``vertex_<id>`` after the traversal ID of their
:class:`~lazygraph.domain.types.EnterVertex` event. Edges are written after
all nodes, and only when both endpoints were entered.
"""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable, Mapping
from typing import IO, Any

from lazygraph.domain.identity import STRUCTURAL, VertexIdentity
from lazygraph.domain.types import EnterVertex, MeetEdge, TraversalEvent
from lazygraph.graph.model import LazyGraph
from lazygraph.graph.traversal import bfs_full

_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})


def _quote(value: str) -> str:
    safe = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{safe}"'


def _attr_name(name: Any) -> str:
    text = str(name)
    if _ID.fullmatch(text) and text.lower() not in _KEYWORDS:
        return text
    return _quote(text)


def _format_attrs(label: Any) -> str:
    """Format a label as a DOT attribute list (``""`` when empty)."""
    if label is None:
        return ""
    attrs: Mapping[str, Any] = label if isinstance(label, Mapping) else {"label": str(label)}
    parts: list[str] = []
    for name, value in attrs.items():
        if isinstance(value, bool) or not isinstance(value, int | float):
            parts.append(f"{_attr_name(name)}={_quote(str(value))}")
        else:
            parts.append(f"{_attr_name(name)}={value}")
    if not parts:
        return ""
    return " [" + ", ".join(parts) + "]"


def render_events(
    events: Iterable[TraversalEvent],
    *,
    identity: VertexIdentity = STRUCTURAL,
    name: str | None = None,
) -> str:
    """Render a traversal event stream as a DOT digraph.

    The stream is drained, so it must be finite. Header defaults come from
    the ``[dot]`` settings section.
    """
    from lazygraph.config.settings import get_settings

    cfg = get_settings().dot
    key = identity.key
    node_ids: dict[Hashable, int] = {}
    node_lines: list[str] = []
    met: list[MeetEdge] = []

    for event in events:
        if isinstance(event, EnterVertex):
            node_ids[key(event.vertex)] = event.id
            node_lines.append(f"  vertex_{event.id}{_format_attrs(event.label)};")
        elif isinstance(event, MeetEdge):
            met.append(event)

    lines = [f"digraph {_quote(name or cfg.name)} {{"]
    if cfg.rankdir:
        lines.append(f"  rankdir={cfg.rankdir};")
    if cfg.node_shape:
        lines.append(f"  node [shape={cfg.node_shape}];")
    lines.extend(node_lines)

    for edge in met:
        src = node_ids.get(key(edge.source))
        dst = node_ids.get(key(edge.target))
        if src is None or dst is None:
            continue
        lines.append(f"  vertex_{src} -> vertex_{dst}{_format_attrs(edge.edge)};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def render(graph: LazyGraph, roots: Iterable[Any], *, name: str | None = None) -> str:
    """Traverse *graph* breadth first from *roots* and render it as DOT."""
    events = bfs_full(graph, roots, exit_events=False)
    return render_events(events, identity=graph.identity, name=name)


def write_dot(
    graph: LazyGraph,
    roots: Iterable[Any],
    stream: IO[str],
    *,
    name: str | None = None,
) -> None:
    """Write the DOT rendering of *graph* to *stream*."""
    stream.write(render(graph, roots, name=name))
