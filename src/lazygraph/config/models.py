"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lazygraph.toml only contains
overrides. An empty or missing file yields the defaults below.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- lazygraph.toml sections ---


class TraversalConfig(BaseModel):
    """[traversal] section."""

    model_config = {"frozen": True}

    first_id: int = 0
    bfs_exit_events: bool = True


class SearchConfig(BaseModel):
    """[search] section."""

    model_config = {"frozen": True}

    default_edge_cost: int = Field(default=1, ge=0)


class DotConfig(BaseModel):
    """[dot] section."""

    model_config = {"frozen": True}

    name: str = "graph"
    rankdir: str | None = None
    node_shape: str | None = None
