"""Exception hierarchy for lazygraph.

Absent vertices and cycles are not errors: they surface as ``None`` nodes
and Backward edges. Only the cases below raise.
"""

from __future__ import annotations

from typing import Any


class LazyGraphError(Exception):
    """Base exception for lazygraph."""


class NoPathError(LazyGraphError):
    """Raised by ``min_path`` when the target is unreachable from the source."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"No path from {source!r} to {target!r}")
        self.source = source
        self.target = target


class IdentityMismatchError(LazyGraphError):
    """Raised when graphs or visited sets built on different identities meet."""


class ConfigError(LazyGraphError):
    """Raised when ``lazygraph.toml`` cannot be parsed."""
