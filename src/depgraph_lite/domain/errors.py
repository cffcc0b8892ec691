"""Error types raised by the graph layers.

Two recoverable errors make up the public failure surface:
  DuplicateNodeError -- a node (key or identifier) registered twice
  UnknownNodeError   -- an edge endpoint that was never registered

Both carry the offending node on ``.node``.  Duplicate edges, self-loops
and cycles are not errors: add_edge reports duplicates through its
return value and cycle detection is a query.

GraphInvariantError is deliberately outside the GraphError hierarchy.
It signals a broken key/identifier mapping, which is a bug, so an
``except GraphError`` handler must never catch it.
"""
from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for recoverable graph errors."""

    def __init__(self, node: Any, message: str) -> None:
        self.node = node
        super().__init__(message)


class DuplicateNodeError(GraphError, ValueError):
    """Raised when a key or identifier is registered a second time."""

    def __init__(self, node: Any) -> None:
        super().__init__(node, f"node {node!r} is already added")


class UnknownNodeError(GraphError, LookupError):
    """Raised when an operation names a node that was never registered."""

    def __init__(self, node: Any) -> None:
        super().__init__(node, f"node {node!r} is not added")


class GraphInvariantError(RuntimeError):
    """Internal consistency failure.  Never expected in a correct build."""
