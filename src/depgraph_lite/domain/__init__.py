"""Domain model for depgraph-lite.

Re-exports the shared types and errors for convenient access:
    from depgraph_lite.domain import NodeId, DuplicateNodeError
"""

from depgraph_lite.domain.errors import (
    DuplicateNodeError,
    GraphError,
    GraphInvariantError,
    UnknownNodeError,
)
from depgraph_lite.domain.types import NodeId

__all__ = [
    "DuplicateNodeError",
    "GraphError",
    "GraphInvariantError",
    "NodeId",
    "UnknownNodeError",
]
