"""Core graph: nodes and directed edges over dense integer identifiers.

This layer knows nothing about caller keys.  It stores a
dict[NodeId, children] where children is either a set (default,
duplicate edges collapse) or a list (parallel_edges=True, every
add_edge call is recorded).  Both policies report whether the edge was
already present, so callers see the same duplicate signal either way.

Validation is deliberately thin.  register_node rejects a duplicate
identifier, but add_edge trusts its caller: the source must be
registered (an unknown source is a KeyError, i.e. a bug in the caller)
and the target is not checked at all.  KeyedGraph is the layer that
guarantees both endpoints exist.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterator

from depgraph_lite.domain.errors import DuplicateNodeError
from depgraph_lite.domain.types import NodeId
from depgraph_lite.graph.cycle_detector import CycleResult, find_cycle
from depgraph_lite.graph.traversal import walk

log = logging.getLogger(__name__)


class CoreGraph:
    """Directed graph keyed by integer identifiers."""

    __slots__ = ("_children", "_parallel_edges")

    def __init__(self, *, parallel_edges: bool = False) -> None:
        self._children: dict[NodeId, set[NodeId] | list[NodeId]] = {}
        self._parallel_edges = parallel_edges

    # ---- mutation --------------------------------------------------------

    def register_node(self, node_id: NodeId) -> None:
        """Create an empty node under *node_id*.

        Raises DuplicateNodeError if the identifier is already present.
        """
        if node_id in self._children:
            raise DuplicateNodeError(node_id)
        self._children[node_id] = [] if self._parallel_edges else set()

    def add_edge(self, src: NodeId, dst: NodeId) -> bool:
        """Record the edge src -> dst.

        Returns True if the edge already existed before this call.  With
        parallel_edges the edge is recorded again anyway.
        """
        children = self._children[src]
        existed = dst in children
        if isinstance(children, list):
            children.append(dst)
        else:
            children.add(dst)
        if existed:
            log.debug("duplicate edge %d -> %d", src, dst)
        return existed

    # ---- algorithms ------------------------------------------------------

    def detect_cycle(self) -> CycleResult[NodeId]:
        """Find one cycle, if any.  See cycle_detector.find_cycle."""
        return find_cycle(self._children)

    def walk(self, start: NodeId) -> Iterator[NodeId]:
        """Yield identifiers reachable from *start* in first-visit order."""
        return walk(self._children, start)

    def traverse(self, start: NodeId, visit: Callable[[NodeId], object]) -> None:
        """Call *visit* once per identifier reachable from *start*.

        An unregistered *start* produces no calls.
        """
        for node_id in self.walk(start):
            visit(node_id)

    # ---- queries ---------------------------------------------------------

    @property
    def parallel_edges(self) -> bool:
        return self._parallel_edges

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._children

    def has_edge(self, src: NodeId, dst: NodeId) -> bool:
        return src in self._children and dst in self._children[src]

    def successors(self, node_id: NodeId) -> list[NodeId]:
        """Direct successors.  Repeats appear once per recorded edge."""
        return list(self._children.get(node_id, ()))

    def nodes(self) -> Iterator[NodeId]:
        return iter(self._children)

    def edges(self) -> Iterator[tuple[NodeId, NodeId]]:
        for src, dsts in self._children.items():
            for dst in dsts:
                yield src, dst

    @property
    def node_count(self) -> int:
        return len(self._children)

    @property
    def edge_count(self) -> int:
        return sum(len(dsts) for dsts in self._children.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._children

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"CoreGraph(nodes={self.node_count}, edges={self.edge_count})"
