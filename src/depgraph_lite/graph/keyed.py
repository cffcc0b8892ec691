"""Keyed graph: caller-chosen node keys on top of CoreGraph.

Callers name nodes with any hashable value.  Each new key is assigned
the next dense identifier (0, 1, 2, ...) and the structural work is
delegated to a CoreGraph over those identifiers.  Results coming back
from the core (cycle witnesses, traversal order) are translated to
keys before they reach the caller.

The key <-> identifier bijection is two structures kept in lockstep:

    _ids   dict[K, NodeId]   key -> identifier
    _keys  list[K]           identifier -> key (index == identifier)

Identifiers are dense and never reused, so the reverse map is a plain
list and the next identifier is always len(_keys).  Both maps are
written in add_node after every check has passed, so a failed call
leaves the graph exactly as it was.
"""
from __future__ import annotations

import logging
from typing import Callable, Generic, Hashable, Iterator, TypeVar

from depgraph_lite.domain.errors import (
    DuplicateNodeError,
    GraphInvariantError,
    UnknownNodeError,
)
from depgraph_lite.domain.types import NodeId
from depgraph_lite.graph.core import CoreGraph
from depgraph_lite.graph.cycle_detector import CycleResult

K = TypeVar("K", bound=Hashable)

log = logging.getLogger(__name__)


class KeyedGraph(Generic[K]):
    """Directed graph whose nodes are identified by arbitrary keys.

    Usage:
        g: KeyedGraph[str] = KeyedGraph()
        g.add_node("A")
        g.add_node("B")
        g.add_edge("A", "B")        # False: new edge
        g.add_edge("B", "A")
        g.detect_cycle().cycle_path  # e.g. ["A", "B", "A"]
    """

    __slots__ = ("_core", "_ids", "_keys")

    def __init__(self, *, parallel_edges: bool = False) -> None:
        self._core = CoreGraph(parallel_edges=parallel_edges)
        self._ids: dict[K, NodeId] = {}
        self._keys: list[K] = []

    # ---- mutation --------------------------------------------------------

    def add_node(self, key: K) -> None:
        """Register *key* under a freshly allocated identifier.

        Raises DuplicateNodeError if *key* is already registered.
        """
        if key in self._ids:
            raise DuplicateNodeError(key)
        node_id = len(self._keys)
        self._core.register_node(node_id)
        self._ids[key] = node_id
        self._keys.append(key)
        log.debug("registered node %r as id %d", key, node_id)

    def add_edge(self, src: K, dst: K) -> bool:
        """Add the directed edge src -> dst.

        Returns True if the edge was already present.  Raises
        UnknownNodeError naming the first unregistered endpoint; in that
        case nothing is recorded.
        """
        src_id = self.identifier_of(src)
        dst_id = self.identifier_of(dst)
        return self._core.add_edge(src_id, dst_id)

    # ---- algorithms ------------------------------------------------------

    def detect_cycle(self) -> CycleResult[K]:
        """Find one cycle and report it in key space.

        The returned path starts and ends with the same key.  When the
        graph has several cycles, which one is reported depends on
        registration order and is not otherwise specified.
        """
        result = self._core.detect_cycle()
        if result.cycle_path is None:
            return CycleResult(has_cycle=False, cycle_path=None)
        return CycleResult(
            has_cycle=True,
            cycle_path=[self.key_of(node_id) for node_id in result.cycle_path],
        )

    def walk(self, start: K) -> Iterator[K]:
        """Yield keys reachable from *start*, *start* first.

        An unregistered *start* yields nothing.
        """
        node_id = self._ids.get(start)
        if node_id is None:
            return
        for reached in self._core.walk(node_id):
            yield self.key_of(reached)

    def traverse(self, start: K, visit: Callable[[K], object]) -> None:
        """Call *visit* once for every key reachable from *start*.

        Unknown *start* keys are not an error: *visit* is simply never
        called.
        """
        for key in self.walk(start):
            visit(key)

    # ---- key translation -------------------------------------------------

    def identifier_of(self, key: K) -> NodeId:
        """Identifier assigned to *key*.  Raises UnknownNodeError."""
        try:
            return self._ids[key]
        except KeyError:
            raise UnknownNodeError(key) from None

    def key_of(self, node_id: NodeId) -> K:
        """Key owning *node_id*.

        Every identifier in the core was allocated by add_node, so a
        miss here means the two maps have diverged.
        """
        if not 0 <= node_id < len(self._keys):
            raise GraphInvariantError(
                f"identifier {node_id} has no owning key "
                f"({len(self._keys)} identifiers allocated)"
            )
        key = self._keys[node_id]
        if self._ids.get(key) != node_id:
            raise GraphInvariantError(
                f"key {key!r} maps to {self._ids.get(key)}, expected {node_id}"
            )
        return key

    # ---- queries ---------------------------------------------------------

    @property
    def core(self) -> CoreGraph:
        """The underlying identifier graph.  Treat as read-only."""
        return self._core

    def has_node(self, key: K) -> bool:
        return key in self._ids

    def has_edge(self, src: K, dst: K) -> bool:
        if src not in self._ids or dst not in self._ids:
            return False
        return self._core.has_edge(self._ids[src], self._ids[dst])

    def successors(self, key: K) -> list[K]:
        """Direct successors of *key*; empty if *key* is unknown."""
        node_id = self._ids.get(key)
        if node_id is None:
            return []
        return [self.key_of(child) for child in self._core.successors(node_id)]

    def nodes(self) -> Iterator[K]:
        """Keys in registration order."""
        return iter(list(self._keys))

    def edges(self) -> Iterator[tuple[K, K]]:
        for src, dst in self._core.edges():
            yield self.key_of(src), self.key_of(dst)

    @property
    def node_count(self) -> int:
        return len(self._keys)

    @property
    def edge_count(self) -> int:
        return self._core.edge_count

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._ids
        except TypeError:
            # unhashable keys can never have been registered
            return False

    def __iter__(self) -> Iterator[K]:
        return self.nodes()

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.node_count}, "
            f"edges={self.edge_count})"
        )


class IntGraph(KeyedGraph[int]):
    """KeyedGraph restricted to non-negative integer keys.

    The keys are still mapped to fresh dense identifiers, so key 7 added
    first gets identifier 0.  Use key_of / identifier_of to move between
    the two.
    """

    __slots__ = ()

    def add_node(self, key: int) -> None:
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(
                f"IntGraph keys must be int, got {type(key).__name__}"
            )
        if key < 0:
            raise ValueError(f"IntGraph keys must be non-negative, got {key}")
        super().add_node(key)
