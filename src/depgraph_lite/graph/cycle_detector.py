"""Cycle detection in directed graphs using iterative DFS.

Each top-level search keeps two pieces of state:
  visited -- nodes already entered by any search; never entered again
  path    -- the active DFS path from the search root to the current
             node (the "recursion stack"), with a position index

An edge that lands on a node still on the path is a back edge, so the
graph has a cycle.  The witness is the slice of the path starting at
that node, closed by repeating the node at the end:

    path = [A, B, C], edge C -> B   =>   cycle = [B, C, B]
    path = [X],       edge X -> X   =>   cycle = [X, X]

The search is iterative.  Every path entry has a matching frame holding
the iterator over its successors, so a 100k-node chain costs a list of
100k iterators instead of a RecursionError.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Hashable, Iterable, Iterator, Mapping, TypeVar

T = TypeVar("T", bound=Hashable)

log = logging.getLogger(__name__)

_DONE = object()


@dataclass(slots=True)
class CycleResult(Generic[T]):
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[T] | None = None

    def nodes(self) -> list[T]:
        """Distinct members of the cycle, without the closing repeat."""
        if not self.cycle_path:
            return []
        return self.cycle_path[:-1]


def find_cycle(
    adjacency: Mapping[T, Iterable[T]],
    roots: Iterable[T] | None = None,
) -> CycleResult[T]:
    """Search *adjacency* for a directed cycle.

    *adjacency* maps each node to its successors.  Successors that are
    not keys of the mapping are treated as leaves.  *roots* is the order
    in which top-level searches start; it defaults to the mapping's own
    iteration order.

    Returns the first cycle found as a CycleResult whose cycle_path
    starts and ends with the same node.  Only one witness is reported
    even if the graph has several independent cycles.
    """
    visited: set[T] = set()
    for root in adjacency if roots is None else roots:
        if root in visited:
            continue
        cycle = _search_from(adjacency, root, visited)
        if cycle is not None:
            log.debug("cycle found from root %r: %r", root, cycle)
            return CycleResult(has_cycle=True, cycle_path=cycle)
    return CycleResult(has_cycle=False, cycle_path=None)


def _search_from(
    adjacency: Mapping[T, Iterable[T]],
    root: T,
    visited: set[T],
) -> list[T] | None:
    path: list[T] = [root]
    position: dict[T, int] = {root: 0}
    frames: list[Iterator[T]] = [iter(adjacency.get(root, ()))]
    visited.add(root)

    while frames:
        succ = next(frames[-1], _DONE)
        if succ is _DONE:
            # every successor explored, leave this node
            frames.pop()
            del position[path.pop()]
            continue
        if succ in position:
            return path[position[succ]:] + [succ]
        if succ in visited:
            continue
        visited.add(succ)
        position[succ] = len(path)
        path.append(succ)
        frames.append(iter(adjacency.get(succ, ())))

    return None
