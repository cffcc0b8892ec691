"""Reachability walk (stack-based DFS).

Successors are pushed in iteration order and popped LIFO, so sibling
order in the output is not meaningful.  What is guaranteed: every node
reachable from the start is yielded exactly once, parallel edges and
back edges notwithstanding, and nothing unreachable is ever yielded.
"""
from __future__ import annotations

from typing import Hashable, Iterable, Iterator, Mapping, TypeVar

T = TypeVar("T", bound=Hashable)


def walk(adjacency: Mapping[T, Iterable[T]], start: T) -> Iterator[T]:
    """Yield nodes reachable from *start*, *start* first.

    Yields nothing when *start* is not a key of *adjacency*.
    """
    if start not in adjacency:
        return
    seen: set[T] = set()
    stack: list[T] = [start]
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        yield node
        stack.extend(adjacency.get(node, ()))
