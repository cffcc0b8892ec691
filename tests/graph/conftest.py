"""Shared fixtures for graph tests."""
from __future__ import annotations

from typing import Hashable, Iterable

import pytest

from depgraph_lite.graph.core import CoreGraph
from depgraph_lite.graph.keyed import KeyedGraph

SEED = 42


def keyed_from_edges(
    edges: Iterable[tuple[Hashable, Hashable]],
    parallel_edges: bool = False,
) -> KeyedGraph:
    """Register endpoints in first-seen order, then add every edge."""
    g: KeyedGraph = KeyedGraph(parallel_edges=parallel_edges)
    edges = list(edges)
    for src, dst in edges:
        for key in (src, dst):
            if key not in g:
                g.add_node(key)
    for src, dst in edges:
        g.add_edge(src, dst)
    return g


def core_from_edges(
    node_count: int,
    edges: Iterable[tuple[int, int]],
    parallel_edges: bool = False,
) -> CoreGraph:
    g = CoreGraph(parallel_edges=parallel_edges)
    for node_id in range(node_count):
        g.register_node(node_id)
    for src, dst in edges:
        g.add_edge(src, dst)
    return g


def assert_closed_walk(graph, path: list) -> None:
    """*path* must be closed and every hop must be a real edge."""
    assert len(path) >= 2
    assert path[0] == path[-1]
    for i in range(len(path) - 1):
        assert graph.has_edge(path[i], path[i + 1]), (
            f"Edge {path[i]!r}->{path[i + 1]!r} not in graph"
        )


@pytest.fixture
def empty_graph() -> KeyedGraph[str]:
    return KeyedGraph()


@pytest.fixture
def linear_graph() -> KeyedGraph[str]:
    """A -> B -> C"""
    return keyed_from_edges([("A", "B"), ("B", "C")])


@pytest.fixture
def triangle_graph() -> KeyedGraph[str]:
    """A -> B -> C -> A"""
    return keyed_from_edges([("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture
def diamond_graph() -> KeyedGraph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    return keyed_from_edges([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])
