"""Tests for the integer-keyed IntGraph specialization."""
from __future__ import annotations

import pytest

from depgraph_lite.domain.errors import DuplicateNodeError, UnknownNodeError
from depgraph_lite.graph.keyed import IntGraph, KeyedGraph


@pytest.fixture
def two_cycles() -> IntGraph:
    """0 -> 1 -> 2 -> 0 and 3 -> 4 -> 3, registered out of order."""
    g = IntGraph()
    for key in (2, 3, 0, 1, 4):
        g.add_node(key)
    for src, dst in [(0, 1), (1, 2), (2, 0), (3, 4), (4, 3)]:
        g.add_edge(src, dst)
    return g


class TestIntGraph:
    def test_is_keyed_graph(self) -> None:
        assert isinstance(IntGraph(), KeyedGraph)

    def test_keys_map_to_registration_order(self, two_cycles: IntGraph) -> None:
        assert two_cycles.identifier_of(2) == 0
        assert two_cycles.identifier_of(4) == 4
        assert two_cycles.key_of(1) == 3

    def test_rejects_non_int(self) -> None:
        g = IntGraph()
        with pytest.raises(TypeError):
            g.add_node("1")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            g.add_node(1.0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            g.add_node(True)
        assert g.node_count == 0

    def test_rejects_negative(self) -> None:
        g = IntGraph()
        with pytest.raises(ValueError):
            g.add_node(-1)
        assert g.node_count == 0

    def test_duplicate(self) -> None:
        g = IntGraph()
        g.add_node(0)
        with pytest.raises(DuplicateNodeError):
            g.add_node(0)

    def test_edge_errors(self) -> None:
        g = IntGraph()
        with pytest.raises(UnknownNodeError):
            g.add_edge(0, 0)
        g.add_node(0)
        with pytest.raises(UnknownNodeError) as exc_info:
            g.add_edge(0, 1)
        assert exc_info.value.node == 1

    def test_edge_results(self) -> None:
        g = IntGraph()
        g.add_node(0)
        g.add_node(1)
        assert g.add_edge(0, 1) is False
        assert g.add_edge(0, 1) is True
        assert g.add_edge(1, 0) is False

    def test_cycle_reported_in_keys(self, two_cycles: IntGraph) -> None:
        path = two_cycles.detect_cycle().cycle_path
        assert path is not None
        assert path[0] == path[-1]
        assert set(path) in ({0, 1, 2}, {3, 4})

    def test_no_cycle(self) -> None:
        g = IntGraph()
        for key in range(3):
            g.add_node(key)
        g.add_edge(0, 1)
        g.add_edge(1, 2)
        assert not g.detect_cycle().has_cycle

    def test_self_loop(self) -> None:
        g = IntGraph()
        g.add_node(0)
        g.add_edge(0, 0)
        assert g.detect_cycle().cycle_path == [0, 0]
