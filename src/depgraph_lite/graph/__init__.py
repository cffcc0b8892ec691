"""Directed graphs with cycle detection and reachability walks."""

from depgraph_lite.graph.core import CoreGraph
from depgraph_lite.graph.cycle_detector import CycleResult, find_cycle
from depgraph_lite.graph.keyed import IntGraph, KeyedGraph
from depgraph_lite.graph.traversal import walk

__all__ = [
    "CoreGraph",
    "CycleResult",
    "IntGraph",
    "KeyedGraph",
    "find_cycle",
    "walk",
]
