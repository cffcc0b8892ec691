"""depgraph-lite CLI entry point.

Usage: uv run depgraph-lite [--parallel-edges] [-v] <command>

Commands:
    demo                      replay the reference scenarios
    check EDGE [EDGE ...]     report a cycle in the given edges (exit 1)
    walk START EDGE [...]     list nodes reachable from START

Edges are written SRC->DST.  Nodes are registered in the order they
first appear; --node adds nodes that have no edges.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from depgraph_lite.graph.keyed import IntGraph, KeyedGraph

log = logging.getLogger(__name__)

EDGE_SEPARATOR = "->"


def parse_edge(spec: str) -> tuple[str, str]:
    """Split 'SRC->DST' into its endpoints (argparse type function)."""
    src, sep, dst = spec.partition(EDGE_SEPARATOR)
    src, dst = src.strip(), dst.strip()
    if not sep or not src or not dst:
        raise argparse.ArgumentTypeError(
            f"invalid edge {spec!r}, expected SRC{EDGE_SEPARATOR}DST"
        )
    return src, dst


def build_graph(
    edges: Sequence[tuple[str, str]],
    nodes: Sequence[str] = (),
    parallel_edges: bool = False,
) -> KeyedGraph[str]:
    """Build a string-keyed graph, registering nodes on first sight."""
    graph: KeyedGraph[str] = KeyedGraph(parallel_edges=parallel_edges)

    def ensure(key: str) -> None:
        if key not in graph:
            graph.add_node(key)

    for key in nodes:
        ensure(key)
    for src, dst in edges:
        ensure(src)
        ensure(dst)
        if graph.add_edge(src, dst):
            log.info("edge %s%s%s given more than once", src, EDGE_SEPARATOR, dst)
    return graph


def format_cycle(cycle: Sequence[object]) -> str:
    return f" {EDGE_SEPARATOR} ".join(str(node) for node in cycle)


def _add_check_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "check",
        help="Report a dependency cycle, exit 1 if one exists.",
    )
    p.add_argument(
        "edges", nargs="+", type=parse_edge, metavar="EDGE",
        help="Directed edge written SRC->DST.",
    )
    p.add_argument(
        "--node", action="append", default=[], metavar="NODE",
        help="Register an extra node with no edges (repeatable).",
    )


def _add_walk_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "walk",
        help="Print every node reachable from START.",
    )
    p.add_argument("start", metavar="START", help="Node to start from.")
    p.add_argument(
        "edges", nargs="+", type=parse_edge, metavar="EDGE",
        help="Directed edge written SRC->DST.",
    )


def _run_check(args: argparse.Namespace) -> int:
    graph = build_graph(args.edges, args.node, args.parallel_edges)
    result = graph.detect_cycle()
    if result.has_cycle:
        print(f"cycle: {format_cycle(result.cycle_path or [])}")
        return 1
    print(f"no cycle ({graph.node_count} nodes, {graph.edge_count} edges)")
    return 0


def _run_walk(args: argparse.Namespace) -> int:
    graph = build_graph(args.edges, parallel_edges=args.parallel_edges)
    if args.start not in graph:
        log.warning("start node %r does not appear in any edge", args.start)
    graph.traverse(args.start, print)
    return 0


def _run_demo(args: argparse.Namespace) -> int:
    # integer keys, two disjoint cycles: 0 -> 1 -> 2 -> 0 and 3 -> 4 -> 3
    ints = IntGraph(parallel_edges=args.parallel_edges)
    for key in (2, 3, 0, 1, 4):
        ints.add_node(key)
    for src, dst in [(0, 1), (1, 2), (2, 0), (3, 4), (4, 3)]:
        ints.add_edge(src, dst)
    result = ints.detect_cycle()
    print(f"integer graph cycle: {format_cycle(result.cycle_path or [])}")

    names: KeyedGraph[str] = KeyedGraph(parallel_edges=args.parallel_edges)
    names.add_node("node1")
    names.add_node("node2")
    names.add_edge("node1", "node2")
    names.add_edge("node2", "node1")
    result = names.detect_cycle()
    print(f"string graph cycle: {format_cycle(result.cycle_path or [])}")

    tree = build_graph([("A", "B"), ("A", "C")], parallel_edges=args.parallel_edges)
    tree.traverse("A", lambda node: print(f"Visited node: {node}"))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="depgraph-lite",
        description="Directed dependency graphs with cycle witnesses.",
    )
    parser.add_argument(
        "--parallel-edges", action="store_true",
        help="Record repeated edges instead of collapsing them.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("demo", help="Replay the reference scenarios.")
    _add_check_parser(subparsers)
    _add_walk_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "check":
        return _run_check(args)
    if args.command == "walk":
        return _run_walk(args)
    return _run_demo(args)


if __name__ == "__main__":
    sys.exit(main())
