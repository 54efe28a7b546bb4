"""Command line demonstrations: a small example graph and a timing run."""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional, TextIO, Tuple

from .dag import DAG
from .walk import get_ordered_descendants


def build_large(dag: DAG, levels: int, branches: int, parent: int) -> Tuple[int, int]:
    """Grow a tree of ``levels`` levels below ``parent``, ``branches`` children each.

    ``parent`` is the integer value of a vertex already in ``dag`` under the
    id ``str(parent)``. Children get the values ``parent * 10 + i``. Returns
    the numbers of vertices and edges added.
    """
    if levels <= 1:
        return 0, 0
    if not 1 <= branches <= 9:
        raise ValueError("number of branches must be between 1 and 9")
    vertex_count = 0
    edge_count = 0
    for i in range(1, branches + 1):
        value = parent * 10 + i
        child_id = str(value)
        dag.add_vertex_by_id(child_id, value)
        dag.add_edge(str(parent), child_id)
        sub_vertices, sub_edges = build_large(dag, levels - 1, branches, value)
        vertex_count += 1 + sub_vertices
        edge_count += 1 + sub_edges
    return vertex_count, edge_count


def expected_vertex_count(levels: int, branches: int) -> int:
    """Return the number of vertices in a full tree of the given shape."""
    return sum(branches**level for level in range(levels))


def run_basic(out: TextIO) -> DAG:
    """Build a three-vertex graph, describe it on ``out`` and return it."""
    dag = DAG()
    v1 = dag.add_vertex(1)
    v2 = dag.add_vertex(2)
    v3 = dag.add_vertex(3)
    dag.add_edge(v1, v2)
    dag.add_edge(v1, v3)
    out.write(str(dag))
    return dag


def _report(out: TextIO, start: float, message: str) -> None:
    out.write(f"{time.perf_counter() - start:f}s {message}\n")


def run_timing(out: TextIO, levels: int = 7, branches: int = 9) -> DAG:
    """Time the main graph operations on a large tree and return the graph.

    Raises ``RuntimeError`` when a result does not match the tree's shape.
    """
    dag = DAG()
    root = 1
    key = str(root)
    dag.add_vertex_by_id(key, root)

    start = time.perf_counter()
    build_large(dag, levels, branches, root)
    _report(out, start, f"to add {dag.order()} vertices and {dag.size()} edges")
    expected_vertices = expected_vertex_count(levels, branches)
    vertex_count = len(dag.get_vertices())
    if vertex_count != expected_vertices:
        raise RuntimeError(f"get_vertices() = {vertex_count}, want {expected_vertices}")

    start = time.perf_counter()
    descendants = dag.get_descendants(key)
    _report(out, start, "to get descendants")
    expected_descendants = vertex_count - 1
    if len(descendants) != expected_descendants:
        raise RuntimeError(
            f"get_descendants(root) = {len(descendants)}, want {expected_descendants}"
        )

    start = time.perf_counter()
    dag.get_descendants(key)
    _report(out, start, "to get descendants 2nd time")

    start = time.perf_counter()
    ordered = get_ordered_descendants(dag, key)
    _report(out, start, "to get descendants ordered")
    if len(ordered) != expected_descendants:
        raise RuntimeError(
            f"get_ordered_descendants(root) = {len(ordered)}, want {expected_descendants}"
        )

    start = time.perf_counter()
    children = dag.get_children(key)
    _report(out, start, "to get children")
    if len(children) != branches:
        raise RuntimeError(f"get_children(root) = {len(children)}, want {branches}")

    dag.get_descendants(key)
    edges_before = dag.size()
    start = time.perf_counter()
    dag.reduce_transitively()
    _report(out, start, "to transitively reduce the graph with caches poupulated")
    if dag.size() != edges_before:
        raise RuntimeError(f"size() = {dag.size()}, want {edges_before}")

    dag.flush_caches()
    start = time.perf_counter()
    dag.reduce_transitively()
    _report(out, start, "to transitively reduce the graph without caches poupulated")

    start = time.perf_counter()
    first_child = next(iter(children), None)
    if first_child is not None:
        dag.delete_edge(key, first_child)
    _report(out, start, "to delete an edge from the root")
    return dag


def main(argv: Optional[List[str]] = None) -> int:
    """Run the ``basic`` (default) or ``timing`` demonstration."""
    parser = argparse.ArgumentParser(
        prog="acyclic", description="Demonstrate directed acyclic graphs."
    )
    parser.add_argument("command", nargs="?", choices=("basic", "timing"), default="basic")
    parser.add_argument("--levels", type=int, default=7, help="levels of the timing tree")
    parser.add_argument("--branches", type=int, default=9, help="children per vertex (1-9)")
    args = parser.parse_args(argv)

    if args.levels < 1:
        parser.error("--levels must be at least 1")
    if not 1 <= args.branches <= 9:
        parser.error("--branches must be between 1 and 9")

    if args.command == "basic":
        run_basic(sys.stdout)
    else:
        run_timing(sys.stdout, args.levels, args.branches)
    return 0


if __name__ == "__main__":
    sys.exit(main())