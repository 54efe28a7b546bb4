"""Walks over a whole graph: depth first, breadth first and topologically ordered."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, Iterator, List, Set

from .dag import DAG
from .storage import StorableVertex


class Visitor:
    """Receives the vertices of a walk one by one.

    The base class records every visited vertex in ``visited``; subclasses
    override :meth:`visit` to do something else with them.
    """

    def __init__(self) -> None:
        self.visited: List[StorableVertex] = []

    def visit(self, vertex: StorableVertex) -> None:
        """Handle one vertex of the walk."""
        self.visited.append(vertex)


def _wrap(vertices: Dict[str, Any], reverse: bool = False) -> List[StorableVertex]:
    """Wrap vertices keyed by id into storable vertices, sorted by id."""
    return [StorableVertex(vid, vertices[vid]) for vid in sorted(vertices, reverse=reverse)]


def iter_dfs(dag: DAG) -> Iterator[StorableVertex]:
    """Yield every vertex once, depth first, starting from the roots in id order."""
    stack = _wrap(dag.get_roots(), reverse=True)
    visited: Set[str] = set()
    while stack:
        current = stack.pop()
        if current.id not in visited:
            visited.add(current.id)
            yield current
        stack.extend(_wrap(dag.get_children(current.id), reverse=True))


def iter_bfs(dag: DAG) -> Iterator[StorableVertex]:
    """Yield every vertex once, breadth first, starting from the roots in id order."""
    queue: Deque[StorableVertex] = deque(_wrap(dag.get_roots()))
    visited: Set[str] = set()
    while queue:
        current = queue.popleft()
        if current.id not in visited:
            visited.add(current.id)
            yield current
        queue.extend(_wrap(dag.get_children(current.id)))


def iter_ordered(dag: DAG) -> Iterator[StorableVertex]:
    """Yield every vertex once in topological order.

    For every edge ``a -> b``, ``a`` comes before ``b``.
    """
    queue: Deque[StorableVertex] = deque(_wrap(dag.get_roots()))
    visited: Set[str] = set()
    while queue:
        current = queue.popleft()
        if current.id in visited:
            continue
        if any(parent not in visited for parent in dag.get_parents(current.id)):
            queue.append(current)
            continue
        visited.add(current.id)
        yield current
        queue.extend(_wrap(dag.get_children(current.id)))


def dfs_walk(dag: DAG, visitor: Visitor) -> None:
    """Hand every vertex to ``visitor`` in depth-first order."""
    for vertex in iter_dfs(dag):
        visitor.visit(vertex)


def bfs_walk(dag: DAG, visitor: Visitor) -> None:
    """Hand every vertex to ``visitor`` in breadth-first order."""
    for vertex in iter_bfs(dag):
        visitor.visit(vertex)


def ordered_walk(dag: DAG, visitor: Visitor) -> None:
    """Hand every vertex to ``visitor`` in topological order."""
    for vertex in iter_ordered(dag):
        visitor.visit(vertex)