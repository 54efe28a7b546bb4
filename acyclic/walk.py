"""Breadth-first walks over the ancestors or descendants of a vertex."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, Iterator, List, Set

from .dag import DAG

_Neighbours = Callable[[str], Dict[str, object]]


def _breadth_first(start_id: str, neighbours: _Neighbours) -> Iterator[str]:
    """Yield every vertex id reachable from ``start_id``, each once, breadth first."""
    visited: Set[str] = set()
    queue: Deque[str] = deque()
    for neighbour in neighbours(start_id):
        visited.add(neighbour)
        queue.append(neighbour)
    while queue:
        current = queue.popleft()
        for neighbour in neighbours(current):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
        yield current


def ancestors_walker(dag: DAG, vertex_id: str) -> Iterator[str]:
    """Return an iterator over the ancestor ids of a vertex in breadth-first order.

    The id is checked at once; stop the walk by leaving the loop or by
    closing the returned generator. Siblings come in no particular order.
    """
    dag.get_vertex(vertex_id)
    return _breadth_first(vertex_id, dag.get_parents)


def descendants_walker(dag: DAG, vertex_id: str) -> Iterator[str]:
    """Return an iterator over the descendant ids of a vertex in breadth-first order.

    The id is checked at once; stop the walk by leaving the loop or by
    closing the returned generator. Siblings come in no particular order.
    """
    dag.get_vertex(vertex_id)
    return _breadth_first(vertex_id, dag.get_children)


def get_ordered_ancestors(dag: DAG, vertex_id: str) -> List[str]:
    """Return all ancestor ids of a vertex in breadth-first order."""
    return list(ancestors_walker(dag, vertex_id))


def get_ordered_descendants(dag: DAG, vertex_id: str) -> List[str]:
    """Return all descendant ids of a vertex in breadth-first order."""
    return list(descendants_walker(dag, vertex_id))