"""Copies of a whole graph or of the part reachable from one vertex."""

from __future__ import annotations

from typing import Dict, Tuple

from .dag import DAG


def _copy_relatives(
    dag: DAG, new: DAG, start_id: str, visited: Dict[str, str], ascending: bool
) -> str:
    """Copy ``start_id`` and everything reachable from it into ``new``.

    ``visited`` maps ids in ``dag`` to ids in ``new`` and is shared between
    calls. Returns the id of the copied start vertex.
    """
    neighbours = dag.get_parents if ascending else dag.get_children

    def connect(current: str, relative: str) -> None:
        if ascending:
            new.add_edge(visited[relative], visited[current])
        else:
            new.add_edge(visited[current], visited[relative])

    visited[start_id] = new.add_vertex(dag.get_vertex(start_id))
    stack = [(start_id, iter(neighbours(start_id)))]
    while stack:
        current, relatives = stack[-1]
        for relative in relatives:
            if relative not in visited:
                visited[relative] = new.add_vertex(dag.get_vertex(relative))
                connect(current, relative)
                stack.append((relative, iter(neighbours(relative))))
                break
            connect(current, relative)
        else:
            stack.pop()
    return visited[start_id]


def _relatives_graph(dag: DAG, vertex_id: str, ascending: bool) -> Tuple[DAG, str]:
    dag.get_vertex(vertex_id)
    new = DAG(dag.options)
    new_id = _copy_relatives(dag, new, vertex_id, {}, ascending)
    return new, new_id


def get_descendants_graph(dag: DAG, vertex_id: str) -> Tuple[DAG, str]:
    """Return a new graph of the vertex and all its descendants.

    Also returns the id of the copied vertex, the single root of the new graph.
    """
    return _relatives_graph(dag, vertex_id, ascending=False)


def get_ancestors_graph(dag: DAG, vertex_id: str) -> Tuple[DAG, str]:
    """Return a new graph of the vertex and all its ancestors.

    Also returns the id of the copied vertex, the single leaf of the new graph.
    """
    return _relatives_graph(dag, vertex_id, ascending=True)


def copy_dag(dag: DAG) -> DAG:
    """Return a copy of the whole graph."""
    new = DAG(dag.options)
    visited: Dict[str, str] = {}
    for root_id in dag.get_roots():
        _copy_relatives(dag, new, root_id, visited, ascending=False)
    return new