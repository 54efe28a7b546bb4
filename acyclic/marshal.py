"""JSON encoding and decoding of whole graphs."""

from __future__ import annotations

import json
from typing import Any, Callable, Optional, Union

from .dag import DAG
from .options import Options
from .storage import StorableDAG, StorableEdge
from .visitor import iter_dfs


def to_storable(dag: DAG) -> StorableDAG:
    """Describe the graph as vertices and edges, collected in depth-first order."""
    storable = StorableDAG()
    for vertex in iter_dfs(dag):
        storable.vertices.append(vertex)
        for child_id in sorted(dag.get_children(vertex.id)):
            storable.edges.append(StorableEdge(vertex.id, child_id))
    return storable


def to_json(dag: DAG) -> str:
    """Return the compact JSON encoding of the graph."""
    return json.dumps(to_storable(dag).to_dict(), separators=(",", ":"))


def from_json(
    data: Union[str, bytes],
    options: Optional[Options] = None,
    value_decoder: Optional[Callable[[Any], Any]] = None,
) -> DAG:
    """Build a new graph from its JSON encoding.

    ``value_decoder``, when given, turns each decoded vertex value into the
    vertex to store. Raises ``json.JSONDecodeError`` on malformed input and
    the graph's own errors on inconsistent vertices or edges.
    """
    storable = StorableDAG.from_dict(json.loads(data))
    dag = DAG(options)
    for vertex in storable.vertices:
        value = value_decoder(vertex.value) if value_decoder is not None else vertex.value
        dag.add_vertex_by_id(vertex.id, value)
    for edge in storable.edges:
        dag.add_edge(edge.src_id, edge.dst_id)
    return dag