# acyclic

A directed acyclic graph for Python. Vertices are arbitrary objects addressed
by string ids. Edges that would close a loop are refused. The ancestors and
descendants of each vertex are cached, and the cache is kept up to date as
vertices and edges are added and deleted.

## Installation

```
pip install acyclic
```

For running the tests:

```
pip install "acyclic[test]"
pytest
```

## Usage

```python
from acyclic.dag import DAG
from acyclic.errors import EdgeLoopError

dag = DAG()
v1 = dag.add_vertex(1)
v2 = dag.add_vertex(2)
v3 = dag.add_vertex(3)
dag.add_edge(v1, v2)
dag.add_edge(v1, v3)

print(dag)               # counts, vertices and edges
print(dag.get_children(v1))

try:
    dag.add_edge(v3, v1)
except EdgeLoopError as exc:
    print(exc)           # edge between '...' and '...' would create a loop
```

### Vertices and ids

`DAG.add_vertex` returns the id of the new vertex. A vertex that has an `id`
attribute holding a string, or an `id()` method returning one, keeps that id;
every other vertex receives a generated UUID. `DAG.add_vertex_by_id` stores a
vertex under an id of your choosing.

Vertices are stored under a hash key, by default the vertex itself, so a
vertex can be added only once. For vertices that cannot be hashed (dicts,
lists, objects holding them) pass options with a key function:

```python
from acyclic.dag import DAG
from acyclic.options import Options

dag = DAG(Options(vertex_hash=lambda v: v["name"]))
dag.add_vertex_by_id("a", {"name": "a", "tags": ["x"]})
```

### Queries and changes

`DAG` offers `get_vertex`, `get_vertices`, `get_roots`, `get_leaves`,
`get_parents`, `get_children`, `get_ancestors` and `get_descendants` (each
returning a dict of vertices keyed by id), `is_root`, `is_leaf`, `is_edge`,
`order()` (number of vertices, also `len(dag)`), `size()` (number of edges),
`id in dag`, `delete_vertex`, `delete_edge`, `reduce_transitively` (removes
every edge implied by a longer path) and `flush_caches`. Each method takes the
graph's lock while it runs.

### Errors

All errors derive from `acyclic.errors.DAGError`: `VertexNilError` (a vertex
of `None`), `VertexDuplicateError`, `IDDuplicateError`, `IDEmptyError`,
`IDUnknownError`, `EdgeDuplicateError`, `EdgeUnknownError`, `EdgeLoopError`
and `SrcDstEqualError`. They also derive from `ValueError` or, for the
unknown-id and unknown-edge cases, `LookupError`.

### Ancestor and descendant walks

`acyclic.walk` offers `ancestors_walker` and `descendants_walker`, which check
the id at once and return a generator yielding ids in breadth-first order;
leave the loop or close the generator to stop early. `get_ordered_ancestors`
and `get_ordered_descendants` return the same ids as lists. Siblings come in
no particular order.

### Whole-graph visits

`acyclic.visitor` offers the generators `iter_dfs`, `iter_bfs` and
`iter_ordered` (topological: for every edge `a -> b`, `a` comes first), each
yielding every vertex once as a `StorableVertex` with `id` and `value`.
`dfs_walk`, `bfs_walk` and `ordered_walk` hand the same vertices to the
`visit` method of a `Visitor`; the base `Visitor` collects them in its
`visited` list. Roots and children are taken in the order of their ids, so
these visits are repeatable.

### Sub-graphs and copies

`acyclic.relatives` offers `get_descendants_graph` and `get_ancestors_graph`,
which return a new graph of a vertex and all its descendants or ancestors
together with the id of the copied vertex, and `copy_dag`, which copies the
whole graph. The copies hold the same vertex objects and share the options.

### Flows

`acyclic.flow.descendants_flow(dag, start_id, inputs, callback)` calls
`callback(dag, id, parent_results)` for the start vertex and for each of its
descendants, each only after all of its parents within the flow have
finished. The start vertex receives `inputs`; every other vertex receives the
`FlowResult`s of its parents. An exception raised by the callback is stored in
the `error` field of that vertex's `FlowResult` and passed on to its children.
The results of the vertices without children are returned. Callbacks run one
after another in the calling thread.

### JSON

`acyclic.marshal.to_json` encodes a graph as compact JSON of the form
`{"vs": [{"i": id, "v": value}, ...], "es": [{"s": src, "d": dst}, ...]}`,
with vertices in depth-first order; `to_storable` returns the same description
as a `StorableDAG` from `acyclic.storage`. `acyclic.marshal.from_json` builds
a new graph from such a document; an optional `value_decoder` turns each
decoded value into the vertex to store, and `options` sets the new graph's
options. Vertex values must be JSON-serialisable.

## Command line

```
acyclic --help
acyclic basic
acyclic timing --levels 7 --branches 9
```

`basic` (the default) builds a three-vertex graph and prints it. `timing`
builds a tree of the given depth and fan-out (branches between 1 and 9),
then prints how long adding vertices, collecting descendants, walking them,
reducing the graph transitively and deleting an edge took, and fails if any
count does not match the tree's shape.

## What it does not do

JSON is read from and written to strings only; reading and writing files, and
any other form of storage, is left to the caller.