import json

import pytest

from acyclic.dag import DAG
from acyclic.errors import IDDuplicateError, IDUnknownError
from acyclic.marshal import from_json, to_json, to_storable
from acyclic.options import Options
from acyclic.storage import StorableEdge, StorableVertex


def _make(edges):
    dag = DAG()
    for vid in ("1", "2", "3", "4", "5"):
        dag.add_vertex_by_id(vid, "v" + vid)
    for src, dst in edges:
        dag.add_edge(src, dst)
    return dag


def _edges(dag):
    return {(src, dst) for src in dag.get_vertices() for dst in dag.get_children(src)}


CASES = [
    (
        [("1", "2"), ("2", "3"), ("2", "4"), ("4", "5")],
        '{"vs":[{"i":"1","v":"v1"},{"i":"2","v":"v2"},{"i":"3","v":"v3"},{"i":"4","v":"v4"},{"i":"5","v":"v5"}],"es":[{"s":"1","d":"2"},{"s":"2","d":"3"},{"s":"2","d":"4"},{"s":"4","d":"5"}]}',
    ),
    (
        [("1", "3"), ("2", "3"), ("3", "5"), ("4", "5")],
        '{"vs":[{"i":"1","v":"v1"},{"i":"3","v":"v3"},{"i":"5","v":"v5"},{"i":"2","v":"v2"},{"i":"4","v":"v4"}],"es":[{"s":"1","d":"3"},{"s":"3","d":"5"},{"s":"2","d":"3"},{"s":"4","d":"5"}]}',
    ),
    (
        [("1", "3"), ("2", "3"), ("4", "5")],
        '{"vs":[{"i":"1","v":"v1"},{"i":"3","v":"v3"},{"i":"2","v":"v2"},{"i":"4","v":"v4"},{"i":"5","v":"v5"}],"es":[{"s":"1","d":"3"},{"s":"2","d":"3"},{"s":"4","d":"5"}]}',
    ),
    (
        [("1", "2"), ("2", "3"), ("3", "5"), ("2", "4")],
        '{"vs":[{"i":"1","v":"v1"},{"i":"2","v":"v2"},{"i":"3","v":"v3"},{"i":"5","v":"v5"},{"i":"4","v":"v4"}],"es":[{"s":"1","d":"2"},{"s":"2","d":"3"},{"s":"2","d":"4"},{"s":"3","d":"5"}]}',
    ),
]


@pytest.mark.parametrize("edges,expected", CASES)
def test_to_json(edges, expected):
    assert to_json(_make(edges)) == expected


@pytest.mark.parametrize("edges,expected", CASES)
def test_round_trip(edges, expected):
    original = _make(edges)
    restored = from_json(to_json(original))
    assert restored.get_vertices() == original.get_vertices()
    assert _edges(restored) == _edges(original)
    assert restored.size() == original.size()


def test_from_json_accepts_bytes():
    data = to_json(_make([("1", "2")])).encode("utf-8")
    restored = from_json(data)
    assert restored.is_edge("1", "2") is True
    assert restored.order() == 5


def test_to_storable_collects_vertices_and_edges():
    storable = to_storable(_make([("1", "2"), ("2", "3")]))
    assert storable.vertices[0] == StorableVertex("1", "v1")
    assert storable.edges == [StorableEdge("1", "2"), StorableEdge("2", "3")]


def test_value_decoder_is_applied():
    restored = from_json(to_json(_make([("1", "2")])), None, str.upper)
    assert restored.get_vertex("1") == "V1"
    assert restored.get_vertex("5") == "V5"


def test_non_hashable_vertices_with_hash_option():
    options = Options(vertex_hash=lambda v: v["i"])
    dag = DAG(options)
    dag.add_vertex_by_id("a", {"i": "1", "v": {"not": "comparable"}})
    dag.add_vertex_by_id("b", {"i": "2", "v": {"stillNot": "comparable"}})
    dag.add_vertex_by_id("c", {"i": "3", "v": {"stillNot": "comparable"}})
    dag.add_edge("a", "b")
    dag.add_edge("b", "c")

    restored = from_json(to_json(dag), options)
    assert restored.get_vertices() == dag.get_vertices()
    assert _edges(restored) == {("a", "b"), ("b", "c")}


def test_malformed_json_raises():
    with pytest.raises(json.JSONDecodeError):
        from_json("{not json")


def test_edge_to_unknown_vertex_raises():
    data = '{"vs":[{"i":"1","v":"v1"}],"es":[{"s":"1","d":"2"}]}'
    with pytest.raises(IDUnknownError):
        from_json(data)


def test_duplicate_vertex_id_raises():
    data = '{"vs":[{"i":"1","v":"v1"},{"i":"1","v":"v2"}],"es":[]}'
    with pytest.raises(IDDuplicateError):
        from_json(data)


def test_empty_graph_round_trip():
    restored = from_json(to_json(DAG()))
    assert restored.order() == 0
    assert restored.size() == 0