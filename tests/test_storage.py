import json

import pytest

from acyclic.storage import StorableDAG, StorableEdge, StorableVertex

WALK_DAG_JSON = (
    '{"vs":[{"i":"1","v":"v1"},{"i":"2","v":"v2"},{"i":"3","v":"v3"},'
    '{"i":"4","v":"v4"},{"i":"5","v":"v5"}],'
    '"es":[{"s":"1","d":"2"},{"s":"2","d":"3"},{"s":"2","d":"4"},{"s":"4","d":"5"}]}'
)


def _compact(obj):
    return json.dumps(obj, separators=(",", ":"))


def test_vertex_to_dict_uses_short_keys():
    assert StorableVertex("1", "v1").to_dict() == {"i": "1", "v": "v1"}


def test_vertex_round_trip():
    vertex = StorableVertex("x", {"nested": [1, 2]})
    assert StorableVertex.from_dict(vertex.to_dict()) == vertex


def test_vertex_id_field():
    assert StorableVertex.from_dict({"i": "7", "v": "v7"}).id == "7"


def test_vertex_missing_fields_default_to_empty():
    vertex = StorableVertex.from_dict({})
    assert vertex.id == ""
    assert vertex.value is None


def test_vertex_wrong_id_type():
    with pytest.raises(TypeError):
        StorableVertex.from_dict({"i": 1, "v": "v"})


def test_edge_to_dict_uses_short_keys():
    assert StorableEdge("1", "2").to_dict() == {"s": "1", "d": "2"}


def test_edge_round_trip():
    edge = StorableEdge("a", "b")
    assert StorableEdge.from_dict(edge.to_dict()) == edge


def test_edge_rejects_non_mapping():
    with pytest.raises(TypeError):
        StorableEdge.from_dict(["1", "2"])


def test_dag_serialises_to_source_format():
    dag = StorableDAG(
        vertices=[StorableVertex(str(i), f"v{i}") for i in range(1, 6)],
        edges=[
            StorableEdge("1", "2"),
            StorableEdge("2", "3"),
            StorableEdge("2", "4"),
            StorableEdge("4", "5"),
        ],
    )
    assert _compact(dag.to_dict()) == WALK_DAG_JSON


def test_dag_parses_source_format():
    dag = StorableDAG.from_dict(json.loads(WALK_DAG_JSON))
    assert [v.id for v in dag.vertices] == ["1", "2", "3", "4", "5"]
    assert [v.value for v in dag.vertices] == ["v1", "v2", "v3", "v4", "v5"]
    assert dag.edges[-1] == StorableEdge("4", "5")
    assert len(dag.edges) == 4


def test_dag_round_trip():
    dag = StorableDAG.from_dict(json.loads(WALK_DAG_JSON))
    assert _compact(StorableDAG.from_dict(dag.to_dict()).to_dict()) == WALK_DAG_JSON


def test_dag_null_lists_are_empty():
    dag = StorableDAG.from_dict({"vs": None, "es": None})
    assert dag.vertices == []
    assert dag.edges == []


def test_dag_rejects_bad_list():
    with pytest.raises(TypeError):
        StorableDAG.from_dict({"vs": "nope", "es": []})


def test_non_comparable_vertex_value_round_trip():
    data = {"vs": [{"i": "1", "v": {"i": "1", "v": {"not": "comparable"}}}], "es": []}
    dag = StorableDAG.from_dict(data)
    assert dag.vertices[0].value == {"i": "1", "v": {"not": "comparable"}}
    assert dag.to_dict() == data