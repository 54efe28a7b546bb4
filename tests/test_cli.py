import io

import pytest

from acyclic.cli import build_large, expected_vertex_count, main, run_basic, run_timing
from acyclic.dag import DAG


def _rooted():
    dag = DAG()
    dag.add_vertex_by_id("1", 1)
    return dag


@pytest.mark.parametrize("levels,branches", [(2, 3), (3, 2), (4, 4), (7, 1)])
def test_build_large_matches_expected_count(levels, branches):
    dag = _rooted()
    vertices, edges = build_large(dag, levels, branches, 1)
    assert vertices + 1 == expected_vertex_count(levels, branches)
    assert edges == vertices
    assert dag.order() == expected_vertex_count(levels, branches)
    assert dag.size() == edges


def test_build_large_root_children_and_descendants():
    dag = _rooted()
    build_large(dag, 4, 3, 1)
    assert len(dag.get_children("1")) == 3
    assert len(dag.get_descendants("1")) == dag.order() - 1
    assert dag.get_vertex("12") == 12


def test_build_large_single_level_adds_nothing():
    dag = _rooted()
    assert build_large(dag, 1, 10, 1) == (0, 0)
    assert dag.order() == 1


@pytest.mark.parametrize("branches", [0, 10])
def test_build_large_rejects_bad_branches(branches):
    with pytest.raises(ValueError):
        build_large(_rooted(), 3, branches, 1)


def test_expected_vertex_count_single_level():
    assert expected_vertex_count(1, 5) == 1


def test_run_basic_output():
    out = io.StringIO()
    dag = run_basic(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "DAG Vertices: 3 - Edges: 2"
    assert sorted(lines) == sorted(
        [
            "DAG Vertices: 3 - Edges: 2",
            "Vertices:",
            "  1",
            "  2",
            "  3",
            "Edges:",
            "  1 -> 2",
            "  1 -> 3",
        ]
    )
    assert dag.size() == 2


def test_run_timing_reports_every_step():
    out = io.StringIO()
    dag = run_timing(out, 3, 2)
    lines = out.getvalue().splitlines()
    assert len(lines) == 8
    count = expected_vertex_count(3, 2)
    assert lines[0].endswith(f"to add {count} vertices and {count - 1} edges")
    assert lines[-1].endswith("to delete an edge from the root")
    assert all(line.split("s ", 1)[0].replace(".", "").isdigit() for line in lines)
    assert dag.order() == count
    assert dag.size() == count - 2


def test_main_basic(capsys):
    assert main(["basic"]) == 0
    assert capsys.readouterr().out.startswith("DAG Vertices: 3 - Edges: 2\n")


def test_main_defaults_to_basic(capsys):
    assert main([]) == 0
    assert "Vertices:" in capsys.readouterr().out


def test_main_timing(capsys):
    assert main(["timing", "--levels", "2", "--branches", "3"]) == 0
    output = capsys.readouterr().out
    assert "to get descendants ordered" in output
    assert len(output.splitlines()) == 8


@pytest.mark.parametrize(
    "argv",
    [["timing", "--branches", "10"], ["timing", "--levels", "0"], ["unknown"]],
)
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2