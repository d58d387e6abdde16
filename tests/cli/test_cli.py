import json
from pathlib import Path

import pytest

from wgraph import cli
from wgraph.graph.io import read_graph

DIAMOND = """\
0 4 5
0 0
1 0
2 0
3 0

0 1 4 1
0 2 1 1
2 1 2 1
1 3 5 1
2 3 8 1
"""

ISLANDS = """\
0 4 2
0 0
1 0
2 0
3 0
0 1 2 1
2 3 5 1
"""

NEGATIVE = """\
0 2 1
0 0
1 0
0 1 -1 0
"""


def _write(tmp_path: Path, name: str, text: str) -> str:
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def _json_prefix(output: str) -> dict:
    """Return the JSON document that precedes the trailing summary line."""
    return json.loads(output[output.index("{") : output.rindex("}") + 1])


def _run_failing(argv, capsys) -> str:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    assert exc_info.value.code == 1
    return capsys.readouterr().out


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: wgraph" in capsys.readouterr().out


def test_generate_to_file(tmp_path: Path) -> None:
    out = tmp_path / "random.graph"
    cli.main(
        [
            "--quiet",
            "generate",
            "--seed",
            "3",
            "--nodes",
            "5",
            "--edges",
            "6",
            "--output",
            str(out),
        ]
    )
    graph = read_graph(out)
    assert graph.num_nodes == 5
    assert graph.num_edges == 6


def test_generate_is_reproducible(capsys) -> None:
    cli.main(["--quiet", "generate", "--seed", "11", "--json"])
    first = json.loads(capsys.readouterr().out)
    cli.main(["--quiet", "generate", "--seed", "11", "--json"])
    second = json.loads(capsys.readouterr().out)
    assert first == second
    assert len(first["nodes"]) == 10
    assert len(first["links"]) == 15


def test_generate_with_config_file(tmp_path: Path, capsys) -> None:
    config = _write(
        tmp_path, "builder.yaml", "builder:\n  num_nodes: 3\n  num_edges: 2\n"
    )
    cli.main(["--quiet", "generate", "--config", config, "--seed", "1", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert len(data["nodes"]) == 3
    assert len(data["links"]) == 2


def test_generate_infeasible_counts(capsys) -> None:
    out = _run_failing(["generate", "--nodes", "5", "--edges", "2"], capsys)
    assert "❌ ERROR: ValueError" in out


def test_show(tmp_path: Path, capsys) -> None:
    cli.main(["show", _write(tmp_path, "d.graph", DIAMOND)])
    out = capsys.readouterr().out
    assert "Nodes: 4" in out
    assert "Edges: 5" in out
    assert "Has directed-only edges: False" in out
    assert "Connected: True" in out
    assert "Total edge cost: 20" in out
    assert "Graph loading took" in out


@pytest.mark.parametrize("algorithm", ["kruskal", "prim"])
def test_mst(tmp_path: Path, capsys, algorithm: str) -> None:
    path = _write(tmp_path, "d.graph", DIAMOND)
    cli.main(["--quiet", "mst", path, "--algorithm", algorithm])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[-1] == "Total cost: 8"


def test_mst_json(tmp_path: Path, capsys) -> None:
    cli.main(["--quiet", "mst", _write(tmp_path, "d.graph", DIAMOND), "--json"])
    data = _json_prefix(capsys.readouterr().out)
    assert sorted(link["cost"] for link in data["links"]) == [1, 2, 5]


def test_mst_disconnected(tmp_path: Path, capsys) -> None:
    out = _run_failing(["mst", _write(tmp_path, "i.graph", ISLANDS)], capsys)
    assert "Graph not connected or not undirected" in out


def test_shortest_path(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "d.graph", DIAMOND)
    cli.main(["--quiet", "sp", path, "0", "3"])
    out = capsys.readouterr().out
    assert "0 <-> 2 cost: 1" in out
    assert "Total cost: 8" in out


def test_shortest_path_json(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "d.graph", DIAMOND)
    cli.main(["--quiet", "sp", path, "0", "3", "--json"])
    data = _json_prefix(capsys.readouterr().out)
    assert [n["id"] for n in data["nodes"]] == [0, 2, 1, 3]


def test_shortest_path_unreachable(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "i.graph", ISLANDS)
    out = _run_failing(["sp", path, "0", "3"], capsys)
    assert "Node 3 is unreachable from 0" in out


def test_shortest_path_unknown_node(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "d.graph", DIAMOND)
    out = _run_failing(["sp", path, "0", "9"], capsys)
    assert "❌ ERROR: NodeNotFoundError" in out


def test_apsp(tmp_path: Path, capsys) -> None:
    cli.main(["--quiet", "apsp", _write(tmp_path, "i.graph", ISLANDS)])
    rows = [
        [cell.strip() for cell in line.split("|")]
        for line in capsys.readouterr().out.splitlines()
        if "|" in line
    ]
    assert rows[0] == ["from", "to", "cost"]
    assert ["0", "1", "2"] in rows
    assert ["2", "3", "5"] in rows
    assert ["0", "3", "-"] in rows
    assert len(rows) == 1 + 4 * 3


def test_apsp_negative(tmp_path: Path, capsys) -> None:
    out = _run_failing(["apsp", _write(tmp_path, "n.graph", NEGATIVE)], capsys)
    assert "Negative path cost found" in out


def test_missing_file(tmp_path: Path, capsys) -> None:
    out = _run_failing(["show", str(tmp_path / "nope.graph")], capsys)
    assert "❌ ERROR: File not found:" in out


def test_malformed_file(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "bad.graph", "1 x 0\n")
    out = _run_failing(["show", path], capsys)
    assert "❌ ERROR: GraphFormatError: line 1:" in out


def test_verbose_enables_debug(tmp_path: Path, capsys) -> None:
    cli.main(["-v", "show", _write(tmp_path, "d.graph", DIAMOND)])
    assert "Debug logging enabled" in capsys.readouterr().out
