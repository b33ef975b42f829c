import csv
import io
import random
import re

import pytest

from graphlayout.generators.csv_graph import generate_edge_list, generate_node_list, main

NODE_HEADER = "id,label,x,y,type,importance,description,created_date"
EDGE_HEADER = "id,source,target,type,weight,label"
NODE_TYPES = {"person", "project", "technology", "company", "event"}


def _node_rows(count, seed=3):
    buffer = io.StringIO()
    generate_node_list(buffer, count, random.Random(seed))
    return buffer.getvalue()


def _edge_rows(count, seed=3):
    buffer = io.StringIO()
    generate_edge_list(buffer, count, random.Random(seed))
    return buffer.getvalue()


def test_node_list_header_and_rows():
    text = _node_rows(20)
    lines = text.splitlines()
    assert lines[0] == NODE_HEADER
    rows = list(csv.DictReader(io.StringIO(text)))
    assert [row["id"] for row in rows] == [f"n{i}" for i in range(1, 21)]


def test_node_list_fields_are_well_formed():
    rows = list(csv.DictReader(io.StringIO(_node_rows(40))))
    for row in rows:
        assert row["type"] in NODE_TYPES
        assert 0.0 <= float(row["x"]) < 1000.0
        assert 0.0 <= float(row["y"]) < 1000.0
        assert row["importance"] == "1"
        assert re.fullmatch(r"20(1\d|2[0-5])-(0[1-9]|1[0-2])-(0[1-9]|1\d|2[0-8])", row["created_date"])
        assert row["description"].startswith("A")


def test_node_list_is_deterministic_for_a_seed():
    first = _node_rows(10, seed=9)
    second = _node_rows(10, seed=9)
    lines = first.splitlines()
    assert lines[0] == NODE_HEADER
    assert len(lines) == 11
    assert second.splitlines() == lines


def test_edge_list_rows_are_valid():
    text = _edge_rows(30)
    assert text.splitlines()[0] == EDGE_HEADER
    rows = list(csv.DictReader(io.StringIO(text)))
    assert [row["id"] for row in rows] == [f"e{i}" for i in range(1, 31)]
    for row in rows:
        assert row["source"] != row["target"]
        assert 1 <= int(row["source"][1:]) <= 20
        assert 1 <= int(row["target"][1:]) <= 20
        assert row["weight"] in {"0", "1"}
        assert row["label"]


def test_edge_list_empty_count_writes_only_header():
    assert _edge_rows(0) == EDGE_HEADER + "\n"


def test_edge_list_too_few_nodes_is_rejected():
    with pytest.raises(ValueError):
        _edge_rows(1)


def test_main_writes_nodes_file(tmp_path, capsys):
    output = tmp_path / "out" / "nodes.csv"
    assert main(["nodes", str(output), "5"]) == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == NODE_HEADER
    assert len(lines) == 6
    assert "node list" in capsys.readouterr().out


def test_main_bad_count_uses_default(tmp_path):
    output = tmp_path / "edges.csv"
    assert main(["edges", str(output), "-3"]) == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == EDGE_HEADER
    assert len(lines) == 51


def test_main_invalid_format(tmp_path):
    output = tmp_path / "x.csv"
    assert main(["triangles", str(output), "5"]) == 1
    assert output.read_text(encoding="utf-8") == ""