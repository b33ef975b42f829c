import json
import random

import pytest

from graphlayout.generators.large_graph import generate_large_graph, main


def _index(node_id):
    return int(node_id[1:])


def test_nodes_are_numbered_and_typed(capsys):
    graph = generate_large_graph(25, 0.2, random.Random(1))
    assert [node["id"] for node in graph["nodes"]] == [f"n{i}" for i in range(1, 26)]
    assert all(node["label"] == f"Node {_index(node['id'])}" for node in graph["nodes"])
    assert {node["type"] for node in graph["nodes"]} <= {"data", "process", "entity", "concept"}


def test_full_density_connects_every_pair(capsys):
    graph = generate_large_graph(5, 1.0, random.Random(2))
    pairs = {(edge["source"], edge["target"]) for edge in graph["edges"]}
    assert len(graph["edges"]) == 10
    assert len(pairs) == len(graph["edges"])


def test_zero_density_gives_no_edges(capsys):
    graph = generate_large_graph(30, 0.0, random.Random(3))
    assert graph["edges"] == []
    assert len(graph["nodes"]) == 30


def test_scanned_edges_are_ordered_and_capped(capsys):
    graph = generate_large_graph(10, 0.5, random.Random(4))
    assert len(graph["edges"]) <= 22
    for edge in graph["edges"]:
        assert _index(edge["source"]) < _index(edge["target"])
        assert edge["type"] in {"connects", "relates", "depends", "references"}


def test_sampled_edges_are_distinct_and_ordered(capsys):
    node_count = 10001
    graph = generate_large_graph(node_count, 0.00005, random.Random(5))
    pairs = [(_index(e["source"]), _index(e["target"])) for e in graph["edges"]]
    assert pairs
    assert len(set(pairs)) == len(pairs)
    assert all(1 <= s < t <= node_count for s, t in pairs)


def test_same_seed_gives_same_graph(capsys):
    first = generate_large_graph(40, 0.3, random.Random(9))
    second = generate_large_graph(40, 0.3, random.Random(9))
    assert first == second


@pytest.mark.parametrize("density", [-0.1, 1.5])
def test_density_outside_unit_interval_is_rejected(density, capsys):
    with pytest.raises(ValueError):
        generate_large_graph(10, density, random.Random(0))


def test_main_writes_compact_json(tmp_path, capsys):
    out = tmp_path / "sub" / "large.json"
    assert main([str(out), "20", "0.5"]) == 0
    text = out.read_text(encoding="utf-8")
    graph = json.loads(text)
    assert len(graph["nodes"]) == 20
    assert "\n" not in text
    assert "Nodes: 20" in capsys.readouterr().out