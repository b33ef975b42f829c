import json
import random

import pytest

from graphlayout.generators.json_graph import generate_tech_knowledge_graph, main

TYPES = {"concept", "person", "organization", "paper", "application"}
PREFIX = {
    "concept": "Concept: ",
    "person": "Person: ",
    "organization": "Organization: ",
    "paper": "Paper: ",
    "application": "Application: ",
}
EXTRA_FIELDS = {
    "concept": {"importance"},
    "person": {"importance"},
    "organization": {"importance", "founded"},
    "paper": {"importance", "year"},
    "application": {"importance", "users_millions"},
}


def _graph(n=60, seed=11):
    return generate_tech_knowledge_graph(n, random.Random(seed))


def test_nodes_have_sequential_ids_and_known_types():
    graph = _graph()
    nodes = graph["nodes"]
    assert [node["id"] for node in nodes] == [f"n{i}" for i in range(1, 61)]
    for node in nodes:
        assert node["type"] in TYPES
        assert node["label"].startswith(PREFIX[node["type"]])
        assert set(node) == {"id", "label", "x", "y", "type"} | EXTRA_FIELDS[node["type"]]
        assert 100.0 <= node["x"] < 1200.0
        assert 100.0 <= node["y"] < 900.0


def test_extra_field_ranges():
    for node in _graph(200, seed=5)["nodes"]:
        if node["type"] == "organization":
            assert 1900 <= node["founded"] < 2020
        if node["type"] == "paper":
            assert 1950 <= node["year"] < 2023
        if node["type"] == "application":
            assert 1 <= node["users_millions"] < 5000
        assert node["importance"] in (0.0, 1.0)


def test_first_concept_label_cycles_from_second_entry():
    graph = _graph(100, seed=2)
    concepts = [node for node in graph["nodes"] if node["type"] == "concept"]
    assert concepts
    assert concepts[0]["label"] == "Concept: Blockchain"


def test_edges_count_and_endpoints():
    graph = _graph(40)
    ids = {node["id"] for node in graph["nodes"]}
    edges = graph["edges"]
    assert len(edges) == 60
    for edge in edges:
        assert edge["source"] in ids and edge["target"] in ids
        assert edge["source"] != edge["target"]
        assert 0.0 <= edge["weight"] <= 1.0


def test_fixed_relations_follow_node_types():
    graph = _graph(300, seed=9)
    types = {node["id"]: node["type"] for node in graph["nodes"]}
    for edge in graph["edges"]:
        pair = (types[edge["source"]], types[edge["target"]])
        if pair == ("person", "organization"):
            assert edge["type"] == "affiliated_with"
        elif pair == ("paper", "paper"):
            assert edge["type"] == "cites"
        elif pair == ("concept", "concept"):
            assert edge["type"] in {"includes", "related"}


def test_same_seed_is_deterministic():
    first = _graph(30, seed=4)
    second = _graph(30, seed=4)
    assert len(first["nodes"]) == 30
    assert len(first["edges"]) == 45
    assert second["nodes"] == first["nodes"]
    assert second["edges"] == first["edges"]


def test_empty_graph():
    assert generate_tech_knowledge_graph(0, random.Random(1)) == {"nodes": [], "edges": []}


def test_single_node_cannot_avoid_self_loops():
    with pytest.raises(ValueError):
        generate_tech_knowledge_graph(1, random.Random(1))


def test_main_writes_json_file(tmp_path):
    path = tmp_path / "sub" / "graph.json"
    assert main([str(path), "20"]) == 0
    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["nodes"]) == 20
    assert len(data["edges"]) == 30


def test_main_bad_count_uses_default(tmp_path):
    path = tmp_path / "graph.json"
    assert main([str(path), "lots"]) == 0
    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["nodes"]) == 50