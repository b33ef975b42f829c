import random

import pytest

from graphlayout.generators.programming_graph import (
    EDGE_TYPES,
    FIXED_RELATIONS,
    LANGUAGES,
    PEOPLE,
    generate_programming_graph,
)


@pytest.fixture
def graph():
    return generate_programming_graph(150, random.Random(11))


def _prefix(node):
    return node["label"].split(":", 1)[0]


def test_node_ids_are_sequential(graph):
    assert [node["id"] for node in graph["nodes"]] == [f"n{i}" for i in range(1, 151)]


def test_first_language_label_starts_at_index_one(graph):
    languages = [node for node in graph["nodes"] if _prefix(node) == "Language"]
    assert languages[0]["label"] == "Language: JavaScript"
    for count, node in enumerate(languages, start=1):
        assert node["label"] == f"Language: {LANGUAGES[count % len(LANGUAGES)]}"


def test_person_labels_cycle(graph):
    people = [node for node in graph["nodes"] if _prefix(node) == "Person"]
    for count, node in enumerate(people, start=1):
        assert node["label"] == f"Person: {PEOPLE[count % len(PEOPLE)]}"
        assert 1 <= node["contributions"] < 10
        assert 0.0 <= node["influence"] <= 1.0


def test_extra_fields_in_range(graph):
    for node in graph["nodes"]:
        prefix = _prefix(node)
        if prefix == "Language":
            assert 1970 <= node["year"] < 2023
            assert node["paradigm"] in ("imperative", "object-oriented", "functional", "procedural")
            assert 0.0 <= node["popularity"] <= 10.0
        elif prefix == "Framework":
            assert node["domain"] in ("web", "mobile", "desktop", "backend")
        elif prefix == "Library":
            assert node["purpose"] in ("data", "ui", "networking", "utility")
        elif prefix == "Concept":
            assert 0.0 <= node["complexity"] <= 1.0
        elif prefix == "Tool":
            assert 2000 <= node["year"] < 2023
        elif prefix == "Platform":
            assert node["type"] in ("cloud", "os", "mobile")
            assert 0.0 <= node["market_share"] <= 10.0


def test_edges_count_and_no_self_loops(graph):
    assert len(graph["edges"]) == 225
    ids = {node["id"] for node in graph["nodes"]}
    for edge in graph["edges"]:
        assert edge["source"] in ids and edge["target"] in ids
        assert edge["source"] != edge["target"]
        assert edge["weight"] == 1.0


def test_edge_types_follow_relations(graph):
    types = {node["id"]: node["type"] for node in graph["nodes"]}
    for edge in graph["edges"]:
        pair = (types[edge["source"]], types[edge["target"]])
        if pair in FIXED_RELATIONS:
            assert edge["type"] == FIXED_RELATIONS[pair]
        else:
            assert edge["type"] in EDGE_TYPES


def test_same_seed_same_graph():
    first = generate_programming_graph(25, random.Random(5))
    assert first == generate_programming_graph(25, random.Random(5))


def test_empty_graph():
    assert generate_programming_graph(0, random.Random(2)) == {"nodes": [], "edges": []}


def test_single_node_cannot_have_edges():
    with pytest.raises(ValueError):
        generate_programming_graph(1, random.Random(2))