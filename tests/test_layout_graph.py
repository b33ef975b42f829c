import json
import random

import pytest

from graphlayout.generators.layout_graph import generate_layout_graph, layout_options, main


def _index(node_id):
    return int(node_id[1:])


def test_node_attributes_stay_in_range():
    graph = generate_layout_graph(40, "fcose", random.Random(1))
    assert [node["id"] for node in graph["nodes"]] == [f"n{i}" for i in range(1, 41)]
    for node in graph["nodes"]:
        assert 10.0 <= node["size"] < 50.0
        assert node["shape"] in {"ellipse", "rectangle", "triangle", "diamond", "hexagon"}
        assert 1 <= node["group"] <= 5
        assert "x" not in node and "y" not in node


def test_preset_nodes_have_positions():
    graph = generate_layout_graph(15, "preset", random.Random(2))
    for node in graph["nodes"]:
        assert 0.0 <= node["x"] < 1000.0
        assert 0.0 <= node["y"] < 1000.0
    assert graph["layout"]["name"] == "fcose"


@pytest.mark.parametrize("layout", ["dagre", "klay"])
def test_hierarchical_layouts_form_a_tree(layout):
    node_count = 13
    graph = generate_layout_graph(node_count, layout, random.Random(3))
    targets = [_index(edge["target"]) for edge in graph["edges"]]
    assert targets == list(range(2, node_count + 1))
    for edge in graph["edges"]:
        assert _index(edge["source"]) < _index(edge["target"])
        assert 1 <= edge["weight"] <= 9


def test_cise_intra_cluster_edges_stay_inside_clusters():
    node_count = 25
    per_cluster = node_count // 5
    graph = generate_layout_graph(node_count, "cise", random.Random(4))
    strong = [edge for edge in graph["edges"] if edge["weight"] >= 5]
    assert strong
    for edge in strong:
        source, target = _index(edge["source"]), _index(edge["target"])
        assert (source - 1) // per_cluster == (target - 1) // per_cluster
    weak = [edge for edge in graph["edges"] if edge["weight"] < 5]
    assert all(edge["weight"] in (1, 2) for edge in weak)


def test_cise_needs_enough_nodes():
    with pytest.raises(ValueError):
        generate_layout_graph(3, "cise", random.Random(0))


def test_concentric_hub_edges_start_at_hubs():
    node_count = 30
    hub_count = node_count // 10
    graph = generate_layout_graph(node_count, "concentric", random.Random(5))
    for edge in graph["edges"]:
        source, target = _index(edge["source"]), _index(edge["target"])
        assert source != target
        assert target > hub_count
    assert graph["layout"]["concentricBy"] == "degree"


def test_no_self_loops_in_default_layout():
    graph = generate_layout_graph(30, "cose-bilkent", random.Random(6))
    assert all(edge["source"] != edge["target"] for edge in graph["edges"])
    assert graph["layout"]["name"] == "cose-bilkent"


def test_layout_options_known_and_unknown():
    assert layout_options("klay")["nodePlacement"] == "BRANDES_KOEPF"
    assert layout_options("dagre")["ranker"] == "network-simplex"
    assert layout_options("cise")["clusters"] == []
    assert layout_options("whatever") == layout_options("fcose")
    assert layout_options("fcose")["nodeRepulsion"] == 4500


def test_same_seed_gives_same_graph():
    first = generate_layout_graph(20, "concentric", random.Random(7))
    second = generate_layout_graph(20, "concentric", random.Random(7))
    assert first == second


def test_main_writes_graph_with_layout(tmp_path, capsys):
    out = tmp_path / "nested" / "layout.json"
    assert main([str(out), "dagre", "12"]) == 0
    graph = json.loads(out.read_text(encoding="utf-8"))
    assert len(graph["nodes"]) == 12
    assert graph["layout"]["name"] == "dagre"
    assert "Graph generated successfully!" in capsys.readouterr().out