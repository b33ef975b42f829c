import json
import math

import pytest

from graphlayout.benchmark import (
    BenchmarkResult,
    calculate_metrics,
    main,
    run_all_benchmarks,
    run_benchmark,
)
from graphlayout.types import Edge, Graph, Node


def _two_node_graph():
    graph = Graph()
    node1 = Node("1")
    node1.position = (0.0, 0.0)
    node2 = Node("2")
    node2.position = (100.0, 0.0)
    graph.nodes["1"] = node1
    graph.nodes["2"] = node2
    graph.edges["1-2"] = Edge("1-2", "1", "2")
    return graph


def _write_graph_file(path, node_count=4):
    data = {
        "nodes": [{"id": f"n{i}", "x": 10.0 * i, "y": 5.0 * i} for i in range(1, node_count + 1)],
        "edges": [{"source": f"n{i}", "target": f"n{i + 1}"} for i in range(1, node_count)],
    }
    path.write_text(json.dumps(data), encoding="utf-8")


def test_metrics_calculation():
    avg_edge_length, distribution_score = calculate_metrics(_two_node_graph())
    assert abs(avg_edge_length - 100.0) < 0.001
    assert abs(distribution_score - 50.0) < 0.001


def test_metrics_without_edges_has_zero_edge_length():
    graph = _two_node_graph()
    graph.edges.clear()
    avg_edge_length, _ = calculate_metrics(graph)
    assert avg_edge_length == 0.0


def test_metrics_of_empty_graph_spread_is_nan():
    avg_edge_length, distribution = calculate_metrics(Graph())
    assert avg_edge_length == 0.0
    assert math.isnan(distribution)


def test_csv_header_matches_columns():
    header = BenchmarkResult.csv_header()
    assert header == (
        "timestamp,graph_name,layout_name,node_count,edge_count,"
        "execution_time_ms,average_edge_length,node_distribution_score\n"
    )


def test_csv_row_formats_two_decimals():
    result = BenchmarkResult("g.json", 3, 2, "fcose", 1.5, 100.0, 50.0, "ts")
    row = result.to_csv_row()
    assert row == "ts,g.json,fcose,3,2,1.50,100.00,50.00\n"
    assert len(row.strip().split(",")) == len(BenchmarkResult.csv_header().strip().split(","))


def test_run_benchmark_reads_graph(tmp_path):
    path = tmp_path / "chain.json"
    _write_graph_file(path, node_count=4)
    result = run_benchmark(str(path))
    assert result.graph_name == "chain.json"
    assert result.node_count == 4
    assert result.edge_count == 3
    assert result.layout_name == "fcose"
    assert result.execution_time_ms >= 0.0
    assert result.average_edge_length > 0.0


def test_run_benchmark_rejects_bad_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        run_benchmark(str(path))


def test_run_benchmark_missing_file(tmp_path):
    with pytest.raises(OSError):
        run_benchmark(str(tmp_path / "missing.json"))


def test_run_all_benchmarks_writes_rows(tmp_path):
    sample = tmp_path / "sample"
    sample.mkdir()
    _write_graph_file(sample / "a.json", 3)
    _write_graph_file(sample / "b.json", 5)
    (sample / "broken.json").write_text("[]", encoding="utf-8")
    (sample / "notes.txt").write_text("ignored", encoding="utf-8")
    output = tmp_path / "out.csv"

    results = run_all_benchmarks(str(output), str(sample))

    assert sorted(r.graph_name for r in results) == ["a.json", "b.json"]
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] + "\n" == BenchmarkResult.csv_header()
    assert len(lines) == 3


def test_run_all_benchmarks_missing_dir(tmp_path):
    with pytest.raises(OSError):
        run_all_benchmarks(str(tmp_path / "out.csv"), str(tmp_path / "nowhere"))


def test_main_requires_arguments():
    assert main([]) == 1
    assert main(["benchmark"]) == 1


def test_main_unknown_command(tmp_path):
    assert main(["frobnicate", str(tmp_path / "x.csv")]) == 1