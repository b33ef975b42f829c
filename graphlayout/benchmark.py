"""Benchmarking of the force-directed layout on sample graph files."""

from __future__ import annotations

import json
import math
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .fcose import FcoseOptions, apply_layout
from .types import Graph, graph_from_file_data

DEFAULT_SAMPLE_DIR = "docs/sample"

_CSV_HEADER = (
    "timestamp,graph_name,layout_name,node_count,edge_count,"
    "execution_time_ms,average_edge_length,node_distribution_score\n"
)


@dataclass
class BenchmarkResult:
    """Timing and quality metrics of one layout run."""

    graph_name: str
    node_count: int
    edge_count: int
    layout_name: str
    execution_time_ms: float
    average_edge_length: float
    node_distribution_score: float
    timestamp: str = ""

    @staticmethod
    def csv_header() -> str:
        return _CSV_HEADER

    def to_csv_row(self) -> str:
        return (
            f"{self.timestamp},{self.graph_name},{self.layout_name},"
            f"{self.node_count},{self.edge_count},"
            f"{self.execution_time_ms:.2f},{self.average_edge_length:.2f},"
            f"{self.node_distribution_score:.2f}\n"
        )


def calculate_metrics(graph: Graph) -> Tuple[float, float]:
    """Return (average edge length, spread of nodes around their centre).

    The spread is NaN for a graph without nodes.
    """
    lengths = []
    for edge in graph.edges.values():
        source = graph.nodes.get(edge.source)
        target = graph.nodes.get(edge.target)
        if source is None or target is None:
            continue
        if source.position is None or target.position is None:
            continue
        (sx, sy), (tx, ty) = source.position, target.position
        lengths.append(math.hypot(tx - sx, ty - sy))
    average_edge_length = sum(lengths) / len(lengths) if lengths else 0.0

    node_count = len(graph.nodes)
    if node_count == 0:
        return average_edge_length, math.nan

    positions = [node.position for node in graph.nodes.values() if node.position is not None]
    center_x = sum(x for x, _ in positions) / node_count
    center_y = sum(y for _, y in positions) / node_count
    total_variance = sum((x - center_x) ** 2 + (y - center_y) ** 2 for x, y in positions)
    return average_edge_length, math.sqrt(total_variance / node_count)


def run_benchmark(graph_path: str) -> BenchmarkResult:
    """Lay out the graph stored at ``graph_path`` and measure the result."""
    text = Path(graph_path).read_text(encoding="utf-8")
    try:
        graph = graph_from_file_data(json.loads(text))
    except ValueError as exc:
        raise ValueError(f"Failed to parse graph JSON: {exc}") from exc

    graph_name = Path(graph_path).name or "unknown"

    start = time.perf_counter()
    apply_layout(graph, FcoseOptions())
    elapsed = time.perf_counter() - start

    average_edge_length, distribution = calculate_metrics(graph)
    return BenchmarkResult(
        graph_name=graph_name,
        node_count=len(graph.nodes),
        edge_count=len(graph.edges),
        layout_name="fcose",
        execution_time_ms=elapsed * 1000.0,
        average_edge_length=average_edge_length,
        node_distribution_score=distribution,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


def run_all_benchmarks(output_path: str, sample_dir: str = DEFAULT_SAMPLE_DIR) -> List[BenchmarkResult]:
    """Benchmark every ``.json`` file in ``sample_dir`` and write a CSV report."""
    results = []
    for path in sorted(Path(sample_dir).iterdir()):
        if path.suffix != ".json":
            continue
        try:
            results.append(run_benchmark(str(path)))
        except (OSError, ValueError) as exc:
            print(f"Failed to benchmark {path}: {exc}", file=sys.stderr)

    with open(output_path, "w", encoding="utf-8", newline="") as out:
        out.write(BenchmarkResult.csv_header())
        for result in results:
            out.write(result.to_csv_row())
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: graphlayout benchmark <output_csv_path>", file=sys.stderr)
        return 1

    command, output_path = args[0], args[1]
    if command != "benchmark":
        print(f"Unknown command: {command}", file=sys.stderr)
        return 1

    try:
        run_all_benchmarks(output_path)
    except (OSError, ValueError) as exc:
        print(f"Error running benchmarks: {exc}", file=sys.stderr)
        return 1
    print("Benchmarks completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())