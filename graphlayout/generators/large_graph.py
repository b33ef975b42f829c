"""Generator of large random graphs for layout performance testing."""

from __future__ import annotations

import json
import math
import random
import re
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

DEFAULT_PATH = "docs/sample/large_graph.json"
DEFAULT_NODE_COUNT = 1000
DEFAULT_EDGE_DENSITY = 0.01

# Above this many nodes (and at low density) edges are sampled instead of scanned.
_SCAN_NODE_LIMIT = 10000
_SCAN_DENSITY_LIMIT = 0.1

_NODE_TYPES = ["data", "process", "entity", "concept", "resource"]
_EDGE_TYPES = ["connects", "relates", "depends", "references", "associates"]

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_count(text: Optional[str], default: int) -> int:
    if text is not None and _COUNT_PATTERN.fullmatch(text):
        return int(text)
    return default


def _parse_density(text: Optional[str], default: float) -> float:
    if text is None:
        return default
    try:
        return float(text)
    except ValueError:
        return default


def _format_duration(seconds: float) -> str:
    """Render a duration with a unit suited to its size and two decimals."""
    if seconds >= 1.0:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"


def _percent(done: int, total: int) -> float:
    return done / total * 100.0 if total else math.inf


def _edge(rng: random.Random, source: int, target: int) -> Dict[str, Any]:
    # Only the first four edge types are ever drawn.
    return {"source": f"n{source}", "target": f"n{target}", "type": _EDGE_TYPES[rng.randrange(4)]}


def _scan_edges(rng: random.Random, node_count: int, density: float, target_count: int) -> List[Dict[str, Any]]:
    """Visit node pairs in order, keeping each with probability ``density``."""
    edges: List[Dict[str, Any]] = []
    interval = max(1, target_count // 10)
    for i in range(1, node_count + 1):
        for j in range(i + 1, node_count + 1):
            if rng.random() >= density:
                continue
            edges.append(_edge(rng, i, j))
            count = len(edges)
            if count % interval == 0 or count == target_count:
                print(f"  - Generated {count} edges ({_percent(count, target_count):.1f}%)")
            if count >= target_count:
                return edges
    return edges


def _sample_edges(rng: random.Random, node_count: int, target_count: int) -> List[Dict[str, Any]]:
    """Draw distinct random node pairs until ``target_count`` are found."""
    pairs: Dict[Tuple[int, int], None] = {}
    interval = max(1, target_count // 10)
    while len(pairs) < target_count:
        source = rng.randint(1, node_count)
        target = rng.randint(1, node_count)
        while target == source:
            target = rng.randint(1, node_count)
        pair = (min(source, target), max(source, target))
        if pair in pairs:
            continue
        pairs[pair] = None
        count = len(pairs)
        if count % interval == 0 or count == target_count:
            print(f"  - Generated {count} edges ({_percent(count, target_count):.1f}%)")
    return [_edge(rng, source, target) for source, target in pairs]


def generate_large_graph(
    node_count: int,
    edge_density: float,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """Build a graph of minimal nodes with about ``edge_density`` of all possible edges.

    Edges always run from the lower-numbered to the higher-numbered node.
    """
    if not 0.0 <= edge_density <= 1.0:
        raise ValueError(f"edge density must lie between 0 and 1, got {edge_density!r}")
    rng = rng or random.Random()

    print(f"Generating {node_count} nodes...")
    node_start = time.perf_counter()
    nodes = []
    for i in range(1, node_count + 1):
        if i % 1000 == 0 or i == node_count:
            print(f"  - Generated {i} nodes ({i / node_count * 100.0:.1f}%)")
        nodes.append({"id": f"n{i}", "label": f"Node {i}", "type": _NODE_TYPES[rng.randrange(4)]})
    print(f"Node generation completed in {_format_duration(time.perf_counter() - node_start)}")

    max_possible_edges = node_count * (node_count - 1) // 2 if node_count else 0
    target_count = int(max_possible_edges * edge_density)
    print(f"Generating approximately {target_count} edges (density: {edge_density * 100.0:.2f}%)...")

    edge_start = time.perf_counter()
    if node_count <= _SCAN_NODE_LIMIT or edge_density > _SCAN_DENSITY_LIMIT:
        edges = _scan_edges(rng, node_count, edge_density, target_count)
    else:
        edges = _sample_edges(rng, node_count, target_count)
    print(f"Edge generation completed in {_format_duration(time.perf_counter() - edge_start)}")
    print(f"Generated {len(edges)} edges")

    return {"nodes": nodes, "edges": edges}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    output_path = args[0] if args else DEFAULT_PATH
    node_count = _parse_count(args[1] if len(args) > 1 else None, DEFAULT_NODE_COUNT)
    edge_density = _parse_density(args[2] if len(args) > 2 else None, DEFAULT_EDGE_DENSITY)

    print(
        f"Generating large graph with {node_count} nodes and "
        f"{edge_density * 100.0:.2f}% edge density to {output_path}"
    )

    start = time.perf_counter()
    graph = generate_large_graph(node_count, edge_density)
    print(f"Graph generation completed in {_format_duration(time.perf_counter() - start)}")

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    serialization_start = time.perf_counter()
    payload = json.dumps(graph, separators=(",", ":"), sort_keys=True).encode("utf-8")
    print(f"JSON serialization completed in {_format_duration(time.perf_counter() - serialization_start)}")

    write_start = time.perf_counter()
    Path(output_path).write_bytes(payload)
    print(f"File write completed in {_format_duration(time.perf_counter() - write_start)}")

    print("Graph statistics:")
    print(f"  - Nodes: {len(graph['nodes'])}")
    print(f"  - Edges: {len(graph['edges'])}")
    print(f"  - File size: {len(payload) // 1024} KB")
    print(f"  - Total time: {_format_duration(time.perf_counter() - start)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())