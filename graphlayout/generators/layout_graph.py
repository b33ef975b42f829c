"""Generator of graphs shaped for particular layout algorithms."""

from __future__ import annotations

import json
import random
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

DEFAULT_PATH = "docs/sample/layout_graph.json"
DEFAULT_LAYOUT = "fcose"
DEFAULT_NODE_COUNT = 50

_SHAPES = ["ellipse", "rectangle", "triangle", "diamond", "hexagon"]

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_count(text: Optional[str], default: int) -> int:
    if text is not None and _COUNT_PATTERN.fullmatch(text):
        return int(text)
    return default


def _fcose_options() -> Dict[str, Any]:
    return {
        "name": "fcose",
        "quality": "default",
        "nodeRepulsion": 4500,
        "idealEdgeLength": 50,
        "nodeOverlap": 10,
    }


def layout_options(layout_type: str) -> Dict[str, Any]:
    """Options for the named layout; unknown names get the fcose options."""
    if layout_type == "cose-bilkent":
        return {"name": "cose-bilkent", "nodeRepulsion": 4500, "nodeOverlap": 10, "idealEdgeLength": 50}
    if layout_type == "cise":
        return {"name": "cise", "clusters": [], "circleSpacing": 20, "nodeSpacing": 10}
    if layout_type == "concentric":
        return {"name": "concentric", "minNodeSpacing": 10, "concentricBy": "degree", "levelWidth": 100}
    if layout_type == "klay":
        return {
            "name": "klay",
            "layerSpacing": 50,
            "nodeSpacing": 20,
            "nodePlacement": "BRANDES_KOEPF",
            "crossMinimization": "LAYER_SWEEP",
            "cycleBreaking": "GREEDY",
            "edgeRouting": "ORTHOGONAL",
            "mergeEdges": False,
        }
    if layout_type == "dagre":
        return {
            "name": "dagre",
            "nodeSeparation": 50,
            "rankSeparation": 50,
            "rankDirection": "TB",
            "align": "UL",
            "acyclic": True,
            "ranker": "network-simplex",
        }
    return _fcose_options()


def _edge(source: int, target: int, weight: int) -> Dict[str, Any]:
    return {"source": f"n{source}", "target": f"n{target}", "weight": weight}


def _dense_blocks(
    rng: random.Random, blocks: int, per_block: int, probability: float, low: int, high: int
) -> List[Dict[str, Any]]:
    """Randomly connect node pairs inside each consecutive block of nodes."""
    edges = []
    for block in range(blocks):
        start = block * per_block + 1
        end = (block + 1) * per_block
        for i in range(start, end + 1):
            for j in range(i + 1, end + 1):
                if rng.random() < probability:
                    edges.append(_edge(i, j, rng.randrange(low, high)))
    return edges


def _tree_edges(rng: random.Random, node_count: int) -> List[Dict[str, Any]]:
    edges = []
    for i in range(1, node_count):
        parent = i // 3 + 1
        if parent != i + 1:
            edges.append(_edge(parent, i + 1, rng.randrange(1, 10)))
    return edges


def _cluster_edges(rng: random.Random, node_count: int) -> List[Dict[str, Any]]:
    clusters = 5
    per_cluster = node_count // clusters
    if per_cluster == 0:
        raise ValueError(f"the cise layout needs at least {clusters} nodes, got {node_count}")
    edges = _dense_blocks(rng, clusters, per_cluster, 0.7, 5, 10)
    for _ in range(clusters * 2):
        first = rng.randrange(clusters)
        second = rng.randrange(clusters)
        if first != second:
            node1 = first * per_cluster + rng.randint(1, per_cluster)
            node2 = second * per_cluster + rng.randint(1, per_cluster)
            edges.append(_edge(node1, node2, rng.randrange(1, 3)))
    return edges


def _hub_edges(rng: random.Random, node_count: int) -> List[Dict[str, Any]]:
    hub_count = node_count // 10
    edges = []
    for hub in range(1, hub_count + 1):
        for j in range(hub_count + 1, node_count + 1):
            if rng.random() < 0.3:
                edges.append(_edge(hub, j, rng.randrange(1, 10)))
    for _ in range(node_count // 5):
        node1 = rng.randint(hub_count + 1, node_count)
        node2 = rng.randint(hub_count + 1, node_count)
        if node1 != node2:
            edges.append(_edge(node1, node2, rng.randrange(1, 5)))
    return edges


def _community_edges(rng: random.Random, node_count: int) -> List[Dict[str, Any]]:
    communities = 3
    edges = _dense_blocks(rng, communities, node_count // communities, 0.3, 1, 10)
    for _ in range(node_count // 2):
        node1 = rng.randint(1, node_count)
        node2 = rng.randint(1, node_count)
        if node1 != node2:
            edges.append(_edge(node1, node2, rng.randrange(1, 5)))
    return edges


def generate_layout_graph(
    node_count: int,
    layout_type: str = DEFAULT_LAYOUT,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """Build nodes, edges structured for ``layout_type`` and its layout options.

    Hierarchical layouts get a tree, ``cise`` clusters, ``concentric`` hubs and
    everything else loose communities. Only ``preset`` nodes carry positions.
    """
    rng = rng or random.Random()

    nodes = []
    for i in range(1, node_count + 1):
        size = float(rng.randrange(10, 50))
        shape = _SHAPES[rng.randrange(5)]
        position = None
        if layout_type == "preset":
            position = (rng.random() * 1000.0, rng.random() * 1000.0)
        node: Dict[str, Any] = {
            "id": f"n{i}",
            "label": f"Node {i}",
            "size": size,
            "shape": shape,
            "group": rng.randrange(1, 6),
        }
        if position is not None:
            node["x"], node["y"] = position
        nodes.append(node)

    if layout_type in ("dagre", "klay"):
        edges = _tree_edges(rng, node_count)
    elif layout_type == "cise":
        edges = _cluster_edges(rng, node_count)
    elif layout_type == "concentric":
        edges = _hub_edges(rng, node_count)
    else:
        edges = _community_edges(rng, node_count)

    return {"nodes": nodes, "edges": edges, "layout": layout_options(layout_type)}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    output_path = args[0] if args else DEFAULT_PATH
    layout_type = args[1] if len(args) > 1 else DEFAULT_LAYOUT
    node_count = _parse_count(args[2] if len(args) > 2 else None, DEFAULT_NODE_COUNT)

    print(f"Generating graph with {node_count} nodes and {layout_type} layout to {output_path}")
    graph = generate_layout_graph(node_count, layout_type)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(json.dumps(graph, indent=2, sort_keys=True), encoding="utf-8")

    print("Graph generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())