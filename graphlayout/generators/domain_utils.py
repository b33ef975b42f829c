"""Helpers shared by the domain graph generators."""

from __future__ import annotations

import math
import random
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def determine_node_type(rng: random.Random, node_types: Sequence[Tuple[str, float]]) -> str:
    """Pick a type by cumulative proportion; falls back to the first type."""
    r = rng.random()
    cumulative = 0.0
    for node_type, proportion in node_types:
        cumulative += proportion
        if r <= cumulative:
            return node_type
    return node_types[0][0]


def generate_edges(
    nodes: Sequence[Any],
    node_count: int,
    edge_types: Sequence[str],
    edge_type_mapper: Callable[[str, str], str],
    rng: random.Random,
) -> List[Dict[str, Any]]:
    """Create about 1.5 random edges per node, without self-loops.

    The edge type is chosen by ``edge_type_mapper(source_type, target_type)``.
    """
    edge_count = int(_round_half_away(node_count * 1.5))
    if edge_count and node_count < 2:
        raise ValueError("at least two nodes are needed to create edges without self-loops")

    edges = []
    for _ in range(edge_count):
        source_idx = rng.randrange(node_count)
        target_idx = rng.randrange(node_count)
        while target_idx == source_idx:
            target_idx = rng.randrange(node_count)

        source, target = nodes[source_idx], nodes[target_idx]
        if not isinstance(source, Mapping) or not isinstance(target, Mapping):
            continue

        edge_type = edge_type_mapper(source["type"], target["type"])
        weight = _round_half_away(rng.random() * 0.5 + 0.5) * 100.0 / 100.0
        edges.append(
            {
                "source": source["id"],
                "target": target["id"],
                "type": edge_type,
                "weight": weight,
            }
        )
    return edges