"""Generator of a random medical knowledge graph in JSON form."""

from __future__ import annotations

import json
import math
import random
import re
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from .domain_utils import determine_node_type, generate_edges

DEFAULT_PATH = "docs/sample/medicine_graph.json"
DEFAULT_NODE_COUNT = 50

NODE_TYPES = [
    ("disease", 0.2),
    ("drug", 0.2),
    ("symptom", 0.15),
    ("treatment", 0.1),
    ("organ", 0.1),
    ("doctor", 0.1),
    ("specialty", 0.05),
    ("test", 0.1),
]

EDGE_TYPES = [
    "treats", "causes", "indicates", "affects", "specializes_in",
    "performs", "prescribes", "diagnoses", "part_of", "related_to",
]

FIXED_RELATIONS = {
    ("drug", "disease"): "treats",
    ("disease", "symptom"): "causes",
    ("symptom", "disease"): "indicates",
    ("disease", "organ"): "affects",
    ("doctor", "specialty"): "specializes_in",
    ("doctor", "treatment"): "performs",
    ("doctor", "drug"): "prescribes",
    ("test", "disease"): "diagnoses",
    ("organ", "organ"): "connected_to",
    ("treatment", "disease"): "treats",
}

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _format_float(value: float) -> str:
    """Shortest text of a float, integral values without a fraction."""
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _chance(rng: random.Random, probability: float) -> bool:
    return rng.random() < probability


def _tenths(rng: random.Random) -> float:
    return _round_half_away(rng.random() * 10.0) / 10.0


def _parse_count(text: Optional[str], default: int) -> int:
    if text is not None and _COUNT_PATTERN.fullmatch(text):
        return int(text)
    return default


def _node_details(rng: random.Random, node_type: str, type_count: int) -> Tuple[str, Dict[str, Any]]:
    name = f"{node_type.capitalize()} {type_count}"
    label = f"{node_type.capitalize()}: {name}"
    if node_type == "disease":
        prevalence = _round_half_away(rng.random() * 20.0) / 10.0
        return label, {
            "prevalence": f"{_format_float(prevalence)}%",
            "chronic": _chance(rng, 0.5),
            "severity": rng.randrange(1, 10),
        }
    if node_type == "drug":
        return label, {
            "approved_year": rng.randrange(1950, 2023),
            "prescription_required": _chance(rng, 0.7),
            "class_id": rng.randrange(1, 5),
        }
    if node_type == "symptom":
        return label, {"common": _chance(rng, 0.6), "severity": _tenths(rng)}
    if node_type == "treatment":
        return label, {
            "invasive": _chance(rng, 0.4),
            "cost_level": rng.randrange(1, 4),
            "effectiveness": _tenths(rng),
        }
    if node_type == "organ":
        return label, {"system_id": rng.randrange(1, 5), "vital": _chance(rng, 0.3)}
    if node_type == "doctor":
        return label, {"years_training": rng.randrange(4, 15), "surgical": _chance(rng, 0.4)}
    if node_type == "specialty":
        return label, {
            "subspecialties": rng.randrange(2, 8),
            "established": rng.randrange(1800, 1980),
        }
    return label, {
        "invasive": _chance(rng, 0.3),
        "accuracy": _round_half_away(rng.random() * 30.0 + 70.0) / 100.0,
        "cost": rng.randrange(50, 5000),
    }


def generate_medicine_graph(node_count: int, rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """Build a graph of diseases, drugs, symptoms, treatments, organs and more."""
    rng = rng or random.Random()
    nodes = []
    counts: Dict[str, int] = {}

    for i in range(1, node_count + 1):
        node_type = determine_node_type(rng, NODE_TYPES)
        counts[node_type] = counts.get(node_type, 0) + 1
        label, extra = _node_details(rng, node_type, counts[node_type])
        x = 100.0 + rng.random() * 1100.0
        y = 100.0 + rng.random() * 800.0
        node = {"id": f"n{i}", "label": label, "x": x, "y": y, "type": node_type}
        node.update(extra)
        nodes.append(node)

    def relation(source_type: str, target_type: str) -> str:
        fixed = FIXED_RELATIONS.get((source_type, target_type))
        return fixed if fixed is not None else rng.choice(EDGE_TYPES)

    edges = generate_edges(nodes, node_count, EDGE_TYPES, relation, rng)
    return {"nodes": nodes, "edges": edges}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    output_path = args[0] if args else DEFAULT_PATH
    node_count = _parse_count(args[1] if len(args) > 1 else None, DEFAULT_NODE_COUNT)

    print(f"Generating medicine domain graph with {node_count} nodes to {output_path}")
    graph = generate_medicine_graph(node_count)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(json.dumps(graph, indent=2, sort_keys=True), encoding="utf-8")

    print("Medicine domain graph generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())