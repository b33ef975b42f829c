"""Generator of random node and edge lists in CSV form."""

from __future__ import annotations

import math
import random
import re
import sys
from decimal import Decimal
from pathlib import Path
from typing import Optional, Sequence, TextIO

DEFAULT_NODES_PATH = "docs/sample/generated_nodes.csv"
DEFAULT_EDGES_PATH = "docs/sample/generated_edges.csv"
DEFAULT_COUNT = 50

_NODE_TYPES = ["person", "project", "technology", "company", "event"]

_EDGE_TYPES = [
    ("knows", "Person knows person"),
    ("works_with", "Person works with person"),
    ("uses", "Person/Company uses technology"),
    ("develops", "Person/Company develops technology/project"),
    ("attends", "Person attends event"),
    ("organizes", "Company organizes event"),
    ("funds", "Company funds project"),
    ("leads", "Person leads project"),
    ("partners_with", "Company partners with company"),
    ("employs", "Company employs person"),
]

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _format_float(value: float) -> str:
    """Shortest round-trip text of a float, integral values without a fraction."""
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _parse_count(text: Optional[str], default: int) -> int:
    if text is not None and _COUNT_PATTERN.fullmatch(text):
        return int(text)
    return default


def _node_label(rng: random.Random, node_type: str) -> str:
    if node_type == "person":
        first = rng.choice(["John", "Jane", "Alice", "Bob", "Charlie", "Diana", "Edward", "Fiona"])
        last = rng.choice(["Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis", "Garcia"])
        return f"{first} {last}"
    if node_type == "project":
        prefix = rng.choice(["Project", "Operation", "Initiative", "Plan", "Program"])
        suffix = rng.choice(["Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Omega", "Phoenix", "Horizon"])
        return f"{prefix} {suffix}"
    if node_type == "technology":
        return rng.choice(
            [
                "Blockchain", "AI", "Machine Learning", "Cloud Computing",
                "IoT", "5G", "Quantum Computing", "AR/VR", "Robotics",
            ]
        )
    if node_type == "company":
        prefix = rng.choice(["Tech", "Global", "Advanced", "Next", "Future", "Smart", "Cyber", "Digital"])
        suffix = rng.choice(["Systems", "Solutions", "Technologies", "Innovations", "Dynamics", "Networks"])
        return f"{prefix}{suffix}"
    prefix = rng.choice(["Annual", "Global", "International", "Tech", "Innovation"])
    suffix = rng.choice(["Conference", "Summit", "Symposium", "Workshop", "Hackathon", "Meetup"])
    return f"{prefix} {suffix}"


def _node_description(rng: random.Random, node_type: str) -> str:
    if node_type == "person":
        field = rng.choice(["technology", "science", "business", "research", "education"])
        return f"A professional in the field of {field}"
    if node_type == "project":
        kind = rng.choice(["research", "development", "innovation", "experimental"])
        focus = rng.choice(["sustainability", "efficiency", "growth", "transformation"])
        return f"A {kind} project focused on {focus}"
    if node_type == "technology":
        kind = rng.choice(["emerging", "established", "cutting-edge", "revolutionary"])
        audience = rng.choice(["businesses", "consumers", "industries", "researchers"])
        return f"A {kind} technology for {audience}"
    if node_type == "company":
        field = rng.choice(["software", "hardware", "services", "consulting", "research"])
        return f"A company specializing in {field}"
    when = rng.choice(["2023", "2024", "2025", "annually"])
    focus = rng.choice(["innovation", "networking", "education", "collaboration"])
    return f"An event held in {when} focusing on {focus}"


def generate_node_list(writer: TextIO, count: int, rng: Optional[random.Random] = None) -> None:
    """Write a header and ``count`` random node rows to ``writer``."""
    rng = rng or random.Random()
    writer.write("id,label,x,y,type,importance,description,created_date\n")
    for i in range(1, count + 1):
        node_type = rng.choice(_NODE_TYPES)
        label = _node_label(rng, node_type)
        x = rng.random() * 1000.0
        y = rng.random() * 1000.0
        importance = _round_half_away(rng.random() * 0.5 + 0.5) * 100.0 / 100.0
        description = _node_description(rng, node_type)
        created = f"{rng.randint(2010, 2025):04d}-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"
        writer.write(
            f"n{i},{label},{_format_float(x)},{_format_float(y)},{node_type},"
            f"{_format_float(importance)},\"{description}\",{created}\n"
        )


def generate_edge_list(writer: TextIO, count: int, rng: Optional[random.Random] = None) -> None:
    """Write a header and ``count`` random edge rows over about count/1.5 nodes."""
    rng = rng or random.Random()
    node_count = math.ceil(count / 1.5)
    if count and node_count < 2:
        raise ValueError("at least two nodes are needed to create edges without self-loops")

    writer.write("id,source,target,type,weight,label\n")
    for i in range(1, count + 1):
        source = rng.randint(1, node_count)
        target = rng.randint(1, node_count)
        while target == source:
            target = rng.randint(1, node_count)
        edge_type, label = rng.choice(_EDGE_TYPES)
        weight = _round_half_away(rng.random() * 0.8 + 0.2) * 100.0 / 100.0
        writer.write(f"e{i},n{source},n{target},{edge_type},{_format_float(weight)},\"{label}\"\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    output_format = args[0] if args else "nodes"
    default_path = DEFAULT_NODES_PATH if output_format == "nodes" else DEFAULT_EDGES_PATH
    output_path = args[1] if len(args) > 1 else default_path
    count = _parse_count(args[2] if len(args) > 2 else None, DEFAULT_COUNT)

    kind = "node list" if output_format == "nodes" else "edge list"
    print(f"Generating CSV {kind} with {count} entries to {output_path}")

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="") as writer:
        if output_format == "nodes":
            generate_node_list(writer, count)
        elif output_format == "edges":
            generate_edge_list(writer, count)
        else:
            print(f"Invalid format: {output_format}. Use 'nodes' or 'edges'.", file=sys.stderr)
            return 1

    print("CSV file generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())