"""Generator of a random technology knowledge graph in JSON form."""

from __future__ import annotations

import json
import math
import random
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from .domain_utils import determine_node_type, generate_edges

DEFAULT_PATH = "docs/sample/generated_graph.json"
DEFAULT_NODE_COUNT = 50


def _names(block: str) -> Tuple[str, ...]:
    """One name per non-empty line of ``block``."""
    return tuple(line.strip() for line in block.strip().splitlines() if line.strip())


def _weighted(block: str) -> Tuple[Tuple[str, float], ...]:
    pairs = (line.split() for line in _names(block))
    return tuple((name, float(share)) for name, share in pairs)


def _relations(block: str) -> Dict[Tuple[str, str], str]:
    rows = (line.split() for line in _names(block))
    return {(source, target): relation for source, target, relation in rows}


_NODE_TYPES = _weighted("""
    concept 0.3
    person 0.25
    organization 0.2
    paper 0.15
    application 0.1
""")

_EDGE_TYPES = tuple(
    "includes related used_in uses contributed_to "
    "affiliated_with authored implements cites developed_by".split()
)

_CONCEPTS = _names("""
    Distributed Systems
    Blockchain
    Quantum Computing
    Cloud Computing
    Edge Computing
    Internet of Things
    Big Data
    Data Science
    Artificial Intelligence
    Cybersecurity
    DevOps
    Microservices
    Serverless
    Containerization
    Web3
    Virtual Reality
    Augmented Reality
    5G
    Robotics
    Bioinformatics
    Green Computing
""")

_PEOPLE = _names("""
    Ada Lovelace
    Alan Turing
    Grace Hopper
    Tim Berners-Lee
    Linus Torvalds
    Donald Knuth
    Barbara Liskov
    Vint Cerf
    Margaret Hamilton
    John McCarthy
    Guido van Rossum
    Ken Thompson
    Dennis Ritchie
    Bjarne Stroustrup
    James Gosling
    Brendan Eich
    Anders Hejlsberg
    Yukihiro Matsumoto
""")

_ORGANIZATIONS = _names("""
    IBM
    Microsoft
    Apple
    Amazon
    Google
    Facebook
    Intel
    AMD
    NVIDIA
    Oracle
    SAP
    Salesforce
    MIT
    Stanford
    Berkeley
    CMU
    ETH Zurich
    Oxford
    CERN
    NASA
    DARPA
    IEEE
    ACM
    W3C
""")

_PAPERS = _names("""
    Bitcoin: A Peer-to-Peer Electronic Cash System
    A Mathematical Theory of Communication
    Computing Machinery and Intelligence
    On Computable Numbers
    The Anatomy of a Large-Scale Hypertextual Web Search Engine
    MapReduce: Simplified Data Processing on Large Clusters
    The PageRank Citation Ranking
    Attention Is All You Need
    Design Patterns: Elements of Reusable Object-Oriented Software
    A Relational Model of Data for Large Shared Data Banks
""")

_APPLICATIONS = _names("""
    Web Search
    Social Media
    E-commerce
    Cloud Storage
    Video Streaming
    Music Streaming
    Ride Sharing
    Food Delivery
    Navigation
    Email
    Messaging
    Video Conferencing
    Code Repositories
    Project Management
    CRM
    ERP
    Database Systems
    Operating Systems
""")

_FIXED_RELATIONS = _relations("""
    concept application used_in
    application concept uses
    person concept contributed_to
    person organization affiliated_with
    person paper authored
    paper concept describes
    paper paper cites
    organization application developed
""")

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _importance(rng: random.Random, spread: float, base: float) -> float:
    return _round_half_away(rng.random() * spread + base) * 100.0 / 100.0


def _parse_count(text: Optional[str], default: int) -> int:
    if text is not None and _COUNT_PATTERN.fullmatch(text):
        return int(text)
    return default


def _pick(names: Sequence[str], type_count: int) -> str:
    return names[type_count % len(names)]


def _node_details(rng: random.Random, node_type: str, type_count: int) -> tuple:
    if node_type == "concept":
        label = f"Concept: {_pick(_CONCEPTS, type_count)}"
        return label, {"importance": _importance(rng, 0.3, 0.7)}
    if node_type == "person":
        label = f"Person: {_pick(_PEOPLE, type_count)}"
        return label, {"importance": _importance(rng, 0.2, 0.75)}
    if node_type == "organization":
        label = f"Organization: {_pick(_ORGANIZATIONS, type_count)}"
        importance = _importance(rng, 0.3, 0.6)
        return label, {"importance": importance, "founded": rng.randrange(1900, 2020)}
    if node_type == "paper":
        label = f"Paper: {_pick(_PAPERS, type_count)}"
        importance = _importance(rng, 0.2, 0.7)
        return label, {"importance": importance, "year": rng.randrange(1950, 2023)}
    label = f"Application: {_pick(_APPLICATIONS, type_count)}"
    importance = _importance(rng, 0.3, 0.6)
    return label, {"importance": importance, "users_millions": rng.randrange(1, 5000)}


def generate_tech_knowledge_graph(node_count: int, rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """Build a graph of concepts, people, organisations, papers and applications."""
    rng = rng or random.Random()
    nodes = []
    counts: Dict[str, int] = {}

    for i in range(1, node_count + 1):
        node_type = determine_node_type(rng, _NODE_TYPES)
        counts[node_type] = counts.get(node_type, 0) + 1
        label, extra = _node_details(rng, node_type, counts[node_type])
        x = 100.0 + rng.random() * 1100.0
        y = 100.0 + rng.random() * 800.0
        node = {"id": f"n{i}", "label": label, "x": x, "y": y, "type": node_type}
        node.update(extra)
        nodes.append(node)

    def relation(source_type: str, target_type: str) -> str:
        if (source_type, target_type) == ("concept", "concept"):
            return _EDGE_TYPES[rng.randrange(2)]
        fixed = _FIXED_RELATIONS.get((source_type, target_type))
        if fixed is not None:
            return fixed
        return rng.choice(_EDGE_TYPES)

    edges = generate_edges(nodes, node_count, list(_EDGE_TYPES), relation, rng)
    return {"nodes": nodes, "edges": edges}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    output_path = args[0] if args else DEFAULT_PATH
    node_count = _parse_count(args[1] if len(args) > 1 else None, DEFAULT_NODE_COUNT)

    print(f"Generating JSON graph with {node_count} nodes to {output_path}")
    graph = generate_tech_knowledge_graph(node_count)

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(graph, indent=2, sort_keys=True), encoding="utf-8")

    print("Graph generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())