"""Generator of simple single-domain knowledge graphs in JSON form."""

from __future__ import annotations

import json
import random
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .domain_utils import generate_edges

DEFAULT_DOMAIN = "programming"
DEFAULT_NODE_COUNT = 50

DOMAIN_RELATIONS: Dict[str, Sequence[str]] = {
    "programming": ("uses", "implements", "extends", "depends_on", "created_by"),
    "science": ("related_to", "part_of", "discovered_by", "works_at", "published_in"),
    "business": ("competes_with", "part_of", "produces", "leads", "operates_in"),
    "medicine": ("treats", "causes", "indicates", "affects", "specializes_in"),
}

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_count(text: Optional[str], default: int) -> int:
    if text is not None and _COUNT_PATTERN.fullmatch(text):
        return int(text)
    return default


def default_output_path(domain: str) -> str:
    return f"docs/sample/{domain}_graph.json"


def generate_domain_graph(
    domain: str,
    node_count: int,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """Build ``node_count`` nodes of one domain joined by about 1.5 edges per node.

    Raises ValueError for a domain other than those in ``DOMAIN_RELATIONS``.
    """
    relations = DOMAIN_RELATIONS.get(domain)
    if relations is None:
        raise ValueError(f"Unknown domain: {domain}")
    rng = rng or random.Random()

    title = domain.capitalize()
    nodes = [
        {
            "id": f"n{i}",
            "label": f"{title} Node {i}",
            "x": 100.0 + rng.random() * 1100.0,
            "y": 100.0 + rng.random() * 800.0,
            "type": domain,
        }
        for i in range(1, node_count + 1)
    ]

    edges = generate_edges(nodes, node_count, list(relations), lambda _s, _t: rng.choice(relations), rng)
    return {"nodes": nodes, "edges": edges}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    domain = args[0] if args else DEFAULT_DOMAIN
    output_path = args[1] if len(args) > 1 else default_output_path(domain)
    node_count = _parse_count(args[2] if len(args) > 2 else None, DEFAULT_NODE_COUNT)

    print(f"Generating {domain} domain graph with {node_count} nodes to {output_path}")

    if domain not in DOMAIN_RELATIONS:
        print(f"Unknown domain: {domain}. Using programming domain instead.", file=sys.stderr)
        domain = DEFAULT_DOMAIN
    graph = generate_domain_graph(domain, node_count)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(json.dumps(graph, indent=2, sort_keys=True), encoding="utf-8")

    print("Domain graph generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())