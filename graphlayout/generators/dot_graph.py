"""Generator of random knowledge graphs in Graphviz DOT form."""

from __future__ import annotations

import random
import re
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, TextIO, Tuple

DEFAULT_PATH = "docs/sample/generated_graph.dot"
DEFAULT_NODE_COUNT = 30

# (category, fill colour, shape)
_NODE_CATEGORIES: List[Tuple[str, str, str]] = [
    ("concept", "lightblue", "ellipse"),
    ("person", "lightgreen", "box"),
    ("resource", "lightyellow", "folder"),
    ("tool", "lightcoral", "component"),
    ("process", "lavender", "diamond"),
]

_RELATIONS: Dict[Tuple[str, str], Tuple[str, str, str]] = {
    ("concept", "concept"): ("includes", "relates_to", "extends"),
    ("concept", "person"): ("understood_by", "developed_by", "taught_by"),
    ("concept", "resource"): ("implemented_in", "stored_in", "accessed_through"),
    ("concept", "tool"): ("supported_by", "analyzed_with", "built_with"),
    ("concept", "process"): ("applied_in", "part_of", "guides"),
    ("person", "concept"): ("understands", "develops", "teaches"),
    ("person", "person"): ("collaborates_with", "mentors", "reports_to"),
    ("person", "resource"): ("uses", "maintains", "creates"),
    ("person", "tool"): ("operates", "configures", "builds"),
    ("person", "process"): ("follows", "improves", "manages"),
    ("resource", "concept"): ("implements", "stores", "provides_access_to"),
    ("resource", "person"): ("used_by", "maintained_by", "created_by"),
    ("resource", "resource"): ("connects_to", "depends_on", "integrates_with"),
    ("resource", "tool"): ("accessed_by", "managed_by", "deployed_with"),
    ("resource", "process"): ("supports", "enables", "constrains"),
    ("tool", "concept"): ("supports", "analyzes", "builds"),
    ("tool", "person"): ("operated_by", "configured_by", "built_by"),
    ("tool", "resource"): ("accesses", "manages", "deploys"),
    ("tool", "tool"): ("works_with", "extends", "replaces"),
    ("tool", "process"): ("facilitates", "automates", "monitors"),
    ("process", "concept"): ("applies", "contains", "guided_by"),
    ("process", "person"): ("followed_by", "improved_by", "managed_by"),
    ("process", "resource"): ("supported_by", "enabled_by", "constrained_by"),
    ("process", "tool"): ("facilitated_by", "automated_by", "monitored_by"),
    ("process", "process"): ("precedes", "includes", "alternates_with"),
}

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_count(text: Optional[str], default: int) -> int:
    if text is not None and _COUNT_PATTERN.fullmatch(text):
        return int(text)
    return default


def _node_label(rng: random.Random, category: str) -> str:
    if category == "concept":
        adjective = rng.choice(
            [
                "Distributed", "Concurrent", "Parallel",
                "Functional", "Object-Oriented", "Reactive",
                "Asynchronous", "Event-Driven", "Declarative",
            ]
        )
        concept = rng.choice(
            [
                "Data Structure", "Algorithm", "Design Pattern",
                "Architecture", "Paradigm", "Framework",
                "Protocol", "Standard", "Methodology",
            ]
        )
        return f"{adjective} {concept}"
    if category == "person":
        area = rng.choice(
            ["Software", "Systems", "Data", "Network", "Security", "Cloud", "Web", "Mobile", "AI"]
        )
        role = rng.choice(
            [
                "Developer", "Architect", "Designer",
                "Engineer", "Researcher", "Analyst",
                "Manager", "Consultant", "Specialist",
            ]
        )
        return f"{area} {role}"
    if category == "resource":
        domain = rng.choice(
            [
                "Development", "Testing", "Deployment",
                "Monitoring", "Analytics", "Integration",
                "Security", "Management", "Automation",
            ]
        )
        resource = rng.choice(
            ["Database", "Repository", "Library", "API", "Service", "Platform", "SDK", "Toolkit", "Framework"]
        )
        return f"{domain} {resource}"
    if category == "tool":
        tool = rng.choice(
            [
                "Compiler", "Debugger", "Profiler",
                "Editor", "IDE", "Version Control",
                "Build System", "Package Manager", "Container",
            ]
        )
        return f"{tool} Tool"
    methodology = rng.choice(
        ["Agile", "DevOps", "CI/CD", "TDD", "BDD", "Lean", "Kanban", "Scrum", "Waterfall"]
    )
    process = rng.choice(
        [
            "Development", "Testing", "Deployment",
            "Integration", "Review", "Planning",
            "Monitoring", "Maintenance", "Optimization",
        ]
    )
    return f"{methodology} {process}"


def generate_dot_graph(
    writer: TextIO,
    node_count: int,
    is_directed: bool = True,
    rng: Optional[random.Random] = None,
) -> None:
    """Write a random DOT graph with ``node_count`` nodes and twice as many edges."""
    rng = rng or random.Random()
    edge_count = node_count * 2
    if edge_count and node_count < 2:
        raise ValueError("at least two nodes are needed to create edges without self-loops")

    keyword = "digraph" if is_directed else "graph"
    writer.write(f"{keyword} KnowledgeGraph {{\n")
    writer.write("  // Graph attributes\n")
    writer.write("  graph [rankdir=LR, splines=true, overlap=false, nodesep=0.8, ranksep=1.0];\n")
    writer.write("  node [shape=box, style=\"rounded,filled\", fontname=Arial, fontsize=12];\n")
    writer.write("  edge [fontname=Arial, fontsize=10];\n")
    writer.write("\n")

    writer.write("  // Nodes\n")
    categories = []
    for i in range(1, node_count + 1):
        category, color, shape = rng.choice(_NODE_CATEGORIES)
        categories.append(category)
        label = _node_label(rng, category)
        writer.write(
            f"  n{i} [label=\"{label}\", fillcolor={color}, shape={shape}, tooltip=\"{category} node\"];\n"
        )
    writer.write("\n")

    writer.write("  // Edges\n")
    arrow = "->" if is_directed else "--"
    for _ in range(edge_count):
        source_idx = rng.randrange(node_count)
        target_idx = rng.randrange(node_count)
        while target_idx == source_idx:
            target_idx = rng.randrange(node_count)

        relations = _RELATIONS.get((categories[source_idx], categories[target_idx]))
        relation = rng.choice(relations) if relations else "connects_to"
        weight = rng.randint(1, 10)
        writer.write(
            f"  n{source_idx + 1} {arrow} n{target_idx + 1} "
            f"[label=\"{relation}\", weight={weight}, tooltip=\"{relation} ({weight} weight)\"];\n"
        )

    writer.write("}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    output_path = args[0] if args else DEFAULT_PATH
    node_count = _parse_count(args[1] if len(args) > 1 else None, DEFAULT_NODE_COUNT)
    is_directed = args[2] == "directed" if len(args) > 2 else True

    kind = "directed" if is_directed else "undirected"
    print(f"Generating {kind} DOT graph with {node_count} nodes to {output_path}")

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="") as writer:
        generate_dot_graph(writer, node_count, is_directed)

    print("DOT graph generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())