"""Generator of a random programming-domain knowledge graph."""

from __future__ import annotations

import math
import random
from typing import Any, Dict, Optional, Tuple

from .domain_utils import determine_node_type, generate_edges

NODE_TYPES = [
    ("language", 0.2),
    ("framework", 0.2),
    ("library", 0.15),
    ("concept", 0.15),
    ("tool", 0.1),
    ("platform", 0.1),
    ("person", 0.1),
]

EDGE_TYPES = [
    "uses", "implements", "extends", "depends_on", "created_by",
    "runs_on", "compiles_to", "inspired", "related_to", "part_of",
]

LANGUAGES = [
    "Python", "JavaScript", "Java", "C++", "Rust", "Go", "TypeScript",
    "C#", "Ruby", "Swift", "Kotlin", "PHP", "Scala", "Haskell", "Elixir",
]

FRAMEWORKS = [
    "React", "Angular", "Vue", "Django", "Spring", "Flask", "Express",
    "Rails", "ASP.NET", "Laravel", "Symfony", "FastAPI", "Next.js", "Svelte",
]

LIBRARIES = [
    "TensorFlow", "PyTorch", "NumPy", "Pandas", "jQuery", "Redux",
    "Lodash", "Axios", "Requests", "SQLAlchemy", "Hibernate", "Boost",
]

CONCEPTS = [
    "Object-Oriented Programming", "Functional Programming", "Concurrency",
    "Parallelism", "Asynchronous Programming", "Reactive Programming",
    "Design Patterns", "Microservices", "Serverless", "REST", "GraphQL",
]

TOOLS = [
    "Git", "Docker", "Kubernetes", "VS Code", "IntelliJ", "Jenkins",
    "GitHub Actions", "Travis CI", "npm", "pip", "Cargo", "Maven",
]

PLATFORMS = [
    "AWS", "Azure", "Google Cloud", "Heroku", "Netlify", "Vercel",
    "DigitalOcean", "Linux", "Windows", "macOS", "iOS", "Android",
]

PEOPLE = [
    "Linus Torvalds", "Guido van Rossum", "Brendan Eich", "Anders Hejlsberg",
    "James Gosling", "Yukihiro Matsumoto", "Bjarne Stroustrup", "Graydon Hoare",
    "Rich Hickey", "Ryan Dahl", "DHH", "Kent Beck",
]

FIXED_RELATIONS = {
    ("language", "framework"): "implemented_in",
    ("framework", "language"): "uses",
    ("library", "language"): "written_in",
    ("person", "language"): "created",
    ("person", "framework"): "developed",
    ("framework", "library"): "depends_on",
    ("tool", "language"): "supports",
    ("platform", "language"): "runs",
    ("concept", "language"): "applied_in",
}

_PARADIGMS = ["imperative", "object-oriented", "functional", "procedural"]
_DOMAINS = ["web", "mobile", "desktop", "backend", "frontend"]
_PURPOSES = ["data", "ui", "networking", "utility", "ml"]
_TOOL_CATEGORIES = ["version control", "ci/cd", "editor", "package manager", "container"]
_PLATFORM_KINDS = ["cloud", "os", "mobile", "web"]


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _scaled(rng: random.Random, scale: float) -> float:
    """A random value in [0, scale/10] rounded to one decimal place."""
    return _round_half_away(rng.random() * scale) / 10.0


def _pick(names: list, type_count: int) -> str:
    return names[type_count % len(names)]


def _node_details(rng: random.Random, node_type: str, type_count: int) -> Tuple[str, Dict[str, Any]]:
    if node_type == "language":
        return f"Language: {_pick(LANGUAGES, type_count)}", {
            "year": rng.randrange(1970, 2023),
            "paradigm": _PARADIGMS[rng.randrange(4)],
            "popularity": _scaled(rng, 100.0),
        }
    if node_type == "framework":
        # Only the first four domains are ever drawn.
        return f"Framework: {_pick(FRAMEWORKS, type_count)}", {
            "year": rng.randrange(2000, 2023),
            "domain": _DOMAINS[rng.randrange(4)],
            "popularity": _scaled(rng, 100.0),
        }
    if node_type == "library":
        return f"Library: {_pick(LIBRARIES, type_count)}", {
            "year": rng.randrange(2000, 2023),
            "purpose": _PURPOSES[rng.randrange(4)],
            "popularity": _scaled(rng, 100.0),
        }
    if node_type == "concept":
        return f"Concept: {_pick(CONCEPTS, type_count)}", {
            "complexity": _scaled(rng, 10.0),
            "importance": _scaled(rng, 10.0),
        }
    if node_type == "tool":
        return f"Tool: {_pick(TOOLS, type_count)}", {
            "year": rng.randrange(2000, 2023),
            "category": _TOOL_CATEGORIES[rng.randrange(5)],
            "popularity": _scaled(rng, 100.0),
        }
    if node_type == "platform":
        return f"Platform: {_pick(PLATFORMS, type_count)}", {
            "year": rng.randrange(1990, 2023),
            "type": _PLATFORM_KINDS[rng.randrange(3)],
            "market_share": _scaled(rng, 100.0),
        }
    return f"Person: {_pick(PEOPLE, type_count)}", {
        "contributions": rng.randrange(1, 10),
        "influence": _scaled(rng, 10.0),
    }


def generate_programming_graph(node_count: int, rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """Build a graph of languages, frameworks, libraries, concepts, tools, platforms and people."""
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
        # Extra fields overwrite the base ones, so a platform's "type" is its kind.
        node.update(extra)
        nodes.append(node)

    def relation(source_type: str, target_type: str) -> str:
        fixed = FIXED_RELATIONS.get((source_type, target_type))
        return fixed if fixed is not None else rng.choice(EDGE_TYPES)

    edges = generate_edges(nodes, node_count, EDGE_TYPES, relation, rng)
    return {"nodes": nodes, "edges": edges}