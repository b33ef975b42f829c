"""Graph data model: nodes, edges, graphs and their JSON forms."""

from __future__ import annotations

import itertools
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

MetadataValue = Union[str, float, bool]
Position = Tuple[float, float]

_edge_ids = itertools.count()


def _generate_edge_id() -> str:
    return f"e{next(_edge_ids)}"


def _metadata_value(value: Any) -> MetadataValue:
    """Normalise a metadata value to a string, float or bool."""
    if isinstance(value, (str, bool)):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    raise TypeError(f"unsupported metadata value: {value!r}")


def _parse_metadata(data: Mapping[str, Any]) -> Dict[str, MetadataValue]:
    raw = data.get("metadata", {})
    if not isinstance(raw, Mapping):
        raise ValueError("metadata must be an object")
    try:
        return {str(key): _metadata_value(value) for key, value in raw.items()}
    except TypeError as exc:
        raise ValueError(str(exc)) from exc


def _number(data: Mapping[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


def _string(data: Mapping[str, Any], key: str, default: Optional[str] = None) -> str:
    if key not in data:
        if default is None:
            raise ValueError(f"missing field {key!r}")
        return default
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _position(value: Any) -> Optional[Position]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"position must be a pair of numbers, got {value!r}")
    x, y = value
    for coord in (x, y):
        if isinstance(coord, bool) or not isinstance(coord, (int, float)):
            raise ValueError(f"position must be a pair of numbers, got {value!r}")
    return (float(x), float(y))


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return data


@dataclass
class Node:
    """A graph node with optional layout position and metadata."""

    id: str
    position: Optional[Position] = None
    metadata: Dict[str, MetadataValue] = field(default_factory=dict)
    label: str = ""
    type: str = ""
    pos_x: float = 0.0
    pos_y: float = 0.0

    def with_position(self, x: float, y: float) -> "Node":
        """Set the position and the x/y fields; returns the node."""
        self.position = (float(x), float(y))
        self.pos_x = float(x)
        self.pos_y = float(y)
        return self

    def with_metadata(self, key: str, value: Any) -> "Node":
        """Attach a metadata entry; returns the node."""
        self.metadata[str(key)] = _metadata_value(value)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "position": list(self.position) if self.position is not None else None,
            "metadata": dict(self.metadata),
            "label": self.label,
            "type": self.type,
            "x": self.pos_x,
            "y": self.pos_y,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Node":
        data = _require_mapping(data, "node")
        return cls(
            id=_string(data, "id"),
            position=_position(data.get("position")),
            metadata=_parse_metadata(data),
            label=_string(data, "label", ""),
            type=_string(data, "type", ""),
            pos_x=_number(data, "x", 0.0),
            pos_y=_number(data, "y", 0.0),
        )


@dataclass
class Edge:
    """A connection between two nodes, identified by their ids."""

    id: str
    source: str
    target: str
    metadata: Dict[str, MetadataValue] = field(default_factory=dict)
    type: str = ""
    weight: float = 1.0

    def with_metadata(self, key: str, value: Any) -> "Edge":
        """Attach a metadata entry; returns the edge."""
        self.metadata[str(key)] = _metadata_value(value)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "metadata": dict(self.metadata),
            "type": self.type,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Edge":
        """Build an edge; a missing id is generated as ``e<counter>``."""
        data = _require_mapping(data, "edge")
        source = _string(data, "source")
        target = _string(data, "target")
        edge_id = _string(data, "id") if "id" in data else _generate_edge_id()
        return cls(
            id=edge_id,
            source=source,
            target=target,
            metadata=_parse_metadata(data),
            type=_string(data, "type", ""),
            weight=_number(data, "weight", 1.0),
        )


@dataclass
class Graph:
    """Nodes and edges keyed by their ids."""

    nodes: Dict[str, Node] = field(default_factory=dict)
    edges: Dict[str, Edge] = field(default_factory=dict)

    def add_node(self, node: Node) -> "Graph":
        self.nodes[node.id] = node
        return self

    def add_edge(self, edge: Edge) -> "Graph":
        self.edges[edge.id] = edge
        return self

    def remove_node(self, node_id: str) -> Optional[Node]:
        """Remove a node and every edge touching it; return the node if present."""
        self.edges = {
            edge_id: edge
            for edge_id, edge in self.edges.items()
            if edge.source != node_id and edge.target != node_id
        }
        return self.nodes.pop(node_id, None)

    def remove_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.pop(edge_id, None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": {key: node.to_dict() for key, node in self.nodes.items()},
            "edges": {key: edge.to_dict() for key, edge in self.edges.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Graph":
        data = _require_mapping(data, "graph")
        for key in ("nodes", "edges"):
            if key not in data:
                raise ValueError(f"missing field {key!r}")
        nodes = _require_mapping(data["nodes"], "nodes")
        edges = _require_mapping(data["edges"], "edges")
        return cls(
            nodes={str(key): Node.from_dict(value) for key, value in nodes.items()},
            edges={str(key): Edge.from_dict(value) for key, value in edges.items()},
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "Graph":
        return cls.from_dict(json.loads(text))


def graph_from_file_data(data: Mapping[str, Any]) -> Graph:
    """Build a graph from file data holding ``nodes`` and ``edges`` lists.

    Nodes without a position but with a non-zero x or y take (x, y) as position.
    """
    data = _require_mapping(data, "graph file")
    for key in ("nodes", "edges"):
        if not isinstance(data.get(key), list):
            raise ValueError(f"field {key!r} must be a list")
    graph = Graph()
    for raw in data["nodes"]:
        node = Node.from_dict(raw)
        if node.position is None and (node.pos_x != 0.0 or node.pos_y != 0.0):
            node.position = (node.pos_x, node.pos_y)
        graph.nodes[node.id] = node
    for raw in data["edges"]:
        edge = Edge.from_dict(raw)
        graph.edges[edge.id] = edge
    return graph


@dataclass
class LayoutOptions:
    """Options shared by all layouts."""

    padding: int = 30

    def __post_init__(self) -> None:
        if isinstance(self.padding, bool) or not isinstance(self.padding, int) or self.padding < 0:
            raise ValueError(f"padding must be a non-negative integer, got {self.padding!r}")