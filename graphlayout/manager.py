"""Stateful facade for building a graph and laying it out via JSON."""

from __future__ import annotations

import json
from typing import Optional

from .fcose import FcoseLayoutEngine, FcoseOptions
from .types import Edge, Graph, Node


class LayoutManager:
    """Holds one graph and applies layouts to it."""

    def __init__(self) -> None:
        self.graph = Graph()

    def add_node(self, node_id: str, x: Optional[float] = None, y: Optional[float] = None) -> None:
        """Add a node; it gets a position only when both x and y are given."""
        node = Node(node_id)
        if x is not None and y is not None:
            node.with_position(x, y)
        self.graph.add_node(node)

    def add_edge(self, edge_id: str, source: str, target: str) -> None:
        self.graph.add_edge(Edge(edge_id, source, target))

    def remove_node(self, node_id: str) -> None:
        self.graph.remove_node(node_id)

    def remove_edge(self, edge_id: str) -> None:
        self.graph.remove_edge(edge_id)

    def apply_fcose_layout(self, options_json: str) -> str:
        """Lay out the graph with options given as JSON; return the graph as JSON."""
        try:
            options = FcoseOptions.from_dict(json.loads(options_json))
        except ValueError as exc:
            raise ValueError(f"Failed to parse options: {exc}") from exc
        FcoseLayoutEngine(options).apply_layout(self.graph)
        return self.graph.to_json()

    def get_graph_json(self) -> str:
        return self.graph.to_json()

    def load_graph_json(self, text: str) -> None:
        """Replace the graph with one parsed from JSON."""
        try:
            self.graph = Graph.from_json(text)
        except ValueError as exc:
            raise ValueError(f"Failed to parse graph: {exc}") from exc