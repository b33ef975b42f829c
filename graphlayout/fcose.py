"""Force-directed (fCoSE style) layout engine."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .types import Graph, LayoutOptions

Force = Tuple[float, float]

_ORIGIN = (0.0, 0.0)


class LayoutEngine(ABC):
    """Common interface of layout algorithms."""

    @abstractmethod
    def apply_layout(self, graph: Graph) -> None:
        """Compute positions for the nodes of ``graph`` in place."""

    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the algorithm."""

    @abstractmethod
    def description(self) -> str:
        """Short description of the algorithm."""


def _required_number(data: Mapping[str, Any], key: str) -> float:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


@dataclass
class FcoseOptions:
    """Tuning options for the force-directed layout."""

    base: LayoutOptions = field(default_factory=LayoutOptions)
    quality: str = "default"  # "draft", "default" or "proof"
    node_repulsion: float = 4500.0
    ideal_edge_length: float = 50.0
    node_overlap: float = 10.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base": {"padding": self.base.padding},
            "quality": self.quality,
            "node_repulsion": self.node_repulsion,
            "ideal_edge_length": self.ideal_edge_length,
            "node_overlap": self.node_overlap,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FcoseOptions":
        """Parse options; every field is required."""
        if not isinstance(data, Mapping):
            raise ValueError("options must be an object")
        base = data.get("base")
        if not isinstance(base, Mapping):
            raise ValueError("field 'base' must be an object")
        if "padding" not in base:
            raise ValueError("missing field 'padding'")
        quality = data.get("quality")
        if not isinstance(quality, str):
            raise ValueError("field 'quality' must be a string")
        return cls(
            base=LayoutOptions(padding=base["padding"]),
            quality=quality,
            node_repulsion=_required_number(data, "node_repulsion"),
            ideal_edge_length=_required_number(data, "ideal_edge_length"),
            node_overlap=_required_number(data, "node_overlap"),
        )


class FcoseLayoutEngine(LayoutEngine):
    """Spring-electrical layout with a final overlap-removal pass."""

    _ITERATIONS = {"draft": 30, "proof": 100}
    _INITIAL_RADIUS = 100.0
    _NODE_SIZE = 10.0
    _MAX_OVERLAP_PASSES = 50
    _DAMPING = 0.1

    def __init__(self, options: Optional[FcoseOptions] = None) -> None:
        self.options = options if options is not None else FcoseOptions()

    def initialize_positions(self, graph: Graph) -> None:
        """Place unpositioned nodes at random inside a disc of radius 100."""
        for node in graph.nodes.values():
            if node.position is None:
                angle = random.random() * 2.0 * math.pi
                distance = random.random() * self._INITIAL_RADIUS
                node.position = (distance * math.cos(angle), distance * math.sin(angle))

    def remove_overlaps(self, graph: Graph) -> None:
        """Push apart nodes closer than the minimum allowed distance."""
        min_distance = self._NODE_SIZE * 2.0 * (1.0 - self.options.node_overlap / 100.0)
        nodes = list(graph.nodes.values())

        for _ in range(self._MAX_OVERLAP_PASSES):
            overlaps_exist = False
            for i, node_i in enumerate(nodes):
                # The reference position of node i is taken once per outer step.
                xi, yi = node_i.position or _ORIGIN
                for node_j in nodes[i + 1:]:
                    xj, yj = node_j.position or _ORIGIN
                    dx = xj - xi
                    dy = yj - yi
                    distance = math.hypot(dx, dy)
                    if distance >= min_distance:
                        continue
                    overlaps_exist = True
                    push = min_distance - distance
                    if distance > 0.1:
                        force_x = push * dx / distance
                        force_y = push * dy / distance
                    else:
                        force_x = random.random() * 2.0 - 1.0
                        force_y = random.random() * 2.0 - 1.0
                    cur_ix, cur_iy = node_i.position or _ORIGIN
                    cur_jx, cur_jy = node_j.position or _ORIGIN
                    node_i.position = (cur_ix - force_x / 2.0, cur_iy - force_y / 2.0)
                    node_j.position = (cur_jx + force_x / 2.0, cur_jy + force_y / 2.0)
            if not overlaps_exist:
                break

    def apply_layout(self, graph: Graph) -> None:
        self.initialize_positions(graph)
        iterations = self._ITERATIONS.get(self.options.quality, 50)
        for _ in range(iterations):
            repulsion = self.calculate_repulsion(graph)
            attraction = self.calculate_attraction(graph)
            combined = [(rx + ax, ry + ay) for (rx, ry), (ax, ay) in zip(repulsion, attraction)]
            self.apply_forces(graph, combined)
        self.remove_overlaps(graph)

    def name(self) -> str:
        return "Force-Directed (fCoSE)"

    def description(self) -> str:
        return "Force-directed layout algorithm optimized for compound graphs"

    def calculate_repulsion(self, graph: Graph) -> List[Force]:
        """Inverse-square repulsion on each node, in node insertion order."""
        positions = [node.position or _ORIGIN for node in graph.nodes.values()]
        repulsion = self.options.node_repulsion
        forces: List[Force] = []
        for i, (xi, yi) in enumerate(positions):
            fx = fy = 0.0
            for j, (xj, yj) in enumerate(positions):
                if i == j:
                    continue
                dx = xi - xj
                dy = yi - yj
                distance_squared = dx * dx + dy * dy
                if distance_squared < 0.1:
                    continue
                force = repulsion / distance_squared
                distance = math.sqrt(distance_squared)
                fx += force * dx / distance
                fy += force * dy / distance
            forces.append((fx, fy))
        return forces

    def calculate_attraction(self, graph: Graph) -> List[Force]:
        """Spring forces along edges, in node insertion order."""
        index = {node_id: i for i, node_id in enumerate(graph.nodes)}
        positions = [node.position or _ORIGIN for node in graph.nodes.values()]
        forces = [[0.0, 0.0] for _ in positions]
        ideal = self.options.ideal_edge_length

        for edge in graph.edges.values():
            source = index.get(edge.source)
            target = index.get(edge.target)
            if source is None or target is None:
                continue
            sx, sy = positions[source]
            tx, ty = positions[target]
            dx = tx - sx
            dy = ty - sy
            distance = math.hypot(dx, dy)
            if distance < 0.1:
                continue
            force = (distance - ideal) / 3.0
            fx = force * dx / distance
            fy = force * dy / distance
            forces[source][0] += fx
            forces[source][1] += fy
            forces[target][0] -= fx
            forces[target][1] -= fy

        return [(fx, fy) for fx, fy in forces]

    def apply_forces(self, graph: Graph, forces: Sequence[Force]) -> None:
        """Move each node by its damped force; extra nodes are left alone."""
        for node, (fx, fy) in zip(graph.nodes.values(), forces):
            x, y = node.position or _ORIGIN
            node.position = (x + fx * self._DAMPING, y + fy * self._DAMPING)


def apply_layout(graph: Graph, options: FcoseOptions) -> None:
    """Run the force-directed layout on ``graph`` with ``options``."""
    FcoseLayoutEngine(options).apply_layout(graph)