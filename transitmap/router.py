"""Shortest routes between all pairs of vertices of a weighted graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from transitmap.graph import DirectedWeightedGraph


@dataclass(frozen=True)
class RouteInfo:
    """A found route: its total weight and the ids of its edges in order."""

    weight: float
    edges: list[int] = field(default_factory=list)


class _RouteData(NamedTuple):
    weight: float
    prev_edge: int | None


class Router:
    """Precomputes shortest routes with the Floyd–Warshall algorithm."""

    def __init__(self, graph: DirectedWeightedGraph) -> None:
        self._graph = graph
        count = graph.vertex_count()
        self._routes: list[list[_RouteData | None]] = [[None] * count for _ in range(count)]
        self._initialize()
        for through in range(count):
            self._relax_through(through)

    def _initialize(self) -> None:
        for vertex, row in enumerate(self._routes):
            row[vertex] = _RouteData(0, None)
            for edge_id in self._graph.incident_edges(vertex):
                edge = self._graph.edge(edge_id)
                if edge.weight < 0:
                    raise ValueError("Edges' weights should be non-negative")
                current = row[edge.finish]
                if current is None or current.weight > edge.weight:
                    row[edge.finish] = _RouteData(edge.weight, edge_id)

    def _relax_through(self, through: int) -> None:
        through_row = self._routes[through]
        for row in self._routes:
            route_from = row[through]
            if route_from is None:
                continue
            for target, route_to in enumerate(through_row):
                if route_to is None:
                    continue
                candidate = route_from.weight + route_to.weight
                current = row[target]
                if current is None or candidate < current.weight:
                    prev_edge = (
                        route_to.prev_edge
                        if route_to.prev_edge is not None
                        else route_from.prev_edge
                    )
                    row[target] = _RouteData(candidate, prev_edge)

    def build_route(self, start: int, finish: int) -> RouteInfo | None:
        """Return the shortest route from ``start`` to ``finish``, or ``None``."""
        count = len(self._routes)
        if not (0 <= start < count and 0 <= finish < count):
            raise IndexError(f"vertex pair ({start}, {finish}) is out of range")
        row = self._routes[start]
        data = row[finish]
        if data is None:
            return None
        edges = []
        edge_id = data.prev_edge
        while edge_id is not None:
            edges.append(edge_id)
            previous = row[self._graph.edge(edge_id).start]
            edge_id = previous.prev_edge if previous is not None else None
        edges.reverse()
        return RouteInfo(data.weight, edges)