"""A directed graph with weighted, named edges."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed edge; ``quality`` counts the spans the edge covers."""

    name: str
    quality: int
    start: int
    finish: int
    weight: float


class DirectedWeightedGraph:
    """A graph with a fixed number of vertices and a growing list of edges."""

    def __init__(self, vertex_count: int = 0) -> None:
        self._edges: list[Edge] = []
        self._incidence: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._incidence):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, edge: Edge) -> int:
        """Add an edge and return its id."""
        self._check_vertex(edge.start)
        self._edges.append(edge)
        edge_id = len(self._edges) - 1
        self._incidence[edge.start].append(edge_id)
        return edge_id

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self._incidence)

    def edge_count(self) -> int:
        """Return the number of edges."""
        return len(self._edges)

    def edge(self, edge_id: int) -> Edge:
        """Return the edge with the given id."""
        if not 0 <= edge_id < len(self._edges):
            raise IndexError(f"edge {edge_id} is out of range")
        return self._edges[edge_id]

    def incident_edges(self, vertex: int) -> tuple[int, ...]:
        """Return the ids of the edges leaving a vertex, in insertion order."""
        self._check_vertex(vertex)
        return tuple(self._incidence[vertex])