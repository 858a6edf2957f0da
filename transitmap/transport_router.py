"""Fastest journeys between stops, counting waits and bus rides."""

from __future__ import annotations

from dataclasses import dataclass, field

from transitmap.graph import DirectedWeightedGraph, Edge
from transitmap.router import RouteInfo, Router
from transitmap.transport_catalogue import Catalogue

_DISTANCE_COEF = 100.0
_TIME_COEF = 6.0


@dataclass(frozen=True)
class RoutingSettings:
    """Bus speed in km/h and waiting time at a stop in minutes."""

    bus_velocity: float = 0.0
    bus_wait_time: int = 0


@dataclass(frozen=True)
class EdgeInfo:
    """One step of a journey: a wait (quality 0) or a ride over ``quality`` spans."""

    name: str
    quality: int
    weight: float


@dataclass(frozen=True)
class RouteResult:
    """A journey, or ``route`` of ``None`` when there is none, with its steps by edge id."""

    route: RouteInfo | None
    edges: dict[int, EdgeInfo] = field(default_factory=dict)


class TransportRouter:
    """Builds the journey graph of a catalogue and answers route queries."""

    def __init__(self, catalogue: Catalogue, settings: RoutingSettings) -> None:
        self.settings = settings
        self._stop_ids: dict[str, int] = {}
        self._graph = self._build_graph(catalogue)
        self._router = Router(self._graph)

    def _build_graph(self, catalogue: Catalogue) -> DirectedWeightedGraph:
        stops = catalogue.sorted_stops()
        graph = DirectedWeightedGraph(len(stops) * 2)
        for index, stop in enumerate(stops.values()):
            vertex = index * 2
            self._stop_ids[stop.name] = vertex
            graph.add_edge(
                Edge(stop.name, 0, vertex, vertex + 1, float(self.settings.bus_wait_time))
            )

        speed = self.settings.bus_velocity * (_DISTANCE_COEF / _TIME_COEF)
        for bus in catalogue.sorted_buses().values():
            route = bus.stops
            for i, stop_from in enumerate(route):
                forward = 0
                backward = 0
                for j in range(i + 1, len(route)):
                    stop_to = route[j]
                    forward += catalogue.distance(route[j - 1], stop_to)
                    backward += catalogue.distance(stop_to, route[j - 1])
                    graph.add_edge(
                        Edge(
                            bus.number,
                            j - i,
                            self._stop_ids[stop_from.name] + 1,
                            self._stop_ids[stop_to.name],
                            forward / speed,
                        )
                    )
                    if not bus.is_circle:
                        graph.add_edge(
                            Edge(
                                bus.number,
                                j - i,
                                self._stop_ids[stop_to.name] + 1,
                                self._stop_ids[stop_from.name],
                                backward / speed,
                            )
                        )
        return graph

    def find_route(self, start: str, finish: str) -> RouteResult:
        """Return the fastest journey between two stops; ``KeyError`` for unknown stops."""
        route = self._router.build_route(self._stop_ids[start], self._stop_ids[finish])
        edges: dict[int, EdgeInfo] = {}
        if route is not None:
            for edge_id in route.edges:
                edge = self._graph.edge(edge_id)
                edges[edge_id] = EdgeInfo(edge.name, edge.quality, edge.weight)
        return RouteResult(route, edges)