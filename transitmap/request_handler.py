"""Answers to queries about buses, stops, journeys and the map."""

from __future__ import annotations

import math
from itertools import pairwise

from transitmap import svg
from transitmap.domain import BusStat
from transitmap.geo import compute_distance
from transitmap.map_renderer import MapRenderer
from transitmap.transport_catalogue import Catalogue
from transitmap.transport_router import RouteResult, TransportRouter


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator)


class RequestHandler:
    """Combines the catalogue, the map renderer and the router behind one interface."""

    def __init__(
        self, catalogue: Catalogue, renderer: MapRenderer, router: TransportRouter
    ) -> None:
        self._catalogue = catalogue
        self._renderer = renderer
        self._router = router

    def bus_stat(self, number: str) -> BusStat:
        """Return the statistics of a bus route; ``KeyError`` if the bus is unknown."""
        bus = self._catalogue.find_route(number)
        if bus is None:
            raise KeyError(f"bus not found: {number}")

        stops = bus.stops
        if bus.is_circle:
            stops_count = len(stops)
        else:
            stops_count = 2 * len(stops) - 1 if stops else 0

        route_length = 0
        geographic_length = 0.0
        for start, finish in pairwise(stops):
            straight = compute_distance(start.coordinates, finish.coordinates)
            if bus.is_circle:
                route_length += self._catalogue.distance(start, finish)
                geographic_length += straight
            else:
                route_length += self._catalogue.distance(
                    start, finish
                ) + self._catalogue.distance(finish, start)
                geographic_length += straight * 2

        return BusStat(
            stops_count=stops_count,
            unique_stops_count=self._catalogue.unique_stops_count(number),
            route_length=float(route_length),
            curvature=_ratio(route_length, geographic_length),
        )

    def buses_by_stop(self, name: str) -> list[str]:
        """Return the sorted numbers of buses serving a stop; ``KeyError`` if unknown."""
        stop = self._catalogue.find_stop(name)
        if stop is None:
            raise KeyError(f"stop not found: {name}")
        return sorted(stop.buses)

    def has_bus(self, number: str) -> bool:
        """Return whether a bus with this number exists."""
        return self._catalogue.find_route(number) is not None

    def has_stop(self, name: str) -> bool:
        """Return whether a stop with this name exists."""
        return self._catalogue.find_stop(name) is not None

    def optimal_route(self, start: str, finish: str) -> RouteResult:
        """Return the fastest journey between two stops."""
        return self._router.find_route(start, finish)

    def render_map(self) -> svg.Document:
        """Return the map of all buses."""
        return self._renderer.render(self._catalogue.sorted_buses())