"""Storage of stops, bus routes and road distances between stops."""

from __future__ import annotations

from collections.abc import Iterable

from transitmap.domain import Bus, Stop
from transitmap.geo import Coordinates


class Catalogue:
    """Keeps stops and buses by name and road distances between stops."""

    def __init__(self) -> None:
        self._stops: list[Stop] = []
        self._buses: list[Bus] = []
        self._stop_by_name: dict[str, Stop] = {}
        self._bus_by_number: dict[str, Bus] = {}
        self._distances: dict[tuple[Stop, Stop], int] = {}

    def add_stop(self, name: str, coordinates: Coordinates) -> Stop:
        """Add a stop and return it."""
        stop = Stop(name, coordinates)
        self._stops.append(stop)
        self._stop_by_name[name] = stop
        return stop

    def add_route(self, number: str, stops: Iterable[Stop], is_circle: bool) -> Bus:
        """Add a bus route and register the bus at every stop it serves."""
        bus = Bus(number, list(stops), is_circle)
        self._buses.append(bus)
        self._bus_by_number[number] = bus
        served = {stop.name for stop in bus.stops}
        for stop in self._stops:
            if stop.name in served:
                stop.buses.add(number)
        return bus

    def find_route(self, number: str) -> Bus | None:
        """Return the bus with the given number, or ``None``."""
        return self._bus_by_number.get(number)

    def find_stop(self, name: str) -> Stop | None:
        """Return the stop with the given name, or ``None``."""
        return self._stop_by_name.get(name)

    def unique_stops_count(self, number: str) -> int:
        """Return how many distinct stops a bus serves; ``KeyError`` if unknown."""
        return len({stop.name for stop in self._bus_by_number[number].stops})

    def set_distance(self, start: Stop, finish: Stop, distance: int) -> None:
        """Set the road distance from one stop to another."""
        self._distances[(start, finish)] = distance

    def distance(self, start: Stop, finish: Stop) -> int:
        """Return the road distance, falling back to the reverse direction, else 0."""
        if (start, finish) in self._distances:
            return self._distances[(start, finish)]
        return self._distances.get((finish, start), 0)

    def sorted_buses(self) -> dict[str, Bus]:
        """Return all buses keyed by number, in sorted order."""
        return dict(sorted(self._bus_by_number.items()))

    def sorted_stops(self) -> dict[str, Stop]:
        """Return all stops keyed by name, in sorted order."""
        return dict(sorted(self._stop_by_name.items()))