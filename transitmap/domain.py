"""Core records of the transport catalogue."""

from __future__ import annotations

from dataclasses import dataclass, field

from transitmap.geo import Coordinates


@dataclass(eq=False)
class Stop:
    """A named stop; ``buses`` holds the numbers of buses that serve it."""

    name: str
    coordinates: Coordinates
    buses: set[str] = field(default_factory=set)


@dataclass(eq=False)
class Bus:
    """A bus route through an ordered list of stops."""

    number: str
    stops: list[Stop] = field(default_factory=list)
    is_circle: bool = False


@dataclass(frozen=True)
class BusStat:
    """Summary statistics of a bus route."""

    stops_count: int
    unique_stops_count: int
    route_length: float
    curvature: float