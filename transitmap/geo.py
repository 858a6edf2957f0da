"""Geographic coordinates and great-circle distances."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS = 6_371_000
_DEGREE = 3.1415926535 / 180.0


@dataclass(frozen=True)
class Coordinates:
    """A point on the Earth's surface in degrees."""

    lat: float
    lng: float


def compute_distance(start: Coordinates, end: Coordinates) -> float:
    """Return the great-circle distance in metres between two points."""
    if start == end:
        return 0.0
    cosine = (
        math.sin(start.lat * _DEGREE) * math.sin(end.lat * _DEGREE)
        + math.cos(start.lat * _DEGREE)
        * math.cos(end.lat * _DEGREE)
        * math.cos(abs(start.lng - end.lng) * _DEGREE)
    )
    cosine = max(-1.0, min(1.0, cosine))
    return math.acos(cosine) * EARTH_RADIUS