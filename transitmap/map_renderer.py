"""Drawing the route map of a catalogue as an SVG document."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from transitmap import svg
from transitmap.domain import Bus, Stop
from transitmap.geo import Coordinates

EPSILON = 1e-6
_FONT_FAMILY = "Verdana"


def is_zero(value: float) -> bool:
    """Return whether a value is within ``EPSILON`` of zero."""
    return abs(value) < EPSILON


class SphereProjector:
    """Projects geographic coordinates onto a padded drawing area."""

    def __init__(
        self,
        points: Iterable[Coordinates],
        max_width: float,
        max_height: float,
        padding: float,
    ) -> None:
        self._padding = padding
        self._min_lon = 0.0
        self._max_lat = 0.0
        self._zoom = 0.0
        points = list(points)
        if not points:
            return

        self._min_lon = min(p.lng for p in points)
        max_lon = max(p.lng for p in points)
        min_lat = min(p.lat for p in points)
        self._max_lat = max(p.lat for p in points)

        zooms = []
        if not is_zero(max_lon - self._min_lon):
            zooms.append((max_width - 2 * padding) / (max_lon - self._min_lon))
        if not is_zero(self._max_lat - min_lat):
            zooms.append((max_height - 2 * padding) / (self._max_lat - min_lat))
        if zooms:
            self._zoom = min(zooms)

    def __call__(self, coords: Coordinates) -> svg.Point:
        return svg.Point(
            (coords.lng - self._min_lon) * self._zoom + self._padding,
            (self._max_lat - coords.lat) * self._zoom + self._padding,
        )


@dataclass
class RenderSettings:
    """Sizes, offsets and colours used to draw the map."""

    width: float = 0.0
    height: float = 0.0
    padding: float = 0.0
    stop_radius: float = 0.0
    line_width: float = 0.0
    bus_label_font_size: int = 0
    bus_label_offset: svg.Point = field(default_factory=svg.Point)
    stop_label_font_size: int = 0
    stop_label_offset: svg.Point = field(default_factory=svg.Point)
    underlayer_color: svg.Color = "none"
    underlayer_width: float = 0.0
    color_palette: list[svg.Color] = field(default_factory=list)


def _explicit(color: svg.Color) -> svg.Color:
    return "none" if color is None else color


class MapRenderer:
    """Turns buses and stops into SVG shapes according to the settings."""

    def __init__(self, settings: RenderSettings) -> None:
        self.settings = settings

    def _palette_color(self, index: int) -> svg.Color:
        palette = self.settings.color_palette
        if not palette:
            raise ValueError("color palette is empty")
        return _explicit(palette[index % len(palette)])

    def _underlayer(self, text: svg.Text) -> svg.Text:
        color = _explicit(self.settings.underlayer_color)
        return dataclasses.replace(
            text,
            fill_color=color,
            stroke_color=color,
            stroke_width=self.settings.underlayer_width,
            stroke_line_cap=svg.StrokeLineCap.ROUND,
            stroke_line_join=svg.StrokeLineJoin.ROUND,
        )

    def route_lines(
        self, buses: Mapping[str, Bus], projector: SphereProjector
    ) -> list[svg.Polyline]:
        """Return one line per bus with stops, coloured from the palette in turn."""
        lines = []
        drawn = 0
        for bus in buses.values():
            if not bus.stops:
                continue
            route = list(bus.stops)
            if not bus.is_circle:
                route.extend(reversed(bus.stops[:-1]))
            lines.append(
                svg.Polyline(
                    points=[projector(stop.coordinates) for stop in route],
                    stroke_color=self._palette_color(drawn),
                    fill_color="none",
                    stroke_width=self.settings.line_width,
                    stroke_line_cap=svg.StrokeLineCap.ROUND,
                    stroke_line_join=svg.StrokeLineJoin.ROUND,
                )
            )
            drawn += 1
        return lines

    def bus_labels(
        self, buses: Mapping[str, Bus], projector: SphereProjector
    ) -> list[svg.Text]:
        """Return bus number labels at the route ends, each after its underlayer."""
        labels = []
        drawn = 0
        for bus in buses.values():
            if not bus.stops:
                continue
            first, last = bus.stops[0], bus.stops[-1]
            text = svg.Text(
                position=projector(first.coordinates),
                offset=self.settings.bus_label_offset,
                font_size=self.settings.bus_label_font_size,
                font_family=_FONT_FAMILY,
                font_weight="bold",
                data=bus.number,
                fill_color=self._palette_color(drawn),
            )
            drawn += 1
            underlayer = self._underlayer(text)
            labels += [underlayer, text]
            if not bus.is_circle and first is not last:
                end = projector(last.coordinates)
                labels += [
                    dataclasses.replace(underlayer, position=end),
                    dataclasses.replace(text, position=end),
                ]
        return labels

    def stop_symbols(
        self, stops: Mapping[str, Stop], projector: SphereProjector
    ) -> list[svg.Circle]:
        """Return a white circle for every stop."""
        return [
            svg.Circle(
                center=projector(stop.coordinates),
                radius=self.settings.stop_radius,
                fill_color="white",
            )
            for stop in stops.values()
        ]

    def stop_labels(
        self, stops: Mapping[str, Stop], projector: SphereProjector
    ) -> list[svg.Text]:
        """Return the name label of every stop, each after its underlayer."""
        labels = []
        for stop in stops.values():
            text = svg.Text(
                position=projector(stop.coordinates),
                offset=self.settings.stop_label_offset,
                font_size=self.settings.stop_label_font_size,
                font_family=_FONT_FAMILY,
                data=stop.name,
                fill_color="black",
            )
            labels += [self._underlayer(text), text]
        return labels

    def render(self, buses: Mapping[str, Bus]) -> svg.Document:
        """Return the whole map of the given buses and the stops they serve."""
        coords = []
        stops: dict[str, Stop] = {}
        for bus in buses.values():
            for stop in bus.stops:
                coords.append(stop.coordinates)
                stops[stop.name] = stop
        stops = dict(sorted(stops.items()))

        s = self.settings
        projector = SphereProjector(coords, s.width, s.height, s.padding)
        document = svg.Document()
        for shape in (
            *self.route_lines(buses, projector),
            *self.bus_labels(buses, projector),
            *self.stop_symbols(stops, projector),
            *self.stop_labels(stops, projector),
        ):
            document.add(shape)
        return document