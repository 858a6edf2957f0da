"""Reading catalogue data and queries from JSON and writing the answers."""

from __future__ import annotations

import io
import sys
from typing import IO, Any

from transitmap import svg
from transitmap.geo import Coordinates
from transitmap.json_builder import Builder
from transitmap.json_format import dump, load
from transitmap.map_renderer import MapRenderer, RenderSettings
from transitmap.request_handler import RequestHandler
from transitmap.transport_catalogue import Catalogue
from transitmap.transport_router import RoutingSettings

_NOT_FOUND = "not found"


def _as_dict(node: Any) -> dict:
    if not isinstance(node, dict):
        raise TypeError("Not a dict")
    return node


def _as_list(node: Any) -> list:
    if not isinstance(node, list):
        raise TypeError("Not an array")
    return node


def _as_str(node: Any) -> str:
    if not isinstance(node, str):
        raise TypeError("Not a string")
    return node


def _as_bool(node: Any) -> bool:
    if not isinstance(node, bool):
        raise TypeError("Not a bool")
    return node


def _as_int(node: Any) -> int:
    if isinstance(node, bool) or not isinstance(node, int):
        raise TypeError("Not an int")
    return node


def _as_double(node: Any) -> float:
    if isinstance(node, bool) or not isinstance(node, (int, float)):
        raise TypeError("Not a double")
    return float(node)


def _byte(node: Any) -> int:
    return _as_int(node) & 0xFF


def _parse_point(node: Any) -> svg.Point:
    items = _as_list(node)
    return svg.Point(_as_double(items[0]), _as_double(items[1]))


def _parse_color(node: Any, what: str) -> svg.Color:
    if isinstance(node, str):
        return node
    if isinstance(node, list):
        if len(node) == 3:
            return svg.Rgb(_byte(node[0]), _byte(node[1]), _byte(node[2]))
        if len(node) == 4:
            return svg.Rgba(
                _byte(node[0]), _byte(node[1]), _byte(node[2]), _as_double(node[3])
            )
        raise ValueError(f"wrong {what} type")
    raise ValueError(f"wrong {what}")


def _not_found(request_id: int) -> dict:
    return (
        Builder()
        .start_dict()
        .key("request_id").value(request_id)
        .key("error_message").value(_NOT_FOUND)
        .end_dict()
        .build()
    )


class JsonReader:
    """Holds a parsed input document and turns its requests into answers."""

    def __init__(self, input: IO[str]) -> None:
        self._root = load(input)

    def _section(self, name: str) -> Any:
        return _as_dict(self._root).get(name)

    def base_requests(self) -> Any:
        """Return the ``base_requests`` section, or ``None`` if absent."""
        return self._section("base_requests")

    def stat_requests(self) -> Any:
        """Return the ``stat_requests`` section, or ``None`` if absent."""
        return self._section("stat_requests")

    def render_settings(self) -> Any:
        """Return the ``render_settings`` section, or ``None`` if absent."""
        return self._section("render_settings")

    def routing_settings(self) -> Any:
        """Return the ``routing_settings`` section, or ``None`` if absent."""
        return self._section("routing_settings")

    def process_requests(
        self, stat_requests: Any, handler: RequestHandler, output: IO[str] | None = None
    ) -> None:
        """Answer every known request in order and write the answers as JSON."""
        responders = {
            "Stop": self.stop_response,
            "Bus": self.bus_response,
            "Map": self.map_response,
            "Route": self.route_response,
        }
        answers = []
        for request in _as_list(stat_requests):
            request = _as_dict(request)
            responder = responders.get(_as_str(request["type"]))
            if responder is not None:
                answers.append(responder(request, handler))
        dump(answers, sys.stdout if output is None else output)

    @staticmethod
    def _stop_entry(request: dict) -> tuple[str, Coordinates, dict[str, int]]:
        name = _as_str(request["name"])
        coordinates = Coordinates(
            _as_double(request["latitude"]), _as_double(request["longitude"])
        )
        distances = {
            _as_str(to_name): _as_int(distance)
            for to_name, distance in _as_dict(request["road_distances"]).items()
        }
        return name, coordinates, distances

    def fill_catalogue(self, catalogue: Catalogue) -> None:
        """Add all stops, road distances and buses of the base requests."""
        requests = [_as_dict(request) for request in _as_list(self.base_requests())]
        stop_entries = [
            self._stop_entry(request)
            for request in requests
            if _as_str(request["type"]) == "Stop"
        ]
        for name, coordinates, _ in stop_entries:
            catalogue.add_stop(name, coordinates)
        for name, _, distances in stop_entries:
            start = catalogue.find_stop(name)
            for to_name, distance in distances.items():
                finish = catalogue.find_stop(to_name)
                if start is not None and finish is not None:
                    catalogue.set_distance(start, finish, distance)

        for request in requests:
            if _as_str(request["type"]) != "Bus":
                continue
            stops = []
            for stop_name in _as_list(request["stops"]):
                stop = catalogue.find_stop(_as_str(stop_name))
                if stop is None:
                    raise KeyError(f"stop not found: {stop_name}")
                stops.append(stop)
            catalogue.add_route(
                _as_str(request["name"]), stops, _as_bool(request["is_roundtrip"])
            )

    def parse_render_settings(self, settings: Any) -> MapRenderer:
        """Return a map renderer configured by a ``render_settings`` section."""
        data = _as_dict(settings)
        return MapRenderer(
            RenderSettings(
                width=_as_double(data["width"]),
                height=_as_double(data["height"]),
                padding=_as_double(data["padding"]),
                stop_radius=_as_double(data["stop_radius"]),
                line_width=_as_double(data["line_width"]),
                bus_label_font_size=_as_int(data["bus_label_font_size"]),
                bus_label_offset=_parse_point(data["bus_label_offset"]),
                stop_label_font_size=_as_int(data["stop_label_font_size"]),
                stop_label_offset=_parse_point(data["stop_label_offset"]),
                underlayer_color=_parse_color(data["underlayer_color"], "underlayer color"),
                underlayer_width=_as_double(data["underlayer_width"]),
                color_palette=[
                    _parse_color(color, "color_palette")
                    for color in _as_list(data["color_palette"])
                ],
            )
        )

    def parse_routing_settings(self, settings: Any) -> RoutingSettings:
        """Return the routing settings of a ``routing_settings`` section."""
        data = _as_dict(settings)
        return RoutingSettings(
            bus_velocity=_as_double(data["bus_velocity"]),
            bus_wait_time=_as_int(data["bus_wait_time"]),
        )

    def stop_response(self, request: dict, handler: RequestHandler) -> dict:
        """Return the answer to a ``Stop`` request."""
        name = _as_str(request["name"])
        request_id = _as_int(request["id"])
        if not handler.has_stop(name):
            return _not_found(request_id)
        return (
            Builder()
            .start_dict()
            .key("request_id").value(request_id)
            .key("buses").value(handler.buses_by_stop(name))
            .end_dict()
            .build()
        )

    def bus_response(self, request: dict, handler: RequestHandler) -> dict:
        """Return the answer to a ``Bus`` request."""
        number = _as_str(request["name"])
        request_id = _as_int(request["id"])
        if not handler.has_bus(number):
            return _not_found(request_id)
        stat = handler.bus_stat(number)
        return (
            Builder()
            .start_dict()
            .key("request_id").value(request_id)
            .key("curvature").value(stat.curvature)
            .key("route_length").value(stat.route_length)
            .key("stop_count").value(stat.stops_count)
            .key("unique_stop_count").value(stat.unique_stops_count)
            .end_dict()
            .build()
        )

    def map_response(self, request: dict, handler: RequestHandler) -> dict:
        """Return the answer to a ``Map`` request with the SVG text of the map."""
        request_id = _as_int(request["id"])
        buffer = io.StringIO()
        handler.render_map().render(buffer)
        return (
            Builder()
            .start_dict()
            .key("request_id").value(request_id)
            .key("map").value(buffer.getvalue())
            .end_dict()
            .build()
        )

    def route_response(self, request: dict, handler: RequestHandler) -> dict:
        """Return the answer to a ``Route`` request with the journey's steps."""
        request_id = _as_int(request["id"])
        result = handler.optimal_route(
            _as_str(request["from"]), _as_str(request["to"])
        )
        if result.route is None:
            return _not_found(request_id)

        items = []
        total_time = 0.0
        for edge_id in result.route.edges:
            edge = result.edges[edge_id]
            if edge.quality == 0:
                item = (
                    Builder()
                    .start_dict()
                    .key("stop_name").value(edge.name)
                    .key("time").value(edge.weight)
                    .key("type").value("Wait")
                    .end_dict()
                    .build()
                )
            else:
                item = (
                    Builder()
                    .start_dict()
                    .key("bus").value(edge.name)
                    .key("span_count").value(int(edge.quality))
                    .key("time").value(edge.weight)
                    .key("type").value("Bus")
                    .end_dict()
                    .build()
                )
            items.append(item)
            total_time += edge.weight

        return (
            Builder()
            .start_dict()
            .key("request_id").value(request_id)
            .key("total_time").value(total_time)
            .key("items").value(items)
            .end_dict()
            .build()
        )