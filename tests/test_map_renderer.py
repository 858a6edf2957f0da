import io

import pytest

from transitmap import svg
from transitmap.domain import Bus, Stop
from transitmap.geo import Coordinates
from transitmap.map_renderer import (
    MapRenderer,
    RenderSettings,
    SphereProjector,
    is_zero,
)


def _settings(**overrides):
    values = dict(
        width=200.0,
        height=100.0,
        padding=10.0,
        stop_radius=5.0,
        line_width=14.0,
        bus_label_font_size=20,
        bus_label_offset=svg.Point(7.0, 15.0),
        stop_label_font_size=18,
        stop_label_offset=svg.Point(7.0, -3.0),
        underlayer_color=svg.Rgba(255, 255, 255, 0.85),
        underlayer_width=3.0,
        color_palette=["green", svg.Rgb(255, 160, 0), "red"],
    )
    values.update(overrides)
    return RenderSettings(**values)


@pytest.fixture
def stops():
    return {
        "A": Stop("A", Coordinates(55.0, 37.0)),
        "B": Stop("B", Coordinates(55.1, 37.4)),
        "C": Stop("C", Coordinates(55.2, 37.2)),
    }


def test_is_zero():
    assert is_zero(0.0)
    assert is_zero(1e-7)
    assert not is_zero(1e-5)


def test_empty_projector_maps_to_padding():
    projector = SphereProjector([], 100, 100, 10)
    assert projector(Coordinates(5.0, 5.0)) == svg.Point(10, 10)


def test_projector_keeps_points_inside_area():
    points = [Coordinates(0.0, 0.0), Coordinates(1.0, 1.0)]
    projector = SphereProjector(points, 200, 100, 10)
    corner_low = projector(points[0])
    corner_high = projector(points[1])
    assert corner_low.x == pytest.approx(10)
    assert corner_high.y == pytest.approx(10)
    assert corner_low.y == pytest.approx(90)
    assert corner_high.x <= 190


def test_route_line_of_linear_bus_goes_back(stops):
    bus = Bus("1", [stops["A"], stops["B"], stops["C"]], False)
    projector = SphereProjector([s.coordinates for s in stops.values()], 200, 100, 10)
    (line,) = MapRenderer(_settings()).route_lines({"1": bus}, projector)
    assert len(line.points) == 5
    assert line.points[0] == line.points[-1]
    assert line.points[1] == line.points[3]
    assert line.fill_color == "none"
    assert line.stroke_width == 14.0


def test_route_colors_cycle_and_skip_empty_buses(stops):
    buses = {
        "1": Bus("1", [stops["A"]], True),
        "2": Bus("2", [], True),
        "3": Bus("3", [stops["B"]], True),
        "4": Bus("4", [stops["C"]], True),
        "5": Bus("5", [stops["A"]], True),
    }
    projector = SphereProjector([], 100, 100, 0)
    lines = MapRenderer(_settings()).route_lines(buses, projector)
    assert [line.stroke_color for line in lines] == [
        "green",
        svg.Rgb(255, 160, 0),
        "red",
        "green",
    ]


def test_empty_palette_raises(stops):
    projector = SphereProjector([], 100, 100, 0)
    renderer = MapRenderer(_settings(color_palette=[]))
    with pytest.raises(ValueError):
        renderer.route_lines({"1": Bus("1", [stops["A"]], True)}, projector)


def test_bus_labels_at_both_ends_of_linear_bus(stops):
    bus = Bus("14", [stops["A"], stops["C"]], False)
    projector = SphereProjector([s.coordinates for s in stops.values()], 200, 100, 10)
    labels = MapRenderer(_settings()).bus_labels({"14": bus}, projector)
    assert len(labels) == 4
    assert all(label.data == "14" and label.font_weight == "bold" for label in labels)
    assert labels[0].stroke_color == svg.Rgba(255, 255, 255, 0.85)
    assert labels[1].stroke_color is None
    assert labels[1].fill_color == "green"
    assert labels[0].position == labels[1].position == projector(stops["A"].coordinates)
    assert labels[2].position == labels[3].position == projector(stops["C"].coordinates)


def test_circle_bus_has_single_label_pair(stops):
    bus = Bus("7", [stops["A"], stops["B"], stops["A"]], True)
    projector = SphereProjector([], 100, 100, 0)
    labels = MapRenderer(_settings()).bus_labels({"7": bus}, projector)
    assert len(labels) == 2


def test_stop_symbols_and_labels(stops):
    projector = SphereProjector([s.coordinates for s in stops.values()], 200, 100, 10)
    renderer = MapRenderer(_settings())
    circles = renderer.stop_symbols(stops, projector)
    assert [c.radius for c in circles] == [5.0, 5.0, 5.0]
    assert all(c.fill_color == "white" for c in circles)
    labels = renderer.stop_labels(stops, projector)
    assert [label.data for label in labels] == ["A", "A", "B", "B", "C", "C"]
    assert labels[1].fill_color == "black"
    assert labels[0].stroke_width == 3.0


def test_render_document(stops):
    buses = {
        "1": Bus("1", [stops["B"], stops["A"]], False),
        "2": Bus("2", [], True),
    }
    document = MapRenderer(_settings()).render(buses)
    out = io.StringIO()
    document.render(out)
    text = out.getvalue()
    assert text.startswith('<?xml version="1.0" encoding="UTF-8" ?>')
    assert text.count("<polyline") == 1
    assert text.count("<circle") == 2
    assert text.count("<text") == 4 + 4
    assert text.index(">A</text>") < text.index(">B</text>")