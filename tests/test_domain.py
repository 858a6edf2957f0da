from transitmap.domain import Bus, BusStat, Stop
from transitmap.geo import Coordinates


def test_stop_buses_default_to_independent_empty_sets():
    first = Stop("A", Coordinates(1.0, 2.0))
    second = Stop("B", Coordinates(3.0, 4.0))
    first.buses.add("750")
    assert first.buses == {"750"}
    assert second.buses == set()


def test_stops_are_distinct_by_identity():
    first = Stop("A", Coordinates(1.0, 2.0))
    second = Stop("A", Coordinates(1.0, 2.0))
    table = {(first, second): 10, (second, first): 20}
    assert table[(first, second)] == 10
    assert table[(second, first)] == 20
    assert first != second


def test_bus_keeps_stop_order():
    a = Stop("A", Coordinates(0.0, 0.0))
    b = Stop("B", Coordinates(0.0, 1.0))
    bus = Bus("256", [b, a, b], True)
    assert [stop.name for stop in bus.stops] == ["B", "A", "B"]
    assert bus.is_circle is True


def test_bus_stat_fields():
    stat = BusStat(stops_count=5, unique_stops_count=3, route_length=4371.0, curvature=1.5)
    assert stat.stops_count == 5
    assert stat.unique_stops_count == 3
    assert stat.route_length == 4371.0
    assert stat == BusStat(5, 3, 4371.0, 1.5)