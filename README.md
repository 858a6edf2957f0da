# transitmap

A catalogue of bus stops and routes that answers questions about them. You give it
one JSON document describing stops, buses, map styling and routing settings,
together with a list of queries. It replies with a JSON array of answers.

Four kinds of query are supported:

- **Bus**: number of stops, number of unique stops, road length and curvature of a route.
- **Stop**: the numbers of the buses that call at a stop, in sorted order.
- **Map**: an SVG drawing of every route, with labels for buses and stops.
- **Route**: the fastest journey between two stops. It counts the time spent waiting
  at stops and the time spent riding.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The `transitmap` command reads the request document on standard input. It writes
the answers to standard output:

```
transitmap < requests.json > answers.json
```

A request document looks like this:

```json
{
  "base_requests": [
    {"type": "Stop", "name": "Harbour", "latitude": 55.611087, "longitude": 37.20829,
     "road_distances": {"Market": 3900}},
    {"type": "Stop", "name": "Market", "latitude": 55.595884, "longitude": 37.209755,
     "road_distances": {}},
    {"type": "Bus", "name": "114", "stops": ["Harbour", "Market"], "is_roundtrip": false}
  ],
  "render_settings": {
    "width": 600, "height": 400, "padding": 50,
    "stop_radius": 5, "line_width": 14,
    "bus_label_font_size": 20, "bus_label_offset": [7, 15],
    "stop_label_font_size": 20, "stop_label_offset": [7, -3],
    "underlayer_color": [255, 255, 255, 0.85], "underlayer_width": 3,
    "color_palette": ["green", [255, 160, 0], "red"]
  },
  "routing_settings": {"bus_wait_time": 6, "bus_velocity": 40},
  "stat_requests": [
    {"id": 1, "type": "Bus", "name": "114"},
    {"id": 2, "type": "Stop", "name": "Market"},
    {"id": 3, "type": "Route", "from": "Harbour", "to": "Market"},
    {"id": 4, "type": "Map"}
  ]
}
```

### Sections of the request document

- `base_requests`, `render_settings`, `routing_settings` and `stat_requests` must all
  be present for the command to run.
- Every `Stop` entry needs `name`, `latitude`, `longitude` and `road_distances`.
- Every `Bus` entry needs `name`, `stops` and `is_roundtrip`. All of its stops must
  be declared as `Stop` entries.
- A non-roundtrip bus runs its stops forward and then back again.
- Colours are either a name string, `[r, g, b]` or `[r, g, b, opacity]`.
- Queries of an unknown `type` are skipped without an answer.

### Answers

Every answer carries the `request_id` of its query. Each of the following gives
`{"request_id": ..., "error_message": "not found"}`:

- a `Bus` query for an unknown bus;
- a `Stop` query for an unknown stop;
- a `Route` query between known stops with no journey between them.

A `Route` query that names a stop the catalogue does not know is not answered.
It raises `KeyError` instead.

Road distances need only be given in one direction. When the reverse direction is
missing, the same distance is used both ways. Bus velocity is in km/h and wait
time is in minutes. Journey times are reported in minutes.

The output is indented by four spaces per level, with dictionary keys in sorted
order. Floating-point numbers are written with six significant digits.

## Library use

The pieces can also be used on their own:

- `transitmap.geo`: `Coordinates` and `compute_distance`, the great-circle distance
  in metres.
- `transitmap.json_format`: `loads`, `load`, `dumps` and `dump` for the JSON dialect
  the program uses. Values are plain Python `dict`, `list`, `str`, `int`, `float`,
  `bool` and `None`. Malformed input raises `ParsingError`.
- `transitmap.json_builder.Builder`: builds values step by step with `start_dict`,
  `key`, `value`, `end_dict`, `start_array`, `end_array` and `build`. Misuse raises
  `RuntimeError`.
- `transitmap.transport_catalogue.Catalogue`: stores stops, routes and road distances.
- `transitmap.graph` and `transitmap.router`: a directed weighted graph, and an
  all-pairs shortest-route `Router` over it.
- `transitmap.transport_router.TransportRouter`: finds the fastest journey between
  two stops of a catalogue, according to `RoutingSettings`.
- `transitmap.svg`: `Circle`, `Polyline`, `Text` and `Document` for writing SVG text.
- `transitmap.map_renderer.MapRenderer`: draws the routes of a catalogue as a
  `transitmap.svg.Document`, styled by `RenderSettings`.
- `transitmap.request_handler.RequestHandler` and `transitmap.json_reader.JsonReader`
  connect all of the above to the JSON request format.

```python
from transitmap.geo import Coordinates
from transitmap.transport_catalogue import Catalogue

catalogue = Catalogue()
harbour = catalogue.add_stop("Harbour", Coordinates(55.611087, 37.20829))
market = catalogue.add_stop("Market", Coordinates(55.595884, 37.209755))
catalogue.set_distance(harbour, market, 3900)
catalogue.add_route("114", [harbour, market], False)
print(catalogue.distance(market, harbour))  # 3900
```

## What it does not do

- The catalogue lives only in memory, for one run. Nothing is saved between runs.
- Input is not validated beyond what is needed to read it. A missing field or a
  value of the wrong type ends the command with a Python exception, not with a
  friendly message.
- A `Map` query with an empty `color_palette` raises `ValueError`.