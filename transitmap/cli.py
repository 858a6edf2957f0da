"""Command that reads a catalogue with queries on stdin and answers on stdout."""

from __future__ import annotations

import argparse
import sys

from transitmap.json_reader import JsonReader
from transitmap.request_handler import RequestHandler
from transitmap.transport_catalogue import Catalogue
from transitmap.transport_router import TransportRouter


def main(argv: list[str] | None = None) -> int:
    """Read a JSON document from stdin, answer its queries and print the answers."""
    parser = argparse.ArgumentParser(
        prog="transitmap",
        description="Answer transport catalogue queries given as JSON on standard input.",
    )
    parser.parse_args(argv)

    reader = JsonReader(sys.stdin)
    catalogue = Catalogue()
    reader.fill_catalogue(catalogue)

    stat_requests = reader.stat_requests()
    renderer = reader.parse_render_settings(reader.render_settings())
    routing = reader.parse_routing_settings(reader.routing_settings())
    router = TransportRouter(catalogue, routing)

    handler = RequestHandler(catalogue, renderer, router)
    reader.process_requests(stat_requests, handler, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())