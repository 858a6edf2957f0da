"""Transport catalogue with route statistics, journey routing and SVG maps."""

__version__ = "0.1.0"