"""A small SVG document model with a fixed text layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Protocol, Union

_INDENT = 2


@dataclass(frozen=True)
class Rgb:
    """An opaque colour given by its red, green and blue components."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass(frozen=True)
class Rgba(Rgb):
    """A colour with an opacity between 0 and 1."""

    opacity: float = 1.0


Color = Union[None, str, Rgb, Rgba]


def _number(value: float) -> str:
    return format(value, "g")


def format_color(color: Color) -> str:
    """Return the SVG text of a colour; ``None`` stands for no colour."""
    if color is None:
        return "none"
    if isinstance(color, str):
        return color
    if isinstance(color, Rgba):
        return (
            f"rgba({int(color.red)},{int(color.green)},{int(color.blue)},"
            f"{_number(color.opacity)})"
        )
    if isinstance(color, Rgb):
        return f"rgb({int(color.red)},{int(color.green)},{int(color.blue)})"
    raise TypeError(f"not a colour: {color!r}")


class StrokeLineCap(Enum):
    """Shapes used at the ends of open strokes."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    def __str__(self) -> str:
        return self.value


class StrokeLineJoin(Enum):
    """Shapes used at the corners of strokes."""

    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Point:
    """A point on the drawing plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(kw_only=True)
class _PathProps:
    """Stroke and fill attributes shared by all shapes; ``None`` means unset."""

    fill_color: Color | str | None = None
    stroke_color: Color | str | None = None
    stroke_width: float | None = None
    stroke_line_cap: StrokeLineCap | None = None
    stroke_line_join: StrokeLineJoin | None = None

    def _attributes(self) -> str:
        parts = []
        if self.fill_color is not None:
            parts.append(f' fill="{format_color(self.fill_color)}"')
        if self.stroke_color is not None:
            parts.append(f' stroke="{format_color(self.stroke_color)}"')
        if self.stroke_width is not None:
            parts.append(f' stroke-width="{_number(self.stroke_width)}"')
        if self.stroke_line_cap is not None:
            parts.append(f' stroke-linecap="{self.stroke_line_cap}"')
        if self.stroke_line_join is not None:
            parts.append(f' stroke-linejoin="{self.stroke_line_join}"')
        return "".join(parts)


@dataclass
class Circle(_PathProps):
    """A circle given by its centre and radius."""

    center: Point = field(default_factory=Point)
    radius: float = 1.0

    def markup(self) -> str:
        """Return the element's SVG text."""
        return (
            f'<circle cx="{_number(self.center.x)}" cy="{_number(self.center.y)}" '
            f'r="{_number(self.radius)}"{self._attributes()}/>'
        )


@dataclass
class Polyline(_PathProps):
    """An open line through a sequence of points."""

    points: list[Point] = field(default_factory=list)

    def add_point(self, point: Point) -> Polyline:
        """Append a point and return the line."""
        self.points.append(point)
        return self

    def markup(self) -> str:
        """Return the element's SVG text."""
        points = " ".join(f"{_number(p.x)},{_number(p.y)}" for p in self.points)
        return f'<polyline points="{points}"{self._attributes()}/>'


@dataclass
class Text(_PathProps):
    """A text label placed at a position with an offset."""

    position: Point = field(default_factory=Point)
    offset: Point = field(default_factory=Point)
    font_size: int = 1
    font_family: str = ""
    font_weight: str = ""
    data: str = ""

    def markup(self) -> str:
        """Return the element's SVG text."""
        parts = [
            "<text",
            self._attributes(),
            f' x="{_number(self.position.x)}" y="{_number(self.position.y)}" ',
            f'dx="{_number(self.offset.x)}" dy="{_number(self.offset.y)}" ',
            f'font-size="{int(self.font_size)}"',
        ]
        if self.font_family:
            parts.append(f' font-family="{self.font_family}" ')
        if self.font_weight:
            parts.append(f'font-weight="{self.font_weight}"')
        parts.append(f">{self.data}</text>")
        return "".join(parts)


class _Shape(Protocol):
    def markup(self) -> str: ...


class Document:
    """An ordered collection of shapes rendered as one SVG image."""

    def __init__(self) -> None:
        self.objects: list[_Shape] = []

    def add(self, obj: _Shape) -> None:
        """Append a shape to the document."""
        self.objects.append(obj)

    def render(self, output: IO[str]) -> None:
        """Write the whole document as SVG text to a text stream."""
        output.write('<?xml version="1.0" encoding="UTF-8" ?>\n')
        output.write('<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n')
        indent = " " * _INDENT
        for obj in self.objects:
            output.write(f"{indent}{obj.markup()}\n")
        output.write("</svg>")