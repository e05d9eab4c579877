"""DXF entity model and text serializer."""

from .entities import Arc, Circle, Entity, Line, Polyline, Text
from .writer import arc, circle, header, line, polyline, render, text, trailer

__all__ = [
    "Arc",
    "Circle",
    "Entity",
    "Line",
    "Polyline",
    "Text",
    "arc",
    "circle",
    "header",
    "line",
    "polyline",
    "render",
    "text",
    "trailer",
]
