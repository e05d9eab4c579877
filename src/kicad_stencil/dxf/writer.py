"""Plain-text DXF serialization.

Every function returns the text of one document block as group code /
value line pairs. Nothing is accumulated between calls, so the same entity
always serializes to the same bytes.

Document layout::

    header(use_metric)
    render(entity) ...
    trailer()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .entities import Arc, Circle, Entity, Line, Polyline, Text

ACAD_VERSION = "AC1015"


def _num(value: float) -> str:
    s = f"{value:.6f}"
    # Avoid writing negative zero
    return "0.000000" if s == "-0.000000" else s


def _pairs(pairs: Iterable[tuple[int, Any]]) -> str:
    return "".join(f"{code}\n{value}\n" for code, value in pairs)


def _string(value: str) -> str:
    # a value must stay on one line or every following pair shifts
    return " ".join(value.splitlines())


def _common(kind: str, layer: str, color: int) -> list[tuple[int, Any]]:
    return [(0, kind), (8, layer), (62, color)]


def header(use_metric: bool) -> str:
    """Header section with the measurement code, then the ENTITIES opener.

    ``$MEASUREMENT`` is 1 for metric documents and 0 for inch documents.
    """
    return _pairs(
        [
            (0, "SECTION"),
            (2, "HEADER"),
            (9, "$ACADVER"),
            (1, ACAD_VERSION),
            (9, "$MEASUREMENT"),
            (70, 1 if use_metric else 0),
            (9, "$INSUNITS"),
            (70, 4 if use_metric else 1),
            (0, "ENDSEC"),
            (0, "SECTION"),
            (2, "ENTITIES"),
        ]
    )


def trailer() -> str:
    return _pairs([(0, "ENDSEC"), (0, "EOF")])


def polyline(entity: Polyline) -> str:
    pairs = _common("LWPOLYLINE", entity.layer, entity.color)
    pairs += [(90, entity.point_count), (70, 1 if entity.closed else 0)]
    for x, y in entity.points:
        pairs += [(10, _num(x)), (20, _num(y))]
    return _pairs(pairs)


def line(entity: Line) -> str:
    pairs = _common("LINE", entity.layer, entity.color)
    pairs += [
        (10, _num(entity.x1)),
        (20, _num(entity.y1)),
        (11, _num(entity.x2)),
        (21, _num(entity.y2)),
    ]
    return _pairs(pairs)


def text(entity: Text) -> str:
    pairs = _common("TEXT", entity.layer, entity.color)
    pairs += [
        (10, _num(entity.x)),
        (20, _num(entity.y)),
        (40, _num(entity.height)),
        (1, _string(entity.value)),
    ]
    return _pairs(pairs)


def arc(entity: Arc) -> str:
    pairs = _common("ARC", entity.layer, entity.color)
    pairs += [
        (10, _num(entity.cx)),
        (20, _num(entity.cy)),
        (40, _num(entity.radius)),
        (50, _num(entity.start_angle)),
        (51, _num(entity.end_angle)),
    ]
    return _pairs(pairs)


def circle(entity: Circle) -> str:
    pairs = _common("CIRCLE", entity.layer, entity.color)
    pairs += [(10, _num(entity.cx)), (20, _num(entity.cy)), (40, _num(entity.radius))]
    return _pairs(pairs)


_FORMATTERS: dict[type, Callable[[Any], str]] = {
    Polyline: polyline,
    Line: line,
    Text: text,
    Arc: arc,
    Circle: circle,
}


def render(entity: Entity) -> str:
    """Serialize any entity kind.

    Raises:
        TypeError: If the object is not a known entity.
    """
    formatter = _FORMATTERS.get(type(entity))
    if formatter is None:
        raise TypeError(f"Unsupported DXF entity: {type(entity).__name__}")
    return formatter(entity)
