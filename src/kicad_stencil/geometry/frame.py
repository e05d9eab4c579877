"""Border drawn around a stencil so it can be cut out of the sheet."""

from __future__ import annotations

from typing import NamedTuple


class Segment(NamedTuple):
    """Straight cut from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float


def frame_segments(
    cx: float,
    cy: float,
    width: float,
    height: float,
    mitre: bool = False,
    mitre_length: float = 0.0,
) -> list[Segment]:
    """Segments of a width x height frame centered on (cx, cy).

    Without mitre the four sides come bottom, right, top, left. With mitre
    every side is shortened by ``mitre_length`` at both ends and followed by
    the 45 degree cut to the next side, giving eight segments. Mitre lengths
    over half a side are not clamped.
    """
    x0 = cx - width / 2
    x1 = cx + width / 2
    y0 = cy - height / 2
    y1 = cy + height / 2

    if not mitre:
        return [
            Segment(x0, y0, x1, y0),
            Segment(x1, y0, x1, y1),
            Segment(x1, y1, x0, y1),
            Segment(x0, y1, x0, y0),
        ]

    m = mitre_length
    return [
        Segment(x0 + m, y0, x1 - m, y0),
        Segment(x1 - m, y0, x1, y0 + m),
        Segment(x1, y0 + m, x1, y1 - m),
        Segment(x1, y1 - m, x1 - m, y1),
        Segment(x1 - m, y1, x0 + m, y1),
        Segment(x0 + m, y1, x0, y1 - m),
        Segment(x0, y1 - m, x0, y0 + m),
        Segment(x0, y0 + m, x0 + m, y0),
    ]
