"""Entity descriptions written to a DXF document.

Coordinates are in output units; converting from mm happens before an
entity is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from ..constants import DXF_COLOR, DXF_LAYER, TEXT_HEIGHT

Point = tuple[float, float]


@dataclass(frozen=True)
class Polyline:
    """Lightweight polyline through ``points``."""

    points: tuple[Point, ...]
    closed: bool = True
    layer: str = DXF_LAYER
    color: int = DXF_COLOR

    @property
    def point_count(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    layer: str = DXF_LAYER
    color: int = DXF_COLOR


@dataclass(frozen=True)
class Text:
    """Single-line text anchored at its insertion point."""

    x: float
    y: float
    value: str
    height: float = TEXT_HEIGHT
    layer: str = DXF_LAYER
    color: int = DXF_COLOR


@dataclass(frozen=True)
class Arc:
    """Counter-clockwise arc, angles in degrees."""

    cx: float
    cy: float
    radius: float
    start_angle: float
    end_angle: float
    layer: str = DXF_LAYER
    color: int = DXF_COLOR


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    radius: float
    layer: str = DXF_LAYER
    color: int = DXF_COLOR


Entity = Polyline | Line | Text | Arc | Circle
