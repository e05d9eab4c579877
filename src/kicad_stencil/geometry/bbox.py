"""Running extent of the pads written to one stencil document."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ..schema.common import Position


@dataclass(frozen=True)
class BoundingBox:
    """Finished extent of one stencil layer (mm)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
            "width": self.width,
            "height": self.height,
        }


class BoundingBoxAccumulator:
    """Axis-aligned extent that only ever grows.

    Pads are added by their center and half-extents before rotation, so a
    rotated pad can reach slightly outside the box.
    """

    __slots__ = ("min_x", "min_y", "max_x", "max_y")

    def __init__(self) -> None:
        self.min_x = math.inf
        self.min_y = math.inf
        self.max_x = -math.inf
        self.max_y = -math.inf

    def update(self, x: float, y: float, w: float, h: float) -> None:
        """Widen the box to include [x-w, x+w] x [y-h, y+h]."""
        self.min_x = min(self.min_x, x - w)
        self.min_y = min(self.min_y, y - h)
        self.max_x = max(self.max_x, x + w)
        self.max_y = max(self.max_y, y + h)

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x

    def center(self) -> Position:
        """Middle of the box, or the board origin if nothing was added."""
        if self.is_empty:
            return Position(0.0, 0.0)
        return Position((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def snapshot(self) -> BoundingBox | None:
        if self.is_empty:
            return None
        return BoundingBox(self.min_x, self.min_y, self.max_x, self.max_y)

    def __repr__(self) -> str:
        return (
            f"BoundingBoxAccumulator(min=({self.min_x}, {self.min_y}), "
            f"max=({self.max_x}, {self.max_y}))"
        )
