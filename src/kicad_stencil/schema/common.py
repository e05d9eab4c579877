"""Common typed data models shared across the stencil pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Position:
    """2D position in board coordinates (mm)."""

    x: float
    y: float
    angle: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"x": self.x, "y": self.y}
        if self.angle != 0.0:
            d["angle"] = self.angle
        return d

