"""Typed data models for paste pads on a board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..constants import BOTTOM_SUFFIX, TOP_SUFFIX


class Side(str, Enum):
    """Physical board face a stencil is cut for."""

    TOP = "top"
    BOTTOM = "bottom"

    @property
    def suffix(self) -> str:
        """File name suffix of the stencil document for this side."""
        return TOP_SUFFIX if self is Side.TOP else BOTTOM_SUFFIX

    @property
    def paste_layer(self) -> str:
        return "F.Paste" if self is Side.TOP else "B.Paste"


@dataclass(frozen=True)
class StencilPad:
    """Paste opening of one pad, in mm with the y axis pointing up.

    ``dx``/``dy`` are half-extents of the opening before any shrink is
    applied. ``angle`` is in degrees, ``roundness`` in percent (0-100).
    """

    reference: str
    name: str
    x: float
    y: float
    dx: float
    dy: float
    angle: float = 0.0
    roundness: float = 0.0
    top: bool = True
    bottom: bool = False

    def on_side(self, side: Side) -> bool:
        return self.top if side is Side.TOP else self.bottom

    @property
    def label(self) -> str:
        return f"{self.reference}.{self.name}"

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "reference": self.reference,
            "pad": self.name,
            "position": {"x": self.x, "y": self.y},
            "half_size": {"dx": self.dx, "dy": self.dy},
            "sides": [s.value for s in Side if self.on_side(s)],
        }
        if self.angle != 0.0:
            d["angle"] = self.angle
        if self.roundness != 0.0:
            d["roundness"] = self.roundness
        return d
