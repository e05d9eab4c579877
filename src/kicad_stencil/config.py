"""Stencil run configuration.

One immutable ``StencilConfig`` is built before any geometry runs and is
passed explicitly to every component. Lengths are stored in mm; the unit
only affects what is written to the DXF documents.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from .constants import (
    FRAME_HEIGHT,
    FRAME_KERF,
    FRAME_WIDTH,
    MIN_CORNER_RADIUS,
    MITRE_LENGTH,
    SHRINK_WIDTH,
)


class Unit(str, Enum):
    """Output unit system."""

    MM = "mm"
    INCH = "inch"

    @property
    def scale(self) -> float:
        """Millimeters per output unit."""
        return 1.0 if self is Unit.MM else 25.4

    @property
    def is_metric(self) -> bool:
        return self is Unit.MM


@dataclass(frozen=True)
class StencilConfig:
    """Options for one stencil run, shared by both layers."""

    unit: Unit = Unit.MM
    corner_cut: bool = True
    cut_times: int = 1
    add_frame: bool = False
    mitre_corners: bool = False
    label_pads: bool = False

    shrink_width: float = SHRINK_WIDTH
    min_corner_radius: float = MIN_CORNER_RADIUS
    frame_width: float = FRAME_WIDTH
    frame_height: float = FRAME_HEIGHT
    frame_kerf: float = FRAME_KERF
    mitre_length: float = MITRE_LENGTH

    def to_output(self, value_mm: float) -> float:
        """Convert a length in mm to the configured output unit."""
        return value_mm / self.unit.scale

    @classmethod
    def from_options(
        cls,
        unit: str = "mm",
        corner_cut: bool = True,
        cut_times: int = 1,
        add_frame: bool = False,
        mitre_corners: bool = False,
        label_pads: bool = False,
        **overrides: float,
    ) -> StencilConfig:
        """Build a config from plain option values.

        Raises:
            ValueError: If the unit is unknown or cut_times is not 1 or 2.
        """
        if cut_times not in (1, 2):
            raise ValueError(f"cut_times must be 1 or 2, got {cut_times}")
        return cls(
            unit=Unit(unit.lower()),
            corner_cut=corner_cut,
            cut_times=cut_times,
            add_frame=add_frame,
            mitre_corners=mitre_corners,
            label_pads=label_pads,
            **overrides,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "unit": self.unit.value,
            "corner_cut": self.corner_cut,
            "cut_times": self.cut_times,
            "add_frame": self.add_frame,
            "mitre_corners": self.mitre_corners,
            "label_pads": self.label_pads,
            "shrink_width_mm": self.shrink_width,
            "min_corner_radius_mm": self.min_corner_radius,
            "frame_width_mm": self.frame_width,
            "frame_height_mm": self.frame_height,
            "frame_kerf_mm": self.frame_kerf,
            "mitre_length_mm": self.mitre_length,
        }


class ConfigSupplier(Protocol):
    """Anything that produces the run configuration once, without blocking."""

    def __call__(self) -> StencilConfig: ...
