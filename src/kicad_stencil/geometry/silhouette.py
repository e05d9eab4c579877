"""Pad silhouettes: the closed outline a plotter cuts for one paste opening.

A silhouette is a rectangle, or an octagon when the pad is rounded and
corner cutting is enabled. Corners are cut in local pad space and the whole
outline is then rotated about the pad center. Vertices run counter-clockwise
in local space, starting at the (+w, +h) corner.

With ``repeat`` > 1 every vertex is emitted several times in a row so the
plotter passes over each edge again; the geometry itself is unchanged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import StencilConfig
    from ..schema import StencilPad

Point = tuple[float, float]


@dataclass(frozen=True)
class Silhouette:
    """Closed cut outline of one pad in board coordinates (mm)."""

    vertices: tuple[Point, ...]
    repeat: int = 1

    @property
    def closed(self) -> bool:
        return True

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def point_count(self) -> int:
        return self.vertex_count * self.repeat + 1

    def points(self) -> list[Point]:
        """Vertices with repeats applied, ending back on the first vertex."""
        pts = [v for v in self.vertices for _ in range(self.repeat)]
        if self.vertices:
            pts.append(self.vertices[0])
        return pts


def corner_radius(w: float, h: float, roundness: float, min_radius: float) -> float:
    """Radius of the corner cut for a pad with half-extents w, h.

    Square pads (roundness 0) get no cut, whatever the minimum radius.
    """
    if roundness <= 0:
        return 0.0
    return max(min(w, h) * roundness / 100.0, min_radius)


def _local_rectangle(w: float, h: float) -> list[Point]:
    return [(w, h), (-w, h), (-w, -h), (w, -h)]


def _local_octagon(w: float, h: float, r: float) -> list[Point]:
    return [
        (w, h - r),
        (w - r, h),
        (-w + r, h),
        (-w, h - r),
        (-w, -h + r),
        (-w + r, -h),
        (w - r, -h),
        (w, -h + r),
    ]


def build_silhouette(
    x: float,
    y: float,
    w: float,
    h: float,
    angle: float,
    roundness: float,
    corner_cut: bool,
    min_radius: float = 0.0,
    repeat: int = 1,
) -> Silhouette:
    """Build the cut outline of a pad.

    Args:
        x: Pad center x.
        y: Pad center y.
        w: Half-width, already shrunk.
        h: Half-height, already shrunk.
        angle: Rotation in radians, counter-clockwise.
        roundness: Corner roundness in percent of min(w, h).
        corner_cut: Replace corners by diagonal cuts when the pad allows it.
        min_radius: Smallest corner cut for a rounded pad.
        repeat: Times each vertex is emitted.

    Returns:
        A 4- or 8-vertex Silhouette. Degenerate sizes give degenerate outlines.
    """
    r = corner_radius(w, h, roundness, min_radius)
    if corner_cut and r > 0 and w > r and h > r:
        local = _local_octagon(w, h, r)
    else:
        local = _local_rectangle(w, h)

    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    vertices = tuple((x + lx * cos_a - ly * sin_a, y + lx * sin_a + ly * cos_a) for lx, ly in local)
    return Silhouette(vertices=vertices, repeat=repeat)


def pad_silhouette(pad: StencilPad, config: StencilConfig) -> tuple[Silhouette, float, float]:
    """Silhouette of a pad with the configured shrink applied.

    Returns the silhouette and the shrunk half-extents used for it.
    """
    w = pad.dx - config.shrink_width
    h = pad.dy - config.shrink_width
    silhouette = build_silhouette(
        pad.x,
        pad.y,
        w,
        h,
        math.radians(pad.angle),
        pad.roundness,
        config.corner_cut,
        config.min_corner_radius,
        config.cut_times,
    )
    return silhouette, w, h
