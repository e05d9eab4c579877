"""Stencil geometry: pad silhouettes, bounding box, frame."""

from .bbox import BoundingBox, BoundingBoxAccumulator
from .frame import Segment, frame_segments
from .silhouette import Silhouette, build_silhouette, corner_radius, pad_silhouette

__all__ = [
    "BoundingBox",
    "BoundingBoxAccumulator",
    "Segment",
    "Silhouette",
    "build_silhouette",
    "corner_radius",
    "frame_segments",
    "pad_silhouette",
]
