"""Typed data models for paste pads read from KiCad boards."""

from .board import Side, StencilPad
from .common import Position
from .extract import extract_footprint_refs, extract_pad, extract_stencil_pads

__all__ = [
    "Position",
    "Side",
    "StencilPad",
    "extract_footprint_refs",
    "extract_pad",
    "extract_stencil_pads",
]
