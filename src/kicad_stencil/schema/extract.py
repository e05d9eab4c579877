"""Extract paste pads from parsed KiCad board files.

KiCad stores footprint positions in board coordinates with the y axis
pointing down, and pad positions relative to their footprint. Pads are
returned in absolute board coordinates with the y axis flipped up, which is
what the DXF output uses. Pad angles in board files are already absolute.
"""

from __future__ import annotations

import math

from ..sexp import Document, SExp
from .board import StencilPad
from .common import Position

_FOOTPRINT_NODES = ("footprint", "module")


def _float(val: str | None, default: float = 0.0) -> float:
    if val is None:
        return default
    try:
        return float(val)
    except (ValueError, TypeError):
        return default


def _extract_position(node: SExp | None) -> Position:
    """Extract Position from an (at x y [angle]) node."""
    if node is None:
        return Position(0, 0)
    vals = node.atom_values
    x = _float(vals[0]) if len(vals) > 0 else 0.0
    y = _float(vals[1]) if len(vals) > 1 else 0.0
    angle = _float(vals[2]) if len(vals) > 2 else 0.0
    return Position(x, y, angle)


def _number(node: SExp, key: str) -> float | None:
    child = node.get(key)
    if child is None or child.first_value is None:
        return None
    return _float(child.first_value)


def _roundness(pad_node: SExp, shape: str) -> float:
    """Corner roundness in percent of the smaller half-extent."""
    if shape in ("circle", "oval"):
        return 100.0
    if shape == "roundrect":
        # rratio is relative to the full smaller side, 0.5 being fully round
        ratio = _number(pad_node, "roundrect_rratio")
        return min(100.0, max(0.0, (ratio or 0.0) * 200.0))
    return 0.0


def _paste_sides(layers: list[str]) -> tuple[bool, bool]:
    top = "F.Paste" in layers or "*.Paste" in layers
    bottom = "B.Paste" in layers or "*.Paste" in layers
    return top, bottom


def _reference(fp_node: SExp) -> str:
    for prop in fp_node.find_all("property"):
        vals = prop.atom_values
        if vals and vals[0] == "Reference":
            return vals[1] if len(vals) > 1 else ""
    # Boards saved before KiCad 8 keep the reference in fp_text
    for text in fp_node.find_all("fp_text"):
        vals = text.atom_values
        if vals and vals[0] == "reference":
            return vals[1] if len(vals) > 1 else ""
    return ""


def extract_pad(
    pad_node: SExp,
    origin: Position,
    reference: str = "",
    footprint_margin: float = 0.0,
    footprint_ratio: float = 0.0,
) -> StencilPad | None:
    """Build a StencilPad from a (pad ...) node, or None if it has no paste layer.

    Args:
        pad_node: The pad S-expression.
        origin: Footprint position and rotation in KiCad board coordinates.
        reference: Owning footprint's reference designator.
        footprint_margin: Footprint-level solder paste margin (mm).
        footprint_ratio: Footprint-level solder paste margin ratio.
    """
    vals = pad_node.atom_values
    name = vals[0] if len(vals) > 0 else ""
    shape = vals[2] if len(vals) > 2 else ""

    layers_node = pad_node.get("layers")
    top, bottom = _paste_sides(layers_node.atom_values if layers_node else [])
    if not (top or bottom):
        return None

    local = _extract_position(pad_node.get("at"))
    theta = math.radians(origin.angle)
    # KiCad rotates counter-clockwise on screen with y pointing down
    kx = origin.x + local.x * math.cos(theta) + local.y * math.sin(theta)
    ky = origin.y - local.x * math.sin(theta) + local.y * math.cos(theta)

    size_node = pad_node.get("size")
    size_vals = size_node.atom_values if size_node else []
    width = _float(size_vals[0]) if len(size_vals) > 0 else 0.0
    height = _float(size_vals[1]) if len(size_vals) > 1 else width

    margin = _number(pad_node, "solder_paste_margin")
    ratio = _number(pad_node, "solder_paste_margin_ratio")
    margin = footprint_margin if margin is None else margin
    ratio = footprint_ratio if ratio is None else ratio

    # each side grows by margin + size * ratio, as in KiCad
    dx = max(0.0, width / 2 + width * ratio + margin)
    dy = max(0.0, height / 2 + height * ratio + margin)

    return StencilPad(
        reference=reference,
        name=name,
        x=kx,
        y=-ky,
        dx=dx,
        dy=dy,
        angle=local.angle,
        roundness=_roundness(pad_node, shape),
        top=top,
        bottom=bottom,
    )


def _footprint_nodes(doc: Document) -> list[SExp]:
    nodes: list[SExp] = []
    for name in _FOOTPRINT_NODES:
        nodes.extend(doc.root.find_all(name))
    return nodes


def extract_stencil_pads(doc: Document) -> list[StencilPad]:
    """Extract every pad that has an opening on a paste layer."""
    pads: list[StencilPad] = []
    for fp_node in _footprint_nodes(doc):
        origin = _extract_position(fp_node.get("at"))
        reference = _reference(fp_node)
        fp_margin = _number(fp_node, "solder_paste_margin") or 0.0
        fp_ratio = _number(fp_node, "solder_paste_margin_ratio") or 0.0
        for pad_node in fp_node.find_all("pad"):
            pad = extract_pad(pad_node, origin, reference, fp_margin, fp_ratio)
            if pad is not None:
                pads.append(pad)
    return pads


def extract_footprint_refs(doc: Document) -> list[str]:
    """Reference designators of all footprints on the board."""
    return [_reference(fp_node) for fp_node in _footprint_nodes(doc)]
