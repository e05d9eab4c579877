"""Board tools: open a KiCad board and inspect its paste pads."""

from __future__ import annotations

from typing import Any

from ..exceptions import StencilError
from ..schema import Side
from ..validation import validate_side
from .registry import register_tool


def _open_board_handler(board_path: str) -> dict[str, Any]:
    """Open a KiCad PCB board file and read its paste pads.

    Args:
        board_path: Path to a .kicad_pcb file.
    """
    from .. import state

    try:
        pads = state.load_board(board_path)
        refs = state.get_footprint_refs()
    except StencilError as exc:
        return exc.to_dict()

    return {
        "status": "ok",
        "message": f"Loaded board: {board_path}",
        "footprint_count": len(refs),
        "pad_count": {side.value: sum(1 for p in pads if p.on_side(side)) for side in Side},
    }


def _list_stencil_pads_handler(
    side: str = "both",
    limit: int = 100,
    offset: int = 0,
) -> dict[str, Any]:
    """List paste pads of the loaded board with pagination.

    Args:
        side: 'top', 'bottom', or 'both'. Default: 'both'.
        limit: Maximum number of pads to return. Default: 100.
        offset: Number of pads to skip. Default: 0.
    """
    from .. import state

    side_result = validate_side(side)
    if not side_result.valid:
        return {"error": f"Invalid side: {side_result.error}"}

    try:
        pads = state.get_pads()
    except StencilError as exc:
        return exc.to_dict()

    wanted: Side | None = side_result.value
    if wanted is not None:
        pads = [p for p in pads if p.on_side(wanted)]

    total = len(pads)
    page = pads[offset : offset + limit]
    return {
        "count": total,
        "returned": len(page),
        "offset": offset,
        "has_more": offset + limit < total,
        "pads": [p.to_dict() for p in page],
    }


register_tool(
    name="open_board",
    description="Open a KiCad PCB board file (.kicad_pcb) and read its solder paste pads.",
    handler=_open_board_handler,
    category="board",
)

register_tool(
    name="list_stencil_pads",
    description="List the paste pads of the loaded board (paginated), optionally for one side.",
    handler=_list_stencil_pads_handler,
    category="board",
)
