"""Stencil export tool: write top and bottom cream DXF documents."""

from __future__ import annotations

from typing import Any

from ..config import StencilConfig
from ..exceptions import StencilError, ValidationError
from ..validation import validate_cut_times, validate_output_base, validate_unit
from .registry import register_tool


def _export_stencil_dxf_handler(
    output_base: str | None = None,
    unit: str = "mm",
    corner_cut: bool = True,
    cut_times: int = 1,
    add_frame: bool = False,
    mitre_corners: bool = False,
    label_pads: bool = False,
) -> dict[str, Any]:
    """Export plotter-ready stencil outlines for both paste layers.

    Args:
        output_base: Base path; '-top-cream.dxf' and '-bottom-cream.dxf' are
            appended. Defaults to the board path without its extension.
        unit: 'mm' or 'inch'.
        corner_cut: Cut the corners of rounded pads diagonally.
        cut_times: Passes over each pad edge, 1 or 2.
        add_frame: Add a frame around the pads.
        mitre_corners: Mitre the frame corners.
        label_pads: Write the pad name at each pad (debug aid).
    """
    from .. import state
    from ..driver import generate_stencils

    try:
        pads = state.get_pads()
        base = output_base if output_base is not None else str(state.get_document().path)

        unit_result = validate_unit(unit)
        if not unit_result.valid:
            raise ValidationError(unit_result.error or "Invalid unit", field="unit")
        times_result = validate_cut_times(cut_times)
        if not times_result.valid:
            raise ValidationError(times_result.error or "Invalid cut_times", field="cut_times")
        base_result = validate_output_base(base)
        if not base_result.valid:
            raise ValidationError(base_result.error or "Invalid output_base", field="output_base")

        def supply_config() -> StencilConfig:
            return StencilConfig.from_options(
                unit=unit_result.value.value,
                corner_cut=corner_cut,
                cut_times=times_result.value,
                add_frame=add_frame,
                mitre_corners=mitre_corners,
                label_pads=label_pads,
            )

        result = generate_stencils(pads, supply_config, base_result.value)
    except StencilError as exc:
        return exc.to_dict()

    return {
        "status": "ok",
        "message": (
            f"{result.top_count} pads on top stencil, {result.bottom_count} pads on bottom stencil"
        ),
        **result.to_dict(),
    }


register_tool(
    name="export_stencil_dxf",
    description=(
        "Export top and bottom solder paste stencils of the loaded board as DXF files "
        "for a cutting plotter."
    ),
    handler=_export_stencil_dxf_handler,
    category="export",
)
