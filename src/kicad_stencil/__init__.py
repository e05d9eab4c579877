"""Solder paste stencil outlines from KiCad boards, as DXF for cutting plotters."""

from .config import StencilConfig, Unit
from .driver import LayerDriver, StencilResult, generate_stencils

__all__ = ["LayerDriver", "StencilConfig", "StencilResult", "Unit", "generate_stencils"]

__version__ = "0.1.0"
