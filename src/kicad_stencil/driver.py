"""Layer driver: writes one DXF stencil document per board side.

Each run walks the pads present on its side, cuts a silhouette per pad,
grows its own bounding box, optionally adds a frame around the result, and
wraps everything between the DXF header and trailer. Top and bottom runs
share only the read-only configuration.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, TextIO

from .config import ConfigSupplier, StencilConfig
from .constants import DXF_EXTENSION, TEXT_HEIGHT
from .dxf import Line, Polyline, Text, header, render, trailer
from .exceptions import ExportError
from .geometry import BoundingBox, BoundingBoxAccumulator, frame_segments, pad_silhouette
from .logging_config import create_logger, side_ctx
from .schema import Side, StencilPad

logger = create_logger(__name__)


class LayerState(str, Enum):
    INIT = "init"
    EMITTING_PADS = "emitting_pads"
    EMITTING_FRAME = "emitting_frame"
    FINALIZED = "finalized"


class LayerDriver:
    """Writes the stencil document of one side to a text stream.

    Usage::

        driver = LayerDriver(config, Side.TOP, stream)
        count = driver.run(pads)
    """

    def __init__(self, config: StencilConfig, side: Side, stream: TextIO) -> None:
        self.config = config
        self.side = side
        self.stream = stream
        self.bbox = BoundingBoxAccumulator()
        self.state = LayerState.INIT
        self.pad_count = 0

    def run(self, pads: Iterable[StencilPad]) -> int:
        """Write the whole document and return the number of pads cut."""
        if self.state is not LayerState.INIT:
            raise RuntimeError(f"Layer driver already ran (state: {self.state.value})")

        token = side_ctx.set(self.side.value)
        try:
            logger.debug("Writing %s stencil", self.side.value)
            self.stream.write(header(self.config.unit.is_metric))

            self.state = LayerState.EMITTING_PADS
            for pad in pads:
                if pad.on_side(self.side):
                    self._emit_pad(pad)

            if self.config.add_frame:
                self.state = LayerState.EMITTING_FRAME
                self._emit_frame()

            self.stream.write(trailer())
            self.state = LayerState.FINALIZED
            logger.info("Cut %d pads on %s stencil", self.pad_count, self.side.value)
        finally:
            side_ctx.reset(token)
        return self.pad_count

    def _emit_pad(self, pad: StencilPad) -> None:
        out = self.config.to_output
        silhouette, w, h = pad_silhouette(pad, self.config)
        points = tuple((out(x), out(y)) for x, y in silhouette.points())
        self.stream.write(render(Polyline(points=points, closed=silhouette.closed)))
        self.bbox.update(pad.x, pad.y, w, h)

        if self.config.label_pads:
            label = Text(out(pad.x), out(pad.y), pad.label, height=out(TEXT_HEIGHT))
            self.stream.write(render(label))
        self.pad_count += 1

    def _emit_frame(self) -> None:
        cfg = self.config
        out = cfg.to_output
        if self.bbox.is_empty:
            logger.warning("No pads on %s side, centering frame on origin", self.side.value)
        center = self.bbox.center()
        segments = frame_segments(
            center.x,
            center.y,
            cfg.frame_width + cfg.frame_kerf,
            cfg.frame_height + cfg.frame_kerf,
            mitre=cfg.mitre_corners,
            mitre_length=cfg.mitre_length,
        )
        for seg in segments:
            self.stream.write(render(Line(out(seg.x1), out(seg.y1), out(seg.x2), out(seg.y2))))
        logger.debug("Frame: %d segments around (%.3f, %.3f)", len(segments), center.x, center.y)


@dataclass
class LayerResult:
    """Outcome of one side."""

    side: Side
    pad_count: int
    path: Path
    extent: BoundingBox | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "side": self.side.value,
            "pad_count": self.pad_count,
            "path": str(self.path),
        }
        if self.extent is not None:
            d["extent"] = self.extent.to_dict()
        return d


@dataclass
class StencilResult:
    """Pad counts and documents of a full run."""

    top: LayerResult
    bottom: LayerResult

    @property
    def top_count(self) -> int:
        return self.top.pad_count

    @property
    def bottom_count(self) -> int:
        return self.bottom.pad_count

    def to_dict(self) -> dict[str, Any]:
        return {
            "top": self.top.to_dict(),
            "bottom": self.bottom.to_dict(),
            "total_pads": self.top_count + self.bottom_count,
        }


def output_path(base: str | Path, side: Side) -> Path:
    """Document path for a side: ``<base>-<suffix>.dxf``.

    A board file path is accepted as base; its extension is dropped.
    """
    base = Path(base)
    stem = base.stem if base.suffix == ".kicad_pcb" else base.name
    return base.with_name(f"{stem}-{side.suffix}{DXF_EXTENSION}")


def write_layer(
    pads: Iterable[StencilPad], config: StencilConfig, side: Side, path: Path
) -> LayerResult:
    """Write one side's document to ``path``.

    The document is written next to ``path`` under a temporary name and
    moved into place only once complete.

    Raises:
        ExportError: If the document cannot be written.
    """
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
    except OSError as e:
        raise ExportError(f"Cannot create {path}: {e}", output_path=str(path)) from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as stream:
            driver = LayerDriver(config, side, stream)
            count = driver.run(pads)
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise ExportError(f"Error writing {path}: {e}", output_path=str(path)) from e
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    return LayerResult(side=side, pad_count=count, path=path, extent=driver.bbox.snapshot())


def generate_stencils(
    pads: Iterable[StencilPad],
    config: StencilConfig | ConfigSupplier,
    base: str | Path,
) -> StencilResult:
    """Write the top and bottom cream stencils for a set of pads.

    Args:
        pads: Paste pads of the board.
        config: The run configuration, or a supplier called once for it.
        base: Base path the side suffixes are appended to.

    Returns:
        Pad counts and paths of both documents.
    """
    if not isinstance(config, StencilConfig):
        config = config()
    pad_list = list(pads)
    logger.info("Generating stencils for %d pads (%s)", len(pad_list), config.unit.value)

    results = {
        side: write_layer(pad_list, config, side, output_path(base, side)) for side in Side
    }
    return StencilResult(top=results[Side.TOP], bottom=results[Side.BOTTOM])
