"""Integration tests for the MCP server end-to-end flow."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from kicad_stencil import state
from kicad_stencil.server import create_server
from kicad_stencil.tools import TOOL_REGISTRY

FIXTURE_PATH = Path(__file__).parent.parent / "fixtures" / "stencil_board.kicad_pcb"


@pytest.fixture(autouse=True)
def _reset_state() -> Iterator[None]:
    state.clear()
    yield
    state.clear()


def _count_polylines(path: Path) -> int:
    lines = path.read_text(encoding="utf-8").splitlines()
    return sum(1 for c, v in zip(lines[0::2], lines[1::2]) if c == "0" and v == "LWPOLYLINE")


class TestServerCreation:
    def test_create_server(self) -> None:
        server = create_server()
        assert server is not None
        assert server.name == "kicad-stencil"

    def test_tools_registered(self) -> None:
        assert {"open_board", "list_stencil_pads", "export_stencil_dxf"} <= set(TOOL_REGISTRY)


class TestToolsWithoutBoard:
    def test_list_pads_requires_board(self) -> None:
        result = TOOL_REGISTRY["list_stencil_pads"].handler()
        assert result["error"] is True
        assert result["error_code"] == "NOT_FOUND"

    def test_export_requires_board(self, tmp_path: Path) -> None:
        result = TOOL_REGISTRY["export_stencil_dxf"].handler(output_base=str(tmp_path / "x"))
        assert result["error_code"] == "NOT_FOUND"

    def test_open_missing_board(self, tmp_path: Path) -> None:
        result = TOOL_REGISTRY["open_board"].handler(board_path=str(tmp_path / "none.kicad_pcb"))
        assert result["error_code"] == "BOARD_LOADING_ERROR"

    def test_open_non_board_file(self, tmp_path: Path) -> None:
        other = tmp_path / "lib.kicad_sym"
        other.write_text("(kicad_symbol_lib (version 20231120))", encoding="utf-8")
        result = TOOL_REGISTRY["open_board"].handler(board_path=str(other))
        assert result["error_code"] == "BOARD_LOADING_ERROR"


class TestEndToEnd:
    """Open the fixture board, inspect pads, export both stencils."""

    def test_open_and_list(self) -> None:
        result = TOOL_REGISTRY["open_board"].handler(board_path=str(FIXTURE_PATH))
        assert result["status"] == "ok"
        assert result["footprint_count"] == 4
        assert result["pad_count"] == {"top": 4, "bottom": 3}

        listing = TOOL_REGISTRY["list_stencil_pads"].handler(side="bottom")
        assert listing["count"] == 3
        assert {p["reference"] for p in listing["pads"]} == {"Q1"}

        page = TOOL_REGISTRY["list_stencil_pads"].handler(limit=2, offset=0)
        assert page["returned"] == 2
        assert page["has_more"] is True

    def test_list_invalid_side(self) -> None:
        TOOL_REGISTRY["open_board"].handler(board_path=str(FIXTURE_PATH))
        result = TOOL_REGISTRY["list_stencil_pads"].handler(side="middle")
        assert "error" in result

    def test_export(self, tmp_path: Path) -> None:
        TOOL_REGISTRY["open_board"].handler(board_path=str(FIXTURE_PATH))
        result = TOOL_REGISTRY["export_stencil_dxf"].handler(
            output_base=str(tmp_path / "stencil"),
            add_frame=True,
            mitre_corners=True,
            cut_times=2,
        )
        assert result["status"] == "ok"
        assert result["top"]["pad_count"] == 4
        assert result["bottom"]["pad_count"] == 3
        top = tmp_path / "stencil-top-cream.dxf"
        bottom = tmp_path / "stencil-bottom-cream.dxf"
        assert Path(result["top"]["path"]) == top
        assert _count_polylines(top) == 4
        assert _count_polylines(bottom) == 3

    def test_export_inch_header(self, tmp_path: Path) -> None:
        TOOL_REGISTRY["open_board"].handler(board_path=str(FIXTURE_PATH))
        TOOL_REGISTRY["export_stencil_dxf"].handler(output_base=str(tmp_path / "s"), unit="inch")
        text = (tmp_path / "s-top-cream.dxf").read_text(encoding="utf-8")
        assert "$MEASUREMENT\n70\n0\n" in text

    def test_export_rejects_bad_parameters(self, tmp_path: Path) -> None:
        TOOL_REGISTRY["open_board"].handler(board_path=str(FIXTURE_PATH))
        result = TOOL_REGISTRY["export_stencil_dxf"].handler(
            output_base=str(tmp_path / "s"), cut_times=3
        )
        assert result["error_code"] == "VALIDATION_ERROR"
        assert result["field"] == "cut_times"

        result = TOOL_REGISTRY["export_stencil_dxf"].handler(
            output_base=str(tmp_path / "s"), unit="cm"
        )
        assert result["field"] == "unit"
        assert list(tmp_path.iterdir()) == []
