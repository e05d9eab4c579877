"""Tests for DXF entity serialization."""

from __future__ import annotations

import pytest

from kicad_stencil.dxf import (
    Arc,
    Circle,
    Line,
    Polyline,
    Text,
    arc,
    circle,
    header,
    line,
    polyline,
    render,
    text,
    trailer,
)


def _pairs(block: str) -> list[tuple[str, str]]:
    lines = block.splitlines()
    assert len(lines) % 2 == 0
    return list(zip(lines[0::2], lines[1::2]))


def _value(block: str, code: str) -> str:
    return next(v for c, v in _pairs(block) if c == code)


class TestHeaderTrailer:
    def test_metric_header(self) -> None:
        pairs = _pairs(header(True))
        assert pairs[0] == ("0", "SECTION")
        assert ("9", "$MEASUREMENT") in pairs
        idx = pairs.index(("9", "$MEASUREMENT"))
        assert pairs[idx + 1] == ("70", "1")
        assert pairs[-2:] == [("0", "SECTION"), ("2", "ENTITIES")]

    def test_inch_header(self) -> None:
        pairs = _pairs(header(False))
        idx = pairs.index(("9", "$MEASUREMENT"))
        assert pairs[idx + 1] == ("70", "0")

    def test_version_declared(self) -> None:
        pairs = _pairs(header(True))
        idx = pairs.index(("9", "$ACADVER"))
        assert pairs[idx + 1] == ("1", "AC1015")

    def test_trailer(self) -> None:
        assert _pairs(trailer()) == [("0", "ENDSEC"), ("0", "EOF")]


class TestPolyline:
    def test_closed_polyline(self) -> None:
        pts = ((11.0, 11.0), (9.0, 11.0), (9.0, 9.0), (11.0, 9.0), (11.0, 11.0))
        pairs = _pairs(polyline(Polyline(points=pts)))
        assert pairs[0] == ("0", "LWPOLYLINE")
        assert ("8", "0") in pairs
        assert ("62", "7") in pairs
        assert ("90", "5") in pairs
        assert ("70", "1") in pairs
        xs = [v for c, v in pairs if c == "10"]
        ys = [v for c, v in pairs if c == "20"]
        assert xs == ["11.000000", "9.000000", "9.000000", "11.000000", "11.000000"]
        assert ys == ["11.000000", "11.000000", "9.000000", "9.000000", "11.000000"]

    def test_open_polyline_flag(self) -> None:
        block = polyline(Polyline(points=((0.0, 0.0), (1.0, 1.0)), closed=False))
        assert _value(block, "70") == "0"

    def test_idempotent(self) -> None:
        entity = Polyline(points=((0.123456789, -2.5), (3.0, 4.0), (0.123456789, -2.5)))
        assert render(entity) == render(entity)

    def test_negative_zero_normalized(self) -> None:
        block = polyline(Polyline(points=((-0.0000001, 1.0),)))
        assert _value(block, "10") == "0.000000"


class TestOtherEntities:
    def test_line(self) -> None:
        pairs = _pairs(line(Line(1.0, 2.0, 3.5, -4.25)))
        assert pairs[0] == ("0", "LINE")
        assert ("10", "1.000000") in pairs
        assert ("20", "2.000000") in pairs
        assert ("11", "3.500000") in pairs
        assert ("21", "-4.250000") in pairs

    def test_text(self) -> None:
        block = text(Text(1.0, 2.0, "R1.1", height=0.5))
        assert _pairs(block)[0] == ("0", "TEXT")
        assert _value(block, "1") == "R1.1"
        assert _value(block, "40") == "0.500000"

    @pytest.mark.parametrize("value", ["R1\n1", "R1\r\n1", "R1\r1"])
    def test_text_value_kept_on_one_line(self, value: str) -> None:
        block = text(Text(1.0, 2.0, value))
        pairs = _pairs(block)
        assert ("1", "R1 1") in pairs
        assert pairs[-1][0] == "1"

    def test_arc(self) -> None:
        block = arc(Arc(0.0, 0.0, 2.0, 0.0, 90.0))
        assert _pairs(block)[0] == ("0", "ARC")
        assert _value(block, "40") == "2.000000"
        assert _value(block, "50") == "0.000000"
        assert _value(block, "51") == "90.000000"

    def test_circle(self) -> None:
        block = circle(Circle(1.0, 1.0, 0.75))
        assert _pairs(block)[0] == ("0", "CIRCLE")
        assert _value(block, "40") == "0.750000"


class TestRender:
    @pytest.mark.parametrize(
        "entity,kind",
        [
            (Polyline(points=((0.0, 0.0),)), "LWPOLYLINE"),
            (Line(0, 0, 1, 1), "LINE"),
            (Text(0, 0, "x"), "TEXT"),
            (Arc(0, 0, 1, 0, 180), "ARC"),
            (Circle(0, 0, 1), "CIRCLE"),
        ],
    )
    def test_dispatch(self, entity: object, kind: str) -> None:
        assert render(entity).startswith(f"0\n{kind}\n")

    def test_unknown_entity(self) -> None:
        with pytest.raises(TypeError):
            render("not an entity")  # type: ignore[arg-type]
