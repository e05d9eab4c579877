"""Tests for the S-expression parser."""

from __future__ import annotations

from pathlib import Path

import pytest

from kicad_stencil.sexp import Document, parse

FIXTURE_PATH = Path(__file__).parent.parent / "fixtures" / "stencil_board.kicad_pcb"


class TestParseAtoms:
    def test_unquoted_atom(self) -> None:
        node = parse("smd")
        assert node.is_atom
        assert node.value == "smd"

    def test_quoted_string(self) -> None:
        node = parse('"F.Paste"')
        assert node.is_atom
        assert node.value == "F.Paste"

    def test_quoted_with_escapes(self) -> None:
        node = parse(r'"say \"hi\""')
        assert node.value == 'say "hi"'

    def test_float_atom(self) -> None:
        assert parse("0.25").value == "0.25"


class TestParseExpressions:
    def test_simple_pair(self) -> None:
        node = parse("(roundrect_rratio 0.25)")
        assert node.is_list
        assert node.name == "roundrect_rratio"
        assert node.first_value == "0.25"

    def test_pad_expression(self) -> None:
        node = parse('(pad "1" smd rect (at -0.8 0 90) (size 0.8 1) (layers "F.Cu" "F.Paste"))')
        assert node.name == "pad"
        assert node.atom_values == ["1", "smd", "rect"]
        assert node["at"].atom_values == ["-0.8", "0", "90"]
        assert node["layers"].atom_values == ["F.Cu", "F.Paste"]

    def test_deeply_nested(self) -> None:
        node = parse("(a (b (c (d value))))")
        assert node["b"]["c"]["d"].first_value == "value"

    def test_empty_quoted_string_value(self) -> None:
        node = parse('(net 0 "")')
        assert node.atom_values == ["0", ""]

    def test_empty_list(self) -> None:
        node = parse("()")
        assert node.name == ""
        assert node.children == []

    def test_missing_key_raises(self) -> None:
        node = parse("(pad (at 1 2))")
        with pytest.raises(KeyError):
            node["size"]
        assert node.get("size") is None

    def test_find_all_direct_children_only(self) -> None:
        node = parse("(fp (pad a) (pad b) (group (pad c)))")
        assert [p.first_value for p in node.find_all("pad")] == ["a", "b"]


class TestParseErrors:
    def test_unclosed_paren(self) -> None:
        with pytest.raises(ValueError):
            parse("(pad (at 1 2)")

    def test_unexpected_close(self) -> None:
        with pytest.raises(ValueError):
            parse(")")

    def test_unterminated_string(self) -> None:
        with pytest.raises(ValueError):
            parse('(property "Reference)')

    def test_empty_input(self) -> None:
        with pytest.raises(ValueError):
            parse("   ")


class TestDocument:
    def test_load_fixture(self) -> None:
        doc = Document.load(FIXTURE_PATH)
        assert doc.root.name == "kicad_pcb"
        assert doc.root["version"].first_value == "20241229"

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Document.load(tmp_path / "missing.kicad_pcb")

    def test_load_malformed_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.kicad_pcb"
        bad.write_text("(kicad_pcb (version 1)", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to parse"):
            Document.load(bad)

    def test_from_text(self) -> None:
        doc = Document.from_text("(kicad_pcb (version 7))")
        assert doc.root.name == "kicad_pcb"
        assert "kicad_pcb" in repr(doc)
