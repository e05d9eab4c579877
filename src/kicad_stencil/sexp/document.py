"""Loaded KiCad board file."""

from __future__ import annotations

from pathlib import Path

from .parser import SExp, parse


class Document:
    """A parsed KiCad S-expression file.

    Usage::

        doc = Document.load("board.kicad_pcb")
        doc.root.name                       # "kicad_pcb"
        doc.root["version"].first_value     # "20241229"
    """

    __slots__ = ("path", "root")

    def __init__(self, path: Path, root: SExp) -> None:
        self.path = path
        self.root = root

    @classmethod
    def load(cls, path: str | Path) -> Document:
        """Load and parse a KiCad S-expression file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file cannot be decoded or parsed.
            IOError: If the file cannot be read.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            raw_text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"Invalid encoding in {path}: {e}") from e
        except OSError as e:
            raise IOError(f"Error reading {path}: {e}") from e

        return cls.from_text(raw_text, path)

    @classmethod
    def from_text(cls, text: str, path: str | Path = "<memory>") -> Document:
        """Parse board text that did not come from disk."""
        try:
            root = parse(text)
        except ValueError as e:
            raise ValueError(f"Failed to parse {path}: {e}") from e
        return cls(path=Path(path), root=root)

    def __repr__(self) -> str:
        return f"Document({self.path.name!r}, root={self.root.name!r})"
