"""Board state for the MCP server.

Holds the currently loaded board and its paste pads.
Thread-safe: all reads and writes go through a module-level lock.
"""

from __future__ import annotations

import threading

from .exceptions import BoardLoadingError, ResourceNotFoundError
from .logging_config import create_logger
from .schema import StencilPad, extract_footprint_refs, extract_stencil_pads
from .sexp import Document

logger = create_logger(__name__)

_lock = threading.Lock()
_current_doc: Document | None = None
_current_pads: list[StencilPad] | None = None
_current_refs: list[str] | None = None


def load_board(path: str) -> list[StencilPad]:
    """Load a board file and extract its paste pads.

    Raises:
        BoardLoadingError: If the file cannot be read or parsed.
    """
    global _current_doc, _current_pads, _current_refs
    try:
        doc = Document.load(path)
    except (OSError, ValueError) as e:
        raise BoardLoadingError(str(e), board_path=path) from e
    if doc.root.name != "kicad_pcb":
        raise BoardLoadingError(f"Not a KiCad board file: {path}", board_path=path)

    pads = extract_stencil_pads(doc)
    refs = extract_footprint_refs(doc)
    with _lock:
        _current_doc = doc
        _current_pads = pads
        _current_refs = refs
    logger.info("Loaded %s: %d footprints, %d paste pads", doc.path.name, len(refs), len(pads))
    return pads


def get_document() -> Document:
    """Get the currently loaded document, or raise."""
    with _lock:
        if _current_doc is None:
            raise ResourceNotFoundError("No board loaded. Use open_board first.", "board")
        return _current_doc


def get_pads() -> list[StencilPad]:
    """Get the paste pads of the current board, or raise."""
    with _lock:
        if _current_pads is None:
            raise ResourceNotFoundError("No board loaded. Use open_board first.", "board")
        return _current_pads


def get_footprint_refs() -> list[str]:
    with _lock:
        if _current_refs is None:
            raise ResourceNotFoundError("No board loaded. Use open_board first.", "board")
        return _current_refs


def clear() -> None:
    """Forget the loaded board."""
    global _current_doc, _current_pads, _current_refs
    with _lock:
        _current_doc = None
        _current_pads = None
        _current_refs = None
