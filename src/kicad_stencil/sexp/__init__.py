"""S-expression reader for KiCad board files."""

from .document import Document
from .parser import SExp, parse

__all__ = ["Document", "SExp", "parse"]
