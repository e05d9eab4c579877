"""S-expression parser for KiCad board files.

Only reading is needed here: a ``.kicad_pcb`` file is turned into a tree of
``SExp`` nodes that the schema extractors walk to find paste pads.

    tree = parse('(pad "1" smd roundrect (at 1 0 90) (size 1.2 1.4))')
    tree.name                     # "pad"
    tree.atom_values              # ["1", "smd", "roundrect"]
    tree["at"].atom_values        # ["1", "0", "90"]
"""

from __future__ import annotations

_WHITESPACE = " \t\n\r"
_ATOM_STOP = ' \t\n\r()"'


class SExp:
    """A node in an S-expression tree.

    A node is either an atom (``value`` set, no name) or a list whose first
    element is its ``name`` and whose remaining elements are ``children``.
    """

    __slots__ = ("name", "value", "children")

    def __init__(
        self,
        name: str | None = None,
        value: str | None = None,
        children: list[SExp] | None = None,
    ) -> None:
        self.name = name
        self.value = value
        self.children: list[SExp] = children if children is not None else []

    @property
    def is_atom(self) -> bool:
        return self.name is None and self.value is not None

    @property
    def is_list(self) -> bool:
        return self.name is not None

    def __getitem__(self, key: str) -> SExp:
        """Get the first child list with the given name.

        Raises KeyError if not found.
        """
        node = self.get(key)
        if node is None:
            raise KeyError(f"No child named {key!r}")
        return node

    def get(self, key: str, default: SExp | None = None) -> SExp | None:
        """Get the first child list with the given name, or default."""
        for child in self.children:
            if child.name == key:
                return child
        return default

    def find_all(self, name: str) -> list[SExp]:
        """Find all direct children with the given name."""
        return [child for child in self.children if child.name == name]

    @property
    def first_value(self) -> str | None:
        """Value of the first atom child, e.g. ``(layer "F.Cu")`` -> ``"F.Cu"``."""
        for child in self.children:
            if child.is_atom:
                return child.value
        return None

    @property
    def atom_values(self) -> list[str]:
        """All atom values among direct children."""
        return [child.value for child in self.children if child.is_atom and child.value is not None]

    def __repr__(self) -> str:
        if self.is_atom:
            return f"SExp(value={self.value!r})"
        return f"SExp(name={self.name!r}, children={len(self.children)})"


class _Tokenizer:
    """Splits S-expression text into OPEN, CLOSE, STRING and ATOM tokens."""

    __slots__ = ("_text", "_pos", "_length")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._length = len(text)

    def _skip_whitespace(self) -> None:
        while self._pos < self._length and self._text[self._pos] in _WHITESPACE:
            self._pos += 1

    def peek(self) -> str | None:
        self._skip_whitespace()
        if self._pos >= self._length:
            return None
        return self._text[self._pos]

    def next_token(self) -> tuple[str, str] | None:
        """Return (token_type, token_value) or None at EOF."""
        ch = self.peek()
        if ch is None:
            return None
        if ch == "(":
            self._pos += 1
            return ("OPEN", ch)
        if ch == ")":
            self._pos += 1
            return ("CLOSE", ch)
        if ch == '"':
            return ("STRING", self._read_quoted_string())
        return ("ATOM", self._read_atom())

    def _read_quoted_string(self) -> str:
        self._pos += 1  # opening quote
        result: list[str] = []
        while self._pos < self._length:
            ch = self._text[self._pos]
            self._pos += 1
            if ch == "\\":
                if self._pos < self._length:
                    result.append(self._text[self._pos])
                    self._pos += 1
            elif ch == '"':
                return "".join(result)
            else:
                result.append(ch)
        raise ValueError("Unterminated quoted string")

    def _read_atom(self) -> str:
        start = self._pos
        while self._pos < self._length and self._text[self._pos] not in _ATOM_STOP:
            self._pos += 1
        return self._text[start : self._pos]


def parse(text: str) -> SExp:
    """Parse an S-expression string into an SExp tree.

    Raises:
        ValueError: If the input is malformed.
    """
    return _parse_expr(_Tokenizer(text))


def _parse_expr(tokenizer: _Tokenizer) -> SExp:
    token = tokenizer.next_token()
    if token is None:
        raise ValueError("Unexpected end of input")

    token_type, token_value = token
    if token_type in ("ATOM", "STRING"):
        return SExp(value=token_value)
    if token_type == "CLOSE":
        raise ValueError("Unexpected ')'")

    if tokenizer.peek() == ")":
        tokenizer.next_token()
        return SExp(name="", children=[])

    children: list[SExp] = []
    head = _parse_expr(tokenizer)
    if head.is_atom:
        name = head.value
    else:
        # A list opening with a nested list takes that list's name
        name = head.name
        children.append(head)

    while True:
        nxt = tokenizer.peek()
        if nxt is None:
            raise ValueError("Unexpected end of input, unclosed '('")
        if nxt == ")":
            tokenizer.next_token()
            return SExp(name=name, children=children)
        children.append(_parse_expr(tokenizer))
