"""Cursor positions inside an input string.

Offsets are byte offsets into the UTF-8 encoding of the input, and a
position always sits on a character boundary.
"""

from __future__ import annotations

from typing import Callable, Iterable


def _char_width(lead: int) -> int:
    """Number of UTF-8 bytes in the character starting with ``lead``."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def _is_boundary(data: bytes, index: int) -> bool:
    if index < 0 or index > len(data):
        return False
    if index == len(data):
        return True
    return data[index] & 0xC0 != 0x80


class Position:
    """A cursor into a string, with helpers for matching text at the cursor.

    Two positions are equal, ordered and hashed only relative to the very
    same input object; comparing positions over different inputs is an error.
    """

    __slots__ = ("input", "pos", "_data")

    def __init__(self, input: str, pos: int) -> None:
        data = input.encode("utf-8")
        if not _is_boundary(data, pos):
            raise ValueError(f"{pos} is not a character boundary of the input")
        self.input = input
        self.pos = pos
        self._data = data

    @classmethod
    def _unchecked(cls, input: str, pos: int, data: bytes | None = None) -> Position:
        position = cls.__new__(cls)
        position.input = input
        position.pos = pos
        position._data = input.encode("utf-8") if data is None else data
        return position

    @classmethod
    def from_start(cls, input: str) -> Position:
        """Create a position at the start of ``input``."""
        return cls._unchecked(input, 0)

    def copy(self) -> Position:
        """Return an independent cursor at the same place in the same input."""
        return Position._unchecked(self.input, self.pos, self._data)

    def span(self, other: Position):
        """Create a span from this position up to ``other``."""
        if self.input is not other.input:
            raise ValueError("span created from positions from different inputs")
        from .span import Span

        return Span(self.input, self.pos, other.pos)

    def line_col(self) -> tuple[int, int]:
        """Return the 1-based line and column of this position."""
        if self.pos > len(self._data):
            raise IndexError("position out of bounds")
        before = self._data[: self.pos].decode("utf-8")
        line = before.count("\n") + 1
        column = len(before) - (before.rfind("\n") + 1) + 1
        return line, column

    def line_of(self) -> str:
        """Return the whole line of the input containing this position."""
        if self.pos > len(self._data):
            raise IndexError("position out of bounds")
        return self._data[self.find_line_start() : self.find_line_end()].decode("utf-8")

    def find_line_start(self) -> int:
        """Byte offset where the line containing this position starts."""
        if not self._data:
            return 0
        return self._data.rfind(b"\n", 0, self.pos) + 1

    def find_line_end(self) -> int:
        """Byte offset just past the end of the line containing this position."""
        size = len(self._data)
        if size == 0:
            return 0
        if self.pos == size - 1:
            return size
        index = self._data.find(b"\n", self.pos)
        return size if index < 0 else index + 1

    def at_start(self) -> bool:
        return self.pos == 0

    def at_end(self) -> bool:
        return self.pos == len(self._data)

    def _next_char(self) -> tuple[str, int] | None:
        if self.pos >= len(self._data):
            return None
        width = _char_width(self._data[self.pos])
        return self._data[self.pos : self.pos + width].decode("utf-8"), width

    def skip(self, n: int) -> bool:
        """Move forward ``n`` characters; leave the cursor alone if impossible."""
        index = self.pos
        size = len(self._data)
        for _ in range(n):
            if index >= size:
                return False
            index += _char_width(self._data[index])
        self.pos = index
        return True

    def skip_back(self, n: int) -> bool:
        """Move back ``n`` characters; leave the cursor alone if impossible."""
        index = self.pos
        for _ in range(n):
            if index == 0:
                return False
            index -= 1
            while self._data[index] & 0xC0 == 0x80:
                index -= 1
        self.pos = index
        return True

    def skip_until(self, strings: Iterable[str]) -> bool:
        """Advance to the first place where one of ``strings`` starts.

        If none is found the cursor ends at the end of the input and
        ``False`` is returned.
        """
        needles = [s.encode("utf-8") for s in strings]
        for start in range(self.pos, len(self._data)):
            if not _is_boundary(self._data, start):
                continue
            if any(self._data.startswith(needle, start) for needle in needles):
                self.pos = start
                return True
        self.pos = len(self._data)
        return False

    def match_char(self, c: str) -> bool:
        """Tell whether the character at the cursor is ``c``; never moves."""
        found = self._next_char()
        return found is not None and found[0] == c

    def match_char_by(self, predicate: Callable[[str], bool]) -> bool:
        """Consume the next character if ``predicate`` accepts it."""
        found = self._next_char()
        if found is None or not predicate(found[0]):
            return False
        self.pos += found[1]
        return True

    def match_string(self, string: str) -> bool:
        """Consume ``string`` if the input continues with it."""
        needle = string.encode("utf-8")
        if self._data.startswith(needle, self.pos):
            self.pos += len(needle)
            return True
        return False

    def match_insensitive(self, string: str) -> bool:
        """Consume ``string`` compared ASCII-case-insensitively."""
        needle = string.encode("utf-8")
        end = self.pos + len(needle)
        if end > len(self._data) or not _is_boundary(self._data, end):
            return False
        if self._data[self.pos : end].lower() != needle.lower():
            return False
        self.pos = end
        return True

    def match_range(self, start: str, end: str) -> bool:
        """Consume the next character if it lies in ``start``..=``end``."""
        found = self._next_char()
        if found is None or not start <= found[0] <= end:
            return False
        self.pos += found[1]
        return True

    def __repr__(self) -> str:
        return f"Position(pos={self.pos})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.input is other.input and self.pos == other.pos

    def __hash__(self) -> int:
        return hash((id(self.input), self.pos))

    def _ordered(self, other: object) -> int:
        if not isinstance(other, Position):
            raise TypeError("positions can only be compared with positions")
        if self.input is not other.input:
            raise TypeError("cannot compare positions from different strs")
        return other.pos

    def __lt__(self, other: object) -> bool:
        return self.pos < self._ordered(other)

    def __le__(self, other: object) -> bool:
        return self.pos <= self._ordered(other)

    def __gt__(self, other: object) -> bool:
        return self.pos > self._ordered(other)

    def __ge__(self, other: object) -> bool:
        return self.pos >= self._ordered(other)