"""Spans: contiguous slices of an input string.

Offsets are byte offsets into the UTF-8 encoding of the input, and both
ends of a span sit on character boundaries.
"""

from __future__ import annotations

from typing import Iterator

from .position import Position, _is_boundary


def _valid_range(data: bytes, start: int, end: int) -> bool:
    return (
        0 <= start <= end <= len(data)
        and _is_boundary(data, start)
        and _is_boundary(data, end)
    )


class Span:
    """A span from ``start`` to ``end`` over a particular input string.

    Two spans are equal only when they cover the same range of the very
    same input object.
    """

    __slots__ = ("input", "start", "end", "_data")

    def __init__(self, input: str, start: int, end: int) -> None:
        data = input.encode("utf-8")
        if not _valid_range(data, start, end):
            raise ValueError(f"{start}..{end} is not a valid range of the input")
        self.input = input
        self.start = start
        self.end = end
        self._data = data

    @classmethod
    def _unchecked(cls, input: str, start: int, end: int, data: bytes) -> Span:
        span = cls.__new__(cls)
        span.input = input
        span.start = start
        span.end = end
        span._data = data
        return span

    def get(self, start: int = 0, end: int | None = None) -> Span | None:
        """Return the sub-span ``start``..``end`` relative to this span.

        ``end`` is exclusive and defaults to the end of this span. Returns
        ``None`` when the range does not fit or splits a character.
        """
        length = self.end - self.start
        if end is None:
            end = length
        if not 0 <= start <= end <= length:
            return None
        absolute_start = self.start + start
        absolute_end = self.start + end
        if not _valid_range(self._data, absolute_start, absolute_end):
            return None
        return Span._unchecked(self.input, absolute_start, absolute_end, self._data)

    def as_str(self) -> str:
        """Return the text covered by this span."""
        return self._data[self.start : self.end].decode("utf-8")

    def start_pos(self) -> Position:
        """Return the position at the start of this span."""
        return Position._unchecked(self.input, self.start, self._data)

    def end_pos(self) -> Position:
        """Return the position at the end of this span."""
        return Position._unchecked(self.input, self.end, self._data)

    def split(self) -> tuple[Position, Position]:
        """Return the start and end positions of this span."""
        return self.start_pos(), self.end_pos()

    def lines_span(self) -> Iterator[Span]:
        """Yield a span for every line at least partly covered by this span."""
        pos = self.start
        while pos <= self.end:
            if not _is_boundary(self._data, pos):
                return
            cursor = Position._unchecked(self.input, pos, self._data)
            if cursor.at_end():
                return
            line_start = cursor.find_line_start()
            pos = cursor.find_line_end()
            if not _valid_range(self._data, line_start, pos):
                return
            yield Span._unchecked(self.input, line_start, pos, self._data)

    def lines(self) -> Iterator[str]:
        """Yield the text of every line at least partly covered by this span."""
        for line in self.lines_span():
            yield line.as_str()

    def __repr__(self) -> str:
        return f"Span(str={self.as_str()!r}, start={self.start}, end={self.end})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (
            self.input is other.input
            and self.start == other.start
            and self.end == other.end
        )

    def __hash__(self) -> int:
        return hash((id(self.input), self.start, self.end))