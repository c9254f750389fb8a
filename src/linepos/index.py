"""
Line-boundary index over an immutable text snapshot.

The index is built once (`parse`) and then answers offset -> (line, column)
lookups. Line endings are detected globally: if the text contains any "\\r\\n"
then every line is split on "\\r\\n", otherwise on "\\n". A file mixing both
conventions is therefore split by one of them only;
`find_inconsistent_ending` reports where that happens.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass, field

from linepos.constants import CRLF, LF
from linepos.errors import OffsetOutOfBounds

__all__ = [
    "LineSpan",
    "Position",
    "LineIndex",
    "parse",
    "detect_delimiter",
    "find_inconsistent_ending",
]


@dataclass(frozen=True, slots=True)
class LineSpan:
    '''0-indexed, [start, end) extent of one line, terminator included.'''
    start: int  # inclusive
    end: int    # exclusive

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"LineSpan.start cannot be negative (got {self.start})")
        if self.end < self.start:
            raise ValueError(f"LineSpan.end ({self.end}) < start ({self.start})")

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, offset: object) -> bool:
        return isinstance(offset, int) and self.start <= offset < self.end


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """A resolved location: 1-indexed line, 0-indexed column within that line."""

    line: int
    column: int


def detect_delimiter(text: str) -> str:
    return CRLF if CRLF in text else LF


def find_inconsistent_ending(text: str) -> int | None:
    """
    Offset of the first bare "\\n" in a text whose detected delimiter is
    "\\r\\n", or None when the text splits consistently.
    """
    if detect_delimiter(text) != CRLF:
        return None
    pos = text.find(LF)
    while pos != -1:
        if pos == 0 or text[pos - 1] != "\r":
            return pos
        pos = text.find(LF, pos + 1)
    return None


def _split_inclusive(text: str, delimiter: str) -> Iterator[LineSpan]:
    # Each segment keeps its delimiter; a trailing delimiter opens no new line.
    start = 0
    n = len(text)
    while start < n:
        hit = text.find(delimiter, start)
        end = n if hit == -1 else hit + len(delimiter)
        yield LineSpan(start, end)
        start = end


@dataclass(frozen=True, slots=True)
class LineIndex:
    spans: tuple[LineSpan, ...]
    delimiter: str = LF

    _starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.delimiter not in (LF, CRLF):
            raise ValueError(f"Unsupported line delimiter: {self.delimiter!r}")
        object.__setattr__(self, "spans", tuple(self.spans))

        expected = 0
        for i, span in enumerate(self.spans):
            if span.start != expected:
                raise ValueError(
                    f"Line {i + 1} starts at {span.start}, expected {expected}"
                )
            if span.end == span.start:
                raise ValueError(f"Line {i + 1} is empty")
            expected = span.end

        object.__setattr__(self, "_starts", tuple(s.start for s in self.spans))

    @classmethod
    def parse(cls, text: str) -> LineIndex:
        delimiter = detect_delimiter(text)
        return cls(tuple(_split_inclusive(text, delimiter)), delimiter)

    @property
    def text_length(self) -> int:
        return self.spans[-1].end if self.spans else 0

    def num_lines(self) -> int:
        """
        Number of lines parsed. A text ending with the delimiter does not
        count an extra empty line after it.
        """
        return len(self.spans)

    def line_span(self, line: int) -> LineSpan:
        '''Span of a 1-indexed line.'''
        if not (1 <= line <= len(self.spans)):
            raise IndexError(f"line {line} out of range [1, {len(self.spans)}]")
        return self.spans[line - 1]

    def position(self, offset: int) -> Position:
        """
        Resolve a 0-indexed offset to its Position.

        An offset equal to a line's end belongs to the next line, so a
        delimiter is attributed to the line it terminates. Raises
        OffsetOutOfBounds when the offset is negative or not below the
        text length.
        """
        if not (0 <= offset < self.text_length):
            raise OffsetOutOfBounds(offset, self.text_length)
        line_idx = bisect.bisect_right(self._starts, offset) - 1
        return Position(line_idx + 1, offset - self._starts[line_idx])


def parse(text: str) -> LineIndex:
    return LineIndex.parse(text)
