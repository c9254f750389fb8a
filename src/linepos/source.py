from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from linepos.errors import OffsetOutOfBounds
from linepos.index import LineIndex, Position


@dataclass(frozen=True, slots=True)
class SourceSpan:
    '''0-indexed, [start, end) half-open interval; start == end marks a point.'''
    start: int  # inclusive
    end: int    # exclusive

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"SourceSpan.start cannot be negative (got {self.start})")
        if self.end < self.start:
            raise ValueError(f"SourceSpan.end ({self.end}) < start ({self.start})")

    @classmethod
    def point(cls, offset: int) -> SourceSpan:
        return cls(offset, offset)


@dataclass(frozen=True, slots=True)
class Source:
    file: Path | None
    contents: str

    _index: LineIndex | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def from_file(cls, path: str | PathLike[str], encoding: str = "utf-8") -> Source:
        """
        Read a text file without newline translation, so "\\r\\n" survives and
        offsets match the file. Decode errors propagate unchanged.
        """
        p = Path(path)
        if p.is_dir():
            raise IsADirectoryError(f"{p} is a directory, not a text file")
        try:
            with p.open(encoding=encoding, newline="") as fh:
                text = fh.read()
        except FileNotFoundError:
            raise
        except OSError as e:
            raise OSError(f"Could not read {p}: {e}") from e
        return cls(p, text)

    @property
    def label(self) -> str:
        return self.file.name if self.file is not None else "<string>"

    @property
    def index(self) -> LineIndex:
        idx = self._index
        if idx is None:
            idx = LineIndex.parse(self.contents)
            object.__setattr__(self, "_index", idx)
        return idx

    def full_span(self) -> SourceSpan:
        return SourceSpan(0, len(self.contents))

    def slice(self, span: SourceSpan) -> str:
        if not (span.end <= len(self.contents)):
            raise ValueError("SourceSpan out of bounds for this Source")
        return self.contents[span.start:span.end]

    def location(self, offset: int) -> Position:
        '''Like LineIndex.position, but also accepts offset == len(contents).'''
        n = len(self.contents)
        if offset != n:
            return self.index.position(offset)
        if n == 0:
            return Position(1, 0)
        last = self.index.position(n - 1)
        return Position(last.line, last.column + 1)

    def locate_span(self, span: SourceSpan) -> tuple[Position, Position]:
        """
        Returns (start, end) positions of a span. The end position is one
        column past the span's last character, on that character's line.
        """
        if span.end > len(self.contents):
            raise OffsetOutOfBounds(span.end, len(self.contents))
        start = self.location(span.start)
        if span.end == span.start:
            return start, start
        last = self.index.position(span.end - 1)
        return start, Position(last.line, last.column + 1)
