from __future__ import annotations

import msgspec
import msgspec.json

from linepos.constants import INDEX_SCHEMA
from linepos.index import LineIndex, LineSpan, Position


class PositionRecord(msgspec.Struct, frozen=True):
    line: int
    column: int

    @classmethod
    def from_position(cls, pos: Position) -> PositionRecord:
        return cls(line=pos.line, column=pos.column)

    def to_position(self) -> Position:
        return Position(self.line, self.column)


class IndexRecord(msgspec.Struct, frozen=True):
    delimiter: str
    spans: list[tuple[int, int]] = msgspec.field(default_factory=list)
    schema: int = INDEX_SCHEMA

    @classmethod
    def from_index(cls, index: LineIndex) -> IndexRecord:
        return cls(
            delimiter=index.delimiter,
            spans=[(s.start, s.end) for s in index.spans],
        )

    def to_index(self) -> LineIndex:
        if self.schema != INDEX_SCHEMA:
            raise ValueError(
                f"Unsupported index schema {self.schema} (expected {INDEX_SCHEMA})"
            )
        return LineIndex(
            tuple(LineSpan(start, end) for start, end in self.spans),
            self.delimiter,
        )


def encode_position(pos: Position) -> bytes:
    return msgspec.json.encode(PositionRecord.from_position(pos)) + b"\n"


def decode_position(data: bytes | str) -> Position:
    return msgspec.json.decode(data, type=PositionRecord).to_position()


def encode_index(index: LineIndex) -> bytes:
    return msgspec.json.encode(IndexRecord.from_index(index)) + b"\n"


def decode_index(data: bytes | str) -> LineIndex:
    """
    Rebuild a LineIndex from JSON. msgspec validates the shape; the
    LineIndex constructor validates that the spans are contiguous.
    """
    return msgspec.json.decode(data, type=IndexRecord).to_index()
