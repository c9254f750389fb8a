"""
linepos
=======

Lookup of (line, column) positions for offsets in text.

    >>> from linepos import parse
    >>> lines = parse("abcdefg\\nhijklmnop\\n")
    >>> lines.num_lines()
    2
    >>> lines.position(5)
    Position(line=1, column=5)
"""

from __future__ import annotations

from linepos.errors import DiagnosticError, LinePosException, OffsetOutOfBounds
from linepos.index import (
    LineIndex,
    LineSpan,
    Position,
    detect_delimiter,
    find_inconsistent_ending,
    parse,
)
from linepos.source import Source, SourceSpan

__all__ = [
    "DiagnosticError",
    "LineIndex",
    "LinePosException",
    "LineSpan",
    "OffsetOutOfBounds",
    "Position",
    "Source",
    "SourceSpan",
    "detect_delimiter",
    "find_inconsistent_ending",
    "parse",
]
