"""
Line-ending consistency check.

`parse` picks one delimiter for the whole text, so a bare "\\n" inside a
"\\r\\n" file is treated as ordinary text and the lines after it are numbered
as if it were not there. This module points at such a spot.
"""

from __future__ import annotations

import warnings

from linepos.constants import CRLF
from linepos.errors import DiagnosticError
from linepos.index import find_inconsistent_ending
from linepos.report import Diagnostic, Level, LineEndingWarning
from linepos.source import Source, SourceSpan

__all__ = ["MIXED_EOL_CODE", "check_line_endings", "warn_line_endings"]

MIXED_EOL_CODE = "mixed-eol"


def check_line_endings(source: Source, *, level: Level = Level.WARNING) -> Diagnostic | None:
    bare = find_inconsistent_ending(source.contents)
    if bare is None:
        return None

    first_crlf = source.contents.find(CRLF)
    return Diagnostic(
        message="bare '\\n' in a file that uses '\\r\\n' line endings",
        source=source,
        span=SourceSpan(bare, bare + 1),
        level=level,
        code=MIXED_EOL_CODE,
        note="lines are split on '\\r\\n' only; this '\\n' does not start a new line",
        see_also=("'\\r\\n' first seen here", SourceSpan(first_crlf, first_crlf + 2)),
    )


def warn_line_endings(source: Source, *, strict: bool = False) -> None:
    """
    Issue a LineEndingWarning for inconsistent line endings, or raise a
    DiagnosticError when `strict`.
    """
    d = check_line_endings(source, level=Level.ERROR if strict else Level.WARNING)
    if d is None:
        return
    if strict:
        raise DiagnosticError(d)
    warnings.warn(LineEndingWarning(d), stacklevel=2)
