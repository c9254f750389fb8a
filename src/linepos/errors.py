"""
linepos exceptions: a base LinePosException, the lookup error raised by
LineIndex.position, and a DiagnosticError that renders as a rich code frame.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console, ConsoleOptions, RenderResult

if TYPE_CHECKING:
    from linepos.report import Diagnostic

__all__ = ["LinePosException", "OffsetOutOfBounds", "DiagnosticError"]


class LinePosException(Exception):
    """Base class for every error raised by linepos."""


class OffsetOutOfBounds(LinePosException, IndexError):
    """
    The queried offset is not covered by any line of the indexed text.

    `offset` and `length` are kept only to build the message; the caller
    already knows both, and the error carries no other state.
    """

    def __init__(self, offset: int, length: int) -> None:
        super().__init__(offset, length)
        self.offset = offset
        self.length = length

    def __str__(self) -> str:
        return f"offset {self.offset} out of bounds for text of length {self.length}"


class DiagnosticError(LinePosException):
    """A Diagnostic raised as an error; prints as a code frame on a rich Console."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.headline())
        self.diagnostic = diagnostic

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        from linepos.report import render

        yield render(self.diagnostic)
