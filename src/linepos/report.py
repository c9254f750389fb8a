"""
Locating diagnostics in a Source and drawing them as rich code frames.

A Diagnostic names a span of its Source; the frame shows the lines that span
touches (plus `context` lines on either side) and underlines the span. Lines
and columns come from the Source's LineIndex.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from linepos.index import Position
from linepos.source import Source, SourceSpan

__all__ = [
    "Level",
    "Diagnostic",
    "LinePosWarning",
    "DiagnosticWarning",
    "LineEndingWarning",
    "render",
]

TAB_WIDTH = 4

# Terminators left inside a line (mixed endings) are drawn as one visible cell.
_VISIBLE = str.maketrans({"\n": "␊", "\r": "␍"})


class Level(StrEnum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    message: str
    source: Source
    span: SourceSpan
    level: Level = Level.WARNING
    code: str | None = None
    note: str | None = None
    # secondary location, e.g. where a convention was first established
    see_also: tuple[str, SourceSpan] | None = None

    def __post_init__(self) -> None:
        n = len(self.source.contents)
        spans = [self.span] if self.see_also is None else [self.span, self.see_also[1]]
        for span in spans:
            if span.end > n:
                raise ValueError(
                    f"Diagnostic span [{span.start}, {span.end}) exceeds source length {n}"
                )

    @property
    def position(self) -> Position:
        return self.source.location(self.span.start)

    def headline(self) -> str:
        tag = f"{self.level}[{self.code}]" if self.code else str(self.level)
        pos = self.position
        return f"{tag}: {self.message} at {self.source.label}:{pos.line}:{pos.column}"


class LinePosWarning(Warning):
    """Base linepos warning category."""


class DiagnosticWarning(LinePosWarning):
    """A warning whose text is the headline of the Diagnostic it carries."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.headline())
        self.diagnostic = diagnostic


class LineEndingWarning(DiagnosticWarning):
    """A bare "\\n" inside text that is split on "\\r\\n"."""


def _frame(source: Source, span: SourceSpan, style: str, context: int) -> Panel:
    first, last = source.locate_span(span)
    index = source.index
    lo = max(1, first.line - context)
    hi = min(index.num_lines(), last.line + context)
    width = len(str(hi))

    rows: list[Text] = []
    for line_no in range(lo, hi + 1):
        bounds = index.line_span(line_no)
        raw = source.contents[bounds.start:bounds.end].rstrip("\r\n").translate(_VISIBLE)
        body = raw.expandtabs(TAB_WIDTH)
        rows.append(Text(f"{line_no:>{width}} | {body}"))
        if first.line <= line_no <= last.line:
            # carets follow display cells, so measure the tab-expanded prefix
            a = len(raw[: first.column].expandtabs(TAB_WIDTH)) if line_no == first.line else 0
            b = len(raw[: last.column].expandtabs(TAB_WIDTH)) if line_no == last.line else len(body)
            marker = Text(" " * (width + 3 + a))
            marker.append("^" * max(1, b - a), style=style)
            rows.append(marker)

    title = Text(f"{source.label}:{first.line}:{first.column}")
    return Panel.fit(Text("\n").join(rows), title=title, border_style=style)


def render(d: Diagnostic, *, context: int = 1) -> RenderableType:
    """Headline, main frame, optional secondary frame and note."""
    style = "bold red" if d.level is Level.ERROR else "bold yellow"
    parts: list[RenderableType] = [
        Text(d.headline(), style=style),
        _frame(d.source, d.span, style, context),
    ]
    if d.see_also is not None:
        label, span = d.see_also
        parts += [Text(label, style="dim"), _frame(d.source, span, "dim", context)]
    if d.note:
        parts.append(Text(f"note: {d.note}", style="italic"))
    return Group(*parts)
