"""Quoted source excerpts for diagnostics.

Excerpts are always widened to whole lines: a range that starts or ends in
the middle of a line quotes the full line. Leading indentation is split off
each line so renderers can emphasise the code without underlining it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from locerr.source import Position, Source

_INDENT_CHARS = " \t"


@dataclass(frozen=True)
class SnippetLine:
    """One quoted line: its leading whitespace and the rest."""

    indent: str
    code: str

    @classmethod
    def split(cls, line: str) -> SnippetLine:
        # CRLF sources leave one carriage return at the end of each line.
        line = line.removesuffix("\r")
        code = line.lstrip(_INDENT_CHARS)
        return cls(line[: len(line) - len(code)], code)

    @property
    def text(self) -> str:
        return self.indent + self.code


def extract_range(source: Source, start: int, end: int) -> list[SnippetLine]:
    """Quote every line touched by the half-open offset range [start, end)."""
    code = source.code
    start = max(start, 0)
    end = min(end, len(code))
    if start >= end:
        return []

    left = code.rfind("\n", 0, start) + 1
    # Searching from the last covered character keeps a range that ends on
    # a newline on the line that newline terminates.
    right = code.find("\n", end - 1)
    if right == -1:
        right = len(code)

    region = code[left:right]
    if not region.removesuffix("\r"):
        return []
    return [SnippetLine.split(line) for line in region.split("\n")]


def extract_line(source: Source, line: int) -> list[SnippetLine]:
    """Quote a single line by its 1-based number."""
    code = source.code
    if not code or line < 1:
        return []

    begin = 0
    for _ in range(line - 1):
        newline = code.find("\n", begin)
        if newline == -1:
            return []
        begin = newline + 1

    stop = code.find("\n", begin)
    text = code[begin:] if stop == -1 else code[begin:stop]
    if not text.removesuffix("\r"):
        return []
    return [SnippetLine.split(text)]


def extract(start: Position, end: Position | None = None) -> list[SnippetLine]:
    """Quote the lines for a point (*end* is None) or a range.

    A point is looked up by line number rather than offset, since positions
    synthesized outside a lexer may carry a line without a usable offset.
    """
    if start.source is None:
        return []
    if end is None:
        return extract_line(start.source, start.line)
    return extract_range(start.source, start.offset, end.offset)
