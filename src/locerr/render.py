"""Styled rendering of diagnostics.

A Diagnostic renders itself into a flat list of (text, style) segments.
DiagnosticRenderer turns those segments into a string, either plain or
with ANSI escapes. Color is a property of the renderer instance.
"""

from __future__ import annotations

from enum import Enum
from os import PathLike
from typing import TYPE_CHECKING, NamedTuple, TextIO

if TYPE_CHECKING:
    from locerr.config import RenderConfig
    from locerr.errors import Diagnostic


class Style(Enum):
    PLAIN = "plain"
    PRIMARY_LABEL = "primary-label"
    PRIMARY_MESSAGE = "primary-message"
    LOCATION = "location"
    NOTE_LABEL = "note-label"
    NOTE_TEXT = "note-text"
    SNIPPET_QUOTE = "snippet-quote-marker"
    SNIPPET_EMPHASIS = "snippet-emphasis"


class Segment(NamedTuple):
    text: str
    style: Style = Style.PLAIN


# ANSI color codes
_COLORS = {
    Style.PRIMARY_LABEL: "\033[31m",    # red
    Style.PRIMARY_MESSAGE: "\033[1m",   # bold
    Style.LOCATION: "\033[2m",          # dim
    Style.NOTE_LABEL: "\033[32m",       # green
}
_EMPHASIS = "\033[1;4m"  # bold underline
_RESET = "\033[0m"


class DiagnosticRenderer:
    """Flattens diagnostic segments to text, optionally colored."""

    def __init__(
        self,
        *,
        color: bool = True,
        emphasize: bool = False,
        base_dir: str | PathLike[str] | None = None,
    ) -> None:
        self.color = color
        self.emphasize = emphasize
        self.base_dir = base_dir

    @classmethod
    def from_config(
        cls, config: RenderConfig, stream: TextIO | None = None,
    ) -> DiagnosticRenderer:
        """Build a renderer for *stream*, resolving 'auto' color against it."""
        return cls(
            color=config.color.resolve(stream),
            emphasize=config.emphasize,
            base_dir=config.base_dir,
        )

    def _c(self, style: Style) -> str:
        if not self.color:
            return ""
        if style is Style.SNIPPET_EMPHASIS:
            return _EMPHASIS if self.emphasize else ""
        return _COLORS.get(style, "")

    def style(self, segment: Segment) -> str:
        code = self._c(segment.style)
        if not code or not segment.text:
            return segment.text
        return f"{code}{segment.text}{_RESET}"

    def render(self, diag: Diagnostic) -> str:
        return "".join(self.style(s) for s in diag.render(base_dir=self.base_dir))

    def write(self, diag: Diagnostic, stream: TextIO) -> None:
        stream.write(self.render(diag))
