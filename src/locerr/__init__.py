"""Compiler errors with source locations, stacked notes and code snippets."""

from __future__ import annotations

__version__ = "0.1.0"

from locerr.errors import (  # noqa: E402
    Diagnostic,
    Failure,
    Note,
    error,
    error_at,
    error_in,
    with_pos,
    with_range,
    wrap,
    wrap_at,
    wrap_in,
)
from locerr.render import DiagnosticRenderer, Segment, Style  # noqa: E402
from locerr.snippet import SnippetLine  # noqa: E402
from locerr.source import UNKNOWN_POSITION, Position, Source  # noqa: E402

__all__ = [
    "Diagnostic",
    "DiagnosticRenderer",
    "Failure",
    "Note",
    "Position",
    "Segment",
    "SnippetLine",
    "Source",
    "Style",
    "UNKNOWN_POSITION",
    "error",
    "error_at",
    "error_in",
    "with_pos",
    "with_range",
    "wrap",
    "wrap_at",
    "wrap_in",
]
