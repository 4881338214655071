"""Conversion of locerr diagnostics to Language Server Protocol types.

LSP positions are 0-indexed; locerr lines and columns are 1-indexed.
Notes that point somewhere become related information; the rest are
appended to the message.
"""

from __future__ import annotations

from pathlib import Path

from lsprotocol import types as lsp

from locerr.errors import Diagnostic
from locerr.source import Position, Source


def position_to_lsp(pos: Position) -> lsp.Position:
    """Convert a 1-indexed Position to a 0-indexed LSP Position."""
    return lsp.Position(line=max(pos.line - 1, 0), character=max(pos.column - 1, 0))


def range_to_lsp(start: Position, end: Position | None = None) -> lsp.Range:
    """Convert a range; a missing end gives an empty range at *start*."""
    first = position_to_lsp(start)
    return lsp.Range(start=first, end=position_to_lsp(end) if end is not None else first)


def source_uri(source: Source) -> str:
    if source.exists:
        return Path(source.path).absolute().as_uri()
    return source.path


def to_lsp_diagnostic(diag: Diagnostic, *, source: str = "locerr") -> lsp.Diagnostic:
    """Convert a Diagnostic to an LSP Diagnostic."""
    lines = [diag.message]
    related: list[lsp.DiagnosticRelatedInformation] = []
    for note in diag.notes:
        if note.pos is None or note.pos.source is None:
            lines.append(note.message)
            continue
        related.append(lsp.DiagnosticRelatedInformation(
            location=lsp.Location(
                uri=source_uri(note.pos.source),
                range=range_to_lsp(note.pos),
            ),
            message=note.message,
        ))

    return lsp.Diagnostic(
        range=range_to_lsp(diag.start, diag.end),
        severity=lsp.DiagnosticSeverity.Error,
        source=source,
        message="\n".join(lines),
        related_information=related or None,
    )
