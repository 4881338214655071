"""Located errors with stacked notes.

A Diagnostic is an ordinary exception carrying a start position, an optional
end position, a primary message and any number of notes. Build one with
``error``/``error_at``/``error_in``, or promote an existing exception with
``wrap``/``wrap_at``/``wrap_in``::

    err = error_in(start, end, "Found duplicate symbol 'foo'")
    err.note_at(prev, "Defined here at first")
    raise err

``str(err)`` is the uncolored rendering. Use a DiagnosticRenderer for color.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from typing import Union

from locerr.render import Segment, Style
from locerr.snippet import SnippetLine, extract
from locerr.source import UNKNOWN_POSITION, Position


@dataclass(frozen=True)
class Note:
    """A supplementary message, optionally pointing at its own position."""

    message: str
    pos: Position | None = None


class Diagnostic(Exception):
    """A compilation error with positional information and stacked messages."""

    def __init__(
        self,
        start: Position,
        end: Position | None,
        message: str,
        notes: Iterable[Note] = (),
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end
        self.message = message
        self.notes: list[Note] = list(notes)

    def __reduce__(self):
        return (self.__class__, (self.start, self.end, self.message, self.notes))

    @property
    def messages(self) -> list[str]:
        """The primary message followed by every note's message."""
        return [self.message, *(n.message for n in self.notes)]

    def note(self, message: str) -> Diagnostic:
        """Stack an additional message upon this error."""
        self.notes.append(Note(message))
        return self

    def note_at(self, pos: Position, message: str) -> Diagnostic:
        """Stack an additional message pointing at *pos*."""
        self.notes.append(Note(message, pos))
        return self

    def snippet(self) -> list[SnippetLine]:
        return extract(self.start, self.end)

    def render(self, base_dir: str | PathLike[str] | None = None) -> list[Segment]:
        """Lay the error out as styled segments.

        Error: {msg} (at {pos})
          Note: {note1}
          Note: {note2} (at {pos})

        > {snippet line 1}
        > {snippet line 2}

        """
        out = [
            Segment("Error: ", Style.PRIMARY_LABEL),
            Segment(self.message, Style.PRIMARY_MESSAGE),
        ]
        if self.start.source is not None:
            out.append(Segment(f" (at {self.start.format(base_dir)})", Style.LOCATION))

        for note in self.notes:
            out.append(Segment("\n"))
            out.append(Segment("  Note: ", Style.NOTE_LABEL))
            out.append(Segment(note.message, Style.NOTE_TEXT))
            if note.pos is not None:
                out.append(Segment(f" (at {note.pos.format(base_dir)})", Style.LOCATION))

        lines = self.snippet()
        if not lines:
            return out

        out.append(Segment("\n"))
        for line in lines:
            out.append(Segment("\n"))
            out.append(Segment("> ", Style.SNIPPET_QUOTE))
            if line.indent:
                out.append(Segment(line.indent))
            if line.code:
                out.append(Segment(line.code, Style.SNIPPET_EMPHASIS))
        out.append(Segment("\n\n"))
        return out

    def __str__(self) -> str:
        return "".join(s.text for s in self.render())

    def __repr__(self) -> str:
        return (
            f"Diagnostic(start={self.start.format()!r}, message={self.message!r}, "
            f"notes={len(self.notes)})"
        )


# Anything that can be promoted into a Diagnostic at a wrap boundary. The
# union is only documentation, since Diagnostic is itself a BaseException;
# the wrap functions tell the two apart with a `case Diagnostic()` pattern.
Failure = Union[Diagnostic, BaseException]


def error(message: str) -> Diagnostic:
    """Make an error without any location."""
    return Diagnostic(UNKNOWN_POSITION, None, message)


def error_at(pos: Position, message: str) -> Diagnostic:
    """Make an error pointing at a single position."""
    return Diagnostic(pos, None, message)


def error_in(start: Position, end: Position, message: str) -> Diagnostic:
    """Make an error covering the range [start, end)."""
    return Diagnostic(start, end, message)


def _message_of(err: Failure) -> str:
    match err:
        case Diagnostic():
            return err.message
        case _:
            return str(err)


def _promote(
    err: Failure, start: Position, end: Position | None, note: Note,
) -> Diagnostic:
    match err:
        case Diagnostic():
            err.notes.append(note)
            return err
        case _:
            diag = Diagnostic(start, end, str(err), [Note(note.message)])
            diag.__cause__ = err
            return diag


def wrap(err: Failure, message: str) -> Diagnostic:
    """Add a note to *err*, converting it to a Diagnostic if needed."""
    return _promote(err, UNKNOWN_POSITION, None, Note(message))


def wrap_at(pos: Position, err: Failure, message: str) -> Diagnostic:
    """Add a note at *pos* to *err*.

    A plain exception becomes a Diagnostic located at *pos*; an existing
    Diagnostic keeps its location and gets a note pointing at *pos*.
    """
    return _promote(err, pos, None, Note(message, pos))


def wrap_in(start: Position, end: Position, err: Failure, message: str) -> Diagnostic:
    """Like wrap_at, but a plain exception is located at the range [start, end)."""
    return _promote(err, start, end, Note(message, start))


def with_pos(pos: Position, err: Failure) -> Diagnostic:
    """Make a new error at *pos* carrying the message of *err*."""
    return Diagnostic(pos, None, _message_of(err))


def with_range(start: Position, end: Position, err: Failure) -> Diagnostic:
    """Make a new error covering [start, end) carrying the message of *err*."""
    return Diagnostic(start, end, _message_of(err))
