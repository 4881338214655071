"""Source buffers and positions inside them."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path, PurePath
from typing import TextIO

logger = logging.getLogger("locerr.source")

UNKNOWN_LOCATION = "<unknown>"
STDIN_PATH = "<stdin>"
DUMMY_PATH = "<dummy>"


@dataclass(frozen=True)
class Source:
    """An immutable unit of source text.

    ``path`` is what locations display. ``exists`` is True only when the text
    was read from a real file, which is what allows the path to be shortened
    against a base directory.
    """

    path: str
    exists: bool
    code: str = field(repr=False)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Source:
        """Read a UTF-8 file. OSError propagates to the caller."""
        resolved = Path(path).absolute()
        code = resolved.read_text(encoding="utf-8")
        logger.debug("loaded %s (%d chars)", resolved, len(code))
        return cls(str(resolved), True, code)

    @classmethod
    def from_stdin(cls, stream: TextIO | None = None) -> Source:
        """Read everything from stdin (or *stream*)."""
        code = (stream or sys.stdin).read()
        logger.debug("loaded %s (%d chars)", STDIN_PATH, len(code))
        return cls(STDIN_PATH, False, code)

    @classmethod
    def from_string(cls, code: str, path: str = DUMMY_PATH) -> Source:
        return cls(path, False, code)

    def display_path(self, base_dir: str | PathLike[str] | None = None) -> str:
        """Return the path relative to *base_dir* (default: cwd) when possible."""
        if not self.exists:
            return self.path
        base = PurePath(base_dir) if base_dir is not None else Path.cwd()
        path = PurePath(self.path)
        if path != base and path.is_relative_to(base):
            return str(path.relative_to(base))
        return self.path

    def pos_at(self, offset: int) -> Position:
        """Compute the position of a character offset, clamped to the text."""
        offset = max(0, min(offset, len(self.code)))
        head = self.code[:offset]
        line = head.count("\n") + 1
        column = offset - (head.rfind("\n") + 1) + 1
        return Position(offset, line, column, self)


@dataclass(frozen=True)
class Position:
    """A point in a Source.

    Offsets are 0-based; line/column are 1-based. The triple is trusted as
    given (normally a lexer tracks all three), nothing here recomputes it.
    A position without a source is the unknown location.
    """

    offset: int = 0
    line: int = 0
    column: int = 0
    source: Source | None = None

    @classmethod
    def unknown(cls) -> Position:
        return UNKNOWN_POSITION

    @property
    def is_known(self) -> bool:
        return self.source is not None

    def format(self, base_dir: str | PathLike[str] | None = None) -> str:
        """Format as 'file:line:column'."""
        if self.source is None:
            return UNKNOWN_LOCATION
        return f"{self.source.display_path(base_dir)}:{self.line}:{self.column}"

    def __str__(self) -> str:
        return self.format()


UNKNOWN_POSITION = Position()
