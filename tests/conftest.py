"""Shared pytest fixtures for the locerr test suite."""

from __future__ import annotations

import pytest

from locerr.source import Position, Source

PRELUDE = 'package prelude\n\nimport (\n\t"testing"\n)'

EXAMPLE = (
    "int main() {\n"
    "    foo(aaa,\n"
    "        bbb,\n"
    "        ccc);\n"
    "    return 0;\n"
    "}"
)


@pytest.fixture
def prelude():
    return Source.from_string(PRELUDE)


@pytest.fixture
def prelude_range(prelude):
    """From 'kage' on line 1 into 'import' on line 3."""
    return Position(4, 1, 4, prelude), Position(20, 3, 4, prelude)


@pytest.fixture
def example():
    return Source.from_string(EXAMPLE)


@pytest.fixture
def example_range(example):
    """From 'aaa' on line 2 into 'ccc);' on line 4."""
    return Position(21, 2, 9, example), Position(50, 4, 12, example)
