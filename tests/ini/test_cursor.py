# topmark:header:start
#
#   project      : IniKeep
#   file         : test_cursor.py
#   file_relpath : tests/ini/test_cursor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `inikeep.ini.cursor.LineCursor`."""

from __future__ import annotations

from inikeep.ini.cursor import LineCursor
from inikeep.ini.store import LineStore


def test_peek_does_not_consume() -> None:
    """It should return the same pair from `peek` until `next` is called."""
    cursor = LineCursor(["a\n", "b\n"])

    assert cursor.peek() == ("a\n", 0)
    assert cursor.peek() == ("a\n", 0)
    assert cursor.next() == ("a\n", 0)
    assert cursor.peek() == ("b\n", 1)


def test_end_of_input() -> None:
    """It should return (None, None) once exhausted, repeatedly."""
    cursor = LineCursor(LineStore.from_text("only\n"))

    assert cursor.next() == ("only\n", 0)
    assert cursor.next() == (None, None)
    assert cursor.next() == (None, None)
    assert cursor.peek() == (None, None)


def test_empty_input() -> None:
    """It should be exhausted immediately on empty input."""
    cursor = LineCursor([])

    assert cursor.peek() == (None, None)
    assert cursor.next() == (None, None)
