# topmark:header:start
#
#   project      : IniKeep
#   file         : cursor.py
#   file_relpath : src/inikeep/ini/cursor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""One-pass, lookahead-1 cursor over a sequence of lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inikeep.ini.store import LineStore

# (line, index), or (None, None) once the input is exhausted
CursorItem = tuple[str, int] | tuple[None, None]


class LineCursor:
    """Forward-only traversal yielding ``(line, index)`` pairs.

    The parser uses `peek` to look at the next line without consuming it when
    deciding where a section body ends. The cursor cannot be restarted.
    """

    def __init__(self, lines: LineStore | Sequence[str]) -> None:
        self._lines: LineStore | Sequence[str] = lines
        self._index: int = -1

    def _item_at(self, index: int) -> CursorItem:
        if index < len(self._lines):
            return self._lines[index], index
        return None, None

    def peek(self) -> CursorItem:
        """Return the next pair without consuming it."""
        return self._item_at(self._index + 1)

    def next(self) -> CursorItem:
        """Consume and return the next pair."""
        if self._index < len(self._lines):
            self._index += 1
        return self._item_at(self._index)
