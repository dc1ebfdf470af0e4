# topmark:header:start
#
#   project      : IniKeep
#   file         : store.py
#   file_relpath : src/inikeep/ini/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Line store: the in-memory image of an INI file.

The store holds the file as a list of lines, each keeping its own line
terminator (``\n``, ``\r\n`` or ``\r``), so that unchanged lines can be written
back byte for byte. It also records the facts needed to render new lines
consistently: the dominant newline style, whether the text ended with a
newline, and whether it started with a UTF-8 BOM.

Indices into the store shift after every `insert` / `delete`; the editor is
responsible for renumbering anything that refers to lines after the mutation
point.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from inikeep.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from inikeep.config.logging import InikeepLogger

logger: InikeepLogger = get_logger(__name__)

BOM: str = "\ufeff"
NEWLINES: tuple[str, ...] = ("\r\n", "\n", "\r")


def split_terminator(line: str) -> tuple[str, str]:
    """Split a stored line into its text and its line terminator.

    Args:
        line (str): A line as held by the store.

    Returns:
        tuple[str, str]: ``(text, terminator)``; the terminator is ``""`` for a
            final line without newline.
    """
    for nl in NEWLINES:
        if line.endswith(nl):
            return line[: -len(nl)], nl
    return line, ""


def _dominant_newline(lines: list[str]) -> str | None:
    hist: dict[str, int] = {"\n": 0, "\r\n": 0, "\r": 0}
    for ln in lines:
        _text, nl = split_terminator(ln)
        if nl:
            hist[nl] += 1
    nl_style, count = max(hist.items(), key=lambda kv: kv[1])
    return nl_style if count > 0 else None


class LineStore:
    """Ordered, mutable sequence of raw text lines.

    Attributes:
        lines (list[str]): The lines, terminators included.
        newline (str): Terminator used for lines created by the editor.
        ends_with_newline (bool): Whether the original text ended with a newline
            (True for empty text).
        leading_bom (bool): Whether the original text started with a UTF-8 BOM.
    """

    def __init__(
        self,
        lines: list[str] | None = None,
        *,
        newline: str | None = None,
        ends_with_newline: bool | None = None,
        leading_bom: bool = False,
    ) -> None:
        self.lines: list[str] = list(lines) if lines else []
        self.newline: str = newline or _dominant_newline(self.lines) or "\n"
        if ends_with_newline is None:
            ends_with_newline = not self.lines or split_terminator(self.lines[-1])[1] != ""
        self.ends_with_newline: bool = ends_with_newline
        self.leading_bom: bool = leading_bom

    @classmethod
    def from_text(cls, text: str) -> LineStore:
        """Build a store from a text image.

        Lines are split on ``\\n``, ``\\r\\n`` and ``\\r`` only, keeping the terminators.

        Args:
            text (str): The full file text.

        Returns:
            LineStore: The store for ``text``.
        """
        leading_bom: bool = text.startswith(BOM)
        if leading_bom:
            text = text[len(BOM) :]
        lines: list[str] = list(io.StringIO(text, newline=""))
        return cls(lines, leading_bom=leading_bom)

    @classmethod
    def from_path(cls, path: Path) -> LineStore:
        """Read a file into a store.

        A path that does not exist, or that is not a regular file, yields an
        empty store. The file is only ever held in memory as a whole, which
        assumes small configuration files.

        Args:
            path (Path): The file to read.

        Returns:
            LineStore: The store for the file content.

        Raises:
            OSError: If an existing file cannot be read.
        """
        if not path.is_file():
            logger.debug("No regular file at %s: starting from an empty document", path)
            return cls()
        with path.open("r", encoding="utf-8", newline="") as f:
            text: str = f.read()
        store: LineStore = cls.from_text(text)
        logger.trace(
            "Read %d line(s) from %s (newline=%r, ends_with_newline=%s)",
            len(store),
            path,
            store.newline,
            store.ends_with_newline,
        )
        return store

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    def __setitem__(self, index: int, line: str) -> None:
        self.lines[index] = line

    def insert(self, index: int, line: str) -> None:
        """Insert ``line`` before position ``index``; later indices shift by +1."""
        self.lines.insert(index, line)

    def delete(self, index: int, count: int = 1) -> None:
        """Delete ``count`` lines starting at ``index``; later indices shift by -count."""
        del self.lines[index : index + count]

    def terminate(self, text: str) -> str:
        """Return ``text`` with the store's newline appended."""
        return text + self.newline

    def to_text(self) -> str:
        """Return the stored lines as text, re-attaching a leading BOM."""
        text: str = "".join(self.lines)
        return BOM + text if self.leading_bom else text
