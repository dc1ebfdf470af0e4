# topmark:header:start
#
#   project      : IniKeep
#   file         : test_store.py
#   file_relpath : tests/ini/test_store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `inikeep.ini.store`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from inikeep.ini.store import BOM, LineStore, split_terminator

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    "line, expected",
    [
        ("a = 1\n", ("a = 1", "\n")),
        ("a = 1\r\n", ("a = 1", "\r\n")),
        ("a = 1\r", ("a = 1", "\r")),
        ("a = 1", ("a = 1", "")),
        ("", ("", "")),
    ],
)
def test_split_terminator(line: str, expected: tuple[str, str]) -> None:
    """It should split a line into its text and its terminator."""
    assert split_terminator(line) == expected


def test_from_text_keeps_terminators() -> None:
    """It should split on LF, CRLF and CR only, keeping each terminator."""
    store = LineStore.from_text("a\r\nb\rc\nd\x0ce\n")

    assert store.lines == ["a\r\n", "b\r", "c\n", "d\x0ce\n"]
    assert store.to_text() == "a\r\nb\rc\nd\x0ce\n"


def test_dominant_newline() -> None:
    """It should use the most frequent terminator for new lines."""
    assert LineStore.from_text("a\r\nb\r\nc\n").newline == "\r\n"
    assert LineStore.from_text("a\nb\n").newline == "\n"
    assert LineStore.from_text("single line").newline == "\n"


def test_ends_with_newline() -> None:
    """It should record whether the text ended with a newline."""
    assert LineStore.from_text("a\nb\n").ends_with_newline is True
    assert LineStore.from_text("a\nb").ends_with_newline is False
    assert LineStore.from_text("").ends_with_newline is True


def test_bom_is_stripped_and_restored() -> None:
    """It should parse text without its BOM and re-attach it on output."""
    store = LineStore.from_text(BOM + "[a]\nx = 1\n")

    assert store.leading_bom is True
    assert store.lines[0] == "[a]\n"
    assert store.to_text() == BOM + "[a]\nx = 1\n"


def test_insert_and_delete() -> None:
    """It should splice lines in and out."""
    store = LineStore.from_text("0\n1\n2\n3\n")

    store.insert(1, "x\n")
    assert store.lines == ["0\n", "x\n", "1\n", "2\n", "3\n"]

    store.delete(2, 2)
    assert store.lines == ["0\n", "x\n", "3\n"]

    assert len(store) == 3
    assert store[2] == "3\n"


def test_terminate_uses_store_newline() -> None:
    """It should terminate new lines with the dominant newline."""
    store = LineStore.from_text("a\r\n")

    assert store.terminate("b") == "b\r\n"


def test_from_path_missing_file(tmp_path: Path) -> None:
    """It should yield an empty store for a missing path or a directory."""
    assert len(LineStore.from_path(tmp_path / "missing.ini")) == 0
    assert len(LineStore.from_path(tmp_path)) == 0


def test_from_path_reads_bytes_exactly(tmp_path: Path) -> None:
    """It should read CRLF files without newline translation."""
    path = tmp_path / "crlf.ini"
    path.write_bytes(b"[a]\r\nx = 1\r\n")

    store = LineStore.from_path(path)

    assert store.lines == ["[a]\r\n", "x = 1\r\n"]
    assert store.newline == "\r\n"


def test_from_path_rejects_invalid_utf8(tmp_path: Path) -> None:
    """It should propagate decoding errors."""
    path = tmp_path / "latin1.ini"
    path.write_bytes(b"[a]\nname = caf\xe9\n")

    with pytest.raises(UnicodeDecodeError):
        LineStore.from_path(path)
