# topmark:header:start
#
#   project      : IniKeep
#   file         : test_render_save.py
#   file_relpath : tests/ini/test_render_save.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for rendering, saving and diffing an `IniFile`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from inikeep.config.types import FileWriteStrategy
from inikeep.ini.editor import IniFile
from inikeep.ini.store import BOM
from inikeep.ini.writer import NullSink, WriteStatus
from tests.conftest import make_ini

if TYPE_CHECKING:
    from pathlib import Path

ROUND_TRIP_CASES: dict[str, str] = {
    "empty": "",
    "blank lines only": "\n\n  \n",
    "comments and spacing": (
        "; leading comment\n"
        "\n"
        "[section1]\n"
        "# comment in section\n"
        "foo=foovalue\n"
        "\n"
        "\n"
        "bar = barvalue\n"
        "  master = true\n"
        "\n"
        "[section2]\n"
        "\tfoo= foovalue2\n"
        "baz=bazvalue\n"
        " ; yet another comment\n"
    ),
    "crlf": "[a]\r\nx = 1\r\n\r\n[b]\r\ny = 2\r\n",
    "cr only": "[a]\rx = 1\r",
    "mixed terminators": "[a]\nx = 1\r\ny = 2\r",
    "no final newline": "[a]\nx = 1",
    "bom": BOM + "[a]\nx = 1\n",
    "garbage lines": "just text\n[a]\n=== \nno separator here\n",
    "repeated header": "[a]\nx = 1\n[b]\n[a]\ny = 2\n",
    "trailing whitespace": "[a]   \nx = 1   \n   \n",
}


@pytest.mark.parametrize("text", list(ROUND_TRIP_CASES.values()), ids=list(ROUND_TRIP_CASES))
def test_round_trip_identity(text: str) -> None:
    """It should reproduce an unmodified document exactly."""
    ini = make_ini(text)

    assert ini.render() == text
    assert not ini.has_changes()
    assert ini.diff() == ""


def test_save_writes_rendered_text(tmp_path: Path) -> None:
    """It should write the edited document to its path."""
    path = tmp_path / "app.ini"
    path.write_bytes(b"[a]\r\nx = 1\r\n")

    ini = IniFile(path)
    ini.set_value("a", "x", value="2")
    result = ini.save()

    assert path.read_bytes() == b"[a]\r\nx = 2\r\n"
    assert result.status is WriteStatus.WRITTEN
    assert result.bytes_written == len(b"[a]\r\nx = 2\r\n")


@pytest.mark.parametrize("strategy", list(FileWriteStrategy))
def test_save_with_each_strategy(tmp_path: Path, strategy: FileWriteStrategy) -> None:
    """It should write identical bytes with every write strategy."""
    path = tmp_path / "app.ini"
    path.write_text("[a]\nx = 1\n", encoding="utf-8")

    ini = IniFile(path, write_strategy=strategy)
    ini.set_value("b", "y", value="2")
    ini.save()

    assert path.read_text(encoding="utf-8") == "[a]\nx = 1\n\n[b]\ny = 2\n"


def test_save_creates_missing_file(tmp_path: Path) -> None:
    """It should create the file when the path did not exist."""
    path = tmp_path / "new.ini"

    ini = IniFile(path)
    ini.set_value("a", "foo", " = ", "1")
    ini.save()

    assert path.read_text(encoding="utf-8") == "[a]\nfoo = 1\n"


def test_save_empties_file(tmp_path: Path) -> None:
    """It should write an empty file once the last section is removed."""
    path = tmp_path / "app.ini"
    path.write_text("[a]\nfoo = 1\n", encoding="utf-8")

    ini = IniFile(path)
    ini.remove_setting("a", "foo")
    ini.save()

    assert path.read_bytes() == b""


def test_save_keeps_bom(tmp_path: Path) -> None:
    """It should write the BOM back in front of the edited text."""
    path = tmp_path / "bom.ini"
    path.write_bytes(b"\xef\xbb\xbf[a]\nx = 1\n")

    ini = IniFile(path)
    assert ini.get_value("a", "x") == "1"
    ini.set_value("a", "x", value="2")
    ini.save()

    assert path.read_bytes() == b"\xef\xbb\xbf[a]\nx = 2\n"


def test_save_to_null_sink(tmp_path: Path) -> None:
    """It should leave the file untouched when saving to a null sink."""
    path = tmp_path / "app.ini"
    path.write_text("[a]\nx = 1\n", encoding="utf-8")

    ini = IniFile(path)
    ini.set_value("a", "x", value="2")
    result = ini.save(NullSink())

    assert result.status is WriteStatus.SKIPPED
    assert path.read_text(encoding="utf-8") == "[a]\nx = 1\n"


def test_diff_shows_the_edit() -> None:
    """It should diff the original text against the current render."""
    ini = make_ini("[a]\nx = 1\n", path="app.ini")

    ini.set_value("a", "x", value="2")
    patch = ini.diff()

    assert ini.has_changes()
    assert "--- app.ini (original)" in patch
    assert "+++ app.ini (updated)" in patch
    assert "-x = 1\n" in patch
    assert "+x = 2\n" in patch


def test_reverting_an_edit_reports_no_change() -> None:
    """It should compare rendered text, not the edit history."""
    ini = make_ini("[a]\nx = 1\n")

    ini.set_value("a", "x", value="2")
    ini.set_value("a", "x", value="1")

    assert not ini.has_changes()


def test_repr() -> None:
    """It should show the path and section names."""
    assert "sections=['', 'a']" in repr(make_ini("[a]\n", path="x.ini"))
