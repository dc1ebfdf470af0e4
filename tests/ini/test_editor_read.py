# topmark:header:start
#
#   project      : IniKeep
#   file         : test_editor_read.py
#   file_relpath : tests/ini/test_editor_read.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the read operations of `inikeep.ini.editor.IniFile`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from inikeep.config.model import EditorConfig
from inikeep.config.types import FileWriteStrategy
from inikeep.ini.editor import IniFile
from tests.conftest import make_ini

if TYPE_CHECKING:
    from pathlib import Path

TEXT = (
    "# global comment\n"
    "name = top\n"
    "\n"
    "[server]\n"
    "host = localhost\n"
    "port = 8080\n"
    "\n"
    "[client]\n"
    "  retries=3\n"
)


def test_section_names() -> None:
    """It should list section names in document order, global first."""
    ini = make_ini(TEXT)

    assert ini.section_names() == ["", "server", "client"]
    assert ini.section_exists("server")
    assert ini.section_exists("")
    assert not ini.section_exists("missing")


def test_get_value() -> None:
    """It should return values, or None for unknown sections and settings."""
    ini = make_ini(TEXT)

    assert ini.get_value("", "name") == "top"
    assert ini.get_value("server", "port") == "8080"
    assert ini.get_value("client", "retries") == "3"
    assert ini.get_value("server", "missing") is None
    assert ini.get_value("missing", "port") is None


def test_get_settings() -> None:
    """It should map every setting of a section to its value."""
    ini = make_ini(TEXT)

    assert ini.get_settings("server") == {"host": "localhost", "port": "8080"}
    assert ini.get_settings("missing") == {}


def test_get_settings_includes_pending_settings() -> None:
    """It should list existing settings first, then settings added since parsing."""
    ini = make_ini(TEXT)

    ini.set_value("server", "timeout", value="5")
    ini.set_value("server", "host", value="example.org")

    assert list(ini.get_settings("server").items()) == [
        ("host", "example.org"),
        ("port", "8080"),
        ("timeout", "5"),
    ]


def test_missing_file_is_an_empty_document(tmp_path: Path) -> None:
    """It should read a missing path as an empty document."""
    ini = IniFile(tmp_path / "absent.ini")

    assert ini.section_names() == [""]
    assert ini.render() == ""
    assert not ini.has_changes()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"key_val_separator": ""},
        {"indent_char": ""},
        {"indent_char": "  "},
        {"indent_width": -1},
    ],
)
def test_invalid_parameters(kwargs: dict[str, object]) -> None:
    """It should reject invalid editor parameters."""
    with pytest.raises(ValueError):
        make_ini("", **kwargs)


def test_from_config(tmp_path: Path) -> None:
    """It should take its parameters from an `EditorConfig`."""
    path = tmp_path / "app.ini"
    path.write_text("<main>\nkey: value\n", encoding="utf-8")
    config = EditorConfig(
        key_val_separator=": ",
        section_prefix="<",
        section_suffix=">",
        indent_char="\t",
        indent_width=1,
        write_strategy=FileWriteStrategy.IN_PLACE,
    )

    ini = IniFile.from_config(path, config)

    assert ini.get_value("main", "key") == "value"
    assert ini.write_strategy is FileWriteStrategy.IN_PLACE
    ini.set_value("main", "other", value="x")
    assert ini.render() == "<main>\nkey: value\n\tother: x\n"
