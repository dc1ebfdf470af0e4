# topmark:header:start
#
#   project      : IniKeep
#   file         : test_section.py
#   file_relpath : tests/ini/test_section.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `inikeep.ini.section` (Section and SectionTable)."""

from __future__ import annotations

import pytest

from inikeep.ini.section import Section, SectionTable


def test_new_section_state() -> None:
    """It should treat a section without a span as new and empty."""
    section = Section("fresh")

    assert section.is_new
    assert section.is_empty
    assert not section.is_global
    assert list(section.line_range()) == []


def test_existing_section_span() -> None:
    """It should replay from the header line to the last body line."""
    section = Section("a", 3, 5, {"x": "1"}, 2)

    assert not section.is_new
    assert list(section.line_range()) == [3, 4, 5]
    assert section.indentation == 2
    assert section.get_value("x") == "1"


def test_existing_settings_win_over_additional() -> None:
    """It should look up existing settings before additional ones."""
    section = Section("a", 0, 1, {"x": "1"})
    section.set_additional_setting("y", "2")

    assert section.get_value("y") == "2"
    assert section.setting_names == ["x", "y"]
    assert section.has_existing_setting("x")
    assert not section.has_existing_setting("y")


def test_span_bookkeeping() -> None:
    """It should grow, shrink and shift its span."""
    section = Section("a", 2, 4, {"x": "1"})

    section.insert_inline_setting("y", "2")
    assert (section.start_line, section.end_line) == (2, 5)

    section.remove_existing_setting("x")
    assert (section.start_line, section.end_line) == (2, 4)
    assert section.setting_names == ["y"]

    section.shift_lines(-2)
    assert (section.start_line, section.end_line) == (0, 2)


def test_remove_unknown_setting_keeps_span() -> None:
    """It should not shrink the span for a setting it does not hold."""
    section = Section("a", 0, 1, {"x": "1"})

    section.remove_existing_setting("nope")

    assert section.end_line == 1


def test_shift_ignores_new_sections() -> None:
    """It should leave sections without a span untouched."""
    section = Section("a")

    section.shift_lines(3)

    assert section.start_line is None
    assert section.end_line is None


def _table(*sections: Section) -> SectionTable:
    table = SectionTable()
    for s in sections:
        table.add(s)
    return table


def test_table_order_and_lookup() -> None:
    """It should keep document order and resolve names."""
    g, a, b = Section("", 0, 0), Section("a", 1, 2), Section("b", 3, 4)
    table = _table(g, a, b)

    assert len(table) == 3
    assert list(table) == [g, a, b]
    assert table.names() == ["", "a", "b"]
    assert "a" in table
    assert "c" not in table
    assert table.get("b") is b
    assert table.position(b) == 2


def test_shift_after_only_moves_later_sections() -> None:
    """It should renumber sections after the given one and nothing else."""
    g, a, b, c = Section("", 0, 0), Section("a", 1, 2), Section("b", 3, 4), Section("c")
    table = _table(g, a, b, c)

    table.shift_after(a, +1)

    assert (g.start_line, g.end_line) == (0, 0)
    assert (a.start_line, a.end_line) == (1, 2)
    assert (b.start_line, b.end_line) == (4, 5)
    assert c.is_new


def test_duplicate_names() -> None:
    """It should keep duplicate records and resolve the name to the last one."""
    first, second = Section("a", 0, 1), Section("a", 2, 3)
    table = _table(Section(""), first, second)

    assert len(table) == 3
    assert table.names() == ["", "a"]
    assert table.get("a") is second
    assert table.position(second) == 2

    table.remove(second)
    assert table.get("a") is first

    table.remove(first)
    assert "a" not in table


def test_position_of_foreign_section() -> None:
    """It should reject sections that are not in the table."""
    with pytest.raises(ValueError):
        SectionTable().position(Section("x"))
