# topmark:header:start
#
#   project      : IniKeep
#   file         : section.py
#   file_relpath : src/inikeep/ini/section.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Section model and the ordered section table.

A `Section` tracks one named section: the settings that have a physical line,
the settings added at runtime that do not have one yet, the physical line span
it occupies in the `LineStore`, and its indentation convention.

Span semantics:
    - For a named section, ``start_line`` is the index of its header line and
      ``end_line`` the index of its last body line (``end_line == start_line``
      for an empty body).
    - For the global section, ``start_line`` is ``0`` and there is no header.
    - A section with no physical presence ("new") has both set to ``None``.

The `SectionTable` keeps sections in document order and owns the renumbering
pass that must follow every insert into / delete from the line store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inikeep.config.logging import get_logger
from inikeep.constants import GLOBAL_SECTION

if TYPE_CHECKING:
    from collections.abc import Iterator

    from inikeep.config.logging import InikeepLogger

logger: InikeepLogger = get_logger(__name__)


class Section:
    """One section of an INI document.

    Args:
        name (str): Section name; ``""`` is the global section.
        start_line (int | None): Header line index (``0`` for the global section),
            or None for a new section.
        end_line (int | None): Index of the last body line, or None for a new section.
        settings (dict[str, str] | None): Settings parsed from the body.
        indentation (int | None): Minimum indentation of the parsed settings.
    """

    def __init__(
        self,
        name: str,
        start_line: int | None = None,
        end_line: int | None = None,
        settings: dict[str, str] | None = None,
        indentation: int | None = None,
    ) -> None:
        self.name: str = name
        self.start_line: int | None = start_line
        self.end_line: int | None = end_line
        self.existing_settings: dict[str, str] = dict(settings) if settings else {}
        self.additional_settings: dict[str, str] = {}
        self.indentation: int | None = indentation

    def __repr__(self) -> str:
        return (
            f"Section(name={self.name!r}, start_line={self.start_line}, end_line={self.end_line}, "
            f"existing={len(self.existing_settings)}, additional={len(self.additional_settings)})"
        )

    @property
    def is_global(self) -> bool:
        return self.name == GLOBAL_SECTION

    @property
    def is_new(self) -> bool:
        """Whether the section has no physical lines in the store."""
        return self.start_line is None

    @property
    def is_empty(self) -> bool:
        """Whether the section holds neither existing nor additional settings."""
        return not self.existing_settings and not self.additional_settings

    @property
    def setting_names(self) -> list[str]:
        """Existing setting names followed by additional ones not already listed."""
        names: list[str] = list(self.existing_settings)
        names.extend(k for k in self.additional_settings if k not in self.existing_settings)
        return names

    def line_range(self) -> range:
        """Return the indices of the section's physical span (empty for a new section)."""
        if self.start_line is None or self.end_line is None:
            return range(0)
        return range(self.start_line, self.end_line + 1)

    def get_value(self, setting: str) -> str | None:
        if setting in self.existing_settings:
            return self.existing_settings[setting]
        return self.additional_settings.get(setting)

    def has_existing_setting(self, setting: str) -> bool:
        return setting in self.existing_settings

    def update_existing_setting(self, setting: str, value: str) -> None:
        self.existing_settings[setting] = value

    def remove_existing_setting(self, setting: str, removed_lines: int = 1) -> None:
        """Forget ``setting`` and shrink the span by the number of deleted lines."""
        if self.existing_settings.pop(setting, None) is not None and self.end_line is not None:
            self.end_line -= removed_lines

    def insert_inline_setting(self, setting: str, value: str) -> None:
        """Record a setting whose line was inserted inside the span."""
        self.existing_settings[setting] = value
        if self.end_line is not None:
            self.end_line += 1

    def set_additional_setting(self, setting: str, value: str) -> None:
        self.additional_settings[setting] = value

    def shift_lines(self, delta: int) -> None:
        """Move the span by ``delta`` lines; new sections are left alone."""
        if self.start_line is not None:
            self.start_line += delta
        if self.end_line is not None:
            self.end_line += delta


class SectionTable:
    """Sections in document order, addressable by name.

    Records are kept by identity: a header repeated in the file produces two
    records (both are rendered), while lookups by name resolve to the last one.
    The global section is always the first record.
    """

    def __init__(self) -> None:
        self._records: list[Section] = []
        self._by_name: dict[str, Section] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Section | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        """Section names in first-seen document order, without duplicates."""
        return list(dict.fromkeys(s.name for s in self._records))

    def position(self, section: Section) -> int:
        """Return the record position of ``section`` (by identity)."""
        for index, record in enumerate(self._records):
            if record is section:
                return index
        raise ValueError(f"section not in table: {section!r}")

    def add(self, section: Section) -> None:
        """Append ``section`` at the end of document order."""
        if section.name in self._by_name:
            logger.warning("Section [%s] appears more than once", section.name)
        self._records.append(section)
        self._by_name[section.name] = section

    def remove(self, section: Section) -> None:
        """Drop ``section`` from the table."""
        position: int = self.position(section)
        del self._records[position]
        if self._by_name.get(section.name) is section:
            # fall back to an earlier record with the same name, if any
            earlier: list[Section] = [s for s in self._records if s.name == section.name]
            if earlier:
                self._by_name[section.name] = earlier[-1]
            else:
                del self._by_name[section.name]

    def shift_after(self, section: Section, delta: int) -> None:
        """Shift the span of every section after ``section`` by ``delta`` lines.

        Must run right after each line-store insert/delete made inside
        ``section``; sections before it (and ``section`` itself) are untouched.
        """
        for record in self._records[self.position(section) + 1 :]:
            record.shift_lines(delta)
        logger.trace("Shifted sections after [%s] by %+d", section.name, delta)
