# topmark:header:start
#
#   project      : IniKeep
#   file         : editor.py
#   file_relpath : src/inikeep/ini/editor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format-preserving INI editor.

`IniFile` is the public mutation surface. It parses the file once at
construction, then keeps the line store and every section's recorded span in
step across edits:

- `set_value` rewrites an existing setting line in place, activates a
  commented-out setting by inserting a line right after the comment, or
  records the setting as pending until rendering.
- `remove_setting` deletes a setting line and, when the section is left with
  no settings, the whole section.
- `render` / `save` replay the original lines verbatim and materialize
  pending settings and sections.

Every insert into / delete from the line store is immediately followed by a
renumbering pass over the sections after the mutation point.

Examples:
    ```python
    ini = IniFile(Path("app.ini"))
    ini.set_value("server", "port", " = ", "8080")
    ini.remove_setting("server", "debug")
    ini.save()
    ```
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Final

from inikeep.config.logging import get_logger
from inikeep.config.model import validate_editor_settings
from inikeep.config.types import FileWriteStrategy
from inikeep.constants import (
    DEFAULT_INDENT_CHAR,
    DEFAULT_KEY_VAL_SEPARATOR,
    DEFAULT_SECTION_PREFIX,
    DEFAULT_SECTION_SUFFIX,
    GLOBAL_SECTION,
)
from inikeep.ini.matching import CommentedSettingLine, LineMatcher, SettingLine
from inikeep.ini.parser import parse_sections
from inikeep.ini.section import Section, SectionTable
from inikeep.ini.store import BOM, LineStore, split_terminator
from inikeep.ini.writer import select_sink
from inikeep.utils.diff import unified_diff

if TYPE_CHECKING:
    from os import PathLike

    from inikeep.config.logging import InikeepLogger
    from inikeep.config.model import EditorConfig
    from inikeep.ini.matching import ClassifiedLine
    from inikeep.ini.writer import WriteResult, WriteSink

logger: InikeepLogger = get_logger(__name__)


class _Unset(Enum):
    """Marker for an argument that was not passed at all."""

    UNSET = "unset"


_UNSET: Final = _Unset.UNSET


class IniFile:
    """Editor for one INI file.

    Args:
        path (str | PathLike[str]): Backing file. A missing path reads as an empty document.
        key_val_separator (str): Separator written between key and value of new lines.
            A whitespace-only separator matches any single space when parsing.
        section_prefix (str): Text before a section name in header lines.
        section_suffix (str): Text after a section name in header lines.
        indent_char (str): Character used to indent new setting lines.
        indent_width (int | None): Fixed indentation width for new lines; None uses
            each section's detected indentation.
        write_strategy (FileWriteStrategy): How `save` commits the text.
        store (LineStore | None): Pre-built line store; read from ``path`` when None.

    Raises:
        ValueError: If the editor parameters are invalid.
        OSError: If an existing file cannot be read.
    """

    def __init__(
        self,
        path: str | PathLike[str],
        key_val_separator: str = DEFAULT_KEY_VAL_SEPARATOR,
        section_prefix: str = DEFAULT_SECTION_PREFIX,
        section_suffix: str = DEFAULT_SECTION_SUFFIX,
        indent_char: str = DEFAULT_INDENT_CHAR,
        indent_width: int | None = None,
        *,
        write_strategy: FileWriteStrategy = FileWriteStrategy.ATOMIC,
        store: LineStore | None = None,
    ) -> None:
        validate_editor_settings(
            key_val_separator=key_val_separator,
            indent_char=indent_char,
            indent_width=indent_width,
        )
        self.path: Path = Path(path)
        self.key_val_separator: str = key_val_separator
        self.section_prefix: str = section_prefix
        self.section_suffix: str = section_suffix
        self.indent_char: str = indent_char
        self.indent_width: int | None = indent_width
        self.write_strategy: FileWriteStrategy = write_strategy

        self._matcher = LineMatcher(key_val_separator, section_prefix, section_suffix)
        self._store: LineStore = store if store is not None else LineStore.from_path(self.path)
        self._original_text: str = self._store.to_text()
        self._sections: SectionTable = parse_sections(self._store, self._matcher)

    @classmethod
    def from_config(cls, path: str | PathLike[str], config: EditorConfig) -> IniFile:
        """Create an editor using the parameters of an `EditorConfig`."""
        return cls(
            path,
            key_val_separator=config.key_val_separator,
            section_prefix=config.section_prefix,
            section_suffix=config.section_suffix,
            indent_char=config.indent_char,
            indent_width=config.indent_width,
            write_strategy=config.write_strategy,
        )

    def __repr__(self) -> str:
        return f"IniFile(path={str(self.path)!r}, sections={self.section_names()!r})"

    @property
    def store(self) -> LineStore:
        return self._store

    @property
    def sections(self) -> SectionTable:
        return self._sections

    # ------------------------------- Reading -------------------------------

    def section_names(self) -> list[str]:
        """Return section names in document order, global section first."""
        return self._sections.names()

    def section_exists(self, section_name: str) -> bool:
        return section_name in self._sections

    def get_value(self, section_name: str, setting: str) -> str | None:
        """Return the current value of a setting, or None if unknown."""
        section: Section | None = self._sections.get(section_name)
        if section is None:
            return None
        return section.get_value(setting)

    def get_settings(self, section_name: str) -> dict[str, str]:
        """Return every setting of a section mapped to its current value.

        Existing settings come first, followed by settings added since parsing.
        An unknown section yields an empty mapping.
        """
        section: Section | None = self._sections.get(section_name)
        if section is None:
            return {}
        settings: dict[str, str] = {}
        for name in section.setting_names:
            value: str | None = section.get_value(name)
            settings[name] = value if value is not None else ""
        return settings

    # ------------------------------- Editing -------------------------------

    def set_value(
        self,
        section_name: str,
        setting: str | None = None,
        separator: str | None = None,
        value: str | None | _Unset = _UNSET,
    ) -> None:
        """Create or update a setting.

        Resolution order:
            1. The setting has a line in the section: rewrite its value in place.
            2. A commented-out line for the same key exists in the section: insert
               an active line directly after it.
            3. Otherwise record the setting as pending; it is written at the end
               of the section when rendering.

        With only ``section_name``, the section is created (as a new, empty
        section at the end of the document) if it does not exist yet.
        Called with three arguments, ``set_value(section, setting, value)``, the
        third one is the value and the editor's separator is used. Passing
        ``value`` explicitly, even as None, selects the four-argument form.

        Args:
            section_name (str): Target section (``""`` for the global section).
            setting (str | None): Setting name.
            separator (str | None): Separator for a line inserted after a commented
                setting; defaults to the editor's separator.
            value (str | None): New value; None is stored as an empty string.
        """
        section: Section | None = self._sections.get(section_name)
        if section is None:
            section = Section(section_name)
            self._sections.add(section)
            logger.debug("Created new section [%s]", section_name)

        if setting is None:
            return
        if value is _UNSET:
            # set_value(section, setting, value): the third argument is the value
            value, separator = separator, None
        new_value: str = value if isinstance(value, str) else ""

        if section.has_existing_setting(setting):
            self._update_lines(section, setting, new_value)
            section.update_existing_setting(setting, new_value)
            logger.debug("Updated [%s] %s in place", section_name, setting)
            return

        commented_line: int | None = self._find_commented_setting(section, setting)
        if commented_line is not None:
            # Keep the comment as documentation; the active line goes right below it
            line: str = self._format_setting(
                section,
                setting,
                separator if separator is not None else self.key_val_separator,
                new_value,
            )
            self._store.insert(commented_line + 1, self._store.terminate(line))
            section.insert_inline_setting(setting, new_value)
            self._sections.shift_after(section, +1)
            logger.debug(
                "Activated commented setting [%s] %s at line %d",
                section_name,
                setting,
                commented_line + 1,
            )
            return

        section.set_additional_setting(setting, new_value)
        logger.debug("Queued new setting [%s] %s", section_name, setting)

    def remove_setting(self, section_name: str, setting: str) -> None:
        """Remove a setting line; drop the section once it holds no settings.

        Does nothing when the section or the setting line does not exist. The
        global section is never dropped.

        Args:
            section_name (str): Section holding the setting.
            setting (str): Setting name.
        """
        section: Section | None = self._sections.get(section_name)
        if section is None or not section.has_existing_setting(setting):
            return

        # Pass 1: the setting line(s)
        removed: int = self._remove_lines(section, setting)
        section.remove_existing_setting(setting, removed)
        self._sections.shift_after(section, -removed)
        logger.debug("Removed [%s] %s (%d line(s))", section_name, setting, removed)

        if section.is_global:
            if not section.line_range():
                # A global section without lines left renders like an absent one
                section.start_line = section.end_line = None
            return
        if not section.is_empty:
            return

        # Pass 2: the emptied section's remaining body and header
        if section.start_line is not None and section.end_line is not None:
            span: int = section.end_line - section.start_line + 1
            self._store.delete(section.start_line, span)
            self._sections.shift_after(section, -span)
        self._sections.remove(section)
        logger.debug("Removed emptied section [%s]", section_name)

    # ------------------------------- Output -------------------------------

    def render_lines(self) -> list[str]:
        """Return the document as a list of lines, terminators included.

        Only the last line can lack a terminator, and only when it is the
        original unterminated last line of the file.
        """
        out: list[str] = []
        records: list[Section] = list(self._sections)
        global_section: Section | None = self._sections.get(GLOBAL_SECTION)
        global_empty: bool = global_section is None or (
            global_section.is_new and not global_section.additional_settings
        )

        for index, section in enumerate(records):
            # Whitespace-only lines are held back so that new settings land
            # before the blank lines closing the section
            whitespace_buffer: list[str] = []

            if section.is_new and not section.is_global:
                if (index == 1 and not global_empty) or index > 1:
                    out.append(self._store.terminate(""))
                out.append(
                    self._store.terminate(
                        f"{self.section_prefix}{section.name}{self.section_suffix}"
                    )
                )

            for line_num in section.line_range():
                line: str = self._store[line_num]
                if line.strip() == "":
                    whitespace_buffer.append(line)
                else:
                    out.extend(whitespace_buffer)
                    whitespace_buffer.clear()
                    out.append(line)

            for key, value in section.additional_settings.items():
                out.append(
                    self._store.terminate(
                        self._format_setting(section, key, self.key_val_separator, value)
                    )
                )

            if whitespace_buffer:
                out.extend(whitespace_buffer)
            elif section.is_new and section.additional_settings and index < len(records) - 1:
                out.append(self._store.terminate(""))

        # The original unterminated last line keeps that form only while it stays last
        return [self._terminated(line) for line in out[:-1]] + out[-1:]

    def render(self) -> str:
        """Return the full document text as `save` would write it."""
        lines: list[str] = self.render_lines()
        if lines and not self._store.ends_with_newline:
            body, nl = split_terminator(lines[-1])
            # A file without final newline keeps none; a blank line is never shortened
            if nl and body.strip():
                lines[-1] = body
        text: str = "".join(lines)
        if self._store.leading_bom:
            text = BOM + text
        return text

    def has_changes(self) -> bool:
        """Whether rendering would produce text different from the original."""
        return self.render() != self._original_text

    def diff(self) -> str:
        """Return a unified diff between the original and the rendered text."""
        return unified_diff(self._original_text, self.render(), str(self.path))

    def save(self, sink: WriteSink | None = None) -> WriteResult:
        """Write the rendered document to the backing path.

        Args:
            sink (WriteSink | None): Sink to use; defaults to the one selected by
                the editor's write strategy.

        Returns:
            WriteResult: Outcome reported by the sink.

        Raises:
            OSError: If the destination cannot be written.
        """
        sink = sink or select_sink(self.write_strategy)
        return sink.write(self.path, self.render())

    # ------------------------------- Helpers -------------------------------

    def _indent_for(self, section: Section) -> str:
        width: int = (
            self.indent_width if self.indent_width is not None else (section.indentation or 0)
        )
        return self.indent_char * width

    def _format_setting(self, section: Section, key: str, separator: str, value: str) -> str:
        return f"{self._indent_for(section)}{key}{separator}{value}"

    def _terminated(self, line: str) -> str:
        # Only the original last line can lack a terminator
        _text, nl = split_terminator(line)
        return line if nl else self._store.terminate(line)

    def _setting_lines(self, section: Section, setting: str) -> list[tuple[int, SettingLine]]:
        found: list[tuple[int, SettingLine]] = []
        for line_num in section.line_range():
            classified: ClassifiedLine = self._matcher.classify(self._store[line_num])
            if isinstance(classified, SettingLine) and classified.key == setting:
                found.append((line_num, classified))
        return found

    def _update_lines(self, section: Section, setting: str, value: str) -> None:
        for line_num, match in self._setting_lines(section, setting):
            _text, nl = split_terminator(self._store[line_num])
            self._store[line_num] = f"{match.indent}{match.key}{match.separator}{value}{nl}"

    def _remove_lines(self, section: Section, setting: str) -> int:
        line_nums: list[int] = [n for n, _match in self._setting_lines(section, setting)]
        # Delete bottom-up so earlier indices stay valid
        for line_num in reversed(line_nums):
            self._store.delete(line_num)
        return len(line_nums)

    def _find_commented_setting(self, section: Section, setting: str) -> int | None:
        for line_num in section.line_range():
            classified: ClassifiedLine = self._matcher.classify(self._store[line_num])
            if isinstance(classified, CommentedSettingLine) and classified.key == setting:
                return line_num
        return None
