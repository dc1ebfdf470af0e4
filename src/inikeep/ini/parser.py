# topmark:header:start
#
#   project      : IniKeep
#   file         : parser.py
#   file_relpath : src/inikeep/ini/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document parser: build the section table from a line store in one pass.

The global section is always created first and covers every line before the
first header (possibly none). Each header then opens a section whose body runs
until the next header or the end of input. Lines that do not match the setting
pattern are kept as opaque body lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inikeep.config.logging import get_logger
from inikeep.constants import GLOBAL_SECTION
from inikeep.ini.cursor import LineCursor
from inikeep.ini.matching import HeaderLine, SettingLine
from inikeep.ini.section import Section, SectionTable

if TYPE_CHECKING:
    from inikeep.config.logging import InikeepLogger
    from inikeep.ini.matching import ClassifiedLine, LineMatcher
    from inikeep.ini.store import LineStore

logger: InikeepLogger = get_logger(__name__)


def parse_sections(store: LineStore, matcher: LineMatcher) -> SectionTable:
    """Parse ``store`` into a `SectionTable`.

    Args:
        store (LineStore): The file image.
        matcher (LineMatcher): Classifier configured with the editor parameters.

    Returns:
        SectionTable: Sections in document order, global section first.
    """
    cursor = LineCursor(store)
    table = SectionTable()

    table.add(_read_section(GLOBAL_SECTION, 0, cursor, matcher))

    line, line_num = cursor.next()
    while line is not None and line_num is not None:
        classified: ClassifiedLine = matcher.classify(line)
        if isinstance(classified, HeaderLine):
            table.add(_read_section(classified.name, line_num, cursor, matcher))
        line, line_num = cursor.next()

    logger.debug("Parsed %d line(s) into %d section(s)", len(store), len(table))
    return table


def _read_section(name: str, start_line: int, cursor: LineCursor, matcher: LineMatcher) -> Section:
    settings: dict[str, str] = {}
    end_line: int = start_line
    min_indentation: int | None = None
    empty = True

    while True:
        line, line_num = cursor.peek()
        if line is None or line_num is None:
            break
        classified: ClassifiedLine = matcher.classify(line)
        if isinstance(classified, HeaderLine):
            break
        if isinstance(classified, SettingLine):
            settings[classified.key] = classified.value
            indentation: int = len(classified.indent)
            if min_indentation is None or indentation < min_indentation:
                min_indentation = indentation
        end_line = line_num
        empty = False
        cursor.next()

    if name == GLOBAL_SECTION and empty:
        # An empty global section behaves like a freshly created one
        logger.trace("Global section is empty")
        return Section(name, None, None, settings, min_indentation)

    logger.trace(
        "Section [%s]: lines %d..%d, %d setting(s), indentation=%s",
        name,
        start_line,
        end_line,
        len(settings),
        min_indentation,
    )
    return Section(name, start_line, end_line, settings, min_indentation)
