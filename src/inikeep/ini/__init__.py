# topmark:header:start
#
#   project      : IniKeep
#   file         : __init__.py
#   file_relpath : src/inikeep/ini/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""INI document engine: line store, classification, sections, and the editor."""

from __future__ import annotations

from inikeep.ini.editor import IniFile
from inikeep.ini.matching import LineMatcher
from inikeep.ini.section import Section, SectionTable
from inikeep.ini.store import LineStore
from inikeep.ini.writer import WriteResult, WriteStatus

__all__ = [
    "IniFile",
    "LineMatcher",
    "LineStore",
    "Section",
    "SectionTable",
    "WriteResult",
    "WriteStatus",
]
