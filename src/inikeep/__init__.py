# topmark:header:start
#
#   project      : IniKeep
#   file         : __init__.py
#   file_relpath : src/inikeep/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep: a format-preserving INI file editor.

Read and modify settings in INI-style configuration files while keeping
comments, blank lines, ordering and spacing of untouched lines intact.

Examples:
    ```python
    from inikeep import IniFile

    ini = IniFile("setup.cfg")
    ini.set_value("metadata", "version", value="1.2.3")
    ini.save()
    ```
"""

from __future__ import annotations

from inikeep.config import EditorConfig, FileWriteStrategy, MutableEditorConfig
from inikeep.constants import INIKEEP_VERSION
from inikeep.ini import IniFile

__version__: str = INIKEEP_VERSION

__all__ = [
    "EditorConfig",
    "FileWriteStrategy",
    "IniFile",
    "MutableEditorConfig",
    "__version__",
]
