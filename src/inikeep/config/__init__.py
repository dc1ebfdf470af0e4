# topmark:header:start
#
#   project      : IniKeep
#   file         : __init__.py
#   file_relpath : src/inikeep/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep configuration layer.

Re-exports the configuration model so callers can write
``from inikeep.config import EditorConfig, MutableEditorConfig``.
"""

from __future__ import annotations

from inikeep.config.model import EditorConfig, MutableEditorConfig, validate_editor_settings
from inikeep.config.types import FileWriteStrategy

__all__ = [
    "EditorConfig",
    "FileWriteStrategy",
    "MutableEditorConfig",
    "validate_editor_settings",
]
