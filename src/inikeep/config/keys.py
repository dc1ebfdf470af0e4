# topmark:header:start
#
#   project      : IniKeep
#   file         : keys.py
#   file_relpath : src/inikeep/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for IniKeep configuration.

This module defines the authoritative string constants used when reading
IniKeep configuration from TOML sources (``inikeep.toml`` and
``[tool.inikeep]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - CLI keys and TOML keys are intentionally kept separate.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by IniKeep configuration."""

    # [editor]
    SECTION_EDITOR: Final[str] = "editor"

    KEY_SEPARATOR: Final[str] = "separator"
    KEY_SECTION_PREFIX: Final[str] = "section_prefix"
    KEY_SECTION_SUFFIX: Final[str] = "section_suffix"
    KEY_INDENT_CHAR: Final[str] = "indent_char"
    KEY_INDENT_WIDTH: Final[str] = "indent_width"

    # [writer]
    SECTION_WRITER: Final[str] = "writer"

    KEY_STRATEGY: Final[str] = "strategy"


class Cli:
    """Argument names used by `MutableEditorConfig.apply_cli_args`.

    These mirror the Click parameter names of the editor options.
    """

    SEPARATOR: Final[str] = "separator"
    SECTION_PREFIX: Final[str] = "section_prefix"
    SECTION_SUFFIX: Final[str] = "section_suffix"
    INDENT_CHAR: Final[str] = "indent_char"
    INDENT_WIDTH: Final[str] = "indent_width"
    WRITE_STRATEGY: Final[str] = "write_strategy"
    CONFIG_FILES: Final[str] = "config_files"
