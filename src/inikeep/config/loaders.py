# topmark:header:start
#
#   project      : IniKeep
#   file         : loaders.py
#   file_relpath : src/inikeep/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading IniKeep configuration from
on-disk TOML files (`inikeep.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from inikeep.config.logging import get_logger
from inikeep.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from inikeep.config.logging import InikeepLogger
    from inikeep.config.types import TomlTable

logger: InikeepLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``inikeep.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the IniKeep table of a parsed config document.

    For ``pyproject.toml`` this is ``[tool.inikeep]``; any other file is an
    IniKeep config file in its own right and is returned unchanged.

    Args:
        path: The file the data was loaded from.
        data: The parsed TOML content.

    Returns:
        The IniKeep table, or None when a ``pyproject.toml`` has no
        ``[tool.inikeep]`` table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool_any: Any = data.get("tool", {})
    tool: TomlTable = cast("TomlTable", tool_any) if isinstance(tool_any, dict) else {}
    table_any: Any = tool.get(PYPROJECT_TOOL_TABLE)
    if not isinstance(table_any, dict):
        return None
    return cast("TomlTable", table_any)
