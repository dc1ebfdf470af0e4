# topmark:header:start
#
#   project      : IniKeep
#   file         : types.py
#   file_relpath : src/inikeep/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared config types.

Kept free of imports from the rest of the package so that any config module
can use them.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# Parsed CLI options or an API dict; only the keys in `keys.Cli` are read
ArgsLike = Mapping[str, Any]

# A TOML table as a plain dict (tomlkit containers unwrapped)
TomlTable = dict[str, Any]


class FileWriteStrategy(str, Enum):
    """How `IniFile.save` commits the rendered text to disk.

    Attributes:
        ATOMIC: Write a temporary file next to the target and rename it over
            the target.
        IN_PLACE: Truncate and rewrite the target directly.
    """

    ATOMIC = "atomic"
    IN_PLACE = "in-place"

    @classmethod
    def from_name(cls, key_name: str | None) -> FileWriteStrategy | None:
        """Look up a strategy by name, ignoring case.

        ``"in_place"`` and ``"in-place"`` both select `IN_PLACE`.

        Args:
            key_name (str | None): Name from a config file or the CLI.

        Returns:
            FileWriteStrategy | None: The strategy, or None for None or an
                unknown name.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.strip().upper().replace("-", "_"))
