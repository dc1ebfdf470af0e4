# topmark:header:start
#
#   project      : IniKeep
#   file         : constants.py
#   file_relpath : src/inikeep/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    INIKEEP_VERSION: str = get_version("inikeep")
except PackageNotFoundError:  # running from a source checkout
    INIKEEP_VERSION = "0.0.0+unknown"

# Environment variable consulted by `inikeep.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: str = "INIKEEP_LOG_LEVEL"

# Config discovery
INIKEEP_TOML_NAME: str = "inikeep.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "inikeep"

# Editor defaults
DEFAULT_KEY_VAL_SEPARATOR: str = " = "
DEFAULT_SECTION_PREFIX: str = "["
DEFAULT_SECTION_SUFFIX: str = "]"
DEFAULT_INDENT_CHAR: str = " "

# Name of the implicit section holding everything before the first header
GLOBAL_SECTION: str = ""
