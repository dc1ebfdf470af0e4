# topmark:header:start
#
#   project      : IniKeep
#   file         : exit_codes.py
#   file_relpath : src/inikeep/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the IniKeep CLI.

IniKeep follows the BSD `sysexits` convention where practical. `WOULD_CHANGE=2`
signals that a dry run detected a change; tests should assert
``result.exception is None`` to tell it apart from Click's own usage errors,
which also exit with 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the IniKeep CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; also used by ``get`` when the setting is absent.
        WOULD_CHANGE: Dry run: the file would change without ``--dry-run``.
        USAGE_ERROR: Invalid invocation. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: The file is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        IO_ERROR: Reading or writing failed. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid editor configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
