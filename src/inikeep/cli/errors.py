# topmark:header:start
#
#   project      : IniKeep
#   file         : errors.py
#   file_relpath : src/inikeep/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the IniKeep CLI.

Raise these from commands to exit with a standardized message and exit code.
Click prints the message as ``Error: <message>`` on stderr and exits with the
class's `exit_code`.
"""

from __future__ import annotations

import click

from inikeep.cli.exit_codes import ExitCode


class IniKeepError(click.ClickException):
    """Base class for all IniKeep CLI errors."""

    exit_code = ExitCode.FAILURE


class IniKeepUsageError(IniKeepError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class IniKeepConfigError(IniKeepError):
    """Error for invalid editor configuration (separator, indentation, ...)."""

    exit_code = ExitCode.CONFIG_ERROR


class IniKeepPermissionDeniedError(IniKeepError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class IniKeepIOError(IniKeepError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class IniKeepEncodingError(IniKeepError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
