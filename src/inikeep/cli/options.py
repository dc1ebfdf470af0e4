# topmark:header:start
#
#   project      : IniKeep
#   file         : options.py
#   file_relpath : src/inikeep/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, editor
parameters, dry run) and their resolution logic, so commands and the group
can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from inikeep.cli.errors import IniKeepUsageError
from inikeep.config.keys import Cli
from inikeep.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Program-output verbosity levels, mapped to standard logging levels
VERBOSITY_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

WRITE_STRATEGY_CHOICES: tuple[str, ...] = ("atomic", "in-place")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from the ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The level as an integer (WARNING by default).

    Raises:
        IniKeepUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise IniKeepUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return VERBOSITY_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return VERBOSITY_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return VERBOSITY_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return VERBOSITY_LEVELS["ERROR"]

    return VERBOSITY_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color`` / ``--no-color`` first, then the ``FORCE_COLOR`` and
    ``NO_COLOR`` environment variables, and finally whether stdout is a TTY.

    Args:
        cli_mode: Explicit color mode from CLI options.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto/always/never) and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value) if value else None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_editor_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the config discovery and editor parameter options to a command.

    Option values left unset (``None``) fall back to discovered configuration
    and then to the built-in defaults.
    """
    f = click.option(
        "--config",
        Cli.CONFIG_FILES,
        multiple=True,
        type=click.Path(exists=True, dir_okay=False),
        help="Additional TOML config file(s) merged after discovered ones.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Skip discovery of inikeep.toml / pyproject.toml configuration.",
    )(f)
    f = click.option(
        "--separator",
        Cli.SEPARATOR,
        default=None,
        help="Key/value separator for new lines (default: ' = ').",
    )(f)
    f = click.option(
        "--section-prefix",
        Cli.SECTION_PREFIX,
        default=None,
        help="Text preceding a section name in headers (default: '[').",
    )(f)
    f = click.option(
        "--section-suffix",
        Cli.SECTION_SUFFIX,
        default=None,
        help="Text following a section name in headers (default: ']').",
    )(f)
    f = click.option(
        "--indent-char",
        Cli.INDENT_CHAR,
        default=None,
        help="Character used to indent new settings (default: space).",
    )(f)
    f = click.option(
        "--indent-width",
        Cli.INDENT_WIDTH,
        type=int,
        default=None,
        help="Fixed indentation width for new settings (default: detect per section).",
    )(f)
    f = click.option(
        "--write-strategy",
        Cli.WRITE_STRATEGY,
        type=click.Choice(WRITE_STRATEGY_CHOICES, case_sensitive=False),
        default=None,
        help="How to write the file: atomic (default) or in-place.",
    )(f)
    return f


def common_write_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--dry-run`` and ``--diff`` options to a mutating command."""
    f = click.option(
        "--dry-run",
        "dry_run",
        is_flag=True,
        help="Do not write the file; exit with 2 if it would change.",
    )(f)
    f = click.option("--diff", is_flag=True, help="Show a unified diff of the changes.")(f)
    return f
