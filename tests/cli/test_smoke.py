# topmark:header:start
#
#   project      : IniKeep
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests for IniKeep.

Minimal coverage that the entry point is callable and that ``--help`` and
``version`` succeed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inikeep.cli.exit_codes import ExitCode
from inikeep.constants import INIKEEP_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from click.testing import Result


def test_cli_entry() -> None:
    """It should show usage information when `--help` is passed."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)
    assert "Usage" in result.output
    for command in ("get", "set", "remove", "sections", "settings", "version"):
        assert command in result.output


def test_no_subcommand_prints_hint() -> None:
    """It should print a hint and the help text without a subcommand."""
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert "Hint:" in result.output


def test_version() -> None:
    """It should print the installed version."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert INIKEEP_VERSION in result.output


def test_verbose_version() -> None:
    """It should print a heading in verbose mode."""
    result: Result = run_cli(["-v", "--no-color", "version"])

    assert_SUCCESS(result)
    assert "IniKeep version:" in result.output


def test_verbose_and_quiet_are_exclusive() -> None:
    """It should reject -v together with -q as a usage error."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
