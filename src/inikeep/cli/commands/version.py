# topmark:header:start
#
#   project      : IniKeep
#   file         : version.py
#   file_relpath : src/inikeep/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep `version` command.

Prints the IniKeep version as installed in the active Python environment.
"""

from __future__ import annotations

import logging

import click

from inikeep.cli.cmd_common import get_console, get_effective_verbosity
from inikeep.constants import INIKEEP_VERSION


@click.command(name="version", help="Show the current version of IniKeep.")
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of IniKeep."""
    console = get_console(ctx)

    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("IniKeep version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(INIKEEP_VERSION, bold=True)}")
    else:
        console.print(console.styled(INIKEEP_VERSION, bold=True))
