# topmark:header:start
#
#   project      : IniKeep
#   file         : get.py
#   file_relpath : src/inikeep/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep `get` command.

Prints the value of one setting. Exits with 1 when the section or the
setting does not exist.

Examples:
    $ inikeep get setup.cfg metadata version
    $ inikeep get app.ini "" debug
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from inikeep.cli.cmd_common import get_console, open_ini_file
from inikeep.cli.exit_codes import ExitCode
from inikeep.cli.options import common_editor_options


@click.command(name="get", help="Print the value of SETTING in SECTION of FILE.")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("section")
@click.argument("setting")
@common_editor_options
@click.pass_context
def get_command(
    ctx: click.Context,
    file: Path,
    section: str,
    setting: str,
    **editor_opts: Any,
) -> None:
    """Print a setting value."""
    console = get_console(ctx)
    ini = open_ini_file(file, editor_opts)

    value: str | None = ini.get_value(section, setting)
    if value is None:
        console.warn(f"{file}: no setting {setting!r} in section {section!r}")
        ctx.exit(ExitCode.FAILURE)
    console.print(value)
