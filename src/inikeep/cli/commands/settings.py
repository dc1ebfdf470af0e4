# topmark:header:start
#
#   project      : IniKeep
#   file         : settings.py
#   file_relpath : src/inikeep/cli/commands/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep `settings` command: list the settings of a section."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from inikeep.cli.cmd_common import get_console, open_ini_file
from inikeep.cli.exit_codes import ExitCode
from inikeep.cli.options import common_editor_options


@click.command(name="settings", help="Print every setting of SECTION in FILE.")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("section")
@common_editor_options
@click.pass_context
def settings_command(
    ctx: click.Context,
    file: Path,
    section: str,
    **editor_opts: Any,
) -> None:
    """Print ``key<separator>value`` for each setting; exit 1 for an unknown section."""
    console = get_console(ctx)
    ini = open_ini_file(file, editor_opts)

    if not ini.section_exists(section):
        console.warn(f"{file}: no section {section!r}")
        ctx.exit(ExitCode.FAILURE)
    for key, value in ini.get_settings(section).items():
        console.print(f"{key}{ini.key_val_separator}{value}")
