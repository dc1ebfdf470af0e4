# topmark:header:start
#
#   project      : IniKeep
#   file         : remove.py
#   file_relpath : src/inikeep/cli/commands/remove.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep `remove` command.

Removes a setting line; a section left without settings is removed as well.
Removing something that does not exist leaves the file untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from inikeep.cli.cmd_common import commit_edit, open_ini_file
from inikeep.cli.options import common_editor_options, common_write_options


@click.command(name="remove", help="Remove SETTING from SECTION of FILE.")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("section")
@click.argument("setting")
@common_write_options
@common_editor_options
@click.pass_context
def remove_command(
    ctx: click.Context,
    file: Path,
    section: str,
    setting: str,
    dry_run: bool,
    diff: bool,
    **editor_opts: Any,
) -> None:
    """Remove a setting and write the file."""
    ini = open_ini_file(file, editor_opts)
    ini.remove_setting(section, setting)
    commit_edit(ctx, ini, dry_run=dry_run, diff=diff)
