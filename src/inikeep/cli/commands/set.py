# topmark:header:start
#
#   project      : IniKeep
#   file         : set.py
#   file_relpath : src/inikeep/cli/commands/set.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep `set` command.

Creates or updates a setting, keeping the rest of the file untouched. With
only FILE and SECTION, makes sure the section exists.

Examples:
    $ inikeep set app.ini server port 8080
    $ inikeep set --dry-run --diff app.ini server host localhost
    $ inikeep set app.ini logging
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from inikeep.cli.cmd_common import commit_edit, open_ini_file
from inikeep.cli.options import common_editor_options, common_write_options


@click.command(name="set", help="Set SETTING to VALUE in SECTION of FILE.")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("section")
@click.argument("setting", required=False)
@click.argument("value", required=False)
@common_write_options
@common_editor_options
@click.pass_context
def set_command(
    ctx: click.Context,
    file: Path,
    section: str,
    setting: str | None,
    value: str | None,
    dry_run: bool,
    diff: bool,
    **editor_opts: Any,
) -> None:
    """Upsert a setting (or ensure a section exists) and write the file.

    Exit codes:
        SUCCESS (0): The file was written or was already up to date.
        WOULD_CHANGE (2): ``--dry-run`` and the file would change.
    """
    ini = open_ini_file(file, editor_opts)
    ini.set_value(section, setting, value=value)
    commit_edit(ctx, ini, dry_run=dry_run, diff=diff)
