# topmark:header:start
#
#   project      : IniKeep
#   file         : sections.py
#   file_relpath : src/inikeep/cli/commands/sections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep `sections` command: list section names in document order."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from inikeep.cli.cmd_common import get_console, open_ini_file
from inikeep.cli.options import common_editor_options
from inikeep.constants import GLOBAL_SECTION


@click.command(name="sections", help="Print the section names of FILE.")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--all",
    "show_all",
    is_flag=True,
    help='Include the global section (printed as "").',
)
@common_editor_options
@click.pass_context
def sections_command(
    ctx: click.Context,
    file: Path,
    show_all: bool,
    **editor_opts: Any,
) -> None:
    """Print one section name per line."""
    console = get_console(ctx)
    ini = open_ini_file(file, editor_opts)

    for name in ini.section_names():
        if name == GLOBAL_SECTION:
            if show_all:
                console.print('""')
            continue
        console.print(name)
