# topmark:header:start
#
#   project      : IniKeep
#   file         : cmd_common.py
#   file_relpath : src/inikeep/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the subcommands: resolving the editor configuration,
opening an `IniFile` with filesystem errors mapped onto CLI errors, and
committing (or previewing) an edit.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from inikeep.cli.console import ClickConsole
from inikeep.cli.errors import (
    IniKeepConfigError,
    IniKeepEncodingError,
    IniKeepIOError,
    IniKeepPermissionDeniedError,
)
from inikeep.cli.exit_codes import ExitCode
from inikeep.config.keys import Cli
from inikeep.config.logging import get_logger
from inikeep.config.model import MutableEditorConfig
from inikeep.ini.editor import IniFile
from inikeep.ini.writer import WriteStatus, select_sink
from inikeep.utils.diff import render_patch

if TYPE_CHECKING:
    from inikeep.config.logging import InikeepLogger
    from inikeep.config.model import EditorConfig
    from inikeep.ini.writer import WriteResult

logger: InikeepLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the context, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level resolved by the group (WARNING by default)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def resolve_editor_config(path: Path, editor_opts: dict[str, Any]) -> EditorConfig:
    """Merge discovered config, ``--config`` files and CLI options for ``path``.

    Args:
        path (Path): The INI file being edited; discovery starts in its directory.
        editor_opts (dict[str, Any]): The editor option values collected by Click.

    Returns:
        EditorConfig: The validated configuration.

    Raises:
        IniKeepConfigError: If the merged configuration is invalid.
    """
    extra: tuple[str, ...] = editor_opts.get(Cli.CONFIG_FILES) or ()
    draft: MutableEditorConfig = MutableEditorConfig.load_merged(
        start=path.parent,
        extra_config_files=[Path(p) for p in extra],
        no_config=bool(editor_opts.get("no_config")),
    ).apply_cli_args(editor_opts)
    try:
        config: EditorConfig = draft.freeze()
    except ValueError as exc:
        raise IniKeepConfigError(f"Invalid editor configuration: {exc}") from exc
    logger.debug("Resolved editor config for %s: %s", path, config)
    return config


def open_ini_file(path: Path, editor_opts: dict[str, Any]) -> IniFile:
    """Open ``path`` for editing with the resolved editor configuration.

    Raises:
        IniKeepConfigError: If the configuration is invalid.
        IniKeepPermissionDeniedError: If the file cannot be read for lack of permission.
        IniKeepEncodingError: If the file is not valid UTF-8.
        IniKeepIOError: For any other read failure.
    """
    config: EditorConfig = resolve_editor_config(path, editor_opts)
    try:
        return IniFile.from_config(path, config)
    except PermissionError as exc:
        raise IniKeepPermissionDeniedError(f"Permission denied reading {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise IniKeepEncodingError(f"Encoding error in {path}: {exc}") from exc
    except OSError as exc:
        raise IniKeepIOError(f"Error reading {path}: {exc}") from exc


def commit_edit(ctx: click.Context, ini: IniFile, *, dry_run: bool, diff: bool) -> None:
    """Show the diff if requested, then write the file or report a dry run.

    An unchanged document is never rewritten. A dry run that would change the
    file exits with `ExitCode.WOULD_CHANGE`.

    Raises:
        IniKeepPermissionDeniedError: If the file cannot be written for lack of permission.
        IniKeepIOError: For any other write failure.
    """
    console: ClickConsole = get_console(ctx)
    verbosity: int = get_effective_verbosity(ctx)
    changed: bool = ini.has_changes()

    if diff and changed:
        patch: str = ini.diff()
        console.print(render_patch(patch) if console.enable_color else patch, nl=False)

    if not changed:
        if verbosity <= logging.INFO:
            console.print(f"{ini.path}: unchanged")
        return

    try:
        result: WriteResult = ini.save(select_sink(ini.write_strategy, dry_run=dry_run))
    except PermissionError as exc:
        raise IniKeepPermissionDeniedError(f"Permission denied writing {ini.path}: {exc}") from exc
    except OSError as exc:
        raise IniKeepIOError(f"Error writing {ini.path}: {exc}") from exc

    if result.status is WriteStatus.SKIPPED:
        if verbosity <= logging.INFO:
            console.print(f"{ini.path}: would change (dry run)")
        ctx.exit(ExitCode.WOULD_CHANGE)

    if verbosity <= logging.INFO:
        console.print(f"{ini.path}: wrote {result.bytes_written} bytes")
