# topmark:header:start
#
#   project      : IniKeep
#   file         : diff.py
#   file_relpath : src/inikeep/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff helpers for previewing INI edits.

`unified_diff` compares the original text of a file with its rendered form;
`render_patch` formats the result with colors for terminal display.
"""

from __future__ import annotations

import difflib
import io
from typing import Sequence

from yachalk import chalk

from inikeep.config.logging import get_logger

logger = get_logger(__name__)


def unified_diff(before: str, after: str, path: str) -> str:
    """Return a unified diff between two versions of a file.

    Args:
        before: Original text.
        after: Updated text.
        path: Path used in the ``---`` / ``+++`` labels.

    Returns:
        The diff text, or ``""`` when both versions are identical.
    """
    if before == after:
        return ""
    # Split the way the line store does so CR-only files diff line by line
    before_lines: list[str] = list(io.StringIO(before, newline=""))
    after_lines: list[str] = list(io.StringIO(after, newline=""))
    diff_lines: list[str] = []
    for line in difflib.unified_diff(
        before_lines,
        after_lines,
        fromfile=f"{path} (original)",
        tofile=f"{path} (updated)",
    ):
        # Lines without a terminator (last line of a file) get one for display
        diff_lines.append(line if line.endswith(("\n", "\r")) else line + "\n")
    logger.trace("Computed diff for %s: %d line(s)", path, len(diff_lines))
    return "".join(diff_lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=True)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        # Show line terminators explicitly; drop the one the preview adds itself
        body: str = line[:-1] if line.endswith("\n") else line
        content: str = body.replace("\r", "\\r")

        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers is True:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
