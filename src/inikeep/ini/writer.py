# topmark:header:start
#
#   project      : IniKeep
#   file         : writer.py
#   file_relpath : src/inikeep/ini/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Write sinks for committing rendered INI text.

Sinks
-----
- AtomicFileSink: writes a temporary file next to the target, then renames it
  over the target (the default strategy).
- InPlaceFileSink: truncates and rewrites the target directly.
- NullSink: no-op (dry-run).

Sinks write the text exactly as given (no newline translation). Failures to
write are the only errors the editor propagates.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from inikeep.config.logging import get_logger
from inikeep.config.types import FileWriteStrategy

if TYPE_CHECKING:
    from inikeep.config.logging import InikeepLogger

logger: InikeepLogger = get_logger(__name__)


class WriteStatus(str, Enum):
    """Outcome of a write operation."""

    WRITTEN = "written"
    SKIPPED = "skipped (dry-run)"


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for sinks used by `IniFile.save`."""

    def write(self, path: Path, text: str) -> WriteResult:
        """Write ``text`` to ``path``.

        Args:
            path (Path): Destination file.
            text (str): Full rendered document.

        Returns:
            WriteResult: Status and number of UTF-8 bytes written.
        """
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, path: Path, text: str) -> WriteResult:
        logger.debug("NullSink: not writing %d character(s) to %s", len(text), path)
        return WriteResult(status=WriteStatus.SKIPPED, bytes_written=0)


class InPlaceFileSink:
    """Filesystem sink that truncates and rewrites the target."""

    def write(self, path: Path, text: str) -> WriteResult:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        bytes_written: int = len(text.encode("utf-8"))
        logger.debug("InPlaceFileSink: wrote %d bytes to file %s", bytes_written, path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=bytes_written)


class AtomicFileSink:
    """Filesystem sink that replaces the target with a fully written temp file.

    The temporary file lives in the target's directory so that the final
    `os.replace` stays on one filesystem. An existing target's permission bits
    are carried over.
    """

    def write(self, path: Path, text: str) -> WriteResult:
        target: Path = Path(path)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            if target.exists():
                os.chmod(tmp_path, target.stat().st_mode & 0o7777)
            os.replace(tmp_path, target)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        bytes_written: int = len(text.encode("utf-8"))
        logger.debug("AtomicFileSink: wrote %d bytes to file %s", bytes_written, target)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=bytes_written)


def select_sink(strategy: FileWriteStrategy, *, dry_run: bool = False) -> WriteSink:
    """Return the sink matching ``strategy``.

    Args:
        strategy (FileWriteStrategy): Configured write strategy.
        dry_run (bool): If True, return a `NullSink` regardless of the strategy.

    Returns:
        WriteSink: The selected sink.
    """
    if dry_run:
        logger.debug("Selected NULL sink (dry run)")
        return NullSink()
    if strategy == FileWriteStrategy.IN_PLACE:
        logger.debug("Selected in-place file sink")
        return InPlaceFileSink()
    logger.debug("Selected atomic file sink")
    return AtomicFileSink()
