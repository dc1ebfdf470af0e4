# topmark:header:start
#
#   project      : IniKeep
#   file         : logging.py
#   file_relpath : src/inikeep/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep logging: a TRACE level, a logger class that exposes it, and colors.

Internal diagnostics go to ``stderr`` so they never mix with values that the
CLI prints on ``stdout``. The level comes from the caller or from the
``INIKEEP_LOG_LEVEL`` environment variable; without either, only CRITICAL
records are shown.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from inikeep.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class InikeepLogger(logging.Logger):
    """Logger with a `trace` method for records below DEBUG.

    The parser and the editor trace every span shift through it.
    """

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message format.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(InikeepLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

LOG_LEVELS: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Lowest level first; a record takes the style of the highest threshold it reaches
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        style: Callable[[str], str] = chalk.dim
        for threshold, level_style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = level_style
        return style(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``INIKEEP_LOG_LEVEL``, or None.

    Accepts level names in any case (``"trace"``, ``"DEBUG"``) and numbers
    (``"10"``). Unset, empty or unknown values yield None.
    """
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    name: str = raw.strip().upper()
    if name.isdigit():
        return int(name)
    return LOG_LEVELS.get(name)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored ``stderr`` handler on the root logger.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output. Below INFO, records also show the logger name and line.

    Args:
        level (int | None): Level to apply. None consults ``INIKEEP_LOG_LEVEL``
            and falls back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    root_logger.addHandler(stream_handler)


def get_logger(name: str) -> InikeepLogger:
    """Return the `InikeepLogger` called ``name``."""
    return cast("InikeepLogger", logging.getLogger(name))
