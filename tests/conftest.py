# topmark:header:start
#
#   project      : IniKeep
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the IniKeep test suite.

Sets up TRACE logging for the whole run and provides small helpers to build
editors from literal text without touching the filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from inikeep.config import logging
from inikeep.ini.editor import IniFile
from inikeep.ini.store import LineStore


@pytest.fixture(autouse=True)
def silence_inikeep_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``INIKEEP_LOG_LEVEL``.
    """
    monkeypatch.delenv("INIKEEP_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_ini(text: str, path: str | Path = "test.ini", **kwargs: Any) -> IniFile:
    """Return an `IniFile` backed by an in-memory store holding ``text``.

    Args:
        text (str): Document text.
        path (str | Path): Nominal backing path (only used by `save` and `diff`).
        **kwargs (Any): Editor parameters forwarded to `IniFile`.

    Returns:
        IniFile: The editor.
    """
    return IniFile(path, store=LineStore.from_text(text), **kwargs)
