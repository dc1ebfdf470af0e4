# topmark:header:start
#
#   project      : IniKeep
#   file         : model.py
#   file_relpath : src/inikeep/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `EditorConfig`: an immutable snapshot of the editor parameters
      (separator, section affixes, indentation, write strategy).
    - `MutableEditorConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `EditorConfig` and thawed back for edits.

Unset fields on the builder are ``None``; `MutableEditorConfig.freeze`
replaces them with the built-in defaults and validates the result.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward **root → current**; within a directory
       `pyproject.toml` is merged first, then `inikeep.toml`
    3) Extra config files passed explicitly via ``--config``
    4) CLI options
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from inikeep.config.keys import Cli, Toml
from inikeep.config.loaders import extract_tool_table, load_toml_dict
from inikeep.config.logging import get_logger
from inikeep.config.types import FileWriteStrategy
from inikeep.constants import (
    DEFAULT_INDENT_CHAR,
    DEFAULT_KEY_VAL_SEPARATOR,
    DEFAULT_SECTION_PREFIX,
    DEFAULT_SECTION_SUFFIX,
    INIKEEP_TOML_NAME,
    PYPROJECT_TOML_NAME,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from inikeep.config.logging import InikeepLogger
    from inikeep.config.types import ArgsLike, TomlTable

logger: InikeepLogger = get_logger(__name__)

KEY_ROOT: str = "root"


def validate_editor_settings(
    *,
    key_val_separator: str,
    indent_char: str,
    indent_width: int | None,
) -> None:
    """Validate the editor parameters shared by `EditorConfig` and `IniFile`.

    Args:
        key_val_separator (str): Separator written between key and value.
        indent_char (str): Character repeated to indent new setting lines.
        indent_width (int | None): Fixed indentation width, or None to derive it.

    Raises:
        ValueError: If the separator is empty, the indent character is not
            exactly one character, or the width is negative.
    """
    if not key_val_separator:
        raise ValueError("key/value separator must not be empty")
    if len(indent_char) != 1:
        raise ValueError(f"indent character must be exactly one character: {indent_char!r}")
    if indent_width is not None and indent_width < 0:
        raise ValueError(f"indent width must be >= 0 (got {indent_width})")


@dataclass(frozen=True)
class EditorConfig:
    """Immutable editor parameters.

    Attributes:
        key_val_separator (str): Text written between key and value of new lines.
        section_prefix (str): Text preceding a section name in a header line.
        section_suffix (str): Text following a section name in a header line.
        indent_char (str): Character used to indent new setting lines.
        indent_width (int | None): Fixed indentation width for new lines; None
            derives it from each section's existing settings.
        write_strategy (FileWriteStrategy): How `IniFile.save` commits text.
        config_files (tuple[Path | str, ...]): Sources merged into this snapshot.
    """

    key_val_separator: str = DEFAULT_KEY_VAL_SEPARATOR
    section_prefix: str = DEFAULT_SECTION_PREFIX
    section_suffix: str = DEFAULT_SECTION_SUFFIX
    indent_char: str = DEFAULT_INDENT_CHAR
    indent_width: int | None = None
    write_strategy: FileWriteStrategy = FileWriteStrategy.ATOMIC
    config_files: tuple[Path | str, ...] = ()

    def thaw(self) -> MutableEditorConfig:
        """Return a mutable copy of this snapshot."""
        return MutableEditorConfig(
            key_val_separator=self.key_val_separator,
            section_prefix=self.section_prefix,
            section_suffix=self.section_suffix,
            indent_char=self.indent_char,
            indent_width=self.indent_width,
            write_strategy=self.write_strategy,
            config_files=list(self.config_files),
        )


@dataclass
class MutableEditorConfig:
    """Mutable builder for `EditorConfig`.

    Every editor field is optional; ``None`` means "not set by this layer" so
    that `merge_with` can layer sources without losing information.
    """

    key_val_separator: str | None = None
    section_prefix: str | None = None
    section_suffix: str | None = None
    indent_char: str | None = None
    indent_width: int | None = None
    write_strategy: FileWriteStrategy | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> EditorConfig:
        """Fill unset fields with defaults, validate, and return an `EditorConfig`.

        Raises:
            ValueError: If the merged settings are invalid.
        """
        frozen = EditorConfig(
            key_val_separator=(
                self.key_val_separator
                if self.key_val_separator is not None
                else DEFAULT_KEY_VAL_SEPARATOR
            ),
            section_prefix=(
                self.section_prefix if self.section_prefix is not None else DEFAULT_SECTION_PREFIX
            ),
            section_suffix=(
                self.section_suffix if self.section_suffix is not None else DEFAULT_SECTION_SUFFIX
            ),
            indent_char=self.indent_char if self.indent_char is not None else DEFAULT_INDENT_CHAR,
            indent_width=self.indent_width,
            write_strategy=self.write_strategy or FileWriteStrategy.ATOMIC,
            config_files=tuple(self.config_files),
        )
        validate_editor_settings(
            key_val_separator=frozen.key_val_separator,
            indent_char=frozen.indent_char,
            indent_width=frozen.indent_width,
        )
        return frozen

    # ------------------------------- Loading -------------------------------
    @classmethod
    def from_defaults(cls) -> MutableEditorConfig:
        """Return a builder holding the built-in defaults."""
        return EditorConfig().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableEditorConfig:
        """Build a draft from an IniKeep TOML table.

        Unknown keys are ignored; values of the wrong type are logged and skipped.

        Args:
            data (TomlTable): The ``inikeep.toml`` content (or ``[tool.inikeep]``).

        Returns:
            MutableEditorConfig: A draft with only the keys present in ``data`` set.
        """
        draft = cls()

        editor_tbl: Any = data.get(Toml.SECTION_EDITOR, {})
        if not isinstance(editor_tbl, dict):
            logger.warning("Ignoring malformed [%s] table: %r", Toml.SECTION_EDITOR, editor_tbl)
            editor_tbl = {}

        draft.key_val_separator = _get_str(editor_tbl, Toml.KEY_SEPARATOR)
        draft.section_prefix = _get_str(editor_tbl, Toml.KEY_SECTION_PREFIX)
        draft.section_suffix = _get_str(editor_tbl, Toml.KEY_SECTION_SUFFIX)
        draft.indent_char = _get_str(editor_tbl, Toml.KEY_INDENT_CHAR)

        width: Any = editor_tbl.get(Toml.KEY_INDENT_WIDTH)
        if width is not None:
            # bool is an int subclass; reject it explicitly
            if isinstance(width, int) and not isinstance(width, bool):
                draft.indent_width = width
            else:
                logger.warning(
                    "Ignoring non-integer [%s].%s: %r",
                    Toml.SECTION_EDITOR,
                    Toml.KEY_INDENT_WIDTH,
                    width,
                )

        writer_tbl: Any = data.get(Toml.SECTION_WRITER, {})
        if not isinstance(writer_tbl, dict):
            logger.warning("Ignoring malformed [%s] table: %r", Toml.SECTION_WRITER, writer_tbl)
            writer_tbl = {}
        strategy_name: str | None = _get_str(writer_tbl, Toml.KEY_STRATEGY)
        if strategy_name is not None:
            draft.write_strategy = FileWriteStrategy.from_name(strategy_name)
            if draft.write_strategy is None:
                logger.warning(
                    "Ignoring unknown [%s].%s: %r",
                    Toml.SECTION_WRITER,
                    Toml.KEY_STRATEGY,
                    strategy_name,
                )

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableEditorConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``inikeep.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.inikeep]`` table from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableEditorConfig | None: The draft, or None when a ``pyproject.toml``
                carries no ``[tool.inikeep]`` table.
        """
        logger.debug("Creating MutableEditorConfig from TOML config: %s", path)

        table: TomlTable | None = extract_tool_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("[tool.inikeep] table missing in %s", path)
            return None

        draft: MutableEditorConfig = cls.from_toml_dict(table)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned root-most first, nearest last. Within a directory
        ``pyproject.toml`` comes before ``inikeep.toml`` so that the dedicated
        file wins a nearest-last merge. A config setting ``root = true`` stops
        the walk after its directory.

        Args:
            start (Path): The directory (or a file inside it) where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for stable merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in (PYPROJECT_TOML_NAME, INIKEEP_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                table: TomlTable | None = extract_tool_table(p, load_toml_dict(p))
                if table is None:
                    # pyproject.toml without an [tool.inikeep] table
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if bool(table.get(KEY_ROOT, False)):
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):  # root-most first
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableEditorConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            start (Path | None): Discovery anchor; defaults to the current directory.
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableEditorConfig: The merged draft.
        """
        draft: MutableEditorConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(start or Path.cwd()):
                mc: MutableEditorConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableEditorConfig) -> MutableEditorConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableEditorConfig): The layer whose explicit values win.

        Returns:
            MutableEditorConfig: A new merged draft.
        """
        return MutableEditorConfig(
            key_val_separator=_pick(other.key_val_separator, self.key_val_separator),
            section_prefix=_pick(other.section_prefix, self.section_prefix),
            section_suffix=_pick(other.section_suffix, self.section_suffix),
            indent_char=_pick(other.indent_char, self.indent_char),
            indent_width=_pick(other.indent_width, self.indent_width),
            write_strategy=_pick(other.write_strategy, self.write_strategy),
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableEditorConfig:
        """Update fields from an arguments mapping (CLI or API).

        Only keys present with a non-None value override the draft. Config file
        discovery flags are not handled here.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableEditorConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableEditorConfig: %s", args)

        self.config_files.append("<CLI overrides>")

        if args.get(Cli.SEPARATOR) is not None:
            self.key_val_separator = args[Cli.SEPARATOR]
        if args.get(Cli.SECTION_PREFIX) is not None:
            self.section_prefix = args[Cli.SECTION_PREFIX]
        if args.get(Cli.SECTION_SUFFIX) is not None:
            self.section_suffix = args[Cli.SECTION_SUFFIX]
        if args.get(Cli.INDENT_CHAR) is not None:
            self.indent_char = args[Cli.INDENT_CHAR]
        if args.get(Cli.INDENT_WIDTH) is not None:
            self.indent_width = int(args[Cli.INDENT_WIDTH])
        strategy: Any = args.get(Cli.WRITE_STRATEGY)
        if isinstance(strategy, FileWriteStrategy):
            self.write_strategy = strategy
        elif isinstance(strategy, str):
            self.write_strategy = FileWriteStrategy.from_name(strategy) or self.write_strategy
        return self


def _pick(preferred: Any, fallback: Any) -> Any:
    return preferred if preferred is not None else fallback


def _get_str(table: TomlTable, key: str) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        logger.warning("Ignoring non-string value for '%s': %r", key, value)
        return None
    return value
