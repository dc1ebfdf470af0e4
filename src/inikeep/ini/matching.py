# topmark:header:start
#
#   project      : IniKeep
#   file         : matching.py
#   file_relpath : src/inikeep/ini/matching.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classification for INI text.

A `LineMatcher` is built once from the editor parameters and classifies a
single line into one of four variants:

- `HeaderLine`: ``<prefix><name><suffix>``
- `SettingLine`: ``<indent><key><separator><value>``
- `CommentedSettingLine`: a setting line disabled by ``#`` / ``;`` markers
- `OpaqueLine`: anything else (comments, blank lines, garbage)

The three patterns share a separator fragment: when the configured separator
is whitespace only it matches as a single space, otherwise it matches as the
separator stripped of its surrounding whitespace. Matching ignores the line
terminator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from inikeep.ini.store import split_terminator

if TYPE_CHECKING:
    from re import Match, Pattern


@dataclass(frozen=True)
class HeaderLine:
    """A section header line."""

    name: str


@dataclass(frozen=True)
class SettingLine:
    """An active ``key<separator>value`` line.

    Attributes:
        indent (str): Leading whitespace.
        key (str): Setting name.
        separator (str): Separator text as written, surrounding blanks included.
        value (str): Value with trailing whitespace trimmed.
    """

    indent: str
    key: str
    separator: str
    value: str


@dataclass(frozen=True)
class CommentedSettingLine:
    """A setting line disabled by one or more comment markers."""

    indent: str
    key: str
    separator: str
    value: str


@dataclass(frozen=True)
class OpaqueLine:
    """Any line that is neither a header nor a (commented) setting."""

    text: str


ClassifiedLine = HeaderLine | SettingLine | CommentedSettingLine | OpaqueLine


def matching_separator(key_val_separator: str) -> str:
    """Return the separator fragment used by the setting patterns.

    Args:
        key_val_separator (str): The configured separator, e.g. ``" = "``.

    Returns:
        str: ``" "`` for a whitespace-only separator, otherwise the separator
            without surrounding whitespace.

    Raises:
        ValueError: If the separator is empty.
    """
    if not key_val_separator:
        raise ValueError("key/value separator must not be empty")
    if key_val_separator.isspace():
        return " "
    return key_val_separator.strip()


class LineMatcher:
    """Classifier for header, setting and commented-setting lines.

    Args:
        key_val_separator (str): Separator between key and value.
        section_prefix (str): Text before the section name in a header.
        section_suffix (str): Text after the section name in a header.
    """

    def __init__(
        self,
        key_val_separator: str = " = ",
        section_prefix: str = "[",
        section_suffix: str = "]",
    ) -> None:
        sep: str = re.escape(matching_separator(key_val_separator))

        self.section_re: Pattern[str] = re.compile(
            r"^\s*" + re.escape(section_prefix) + r"(.*)" + re.escape(section_suffix) + r"\s*$"
        )
        self.setting_re: Pattern[str] = re.compile(
            r"^(\s*)([^#;\s]|[^#;\s].*?[^\s" + sep + r"])(\s*" + sep + r"[ \t]*)(.*?)\s*$"
        )
        self.commented_setting_re: Pattern[str] = re.compile(
            r"^(\s*)[#;]+\s*(.*?[^\s" + sep + r"])(\s*" + sep + r"[ \t]*)(.*?)\s*$"
        )

    def classify(self, line: str) -> ClassifiedLine:
        """Classify a single line.

        Header matching takes precedence over setting matching, which takes
        precedence over commented-setting matching.

        Args:
            line (str): The line, with or without its terminator.

        Returns:
            ClassifiedLine: The variant describing the line.
        """
        text, _nl = split_terminator(line)

        m: Match[str] | None = self.section_re.match(text)
        if m:
            return HeaderLine(name=m.group(1))

        m = self.setting_re.match(text)
        if m:
            return SettingLine(indent=m.group(1), key=m.group(2), separator=m.group(3), value=m.group(4))

        m = self.commented_setting_re.match(text)
        if m:
            return CommentedSettingLine(
                indent=m.group(1), key=m.group(2), separator=m.group(3), value=m.group(4)
            )

        return OpaqueLine(text=text)
