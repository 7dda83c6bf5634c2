# topmark:header:start
#
#   project      : tfremover
#   file         : status.py
#   file_relpath : src/tfremover/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Status enums for each axis of the removal pipeline.

Values are human-readable strings used in CLI output and JSON payloads. Each
step writes only to the axes listed in its ``axes_written`` contract.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


class StatusEnum(str, Enum):
    """String enum whose members also carry a `yachalk` style.

    Members are declared as ``NAME = ("label", style)``. ``.value`` is the plain
    label (used in JSON output) and ``.colored`` is the styled label.
    """

    _style: Callable[[str], str]

    def __new__(cls, label: str, style: Callable[[str], str]) -> StatusEnum:
        member: StatusEnum = str.__new__(cls, label)
        member._value_ = label
        member._style = style
        return member

    def color(self, text: str) -> str:
        """Style ``text`` the way this status is displayed."""
        return self._style(text)

    @property
    def colored(self) -> str:
        return self._style(self.value)


class Axis(str, Enum):
    """Pipeline axes, in execution order."""

    FS = "fs"
    LOCATE = "locate"
    SPLICE = "splice"
    FORMAT = "format"
    NORMALIZE = "normalize"
    COMPARISON = "comparison"
    PATCH = "patch"
    WRITE = "write"


class FsStatus(StatusEnum):
    """Outcome of reading the file."""

    PENDING = ("pending", chalk.gray)
    OK = ("ok", chalk.green)
    EMPTY = ("empty file", chalk.yellow)
    NOT_FOUND = ("not found", chalk.red)
    NO_READ_PERMISSION = ("no read permission", chalk.red_bright)
    UNREADABLE = ("read error", chalk.red_bright)


class LocateStatus(StatusEnum):
    """Outcome of parsing the file and locating target blocks."""

    PENDING = ("pending", chalk.gray)
    FOUND = ("blocks found", chalk.yellow)
    NONE_FOUND = ("no blocks found", chalk.green)
    PARSE_ERROR = ("invalid HCL", chalk.red_bright)


class SpliceStatus(StatusEnum):
    """Outcome of removing the located blocks."""

    PENDING = ("pending", chalk.gray)
    SPLICED = ("blocks removed", chalk.yellow)
    NOT_NEEDED = ("nothing to remove", chalk.green)


class FormatStatus(StatusEnum):
    """Outcome of canonical formatting."""

    PENDING = ("pending", chalk.gray)
    FORMATTED = ("reformatted", chalk.yellow)
    UNCHANGED = ("already formatted", chalk.green)
    FAILED = ("format failed", chalk.red_bright)


class NormalizeStatus(StatusEnum):
    """Outcome of blank-line normalization."""

    PENDING = ("pending", chalk.gray)
    NORMALIZED = ("blank lines normalized", chalk.yellow)
    UNCHANGED = ("blank lines already normal", chalk.green)
    SKIPPED = ("normalization disabled", chalk.gray)
    NOT_NEEDED = ("no blocks removed", chalk.gray)


class ComparisonStatus(StatusEnum):
    """Whether the final content differs from the original."""

    PENDING = ("pending", chalk.gray)
    CHANGED = ("changed", chalk.yellow_bright)
    UNCHANGED = ("unchanged", chalk.green)


class PatchStatus(StatusEnum):
    """Outcome of unified diff generation."""

    PENDING = ("pending", chalk.gray)
    GENERATED = ("diff generated", chalk.yellow)
    SKIPPED = ("no diff", chalk.gray)


class WriteStatus(StatusEnum):
    """Outcome of committing the result."""

    PENDING = ("pending", chalk.gray)
    WRITTEN = ("written", chalk.green_bright)
    PREVIEWED = ("dry run (not written)", chalk.yellow)
    SKIPPED = ("nothing to write", chalk.gray)
    FAILED = ("write failed", chalk.red_bright)
