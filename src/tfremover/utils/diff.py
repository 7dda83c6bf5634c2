# topmark:header:start
#
#   project      : tfremover
#   file         : diff.py
#   file_relpath : src/tfremover/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Colorized rendering of unified diffs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Carriage returns are shown as ``\\r`` so that line-ending changes are visible.

    Args:
        patch (Sequence[str] | str): Diff lines, or the diff as one string.
        show_line_numbers (bool): Prefix each line with a 4-digit line number.

    Returns:
        str: The colorized diff, one rendered line per input line.
    """
    lines: list[str] = (
        patch.split("\n") if isinstance(patch, str) else [line.rstrip("\n") for line in patch]
    )
    if lines and lines[-1] == "":
        lines.pop()

    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    if show_line_numbers:
        return "".join(
            f"{chalk.gray(f'{i:04d}|')}{process_line(line)}\n" for i, line in enumerate(lines, 1)
        )
    return "".join(f"{process_line(line)}\n" for line in lines)
