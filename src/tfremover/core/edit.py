# topmark:header:start
#
#   project      : tfremover
#   file         : edit.py
#   file_relpath : src/tfremover/core/edit.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""In-memory removal of target blocks from one buffer.

`remove_blocks` chains locate → splice → format → normalize without touching
the filesystem. The file pipeline performs the same stages as separate steps
so that each stage gets its own status.
"""

from __future__ import annotations

from dataclasses import dataclass

from tfremover.constants import DEFAULT_BLOCK_TYPE
from tfremover.core.ranges import BlockRange, locate_blocks, splice_ranges
from tfremover.core.whitespace import normalize_blank_lines
from tfremover.hcl.formatter import format_bytes


@dataclass(frozen=True, slots=True)
class EditResult:
    """Result of transforming one buffer.

    Attributes:
        content (bytes): Final content.
        ranges (tuple[BlockRange, ...]): Blocks that were removed.
        changed (bool): Whether a block was removed or the content otherwise differs.
    """

    content: bytes
    ranges: tuple[BlockRange, ...]
    changed: bool

    @property
    def blocks_removed(self) -> int:
        return len(self.ranges)


def remove_blocks(
    source: bytes,
    *,
    block_type: str = DEFAULT_BLOCK_TYPE,
    normalize_whitespace: bool = False,
    filename: str = "<input>",
) -> EditResult:
    """Remove every top-level ``block_type`` block from ``source``.

    Args:
        source (bytes): Original content.
        block_type (str): Block type keyword to remove.
        normalize_whitespace (bool): Collapse blank lines when a block was removed.
        filename (str): Name used in parser diagnostics.

    Returns:
        EditResult: The transformed content and change decision.

    Raises:
        HclSyntaxError: If ``source`` is not valid HCL.
    """
    ranges: list[BlockRange] = locate_blocks(source, filename=filename, block_type=block_type)
    content: bytes = format_bytes(splice_ranges(source, ranges), filename=filename)
    if ranges and normalize_whitespace:
        content = normalize_blank_lines(content)
    return EditResult(
        content=content,
        ranges=tuple(ranges),
        changed=bool(ranges) or content != source,
    )
