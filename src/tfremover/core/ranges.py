# topmark:header:start
#
#   project      : tfremover
#   file         : ranges.py
#   file_relpath : src/tfremover/core/ranges.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Locating target blocks and splicing them out of a source buffer.

`locate_blocks` answers *where* the target blocks are; `splice_ranges` removes
them. A `BlockRange` is anchored on the block keyword, so comments written
directly above a block are never part of it and survive the splice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.constants import DEFAULT_BLOCK_TYPE
from tfremover.hcl.parser import parse

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tfremover.config.logging import TfremoverLogger
    from tfremover.hcl.parser import HclFile

logger: TfremoverLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class BlockRange:
    """Half-open byte extent ``[start, end)`` of one located block."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.end:
            raise ValueError(f"invalid block range [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start


def locate_blocks(
    source: bytes,
    *,
    filename: str = "<input>",
    block_type: str = DEFAULT_BLOCK_TYPE,
) -> list[BlockRange]:
    """Return the extents of all top-level ``block_type`` blocks, in source order.

    Args:
        source (bytes): File content.
        filename (str): Name used in parser diagnostics.
        block_type (str): Block type keyword to look for.

    Returns:
        list[BlockRange]: Non-overlapping ranges ordered by start offset.

    Raises:
        HclSyntaxError: If ``source`` is not valid HCL.
    """
    hcl_file: HclFile = parse(source, filename)
    ranges: list[BlockRange] = [
        BlockRange(block.start, block.end) for block in hcl_file.iter_blocks(block_type)
    ]
    logger.debug("%s: located %d %r block(s)", filename, len(ranges), block_type)
    return ranges


def _expand(source: bytes, block: BlockRange) -> tuple[int, int]:
    """Widen ``block`` over its leading indentation and one trailing terminator."""
    start: int = block.start
    while start > 0 and source[start - 1] in b" \t":
        start -= 1

    end: int = block.end
    while end < len(source) and source[end] in b"\r\n":
        end += 1
        if source[end - 1] == 0x0A:
            break
    return start, end


def splice_ranges(source: bytes, ranges: Sequence[BlockRange]) -> bytes:
    """Remove every range in ``ranges`` from ``source``.

    Each range is first widened backward over spaces and tabs and forward over
    at most one line terminator. Widened intervals that touch or overlap are
    merged, then all kept segments are joined in a single pass. The result is
    identical to deleting the widened ranges one at a time from last to first.

    Args:
        source (bytes): Original content.
        ranges (Sequence[BlockRange]): Ranges to delete.

    Returns:
        bytes: Content without the ranges; ``source`` itself if ``ranges`` is empty.
    """
    if not ranges:
        return source

    merged: list[list[int]] = []
    for start, end in sorted(_expand(source, r) for r in ranges):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])

    kept: list[bytes] = []
    cursor: int = 0
    for start, end in merged:
        kept.append(source[cursor:start])
        cursor = end
    kept.append(source[cursor:])
    result: bytes = b"".join(kept)
    logger.trace("spliced %d range(s): %d -> %d bytes", len(ranges), len(source), len(result))
    return result
