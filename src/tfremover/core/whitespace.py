# topmark:header:start
#
#   project      : tfremover
#   file         : whitespace.py
#   file_relpath : src/tfremover/core/whitespace.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Blank-line normalization applied after blocks were removed."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from tfremover.config.logging import get_logger

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger

logger: TfremoverLogger = get_logger(__name__)

LF: Final[bytes] = b"\n"
CRLF: Final[bytes] = b"\r\n"


def _collapse(content: bytes, terminator: bytes) -> bytes:
    """Replace three consecutive ``terminator`` sequences by two until none remain."""
    triple: bytes = terminator * 3
    double: bytes = terminator * 2
    while triple in content:
        content = content.replace(triple, double)
    return content


def normalize_blank_lines(content: bytes) -> bytes:
    """Collapse runs of blank lines to one and end the file with one terminator.

    Runs of three or more LF or CRLF terminators are reduced to two, the
    content is unified to LF (collapsing runs of mixed terminators), trailing
    terminators are trimmed and a single one is re-appended. If ``content``
    contained any CRLF, the whole output uses CRLF.

    Args:
        content (bytes): Formatted file content.

    Returns:
        bytes: Content with at most one blank line between non-blank lines and
        exactly one final terminator.
    """
    uses_crlf: bool = CRLF in content
    result: bytes = _collapse(content, LF)
    result = _collapse(result, CRLF)
    result = _collapse(result.replace(CRLF, LF), LF)
    result = result.rstrip(LF) + LF
    if uses_crlf:
        result = result.replace(LF, CRLF)
    logger.trace(
        "normalized blank lines (crlf=%s): %d -> %d bytes", uses_crlf, len(content), len(result)
    )
    return result
