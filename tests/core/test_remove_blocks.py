# topmark:header:start
#
#   project      : tfremover
#   file         : test_remove_blocks.py
#   file_relpath : tests/core/test_remove_blocks.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Tests for the in-memory locate → splice → format → normalize chain."""

from __future__ import annotations

import pytest

from tests.conftest import REMOVED_BLOCK, RESOURCE_BLOCK
from tfremover.api import EditResult, remove_blocks
from tfremover.hcl import HclSyntaxError

KEPT_BUCKET: str = '# Keep the bucket.\nresource "aws_s3_bucket" "b" {\n  bucket = "b"\n}\n'

THREE_BLOCKS: bytes = (
    RESOURCE_BLOCK
    + "\n"
    + REMOVED_BLOCK
    + "\n"
    + "removed {\n  from = aws_instance.older\n}\n"
    + "\n"
    + KEPT_BUCKET
    + "\n"
    + "removed { from = aws_s3_bucket.tmp }\n"
).encode()


def test_three_blocks_with_normalization() -> None:
    result: EditResult = remove_blocks(THREE_BLOCKS, normalize_whitespace=True)
    assert result.blocks_removed == 3
    assert result.changed
    assert result.content == (RESOURCE_BLOCK + "\n" + KEPT_BUCKET).encode()


def test_three_blocks_without_normalization_keeps_blank_runs() -> None:
    result: EditResult = remove_blocks(THREE_BLOCKS)
    assert result.blocks_removed == 3
    assert result.content == (RESOURCE_BLOCK + "\n\n\n" + KEPT_BUCKET + "\n").encode()


def test_formatting_only_change() -> None:
    result: EditResult = remove_blocks(b"a=1\n")
    assert result.content == b"a = 1\n"
    assert result.changed
    assert result.blocks_removed == 0


def test_canonical_file_without_blocks_is_unchanged() -> None:
    source: bytes = RESOURCE_BLOCK.encode()
    result: EditResult = remove_blocks(source)
    assert not result.changed
    assert result.content == source


def test_normalization_requires_a_removed_block() -> None:
    source: bytes = b"a = 1\n\n\n\nb = 2\n"
    result: EditResult = remove_blocks(source, normalize_whitespace=True)
    assert not result.changed
    assert result.content == source


def test_comment_directly_above_block_is_preserved() -> None:
    source: bytes = b"a = 1\n# note about the removal\nremoved {\n  from = x.y\n}\n"
    result: EditResult = remove_blocks(source)
    assert result.content == b"a = 1\n# note about the removal\n"


def test_result_is_stable_when_reprocessed() -> None:
    first: EditResult = remove_blocks(THREE_BLOCKS, normalize_whitespace=True)
    second: EditResult = remove_blocks(first.content, normalize_whitespace=True)
    assert not second.changed
    assert second.content == first.content


def test_crlf_file() -> None:
    source: bytes = b"a = 1\r\n\r\nremoved {\r\n  from = x.y\r\n}\r\n\r\nb = 2\r\n"
    result: EditResult = remove_blocks(source, normalize_whitespace=True)
    assert result.content == b"a = 1\r\n\r\nb = 2\r\n"


def test_custom_block_type() -> None:
    source: bytes = b"moved {\n  from = a.b\n  to   = a.c\n}\n" + REMOVED_BLOCK.encode()
    result: EditResult = remove_blocks(source, block_type="moved")
    assert result.blocks_removed == 1
    assert result.content == REMOVED_BLOCK.encode()


def test_invalid_hcl_raises() -> None:
    with pytest.raises(HclSyntaxError):
        remove_blocks(b"this is not valid HCL\n")
