# topmark:header:start
#
#   project      : tfremover
#   file         : test_block_ranges.py
#   file_relpath : tests/core/test_block_ranges.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Tests for block location and byte-exact splicing."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tfremover.core.ranges import BlockRange, locate_blocks, splice_ranges
from tfremover.hcl import HclSyntaxError


def test_block_range_validation() -> None:
    assert len(BlockRange(2, 5)) == 3
    with pytest.raises(ValueError):
        BlockRange(5, 5)
    with pytest.raises(ValueError):
        BlockRange(-1, 3)


def test_locate_returns_ranges_in_source_order() -> None:
    source: bytes = b"removed {\n  from = a.b\n}\n\nremoved {\n  from = c.d\n}\n"
    ranges: list[BlockRange] = locate_blocks(source)
    assert [source[r.start : r.end] for r in ranges] == [
        b"removed {\n  from = a.b\n}",
        b"removed {\n  from = c.d\n}",
    ]


def test_locate_honors_block_type() -> None:
    source: bytes = b"moved {\n  from = a.b\n  to = a.c\n}\nremoved {\n  from = c.d\n}\n"
    assert len(locate_blocks(source, block_type="moved")) == 1
    assert len(locate_blocks(source, block_type="import")) == 0


def test_locate_propagates_syntax_errors() -> None:
    with pytest.raises(HclSyntaxError):
        locate_blocks(b"this is not valid HCL\n", filename="bad.tf")


def test_splice_without_ranges_returns_source_unchanged() -> None:
    source: bytes = b"a = 1\n"
    assert splice_ranges(source, []) is source


def test_splice_consumes_one_terminator() -> None:
    source: bytes = b"a = 1\nremoved {\n  from = x.y\n}\n\nb = 2\n"
    ranges: list[BlockRange] = locate_blocks(source)
    assert splice_ranges(source, ranges) == b"a = 1\n\nb = 2\n"


def test_splice_consumes_crlf_terminator() -> None:
    source: bytes = b"a = 1\r\nremoved {\r\n  from = x.y\r\n}\r\nb = 2\r\n"
    assert splice_ranges(source, locate_blocks(source)) == b"a = 1\r\nb = 2\r\n"


def test_splice_absorbs_leading_indentation() -> None:
    source: bytes = b"a = 1\n  \tremoved { from = x.y }\nb = 2\n"
    assert splice_ranges(source, locate_blocks(source)) == b"a = 1\nb = 2\n"


def test_comment_above_block_is_preserved() -> None:
    source: bytes = b"# keep me\nremoved {\n  from = x.y\n}\nb = 2\n"
    assert splice_ranges(source, locate_blocks(source)) == b"# keep me\nb = 2\n"


def test_block_at_end_without_newline() -> None:
    source: bytes = b"a = 1\nremoved {\n  from = x.y\n}"
    assert splice_ranges(source, locate_blocks(source)) == b"a = 1\n"


def test_adjacent_ranges_are_merged() -> None:
    source: bytes = b"removed { from = a.b }\nremoved { from = c.d }\nz = 1\n"
    ranges: list[BlockRange] = locate_blocks(source)
    assert len(ranges) == 2
    assert splice_ranges(source, ranges) == b"z = 1\n"


def test_unsorted_ranges_give_the_same_result() -> None:
    source: bytes = b"removed { from = a.b }\nx = 1\nremoved { from = c.d }\ny = 2\n"
    ranges: list[BlockRange] = locate_blocks(source)
    assert splice_ranges(source, list(reversed(ranges))) == splice_ranges(source, ranges)


def _splice_one_by_one(source: bytes, ranges: list[BlockRange]) -> bytes:
    """Reference implementation: delete widened ranges from last to first."""
    result: bytes = source
    for r in sorted(ranges, reverse=True):
        start: int = r.start
        while start > 0 and result[start - 1] in b" \t":
            start -= 1
        end: int = r.end
        while end < len(result) and result[end] in b"\r\n":
            end += 1
            if result[end - 1] == 0x0A:
                break
        result = result[:start] + result[end:]
    return result


_ITEMS: list[bytes] = [
    b"removed {\n  from = a.b\n}\n",
    b"removed { from = c.d }\n",
    b"  removed { from = e.f }\r\n",
    b'resource "a" "b" {\n  x = 1\n}\n',
    b"# comment\n",
    b"\n",
    b"\r\n",
    b"locals {\n  k = 1\n}\n",
]


@given(st.lists(st.sampled_from(_ITEMS), max_size=12))
def test_single_pass_matches_last_to_first_deletion(items: list[bytes]) -> None:
    source: bytes = b"".join(items)
    ranges: list[BlockRange] = locate_blocks(source)
    assert splice_ranges(source, ranges) == _splice_one_by_one(source, ranges)


@given(st.binary(max_size=200))
def test_splice_without_ranges_is_identity(source: bytes) -> None:
    assert splice_ranges(source, []) is source
