# topmark:header:start
#
#   project      : tfremover
#   file         : test_whitespace.py
#   file_relpath : tests/core/test_whitespace.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Tests for blank-line normalization."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tfremover.core.whitespace import normalize_blank_lines


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        (b"a\n\n\n\nb\n", b"a\n\nb\n"),
        (b"a\n\nb\n", b"a\n\nb\n"),
        (b"a\r\n\r\n\r\n\r\nb\r\n", b"a\r\n\r\nb\r\n"),
        (b"a\n\n\n", b"a\n"),
        (b"a", b"a\n"),
        (b"a\r\n\r\n", b"a\r\n"),
        (b"", b"\n"),
    ],
)
def test_normalize_blank_lines(content: bytes, expected: bytes) -> None:
    assert normalize_blank_lines(content) == expected


def test_mixed_terminators_collapse_and_use_crlf() -> None:
    """A run mixing LF and CRLF is still one run; CRLF input yields CRLF output."""
    assert normalize_blank_lines(b"a\n\r\n\nb\n") == b"a\r\n\r\nb\r\n"


def test_lines_with_spaces_are_not_blank() -> None:
    content: bytes = b"a\n \n \n \nb\n"
    assert normalize_blank_lines(content) == content


def test_normalize_is_idempotent() -> None:
    once: bytes = normalize_blank_lines(b"x\n\n\n\ny\n\n")
    assert normalize_blank_lines(once) == once


@given(st.lists(st.sampled_from([b"a", b" ", b"\n", b"\r\n"]), max_size=40))
def test_never_more_than_one_blank_line(parts: list[bytes]) -> None:
    content: bytes = b"".join(parts)
    result: bytes = normalize_blank_lines(content)
    terminator: bytes = b"\r\n" if b"\r\n" in content else b"\n"
    unified: bytes = result.replace(b"\r\n", b"\n")
    assert b"\n\n\n" not in unified
    assert result.endswith(terminator)
    assert not unified.endswith(b"\n\n") or unified == b"\n"
    if terminator == b"\r\n":
        assert result.count(b"\n") == result.count(b"\r\n")
