# topmark:header:start
#
#   project      : tfremover
#   file         : test_render_patch.py
#   file_relpath : tests/utils/test_render_patch.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Rendering of unified diffs for the terminal."""

from __future__ import annotations

import re

from tfremover.utils.diff import render_patch

_ANSI = re.compile(r"\x1b\[[0-9;]*m")

PATCH: str = (
    "--- main.tf (current)\n"
    "+++ main.tf (updated)\n"
    "@@ -1,2 +1 @@\n"
    " a = 1\r\n"
    "-removed { from = x.y }\n"
)


def _plain(text: str) -> str:
    return _ANSI.sub("", text)


def test_render_keeps_every_line_and_shows_carriage_returns() -> None:
    rendered: str = _plain(render_patch(PATCH))
    assert rendered.splitlines() == [
        "--- main.tf (current)",
        "+++ main.tf (updated)",
        "@@ -1,2 +1 @@",
        " a = 1\\r",
        "-removed { from = x.y }",
    ]


def test_render_accepts_a_sequence_of_lines() -> None:
    lines: list[str] = PATCH.splitlines(keepends=True)
    assert _plain(render_patch(lines)) == _plain(render_patch(PATCH))


def test_render_with_line_numbers() -> None:
    rendered: list[str] = _plain(render_patch(PATCH, show_line_numbers=True)).splitlines()
    assert rendered[0] == "0001|--- main.tf (current)"
    assert rendered[-1] == "0005|-removed { from = x.y }"
