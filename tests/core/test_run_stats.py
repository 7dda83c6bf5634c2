# topmark:header:start
#
#   project      : tfremover
#   file         : test_run_stats.py
#   file_relpath : tests/core/test_run_stats.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Tests for the run statistics accumulator."""

from __future__ import annotations

import pytest

from tfremover.core.stats import RunStats, format_duration


def test_counters_accumulate() -> None:
    stats: RunStats = RunStats(dry_run=True)
    stats.record_processed()
    stats.record_processed()
    stats.record_modified(3)
    stats.record_modified(0)
    assert (stats.files_processed, stats.files_modified, stats.blocks_removed) == (2, 2, 3)


def test_negative_block_count_is_rejected() -> None:
    with pytest.raises(ValueError):
        RunStats().record_modified(-1)


def test_finish_freezes_duration() -> None:
    stats: RunStats = RunStats()
    stats.finish()
    assert stats.end_time is not None
    assert stats.duration == stats.end_time - stats.start_time
    assert stats.duration >= 0


def test_to_dict() -> None:
    stats: RunStats = RunStats(normalize_whitespace=True)
    stats.record_processed()
    stats.finish()
    data = stats.to_dict()
    assert data["normalize_whitespace"] is True
    assert data["dry_run"] is False
    assert data["files_processed"] == 1
    assert data["files_modified"] == 0
    assert data["blocks_removed"] == 0
    assert "duration_seconds" in data


@pytest.mark.parametrize(
    ("seconds", "text"),
    [(0.0005, "500µs"), (0.012345, "12.345ms"), (1.5, "1.500s")],
)
def test_format_duration(seconds: float, text: str) -> None:
    assert format_duration(seconds) == text
