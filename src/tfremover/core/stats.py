# topmark:header:start
#
#   project      : tfremover
#   file         : stats.py
#   file_relpath : src/tfremover/core/stats.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Run statistics accumulated while processing a batch of files."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any


def format_duration(seconds: float) -> str:
    """Render a duration compactly (``"850µs"``, ``"12.345ms"``, ``"1.234s"``)."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


@dataclass
class RunStats:
    """Accumulator threaded through a run.

    The engine updates the counters once per successfully processed file; the
    CLI renders them at the end of the run. Counters reflect what *would*
    change in dry-run mode.

    Attributes:
        dry_run (bool): Whether the run only reports changes.
        normalize_whitespace (bool): Whether blank-line normalization was enabled.
        files_processed (int): Files read, parsed and transformed without error.
        files_modified (int): Files whose content changed (or would change).
        blocks_removed (int): Total number of removed target blocks.
        start_time (float): `time.perf_counter` value at creation.
        end_time (float | None): `time.perf_counter` value set by `finish`.
    """

    dry_run: bool = False
    normalize_whitespace: bool = False
    files_processed: int = 0
    files_modified: int = 0
    blocks_removed: int = 0
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None

    def record_processed(self) -> None:
        """Count one processed file."""
        self.files_processed += 1

    def record_modified(self, blocks_removed: int) -> None:
        """Count one modified file from which ``blocks_removed`` blocks were removed."""
        if blocks_removed < 0:
            raise ValueError("blocks_removed must not be negative")
        self.files_modified += 1
        self.blocks_removed += blocks_removed

    def finish(self) -> None:
        """Stamp the end of the run."""
        self.end_time = time.perf_counter()

    @property
    def duration(self) -> float:
        """Elapsed seconds, up to `end_time` or to now if the run is ongoing."""
        end: float = self.end_time if self.end_time is not None else time.perf_counter()
        return end - self.start_time

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of the statistics."""
        return {
            "dry_run": self.dry_run,
            "normalize_whitespace": self.normalize_whitespace,
            "files_processed": self.files_processed,
            "files_modified": self.files_modified,
            "blocks_removed": self.blocks_removed,
            "duration_seconds": round(self.duration, 6),
        }
