# topmark:header:start
#
#   project      : tfremover
#   file         : views.py
#   file_relpath : src/tfremover/pipeline/views.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Views holding the large per-file buffers of the pipeline.

Buffers are grouped in `Views` so that the runner can release them once a
file has been fully processed (``prune=True``), keeping only the statuses and
counters needed for summaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class BytesView:
    """A byte buffer that can be released."""

    data: bytes | None = None

    def release(self) -> None:
        self.data = None


@dataclass(slots=True)
class DiffView:
    """Unified diff text between the original and the final content."""

    text: str | None = None

    def release(self) -> None:
        self.text = None


@dataclass(slots=True)
class Views:
    """All buffers of one file.

    Attributes:
        source (BytesView): Original content as read from disk.
        spliced (BytesView): Content after removing the located blocks.
        formatted (BytesView): Spliced content after canonical formatting.
        final (BytesView): Content to be written (after optional normalization).
        diff (DiffView): Unified diff of ``source`` versus ``final``.
    """

    source: BytesView = field(default_factory=BytesView)
    spliced: BytesView = field(default_factory=BytesView)
    formatted: BytesView = field(default_factory=BytesView)
    final: BytesView = field(default_factory=BytesView)
    diff: DiffView = field(default_factory=DiffView)

    def release_all(self) -> None:
        """Release every buffer."""
        for view in (self.source, self.spliced, self.formatted, self.final, self.diff):
            view.release()
