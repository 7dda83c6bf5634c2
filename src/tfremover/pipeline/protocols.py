# topmark:header:start
#
#   project      : tfremover
#   file         : protocols.py
#   file_relpath : src/tfremover/pipeline/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Structural protocol implemented by pipeline steps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tfremover.pipeline.context import ProcessingContext
    from tfremover.pipeline.status import Axis


class Step(Protocol):
    """A callable pipeline step with a stable name and a status-axis contract."""

    name: str
    primary_axis: Axis | None
    axes_written: tuple[Axis, ...]

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Run the step against ``ctx`` and return it."""
        ...
