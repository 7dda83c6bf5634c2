# topmark:header:start
#
#   project      : tfremover
#   file         : context.py
#   file_relpath : src/tfremover/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Processing context: the complete, mutable state of one file in the pipeline.

Sections:
    FlowControl:
        Lets a step request an early, graceful stop for the current file.
    ProcessingStatus:
        Per-axis status, the single source of truth for what happened.
    ProcessingContext:
        Path, configuration, statuses, diagnostics, located ranges and views.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tfremover.config.logging import get_logger
from tfremover.core.diagnostics import DiagnosticLevel, DiagnosticLog, DiagnosticStats
from tfremover.pipeline.status import (
    Axis,
    ComparisonStatus,
    FormatStatus,
    FsStatus,
    LocateStatus,
    NormalizeStatus,
    PatchStatus,
    SpliceStatus,
    StatusEnum,
    WriteStatus,
)
from tfremover.pipeline.views import Views

if TYPE_CHECKING:
    from pathlib import Path

    from tfremover.config.logging import TfremoverLogger
    from tfremover.config.model import Config
    from tfremover.core.errors import ProcessingError
    from tfremover.core.ranges import BlockRange
    from tfremover.pipeline.protocols import Step

logger: TfremoverLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "ProcessingContext",
    "ProcessingStatus",
]


@dataclass
class FlowControl:
    """Execution flow control for the current file."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "not-found", "parse-error"
    at_step: str = ""


@dataclass
class ProcessingStatus:
    """Status of each pipeline axis for one file."""

    fs: FsStatus = FsStatus.PENDING
    locate: LocateStatus = LocateStatus.PENDING
    splice: SpliceStatus = SpliceStatus.PENDING
    format: FormatStatus = FormatStatus.PENDING
    normalize: NormalizeStatus = NormalizeStatus.PENDING
    comparison: ComparisonStatus = ComparisonStatus.PENDING
    patch: PatchStatus = PatchStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING

    def get(self, axis: Axis) -> StatusEnum:
        """Return the status recorded for ``axis``."""
        match axis:
            case Axis.FS:
                return self.fs
            case Axis.LOCATE:
                return self.locate
            case Axis.SPLICE:
                return self.splice
            case Axis.FORMAT:
                return self.format
            case Axis.NORMALIZE:
                return self.normalize
            case Axis.COMPARISON:
                return self.comparison
            case Axis.PATCH:
                return self.patch
            case Axis.WRITE:
                return self.write

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return ``axis -> {name, label}`` for all axes."""
        return {
            axis.value: {"name": self.get(axis).name, "label": self.get(axis).value}
            for axis in Axis
        }


@dataclass
class ProcessingContext:
    """State of a single file as it flows through the pipeline.

    Attributes:
        path (Path): The file being processed.
        config (Config): Effective configuration.
        steps (list[Step]): Steps executed so far, in order.
        status (ProcessingStatus): Per-axis status.
        flow (FlowControl): Halt request, if any.
        ranges (list[BlockRange]): Located target blocks (source order).
        error (ProcessingError | None): The per-file failure that halted the flow.
        diagnostics (DiagnosticLog): Messages collected by the steps.
        views (Views): Byte buffers; released by the runner when pruning.
    """

    path: Path
    config: Config
    steps: list[Step] = field(default_factory=lambda: [])
    status: ProcessingStatus = field(default_factory=ProcessingStatus)
    flow: FlowControl = field(default_factory=FlowControl)
    ranges: list[BlockRange] = field(default_factory=lambda: [])
    error: ProcessingError | None = None
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    views: Views = field(default_factory=Views)

    @classmethod
    def bootstrap(cls, *, path: Path, config: Config) -> ProcessingContext:
        """Create a fresh context with no derived state."""
        return cls(path=path, config=config)

    @property
    def blocks_removed(self) -> int:
        """Number of target blocks removed (or that would be removed)."""
        return len(self.ranges) if self.status.splice == SpliceStatus.SPLICED else 0

    @property
    def would_change(self) -> bool:
        """Whether the file content changes (or would change in dry-run mode)."""
        return self.status.comparison == ComparisonStatus.CHANGED

    def stop_flow(self, reason: str, at_step: Step) -> None:
        """Request a graceful, terminal stop for the rest of the pipeline.

        Args:
            reason (str): Short machine-friendly reason code.
            at_step (Step): Step requesting the halt.
        """
        logger.info("Flow halted in %s: %s", at_step.name, reason)
        self.flow = FlowControl(halt=True, reason=reason, at_step=at_step.name)

    def fail(self, error: ProcessingError, *, reason: str, at_step: Step) -> None:
        """Record ``error`` as an error diagnostic and halt the flow."""
        self.error = error
        self.add_error(error.message, step=at_step.name)
        self.stop_flow(reason, at_step)

    def add_info(self, message: str, *, step: str | None = None) -> None:
        """Add an ``info`` diagnostic."""
        self.diagnostics.add(DiagnosticLevel.INFO, message, step=step)

    def add_error(self, message: str, *, step: str | None = None) -> None:
        """Add an ``error`` diagnostic."""
        self.diagnostics.add(DiagnosticLevel.ERROR, message, step=step)

    @property
    def step_axes(self) -> dict[str, list[str]]:
        """Map each executed step name to the axes it may write.

        Together with `steps` (execution order) and `status` (final per-axis
        status) this shows which step decided which outcome.
        """
        return {step.name: [axis.value for axis in step.axes_written] for step in self.steps}

    @property
    def diagnostic_stats(self) -> DiagnosticStats:
        """Per-level diagnostic counts."""
        return self.diagnostics.stats()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly summary of this context (views excluded)."""
        return {
            "path": str(self.path),
            "status": self.status.to_dict(),
            "steps": self.step_axes,
            "blocks_removed": self.blocks_removed,
            "would_change": self.would_change,
            "ranges": [[r.start, r.end] for r in self.ranges],
            "error": None if self.error is None else self.error.to_dict(),
            "diagnostics": self.diagnostics.to_list(),
        }

    def format_summary(self) -> str:
        """Return a one-line, colorized human summary of this file's outcome."""
        if self.error is not None:
            return f"{self.path}: {self.status.write.color('error')}: {self.error.message}"
        if not self.would_change:
            return f"{self.path}: {self.status.comparison.colored}"
        parts: list[str] = []
        if self.blocks_removed:
            parts.append(f"{self.blocks_removed} {self.config.block_type} block(s) removed")
        if self.status.format == FormatStatus.FORMATTED:
            parts.append("reformatted")
        if self.status.normalize == NormalizeStatus.NORMALIZED:
            parts.append("blank lines normalized")
        return f"{self.path}: {', '.join(parts)} ({self.status.write.colored})"
