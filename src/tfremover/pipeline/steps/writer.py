# topmark:header:start
#
#   project      : tfremover
#   file         : writer.py
#   file_relpath : src/tfremover/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Writer step: commit the final content to a sink.

Sinks
-----
- FileSystemSink: replaces the file atomically (temporary sibling + ``os.replace``).
- NullSink: dry-run; nothing is written.

The content is fully computed in memory before any write, and the original
file is only replaced once the new content is completely on disk, so a failed
write never leaves a truncated file behind.
"""

from __future__ import annotations

import os
import stat
import tempfile
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from tfremover.config.logging import get_logger
from tfremover.core.errors import WriteError
from tfremover.pipeline.status import Axis, ComparisonStatus, WriteStatus
from tfremover.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from pathlib import Path

    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext

logger: TfremoverLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Destination for the final content of a file."""

    def write(self, *, path: Path, data: bytes) -> WriteResult:
        """Persist ``data`` for ``path`` and report the outcome.

        Raises:
            OSError: If the content cannot be written.
        """
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, path: Path, data: bytes) -> WriteResult:
        logger.debug("NullSink: would write %d bytes to %s", len(data), path)
        return WriteResult(status=WriteStatus.PREVIEWED, bytes_written=0)


class FileSystemSink:
    """Replace ``path`` in place, preserving its permission bits."""

    def write(self, *, path: Path, data: bytes) -> WriteResult:
        mode: int = stat.S_IMODE(path.stat().st_mode)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("FileSystemSink: wrote %d bytes to %s", len(data), path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=len(data))


def _select_sink(ctx: ProcessingContext) -> WriteSink:
    """Return `NullSink` in dry-run mode, otherwise `FileSystemSink`."""
    if ctx.config.dry_run:
        logger.debug("Selected NULL sink (dry run)")
        return NullSink()
    return FileSystemSink()


class WriterStep(BaseStep):
    """Write changed files; report unchanged ones as skipped.

    Axes written:
      - write
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.WRITE,
            axes_written=(Axis.WRITE,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.status.comparison != ComparisonStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        if not ctx.would_change:
            ctx.status.write = WriteStatus.SKIPPED
            return
        sink: WriteSink = _select_sink(ctx)
        try:
            result: WriteResult = sink.write(path=ctx.path, data=ctx.views.final.data or b"")
        except OSError as exc:
            ctx.status.write = WriteStatus.FAILED
            error: WriteError = WriteError(ctx.path, exc.strerror or str(exc))
            error.__cause__ = exc
            logger.error("Cannot write %s: %s", ctx.path, exc)
            ctx.fail(error, reason="write-failed", at_step=self)
            return
        ctx.status.write = result.status
