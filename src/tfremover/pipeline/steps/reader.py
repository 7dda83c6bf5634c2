# topmark:header:start
#
#   project      : tfremover
#   file         : reader.py
#   file_relpath : src/tfremover/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Reader step: load the file's raw bytes.

The whole file is read into memory once; every later step works on in-memory
buffers. Failures are recorded as a `ReadError` and halt the flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.core.errors import ReadError
from tfremover.pipeline.status import Axis, FsStatus
from tfremover.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext

logger: TfremoverLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Read the file into ``ctx.views.source``.

    Axes written:
      - fs
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.FS,
            axes_written=(Axis.FS,),
        )

    def run(self, ctx: ProcessingContext) -> None:
        try:
            data: bytes = ctx.path.read_bytes()
        except OSError as exc:
            if isinstance(exc, (FileNotFoundError, IsADirectoryError)):
                ctx.status.fs = FsStatus.NOT_FOUND
                reason: str = "not-found"
            elif isinstance(exc, PermissionError):
                ctx.status.fs = FsStatus.NO_READ_PERMISSION
                reason = "no-read-permission"
            else:
                ctx.status.fs = FsStatus.UNREADABLE
                reason = "unreadable"
            error: ReadError = ReadError(ctx.path, exc.strerror or str(exc))
            error.__cause__ = exc
            logger.error("Cannot read %s: %s", ctx.path, exc)
            ctx.fail(error, reason=reason, at_step=self)
            return

        ctx.views.source.data = data
        ctx.status.fs = FsStatus.OK if data else FsStatus.EMPTY
        logger.debug("Read %d bytes from %s", len(data), ctx.path)

    def hint(self, ctx: ProcessingContext) -> None:
        if ctx.status.fs == FsStatus.EMPTY:
            ctx.add_info("File is empty.", step=self.name)
