# topmark:header:start
#
#   project      : tfremover
#   file         : locator.py
#   file_relpath : src/tfremover/pipeline/steps/locator.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Locator step: parse the file and find the top-level target blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.core.errors import ParseError
from tfremover.core.ranges import locate_blocks
from tfremover.hcl.errors import HclSyntaxError
from tfremover.pipeline.status import Axis, FsStatus, LocateStatus
from tfremover.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext

logger: TfremoverLogger = get_logger(__name__)


class LocatorStep(BaseStep):
    """Populate ``ctx.ranges`` with the extents of the configured block type.

    Invalid HCL records a `ParseError` and halts the flow; the file is never
    modified in that case.

    Axes written:
      - locate
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.LOCATE,
            axes_written=(Axis.LOCATE,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.status.fs in (FsStatus.OK, FsStatus.EMPTY)

    def run(self, ctx: ProcessingContext) -> None:
        source: bytes = ctx.views.source.data or b""
        try:
            ctx.ranges = locate_blocks(
                source,
                filename=str(ctx.path),
                block_type=ctx.config.block_type,
            )
        except HclSyntaxError as exc:
            ctx.status.locate = LocateStatus.PARSE_ERROR
            error: ParseError = ParseError(ctx.path, [str(exc.diagnostic)])
            error.__cause__ = exc
            logger.error("Cannot parse %s: %s", ctx.path, exc)
            ctx.fail(error, reason="parse-error", at_step=self)
            return
        ctx.status.locate = LocateStatus.FOUND if ctx.ranges else LocateStatus.NONE_FOUND

    def hint(self, ctx: ProcessingContext) -> None:
        if ctx.status.locate == LocateStatus.FOUND:
            ctx.add_info(
                f"Found {len(ctx.ranges)} {ctx.config.block_type!r} block(s).", step=self.name
            )
