# topmark:header:start
#
#   project      : tfremover
#   file         : splicer.py
#   file_relpath : src/tfremover/pipeline/steps/splicer.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Splicer step: cut the located blocks out of the source buffer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.core.ranges import splice_ranges
from tfremover.pipeline.status import Axis, LocateStatus, SpliceStatus
from tfremover.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext

logger: TfremoverLogger = get_logger(__name__)


class SplicerStep(BaseStep):
    """Produce ``ctx.views.spliced``; identical to the source when nothing was located.

    Axes written:
      - splice
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.SPLICE,
            axes_written=(Axis.SPLICE,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.status.locate in (LocateStatus.FOUND, LocateStatus.NONE_FOUND)

    def run(self, ctx: ProcessingContext) -> None:
        source: bytes = ctx.views.source.data or b""
        if not ctx.ranges:
            ctx.views.spliced.data = source
            ctx.status.splice = SpliceStatus.NOT_NEEDED
            return
        ctx.views.spliced.data = splice_ranges(source, ctx.ranges)
        ctx.status.splice = SpliceStatus.SPLICED
        logger.debug("Removed %d block(s) from %s", len(ctx.ranges), ctx.path)
