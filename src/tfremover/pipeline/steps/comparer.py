# topmark:header:start
#
#   project      : tfremover
#   file         : comparer.py
#   file_relpath : src/tfremover/pipeline/steps/comparer.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Comparer step: decide whether the file changes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.pipeline.status import Axis, ComparisonStatus, NormalizeStatus
from tfremover.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext

logger: TfremoverLogger = get_logger(__name__)


class ComparerStep(BaseStep):
    """Set the comparison status.

    A file is changed when at least one block was located, or when the final
    content differs byte-for-byte from the original.

    Axes written:
      - comparison
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.COMPARISON,
            axes_written=(Axis.COMPARISON,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.status.normalize != NormalizeStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        changed: bool = bool(ctx.ranges) or ctx.views.final.data != ctx.views.source.data
        ctx.status.comparison = ComparisonStatus.CHANGED if changed else ComparisonStatus.UNCHANGED
        logger.debug("%s: %s", ctx.path, ctx.status.comparison.value)
