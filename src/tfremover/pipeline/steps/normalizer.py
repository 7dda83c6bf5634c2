# topmark:header:start
#
#   project      : tfremover
#   file         : normalizer.py
#   file_relpath : src/tfremover/pipeline/steps/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Normalizer step: collapse blank lines left behind by removed blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.core.whitespace import normalize_blank_lines
from tfremover.pipeline.status import Axis, FormatStatus, NormalizeStatus
from tfremover.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext

logger: TfremoverLogger = get_logger(__name__)


class NormalizerStep(BaseStep):
    """Produce ``ctx.views.final``.

    Normalization applies only when enabled in the configuration *and* at
    least one block was removed; formatting-only changes never trigger it.

    Axes written:
      - normalize
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.NORMALIZE,
            axes_written=(Axis.NORMALIZE,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.status.format in (FormatStatus.FORMATTED, FormatStatus.UNCHANGED)

    def run(self, ctx: ProcessingContext) -> None:
        formatted: bytes = ctx.views.formatted.data or b""
        ctx.views.final.data = formatted
        if not ctx.ranges:
            ctx.status.normalize = NormalizeStatus.NOT_NEEDED
            return
        if not ctx.config.normalize_whitespace:
            ctx.status.normalize = NormalizeStatus.SKIPPED
            return
        normalized: bytes = normalize_blank_lines(formatted)
        ctx.views.final.data = normalized
        ctx.status.normalize = (
            NormalizeStatus.NORMALIZED if normalized != formatted else NormalizeStatus.UNCHANGED
        )
        logger.debug("Blank lines in %s: %s", ctx.path, ctx.status.normalize.value)
