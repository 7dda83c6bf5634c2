# topmark:header:start
#
#   project      : tfremover
#   file         : formatter.py
#   file_relpath : src/tfremover/pipeline/steps/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Formatter step: apply canonical HCL layout.

Formatting always runs, including when no block was removed, so that a file
with non-canonical layout is reported (and written) as changed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.core.errors import ParseError
from tfremover.hcl.errors import HclSyntaxError
from tfremover.hcl.formatter import format_bytes
from tfremover.pipeline.status import Axis, FormatStatus, SpliceStatus
from tfremover.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext

logger: TfremoverLogger = get_logger(__name__)


class FormatterStep(BaseStep):
    """Format ``ctx.views.spliced`` into ``ctx.views.formatted``.

    Axes written:
      - format
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.FORMAT,
            axes_written=(Axis.FORMAT,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.status.splice in (SpliceStatus.SPLICED, SpliceStatus.NOT_NEEDED)

    def run(self, ctx: ProcessingContext) -> None:
        spliced: bytes = ctx.views.spliced.data or b""
        try:
            formatted: bytes = format_bytes(spliced, filename=str(ctx.path))
        except HclSyntaxError as exc:
            ctx.status.format = FormatStatus.FAILED
            error: ParseError = ParseError(ctx.path, [str(exc.diagnostic)])
            error.__cause__ = exc
            logger.error("Cannot format %s: %s", ctx.path, exc)
            ctx.fail(error, reason="format-failed", at_step=self)
            return
        ctx.views.formatted.data = formatted
        ctx.status.format = (
            FormatStatus.FORMATTED if formatted != spliced else FormatStatus.UNCHANGED
        )
