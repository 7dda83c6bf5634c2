# topmark:header:start
#
#   project      : tfremover
#   file         : patcher.py
#   file_relpath : src/tfremover/pipeline/steps/patcher.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Patcher step: unified diff of the original versus the final content.

The step performs no I/O; the CLI decides whether and how to display the diff.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.pipeline.status import Axis, ComparisonStatus, PatchStatus
from tfremover.pipeline.steps.base import BaseStep
from tfremover.utils.diff import render_patch

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext

logger: TfremoverLogger = get_logger(__name__)


def _lines(data: bytes | None) -> list[str]:
    return (data or b"").decode("utf-8", errors="replace").splitlines(keepends=True)


class PatcherStep(BaseStep):
    """Attach ``ctx.views.diff`` for changed files.

    Axes written:
      - patch
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.PATCH,
            axes_written=(Axis.PATCH,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.status.comparison != ComparisonStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        if ctx.status.comparison == ComparisonStatus.UNCHANGED:
            ctx.status.patch = PatchStatus.SKIPPED
            return
        patch_lines: list[str] = list(
            difflib.unified_diff(
                _lines(ctx.views.source.data),
                _lines(ctx.views.final.data),
                fromfile=f"{ctx.path} (current)",
                tofile=f"{ctx.path} (updated)",
                n=3,
                lineterm="\n",
            )
        )
        if not patch_lines:
            # Only invisible bytes changed (e.g. a missing final newline was added).
            ctx.status.patch = PatchStatus.SKIPPED
            return
        ctx.views.diff.text = "".join(patch_lines)
        ctx.status.patch = PatchStatus.GENERATED
        logger.trace("Patch (rendered):\n%s", render_patch(patch_lines))
