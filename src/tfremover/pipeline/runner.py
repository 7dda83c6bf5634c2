# topmark:header:start
#
#   project      : tfremover
#   file         : runner.py
#   file_relpath : src/tfremover/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Run a pipeline for a single file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext
    from tfremover.pipeline.protocols import Step

logger: TfremoverLogger = get_logger(__name__)


def trim_views(ctx: ProcessingContext) -> None:
    """Release the byte buffers once the write decision has been made."""
    ctx.views.release_all()


def run(
    ctx: ProcessingContext,
    steps: Sequence[Step],
    *,
    prune: bool = True,
) -> ProcessingContext:
    """Execute ``steps`` sequentially against ``ctx``.

    Args:
        ctx (ProcessingContext): Processing context for one file.
        steps (Sequence[Step]): Ordered pipeline steps.
        prune (bool): Release the views at the end of the run (default: `True`).

    Returns:
        ProcessingContext: The final processing context.
    """
    logger.debug("Running %d step(s) for %s", len(steps), ctx.path)
    for step in steps:
        ctx = step(ctx)
    if prune:
        trim_views(ctx)
    return ctx
