# topmark:header:start
#
#   project      : tfremover
#   file         : base.py
#   file_relpath : src/tfremover/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The engine invokes steps as callables. `BaseStep` implements the lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run → hint

Concrete steps override `may_proceed` (gating), `run` (the work, writing only
to the declared axes) and optionally `hint` (advisory diagnostics). A `run`
that changes the status of an axis missing from `axes_written` raises
`RuntimeError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.pipeline.status import Axis

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger
    from tfremover.pipeline.context import ProcessingContext
    from tfremover.pipeline.status import StatusEnum

logger: TfremoverLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Attributes:
        name (str): Stable step identifier for logs and summaries.
        primary_axis (Axis | None): The axis this step represents.
        axes_written (tuple[Axis, ...]): Status axes this step may write.
    """

    name: str
    primary_axis: Axis | None
    axes_written: tuple[Axis, ...] = ()

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        A halted flow short-circuits every remaining step.

        Args:
            ctx (ProcessingContext): The processing context for the current file.

        Returns:
            ProcessingContext: The same context instance after mutation.
        """
        if ctx.flow.halt:
            logger.trace("%s: skipped, flow halted at %s", self.name, ctx.flow.at_step)
            return ctx
        ctx.steps.append(self)
        if self.may_proceed(ctx):
            logger.debug("%s: running for %s", self.name, ctx.path)
            untouched: dict[Axis, StatusEnum] = {
                axis: ctx.status.get(axis) for axis in Axis if axis not in self.axes_written
            }
            self.run(ctx)
            self.check_axes(ctx, untouched)
            if ctx.flow.halt:
                logger.info("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        elif self.primary_axis is not None:
            logger.debug(
                "%s: may not proceed for %s (%s: %s)",
                self.name,
                ctx.path,
                self.primary_axis.value,
                ctx.status.get(self.primary_axis).value,
            )
        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context."""
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        raise NotImplementedError

    def hint(self, ctx: ProcessingContext) -> None:
        """Attach non-binding diagnostics to ``ctx`` (optional)."""
        return

    def check_axes(self, ctx: ProcessingContext, untouched: dict[Axis, StatusEnum]) -> None:
        """Raise if ``run`` changed an axis that is not in ``axes_written``.

        Args:
            ctx (ProcessingContext): The context after ``run``.
            untouched (dict[Axis, StatusEnum]): Undeclared axes and their statuses
                before ``run``.

        Raises:
            RuntimeError: An undeclared axis changed.
        """
        changed: list[str] = [
            axis.value for axis, status in untouched.items() if ctx.status.get(axis) is not status
        ]
        if changed:
            raise RuntimeError(f"{self.name} wrote undeclared status axes: {', '.join(changed)}")
