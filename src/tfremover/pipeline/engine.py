# topmark:header:start
#
#   project      : tfremover
#   file         : engine.py
#   file_relpath : src/tfremover/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Run a pipeline over a batch of files (engine layer).

Shared by the public API and the CLI. This module never prints and imports
nothing from ``tfremover.cli``; presentation is the caller's concern.

Files are processed sequentially, each to completion before the next. A failure
on one file is recorded and the batch continues; run statistics are updated
only for files processed without error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tfremover.config.logging import get_logger
from tfremover.core.errors import ParseError, ProcessingError
from tfremover.core.exit_codes import ExitCode
from tfremover.pipeline import runner
from tfremover.pipeline.context import ProcessingContext

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from tfremover.config.logging import TfremoverLogger
    from tfremover.config.model import Config
    from tfremover.core.stats import RunStats
    from tfremover.pipeline.protocols import Step

logger: TfremoverLogger = get_logger(__name__)


def exit_code_for_error(error: ProcessingError) -> ExitCode:
    """Map a per-file failure onto a process exit code.

    Exit code mapping:
        FILE_NOT_FOUND: the file is missing or is a directory.
        PERMISSION_DENIED: insufficient permissions to read or write.
        ENCODING_ERROR: the file is not valid HCL.
        IO_ERROR: any other read or write failure.
    """
    if isinstance(error, ParseError):
        return ExitCode.ENCODING_ERROR
    cause: BaseException | None = error.__cause__
    if isinstance(cause, (FileNotFoundError, IsADirectoryError)):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(cause, PermissionError):
        return ExitCode.PERMISSION_DENIED
    return ExitCode.IO_ERROR


def record_stats(ctx: ProcessingContext, stats: RunStats) -> None:
    """Report one successfully processed file into ``stats``."""
    stats.record_processed()
    if ctx.would_change:
        stats.record_modified(ctx.blocks_removed)


@dataclass
class BatchResult:
    """Outcome of a batch run.

    Attributes:
        results (list[ProcessingContext]): One context per file, in input order.
        errors (list[ProcessingError]): Per-file failures, in input order.
        exit_code (ExitCode | None): Exit code of the first failure, if any.
    """

    results: list[ProcessingContext] = field(default_factory=lambda: [])
    errors: list[ProcessingError] = field(default_factory=lambda: [])
    exit_code: ExitCode | None = None

    @property
    def would_change(self) -> bool:
        """True if at least one file changed (or would change)."""
        return any(ctx.would_change for ctx in self.results)


def run_steps_for_files(
    *,
    file_list: Iterable[Path],
    pipeline: Sequence[Step],
    config: Config,
    stats: RunStats,
    prune: bool = True,
) -> BatchResult:
    """Run ``pipeline`` for each file and collect the outcomes.

    Args:
        file_list (Iterable[Path]): Files to process, in order.
        pipeline (Sequence[Step]): Pipeline steps to execute.
        config (Config): Effective configuration.
        stats (RunStats): Accumulator updated once per successfully processed file.
        prune (bool): Release per-file buffers after each run. Default: `True`.

    Returns:
        BatchResult: Contexts, failures and the first failure's exit code.

    Notes:
        Only the *first* error code is kept; later files still run.
    """
    batch: BatchResult = BatchResult()
    for path in file_list:
        ctx: ProcessingContext = ProcessingContext.bootstrap(path=path, config=config)
        try:
            ctx = runner.run(ctx, pipeline, prune=prune)
        except Exception as e:  # pragma: no cover
            logger.exception("Unexpected error processing %s: %s", path, e)
            batch.exit_code = batch.exit_code or ExitCode.PIPELINE_ERROR
            error: ProcessingError = ProcessingError(path, f"unexpected error: {e}")
            error.__cause__ = e
            ctx.error = error
            batch.results.append(ctx)
            batch.errors.append(error)
            continue
        batch.results.append(ctx)
        if ctx.error is not None:
            batch.errors.append(ctx.error)
            batch.exit_code = batch.exit_code or exit_code_for_error(ctx.error)
            continue
        record_stats(ctx, stats)
    logger.info(
        "Processed %d file(s): %d error(s), %d modified",
        len(batch.results),
        len(batch.errors),
        stats.files_modified,
    )
    return batch
