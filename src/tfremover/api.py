# topmark:header:start
#
#   project      : tfremover
#   file         : api.py
#   file_relpath : src/tfremover/api.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Public Python API.

Example:
    ```python
    from pathlib import Path

    from tfremover.api import process_file
    from tfremover.core.stats import RunStats

    stats = RunStats()
    ctx = process_file(Path("main.tf"), stats)
    print(stats.files_modified, stats.blocks_removed)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tfremover.config.model import Config
from tfremover.core.edit import EditResult, remove_blocks
from tfremover.pipeline import runner
from tfremover.pipeline.context import ProcessingContext
from tfremover.pipeline.engine import BatchResult, record_stats, run_steps_for_files
from tfremover.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tfremover.core.stats import RunStats

__all__: list[str] = [
    "BatchResult",
    "EditResult",
    "process_file",
    "process_files",
    "remove_blocks",
]


def process_file(
    path: Path,
    stats: RunStats,
    config: Config | None = None,
    *,
    pipeline: Pipeline = Pipeline.APPLY,
) -> ProcessingContext:
    """Process one file and report into ``stats``.

    The file is written only when its content changes and ``config.dry_run``
    is false. The returned context keeps its buffers for inspection.

    Args:
        path (Path): File to process.
        stats (RunStats): Accumulator; updated only on success.
        config (Config | None): Effective configuration (bundled defaults when ``None``).
        pipeline (Pipeline): Pipeline variant to run.

    Returns:
        ProcessingContext: The processed context.

    Raises:
        ReadError: The file is missing or unreadable.
        ParseError: The file is not valid HCL; it is left untouched.
        WriteError: The new content could not be written; the file is unchanged.
    """
    ctx: ProcessingContext = ProcessingContext.bootstrap(
        path=path, config=config or Config.default()
    )
    ctx = runner.run(ctx, pipeline.steps, prune=False)
    if ctx.error is not None:
        raise ctx.error
    record_stats(ctx, stats)
    return ctx


def process_files(
    paths: Iterable[Path],
    stats: RunStats,
    config: Config | None = None,
    *,
    pipeline: Pipeline = Pipeline.APPLY,
) -> BatchResult:
    """Process files sequentially; a failing file never aborts the batch.

    Returns:
        BatchResult: Per-file contexts and the collected failures.
    """
    return run_steps_for_files(
        file_list=paths,
        pipeline=pipeline.steps,
        config=config or Config.default(),
        stats=stats,
    )
