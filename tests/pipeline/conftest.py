# topmark:header:start
#
#   project      : tfremover
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Shared helpers for pipeline tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tests.conftest import make_config
from tfremover.pipeline import runner
from tfremover.pipeline.context import ProcessingContext
from tfremover.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from pathlib import Path


def write_tf(directory: Path, name: str, content: bytes | str) -> Path:
    """Write ``content`` to ``directory/name`` and return the path."""
    path: Path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode() if isinstance(content, str) else content)
    return path


def run_pipeline(
    path: Path,
    pipeline: Pipeline = Pipeline.APPLY,
    **overrides: Any,
) -> ProcessingContext:
    """Run ``pipeline`` for ``path`` with a config built from ``overrides``; keep the views."""
    ctx: ProcessingContext = ProcessingContext.bootstrap(path=path, config=make_config(**overrides))
    return runner.run(ctx, pipeline.steps, prune=False)
