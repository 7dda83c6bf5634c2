# topmark:header:start
#
#   project      : tfremover
#   file         : pipelines.py
#   file_relpath : src/tfremover/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Named pipeline variants (immutable step sequences).

Overview
--------
- ``SCAN``: read → locate
- ``TRANSFORM``: SCAN + splice → format → normalize → compare
- ``APPLY``: TRANSFORM + write
- ``APPLY_PATCH``: TRANSFORM + patch → write

The writer honors ``config.dry_run`` by selecting a null sink, so the same
pipeline serves both modes.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from tfremover.pipeline.protocols import Step
from tfremover.pipeline.steps import (
    comparer,
    formatter,
    locator,
    normalizer,
    patcher,
    reader,
    splicer,
    writer,
)

SCAN_PIPELINE: Final[tuple[Step, ...]] = (
    reader.ReaderStep(),
    locator.LocatorStep(),
)

TRANSFORM_PIPELINE: Final[tuple[Step, ...]] = (
    *SCAN_PIPELINE,
    splicer.SplicerStep(),
    formatter.FormatterStep(),
    normalizer.NormalizerStep(),
    comparer.ComparerStep(),
)

APPLY_PIPELINE: Final[tuple[Step, ...]] = (
    *TRANSFORM_PIPELINE,
    writer.WriterStep(),
)

APPLY_PATCH_PIPELINE: Final[tuple[Step, ...]] = (
    *TRANSFORM_PIPELINE,
    patcher.PatcherStep(),
    writer.WriterStep(),
)


class Pipeline(Enum):
    """Registry of the named pipelines."""

    SCAN = SCAN_PIPELINE
    TRANSFORM = TRANSFORM_PIPELINE
    APPLY = APPLY_PIPELINE
    APPLY_PATCH = APPLY_PATCH_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the step sequence of this pipeline."""
        return self.value
