# topmark:header:start
#
#   project      : tfremover
#   file         : __init__.py
#   file_relpath : src/tfremover/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Per-file removal pipeline.

A file flows through class-based steps that share one `ProcessingContext`:

    reader → locator → splicer → formatter → normalizer → comparer → (patcher) → writer

Each step writes only to its own status axis. Expected per-file failures
(unreadable file, invalid HCL, write failure) halt the flow and are recorded on
the context; the engine turns them into tagged `ProcessingError` values.
"""

from __future__ import annotations
