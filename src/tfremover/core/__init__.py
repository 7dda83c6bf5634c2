# topmark:header:start
#
#   project      : tfremover
#   file         : __init__.py
#   file_relpath : src/tfremover/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Core, I/O-free building blocks of the removal pipeline.

The modules in this package operate on in-memory byte buffers only:

- `tfremover.core.ranges`: locate target blocks and splice them out.
- `tfremover.core.whitespace`: collapse excess blank lines.
- `tfremover.core.edit`: the whole in-memory transformation of one buffer.
- `tfremover.core.stats`: the per-run statistics accumulator.
- `tfremover.core.errors`: tagged per-file failures.
- `tfremover.core.diagnostics`: structured per-file diagnostics.
- `tfremover.core.exit_codes`: process exit codes.
"""

from __future__ import annotations
