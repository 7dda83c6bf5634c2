# topmark:header:start
#
#   project      : tfremover
#   file         : __init__.py
#   file_relpath : src/tfremover/hcl/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Minimal HCL native-syntax toolkit used by the removal pipeline.

Only what the pipeline consumes is implemented:

- `tfremover.hcl.lexer.tokenize`: byte-offset tokenizer.
- `tfremover.hcl.parser.parse`: structural parser exposing top-level blocks
  together with their byte extents.
- `tfremover.hcl.formatter.format_bytes`: canonical, idempotent layout in the
  style of `terraform fmt`.

Expressions are validated for bracket structure only; they are never evaluated.
"""

from __future__ import annotations

from tfremover.hcl.errors import HclDiagnostic, HclSyntaxError
from tfremover.hcl.formatter import format_bytes
from tfremover.hcl.parser import Attribute, Block, Body, HclFile, parse

__all__ = [
    "Attribute",
    "Block",
    "Body",
    "HclDiagnostic",
    "HclFile",
    "HclSyntaxError",
    "format_bytes",
    "parse",
]
