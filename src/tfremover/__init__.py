# topmark:header:start
#
#   project      : tfremover
#   file         : __init__.py
#   file_relpath : src/tfremover/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""tfremover package.

tfremover edits Terraform configuration files in place: it locates top-level
``removed`` blocks, deletes them byte-exactly (keeping the comments that sit
above them), re-applies canonical HCL formatting and optionally collapses the
blank lines left behind. It exposes both a CLI and a small typed API.
"""

from __future__ import annotations
