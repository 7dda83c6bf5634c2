# topmark:header:start
#
#   project      : tfremover
#   file         : __init__.py
#   file_relpath : src/tfremover/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Configuration for tfremover.

Configuration is assembled in layers (lowest to highest precedence):

1. the bundled ``tfremover-default.toml``,
2. project files discovered upward from the working directory
   (``pyproject.toml`` ``[tool.tfremover]`` then ``tfremover.toml``),
3. files passed explicitly with ``--config``,
4. command line overrides.

`MutableConfig` is the builder used while merging layers; `Config` is the
frozen snapshot consumed by the pipeline.
"""

from __future__ import annotations

from tfremover.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
