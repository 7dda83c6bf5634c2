# topmark:header:start
#
#   project      : tfremover
#   file         : __main__.py
#   file_relpath : src/tfremover/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Module entry point for running tfremover via ``python -m tfremover``.

Delegates directly to :func:`tfremover.cli.main.cli`, so the module form and
the ``tfremover`` console script share a single entry point.

Examples:
    Preview what would change under the current directory::

        python -m tfremover remove --dry-run .
"""

from __future__ import annotations

from tfremover.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
