# topmark:header:start
#
#   project      : tfremover
#   file         : exit_codes.py
#   file_relpath : src/tfremover/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Exit codes for tfremover.

Values follow the BSD ``sysexits`` convention where practical. The one
divergence is ``WOULD_CHANGE = 2``, returned by ``remove --check`` when a file
would be modified. Click's own usage errors also exit with 2; tests assert
``result.exception is None`` to tell the two apart.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized process exit codes.

    Attributes:
        SUCCESS: All files processed (changes written or previewed).
        FAILURE: Generic failure.
        WOULD_CHANGE: ``--check``: at least one file would be modified.
        USAGE_ERROR: Invalid invocation (``EX_USAGE``).
        ENCODING_ERROR: Input data not valid HCL (``EX_DATAERR``).
        FILE_NOT_FOUND: Input path does not exist (``EX_NOINPUT``).
        PIPELINE_ERROR: Internal failure (``EX_SOFTWARE``).
        IO_ERROR: Read or write failure (``EX_IOERR``).
        PERMISSION_DENIED: Insufficient permissions (``EX_NOPERM``).
        CONFIG_ERROR: Invalid configuration (``EX_CONFIG``).
        UNEXPECTED_ERROR: Last-resort bucket for unhandled errors.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
