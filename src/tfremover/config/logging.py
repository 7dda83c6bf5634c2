# topmark:header:start
#
#   project      : tfremover
#   file         : logging.py
#   file_relpath : src/tfremover/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end
"""Logging setup for tfremover.

Adds a TRACE level below DEBUG (used for byte-level splice and normalization
details), a `TfremoverLogger` class exposing ``logger.trace(...)``, and a
`ChalkFormatter` that colors records by severity. Logging is silent
(CRITICAL) unless ``TFREMOVER_LOG_LEVEL`` selects a level; it always goes to
stderr so that JSON output on stdout stays parseable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from tfremover.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class TfremoverLogger(logging.Logger):
    """Logger with a ``trace`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): Message format string.
            *args (object): Format arguments.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(TfremoverLogger)

# Checked top-down; the first threshold <= record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity.

    Args:
        fmt (str): Record format string.
        use_color (bool): Emit ANSI styles; plain text when ``False``.
    """

    def __init__(self, fmt: str, *, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color: bool = use_color

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        if not self.use_color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}


def parse_log_level(value: str) -> int | None:
    """Return the level for a name (``"trace"``, ``"DEBUG"``) or a number (``"10"``).

    Unknown names yield ``None``.
    """
    v: str = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level selected by ``TFREMOVER_LOG_LEVEL``, or ``None`` if unset or invalid."""
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    return parse_log_level(raw) if raw else None


def setup_logging(level: int | None = None, *, use_color: bool = True) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level (int | None): Log level; when ``None`` the environment decides,
            falling back to CRITICAL.
        use_color (bool): Colorize log records.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)

    handler: logging.Handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(
            LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT,
            use_color=use_color,
        )
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> TfremoverLogger:
    """Return the `TfremoverLogger` named ``name``."""
    return cast("TfremoverLogger", logging.getLogger(name))
