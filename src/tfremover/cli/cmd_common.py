# topmark:header:start
#
#   project      : tfremover
#   file         : cmd_common.py
#   file_relpath : src/tfremover/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Helpers shared by the tfremover commands.

These helpers read the state placed in ``ctx.obj`` by the group and turn
command arguments into a frozen `Config`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from tfremover.cli.errors import TfremoverConfigError
from tfremover.cli.options import resolve_verbosity
from tfremover.config.logging import get_logger
from tfremover.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from tfremover.config.logging import TfremoverLogger
    from tfremover.config.model import Config

logger: TfremoverLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context, verbose: int = 0, quiet: int = 0) -> int:
    """Combine the group-level verbosity with command-level -v / -q counts."""
    base: int = 0
    if isinstance(ctx.obj, dict):
        base = int(ctx.obj.get("verbosity_level", 0))
    return base + resolve_verbosity(verbose, quiet)


def build_config(
    *,
    anchor: Path | None,
    config_paths: Iterable[str],
    no_config: bool,
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Load, merge and freeze the effective configuration.

    Args:
        anchor (Path | None): Directory where project config discovery starts.
        config_paths (Iterable[str]): Explicit ``--config`` files, merged last.
        no_config (bool): Skip discovery of project config files.
        overrides (Mapping[str, Any] | None): CLI overrides (see `MutableConfig.apply_cli_args`).

    Returns:
        Config: The frozen configuration.

    Raises:
        TfremoverConfigError: The merged configuration is invalid.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        anchor=anchor,
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    if overrides:
        draft.apply_cli_args(overrides)
    try:
        config: Config = draft.freeze()
    except ValueError as e:
        raise TfremoverConfigError(str(e)) from e
    logger.debug("Effective config layers: %s", config.config_files)
    return config


def discovery_anchor(paths: Iterable[str]) -> Path | None:
    """Return the directory where config discovery starts: the first path's directory."""
    for raw in paths:
        path: Path = Path(raw)
        if path.is_dir():
            return path
        return path.parent
    return None
