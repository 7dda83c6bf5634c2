# topmark:header:start
#
#   project      : tfremover
#   file         : main.py
#   file_relpath : src/tfremover/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Click entry point for tfremover.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` so that the subcommands share one console and one logging setup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tfremover.cli.commands.dump_config import dump_config_command
from tfremover.cli.commands.remove import remove_command
from tfremover.cli.commands.version import version_command
from tfremover.cli.console import ClickConsole
from tfremover.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tfremover.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from tfremover.cli.console import ConsoleLike
    from tfremover.config.logging import TfremoverLogger

logger: TfremoverLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    # Internal logging via env:
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env, use_color=enable_color)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Remove Terraform 'removed' blocks from .tf files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the tfremover CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tfremover remove [PATHS...]' to remove blocks.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(remove_command)

cli.add_command(version_command)

cli.add_command(dump_config_command)

if __name__ == "__main__":
    cli()
