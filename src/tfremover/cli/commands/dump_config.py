# topmark:header:start
#
#   project      : tfremover
#   file         : dump_config.py
#   file_relpath : src/tfremover/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""tfremover `dump-config` command.

Emits the effective configuration as TOML after applying the bundled
defaults, discovered project config files, explicit ``--config`` files and
CLI overrides. The output is wrapped between ``# === BEGIN ===`` and
``# === END ===`` markers for easy parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tfremover.cli.cmd_common import build_config
from tfremover.cli.options import CONTEXT_SETTINGS, common_config_options
from tfremover.config.io import nest_toml_under_section, to_toml
from tfremover.config.logging import get_logger

if TYPE_CHECKING:
    from tfremover.cli.console import ConsoleLike
    from tfremover.config.logging import TfremoverLogger
    from tfremover.config.model import Config

logger: TfremoverLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged tfremover configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Nest the output under [tool.tfremover] for use in pyproject.toml.",
)
@click.option(
    "--include",
    "include_patterns",
    multiple=True,
    metavar="PATTERN",
    help="Extra include pattern (captured in the dump).",
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    metavar="PATTERN",
    help="Extra exclude pattern (captured in the dump).",
)
@common_config_options
def dump_config_command(
    *,
    for_pyproject: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        for_pyproject (bool): Nest the document under ``[tool.tfremover]``.
        include_patterns (tuple[str, ...]): Additional include patterns.
        exclude_patterns (tuple[str, ...]): Additional exclude patterns.
        config_paths (tuple[str, ...]): Additional TOML config files.
        no_config (bool): Skip discovery of project config files.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_config(
        anchor=None,
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            "include_patterns": include_patterns,
            "exclude_patterns": exclude_patterns,
        },
    )
    logger.trace("Config after merging CLI and discovered config: %s", config)

    document: str = to_toml(config.to_toml_dict())
    if for_pyproject:
        document = nest_toml_under_section(document, "tool.tfremover")

    console.print(console.styled("# === BEGIN ===", fg="cyan"))
    console.print(document.rstrip("\n"))
    console.print(console.styled("# === END ===", fg="cyan"))
