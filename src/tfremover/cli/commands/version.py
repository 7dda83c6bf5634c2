# topmark:header:start
#
#   project      : tfremover
#   file         : version.py
#   file_relpath : src/tfremover/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""tfremover `version` command.

Prints the tfremover version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from tfremover.cli.options import CONTEXT_SETTINGS, OutputFormat, common_format_options
from tfremover.constants import PROGRAM_NAME, TFREMOVER_VERSION

if TYPE_CHECKING:
    from tfremover.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of tfremover.",
    context_settings=CONTEXT_SETTINGS,
)
@common_format_options
def version_command(*, output_format: str) -> None:
    """Show the current version of tfremover.

    Args:
        output_format (str): ``default`` for ``<program> v<version>``, or a machine format.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    match OutputFormat(output_format):
        case OutputFormat.JSON | OutputFormat.NDJSON:
            console.print(json.dumps({"program": PROGRAM_NAME, "version": TFREMOVER_VERSION}))
        case _:
            console.print(f"{PROGRAM_NAME} v{TFREMOVER_VERSION}")
