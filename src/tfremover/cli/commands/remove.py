# topmark:header:start
#
#   project      : tfremover
#   file         : remove.py
#   file_relpath : src/tfremover/cli/commands/remove.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""tfremover `remove` command.

Removes every top-level block of the configured type (``removed`` by default)
from the Terraform files under PATHS, re-formats the result canonically and
optionally collapses the blank lines left behind.

Input modes:
  * PATHS: directories are scanned recursively for ``.tf`` files; files are
    processed as given. Defaults to the current directory.

Examples:
  tfremover remove
  tfremover remove --dry-run --diff modules/
  tfremover remove --normalize-whitespace --check .
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from tfremover.cli.cmd_common import build_config, discovery_anchor, get_effective_verbosity
from tfremover.cli.errors import TfremoverFileNotFoundError
from tfremover.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_config_options,
    common_format_options,
    common_verbose_options,
)
from tfremover.core.exit_codes import ExitCode
from tfremover.core.stats import RunStats, format_duration
from tfremover.file_resolver import resolve_file_list
from tfremover.pipeline.engine import run_steps_for_files
from tfremover.pipeline.pipelines import Pipeline
from tfremover.utils.diff import render_patch

if TYPE_CHECKING:
    from tfremover.cli.console import ConsoleLike
    from tfremover.config.model import Config
    from tfremover.pipeline.context import ProcessingContext
    from tfremover.pipeline.engine import BatchResult


def _announce_roots(console: ConsoleLike, paths: tuple[str, ...]) -> None:
    for raw in paths:
        if Path(raw).is_dir():
            console.print(f"Scanning directory: {raw}")


def _report_files(
    console: ConsoleLike,
    batch: BatchResult,
    *,
    vlevel: int,
    show_diff: bool,
) -> None:
    """Print per-file progress, errors and diffs in input order."""
    for ctx in batch.results:
        if vlevel > 0:
            console.print(f"Processing: {ctx.path}")
        if vlevel > 1:
            console.print(f"  {ctx.format_summary()}")
        if vlevel > 2:
            for diag in ctx.diagnostics:
                console.print(f"    {diag.render()}")
        if ctx.error is not None:
            console.error(f"Error processing {ctx.path}: {ctx.error}")
            continue
        if show_diff and ctx.views.diff.text:
            console.print(render_patch(ctx.views.diff.text), nl=False)


def _render_statistics(console: ConsoleLike, stats: RunStats, config: Config) -> None:
    console.print()
    console.print("Statistics:")
    if stats.dry_run:
        console.print(console.styled("DRY RUN MODE: No files were modified", fg="yellow"))
    console.print(f"Files processed: {stats.files_processed}")
    console.print(f"Files modified: {stats.files_modified}")
    console.print(f"{config.block_type.capitalize()} blocks removed: {stats.blocks_removed}")
    console.print(f"Processing time: {format_duration(stats.duration)}")


def _emit_machine_output(
    console: ConsoleLike,
    fmt: OutputFormat,
    batch: BatchResult,
    stats: RunStats,
) -> None:
    results: list[dict[str, Any]] = []
    for ctx in batch.results:
        item: dict[str, Any] = ctx.to_dict()
        if ctx.views.diff.text is not None:
            item["diff"] = ctx.views.diff.text
        results.append(item)
    if fmt == OutputFormat.NDJSON:
        for item in results:
            console.print(json.dumps(item))
        console.print(json.dumps({"stats": stats.to_dict()}))
        return
    console.print(json.dumps({"results": results, "stats": stats.to_dict()}, indent=2))


@click.command(
    name="remove",
    context_settings=CONTEXT_SETTINGS,
    help=__doc__,
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    default=None,
    help="Report what would change without writing any file.",
)
@click.option(
    "--normalize-whitespace",
    "normalize_whitespace",
    is_flag=True,
    default=None,
    help="Collapse consecutive blank lines left behind by removed blocks.",
)
@click.option(
    "--block-type",
    "block_type",
    default=None,
    metavar="TYPE",
    help="Block type to remove (default: removed).",
)
@click.option("--diff", "show_diff", is_flag=True, help="Show a unified diff of each change.")
@click.option(
    "--check",
    "check",
    is_flag=True,
    help="Do not write; exit with status 2 if any file would change (implies --dry-run).",
)
@click.option(
    "--include",
    "include_patterns",
    multiple=True,
    metavar="PATTERN",
    help="Only process files matching this gitignore-style pattern (may be repeated).",
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    metavar="PATTERN",
    help="Skip files matching this gitignore-style pattern (may be repeated).",
)
@common_config_options
@common_format_options
@common_verbose_options
def remove_command(
    *,
    paths: tuple[str, ...],
    dry_run: bool | None,
    normalize_whitespace: bool | None,
    block_type: str | None,
    show_diff: bool,
    check: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    output_format: str,
    verbose: int,
    quiet: int,
) -> None:
    """Remove target blocks from Terraform files.

    Args:
        paths (tuple[str, ...]): Directories and/or files to process (default: ``.``).
        dry_run (bool | None): Do not write; ``None`` keeps the configured value.
        normalize_whitespace (bool | None): Collapse blank lines after removal.
        block_type (str | None): Override the block type to remove.
        show_diff (bool): Print a unified diff per changed file.
        check (bool): Exit with ``2`` if any file would change; implies dry-run.
        include_patterns (tuple[str, ...]): Extra include patterns.
        exclude_patterns (tuple[str, ...]): Extra exclude patterns.
        config_paths (tuple[str, ...]): Extra config files.
        no_config (bool): Ignore discovered project config files.
        output_format (str): ``default``, ``json`` or ``ndjson``.
        verbose (int): Command-level ``-v`` count.
        quiet (int): Command-level ``-q`` count.

    Raises:
        TfremoverFileNotFoundError: A path does not exist.

    Exit Status:
        0: Success (including dry-run).
        2: ``--check`` and at least one file would change.
        65/66/74/77: The first per-file failure (parse, not found, I/O, permission).
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx, verbose, quiet)
    fmt: OutputFormat = OutputFormat(output_format)

    paths = paths or (".",)
    config: Config = build_config(
        anchor=discovery_anchor(paths),
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            "dry_run": True if check else dry_run,
            "normalize_whitespace": normalize_whitespace,
            "block_type": block_type,
            "include_patterns": include_patterns,
            "exclude_patterns": exclude_patterns,
        },
    )

    human: bool = fmt == OutputFormat.DEFAULT
    if human and vlevel >= 0:
        _announce_roots(console, paths)
    try:
        files: list[Path] = resolve_file_list([Path(p) for p in paths], config)
    except FileNotFoundError as e:
        raise TfremoverFileNotFoundError(str(e)) from e
    if human and vlevel >= 0:
        console.print(f"Found {len(files)} Terraform files")
        if not files:
            console.warn(f"No files ending in {', '.join(config.suffixes)} under the given paths.")

    stats: RunStats = RunStats(
        dry_run=config.dry_run,
        normalize_whitespace=config.normalize_whitespace,
    )
    pipeline: Pipeline = Pipeline.APPLY_PATCH if show_diff else Pipeline.APPLY
    batch: BatchResult = run_steps_for_files(
        file_list=files,
        pipeline=pipeline.steps,
        config=config,
        stats=stats,
        prune=not show_diff,
    )
    stats.finish()

    if human:
        _report_files(console, batch, vlevel=vlevel, show_diff=show_diff)
        if vlevel >= 0:
            _render_statistics(console, stats, config)
    else:
        _emit_machine_output(console, fmt, batch, stats)

    if batch.exit_code is not None:
        ctx.exit(int(batch.exit_code))
    if check and batch.would_change:
        ctx.exit(int(ExitCode.WOULD_CHANGE))
