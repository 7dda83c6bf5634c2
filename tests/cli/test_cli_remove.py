# topmark:header:start
#
#   project      : tfremover
#   file         : test_cli_remove.py
#   file_relpath : tests/cli/test_cli_remove.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""CLI: the `remove` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import REMOVED_BLOCK, RESOURCE_BLOCK, mark_cli
from tfremover.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

SOURCE: str = RESOURCE_BLOCK + "\n" + REMOVED_BLOCK


def _seed(project: Path) -> Path:
    main: Path = project / "main.tf"
    main.write_text(SOURCE, encoding="utf-8")
    (project / "outputs.tf").write_text('output "id" {\n  value = 1\n}\n', encoding="utf-8")
    return main


@mark_cli
def test_remove_writes_and_prints_statistics(project: Path) -> None:
    main: Path = _seed(project)
    result: Result = run_cli_in(project, ["--no-color", "remove", "--normalize-whitespace"])
    assert_SUCCESS(result)
    assert "Scanning directory: ." in result.output
    assert "Found 2 Terraform files" in result.output
    assert "Statistics:" in result.output
    assert "DRY RUN MODE" not in result.output
    assert "Files processed: 2" in result.output
    assert "Files modified: 1" in result.output
    assert "Removed blocks removed: 1" in result.output
    assert "Processing time: " in result.output
    assert main.read_text(encoding="utf-8") == RESOURCE_BLOCK


@mark_cli
def test_dry_run_leaves_files_untouched(project: Path) -> None:
    main: Path = _seed(project)
    result: Result = run_cli_in(project, ["--no-color", "remove", "--dry-run", "."])
    assert_SUCCESS(result)
    assert "DRY RUN MODE: No files were modified" in result.output
    assert "Files modified: 1" in result.output
    assert main.read_text(encoding="utf-8") == SOURCE


@mark_cli
def test_check_exits_2_when_a_file_would_change(project: Path) -> None:
    main: Path = _seed(project)
    result: Result = run_cli_in(project, ["--no-color", "remove", "--check"])
    assert_exit(result, ExitCode.WOULD_CHANGE)
    assert main.read_text(encoding="utf-8") == SOURCE

    run_cli_in(project, ["remove"])
    assert_SUCCESS(run_cli_in(project, ["--no-color", "remove", "--check"]))


@mark_cli
def test_verbose_lists_files_and_diff_shows_changes(project: Path) -> None:
    _seed(project)
    result: Result = run_cli_in(project, ["--no-color", "remove", "-v", "--dry-run", "--diff"])
    assert_SUCCESS(result)
    assert "Processing: main.tf" in result.output
    assert "Processing: outputs.tf" in result.output
    assert "-removed {" in result.output


@mark_cli
def test_quiet_suppresses_statistics(project: Path) -> None:
    _seed(project)
    result: Result = run_cli_in(project, ["--no-color", "-q", "remove", "--dry-run"])
    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_invalid_file_is_reported_and_sets_exit_code(project: Path) -> None:
    main: Path = _seed(project)
    bad: Path = project / "bad.tf"
    bad.write_text("this is not valid HCL\n", encoding="utf-8")
    result: Result = run_cli_in(project, ["--no-color", "remove"])
    assert_exit(result, ExitCode.ENCODING_ERROR)
    assert "Error processing bad.tf: failed to parse HCL" in result.output
    assert "Files processed: 2" in result.output
    assert main.read_text(encoding="utf-8") == RESOURCE_BLOCK + "\n"
    assert bad.read_text(encoding="utf-8") == "this is not valid HCL\n"


@mark_cli
def test_empty_directory_warns(project: Path) -> None:
    result: Result = run_cli_in(project, ["--no-color", "remove"])
    assert_SUCCESS(result)
    assert "Found 0 Terraform files" in result.output
    assert "No files ending in .tf under the given paths." in result.output
    assert "Files processed: 0" in result.output


@mark_cli
def test_missing_directory(project: Path) -> None:
    result: Result = run_cli_in(project, ["--no-color", "remove", "does-not-exist"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)
    assert "directory does not exist" in result.output


@mark_cli
def test_block_type_and_exclude_options(project: Path) -> None:
    (project / "moved.tf").write_text("moved {\n  from = a.b\n  to   = a.c\n}\n", encoding="utf-8")
    vendor: Path = project / "vendor" / "x.tf"
    vendor.parent.mkdir()
    vendor.write_text("moved {\n  from = a.b\n  to   = a.c\n}\n", encoding="utf-8")
    result: Result = run_cli_in(
        project, ["--no-color", "remove", "--block-type", "moved", "--exclude", "vendor/"]
    )
    assert_SUCCESS(result)
    assert "Moved blocks removed: 1" in result.output
    assert (project / "moved.tf").read_text(encoding="utf-8") == ""
    assert vendor.read_text(encoding="utf-8").startswith("moved {")


@mark_cli
def test_invalid_block_type_is_a_config_error(project: Path) -> None:
    result: Result = run_cli_in(project, ["--no-color", "remove", "--block-type", "not valid"])
    assert_exit(result, ExitCode.CONFIG_ERROR)


@mark_cli
def test_json_output(project: Path) -> None:
    _seed(project)
    result: Result = run_cli_in(project, ["remove", "--dry-run", "--format", "json"])
    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload["stats"]["files_modified"] == 1
    assert payload["stats"]["dry_run"] is True
    by_path: dict[str, Any] = {item["path"]: item for item in payload["results"]}
    assert by_path["main.tf"]["blocks_removed"] == 1
    assert by_path["outputs.tf"]["would_change"] is False


@mark_cli
def test_ndjson_output(project: Path) -> None:
    _seed(project)
    result: Result = run_cli_in(project, ["remove", "--dry-run", "--format", "ndjson"])
    assert_SUCCESS(result)
    records: list[dict[str, Any]] = [json.loads(line) for line in result.output.splitlines()]
    assert len(records) == 3
    assert "stats" in records[-1]


@mark_cli
def test_config_file_enables_normalization(project: Path) -> None:
    main: Path = _seed(project)
    (project / "tfremover.toml").write_text(
        "root = true\n[remove]\nnormalize_whitespace = true\n", encoding="utf-8"
    )
    assert_SUCCESS(run_cli_in(project, ["remove"]))
    assert main.read_text(encoding="utf-8") == RESOURCE_BLOCK


@mark_cli
def test_verbose_and_quiet_are_exclusive(project: Path) -> None:
    result: Result = run_cli_in(project, ["-v", "-q", "remove"])
    assert_exit(result, ExitCode.USAGE_ERROR)
