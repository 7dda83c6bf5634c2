# topmark:header:start
#
#   project      : tfremover
#   file         : test_engine_scenarios.py
#   file_relpath : tests/pipeline/test_engine_scenarios.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Batch scenarios through the engine: statistics, dry-run and failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.conftest import REMOVED_BLOCK, RESOURCE_BLOCK, make_config, mark_integration
from tests.pipeline.conftest import write_tf
from tfremover.core.errors import ParseError, ReadError
from tfremover.core.exit_codes import ExitCode
from tfremover.core.stats import RunStats
from tfremover.pipeline.engine import BatchResult, exit_code_for_error, run_steps_for_files
from tfremover.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from pathlib import Path

THREE_BLOCKS: str = (
    RESOURCE_BLOCK
    + "\n"
    + REMOVED_BLOCK
    + "\nremoved {\n  from = aws_instance.b\n}\n"
    + "\nremoved { from = aws_instance.c }\n"
)


def _project(root: Path) -> list[Path]:
    return [
        write_tf(root, "a_three.tf", THREE_BLOCKS),
        write_tf(root, "b_format_only.tf", "a=1\n"),
        write_tf(root, "c_canonical.tf", RESOURCE_BLOCK),
        write_tf(root, "d_invalid.tf", "this is not valid HCL\n"),
    ]


def _run(files: list[Path], **overrides: object) -> tuple[BatchResult, RunStats]:
    stats: RunStats = RunStats()
    batch: BatchResult = run_steps_for_files(
        file_list=files,
        pipeline=Pipeline.APPLY.steps,
        config=make_config(**overrides),
        stats=stats,
    )
    return batch, stats


@mark_integration
def test_batch_statistics_and_first_error(tmp_path: Path) -> None:
    files: list[Path] = _project(tmp_path)
    batch, stats = _run(files, normalize_whitespace=True)

    assert [ctx.path for ctx in batch.results] == files
    assert (stats.files_processed, stats.files_modified, stats.blocks_removed) == (3, 2, 3)
    assert len(batch.errors) == 1
    assert isinstance(batch.errors[0], ParseError)
    assert batch.exit_code == ExitCode.ENCODING_ERROR
    assert batch.would_change

    assert files[0].read_bytes() == RESOURCE_BLOCK.encode()
    assert files[1].read_bytes() == b"a = 1\n"
    assert files[3].read_bytes() == b"this is not valid HCL\n"


@mark_integration
def test_dry_run_reports_the_same_statistics_without_writing(tmp_path: Path) -> None:
    files: list[Path] = _project(tmp_path)
    before: dict[Path, bytes] = {p: p.read_bytes() for p in files}

    _, dry = _run(files, normalize_whitespace=True, dry_run=True)
    assert {p: p.read_bytes() for p in files} == before

    _, real = _run(files, normalize_whitespace=True)
    assert (dry.files_processed, dry.files_modified, dry.blocks_removed) == (
        real.files_processed,
        real.files_modified,
        real.blocks_removed,
    )


@mark_integration
def test_second_run_changes_nothing(tmp_path: Path) -> None:
    files: list[Path] = _project(tmp_path)[:3]
    _run(files, normalize_whitespace=True)
    batch, stats = _run(files, normalize_whitespace=True)
    assert not batch.would_change
    assert batch.exit_code is None
    assert (stats.files_processed, stats.files_modified, stats.blocks_removed) == (3, 0, 0)


@mark_integration
def test_first_error_code_wins(tmp_path: Path) -> None:
    invalid: Path = write_tf(tmp_path, "invalid.tf", "= 1\n")
    batch, stats = _run([tmp_path / "missing.tf", invalid])
    assert batch.exit_code == ExitCode.FILE_NOT_FOUND
    assert [type(e) for e in batch.errors] == [ReadError, ParseError]
    assert stats.files_processed == 0


@mark_integration
def test_trailing_blank_lines_are_trimmed_after_removal(tmp_path: Path) -> None:
    path: Path = write_tf(tmp_path, "main.tf", RESOURCE_BLOCK + "\n\n" + REMOVED_BLOCK + "\n\n")
    _run([path], normalize_whitespace=True)
    assert path.read_bytes() == RESOURCE_BLOCK.encode()


@mark_integration
def test_crlf_file_keeps_crlf(tmp_path: Path) -> None:
    content: bytes = (RESOURCE_BLOCK + "\n" + REMOVED_BLOCK).replace("\n", "\r\n").encode()
    path: Path = write_tf(tmp_path, "main.tf", content)
    _run([path], normalize_whitespace=True)
    assert path.read_bytes() == RESOURCE_BLOCK.replace("\n", "\r\n").encode()


def test_exit_code_mapping(tmp_path: Path) -> None:
    missing: ReadError = ReadError(tmp_path / "x.tf", "No such file or directory")
    missing.__cause__ = FileNotFoundError()
    denied: ReadError = ReadError(tmp_path / "x.tf", "Permission denied")
    denied.__cause__ = PermissionError()
    other: ReadError = ReadError(tmp_path / "x.tf", "I/O error")
    other.__cause__ = OSError()
    assert exit_code_for_error(missing) == ExitCode.FILE_NOT_FOUND
    assert exit_code_for_error(denied) == ExitCode.PERMISSION_DENIED
    assert exit_code_for_error(other) == ExitCode.IO_ERROR
    assert exit_code_for_error(ParseError(tmp_path / "x.tf", ["bad"])) == ExitCode.ENCODING_ERROR
