# topmark:header:start
#
#   project      : tfremover
#   file         : test_resolve_files.py
#   file_relpath : tests/resolver/test_resolve_files.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""File discovery: suffix filter, include/exclude patterns and explicit files."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.conftest import make_config
from tfremover.file_resolver import resolve_file_list


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    for rel in (
        "main.tf",
        "modules/net/vpc.tf",
        "modules/net/README.md",
        ".terraform/modules/cache/main.tf",
        "envs/prod.tfvars",
        "envs/prod/backend.tf",
    ):
        path: Path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("a = 1\n", encoding="utf-8")
    return tmp_path


def _rel(root: Path, files: list[Path]) -> list[str]:
    return [p.relative_to(root).as_posix() for p in files]


def test_default_discovery_skips_provider_cache(tree: Path) -> None:
    files: list[Path] = resolve_file_list([tree], make_config())
    assert _rel(tree, files) == ["envs/prod/backend.tf", "main.tf", "modules/net/vpc.tf"]


def test_include_patterns(tree: Path) -> None:
    files: list[Path] = resolve_file_list([tree], make_config(include_patterns=["modules/"]))
    assert _rel(tree, files) == ["modules/net/vpc.tf"]


def test_exclude_patterns(tree: Path) -> None:
    config = make_config(exclude_patterns=[".terraform/", "envs/"])
    assert _rel(tree, resolve_file_list([tree], config)) == ["main.tf", "modules/net/vpc.tf"]


def test_custom_suffixes(tree: Path) -> None:
    files: list[Path] = resolve_file_list([tree / "envs"], make_config(suffixes=[".tfvars"]))
    assert _rel(tree, files) == ["envs/prod.tfvars"]


def test_explicit_files_are_taken_as_is(tree: Path) -> None:
    cached: Path = tree / ".terraform" / "modules" / "cache" / "main.tf"
    files: list[Path] = resolve_file_list([cached, tree / "main.tf", tree], make_config())
    assert cached in files
    assert len(files) == len(set(files))
    assert files == sorted(files)


def test_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="directory does not exist"):
        resolve_file_list([tmp_path / "nope"], make_config())


def test_multi_part_suffixes(tree: Path) -> None:
    (tree / "envs" / "prod.auto.tfvars").write_text("a = 1\n", encoding="utf-8")
    (tree / "envs" / "prod.tfvars.bak").write_text("a = 1\n", encoding="utf-8")
    files: list[Path] = resolve_file_list([tree / "envs"], make_config(suffixes=[".auto.tfvars"]))
    assert _rel(tree, files) == ["envs/prod.auto.tfvars"]
