# topmark:header:start
#
#   project      : tfremover
#   file         : file_resolver.py
#   file_relpath : src/tfremover/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Discovery of the files to process.

Semantics of `resolve_file_list`:
  1. **Roots must exist**: a missing path raises `FileNotFoundError`.
  2. **Directories** are walked recursively; only files whose name ends with
     one of ``config.suffixes`` (``.tf``, ``.auto.tfvars``, ...) are candidates.
  3. **Include intersection**: with include patterns, only matching candidates
     are kept.
  4. **Exclude subtraction**: candidates matching an exclude pattern (by
     default ``.terraform/``) are dropped.
  5. **Explicit files** are taken as-is, whatever their suffix.
  6. The result is de-duplicated and sorted.

Patterns use gitignore semantics (`pathspec`) and are matched against paths
relative to the directory being walked.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from tfremover.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from tfremover.config.logging import TfremoverLogger
    from tfremover.config.model import Config

logger: TfremoverLogger = get_logger(__name__)


def _spec(patterns: Iterable[str]) -> PathSpec | None:
    lines: list[str] = [p for p in patterns if p.strip()]
    return PathSpec.from_lines(GitWildMatchPattern, lines) if lines else None


def _walk(root: Path, config: Config) -> list[Path]:
    """Return matching files below ``root``."""
    include: PathSpec | None = _spec(config.include_patterns)
    exclude: PathSpec | None = _spec(config.exclude_patterns)
    found: list[Path] = []
    for path in root.rglob("*"):
        if not path.name.endswith(config.suffixes) or not path.is_file():
            continue
        rel: str = path.relative_to(root).as_posix()
        if include is not None and not include.match_file(rel):
            continue
        if exclude is not None and exclude.match_file(rel):
            logger.trace("Excluded: %s", path)
            continue
        found.append(path)
    return found


def resolve_file_list(paths: Sequence[Path], config: Config) -> list[Path]:
    """Return the sorted list of files to process.

    Args:
        paths (Sequence[Path]): Directories and/or files given by the user.
        config (Config): Supplies suffixes and include/exclude patterns.

    Returns:
        list[Path]: Unique files, sorted.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    selected: set[Path] = set()
    for raw in paths:
        path: Path = Path(raw)
        if path.is_dir():
            found: list[Path] = _walk(path, config)
            logger.debug("Found %d candidate file(s) under %s", len(found), path)
            selected.update(found)
        elif path.is_file():
            selected.add(path)
        else:
            raise FileNotFoundError(f"directory does not exist: {path}")
    files: list[Path] = sorted(selected)
    logger.trace("Files to process: %d -- %s", len(files), files)
    return files
