# topmark:header:start
#
#   project      : tfremover
#   file         : model.py
#   file_relpath : src/tfremover/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Configuration model: a mutable builder and its frozen snapshot.

`MutableConfig` collects values from defaults, discovered project files,
explicit config files and CLI arguments. Scalar options are tri-state
(``None`` means "not set by this layer") so that a later layer only overrides
what it explicitly sets. `MutableConfig.freeze` resolves unset values and
validates the result into an immutable `Config`.

TOML layout (``tfremover.toml``; in ``pyproject.toml`` the same tables live
under ``[tool.tfremover]``):

```toml
root = true                    # stop upward discovery here

[remove]
block_type = "removed"
normalize_whitespace = false
dry_run = false

[files]
suffixes = [".tf"]
include_patterns = []
exclude_patterns = [".terraform/"]
```
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from tfremover.config.io import (
    TomlTable,
    get_bool_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from tfremover.config.logging import get_logger
from tfremover.constants import (
    DEFAULT_BLOCK_TYPE,
    DEFAULT_FILE_SUFFIX,
    PROJECT_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from tfremover.config.logging import TfremoverLogger

logger: TfremoverLogger = get_logger(__name__)

_BLOCK_TYPE_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_\-]*")


def _read_pyproject_section(data: TomlTable) -> TomlTable:
    return get_table_value(get_table_value(data, "tool"), "tfremover")


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        block_type (str): Top-level block type to remove.
        normalize_whitespace (bool): Collapse blank lines after a removal.
        dry_run (bool): Compute and report changes without writing.
        suffixes (tuple[str, ...]): File suffixes considered during discovery.
        include_patterns (tuple[str, ...]): Gitignore-style include patterns.
        exclude_patterns (tuple[str, ...]): Gitignore-style exclude patterns.
        config_files (tuple[Path | str, ...]): Layers that contributed to this
            configuration, lowest precedence first.
    """

    block_type: str
    normalize_whitespace: bool
    dry_run: bool
    suffixes: tuple[str, ...]
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    config_files: tuple[Path | str, ...] = ()

    @classmethod
    def default(cls) -> Config:
        """Return the bundled default configuration."""
        return MutableConfig.from_defaults().freeze()

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a TOML mapping (``config_files`` excluded)."""
        return {
            "remove": {
                "block_type": self.block_type,
                "normalize_whitespace": self.normalize_whitespace,
                "dry_run": self.dry_run,
            },
            "files": {
                "suffixes": list(self.suffixes),
                "include_patterns": list(self.include_patterns),
                "exclude_patterns": list(self.exclude_patterns),
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            block_type=self.block_type,
            normalize_whitespace=self.normalize_whitespace,
            dry_run=self.dry_run,
            suffixes=list(self.suffixes),
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Configuration builder used while merging layers."""

    block_type: str | None = None
    normalize_whitespace: bool | None = None
    dry_run: bool | None = None
    suffixes: list[str] | None = None
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Resolve unset values and return an immutable `Config`.

        Raises:
            ValueError: If ``block_type`` is not a valid HCL identifier or a
                suffix is empty.
        """
        block_type: str = self.block_type if self.block_type is not None else DEFAULT_BLOCK_TYPE
        if not _BLOCK_TYPE_RE.fullmatch(block_type):
            raise ValueError(f"Invalid block type {block_type!r}: not an HCL identifier")
        suffixes: list[str] = self.suffixes if self.suffixes is not None else [DEFAULT_FILE_SUFFIX]
        if any(not s for s in suffixes):
            raise ValueError("File suffixes must not be empty")
        return Config(
            block_type=block_type,
            normalize_whitespace=bool(self.normalize_whitespace),
            dry_run=bool(self.dry_run),
            suffixes=tuple(dict.fromkeys(suffixes)),
            include_patterns=tuple(dict.fromkeys(self.include_patterns)),
            exclude_patterns=tuple(dict.fromkeys(self.exclude_patterns)),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Load the bundled ``tfremover-default.toml``."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Create a draft from a parsed ``tfremover.toml``-shaped mapping.

        Unknown keys are ignored with a warning.

        Args:
            data (TomlTable): The parsed TOML data.

        Returns:
            MutableConfig: The resulting draft.
        """
        for key in data:
            if key not in ("root", "remove", "files"):
                logger.warning("Ignoring unknown configuration key %r", key)

        remove_tbl: TomlTable = get_table_value(data, "remove")
        files_tbl: TomlTable = get_table_value(data, "files")
        return cls(
            block_type=get_string_value_or_none(remove_tbl, "block_type"),
            normalize_whitespace=get_bool_value_or_none(remove_tbl, "normalize_whitespace"),
            dry_run=get_bool_value_or_none(remove_tbl, "dry_run"),
            suffixes=get_string_list_value(files_tbl, "suffixes"),
            include_patterns=get_string_list_value(files_tbl, "include_patterns") or [],
            exclude_patterns=get_string_list_value(files_tbl, "exclude_patterns") or [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from ``tfremover.toml`` or ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or ``None`` when a ``pyproject.toml``
                has no ``[tool.tfremover]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            data = _read_pyproject_section(data)
            if not data:
                logger.info("[tool.tfremover] section missing in %s", path)
                return None
        draft: MutableConfig = cls.from_toml_dict(data)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are ordered root-most first, nearest last; within one directory
        ``pyproject.toml`` comes before ``tfremover.toml``. A file setting
        ``root = true`` stops the walk after its directory.

        Args:
            start (Path): Directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered config files in merge order.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            stop_here: bool = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, PROJECT_TOML_CONFIG_NAME):
                candidate: Path = cur / name
                if not candidate.is_file():
                    continue
                data: TomlTable = load_toml_dict(candidate)
                if name == PYPROJECT_TOML_NAME:
                    data = _read_pyproject_section(data)
                    if not data:
                        continue
                dir_entries.append(candidate)
                logger.debug("Discovered config file: %s", candidate)
                if get_bool_value_or_none(data, "root"):
                    stop_here = True
            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            if parent == cur:
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Directory where upward discovery starts
                (the working directory when ``None``).
            extra_config_files (Iterable[Path]): Explicit files merged last, in order.
            no_config (bool): Skip discovery of project files.

        Returns:
            MutableConfig: The merged draft.
        """
        draft: MutableConfig = cls.from_defaults()
        if not no_config:
            for path in cls.discover_local_config_files(anchor or Path.cwd()):
                layer: MutableConfig | None = cls.from_toml_file(path)
                if layer is not None:
                    draft = draft.merge_with(layer)
        for extra in extra_config_files:
            extra_layer: MutableConfig | None = cls.from_toml_file(Path(extra))
            if extra_layer is not None:
                draft = draft.merge_with(extra_layer)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Scalars use last-wins for explicitly set values; pattern lists are
        replaced when ``other`` sets a non-empty list.
        """
        return MutableConfig(
            block_type=other.block_type if other.block_type is not None else self.block_type,
            normalize_whitespace=other.normalize_whitespace
            if other.normalize_whitespace is not None
            else self.normalize_whitespace,
            dry_run=other.dry_run if other.dry_run is not None else self.dry_run,
            suffixes=other.suffixes if other.suffixes is not None else self.suffixes,
            include_patterns=other.include_patterns or self.include_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply overrides from a CLI (or API) argument mapping, in place.

        Recognized keys: ``block_type``, ``normalize_whitespace``, ``dry_run``
        (applied when not ``None``), and ``include_patterns`` /
        ``exclude_patterns`` (appended to the configured patterns).

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if args.get("block_type") is not None:
            self.block_type = args["block_type"]
        if args.get("normalize_whitespace") is not None:
            self.normalize_whitespace = bool(args["normalize_whitespace"])
        if args.get("dry_run") is not None:
            self.dry_run = bool(args["dry_run"])
        self.include_patterns = self.include_patterns + list(args.get("include_patterns") or ())
        self.exclude_patterns = self.exclude_patterns + list(args.get("exclude_patterns") or ())
        if any(args.get(k) is not None for k in ("block_type", "normalize_whitespace", "dry_run")):
            self.config_files.append("<cli>")
        return self
