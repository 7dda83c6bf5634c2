# topmark:header:start
#
#   project      : tfremover
#   file         : io.py
#   file_relpath : src/tfremover/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""TOML I/O helpers for the configuration layer.

These helpers never mutate configuration objects. Reading uses `toml`; the
`tomlkit` dependency is limited to `nest_toml_under_section`, which wraps a
rendered configuration under ``[tool.tfremover]`` for inclusion in
``pyproject.toml``.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from tfremover.config.logging import get_logger
from tfremover.constants import DEFAULT_TOML_CONFIG_NAME, DEFAULT_TOML_CONFIG_PACKAGE

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable
    from pathlib import Path

    from tfremover.config.logging import TfremoverLogger

logger: TfremoverLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict if it is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if isinstance(value, str):
        return value
    if value is not None:
        logger.warning("Ignoring non-string value for %r: %r", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Integers are coerced with ``bool(value)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if value is not None:
        logger.warning("Ignoring non-boolean value for %r: %r", key, value)
    return None


def get_string_list_value(table: TomlTable, key: str) -> list[str] | None:
    """Extract a list of strings; non-string items are dropped with a warning.

    Returns:
        list[str] | None: The list, or ``None`` when the key is absent or not a list.
    """
    value: Any | None = table.get(key)
    if not isinstance(value, list):
        if value is not None:
            logger.warning("Ignoring non-list value for %r: %r", key, value)
        return None
    items: list[str] = []
    for item in value:
        if isinstance(item, str):
            items.append(item)
        else:
            logger.warning("Ignoring non-string item in %r: %r", key, item)
    return items


def load_defaults_dict() -> TomlTable:
    """Return the packaged default configuration as a Python dict.

    Returns:
        TomlTable: The parsed default configuration.

    Raises:
        RuntimeError: If the bundled resource cannot be read or is invalid TOML.
    """
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading defaults from package resource: %s", resource)
    try:
        text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled default config {DEFAULT_TOML_CONFIG_NAME!r}: {exc}"
        ) from exc
    try:
        data: TomlTable = toml.loads(text)
    except toml.TomlDecodeError as exc:
        raise RuntimeError(
            f"Bundled default config {DEFAULT_TOML_CONFIG_NAME!r} is invalid TOML: {exc}"
        ) from exc
    return data


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content; an empty dict on failure (the error is logged).
    """
    try:
        val: TomlTable = toml.load(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        val = {}
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        val = {}
    return val


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    return toml.dumps(toml_dict)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    """Return ``toml_doc`` nested under a dotted section such as ``"tool.tfremover"``.

    Comments attached to items of ``toml_doc`` are preserved.

    Args:
        toml_doc (str): Original TOML document.
        section_keys (str): Dotted section path.

    Returns:
        str: The wrapped TOML document.

    Raises:
        ValueError: If ``section_keys`` has no non-empty component.
        RuntimeError: If ``toml_doc`` cannot be parsed.
    """
    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Error parsing TOML document: {exc}") from exc

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    current: tomlkit.TOMLDocument | Table = new_doc
    for key in keys:
        table: Table = tomlkit.table(is_super_table=key != keys[-1])
        current.add(key, table)
        current = table
    for item_key, item_value in doc.items():
        current.add(item_key, item_value)
    return new_doc.as_string()
