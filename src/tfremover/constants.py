# topmark:header:start
#
#   project      : tfremover
#   file         : constants.py
#   file_relpath : src/tfremover/constants.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""tfremover constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TFREMOVER_VERSION: str = get_version("tfremover")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    TFREMOVER_VERSION = "0.0.0"

# Human-facing program name (used by `tfremover version` and the CLI banner)
PROGRAM_NAME: str = "Terraform Removed Block Remover"

# Name of the bundled default config inside the package `tfremover.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "tfremover.config"
DEFAULT_TOML_CONFIG_NAME: str = "tfremover-default.toml"

# Project-level config file names, discovered upwards from the working directory
PROJECT_TOML_CONFIG_NAME: str = "tfremover.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: str = "TFREMOVER_LOG_LEVEL"

# Top-level block type deleted by default
DEFAULT_BLOCK_TYPE: str = "removed"

# Suffix of files processed by default
DEFAULT_FILE_SUFFIX: str = ".tf"

VALUE_NOT_SET: str = "<not set>"
