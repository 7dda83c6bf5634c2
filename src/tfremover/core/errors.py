# topmark:header:start
#
#   project      : tfremover
#   file         : errors.py
#   file_relpath : src/tfremover/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Per-file processing failures.

Each failure is tagged with the file it concerns. A failure on one file never
aborts a batch: the engine reports it and moves on to the next file. Where a
failure stems from an ``OSError``, the original exception is chained
(``raise ReadError(...) from exc``) and remains available as ``__cause__``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class ProcessingError(Exception):
    """Base class for failures that prevent one file from being processed.

    Attributes:
        path (Path): The file that could not be processed.
        message (str): Human-readable description of the failure.
        kind (str): Short category label used in machine-readable output.
    """

    kind: ClassVar[str] = "processing"

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path: Path = path
        self.message: str = message

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping of this failure."""
        return {"path": str(self.path), "kind": self.kind, "message": self.message}


class ReadError(ProcessingError):
    """The file is missing or could not be read."""

    kind = "read"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"failed to read file: {reason}")


class ParseError(ProcessingError):
    """The file is not valid HCL; it is left untouched.

    Attributes:
        diagnostics (tuple[str, ...]): Rendered parser diagnostics.
    """

    kind = "parse"

    def __init__(self, path: Path, diagnostics: Sequence[str]) -> None:
        self.diagnostics: tuple[str, ...] = tuple(diagnostics)
        super().__init__(path, f"failed to parse HCL: {'; '.join(self.diagnostics)}")

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = super().to_dict()
        data["diagnostics"] = "\n".join(self.diagnostics)
        return data


class WriteError(ProcessingError):
    """The new content could not be written; the original file is unchanged."""

    kind = "write"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"failed to write file: {reason}")
