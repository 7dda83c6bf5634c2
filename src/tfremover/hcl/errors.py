# topmark:header:start
#
#   project      : tfremover
#   file         : errors.py
#   file_relpath : src/tfremover/hcl/errors.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Syntax diagnostics raised by the HCL lexer and parser."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HclDiagnostic:
    """A single syntax problem, positioned in the source.

    Attributes:
        filename (str): Name used when rendering the diagnostic.
        line (int): 1-based line number.
        column (int): 1-based byte column.
        summary (str): Short description (e.g. ``"Invalid block definition"``).
        detail (str): Longer explanation, possibly empty.
    """

    filename: str
    line: int
    column: int
    summary: str
    detail: str = ""

    def __str__(self) -> str:
        text: str = f"{self.filename}:{self.line},{self.column}: {self.summary}"
        if self.detail:
            text += f"; {self.detail}"
        return text


class HclSyntaxError(ValueError):
    """Raised when the input is not valid HCL native syntax."""

    def __init__(self, diagnostic: HclDiagnostic) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic: HclDiagnostic = diagnostic
