# topmark:header:start
#
#   project      : tfremover
#   file         : diagnostics.py
#   file_relpath : src/tfremover/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end
"""Per-file diagnostics recorded by the pipeline steps.

A `DiagnosticLog` travels with each `ProcessingContext`. Steps append short
messages tagged with their own name; the CLI prints them at high verbosity and
the machine formats serialize them verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


class DiagnosticLevel(Enum):
    """Severity of a diagnostic, ordered INFO < WARNING < ERROR."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def color(self) -> Callable[[str], str]:
        """`yachalk` style used when printing this level to a terminal."""
        return _COLORS[self]


_RANKS: dict[DiagnosticLevel, int] = {
    DiagnosticLevel.INFO: 0,
    DiagnosticLevel.WARNING: 1,
    DiagnosticLevel.ERROR: 2,
}

_COLORS: dict[DiagnosticLevel, Callable[[str], str]] = {
    DiagnosticLevel.INFO: chalk.blue,
    DiagnosticLevel.WARNING: chalk.yellow,
    DiagnosticLevel.ERROR: chalk.red_bright,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One message, optionally attributed to the step that recorded it."""

    level: DiagnosticLevel
    message: str
    step: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"level": self.level.value, "message": self.message, "step": self.step}

    def render(self) -> str:
        """Return ``"[level] message"`` with the level colorized."""
        return f"{self.level.color(f'[{self.level.value}]')} {self.message}"


@dataclass(frozen=True, slots=True)
class DiagnosticStats:
    """Per-level diagnostic counts."""

    n_info: int = 0
    n_warning: int = 0
    n_error: int = 0

    @property
    def total(self) -> int:
        return self.n_info + self.n_warning + self.n_error

    def to_dict(self) -> dict[str, int]:
        return {"info": self.n_info, "warning": self.n_warning, "error": self.n_error}


def compute_diagnostic_stats(diags: Iterable[Diagnostic]) -> DiagnosticStats:
    """Count ``diags`` per severity level."""
    counts: dict[DiagnosticLevel, int] = dict.fromkeys(DiagnosticLevel, 0)
    for d in diags:
        counts[d.level] += 1
    return DiagnosticStats(
        n_info=counts[DiagnosticLevel.INFO],
        n_warning=counts[DiagnosticLevel.WARNING],
        n_error=counts[DiagnosticLevel.ERROR],
    )


@dataclass
class DiagnosticLog:
    """Ordered, append-only collection of diagnostics for one file."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, level: DiagnosticLevel, message: str, *, step: str | None = None) -> None:
        self.items.append(Diagnostic(level, message, step))

    def stats(self) -> DiagnosticStats:
        return compute_diagnostic_stats(self.items)

    def worst_level(self) -> DiagnosticLevel | None:
        """Return the most severe level present, or ``None`` for an empty log."""
        if not self.items:
            return None
        return max((d.level for d in self.items), key=lambda level: level.rank)

    def to_list(self) -> list[dict[str, str | None]]:
        return [d.to_dict() for d in self.items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
