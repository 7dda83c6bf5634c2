# topmark:header:start
#
#   project      : tfremover
#   file         : formatter.py
#   file_relpath : src/tfremover/hcl/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Canonical layout for HCL native syntax, in the style of `terraform fmt`.

The formatter is line-oriented and never changes the token sequence; it only
rewrites the horizontal whitespace between tokens:

1. Each line is split into up to three cells: a *lead* (everything before the
   ``=`` of a single-line attribute), an *assign* cell (the ``=`` and its
   expression) and a trailing *comment* cell.
2. Indentation is two spaces per level, driven by the net bracket change of
   each line.
3. Tokens are separated by a single space or none, depending on their kinds.
4. The ``=`` of consecutive attribute lines is aligned, and so are trailing
   comments of consecutive lines.

Blank lines and each line's terminator (``\\n`` or ``\\r\\n``) are kept as-is;
heredocs and block comments are copied verbatim. The result is idempotent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from tfremover.config.logging import get_logger
from tfremover.hcl.lexer import BOM, tokenize
from tfremover.hcl.tokens import Token, TokenType

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger

logger: TfremoverLogger = get_logger(__name__)

INDENT_WIDTH: Final[int] = 2

# Tokens after which a "-" is a negation rather than a subtraction.
_NEGATION_CONTEXT: Final[frozenset[bytes]] = frozenset(
    {
        b"(", b"{", b"[", b"=", b":", b",", b"?",
        b"+", b"*", b"/", b"%", b"-",
        b"==", b"!=", b">", b">=", b"<", b"<=",
        b"&&", b"||", b"!", b"=>",
    }
)  # fmt: skip

# Keywords after which a "-" is a negation (`[for v in l : v if -v > 0]`).
_NEGATION_KEYWORDS: Final[frozenset[bytes]] = frozenset({b"if"})


@dataclass
class _Cell:
    tokens: list[Token] = field(default_factory=list)
    spaces: list[int] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def columns(self) -> int:
        return sum(self.spaces) + sum(_display_width(t.text) for t in self.tokens)


@dataclass
class _Line:
    lead: _Cell
    assign: _Cell = field(default_factory=_Cell)
    comment: _Cell = field(default_factory=_Cell)
    newline: bytes = b""

    def cells(self) -> tuple[_Cell, _Cell, _Cell]:
        return self.lead, self.assign, self.comment


def _display_width(text: bytes) -> int:
    """Return the number of characters in UTF-8 ``text``."""
    return sum(1 for b in text if b & 0xC0 != 0x80)


def _text(token: Token | None) -> bytes:
    return b"" if token is None else token.text


def _space_after(subject: Token, before: Token | None, after: Token | None) -> bool:
    """Return True if a single space belongs between ``subject`` and ``after``."""
    if after is None:
        return False
    if subject.type is TokenType.IDENT and after.is_punct(b"("):
        return False
    if (subject.type is TokenType.IDENT and after.is_punct(b"::")) or (
        subject.is_punct(b"::") and after.type is TokenType.IDENT
    ):
        return False
    if subject.is_punct(b".") or after.is_punct(b"."):
        return False
    if after.is_punct(b",") or after.is_punct(b"..."):
        return False
    if subject.is_punct(b","):
        return True
    if (
        subject.type is TokenType.IDENT
        and subject.text == b"in"
        and before is not None
        and before.type is TokenType.IDENT
    ):
        return True
    if after.is_punct(b"[") and (
        subject.type in (TokenType.IDENT, TokenType.NUMBER) or subject.bracket_change < 0
    ):
        return False
    if subject.is_punct(b"-"):
        if before is None:
            return False
        if before.type is TokenType.IDENT:
            return before.text not in _NEGATION_KEYWORDS
        return _text(before) not in _NEGATION_CONTEXT
    if subject.is_punct(b"!"):
        return False
    if subject.is_punct(b"{") or after.is_punct(b"}"):
        return not (subject.is_punct(b"{") and after.is_punct(b"}"))
    if subject.bracket_change > 0:
        return False
    if after.bracket_change < 0:
        return False
    return True


def _split_lines(tokens: list[Token]) -> list[_Line]:
    lines: list[_Line] = []
    current: _Cell = _Cell()
    for token in tokens:
        if token.type is TokenType.NEWLINE:
            lines.append(_Line(lead=current, newline=token.text))
            current = _Cell()
        elif token.type is TokenType.EOF:
            lines.append(_Line(lead=current))
        else:
            current.tokens.append(token)
    return lines


def _assign_cells(line: _Line) -> None:
    """Move a trailing comment and a balanced ``= expr`` tail out of the lead."""
    lead: list[Token] = line.lead.tokens
    if len(lead) > 1 and lead[-1].is_comment:
        line.comment.tokens = [lead.pop()]
    for i, token in enumerate(lead):
        if i > 0 and token.is_punct(b"="):
            if sum(t.bracket_change for t in lead[i:]) == 0:
                line.assign.tokens = lead[i:]
                del lead[i:]
            break


def _assign_spaces(line: _Line) -> None:
    for cell in line.cells():
        tokens: list[Token] = cell.tokens
        cell.spaces = [1] * len(tokens)
        for i in range(1, len(tokens)):
            before: Token | None = tokens[i - 2] if i > 1 else None
            cell.spaces[i] = 1 if _space_after(tokens[i - 1], before, tokens[i]) else 0


def _indent(lines: list[_Line]) -> None:
    stack: list[int] = []
    for line in lines:
        if not line.lead:
            continue
        net: int = sum(t.bracket_change for t in line.lead.tokens) + sum(
            t.bracket_change for t in line.assign.tokens
        )
        if net > 0:
            line.lead.spaces[0] = INDENT_WIDTH * len(stack)
            stack.append(net)
            continue
        closing: int = -net
        while closing > 0 and stack:
            if closing > stack[-1]:
                closing -= stack.pop()
            elif closing < stack[-1]:
                stack[-1] -= closing
                closing = 0
            else:
                stack.pop()
                closing = 0
        line.lead.spaces[0] = INDENT_WIDTH * len(stack)


def _align(lines: list[_Line], cell_index: int) -> None:
    """Align the first token of cell ``cell_index`` across consecutive lines."""
    chain: list[_Line] = []

    def width(line: _Line) -> int:
        return sum(cell.columns() for cell in line.cells()[:cell_index])

    def close() -> None:
        if chain:
            target: int = max(width(line) for line in chain)
            for line in chain:
                line.cells()[cell_index].spaces[0] = target - width(line) + 1
            chain.clear()

    for line in lines:
        if line.cells()[cell_index]:
            chain.append(line)
        else:
            close()
    close()


def _render(line: _Line) -> bytes:
    parts: list[bytes] = []
    for cell in line.cells():
        for spaces, token in zip(cell.spaces, cell.tokens):
            text: bytes = token.text
            if token.type is TokenType.COMMENT:
                text = text.rstrip(b" \t\r\f")
            parts.append(b" " * spaces + text)
    parts.append(line.newline)
    return b"".join(parts)


def format_bytes(source: bytes, filename: str = "<input>") -> bytes:
    """Return the canonical layout of ``source``.

    Args:
        source (bytes): Raw HCL source.
        filename (str): Name used in diagnostics.

    Returns:
        bytes: Formatted source. ``format_bytes(format_bytes(x)) == format_bytes(x)``.

    Raises:
        HclSyntaxError: If ``source`` cannot be tokenized.
    """
    lines: list[_Line] = _split_lines(tokenize(source, filename))
    for line in lines:
        _assign_cells(line)
        _assign_spaces(line)
    _indent(lines)
    _align(lines, 1)
    _align(lines, 2)

    prefix: bytes = BOM if source.startswith(BOM) else b""
    result: bytes = prefix + b"".join(_render(line) for line in lines)
    if result != source:
        logger.trace("%s: formatting changed %d -> %d bytes", filename, len(source), len(result))
    return result
