# topmark:header:start
#
#   project      : tfremover
#   file         : lexer.py
#   file_relpath : src/tfremover/hcl/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Byte-offset tokenizer for HCL native syntax.

The lexer works directly on ``bytes`` so that every token carries exact byte
offsets into the original buffer. Whitespace (spaces, tabs, form feeds and
bare carriage returns) is skipped; line terminators (``\\n`` or ``\\r\\n``) are
emitted as `TokenType.NEWLINE` tokens; comments are emitted so that the
formatter can lay them out (the parser ignores them).

A leading UTF-8 byte order mark is skipped.
"""

from __future__ import annotations

import bisect
import re
from typing import TYPE_CHECKING, Final

from tfremover.config.logging import get_logger
from tfremover.hcl.errors import HclDiagnostic, HclSyntaxError
from tfremover.hcl.tokens import PUNCTUATION, Token, TokenType

if TYPE_CHECKING:
    from tfremover.config.logging import TfremoverLogger

logger: TfremoverLogger = get_logger(__name__)

BOM: Final[bytes] = b"\xef\xbb\xbf"

_WHITESPACE: Final[re.Pattern[bytes]] = re.compile(rb"(?:[ \t\f]|\r(?!\n))+")
_NEWLINE: Final[re.Pattern[bytes]] = re.compile(rb"\r?\n")
_IDENT: Final[re.Pattern[bytes]] = re.compile(rb"[A-Za-z_\x80-\xff][A-Za-z0-9_\-\x80-\xff]*")
_NUMBER: Final[re.Pattern[bytes]] = re.compile(rb"[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_LINE_COMMENT: Final[re.Pattern[bytes]] = re.compile(rb"(?:#|//)(?:[^\r\n]|\r(?!\n))*")
_HEREDOC_OPEN: Final[re.Pattern[bytes]] = re.compile(rb"<<(-?)([A-Za-z_][A-Za-z0-9_\-]*)(\r?\n)")


class _Scanner:
    """Single-use tokenizer state over one source buffer."""

    def __init__(self, source: bytes, filename: str) -> None:
        self.source: bytes = source
        self.filename: str = filename
        self.pos: int = len(BOM) if source.startswith(BOM) else 0
        self.line_starts: list[int] = [0]
        self.line_starts.extend(m.end() for m in _NEWLINE.finditer(source))

    def position(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of a byte offset."""
        index: int = bisect.bisect_right(self.line_starts, offset) - 1
        return index + 1, offset - self.line_starts[index] + 1

    def error(self, offset: int, summary: str, detail: str = "") -> HclSyntaxError:
        line, column = self.position(offset)
        return HclSyntaxError(
            HclDiagnostic(
                filename=self.filename,
                line=line,
                column=column,
                summary=summary,
                detail=detail,
            )
        )

    def make(self, kind: TokenType, start: int, end: int) -> Token:
        line, column = self.position(start)
        return Token(
            type=kind,
            text=self.source[start:end],
            start=start,
            end=end,
            line=line,
            column=column,
        )

    def scan_quoted(self, start: int) -> int:
        """Return the offset just past the quoted template starting at ``start``."""
        src: bytes = self.source
        i: int = start + 1
        while i < len(src):
            ch: int = src[i]
            if ch == 0x5C:  # backslash
                i += 2
                continue
            if ch == 0x0A:
                break
            if ch == 0x22:  # closing quote
                return i + 1
            if src.startswith((b"$${", b"%%{"), i):
                i += 3
                continue
            if src.startswith((b"${", b"%{"), i):
                i = self.scan_interpolation(i + 2)
                continue
            i += 1
        raise self.error(
            start,
            "Unterminated template string",
            "No closing marker was found for the string.",
        )

    def scan_interpolation(self, start: int) -> int:
        """Return the offset just past the ``}`` closing an interpolation."""
        src: bytes = self.source
        depth: int = 1
        i: int = start
        while i < len(src):
            ch: int = src[i]
            if ch == 0x22:
                i = self.scan_quoted(i)
                continue
            if ch == 0x7B:
                depth += 1
            elif ch == 0x7D:
                depth -= 1
                if depth == 0:
                    return i + 1
            i += 1
        raise self.error(
            start - 2,
            "Unterminated template interpolation",
            "There is no closing brace for this interpolation sequence.",
        )

    def scan_heredoc(self, match: re.Match[bytes]) -> int:
        """Return the offset just past the closing marker of a heredoc."""
        src: bytes = self.source
        marker: bytes = match.group(2)
        closing: re.Pattern[bytes] = re.compile(
            rb"^[ \t]*" + re.escape(marker) + rb"(?=\r?\n|\Z)", re.MULTILINE
        )
        found: re.Match[bytes] | None = closing.search(src, match.end())
        if found is None:
            raise self.error(
                match.start(),
                "Unterminated template string",
                f"No closing marker was found for the heredoc {marker.decode('utf-8', 'replace')!r}.",
            )
        return found.end()

    def next_token(self) -> Token | None:
        """Scan one token, or return None at end of input."""
        src: bytes = self.source
        ws: re.Match[bytes] | None = _WHITESPACE.match(src, self.pos)
        if ws is not None:
            self.pos = ws.end()
        start: int = self.pos
        if start >= len(src):
            return None

        m: re.Match[bytes] | None
        for kind, pattern in (
            (TokenType.NEWLINE, _NEWLINE),
            (TokenType.COMMENT, _LINE_COMMENT),
            (TokenType.IDENT, _IDENT),
            (TokenType.NUMBER, _NUMBER),
        ):
            m = pattern.match(src, start)
            if m is not None:
                return self.make(kind, start, m.end())

        if src.startswith(b"/*", start):
            close: int = src.find(b"*/", start + 2)
            if close < 0:
                raise self.error(
                    start,
                    "Unterminated comment",
                    "There is no closing marker for this block comment.",
                )
            return self.make(TokenType.BLOCK_COMMENT, start, close + 2)

        if src[start] == 0x22:
            return self.make(TokenType.STRING, start, self.scan_quoted(start))

        m = _HEREDOC_OPEN.match(src, start)
        if m is not None:
            return self.make(TokenType.HEREDOC, start, self.scan_heredoc(m))

        for symbol in PUNCTUATION:
            if src.startswith(symbol, start):
                return self.make(TokenType.PUNCT, start, start + len(symbol))

        char: str = src[start : start + 1].decode("utf-8", "replace")
        raise self.error(
            start,
            "Invalid character",
            f"The character {char!r} is not valid in this position.",
        )


def tokenize(source: bytes, filename: str = "<input>") -> list[Token]:
    """Split ``source`` into tokens, ending with a single `TokenType.EOF` token.

    Args:
        source (bytes): Raw HCL source.
        filename (str): Name used in diagnostics.

    Returns:
        list[Token]: Tokens in source order.

    Raises:
        HclSyntaxError: If an invalid character or an unterminated string,
            heredoc or comment is encountered.
    """
    scanner: _Scanner = _Scanner(source, filename)
    tokens: list[Token] = []
    while True:
        token: Token | None = scanner.next_token()
        if token is None:
            break
        tokens.append(token)
        scanner.pos = token.end
    tokens.append(scanner.make(TokenType.EOF, len(source), len(source)))
    logger.trace("%s: %d tokens", filename, len(tokens))
    return tokens
