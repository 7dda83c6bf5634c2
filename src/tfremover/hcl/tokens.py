# topmark:header:start
#
#   project      : tfremover
#   file         : tokens.py
#   file_relpath : src/tfremover/hcl/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Token model for the HCL lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class TokenType(Enum):
    """Lexical categories.

    Punctuation is a single category; the concrete symbol is the token text.
    Quoted strings, heredocs and block comments are atomic tokens, including
    any interpolation sequences they contain.
    """

    IDENT = "ident"
    NUMBER = "number"
    STRING = "string"
    HEREDOC = "heredoc"
    COMMENT = "comment"
    BLOCK_COMMENT = "block comment"
    PUNCT = "punct"
    NEWLINE = "newline"
    EOF = "eof"


# Longest symbols first so that the lexer can match greedily.
PUNCTUATION: Final[tuple[bytes, ...]] = (
    b"...",
    b"==",
    b"!=",
    b"<=",
    b">=",
    b"&&",
    b"||",
    b"=>",
    b"::",
    b"{",
    b"}",
    b"[",
    b"]",
    b"(",
    b")",
    b"=",
    b",",
    b".",
    b":",
    b"?",
    b"+",
    b"-",
    b"*",
    b"/",
    b"%",
    b"<",
    b">",
    b"!",
)

OPENERS: Final[frozenset[bytes]] = frozenset({b"{", b"[", b"("})
CLOSERS: Final[frozenset[bytes]] = frozenset({b"}", b"]", b")"})


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical token with its byte extent and starting position.

    Attributes:
        type (TokenType): Lexical category.
        text (bytes): Exact source bytes (``source[start:end]``).
        start (int): Offset of the first byte (inclusive).
        end (int): Offset just past the last byte (exclusive).
        line (int): 1-based line of ``start``.
        column (int): 1-based byte column of ``start``.
    """

    type: TokenType
    text: bytes
    start: int
    end: int
    line: int
    column: int

    def is_punct(self, symbol: bytes) -> bool:
        """Return True if this is the punctuation token ``symbol``."""
        return self.type is TokenType.PUNCT and self.text == symbol

    @property
    def is_comment(self) -> bool:
        """Return True for line and block comments."""
        return self.type in (TokenType.COMMENT, TokenType.BLOCK_COMMENT)

    @property
    def bracket_change(self) -> int:
        """Return +1 for an opening bracket, -1 for a closing one, else 0."""
        if self.type is not TokenType.PUNCT:
            return 0
        if self.text in OPENERS:
            return 1
        if self.text in CLOSERS:
            return -1
        return 0
