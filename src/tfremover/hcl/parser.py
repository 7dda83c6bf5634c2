# topmark:header:start
#
#   project      : tfremover
#   file         : parser.py
#   file_relpath : src/tfremover/hcl/parser.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Structural parser for HCL native syntax.

The parser recognizes the *body* grammar of HCL (attributes and blocks, with
block labels and nested bodies) and validates the structure of expressions:
operands and operators must alternate, brackets must balance and every
argument ends at a newline. Expression values are not interpreted. That is
sufficient to locate blocks by type together with their exact byte extents,
and to reject input that `terraform fmt` would refuse to format.

Block extents start at the block type keyword and end just past the closing
brace. Comments are not part of any construct: a comment immediately above a
block is leading trivia and lies outside the block's extent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from tfremover.config.logging import get_logger
from tfremover.hcl.errors import HclDiagnostic, HclSyntaxError
from tfremover.hcl.lexer import tokenize
from tfremover.hcl.tokens import CLOSERS, Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tfremover.config.logging import TfremoverLogger

logger: TfremoverLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Attribute:
    """An ``name = expression`` definition.

    Attributes:
        name (str): Attribute name.
        start (int): Offset of the name token.
        end (int): Offset just past the last expression token.
    """

    name: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Body:
    """Attributes and nested blocks of a file or block, in source order."""

    attributes: tuple[Attribute, ...] = ()
    blocks: tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class Block:
    """A ``type label* { body }`` definition.

    Attributes:
        type (str): The block type keyword (e.g. ``"resource"``, ``"removed"``).
        labels (tuple[str, ...]): Block labels with quotes stripped.
        start (int): Offset of the type keyword (inclusive).
        end (int): Offset just past the closing brace (exclusive).
        body (Body): Nested content.
    """

    type: str
    labels: tuple[str, ...]
    start: int
    end: int
    body: Body = field(default_factory=Body)


@dataclass(frozen=True, slots=True)
class HclFile:
    """Result of parsing one source buffer."""

    filename: str
    body: Body

    def iter_blocks(self, block_type: str | None = None) -> Iterator[Block]:
        """Yield top-level blocks, optionally restricted to ``block_type``."""
        for block in self.body.blocks:
            if block_type is None or block.type == block_type:
                yield block


# Binary operators of the expression grammar.
_BINARY_OPERATORS: Final[frozenset[bytes]] = frozenset(
    {b"||", b"&&", b"==", b"!=", b"<", b">", b"<=", b">=", b"+", b"-", b"*", b"/", b"%"}
)


class _Parser:
    """Recursive-descent parser over a comment-free token stream.

    Newlines end attributes and separate object items, but are insignificant
    inside parentheses, tuples and ``for`` expressions. ``newline_modes``
    tracks which of the two applies at the current nesting level.
    """

    def __init__(self, tokens: list[Token], filename: str) -> None:
        self.tokens: list[Token] = [t for t in tokens if not t.is_comment]
        self.filename: str = filename
        self.index: int = 0
        self.last_end: int = 0
        self.brackets: list[Token] = []
        self.newline_modes: list[bool] = [True]

    def peek(self) -> Token:
        if not self.newline_modes[-1]:
            while self.tokens[self.index].type is TokenType.NEWLINE:
                self.index += 1
        return self.tokens[self.index]

    def advance(self) -> Token:
        token: Token = self.peek()
        if token.type is not TokenType.EOF:
            self.index += 1
            self.last_end = token.end
        return token

    def error(self, token: Token, summary: str, detail: str = "") -> HclSyntaxError:
        return HclSyntaxError(
            HclDiagnostic(
                filename=self.filename,
                line=token.line,
                column=token.column,
                summary=summary,
                detail=detail,
            )
        )

    def skip_newlines(self) -> None:
        while self.peek().type is TokenType.NEWLINE:
            self.advance()

    def is_keyword(self, token: Token, keyword: bytes) -> bool:
        return token.type is TokenType.IDENT and token.text == keyword

    def expect(self, symbol: bytes, summary: str, detail: str) -> Token:
        token: Token = self.peek()
        if not token.is_punct(symbol):
            raise self.error(token, summary, detail)
        return self.advance()

    def expect_name(self, summary: str, detail: str) -> Token:
        token: Token = self.peek()
        if token.type is not TokenType.IDENT:
            raise self.error(token, summary, detail)
        return self.advance()

    def parse_body(self, *, nested: bool) -> Body:
        attributes: list[Attribute] = []
        blocks: list[Block] = []
        seen: set[str] = set()
        while True:
            self.skip_newlines()
            token: Token = self.peek()
            if token.type is TokenType.EOF:
                if nested:
                    raise self.error(
                        token,
                        "Unclosed configuration block",
                        "There is no closing brace for this block before the end of the file.",
                    )
                break
            if nested and token.is_punct(b"}"):
                break
            if token.type is not TokenType.IDENT:
                raise self.error(
                    token,
                    "Argument or block definition required",
                    "An argument or block definition is required here.",
                )
            if self.tokens[self.index + 1].is_punct(b"="):
                attribute: Attribute = self.parse_attribute()
                if attribute.name in seen:
                    raise self.error(
                        token,
                        "Attribute redefined",
                        f'The argument "{attribute.name}" was already set.',
                    )
                after: Token = self.peek()
                if after.type not in (TokenType.NEWLINE, TokenType.EOF):
                    raise self.error(
                        after,
                        "Missing newline after argument",
                        "An argument definition must end with a newline.",
                    )
                seen.add(attribute.name)
                attributes.append(attribute)
            else:
                blocks.append(self.parse_block())
        return Body(attributes=tuple(attributes), blocks=tuple(blocks))

    def parse_attribute(self) -> Attribute:
        name: Token = self.advance()
        self.advance()  # "="
        self.parse_expression()
        return Attribute(name=name.text.decode("utf-8"), start=name.start, end=self.last_end)

    # Expressions

    def open_bracket(self, opener: Token, *, newlines: bool) -> None:
        self.brackets.append(opener)
        self.newline_modes.append(newlines)

    def close_bracket(self, opener: Token, symbol: bytes, summary: str, detail: str) -> None:
        """Consume the ``symbol`` closing ``opener`` or raise a positioned error."""
        token: Token = self.peek()
        if token.type is TokenType.EOF:
            raise self.error(
                opener,
                "Unclosed bracket",
                f"The {opener.text.decode()!r} has no matching closing bracket.",
            )
        if not token.is_punct(symbol):
            if token.type is TokenType.PUNCT and token.text in CLOSERS:
                raise self.error(
                    token,
                    "Mismatched brackets",
                    f"Expected the closing bracket for {opener.text.decode()!r}.",
                )
            raise self.error(token, summary, detail)
        self.advance()
        self.brackets.pop()
        self.newline_modes.pop()

    def parse_expression(self) -> None:
        """Consume one expression, conditionals included."""
        self.parse_binary()
        if self.peek().is_punct(b"?"):
            self.advance()
            self.parse_expression()
            self.expect(
                b":",
                "Missing false expression in conditional",
                "The conditional operator (...?...:...) requires a false expression, "
                "delimited by a colon.",
            )
            self.parse_expression()

    def parse_binary(self) -> None:
        self.parse_unary()
        while True:
            token: Token = self.peek()
            if token.type is not TokenType.PUNCT or token.text not in _BINARY_OPERATORS:
                return
            self.advance()
            self.parse_unary()

    def parse_unary(self) -> None:
        while self.peek().is_punct(b"-") or self.peek().is_punct(b"!"):
            self.advance()
        self.parse_postfix()

    def parse_postfix(self) -> None:
        """Consume a term followed by attribute access, indexes and splats."""
        self.parse_term()
        while True:
            token: Token = self.peek()
            if token.is_punct(b"."):
                self.advance()
                name: Token = self.peek()
                if name.type not in (TokenType.IDENT, TokenType.NUMBER) and not name.is_punct(b"*"):
                    raise self.error(
                        name,
                        "Invalid attribute name",
                        "An attribute name is required after a dot.",
                    )
                self.advance()
            elif token.is_punct(b"["):
                opener: Token = self.advance()
                self.open_bracket(opener, newlines=False)
                if self.peek().is_punct(b"*"):
                    self.advance()
                else:
                    self.parse_expression()
                self.close_bracket(
                    opener,
                    b"]",
                    "Missing close bracket on index",
                    "The index operator must end with a closing bracket (\"]\").",
                )
            else:
                return

    def parse_term(self) -> None:
        token: Token = self.peek()
        if token.type in (TokenType.NUMBER, TokenType.STRING, TokenType.HEREDOC):
            self.advance()
        elif token.type is TokenType.IDENT:
            self.advance()
            while self.peek().is_punct(b"::"):
                self.advance()
                self.expect_name(
                    "Invalid function name",
                    "A function name is required after the namespace separator.",
                )
            if self.peek().is_punct(b"("):
                self.parse_call(self.advance())
        elif token.is_punct(b"("):
            opener: Token = self.advance()
            self.open_bracket(opener, newlines=False)
            self.parse_expression()
            self.close_bracket(
                opener,
                b")",
                "Unbalanced parentheses",
                "Expected a closing parenthesis to terminate the expression.",
            )
        elif token.is_punct(b"["):
            self.parse_tuple(self.advance())
        elif token.is_punct(b"{"):
            self.parse_object(self.advance())
        elif token.type is TokenType.EOF and self.brackets:
            raise self.error(
                self.brackets[-1],
                "Unclosed bracket",
                f"The {self.brackets[-1].text.decode()!r} has no matching closing bracket.",
            )
        else:
            found: str = (
                "the end of the line"
                if token.type in (TokenType.NEWLINE, TokenType.EOF)
                else repr(token.text.decode("utf-8", "replace"))
            )
            raise self.error(
                token,
                "Invalid expression",
                f"Expected the start of an expression, but found {found}.",
            )

    def parse_call(self, opener: Token) -> None:
        self.open_bracket(opener, newlines=False)
        while not self.peek().is_punct(b")"):
            self.parse_expression()
            if self.peek().is_punct(b"..."):
                self.advance()
                break
            if not self.peek().is_punct(b","):
                break
            self.advance()
        self.close_bracket(
            opener,
            b")",
            "Missing argument separator",
            "A comma is required to separate each function argument from the next.",
        )

    def starts_for(self) -> bool:
        return (
            self.is_keyword(self.peek(), b"for")
            and self.tokens[self.index + 1].type is TokenType.IDENT
        )

    def parse_tuple(self, opener: Token) -> None:
        self.open_bracket(opener, newlines=False)
        if self.starts_for():
            self.parse_for(opener, b"]")
            return
        while not self.peek().is_punct(b"]"):
            self.parse_expression()
            if not self.peek().is_punct(b","):
                break
            self.advance()
        self.close_bracket(
            opener,
            b"]",
            "Missing item separator",
            "Expected a comma to mark the beginning of the next item.",
        )

    def parse_object(self, opener: Token) -> None:
        self.open_bracket(opener, newlines=True)
        self.skip_newlines()
        if self.starts_for():
            self.newline_modes[-1] = False
            self.parse_for(opener, b"}")
            return
        while True:
            self.skip_newlines()
            if self.peek().is_punct(b"}"):
                break
            self.parse_expression()
            separator: Token = self.peek()
            if not (separator.is_punct(b"=") or separator.is_punct(b":")):
                raise self.error(
                    separator,
                    "Missing key/value separator",
                    "Expected an equals sign (\"=\") to mark the beginning of the attribute value.",
                )
            self.advance()
            self.parse_expression()
            token: Token = self.peek()
            if token.is_punct(b","):
                self.advance()
            elif token.type is not TokenType.NEWLINE:
                break
        self.close_bracket(
            opener,
            b"}",
            "Missing attribute separator",
            "Expected a newline or comma to mark the beginning of the next attribute.",
        )

    def parse_for(self, opener: Token, symbol: bytes) -> None:
        """Consume ``for k, v in coll : [key =>] value [...] [if cond]`` and its closer."""
        self.advance()  # "for"
        self.expect_name("Invalid 'for' expression", "For expression requires a variable name.")
        if self.peek().is_punct(b","):
            self.advance()
            self.expect_name(
                "Invalid 'for' expression", "For expression requires a value variable name."
            )
        keyword: Token = self.peek()
        if not self.is_keyword(keyword, b"in"):
            raise self.error(
                keyword,
                "Invalid 'for' expression",
                "For expression requires the 'in' keyword after its name declarations.",
            )
        self.advance()
        self.parse_expression()
        self.expect(
            b":",
            "Invalid 'for' expression",
            "For expression requires a colon after the collection expression.",
        )
        self.parse_expression()
        if symbol == b"}":
            self.expect(
                b"=>",
                "Invalid 'for' expression",
                "Key expression in object 'for' expression must be followed by an arrow (=>).",
            )
            self.parse_expression()
            if self.peek().is_punct(b"..."):
                self.advance()
        if self.is_keyword(self.peek(), b"if"):
            self.advance()
            self.parse_expression()
        self.close_bracket(
            opener,
            symbol,
            "Invalid 'for' expression",
            f"Extra characters after the 'for' expression; expected {symbol.decode()!r}.",
        )

    # Blocks

    def parse_block(self) -> Block:
        keyword: Token = self.advance()
        labels: list[str] = []
        while self.peek().type in (TokenType.STRING, TokenType.IDENT):
            label: Token = self.advance()
            text: bytes = label.text[1:-1] if label.type is TokenType.STRING else label.text
            labels.append(text.decode("utf-8"))

        opener: Token = self.peek()
        if not opener.is_punct(b"{"):
            raise self.error(
                opener,
                "Invalid block definition",
                'A block definition must have block content delimited by "{" and "}", '
                "starting on the same line as the block header.",
            )
        self.advance()

        body: Body
        following: Token = self.peek()
        if following.type is TokenType.NEWLINE:
            body = self.parse_body(nested=True)
        elif following.is_punct(b"}"):
            body = Body()
        elif following.type is TokenType.IDENT and self.tokens[self.index + 1].is_punct(b"="):
            # Single-line block: exactly one attribute.
            body = Body(attributes=(self.parse_attribute(),))
        else:
            raise self.error(
                following,
                "Invalid single-argument block definition",
                "A single-line block definition may contain only a single argument.",
            )

        closer: Token = self.peek()
        if not closer.is_punct(b"}"):
            raise self.error(
                closer,
                "Invalid single-argument block definition",
                "A single-line block definition must end with a closing brace.",
            )
        self.advance()

        after: Token = self.peek()
        if after.type not in (TokenType.NEWLINE, TokenType.EOF):
            raise self.error(
                after,
                "Missing newline after block definition",
                "A block definition must end with a newline.",
            )
        return Block(
            type=keyword.text.decode("utf-8"),
            labels=tuple(labels),
            start=keyword.start,
            end=closer.end,
            body=body,
        )


def parse(source: bytes, filename: str = "<input>") -> HclFile:
    """Parse ``source`` into an `HclFile`.

    Args:
        source (bytes): Raw HCL source.
        filename (str): Name used in diagnostics.

    Returns:
        HclFile: The parsed file body.

    Raises:
        HclSyntaxError: If ``source`` is not valid HCL native syntax.
    """
    parser: _Parser = _Parser(tokenize(source, filename), filename)
    body: Body = parser.parse_body(nested=False)
    logger.debug(
        "%s: parsed %d top-level blocks, %d attributes",
        filename,
        len(body.blocks),
        len(body.attributes),
    )
    return HclFile(filename=filename, body=body)
