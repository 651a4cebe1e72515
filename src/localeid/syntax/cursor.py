"""Immutable token cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern over a subtag sequence.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Sub-parsers receive a cursor and hand back the advanced one inside a
      ParseResult; the caller continues from that cursor. Ownership of the
      position is therefore passed explicitly, never shared.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from localeid.diagnostics import SourceSpan

from .tokenizer import tokenize

__all__ = ["ParseResult", "TokenCursor"]


@dataclass(frozen=True, slots=True)
class TokenCursor:
    """Immutable position in a subtag sequence.

    Example:
        >>> cursor = TokenCursor.from_source("en-US")
        >>> cursor.current
        'en'
        >>> next_cursor = cursor.advance()
        >>> next_cursor.current
        'US'
        >>> cursor.current  # Original unchanged (immutability)
        'en'
        >>> next_cursor.advance().is_eof
        True
    """

    source: str
    tokens: tuple[str, ...]
    index: int = 0

    @classmethod
    def from_source(cls, source: str) -> "TokenCursor":
        """Tokenize source and return a cursor at the first subtag."""
        return cls(source, tokenize(source), 0)

    @property
    def is_eof(self) -> bool:
        """Check if every subtag has been consumed.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.index >= len(self.tokens)

    @property
    def current(self) -> str:
        """Get the current subtag.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of input at subtag {self.index}"
            raise EOFError(msg)
        return self.tokens[self.index]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at subtag with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Subtag at index + offset, or None if beyond EOF
        """
        target = self.index + offset
        if target >= len(self.tokens):
            return None
        return self.tokens[target]

    def advance(self, count: int = 1) -> "TokenCursor":
        """Return new cursor advanced by count subtags (original unchanged)."""
        new_index = min(self.index + count, len(self.tokens))
        return TokenCursor(self.source, self.tokens, new_index)

    @property
    def offset(self) -> int:
        """Character offset of the current subtag in source.

        Every separator is exactly one character, so the offset is the sum of
        the preceding subtag lengths plus one per separator.
        """
        consumed = self.tokens[: self.index]
        return min(sum(len(t) for t in consumed) + len(consumed), len(self.source))

    def span(self) -> SourceSpan:
        """Source span of the current subtag (zero-width at EOF)."""
        length = 0 if self.is_eof else len(self.current)
        return SourceSpan.for_subtag(self.offset, length)

    @property
    def remaining(self) -> tuple[str, ...]:
        """Subtags not yet consumed."""
        return self.tokens[self.index :]


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every sub-parser has signature:
            def parse_foo(cursor: TokenCursor) -> ParseResult[Foo]:
                ...
                return ParseResult(parsed_value, new_cursor)

        Grammar violations raise LocaleSyntaxError instead of returning.

    Example:
        >>> cursor = TokenCursor.from_source("en-US")
        >>> result = ParseResult("en", cursor.advance())
        >>> result.value
        'en'
        >>> result.cursor.current
        'US'
    """

    value: T
    cursor: TokenCursor
