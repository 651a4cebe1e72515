"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Closed taxonomy of locale identifier errors.

    Every failure of a parse call maps to exactly one of these codes.
    Errors are terminal for the call that produced them.

    Codes:
        MISSING: Required input is empty
        INVALID_LANGUAGE: First subtag is not a language subtag
        INVALID_SUBTAG: A subtag does not fit the grammar at its position
        INVALID_EXTENSION: Extension singleton is not alphanumeric, or is
            not followed by any subtag
        INVALID_SUBDIVISION: Subdivision identifier is malformed
        UNEXPECTED: Internal invariant violated (e.g. duplicate private use)
    """

    MISSING = 1001
    INVALID_LANGUAGE = 1002
    INVALID_SUBTAG = 1003
    INVALID_EXTENSION = 1004
    INVALID_SUBDIVISION = 1005
    UNEXPECTED = 1006


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of the offending subtag in the input string.

    Locale identifiers are single-line, so only the column is tracked.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or column
                is less than 1 (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def for_subtag(cls, start: int, length: int) -> "SourceSpan":
        """Build the span covering one subtag starting at ``start``."""
        return cls(start=start, end=start + length, column=start + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location of the offending subtag (None if not applicable)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[INVALID_SUBTAG]: Invalid subtag 'abcdefghi'
              --> column 4
              = help: Variants are 5-8 alphanumerics, or a digit followed by 3 alphanumerics
              = note: see https://unicode.org/reports/tr35/#unicode_variant_subtag

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
