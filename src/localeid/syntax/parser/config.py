"""Parser configuration for LocaleParser.

A single frozen dataclass bundles the parser's behavior switches so a
configured parser can be shared between threads without copying.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from localeid.constants import MAX_SOURCE_SIZE

__all__ = ["ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for LocaleParser.

    Attributes:
        strict: Reject subtags left over after a language identifier
            (default: True). When False, parse_language_id() stops at the
            first subtag that cannot continue the language identifier and
            ignores the rest. Individual calls may override it.
        max_source_size: Maximum input length in characters (default: 0,
            no limit). When positive, longer input raises ValueError before
            tokenizing.

    Example:
        >>> from localeid.syntax.parser import LocaleParser, ParserConfig
        >>> parser = LocaleParser(ParserConfig(strict=False))
        >>> str(parser.parse_language_id("en-US-u-ca-buddhist"))
        'en-US'
    """

    strict: bool = True
    max_source_size: int = MAX_SOURCE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_source_size is negative.
        """
        if self.max_source_size < 0:
            msg = "max_source_size must be >= 0 (0 disables the limit)"
            raise ValueError(msg)
