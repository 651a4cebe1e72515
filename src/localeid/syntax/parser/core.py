"""Core locale identifier parser.

This module provides the LocaleParser class that orchestrates parsing of
identifier strings into the structures defined in :mod:`localeid.syntax.ast`.

Architecture:
    Each entry point validates the input size, tokenizes once and walks the
    subtags with an immutable :class:`~localeid.syntax.cursor.TokenCursor`.
    Sub-parsers (:mod:`~localeid.syntax.parser.language`,
    :mod:`~localeid.syntax.parser.extensions`,
    :mod:`~localeid.syntax.parser.identifiers`) return a ParseResult with the
    advanced cursor, or raise LocaleSyntaxError. The first error aborts the
    call; there is no recovery and no partial result.

Security:
    Includes an opt-in input size limit (ParserConfig.max_source_size).
    When set, oversized input is rejected before any tokenizing happens.

See Also:
    - :mod:`localeid.parsing` - Non-raising (result, errors) API
    - :mod:`localeid.syntax.serializer` - Canonical rendering
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from localeid.diagnostics import ErrorTemplate, LocaleSyntaxError
from localeid.syntax.ast import (
    Extensions,
    LanguageIdentifier,
    LocaleIdentifier,
    MeasureUnit,
    SubdivisionIdentifier,
)
from localeid.syntax.cursor import TokenCursor

from .config import ParserConfig
from .extensions import parse_extensions
from .identifiers import parse_measure_unit, parse_subdivision
from .language import parse_language

__all__ = ["LocaleParser"]

logger = logging.getLogger(__name__)


@contextmanager
def _rejecting(source: str) -> Iterator[None]:
    """Attach the full input to any LocaleSyntaxError raised in the block."""
    try:
        yield
    except LocaleSyntaxError as e:
        e.input_value = source
        logger.debug("Rejected %r: %s", source, e)
        raise


class LocaleParser:
    """Unicode locale identifier parser using the immutable cursor pattern.

    The parser holds only its frozen configuration, so one instance may be
    shared freely between threads.

    Example:
        >>> parser = LocaleParser()
        >>> locale = parser.parse_locale_id("en-US-u-hc-h12")
        >>> locale.extensions.unicode_locale[0].get("hc")
        ('h12',)
        >>> str(parser.parse_language_id("EN_latn_us"))
        'en-Latn-US'
    """

    __slots__ = ("_config",)

    def __init__(self, config: ParserConfig | None = None) -> None:
        """Initialize parser.

        Args:
            config: Parser configuration (default: ParserConfig())
        """
        self._config = config if config is not None else ParserConfig()

    @property
    def config(self) -> ParserConfig:
        """Configuration this parser was created with."""
        return self._config

    def _open(self, source: str, what: str) -> TokenCursor:
        """Check size and emptiness, then tokenize.

        Raises:
            ValueError: If source exceeds max_source_size
            LocaleSyntaxError: MISSING if source is empty
        """
        limit = self._config.max_source_size
        if limit > 0 and len(source) > limit:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({limit:,} characters). "
                "Configure max_source_size in ParserConfig to increase limit."
            )
            raise ValueError(msg)
        if not source:
            logger.debug("Rejected empty %s", what)
            raise LocaleSyntaxError(ErrorTemplate.missing(what), input_value=source)
        return TokenCursor.from_source(source)

    def parse_language_id(
        self, source: str, *, strict: bool | None = None
    ) -> LanguageIdentifier:
        """Parse a unicode_language_id.

        Args:
            source: Identifier such as "en", "zh-Hant-TW" or "de_DE_1996"
            strict: Reject subtags after the language identifier
                (default: ParserConfig.strict)

        Returns:
            Parsed LanguageIdentifier with canonical case

        Raises:
            ValueError: If source exceeds max_source_size
            LocaleSyntaxError: MISSING, INVALID_LANGUAGE, or INVALID_SUBTAG
                for a trailing subtag in strict mode
        """
        strict = self._config.strict if strict is None else strict
        cursor = self._open(source, "language identifier")
        with _rejecting(source):
            result = parse_language(cursor)
            cursor = result.cursor
            if not cursor.is_eof:
                if strict:
                    raise LocaleSyntaxError(
                        ErrorTemplate.trailing_subtag(cursor.current, cursor.span()),
                        input_value=source,
                    )
                logger.debug(
                    "Ignoring trailing subtags %s in %r", cursor.remaining, source
                )
        return result.value

    def parse_locale_id(self, source: str) -> LocaleIdentifier:
        """Parse a unicode_locale_id: language identifier plus extensions.

        Raises:
            ValueError: If source exceeds max_source_size
            LocaleSyntaxError: On the first grammar violation
        """
        cursor = self._open(source, "locale identifier")
        with _rejecting(source):
            language = parse_language(cursor)
            extensions = parse_extensions(language.cursor)
        return LocaleIdentifier(language=language.value, extensions=extensions.value)

    def parse_extensions(self, source: str) -> Extensions:
        """Parse a bare extension sequence such as "u-ca-buddhist-x-foo".

        Raises:
            ValueError: If source exceeds max_source_size
            LocaleSyntaxError: On the first grammar violation
        """
        cursor = self._open(source, "extensions")
        with _rejecting(source):
            extensions = parse_extensions(cursor)
        return extensions.value

    def parse_measure_unit(self, source: str) -> MeasureUnit:
        """Parse a unicode_measure_unit such as "area-hectare".

        Raises:
            ValueError: If source exceeds max_source_size
            LocaleSyntaxError: MISSING or INVALID_SUBTAG
        """
        cursor = self._open(source, "measure unit")
        with _rejecting(source):
            unit = parse_measure_unit(cursor)
        return unit.value

    def parse_subdivision_id(self, source: str) -> SubdivisionIdentifier:
        """Parse a unicode_subdivision_id such as "ussct".

        Raises:
            ValueError: If source exceeds max_source_size
            LocaleSyntaxError: MISSING or INVALID_SUBDIVISION
        """
        self._open(source, "subdivision identifier")
        with _rejecting(source):
            subdivision = parse_subdivision(source)
        return subdivision
