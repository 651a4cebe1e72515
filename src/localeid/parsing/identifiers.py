"""Result-tuple parsing functions for locale identifiers.

- Functions NEVER raise LocaleSyntaxError - errors are returned in tuple
- The result is None whenever errors is non-empty (no partial results)

Every function delegates to a module-level LocaleParser with the default
configuration, which has no input size limit. The parser is stateless, so
sharing it is thread-safe.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from localeid.diagnostics import LocaleSyntaxError
from localeid.syntax.parser import LocaleParser

if TYPE_CHECKING:
    from collections.abc import Callable

    from localeid.syntax.ast import (
        Extensions,
        LanguageIdentifier,
        LocaleIdentifier,
        MeasureUnit,
        SubdivisionIdentifier,
    )

__all__ = [
    "parse_extensions",
    "parse_language_id",
    "parse_locale_id",
    "parse_measure_unit",
    "parse_subdivision_id",
]

_PARSER = LocaleParser()


def _collect[T](
    parse: Callable[[str], T], text: str
) -> tuple[T | None, tuple[LocaleSyntaxError, ...]]:
    try:
        return (parse(text), ())
    except LocaleSyntaxError as e:
        return (None, (e,))


def parse_language_id(
    text: str, *, strict: bool = True
) -> tuple[LanguageIdentifier | None, tuple[LocaleSyntaxError, ...]]:
    """Parse a unicode_language_id.

    Args:
        text: Identifier such as "en-Latn-US"
        strict: Report subtags after the language identifier as
            INVALID_SUBTAG (default: True). When False they are ignored.

    Returns:
        Tuple of (result, errors):
        - result: Parsed LanguageIdentifier, or None if parsing failed
        - errors: Tuple of LocaleSyntaxError (empty tuple on success)

    Examples:
        >>> result, errors = parse_language_id("en-Latn-US-macos")
        >>> result.variants
        ('macos',)
        >>> errors
        ()

        >>> result, errors = parse_language_id("food")
        >>> result is None, errors[0].code.name
        (True, 'INVALID_LANGUAGE')
    """
    return _collect(lambda t: _PARSER.parse_language_id(t, strict=strict), text)


def parse_locale_id(
    text: str,
) -> tuple[LocaleIdentifier | None, tuple[LocaleSyntaxError, ...]]:
    """Parse a unicode_locale_id (language identifier plus extensions).

    Examples:
        >>> result, errors = parse_locale_id("en-US-u-hc-h12")
        >>> result.extensions.unicode_locale[0].get("hc")
        ('h12',)

        >>> result, errors = parse_locale_id("en-x-foo-x-bar")
        >>> errors[0].code.name
        'UNEXPECTED'
    """
    return _collect(_PARSER.parse_locale_id, text)


def parse_extensions(
    text: str,
) -> tuple[Extensions | None, tuple[LocaleSyntaxError, ...]]:
    """Parse a bare extension sequence such as "u-ca-buddhist-x-foo"."""
    return _collect(_PARSER.parse_extensions, text)


def parse_measure_unit(
    text: str,
) -> tuple[MeasureUnit | None, tuple[LocaleSyntaxError, ...]]:
    """Parse a unicode_measure_unit such as "area-hectare"."""
    return _collect(_PARSER.parse_measure_unit, text)


def parse_subdivision_id(
    text: str,
) -> tuple[SubdivisionIdentifier | None, tuple[LocaleSyntaxError, ...]]:
    """Parse a unicode_subdivision_id.

    Examples:
        >>> result, errors = parse_subdivision_id("ussct")
        >>> (result.region, result.suffix)
        ('us', 'sct')

        >>> result, errors = parse_subdivision_id("ab")
        >>> errors[0].code.name
        'INVALID_SUBDIVISION'
    """
    return _collect(_PARSER.parse_subdivision_id, text)
