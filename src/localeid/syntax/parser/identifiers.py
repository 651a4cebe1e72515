"""Standalone identifiers: measure units and subdivisions.

Grammar:
    unicode_measure_unit   = alphanum{3,8} (sep alphanum{3,8})*
    unicode_subdivision_id = (alpha{2} | digit{3}) alphanum{3,6}

Neither identifier appears inside a locale identifier; they occur as
values of the "u-rg", "u-sd" and measurement keywords and are parsed on
their own.
"""

from __future__ import annotations

from localeid.constants import (
    SUBDIVISION_MAX_LENGTH,
    SUBDIVISION_MIN_LENGTH,
    SUBDIVISION_SUFFIX_MAX_LENGTH,
    SUBDIVISION_SUFFIX_MIN_LENGTH,
)
from localeid.diagnostics import ErrorTemplate, LocaleSyntaxError
from localeid.syntax.ast import MeasureUnit, SubdivisionIdentifier
from localeid.syntax.cursor import ParseResult, TokenCursor
from localeid.syntax.subtags import (
    is_alpha,
    is_alphanumeric,
    is_digit,
    is_measure_unit_value,
)

__all__ = ["parse_measure_unit", "parse_subdivision"]


def parse_measure_unit(cursor: TokenCursor) -> ParseResult[MeasureUnit]:
    """Parse every remaining subtag as a measure unit component.

    Example:
        >>> result = parse_measure_unit(TokenCursor.from_source("area-hectare"))
        >>> result.value.values
        ('area', 'hectare')

    Raises:
        LocaleSyntaxError: MISSING at end of input, INVALID_SUBTAG for a
            component that is not 3-8 alphanumerics
    """
    if cursor.is_eof:
        raise LocaleSyntaxError(
            ErrorTemplate.missing("measure unit"), input_value=cursor.source
        )

    values: list[str] = []
    while not cursor.is_eof:
        subtag = cursor.current
        if not is_measure_unit_value(subtag):
            raise LocaleSyntaxError(
                ErrorTemplate.invalid_subtag(
                    subtag, "3-8 alphanumerics", cursor.span(), "unicode_measure_unit"
                ),
                input_value=cursor.source,
            )
        values.append(subtag.lower())
        cursor = cursor.advance()

    return ParseResult(MeasureUnit(values=tuple(values)), cursor)


def _region_length(source: str) -> int | None:
    if len(source) >= 2 and is_alpha(source[:2]):
        return 2
    if len(source) >= 3 and is_digit(source[:3]):
        return 3
    return None


def parse_subdivision(source: str) -> SubdivisionIdentifier:
    """Split a subdivision identifier into region and suffix.

    The region is 2 letters or 3 digits; the suffix is the rest and must be
    3-6 alphanumerics. Both parts are lowercased, as in CLDR subdivision
    data ("ussct", "gbeng").

    Example:
        >>> parse_subdivision("123abcd")
        SubdivisionIdentifier(region='123', suffix='abcd')

    Raises:
        LocaleSyntaxError: MISSING for empty input, INVALID_SUBDIVISION
            for any other malformation
    """
    if not source:
        raise LocaleSyntaxError(
            ErrorTemplate.missing("subdivision identifier"), input_value=source
        )

    def fail(reason: str) -> LocaleSyntaxError:
        return LocaleSyntaxError(
            ErrorTemplate.invalid_subdivision(source, reason), input_value=source
        )

    if not SUBDIVISION_MIN_LENGTH <= len(source) <= SUBDIVISION_MAX_LENGTH:
        msg = f"length must be {SUBDIVISION_MIN_LENGTH}-{SUBDIVISION_MAX_LENGTH}"
        raise fail(msg)

    region_length = _region_length(source)
    if region_length is None:
        raise fail("region must be 2 letters or 3 digits")

    suffix = source[region_length:]
    if not (
        SUBDIVISION_SUFFIX_MIN_LENGTH <= len(suffix) <= SUBDIVISION_SUFFIX_MAX_LENGTH
        and is_alphanumeric(suffix)
    ):
        msg = (
            f"suffix must be {SUBDIVISION_SUFFIX_MIN_LENGTH}-"
            f"{SUBDIVISION_SUFFIX_MAX_LENGTH} alphanumerics"
        )
        raise fail(msg)

    return SubdivisionIdentifier(
        region=source[:region_length].lower(), suffix=suffix.lower()
    )
