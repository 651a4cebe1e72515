"""Extension dispatcher and extension sub-parsers.

Grammar:
    extensions         = unicode_locale_extensions
                       | transformed_extensions
                       | other_extensions
    unicode_locale_ext = sep "u" ((sep keyword)+ | (sep attribute)+ (sep keyword)*)
    transformed_ext    = sep "t" ((sep tlang (sep tfield)*) | (sep tfield)+)
    other_extensions   = sep [alphanum-[tTuUxX]] (sep alphanum{2,8})+
    pu_extensions      = sep "x" (sep alphanum{1,8})+

The dispatcher reads one singleton, classifies it with
ExtensionKind.from_singleton() and hands the cursor (positioned after the
singleton) to the matching sub-parser. Each sub-parser consumes its run and
returns the cursor at the next singleton, except private use, which always
runs to the end of the identifier.

A run ends at the next single-character subtag. Empty subtags are never
singletons, so "en-u-" reaches the unicode parser and fails there.
"""

from __future__ import annotations

from typing import assert_never

from localeid.constants import SINGLETON_PRIVATE_USE
from localeid.diagnostics import ErrorTemplate, LocaleSyntaxError
from localeid.enums import ExtensionType, KeywordState
from localeid.syntax.ast import (
    ExtensionKind,
    Extensions,
    LanguageIdentifier,
    OtherExtension,
    PrivateUseExtension,
    TransformedExtension,
    UnicodeLocaleExtension,
)
from localeid.syntax.cursor import ParseResult, TokenCursor
from localeid.syntax.subtags import (
    is_alphanumeric,
    is_extension_value,
    is_language_subtag,
    is_other_value,
    is_private_use_value,
    is_transformed_key,
    is_unicode_key,
)

from .keywords import KeywordAccumulator
from .language import parse_language

__all__ = [
    "parse_extensions",
    "parse_other_extension",
    "parse_private_use_extension",
    "parse_transformed_extension",
    "parse_unicode_locale_extension",
]


def _is_singleton(subtag: str) -> bool:
    return len(subtag) == 1


def _run_subtag(cursor: TokenCursor) -> str | None:
    """Current subtag if it belongs to the active run, else None."""
    subtag = cursor.peek()
    if subtag is None or _is_singleton(subtag):
        return None
    return subtag


def _invalid(cursor: TokenCursor, expected: str, anchor: str) -> LocaleSyntaxError:
    return LocaleSyntaxError(
        ErrorTemplate.invalid_subtag(cursor.current, expected, cursor.span(), anchor),
        input_value=cursor.source,
    )


# ============================================================================
# UNICODE LOCALE (u)
# ============================================================================


def parse_unicode_locale_extension(
    cursor: TokenCursor,
) -> ParseResult[UnicodeLocaleExtension]:
    """Parse attributes and keywords of a 'u' extension.

    Values before the first key are attributes. A key may have no values.

    Example:
        >>> cursor = TokenCursor.from_source("attr1-kz-value2")
        >>> result = parse_unicode_locale_extension(cursor)
        >>> result.value.attributes, result.value.get("kz")
        (('attr1',), ('value2',))
    """
    attributes: list[str] = []
    keywords = KeywordAccumulator(allow_empty=True)

    while (subtag := _run_subtag(cursor)) is not None:
        if is_unicode_key(subtag):
            keywords.start_key(subtag, cursor.span())
        elif is_extension_value(subtag):
            if keywords.state is KeywordState.SEEKING_KEY:
                attributes.append(subtag.lower())
            else:
                keywords.add_value(subtag)
        else:
            raise _invalid(
                cursor,
                "a key (2 characters) or a value (3-8 alphanumerics)",
                "unicode_locale_extensions",
            )
        cursor = cursor.advance()

    return ParseResult(
        UnicodeLocaleExtension(attributes=tuple(attributes), keywords=keywords.finish()),
        cursor,
    )


# ============================================================================
# TRANSFORMED (t)
# ============================================================================


def parse_transformed_extension(
    cursor: TokenCursor,
) -> ParseResult[TransformedExtension]:
    """Parse the optional source language and fields of a 't' extension.

    The source language may only appear once, before the first key. Every
    key needs at least one value.

    Example:
        >>> cursor = TokenCursor.from_source("en-Latn-US-t1-value1")
        >>> result = parse_transformed_extension(cursor)
        >>> str(result.value.tlang), result.value.get("t1")
        ('en-Latn-US', ('value1',))
    """
    tlang: LanguageIdentifier | None = None
    fields = KeywordAccumulator(allow_empty=False)

    while (subtag := _run_subtag(cursor)) is not None:
        if is_transformed_key(subtag):
            fields.start_key(subtag, cursor.span())
        elif (
            fields.state is KeywordState.SEEKING_KEY
            and tlang is None
            and is_language_subtag(subtag)
        ):
            result = parse_language(cursor)
            tlang, cursor = result.value, result.cursor
            continue
        elif is_extension_value(subtag) and (
            fields.state is KeywordState.ACCUMULATING_VALUES
        ):
            fields.add_value(subtag)
        else:
            raise _invalid(
                cursor,
                "a key (letter and digit) or a value (3-8 alphanumerics) after a key",
                "transformed_extensions",
            )
        cursor = cursor.advance()

    return ParseResult(TransformedExtension(tlang=tlang, fields=fields.finish()), cursor)


# ============================================================================
# PRIVATE USE (x) AND OTHER
# ============================================================================


def parse_private_use_extension(
    cursor: TokenCursor,
) -> ParseResult[PrivateUseExtension]:
    """Consume every remaining subtag as a private use value.

    Raises:
        LocaleSyntaxError: UNEXPECTED on a second 'x' singleton,
            INVALID_SUBTAG on a value that is not 1-8 alphanumerics
    """
    values: list[str] = []

    while (subtag := cursor.peek()) is not None:
        if subtag.lower() == SINGLETON_PRIVATE_USE:
            raise LocaleSyntaxError(
                ErrorTemplate.duplicate_private_use(cursor.span()),
                input_value=cursor.source,
            )
        if not is_private_use_value(subtag):
            raise _invalid(cursor, "1-8 alphanumerics", "pu_extensions")
        values.append(subtag.lower())
        cursor = cursor.advance()

    return ParseResult(PrivateUseExtension(values=tuple(values)), cursor)


def parse_other_extension(
    cursor: TokenCursor, singleton: str
) -> ParseResult[OtherExtension]:
    """Consume values of an extension with an unassigned singleton."""
    values: list[str] = []

    while (subtag := _run_subtag(cursor)) is not None:
        if not is_other_value(subtag):
            raise _invalid(cursor, "2-8 alphanumerics", "other_extensions")
        values.append(subtag.lower())
        cursor = cursor.advance()

    return ParseResult(OtherExtension(singleton=singleton, values=tuple(values)), cursor)


# ============================================================================
# DISPATCHER
# ============================================================================


def parse_extensions(cursor: TokenCursor) -> ParseResult[Extensions]:
    """Parse every extension from cursor to the end of input.

    Blocks of the same kind are kept in encounter order. The returned
    cursor is always at EOF.

    Raises:
        LocaleSyntaxError: INVALID_SUBTAG where a singleton was expected,
            INVALID_EXTENSION for a token starting with a non-alphanumeric
            character or an empty run, plus any error of the sub-parsers
    """
    unicode_locale: list[UnicodeLocaleExtension] = []
    transformed: list[TransformedExtension] = []
    other: list[OtherExtension] = []
    private_use: PrivateUseExtension | None = None

    while not cursor.is_eof:
        singleton, span = cursor.current, cursor.span()
        # Classified by its first character, so "$$" is a bad singleton too.
        if singleton and not is_alphanumeric(singleton[0]):
            raise LocaleSyntaxError(
                ErrorTemplate.invalid_extension(singleton, span),
                input_value=cursor.source,
            )
        if not _is_singleton(singleton):
            raise _invalid(cursor, "an extension singleton", "extensions")
        kind = ExtensionKind.from_singleton(singleton, span)
        cursor = cursor.advance()

        following = cursor.peek()
        # Private use values may be a single character.
        if following is None or (
            _is_singleton(following) and kind.type is not ExtensionType.PRIVATE_USE
        ):
            raise LocaleSyntaxError(
                ErrorTemplate.empty_extension(singleton, span),
                input_value=cursor.source,
            )

        match kind.type:
            case ExtensionType.UNICODE_LOCALE:
                u_result = parse_unicode_locale_extension(cursor)
                unicode_locale.append(u_result.value)
                cursor = u_result.cursor
            case ExtensionType.TRANSFORMED:
                t_result = parse_transformed_extension(cursor)
                transformed.append(t_result.value)
                cursor = t_result.cursor
            case ExtensionType.PRIVATE_USE:
                pu_result = parse_private_use_extension(cursor)
                private_use = pu_result.value
                cursor = pu_result.cursor
            case ExtensionType.OTHER:
                other_result = parse_other_extension(cursor, kind.singleton)
                other.append(other_result.value)
                cursor = other_result.cursor
            case _:
                assert_never(kind.type)

    return ParseResult(
        Extensions(
            unicode_locale=tuple(unicode_locale) or None,
            transformed=tuple(transformed) or None,
            other=tuple(other) or None,
            private_use=private_use,
        ),
        cursor,
    )
