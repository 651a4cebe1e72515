"""Language identifier state machine.

Grammar:
    unicode_language_id = unicode_language_subtag
                          (sep unicode_script_subtag)?
                          (sep unicode_region_subtag)?
                          (sep unicode_variant_subtag)*

After the mandatory language subtag the parser moves through three
positions. Each position names which optional subtags may still appear:

    EXPECT_SCRIPT_REGION_VARIANT --script--> EXPECT_REGION_VARIANT
    EXPECT_SCRIPT_REGION_VARIANT --region--> EXPECT_VARIANT
    EXPECT_SCRIPT_REGION_VARIANT --variant-> EXPECT_VARIANT
    EXPECT_REGION_VARIANT        --region--> EXPECT_VARIANT
    EXPECT_REGION_VARIANT        --variant-> EXPECT_VARIANT
    EXPECT_VARIANT               --variant-> EXPECT_VARIANT

Any other subtag stops the machine without being consumed. Deciding whether
that subtag is an error belongs to the caller: the locale parser hands it to
the extension dispatcher, the transformed extension continues with tfields,
and a strict language parse rejects it.
"""

from __future__ import annotations

from localeid.diagnostics import ErrorTemplate, LocaleSyntaxError
from localeid.enums import ParserState
from localeid.syntax.ast import LanguageIdentifier
from localeid.syntax.cursor import ParseResult, TokenCursor
from localeid.syntax.subtags import (
    is_region_subtag,
    is_script_subtag,
    is_variant_subtag,
    language_subtag,
)

__all__ = ["parse_language"]


def parse_language(cursor: TokenCursor) -> ParseResult[LanguageIdentifier]:
    """Parse a language identifier starting at cursor.

    Args:
        cursor: Position of the language subtag

    Returns:
        ParseResult with the identifier and the cursor at the first subtag
        that is not part of it

    Raises:
        LocaleSyntaxError: MISSING at end of input, INVALID_LANGUAGE if the
            first subtag is not a language subtag
    """
    if cursor.is_eof:
        raise LocaleSyntaxError(
            ErrorTemplate.missing("language subtag"), input_value=cursor.source
        )

    language = language_subtag(cursor.current, cursor.span())
    cursor = cursor.advance()

    script: str | None = None
    region: str | None = None
    # dict preserves insertion order; keys dedupe variants
    variants: dict[str, None] = {}
    state = ParserState.EXPECT_SCRIPT_REGION_VARIANT

    while (subtag := cursor.peek()) is not None:
        match state:
            case ParserState.EXPECT_SCRIPT_REGION_VARIANT if is_script_subtag(subtag):
                script = subtag.title()
                state = ParserState.EXPECT_REGION_VARIANT
            case (
                ParserState.EXPECT_SCRIPT_REGION_VARIANT
                | ParserState.EXPECT_REGION_VARIANT
            ) if is_region_subtag(subtag):
                region = subtag.upper()
                state = ParserState.EXPECT_VARIANT
            case _ if is_variant_subtag(subtag):
                variants.setdefault(subtag.lower())
                state = ParserState.EXPECT_VARIANT
            case _:
                break
        cursor = cursor.advance()

    return ParseResult(
        LanguageIdentifier(
            language=language,
            script=script,
            region=region,
            variants=tuple(variants) if variants else None,
        ),
        cursor,
    )
