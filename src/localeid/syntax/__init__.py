"""Unicode locale identifier syntax package.

Provides tokenizer, parser, result structures and serialization.

Python 3.13+.
"""

from .ast import (
    Extension,
    ExtensionKind,
    Extensions,
    Keyword,
    LanguageIdentifier,
    LocaleIdentifier,
    MeasureUnit,
    Node,
    OtherExtension,
    PrivateUseExtension,
    SubdivisionIdentifier,
    TransformedExtension,
    UnicodeLocaleExtension,
)
from .cursor import ParseResult, TokenCursor
from .parser import LocaleParser, ParserConfig
from .serializer import serialize
from .tokenizer import tokenize

__all__ = [
    "Extension",
    "ExtensionKind",
    "Extensions",
    "Keyword",
    "LanguageIdentifier",
    "LocaleIdentifier",
    "LocaleParser",
    "MeasureUnit",
    "Node",
    "OtherExtension",
    "ParseResult",
    "ParserConfig",
    "PrivateUseExtension",
    "SubdivisionIdentifier",
    "TokenCursor",
    "TransformedExtension",
    "UnicodeLocaleExtension",
    "parse",
    "serialize",
    "tokenize",
]


def parse(source: str) -> LocaleIdentifier:
    """Parse a locale identifier string.

    Convenience function for LocaleParser().parse_locale_id().

    Args:
        source: Locale identifier such as "en-US-u-ca-buddhist"

    Returns:
        Parsed LocaleIdentifier

    Raises:
        LocaleSyntaxError: On the first grammar violation

    Example:
        >>> from localeid.syntax import parse
        >>> parse("en-us").language.region
        'US'
    """
    parser = LocaleParser()
    return parser.parse_locale_id(source)
