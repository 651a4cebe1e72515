"""Type guard functions for parsing result type narrowing.

All parse_* functions return tuple[result, tuple[LocaleSyntaxError, ...]].
Type guards check the result component to narrow types for mypy.

Note: All guards accept None and return False. This simplifies the pattern from
`if not errors and result is not None` to just `if is_valid_locale_id(result)`.

Example:
    >>> from localeid.parsing import parse_locale_id
    >>> from localeid.parsing.guards import is_valid_locale_id
    >>> result, errors = parse_locale_id("de-DE-u-ca-buddhist")
    >>> if is_valid_locale_id(result):
    ...     region = result.language.region
"""

from typing import TypeIs

from localeid.syntax.ast import LanguageIdentifier, LocaleIdentifier

__all__ = [
    "is_valid_language_id",
    "is_valid_locale_id",
]


def is_valid_language_id(value: LanguageIdentifier | None) -> TypeIs[LanguageIdentifier]:
    """Type guard: Check if parse_language_id() produced an identifier.

    Args:
        value: LanguageIdentifier from parse_language_id() result tuple
            (None on error)

    Returns:
        True if value is a LanguageIdentifier, False otherwise
    """
    return LanguageIdentifier.guard(value)


def is_valid_locale_id(value: LocaleIdentifier | None) -> TypeIs[LocaleIdentifier]:
    """Type guard: Check if parse_locale_id() produced an identifier."""
    return LocaleIdentifier.guard(value)
