"""Non-raising parsing API: identifier strings to structured results.

- Functions NEVER raise LocaleSyntaxError - errors are returned in tuple
- Consistent with the (result, errors) convention used for all parse_*()
  functions of this package

Public API:
    Parsing Functions:
        parse_language_id - Returns tuple[LanguageIdentifier | None, tuple[LocaleSyntaxError, ...]]
        parse_locale_id - Returns tuple[LocaleIdentifier | None, tuple[LocaleSyntaxError, ...]]
        parse_extensions - Returns tuple[Extensions | None, tuple[LocaleSyntaxError, ...]]
        parse_measure_unit - Returns tuple[MeasureUnit | None, tuple[LocaleSyntaxError, ...]]
        parse_subdivision_id - Returns tuple[SubdivisionIdentifier | None, tuple[LocaleSyntaxError, ...]]

    Type Guards:
        is_valid_language_id - TypeIs guard for LanguageIdentifier (not None)
        is_valid_locale_id - TypeIs guard for LocaleIdentifier (not None)

Example:
    >>> from localeid.parsing import parse_locale_id
    >>> result, errors = parse_locale_id("sr-Latn-RS-u-nu-latn")
    >>> if not errors:
    ...     print(result)
    sr-Latn-RS-u-nu-latn

Python 3.13+. Zero external dependencies.
"""

from .guards import is_valid_language_id, is_valid_locale_id
from .identifiers import (
    parse_extensions,
    parse_language_id,
    parse_locale_id,
    parse_measure_unit,
    parse_subdivision_id,
)

__all__ = [
    # Type guards
    "is_valid_language_id",
    "is_valid_locale_id",
    # Parsing functions
    "parse_extensions",
    "parse_language_id",
    "parse_locale_id",
    "parse_measure_unit",
    "parse_subdivision_id",
]
