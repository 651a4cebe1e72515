"""Subtag classification rules for the Unicode locale identifier grammar.

This module is the single source of truth for the shape of every subtag
production, so the language parser, the extension sub-parsers and the
measure/subdivision parsers all agree.

Grammar (UTS #35, case-insensitive, ASCII only):
    unicode_language_subtag = alpha{2,3} | alpha{5,8}   ; plus "root"
    unicode_script_subtag   = alpha{4}
    unicode_region_subtag   = alpha{2} | digit{3}
    unicode_variant_subtag  = alphanum{5,8} | digit alphanum{3}
    ukey                    = alphanum alpha
    tkey                    = alpha digit
    attribute, uvalue, tvalue = alphanum{3,8}
    other value             = alphanum{2,8}
    pu value                = alphanum{1,8}

Length and character-class ranges are mutually exclusive except for
4-letter tokens, which are rejected as language subtags so they can only
be scripts. Which classifier runs is decided by the caller's position.

Rationale:
    Python's str.isalpha()/str.isalnum() accept Unicode letters and digits.
    Every predicate pairs them with str.isascii() so that identifiers such
    as "é" or "٣٣٣" are rejected, matching other UTS #35 implementations.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

from localeid.constants import (
    EXTENSION_KEY_LENGTH,
    EXTENSION_VALUE_MAX_LENGTH,
    EXTENSION_VALUE_MIN_LENGTH,
    LANG_EMPTY,
    LANG_ROOT,
    LANG_UND,
    LANGUAGE_MAX_LENGTH,
    LANGUAGE_MIN_LENGTH,
    OTHER_VALUE_MIN_LENGTH,
    PRIVATE_USE_VALUE_MIN_LENGTH,
    SCRIPT_LENGTH,
    VARIANT_MAX_LENGTH,
    VARIANT_MIN_LENGTH,
)
from localeid.diagnostics import ErrorTemplate, LocaleSyntaxError, SourceSpan

__all__ = [
    "is_alpha",
    "is_alphanumeric",
    "is_digit",
    "is_extension_value",
    "is_language_subtag",
    "is_measure_unit_value",
    "is_other_value",
    "is_private_use_value",
    "is_region_subtag",
    "is_script_subtag",
    "is_transformed_key",
    "is_unicode_key",
    "is_variant_subtag",
    "language_subtag",
    "region_subtag",
    "script_subtag",
    "variant_subtag",
]


# ============================================================================
# CHARACTER CLASSES
# ============================================================================


def is_alpha(text: str) -> bool:
    """Check that text is non-empty and all ASCII letters."""
    return text.isascii() and text.isalpha()


def is_digit(text: str) -> bool:
    """Check that text is non-empty and all ASCII digits."""
    return text.isascii() and text.isdigit()


def is_alphanumeric(text: str) -> bool:
    """Check that text is non-empty and all ASCII letters or digits."""
    return text.isascii() and text.isalnum()


# ============================================================================
# LANGUAGE IDENTIFIER SUBTAGS
# ============================================================================


def is_language_subtag(subtag: str) -> bool:
    """Check subtag against unicode_language_subtag.

    Example:
        >>> is_language_subtag("en")
        True
        >>> is_language_subtag("food")  # 4 letters are reserved for scripts
        False
    """
    length = len(subtag)
    return (
        LANGUAGE_MIN_LENGTH <= length <= LANGUAGE_MAX_LENGTH
        and length != SCRIPT_LENGTH
        and is_alpha(subtag)
    )


def is_script_subtag(subtag: str) -> bool:
    """Check subtag against unicode_script_subtag (exactly 4 letters)."""
    return len(subtag) == SCRIPT_LENGTH and is_alpha(subtag)


def is_region_subtag(subtag: str) -> bool:
    """Check subtag against unicode_region_subtag (2 letters or 3 digits)."""
    length = len(subtag)
    return (length == 2 and is_alpha(subtag)) or (length == 3 and is_digit(subtag))


def is_variant_subtag(subtag: str) -> bool:
    """Check subtag against unicode_variant_subtag.

    Example:
        >>> is_variant_subtag("macos")
        True
        >>> is_variant_subtag("1996")
        True
        >>> is_variant_subtag("abcd")  # 4 chars must start with a digit
        False
    """
    length = len(subtag)
    if not VARIANT_MIN_LENGTH <= length <= VARIANT_MAX_LENGTH:
        return False
    if length == VARIANT_MIN_LENGTH:
        return is_digit(subtag[0]) and is_alphanumeric(subtag[1:])
    return is_alphanumeric(subtag)


# ============================================================================
# EXTENSION SUBTAGS
# ============================================================================


def is_unicode_key(subtag: str) -> bool:
    """Check subtag against ukey: alphanum alpha (e.g. 'ca', '1k')."""
    return (
        len(subtag) == EXTENSION_KEY_LENGTH
        and is_alphanumeric(subtag[0])
        and is_alpha(subtag[1])
    )


def is_transformed_key(subtag: str) -> bool:
    """Check subtag against tkey: alpha digit (e.g. 'h0', 'm0')."""
    return (
        len(subtag) == EXTENSION_KEY_LENGTH
        and is_alpha(subtag[0])
        and is_digit(subtag[1])
    )


def _is_alphanumeric_between(subtag: str, min_length: int, max_length: int) -> bool:
    return min_length <= len(subtag) <= max_length and is_alphanumeric(subtag)


def is_extension_value(subtag: str) -> bool:
    """Check subtag against attribute/uvalue/tvalue: alphanum{3,8}."""
    return _is_alphanumeric_between(
        subtag, EXTENSION_VALUE_MIN_LENGTH, EXTENSION_VALUE_MAX_LENGTH
    )


def is_other_value(subtag: str) -> bool:
    """Check subtag against other extension values: alphanum{2,8}."""
    return _is_alphanumeric_between(
        subtag, OTHER_VALUE_MIN_LENGTH, EXTENSION_VALUE_MAX_LENGTH
    )


def is_private_use_value(subtag: str) -> bool:
    """Check subtag against private use values: alphanum{1,8}."""
    return _is_alphanumeric_between(
        subtag, PRIVATE_USE_VALUE_MIN_LENGTH, EXTENSION_VALUE_MAX_LENGTH
    )


def is_measure_unit_value(subtag: str) -> bool:
    """Check subtag against unicode_measure_unit components: alphanum{3,8}."""
    return is_extension_value(subtag)


# ============================================================================
# VALIDATING ACCESSORS
# ============================================================================
#
# Each accessor returns the subtag in canonical case or raises
# LocaleSyntaxError. Canonical case (BCP 47 section 2.1.1):
#   language, variant: lowercase
#   script: titlecase
#   region: uppercase


def language_subtag(subtag: str, span: SourceSpan | None = None) -> str:
    """Validate a language subtag and return it in canonical form.

    "root" and "und" both normalize to the empty language.

    Raises:
        LocaleSyntaxError: INVALID_LANGUAGE if the subtag does not classify

    Example:
        >>> language_subtag("EN")
        'en'
        >>> language_subtag("root")
        ''
    """
    lowered = subtag.lower()
    if lowered == LANG_ROOT:
        return LANG_EMPTY
    if not is_language_subtag(subtag):
        raise LocaleSyntaxError(
            ErrorTemplate.invalid_language(subtag, span), input_value=subtag
        )
    if lowered == LANG_UND:
        return LANG_EMPTY
    return lowered


def script_subtag(subtag: str, span: SourceSpan | None = None) -> str:
    """Validate a script subtag and return it titlecased ('latn' -> 'Latn').

    Raises:
        LocaleSyntaxError: INVALID_SUBTAG if the subtag does not classify
    """
    if not is_script_subtag(subtag):
        raise LocaleSyntaxError(
            ErrorTemplate.invalid_subtag(
                subtag, "a script subtag (4 letters)", span, "unicode_script_subtag"
            ),
            input_value=subtag,
        )
    return subtag.title()


def region_subtag(subtag: str, span: SourceSpan | None = None) -> str:
    """Validate a region subtag and return it uppercased ('us' -> 'US').

    Raises:
        LocaleSyntaxError: INVALID_SUBTAG if the subtag does not classify
    """
    if not is_region_subtag(subtag):
        raise LocaleSyntaxError(
            ErrorTemplate.invalid_subtag(
                subtag,
                "a region subtag (2 letters or 3 digits)",
                span,
                "unicode_region_subtag",
            ),
            input_value=subtag,
        )
    return subtag.upper()


def variant_subtag(subtag: str, span: SourceSpan | None = None) -> str:
    """Validate a variant subtag and return it lowercased.

    Raises:
        LocaleSyntaxError: INVALID_SUBTAG if the subtag does not classify
    """
    if not is_variant_subtag(subtag):
        raise LocaleSyntaxError(
            ErrorTemplate.invalid_subtag(
                subtag,
                "a variant subtag (5-8 alphanumerics, or a digit and 3 alphanumerics)",
                span,
                "unicode_variant_subtag",
            ),
            input_value=subtag,
        )
    return subtag.lower()
