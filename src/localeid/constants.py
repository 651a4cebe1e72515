"""Shared constants for localeid.

Centralizes the grammar constants of the Unicode locale identifier syntax
(UTS #35) so that the tokenizer, classifiers, parsers and serializer agree
on a single source of truth.

Constants are grouped by domain:
- Separators: Subtag delimiters accepted on input and emitted on output
- Reserved subtags: Language markers with special meaning
- Extension singletons: Discriminators selecting an extension sub-grammar
- Subtag lengths: Bounds used by the classifiers
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Separators
    "SEP",
    "LEGACY_SEP",
    "POSIX_SEP",
    # Reserved subtags
    "LANG_ROOT",
    "LANG_UND",
    "LANG_EMPTY",
    # Extension singletons
    "SINGLETON_UNICODE_LOCALE",
    "SINGLETON_TRANSFORMED",
    "SINGLETON_PRIVATE_USE",
    # Subtag lengths
    "LANGUAGE_MIN_LENGTH",
    "LANGUAGE_MAX_LENGTH",
    "SCRIPT_LENGTH",
    "VARIANT_MIN_LENGTH",
    "VARIANT_MAX_LENGTH",
    "EXTENSION_KEY_LENGTH",
    "EXTENSION_VALUE_MIN_LENGTH",
    "EXTENSION_VALUE_MAX_LENGTH",
    "OTHER_VALUE_MIN_LENGTH",
    "PRIVATE_USE_VALUE_MIN_LENGTH",
    "SUBDIVISION_MIN_LENGTH",
    "SUBDIVISION_MAX_LENGTH",
    "SUBDIVISION_SUFFIX_MIN_LENGTH",
    "SUBDIVISION_SUFFIX_MAX_LENGTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Fallbacks
    "FALLBACK_LOCALE",
]

# ============================================================================
# SEPARATORS
# ============================================================================

# Canonical subtag separator. Output always uses this character.
SEP: str = "-"

# Legacy separator accepted on input (POSIX-style "en_US").
LEGACY_SEP: str = "_"

# Separator used when converting to POSIX/Babel locale codes.
POSIX_SEP: str = "_"

# ============================================================================
# RESERVED SUBTAGS
# ============================================================================

# "root" is the CLDR name of the root locale. Normalized to LANG_EMPTY.
LANG_ROOT: str = "root"

# "und" (undetermined) is the BCP 47 placeholder language. Normalized to
# LANG_EMPTY on input and emitted back when rendering an empty language.
LANG_UND: str = "und"

LANG_EMPTY: str = ""

# ============================================================================
# EXTENSION SINGLETONS
# ============================================================================

SINGLETON_UNICODE_LOCALE: str = "u"
SINGLETON_TRANSFORMED: str = "t"
SINGLETON_PRIVATE_USE: str = "x"

# ============================================================================
# SUBTAG LENGTHS
# ============================================================================

# unicode_language_subtag: alpha{2,3} | alpha{5,8}
LANGUAGE_MIN_LENGTH: int = 2
LANGUAGE_MAX_LENGTH: int = 8

# unicode_script_subtag: alpha{4}
SCRIPT_LENGTH: int = 4

# unicode_variant_subtag: alphanum{5,8} | digit alphanum{3}
VARIANT_MIN_LENGTH: int = 4
VARIANT_MAX_LENGTH: int = 8

# ukey / tkey are always two characters.
EXTENSION_KEY_LENGTH: int = 2

# attribute, uvalue, tvalue and measure unit components: alphanum{3,8}
EXTENSION_VALUE_MIN_LENGTH: int = 3
EXTENSION_VALUE_MAX_LENGTH: int = 8

# other_extensions values: alphanum{2,8}
OTHER_VALUE_MIN_LENGTH: int = 2

# pu_extensions values: alphanum{1,8}
PRIVATE_USE_VALUE_MIN_LENGTH: int = 1

# unicode_subdivision_id: (alpha{2} | digit{3}) alphanum{3,6}
SUBDIVISION_MIN_LENGTH: int = 2
SUBDIVISION_MAX_LENGTH: int = 7
SUBDIVISION_SUFFIX_MIN_LENGTH: int = 3
SUBDIVISION_SUFFIX_MAX_LENGTH: int = 6

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters. 0 disables the limit; callers
# parsing untrusted input opt in through ParserConfig(max_source_size=...).
MAX_SOURCE_SIZE: int = 0

# ============================================================================
# FALLBACKS
# ============================================================================

# Locale returned by get_system_locale() when nothing can be detected.
FALLBACK_LOCALE: str = "en-US"
