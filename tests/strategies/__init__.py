"""Hypothesis strategies for localeid property-based testing.

Usage:
    from tests.strategies import language_ids, locale_ids
    from tests.strategies.locale import subdivision_ids
"""

from .locale import (
    babel_language_ids,
    language_id_parts,
    language_ids,
    locale_ids,
    measure_units,
    mixed_case,
    other_extensions,
    private_use_extensions,
    subdivision_ids,
    transformed_extensions,
    unicode_locale_extensions,
)

__all__ = [
    "babel_language_ids",
    "language_id_parts",
    "language_ids",
    "locale_ids",
    "measure_units",
    "mixed_case",
    "other_extensions",
    "private_use_extensions",
    "subdivision_ids",
    "transformed_extensions",
    "unicode_locale_extensions",
]
