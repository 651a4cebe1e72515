"""Enumerations for localeid type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ExtensionType(StrEnum):
    """Sub-grammar selected by an extension singleton.

    StrEnum provides automatic string conversion: str(ExtensionType.TRANSFORMED) == "t"
    """

    UNICODE_LOCALE = "u"
    """Unicode locale extension: u-ca-buddhist"""

    TRANSFORMED = "t"
    """Transformed content extension: t-en-h0-hybrid"""

    PRIVATE_USE = "x"
    """Private use extension: x-foo-bar"""

    OTHER = "other"
    """Any other alphanumeric singleton: a-vue-rust"""


class ParserState(StrEnum):
    """Position of the language identifier state machine.

    StrEnum provides automatic string conversion: str(ParserState.EXPECT_VARIANT) == "variant"
    """

    EXPECT_SCRIPT_REGION_VARIANT = "script-region-variant"
    """Language consumed; script, region or variant may follow."""

    EXPECT_REGION_VARIANT = "region-variant"
    """Script consumed; region or variant may follow."""

    EXPECT_VARIANT = "variant"
    """Region or first variant consumed; only variants may follow."""


class KeywordState(StrEnum):
    """State of the key/value accumulator used by u and t extensions.

    StrEnum provides automatic string conversion: str(KeywordState.SEEKING_KEY) == "seeking-key"
    """

    SEEKING_KEY = "seeking-key"
    """No key seen yet; values here are attributes (u) or illegal (t)."""

    ACCUMULATING_VALUES = "accumulating-values"
    """A key is active; values attach to it until the next key or end of run."""


__all__ = [
    "ExtensionType",
    "KeywordState",
    "ParserState",
]
