"""Structured representation of parsed locale identifiers.

Every node is a frozen, slotted dataclass: results are built once per parse
call and never mutated afterwards, so they are safe to share between
threads and usable as dict keys. Sequences are tuples; ordered key/value
mappings are tuples of Keyword entries so encounter order is preserved.

str(node) renders the canonical form (see :mod:`localeid.syntax.serializer`).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeIs

from localeid.constants import (
    SINGLETON_PRIVATE_USE,
    SINGLETON_TRANSFORMED,
    SINGLETON_UNICODE_LOCALE,
)
from localeid.diagnostics import ErrorTemplate, LocaleSyntaxError
from localeid.enums import ExtensionType

if TYPE_CHECKING:
    from localeid.diagnostics import SourceSpan

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language identifier
    "LanguageIdentifier",
    # Extensions
    "ExtensionKind",
    "Keyword",
    "UnicodeLocaleExtension",
    "TransformedExtension",
    "PrivateUseExtension",
    "OtherExtension",
    "Extension",
    "Extensions",
    # Locale identifier
    "LocaleIdentifier",
    # Standalone identifiers
    "MeasureUnit",
    "SubdivisionIdentifier",
    # Type aliases
    "Node",
]


def _render(node: Node) -> str:
    from .serializer import serialize  # noqa: PLC0415 - circular

    return serialize(node)


# ============================================================================
# LANGUAGE IDENTIFIER
# ============================================================================


@dataclass(frozen=True, slots=True)
class LanguageIdentifier:
    """unicode_language_id: language [script] [region] variant*.

    Attributes:
        language: Language subtag, lowercase; empty for "root"/"und"
        script: Script subtag, titlecase (e.g. "Latn")
        region: Region subtag, uppercase or 3 digits (e.g. "US", "419")
        variants: Variant subtags, lowercase, deduplicated in first-seen
            order; None when there are no variants

    Example:
        >>> lang = LanguageIdentifier.parse("en-Latn-US-macos")
        >>> lang.script
        'Latn'
        >>> str(lang)
        'en-Latn-US-macos'
    """

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] | None = None

    @classmethod
    def parse(cls, source: str, *, strict: bool = True) -> LanguageIdentifier:
        """Parse source, raising LocaleSyntaxError on failure."""
        from .parser import LocaleParser  # noqa: PLC0415 - circular

        return LocaleParser().parse_language_id(source, strict=strict)

    def __str__(self) -> str:
        return _render(self)

    @staticmethod
    def guard(node: object) -> TypeIs[LanguageIdentifier]:
        """Type guard for LanguageIdentifier."""
        return isinstance(node, LanguageIdentifier)


# ============================================================================
# EXTENSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class ExtensionKind:
    """Extension sub-grammar plus the singleton that selected it.

    The singleton is only informative for OTHER; for the three named kinds
    it always equals the ExtensionType value.

    Example:
        >>> ExtensionKind.from_singleton("T")
        ExtensionKind(type=<ExtensionType.TRANSFORMED: 't'>, singleton='t')
        >>> ExtensionKind.from_singleton("a").type
        <ExtensionType.OTHER: 'other'>
    """

    type: ExtensionType
    singleton: str

    @classmethod
    def from_singleton(
        cls, singleton: str, span: SourceSpan | None = None
    ) -> ExtensionKind:
        """Classify a singleton case-insensitively.

        Raises:
            LocaleSyntaxError: INVALID_EXTENSION if the singleton is not a
                single ASCII alphanumeric character
        """
        key = singleton.lower()
        match key:
            case "u":
                return cls(ExtensionType.UNICODE_LOCALE, SINGLETON_UNICODE_LOCALE)
            case "t":
                return cls(ExtensionType.TRANSFORMED, SINGLETON_TRANSFORMED)
            case "x":
                return cls(ExtensionType.PRIVATE_USE, SINGLETON_PRIVATE_USE)
            case _ if len(key) == 1 and key.isascii() and key.isalnum():
                return cls(ExtensionType.OTHER, key)
            case _:
                raise LocaleSyntaxError(
                    ErrorTemplate.invalid_extension(singleton, span),
                    input_value=singleton,
                )

    def __str__(self) -> str:
        return self.singleton


@dataclass(frozen=True, slots=True)
class Keyword:
    """One entry of an ordered key/value mapping (ufield or tfield)."""

    key: str
    values: tuple[str, ...] = ()


def _lookup(entries: tuple[Keyword, ...], key: str) -> tuple[str, ...] | None:
    wanted = key.lower()
    for entry in entries:
        if entry.key == wanted:
            return entry.values
    return None


@dataclass(frozen=True, slots=True)
class UnicodeLocaleExtension:
    """unicode_locale_extensions: u (attribute)* (ukey uvalue*)*.

    Attributes:
        attributes: Attributes preceding the first key, in input order
        keywords: Keys with their values, in encounter order; keys unique

    Example:
        >>> ext = LocaleIdentifier.parse("en-US-u-hc-h12").extensions.unicode_locale[0]
        >>> ext.get("hc")
        ('h12',)
    """

    attributes: tuple[str, ...] = ()
    keywords: tuple[Keyword, ...] = ()

    @property
    def kind(self) -> ExtensionKind:
        return ExtensionKind(ExtensionType.UNICODE_LOCALE, SINGLETON_UNICODE_LOCALE)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(entry.key for entry in self.keywords)

    def get(self, key: str) -> tuple[str, ...] | None:
        """Values for key (case-insensitive), or None if the key is absent."""
        return _lookup(self.keywords, key)

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True, slots=True)
class TransformedExtension:
    """transformed_extensions: t [tlang] (tkey tvalue+)*.

    Attributes:
        tlang: Source language of the transformed content
        fields: tkeys with their values, in encounter order; keys unique and
            each with at least one value
    """

    tlang: LanguageIdentifier | None = None
    fields: tuple[Keyword, ...] = ()

    @property
    def kind(self) -> ExtensionKind:
        return ExtensionKind(ExtensionType.TRANSFORMED, SINGLETON_TRANSFORMED)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(entry.key for entry in self.fields)

    def get(self, key: str) -> tuple[str, ...] | None:
        """Values for key (case-insensitive), or None if the key is absent."""
        return _lookup(self.fields, key)

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True, slots=True)
class PrivateUseExtension:
    """pu_extensions: x (alphanum{1,8})+."""

    values: tuple[str, ...]

    @property
    def kind(self) -> ExtensionKind:
        return ExtensionKind(ExtensionType.PRIVATE_USE, SINGLETON_PRIVATE_USE)

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True, slots=True)
class OtherExtension:
    """other_extensions: singleton (alphanum{2,8})+ for any other singleton."""

    singleton: str
    values: tuple[str, ...]

    @property
    def kind(self) -> ExtensionKind:
        return ExtensionKind(ExtensionType.OTHER, self.singleton)

    def __str__(self) -> str:
        return _render(self)


type Extension = (
    UnicodeLocaleExtension | TransformedExtension | PrivateUseExtension | OtherExtension
)


@dataclass(frozen=True, slots=True)
class Extensions:
    """All extensions of one locale identifier, grouped by kind.

    unicode_locale, transformed and other keep every block in encounter
    order; None means the kind never appeared. At most one private use
    block exists.
    """

    unicode_locale: tuple[UnicodeLocaleExtension, ...] | None = None
    transformed: tuple[TransformedExtension, ...] | None = None
    other: tuple[OtherExtension, ...] | None = None
    private_use: PrivateUseExtension | None = None

    @property
    def is_empty(self) -> bool:
        return not self.blocks()

    def blocks(self) -> tuple[Extension, ...]:
        """Every block in canonical rendering order (private use last)."""
        blocks: list[Extension] = []
        blocks.extend(self.unicode_locale or ())
        blocks.extend(self.transformed or ())
        blocks.extend(self.other or ())
        if self.private_use is not None:
            blocks.append(self.private_use)
        return tuple(blocks)

    def __str__(self) -> str:
        return _render(self)


# ============================================================================
# LOCALE IDENTIFIER
# ============================================================================


@dataclass(frozen=True, slots=True)
class LocaleIdentifier:
    """unicode_locale_id: unicode_language_id extensions* pu_extensions?.

    Example:
        >>> locale = LocaleIdentifier.parse("de-Latn-DE-u-ca-buddhist")
        >>> locale.language.region
        'DE'
        >>> str(locale)
        'de-Latn-DE-u-ca-buddhist'
    """

    language: LanguageIdentifier
    extensions: Extensions = Extensions()

    @classmethod
    def parse(cls, source: str) -> LocaleIdentifier:
        """Parse source, raising LocaleSyntaxError on failure."""
        from .parser import LocaleParser  # noqa: PLC0415 - circular

        return LocaleParser().parse_locale_id(source)

    def __str__(self) -> str:
        return _render(self)

    @staticmethod
    def guard(node: object) -> TypeIs[LocaleIdentifier]:
        """Type guard for LocaleIdentifier."""
        return isinstance(node, LocaleIdentifier)


# ============================================================================
# STANDALONE IDENTIFIERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class MeasureUnit:
    """unicode_measure_unit: alphanum{3,8} (sep alphanum{3,8})*."""

    values: tuple[str, ...]

    @classmethod
    def parse(cls, source: str) -> MeasureUnit:
        """Parse source, raising LocaleSyntaxError on failure."""
        from .parser import LocaleParser  # noqa: PLC0415 - circular

        return LocaleParser().parse_measure_unit(source)

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True, slots=True)
class SubdivisionIdentifier:
    """unicode_subdivision_id: (alpha{2} | digit{3}) alphanum{3,6}.

    Example:
        >>> sub = SubdivisionIdentifier.parse("ussct")
        >>> (sub.region, sub.suffix)
        ('us', 'sct')
    """

    region: str
    suffix: str

    @classmethod
    def parse(cls, source: str) -> SubdivisionIdentifier:
        """Parse source, raising LocaleSyntaxError on failure."""
        from .parser import LocaleParser  # noqa: PLC0415 - circular

        return LocaleParser().parse_subdivision_id(source)

    def __str__(self) -> str:
        return _render(self)


type Node = (
    LanguageIdentifier
    | LocaleIdentifier
    | Extensions
    | Extension
    | MeasureUnit
    | SubdivisionIdentifier
)
