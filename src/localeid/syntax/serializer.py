"""Canonical rendering of parsed locale identifiers.

Converts structures back to hyphen-joined text. Fields already hold their
canonical case (the parser normalizes at construction), so rendering is a
pure join and parse(serialize(x)) == x for every parsed value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import assert_never

from localeid.constants import LANG_UND, SEP, SINGLETON_PRIVATE_USE

from .ast import (
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

__all__ = ["serialize"]


def _keyword_parts(entries: tuple[Keyword, ...]) -> list[str]:
    parts: list[str] = []
    for entry in entries:
        parts.append(entry.key)
        parts.extend(entry.values)
    return parts


def _language_parts(node: LanguageIdentifier) -> list[str]:
    parts = [node.language or LANG_UND]
    if node.script is not None:
        parts.append(node.script)
    if node.region is not None:
        parts.append(node.region)
    parts.extend(node.variants or ())
    return parts


def _parts(node: Node) -> list[str]:
    match node:
        case LanguageIdentifier():
            return _language_parts(node)
        case UnicodeLocaleExtension(attributes=attributes, keywords=keywords):
            return [str(node.kind), *attributes, *_keyword_parts(keywords)]
        case TransformedExtension(tlang=tlang, fields=fields):
            parts = [str(node.kind)]
            if tlang is not None:
                parts.extend(_language_parts(tlang))
            parts.extend(_keyword_parts(fields))
            return parts
        case PrivateUseExtension(values=values):
            return [SINGLETON_PRIVATE_USE, *values]
        case OtherExtension(singleton=singleton, values=values):
            return [singleton, *values]
        case Extensions():
            parts = []
            for block in node.blocks():
                parts.extend(_parts(block))
            return parts
        case LocaleIdentifier(language=language, extensions=extensions):
            return [*_language_parts(language), *_parts(extensions)]
        case MeasureUnit(values=values):
            return list(values)
        case SubdivisionIdentifier(region=region, suffix=suffix):
            return [region + suffix]
        case _:
            assert_never(node)


def serialize(node: Node) -> str:
    """Render node in canonical hyphen-separated form.

    Args:
        node: Any parsed structure

    Returns:
        Canonical identifier text

    Example:
        >>> serialize(LanguageIdentifier("", None, "US"))
        'und-US'
        >>> serialize(SubdivisionIdentifier("us", "sct"))
        'ussct'
    """
    return SEP.join(_parts(node))
