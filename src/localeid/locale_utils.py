"""Locale utilities: POSIX conversion, system locale detection, Babel bridge.

localeid performs no locale data lookup. These helpers connect parsed
identifiers to the places locale codes come from (the OS environment) and
go to (POSIX-style APIs and Babel).

Python 3.13+. Babel is optional and only needed for to_babel_locale().
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from localeid.constants import FALLBACK_LOCALE, LANG_EMPTY, LANG_ROOT, POSIX_SEP, SEP
from localeid.core.babel_compat import get_locale_class, require_babel
from localeid.syntax.ast import LanguageIdentifier, LocaleIdentifier
from localeid.syntax.parser import LocaleParser

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_system_locale",
    "to_babel_locale",
    "to_posix",
]

logger = logging.getLogger(__name__)

# Pseudo-locales meaning "no locale configured".
_PSEUDO_LOCALES = frozenset({"C", "POSIX"})

# Environment variables in order of precedence.
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def _language_of(identifier: LanguageIdentifier | LocaleIdentifier) -> LanguageIdentifier:
    if isinstance(identifier, LocaleIdentifier):
        return identifier.language
    return identifier


def to_posix(identifier: LanguageIdentifier | LocaleIdentifier) -> str:
    """Render the language identifier part with POSIX separators.

    Extensions have no POSIX equivalent and are dropped.

    Args:
        identifier: Parsed language or locale identifier

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "sr_Latn_RS")

    Example:
        >>> to_posix(LanguageIdentifier.parse("en-Latn-US"))
        'en_Latn_US'
        >>> to_posix(LocaleIdentifier.parse("pt-BR-u-nu-latn"))
        'pt_BR'
    """
    return str(_language_of(identifier)).replace(SEP, POSIX_SEP)


def to_babel_locale(identifier: LanguageIdentifier | LocaleIdentifier) -> Locale:
    """Hand a parsed identifier over to Babel.

    The empty language ("root"/"und") without other subtags maps to Babel's
    root locale.

    Args:
        identifier: Parsed language or locale identifier

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If Babel has no data for the locale

    Example:
        >>> locale = to_babel_locale(LocaleIdentifier.parse("de-AT"))
        >>> locale.territory
        'AT'
    """
    require_babel("to_babel_locale")
    language = _language_of(identifier)
    if language == LanguageIdentifier(language=LANG_EMPTY):
        code = LANG_ROOT
    else:
        code = to_posix(language)
    return get_locale_class().parse(code)


def _strip_posix_suffixes(value: str) -> str:
    """Drop encoding and modifier: "de_DE.UTF-8@euro" -> "de_DE"."""
    return value.split("@", 1)[0].split(".", 1)[0]


def _candidates() -> list[tuple[str, str]]:
    """(origin, value) pairs in detection order."""
    import locale as locale_module  # noqa: PLC0415

    found: list[tuple[str, str]] = []
    try:
        system_locale, _ = locale_module.getlocale()
    except ValueError:
        system_locale = None
    if system_locale:
        found.append(("locale.getlocale()", system_locale))
    for var in _LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if value:
            found.append((var, value))
    return found


def get_system_locale(*, raise_on_failure: bool = False) -> LocaleIdentifier:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Encoding and modifier suffixes are stripped, "C" and "POSIX"
    pseudo-locales are skipped, and values that do not parse as locale
    identifiers are skipped with a debug log entry.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return en-US as fallback.

    Returns:
        Detected locale as a LocaleIdentifier

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> str(get_system_locale())
        'de-DE'
    """
    parser = LocaleParser()
    for origin, value in _candidates():
        code = _strip_posix_suffixes(value)
        if not code or code in _PSEUDO_LOCALES:
            continue
        try:
            return parser.parse_locale_id(code)
        except ValueError as e:
            logger.debug("Ignoring unparsable locale %r from %s: %s", value, origin, e)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    logger.warning("Could not determine system locale. Falling back to %s", FALLBACK_LOCALE)
    return parser.parse_locale_id(FALLBACK_LOCALE)
