"""localeid - Unicode locale identifier (UTS #35) parser.

Validates identifier strings such as "en-Latn-US" or
"ja-JP-u-ca-japanese-x-foo" and decomposes them into immutable, canonically
cased structures that render back to the same canonical text.

Public API:
    LocaleParser - Raising parser with configurable strictness
    ParserConfig - Frozen parser configuration
    parse_language_id, parse_locale_id, parse_extensions,
    parse_measure_unit, parse_subdivision_id - Non-raising (result, errors) API
    serialize - Render any parsed structure

Exceptions:
    LocaleError - Base exception class
    LocaleSyntaxError - Identifier does not follow the grammar

Submodules:
    localeid.syntax.ast - Result structures (LanguageIdentifier, LocaleIdentifier, ...)
    localeid.diagnostics - Error codes, templates and formatters
    localeid.locale_utils - System locale detection and Babel bridge
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import DiagnosticCode, LocaleError, LocaleSyntaxError
from .parsing import (
    parse_extensions,
    parse_language_id,
    parse_locale_id,
    parse_measure_unit,
    parse_subdivision_id,
)
from .syntax import (
    Extensions,
    LanguageIdentifier,
    LocaleIdentifier,
    LocaleParser,
    MeasureUnit,
    ParserConfig,
    SubdivisionIdentifier,
    serialize,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("localeid")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Grammar conformance
__spec_url__ = "https://unicode.org/reports/tr35/#Unicode_locale_identifier"

__all__ = [
    "DiagnosticCode",
    "Extensions",
    "LanguageIdentifier",
    "LocaleError",
    "LocaleIdentifier",
    "LocaleParser",
    "LocaleSyntaxError",
    "MeasureUnit",
    "ParserConfig",
    "SubdivisionIdentifier",
    "__spec_url__",
    "__version__",
    "parse_extensions",
    "parse_language_id",
    "parse_locale_id",
    "parse_measure_unit",
    "parse_subdivision_id",
    "serialize",
]
