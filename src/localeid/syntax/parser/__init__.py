"""Locale identifier parser module.

This module provides the main LocaleParser class and the sub-parsers it
composes, organized into focused submodules.

Module Organization:
- core.py: Main LocaleParser class
- config.py: ParserConfig (strictness, input size limit)
- language.py: Language identifier state machine
- keywords.py: Key/value accumulator for u and t extensions
- extensions.py: Extension dispatcher and the four extension sub-parsers
- identifiers.py: Measure unit and subdivision identifier parsers

Public API:
    LocaleParser: Main parser class
    ParserConfig: Parser configuration
"""

from localeid.syntax.parser.config import ParserConfig
from localeid.syntax.parser.core import LocaleParser

__all__ = ["LocaleParser", "ParserConfig"]
