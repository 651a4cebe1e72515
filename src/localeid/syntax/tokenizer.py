"""Subtag tokenizer.

Splits a raw identifier string into its subtags. Hyphen and underscore are
both accepted as separators (BCP 47 uses hyphens, POSIX locale names use
underscores). No validation happens here: empty subtags produced by
doubled separators are kept so the parser can report them.

Thread Safety:
    Pure function with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import re

from localeid.constants import LEGACY_SEP, SEP

__all__ = ["tokenize"]

# Compiled once at module load.
_SEPARATOR_PATTERN: re.Pattern[str] = re.compile(f"[{re.escape(SEP + LEGACY_SEP)}]")


def tokenize(source: str) -> tuple[str, ...]:
    """Split source into subtags on '-' or '_'.

    Args:
        source: Raw identifier string

    Returns:
        Tuple of subtags in input order (empty tuple for empty input)

    Example:
        >>> tokenize("en_Latn-US")
        ('en', 'Latn', 'US')
        >>> tokenize("")
        ()
        >>> tokenize("en--US")
        ('en', '', 'US')
    """
    if not source:
        return ()
    return tuple(_SEPARATOR_PATTERN.split(source))
