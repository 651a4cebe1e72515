"""Optional-dependency support shared across the package.

Exports:
    BabelImportError: Raised when a Babel bridge is used without Babel
    is_babel_available: Check whether the babel extra is installed
    require_babel: Fail fast with BabelImportError when Babel is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
