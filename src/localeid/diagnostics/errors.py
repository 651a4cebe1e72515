"""Locale identifier exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class LocaleError(Exception):
    """Base exception for all localeid errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleSyntaxError(LocaleError, ValueError):
    """Identifier string does not follow the locale identifier grammar.

    Raised inside the parser engine and aborts the current parse call.
    The result-tuple API in :mod:`localeid.parsing` catches it and returns
    it to the caller instead.

    Inherits from ValueError so callers treating malformed input as a bad
    value keep working.

    Attributes:
        input_value: The string that failed to parse
    """

    def __init__(self, diagnostic: Diagnostic, *, input_value: str = "") -> None:
        """Initialize LocaleSyntaxError.

        Args:
            diagnostic: Diagnostic built by ErrorTemplate
            input_value: The string that failed to parse
        """
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
        self.input_value = input_value

    @property
    def code(self) -> DiagnosticCode:
        """Error kind from the closed taxonomy."""
        return self.diagnostic.code

    def __repr__(self) -> str:
        return f"LocaleSyntaxError({self.code.name}, {self.input_value!r})"
