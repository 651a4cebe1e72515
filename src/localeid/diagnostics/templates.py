"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL (UTS #35, Unicode Locale Data Markup Language)
    _DOCS_BASE = "https://unicode.org/reports/tr35/"

    @staticmethod
    def missing(what: str) -> Diagnostic:
        """Required input is empty.

        Args:
            what: Name of the missing production (e.g. "language identifier")

        Returns:
            Diagnostic for MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING,
            message=f"Missing {what}",
            span=None,
            hint="Pass a non-empty identifier string",
        )

    @staticmethod
    def invalid_language(subtag: str, span: SourceSpan | None = None) -> Diagnostic:
        """First subtag is not a valid language subtag.

        Args:
            subtag: The rejected subtag
            span: Location of the subtag in the input

        Returns:
            Diagnostic for INVALID_LANGUAGE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE,
            message=f"Invalid language subtag '{subtag}'",
            span=span,
            hint=(
                "Language subtags are 2-3 or 5-8 ASCII letters, "
                "or one of 'root' and 'und'"
            ),
            help_url=f"{ErrorTemplate._DOCS_BASE}#unicode_language_subtag",
        )

    @staticmethod
    def invalid_subtag(
        subtag: str,
        expected: str,
        span: SourceSpan | None = None,
        anchor: str = "unicode_locale_id",
    ) -> Diagnostic:
        """A subtag does not fit the grammar at its position.

        Args:
            subtag: The rejected subtag
            expected: Description of what the grammar expected here
            span: Location of the subtag in the input
            anchor: UTS #35 section describing the production

        Returns:
            Diagnostic for INVALID_SUBTAG
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_SUBTAG,
            message=f"Invalid subtag '{subtag}'",
            span=span,
            hint=f"Expected {expected}",
            help_url=f"{ErrorTemplate._DOCS_BASE}#{anchor}",
        )

    @staticmethod
    def trailing_subtag(subtag: str, span: SourceSpan | None = None) -> Diagnostic:
        """Unconsumed subtag after a complete language identifier (strict mode).

        Args:
            subtag: First unconsumed subtag
            span: Location of the subtag in the input

        Returns:
            Diagnostic for INVALID_SUBTAG
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_SUBTAG,
            message=f"Unexpected subtag '{subtag}' after language identifier",
            span=span,
            hint=(
                "Use parse_locale_id() for identifiers with extensions, "
                "or parse with strict=False to ignore trailing subtags"
            ),
            help_url=f"{ErrorTemplate._DOCS_BASE}#unicode_language_id",
        )

    @staticmethod
    def invalid_extension(singleton: str, span: SourceSpan | None = None) -> Diagnostic:
        """Extension singleton is not an ASCII alphanumeric character.

        Args:
            singleton: The rejected singleton
            span: Location of the singleton in the input

        Returns:
            Diagnostic for INVALID_EXTENSION
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_EXTENSION,
            message=f"Invalid extension singleton '{singleton}'",
            span=span,
            hint="Extension singletons are a single ASCII letter or digit",
            help_url=f"{ErrorTemplate._DOCS_BASE}#extensions",
        )

    @staticmethod
    def empty_extension(singleton: str, span: SourceSpan | None = None) -> Diagnostic:
        """Extension singleton is not followed by any subtag.

        Args:
            singleton: The singleton with an empty run
            span: Location of the singleton in the input

        Returns:
            Diagnostic for INVALID_EXTENSION
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_EXTENSION,
            message=f"Extension '{singleton}' must be followed by at least one subtag",
            span=span,
            hint=f"Remove the trailing '{singleton}' or add the extension subtags",
            help_url=f"{ErrorTemplate._DOCS_BASE}#extensions",
        )

    @staticmethod
    def invalid_subdivision(subdivision_id: str, reason: str) -> Diagnostic:
        """Subdivision identifier is malformed.

        Args:
            subdivision_id: The rejected identifier
            reason: Which part of the grammar failed

        Returns:
            Diagnostic for INVALID_SUBDIVISION
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_SUBDIVISION,
            message=f"Invalid subdivision identifier '{subdivision_id}': {reason}",
            span=SourceSpan.for_subtag(0, len(subdivision_id)),
            hint=(
                "Subdivision identifiers are a 2-letter or 3-digit region "
                "followed by 3-6 alphanumerics (e.g. 'ussct')"
            ),
            help_url=f"{ErrorTemplate._DOCS_BASE}#unicode_subdivision_id",
        )

    @staticmethod
    def duplicate_private_use(span: SourceSpan | None = None) -> Diagnostic:
        """A second private use block appeared.

        Args:
            span: Location of the second 'x' singleton

        Returns:
            Diagnostic for UNEXPECTED
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED,
            message="Duplicate private use extension",
            span=span,
            hint="A locale identifier may contain at most one 'x' extension",
            help_url=f"{ErrorTemplate._DOCS_BASE}#pu_extensions",
        )

    @staticmethod
    def unexpected(detail: str) -> Diagnostic:
        """Internal invariant violation.

        Args:
            detail: Description of the broken invariant

        Returns:
            Diagnostic for UNEXPECTED
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED,
            message=f"Unexpected parser state: {detail}",
            span=None,
        )
