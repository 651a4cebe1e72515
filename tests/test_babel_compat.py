"""Tests for babel_compat - optional Babel dependency handling."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest

import localeid.core.babel_compat as bc
from localeid.core import BabelImportError, is_babel_available, require_babel
from localeid.locale_utils import to_babel_locale
from localeid.syntax.ast import LanguageIdentifier


@pytest.fixture
def babel_unavailable(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Make 'import babel' fail for the duration of a test."""
    bc._check_babel_available.cache_clear()
    monkeypatch.setitem(sys.modules, "babel", None)
    yield
    bc._check_babel_available.cache_clear()


# ============================================================================
# AVAILABILITY
# ============================================================================


class TestBabelAvailability:
    """is_babel_available and require_babel with Babel installed."""

    def test_available_in_test_environment(self) -> None:
        """Babel is part of the test extra."""
        assert is_babel_available() is True

    def test_require_babel_does_not_raise(self) -> None:
        require_babel("to_babel_locale")

    def test_get_locale_class(self) -> None:
        from babel import Locale  # noqa: PLC0415

        assert bc.get_locale_class() is Locale

    def test_get_unknown_locale_error(self) -> None:
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        assert bc.get_unknown_locale_error() is UnknownLocaleError


# ============================================================================
# BABEL MISSING
# ============================================================================


class TestBabelUnavailable:
    """Code paths taken when Babel cannot be imported."""

    @pytest.mark.usefixtures("babel_unavailable")
    def test_is_babel_available_false(self) -> None:
        assert is_babel_available() is False

    @pytest.mark.usefixtures("babel_unavailable")
    def test_require_babel_raises(self) -> None:
        with pytest.raises(BabelImportError, match=r"pip install localeid\[babel\]"):
            require_babel("some_feature")

    @pytest.mark.usefixtures("babel_unavailable")
    def test_to_babel_locale_raises(self) -> None:
        with pytest.raises(BabelImportError) as exc_info:
            to_babel_locale(LanguageIdentifier("en"))
        assert exc_info.value.feature == "to_babel_locale"

    @pytest.mark.usefixtures("babel_unavailable")
    def test_parsing_works_without_babel(self) -> None:
        assert str(LanguageIdentifier.parse("en-us")) == "en-US"


class TestBabelImportError:
    """BabelImportError message and attributes."""

    def test_message(self) -> None:
        error = BabelImportError("to_babel_locale")
        assert str(error) == (
            "to_babel_locale requires Babel. Install with: pip install localeid[babel]"
        )

    def test_is_import_error(self) -> None:
        assert isinstance(BabelImportError("x"), ImportError)
