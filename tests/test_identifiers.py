"""Tests for measure unit and subdivision identifier parsing."""

from __future__ import annotations

import pytest
from hypothesis import given

from localeid.diagnostics import DiagnosticCode, LocaleSyntaxError
from localeid.syntax.ast import MeasureUnit, SubdivisionIdentifier
from localeid.syntax.parser import LocaleParser
from tests.strategies import measure_units, subdivision_ids

# ============================================================================
# MEASURE UNITS
# ============================================================================


class TestMeasureUnit:
    """alphanum{3,8} (sep alphanum{3,8})*."""

    def test_basic(self) -> None:
        assert MeasureUnit.parse("area-hectare") == MeasureUnit(("area", "hectare"))

    def test_renders_hyphen_joined(self) -> None:
        assert str(MeasureUnit.parse("LENGTH_meter")) == "length-meter"

    def test_empty_is_missing(self) -> None:
        with pytest.raises(LocaleSyntaxError) as exc_info:
            MeasureUnit.parse("")
        assert exc_info.value.code is DiagnosticCode.MISSING

    @pytest.mark.parametrize("source", ["ar", "area-ha", "area-toolongvalue", "area--meter", "ärea"])
    def test_invalid_component(self, source: str) -> None:
        with pytest.raises(LocaleSyntaxError) as exc_info:
            MeasureUnit.parse(source)
        assert exc_info.value.code is DiagnosticCode.INVALID_SUBTAG

    @given(source=measure_units())
    def test_round_trip(self, source: str) -> None:
        """PROPERTY: parse(render(parse(s))) == parse(s)."""
        unit = MeasureUnit.parse(source)
        assert MeasureUnit.parse(str(unit)) == unit


# ============================================================================
# SUBDIVISIONS
# ============================================================================


class TestSubdivisionIdentifier:
    """(alpha{2} | digit{3}) alphanum{3,6}, total length 2-7."""

    def test_alpha_region(self) -> None:
        sub = SubdivisionIdentifier.parse("ussct")
        assert (sub.region, sub.suffix) == ("us", "sct")

    def test_digit_region(self) -> None:
        sub = SubdivisionIdentifier.parse("123abcd")
        assert (sub.region, sub.suffix) == ("123", "abcd")

    def test_renders_without_separator(self) -> None:
        assert str(SubdivisionIdentifier.parse("123abcd")) == "123abcd"

    def test_lowercased(self) -> None:
        assert SubdivisionIdentifier.parse("GBENG") == SubdivisionIdentifier("gb", "eng")

    def test_empty_is_missing(self) -> None:
        with pytest.raises(LocaleSyntaxError) as exc_info:
            LocaleParser().parse_subdivision_id("")
        assert exc_info.value.code is DiagnosticCode.MISSING

    @pytest.mark.parametrize(
        "source",
        [
            "ab",  # no suffix
            "12312345",  # 8 characters
            "1b123",  # region neither 2 letters nor 3 digits
            "ab{}",  # suffix not alphanumeric
            "usab",  # suffix too short
            "12ab",  # 2 digits
            "us-sct",  # separator is not part of the grammar
        ],
    )
    def test_invalid(self, source: str) -> None:
        with pytest.raises(LocaleSyntaxError) as exc_info:
            SubdivisionIdentifier.parse(source)
        assert exc_info.value.code is DiagnosticCode.INVALID_SUBDIVISION

    def test_error_message_names_reason(self) -> None:
        with pytest.raises(LocaleSyntaxError) as exc_info:
            SubdivisionIdentifier.parse("1b123")
        assert "region" in str(exc_info.value)

    @given(source=subdivision_ids())
    def test_round_trip(self, source: str) -> None:
        """PROPERTY: parse(render(parse(s))) == parse(s)."""
        sub = SubdivisionIdentifier.parse(source)
        assert SubdivisionIdentifier.parse(str(sub)) == sub
        assert str(sub) == source.lower()
