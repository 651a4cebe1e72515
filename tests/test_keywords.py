"""Tests for the key/value accumulator state machine."""

from __future__ import annotations

import pytest

from localeid.diagnostics import DiagnosticCode, LocaleSyntaxError
from localeid.enums import KeywordState
from localeid.syntax.ast import Keyword
from localeid.syntax.parser.keywords import KeywordAccumulator


class TestKeywordAccumulatorStates:
    """SEEKING_KEY until the first key, ACCUMULATING_VALUES afterwards."""

    def test_starts_seeking_key(self) -> None:
        assert KeywordAccumulator(allow_empty=True).state is KeywordState.SEEKING_KEY

    def test_start_key_switches_state(self) -> None:
        acc = KeywordAccumulator(allow_empty=True)
        acc.start_key("ca")
        assert acc.state is KeywordState.ACCUMULATING_VALUES

    def test_value_without_key_is_unexpected(self) -> None:
        acc = KeywordAccumulator(allow_empty=True)
        with pytest.raises(LocaleSyntaxError) as exc_info:
            acc.add_value("buddhist")
        assert exc_info.value.code is DiagnosticCode.UNEXPECTED


class TestKeywordAccumulatorFlush:
    """Flushing on key change and at the end of the run."""

    def test_empty_accumulator_finishes_empty(self) -> None:
        assert KeywordAccumulator(allow_empty=False).finish() == ()

    def test_keys_in_encounter_order(self) -> None:
        acc = KeywordAccumulator(allow_empty=True)
        acc.start_key("nu")
        acc.add_value("latn")
        acc.start_key("ca")
        acc.add_value("buddhist")
        assert acc.finish() == (
            Keyword("nu", ("latn",)),
            Keyword("ca", ("buddhist",)),
        )

    def test_empty_key_allowed_for_unicode(self) -> None:
        acc = KeywordAccumulator(allow_empty=True)
        acc.start_key("ca")
        acc.start_key("kb")
        assert acc.finish() == (Keyword("ca", ()), Keyword("kb", ()))

    def test_empty_key_rejected_on_key_change(self) -> None:
        acc = KeywordAccumulator(allow_empty=False)
        acc.start_key("h0")
        with pytest.raises(LocaleSyntaxError) as exc_info:
            acc.start_key("m0")
        assert exc_info.value.code is DiagnosticCode.INVALID_SUBTAG

    def test_empty_key_rejected_at_end(self) -> None:
        acc = KeywordAccumulator(allow_empty=False)
        acc.start_key("h0")
        with pytest.raises(LocaleSyntaxError) as exc_info:
            acc.finish()
        assert exc_info.value.code is DiagnosticCode.INVALID_SUBTAG

    def test_repeated_key_merges_into_first(self) -> None:
        acc = KeywordAccumulator(allow_empty=True)
        acc.start_key("ca")
        acc.add_value("abc")
        acc.start_key("nu")
        acc.add_value("latn")
        acc.start_key("ca")
        acc.add_value("def")
        assert acc.finish() == (
            Keyword("ca", ("abc", "def")),
            Keyword("nu", ("latn",)),
        )

    def test_keys_and_values_lowercased(self) -> None:
        acc = KeywordAccumulator(allow_empty=True)
        acc.start_key("HC")
        acc.add_value("H12")
        assert acc.finish() == (Keyword("hc", ("h12",)),)
