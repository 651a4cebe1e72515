"""Tests for the subtag tokenizer."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from localeid.syntax.tokenizer import tokenize


class TestTokenize:
    """Splitting on '-' and '_'."""

    def test_empty_input_yields_no_tokens(self) -> None:
        """Empty string produces an empty tuple, not ('',)."""
        assert tokenize("") == ()

    def test_hyphen_separator(self) -> None:
        assert tokenize("en-Latn-US") == ("en", "Latn", "US")

    def test_underscore_separator(self) -> None:
        assert tokenize("de_DE") == ("de", "DE")

    def test_mixed_separators(self) -> None:
        assert tokenize("zh_Hant-TW") == ("zh", "Hant", "TW")

    def test_doubled_separator_keeps_empty_token(self) -> None:
        """No validation happens here: empty subtags reach the parser."""
        assert tokenize("en--US") == ("en", "", "US")

    def test_leading_and_trailing_separator(self) -> None:
        assert tokenize("-en-") == ("", "en", "")

    def test_case_preserved(self) -> None:
        """Case canonicalization is the parser's job."""
        assert tokenize("EN-us") == ("EN", "us")

    @given(tokens=st.lists(st.text(alphabet="abcXYZ019", min_size=1, max_size=8), min_size=1))
    def test_join_then_split_is_identity(self, tokens: list[str]) -> None:
        """PROPERTY: tokenize inverts '-'.join for separator-free tokens."""
        assert tokenize("-".join(tokens)) == tuple(tokens)

    @given(source=st.text(max_size=50))
    def test_token_count_matches_separator_count(self, source: str) -> None:
        """PROPERTY: n separators give n + 1 tokens for non-empty input."""
        tokens = tokenize(source)
        if source:
            separators = source.count("-") + source.count("_")
            assert len(tokens) == separators + 1
        else:
            assert tokens == ()
