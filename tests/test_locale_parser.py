"""Tests for LocaleParser: locale identifier composition and configuration."""

from __future__ import annotations

import dataclasses
import threading

import pytest
from hypothesis import given

from localeid.constants import MAX_SOURCE_SIZE
from localeid.diagnostics import DiagnosticCode, LocaleSyntaxError
from localeid.syntax import parse
from localeid.syntax.ast import (
    Keyword,
    LanguageIdentifier,
    LocaleIdentifier,
    OtherExtension,
    PrivateUseExtension,
    TransformedExtension,
    UnicodeLocaleExtension,
)
from localeid.syntax.parser import LocaleParser, ParserConfig
from tests.strategies import locale_ids

FULL_EXAMPLE = (
    "ja-Latn-JP-macos-u-attr1-kz-value2-t-en-Latn-US-linux-t1-value1-value2"
    "-a-vue-rust-x-foo-123"
)

# ============================================================================
# COMPOSITION
# ============================================================================


class TestParseLocaleId:
    """Language identifier followed by extensions."""

    def test_language_only(self) -> None:
        locale = LocaleIdentifier.parse("en-US")
        assert locale.language == LanguageIdentifier("en", None, "US")
        assert locale.extensions.is_empty

    def test_unicode_keyword(self) -> None:
        locale = LocaleIdentifier.parse("en-US-u-hc-h12")
        assert locale.extensions.unicode_locale is not None
        assert locale.extensions.unicode_locale[0].get("hc") == ("h12",)

    def test_full_example_structure(self) -> None:
        locale = LocaleIdentifier.parse(FULL_EXAMPLE)
        assert locale.language == LanguageIdentifier("ja", "Latn", "JP", ("macos",))
        ext = locale.extensions
        assert ext.unicode_locale == (
            UnicodeLocaleExtension(("attr1",), (Keyword("kz", ("value2",)),)),
        )
        assert ext.transformed == (
            TransformedExtension(
                LanguageIdentifier("en", "Latn", "US", ("linux",)),
                (Keyword("t1", ("value1", "value2")),),
            ),
        )
        assert ext.other == (OtherExtension("a", ("vue", "rust")),)
        assert ext.private_use == PrivateUseExtension(("foo", "123"))

    def test_full_example_renders_identically(self) -> None:
        assert str(LocaleIdentifier.parse(FULL_EXAMPLE)) == FULL_EXAMPLE

    def test_extensions_render_grouped_by_kind(self) -> None:
        """Blocks are rendered u, t, other, then private use."""
        locale = LocaleIdentifier.parse("en-a-vue-t-h0-hybrid-u-ca-buddhist-x-foo")
        assert str(locale) == "en-u-ca-buddhist-t-h0-hybrid-a-vue-x-foo"

    def test_canonical_case(self) -> None:
        locale = LocaleIdentifier.parse("EN-latn-us-U-CA-Buddhist-X-FOO")
        assert str(locale) == "en-Latn-US-u-ca-buddhist-x-foo"

    def test_root_with_extension(self) -> None:
        assert str(LocaleIdentifier.parse("root-u-ca-buddhist")) == "und-u-ca-buddhist"

    def test_module_level_parse(self) -> None:
        assert parse("de-de").language.region == "DE"


class TestParseLocaleIdErrors:
    """Error propagation from language and extension parsing."""

    @pytest.mark.parametrize(
        ("source", "code"),
        [
            ("", DiagnosticCode.MISSING),
            ("food-u-ca-buddhist", DiagnosticCode.INVALID_LANGUAGE),
            ("en-US-abc", DiagnosticCode.INVALID_SUBTAG),
            ("en-US-u", DiagnosticCode.INVALID_EXTENSION),
            ("en-US-$-foo", DiagnosticCode.INVALID_EXTENSION),
            ("en-US-$$", DiagnosticCode.INVALID_EXTENSION),
            ("en-x-foo-x-bar", DiagnosticCode.UNEXPECTED),
            ("en-t-h0", DiagnosticCode.INVALID_SUBTAG),
        ],
    )
    def test_error_codes(self, source: str, code: DiagnosticCode) -> None:
        with pytest.raises(LocaleSyntaxError) as exc_info:
            LocaleIdentifier.parse(source)
        assert exc_info.value.code is code

    def test_error_carries_full_input(self) -> None:
        """Errors raised deep in the sub-parsers report the whole input."""
        with pytest.raises(LocaleSyntaxError) as exc_info:
            LocaleIdentifier.parse("en-US-*-foo")
        assert exc_info.value.input_value == "en-US-*-foo"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid language subtag"):
            LocaleIdentifier.parse("food")

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="localeid.syntax.parser.core"):
            with pytest.raises(LocaleSyntaxError):
                LocaleIdentifier.parse("food")
        assert "Rejected 'food'" in caplog.text


# ============================================================================
# CONFIGURATION
# ============================================================================


class TestParserConfig:
    """ParserConfig defaults and validation."""

    def test_defaults(self) -> None:
        config = ParserConfig()
        assert config.strict is True
        assert config.max_source_size == MAX_SOURCE_SIZE

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_source_size"):
            ParserConfig(max_source_size=-1)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ParserConfig().strict = False  # type: ignore[misc]

    def test_parser_exposes_config(self) -> None:
        config = ParserConfig(strict=False)
        assert LocaleParser(config).config is config
        assert LocaleParser().config == ParserConfig()


class TestSourceSizeLimit:
    """Input size is unlimited by default and capped only when configured."""

    def test_default_config_has_no_limit(self) -> None:
        assert ParserConfig().max_source_size == 0

    def test_long_valid_identifier_parses_by_default(self) -> None:
        source = "en-x-" + "-".join(["abcdefgh"] * 120)
        assert len(source) > 1024
        locale = LocaleIdentifier.parse(source)
        assert locale.extensions.private_use is not None
        assert len(locale.extensions.private_use.values) == 120
        assert str(locale) == source

    def test_configured_limit_rejects_before_tokenizing(self) -> None:
        parser = LocaleParser(ParserConfig(max_source_size=1024))
        source = "en-" + "-".join(["abcde"] * 200)
        with pytest.raises(ValueError, match="exceeds maximum"):
            parser.parse_locale_id(source)

    def test_limit_is_configurable(self) -> None:
        parser = LocaleParser(ParserConfig(max_source_size=4))
        assert str(parser.parse_language_id("en")) == "en"
        with pytest.raises(ValueError, match="exceeds maximum"):
            parser.parse_language_id("en-US")

    def test_zero_disables_limit(self) -> None:
        parser = LocaleParser(ParserConfig(max_source_size=0))
        source = "en-x-" + "-".join(["a"] * 2000)
        assert parser.parse_locale_id(source).extensions.private_use is not None

    def test_oversized_is_not_a_syntax_error(self) -> None:
        parser = LocaleParser(ParserConfig(max_source_size=1))
        with pytest.raises(ValueError) as exc_info:
            parser.parse_measure_unit("area")
        assert not isinstance(exc_info.value, LocaleSyntaxError)


# ============================================================================
# CONCURRENCY
# ============================================================================


class TestSharedParser:
    """One parser instance can serve many threads."""

    def test_concurrent_parsing(self) -> None:
        parser = LocaleParser()
        results: list[str] = []
        lock = threading.Lock()

        def worker(source: str) -> None:
            rendered = str(parser.parse_locale_id(source))
            with lock:
                results.append(rendered)

        sources = ["en-US", "de-DE-u-ca-buddhist", FULL_EXAMPLE] * 10
        threads = [threading.Thread(target=worker, args=(s,)) for s in sources]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == sorted(sources)


# ============================================================================
# PROPERTIES
# ============================================================================


class TestLocaleProperties:
    """Property-based tests over generated locale identifiers."""

    @given(source=locale_ids())
    def test_round_trip(self, source: str) -> None:
        """PROPERTY: parse(render(parse(s))) == parse(s)."""
        locale = LocaleIdentifier.parse(source)
        assert LocaleIdentifier.parse(str(locale)) == locale

    @given(source=locale_ids())
    def test_private_use_renders_last(self, source: str) -> None:
        locale = LocaleIdentifier.parse(source)
        blocks = locale.extensions.blocks()
        if locale.extensions.private_use is not None:
            assert blocks[-1] == locale.extensions.private_use

    @given(source=locale_ids())
    def test_results_are_hashable(self, source: str) -> None:
        """PROPERTY: parsed identifiers are immutable values."""
        locale = LocaleIdentifier.parse(source)
        assert hash(locale) == hash(LocaleIdentifier.parse(source))
