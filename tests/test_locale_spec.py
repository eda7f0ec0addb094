"""Tests for LocaleSpec parsing and normalization.

Includes property-based tests: canonical form is idempotent under
re-parsing, and malformed strings are always rejected.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lingoresolve import InvalidLocaleFormatError, LocaleSpec, parse_locale
from tests.strategies.locales import malformed_locale_strings, valid_locale_strings


class TestParse:
    """Test LocaleSpec.parse normalization."""

    @pytest.mark.parametrize(
        ("raw", "language", "region", "full"),
        [
            ("en", "en", "", "en"),
            ("EN", "en", "", "en"),
            ("en_US", "en", "US", "en_US"),
            ("en-US", "en", "US", "en_US"),
            ("en-us", "en", "US", "en_US"),
            ("ZH_cn", "zh", "CN", "zh_CN"),
            ("pt-BR", "pt", "BR", "pt_BR"),
        ],
    )
    def test_normalizes_case_and_separator(
        self, raw: str, language: str, region: str, full: str
    ) -> None:
        spec = LocaleSpec.parse(raw)
        assert spec.language == language
        assert spec.region == region
        assert spec.full == full
        assert str(spec) == full

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "e",
            "eng",
            "en_",
            "en_USA",
            "en_U",
            "en__US",
            "en.US",
            "en US",
            "en_US_POSIX",
            "zh-Hans-CN",
            "en_US.UTF-8",
            " en",
            "en\n",
            "e1",
            "afewradsf",
            "adsfasdf",
            "\u212aa",  # KELVIN SIGN folds to 'k' without re.ASCII
        ],
    )
    def test_rejects_malformed(self, raw: str) -> None:
        with pytest.raises(InvalidLocaleFormatError) as exc_info:
            LocaleSpec.parse(raw)
        assert exc_info.value.raw == raw

    @pytest.mark.parametrize("raw", [None, 42, b"en", ["en"]])
    def test_rejects_non_string(self, raw: object) -> None:
        with pytest.raises(InvalidLocaleFormatError):
            LocaleSpec.parse(raw)  # type: ignore[arg-type]

    def test_invalid_locale_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Malformed locale string"):
            LocaleSpec.parse("nope!")

    def test_parse_locale_shorthand(self) -> None:
        assert parse_locale("fr-ca") == LocaleSpec("fr", "CA")


class TestConstruction:
    """Direct construction accepts only canonical fields."""

    def test_canonical_fields_accepted(self) -> None:
        assert LocaleSpec("en", "US").full == "en_US"
        assert LocaleSpec("en").full == "en"

    @pytest.mark.parametrize(
        ("language", "region"),
        [("EN", ""), ("en", "us"), ("e", ""), ("en", "U"), ("eng", "US")],
    )
    def test_non_canonical_fields_rejected(self, language: str, region: str) -> None:
        with pytest.raises(InvalidLocaleFormatError):
            LocaleSpec(language, region)

    def test_immutable(self) -> None:
        spec = LocaleSpec("en", "US")
        with pytest.raises(AttributeError):
            spec.language = "fr"  # type: ignore[misc]


class TestProjections:
    """Test language-only projection and equality."""

    def test_is_language_only(self) -> None:
        assert LocaleSpec.parse("en").is_language_only()
        assert not LocaleSpec.parse("en_US").is_language_only()

    def test_language_only_drops_region(self) -> None:
        assert LocaleSpec.parse("zh_CN").language_only() == LocaleSpec.parse("zh")

    def test_language_only_of_language_only_is_self(self) -> None:
        spec = LocaleSpec.parse("zh")
        assert spec.language_only() is spec

    def test_equality_by_canonical_identifier(self) -> None:
        assert LocaleSpec.parse("en-us") == LocaleSpec.parse("EN_US")
        assert hash(LocaleSpec.parse("en-us")) == hash(LocaleSpec.parse("EN_US"))
        assert LocaleSpec.parse("en") != LocaleSpec.parse("en_US")

    def test_to_bcp47(self) -> None:
        assert LocaleSpec.parse("en_us").to_bcp47() == "en-US"
        assert LocaleSpec.parse("en").to_bcp47() == "en"


class TestDisplayName:
    """Babel-backed display names."""

    def test_display_name_in_own_locale(self) -> None:
        assert LocaleSpec.parse("en_US").display_name() == "English (United States)"

    def test_display_name_in_other_locale(self) -> None:
        assert LocaleSpec.parse("de").display_name("en") == "German"

    def test_display_name_accepts_spec(self) -> None:
        assert LocaleSpec.parse("fr").display_name(LocaleSpec("en")) == "French"

    def test_unknown_locale_falls_back_to_identifier(self) -> None:
        assert LocaleSpec.parse("qq").display_name() == "qq"

    def test_malformed_target_rejected(self) -> None:
        with pytest.raises(InvalidLocaleFormatError):
            LocaleSpec.parse("en").display_name("english")


class TestLocaleSpecProperties:
    """Universal properties of parsing."""

    @given(raw=valid_locale_strings())
    def test_canonical_form_idempotent(self, raw: str) -> None:
        spec = LocaleSpec.parse(raw)
        assert LocaleSpec.parse(spec.full) == spec
        assert LocaleSpec.parse(spec.full).full == spec.full

    @given(raw=valid_locale_strings())
    def test_bcp47_round_trip(self, raw: str) -> None:
        spec = LocaleSpec.parse(raw)
        assert LocaleSpec.parse(spec.to_bcp47()) == spec

    @given(raw=valid_locale_strings())
    def test_canonical_case(self, raw: str) -> None:
        spec = LocaleSpec.parse(raw)
        assert spec.language.islower()
        assert spec.region == "" or spec.region.isupper()
        assert len(spec.full) in (2, 5)

    @given(raw=malformed_locale_strings())
    def test_malformed_always_rejected(self, raw: str) -> None:
        with pytest.raises(InvalidLocaleFormatError):
            LocaleSpec.parse(raw)

    @given(raw=st.text(max_size=8))
    def test_parse_never_raises_other_errors(self, raw: str) -> None:
        try:
            spec = LocaleSpec.parse(raw)
        except InvalidLocaleFormatError:
            return
        assert spec.full == raw.replace("-", "_")[:2].lower() + raw.replace("-", "_")[2:].upper()
