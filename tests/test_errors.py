"""Tests for the exception hierarchy and enumerations."""

from __future__ import annotations

import pytest

from lingoresolve import (
    CatalogParseError,
    CatalogSourceUnavailableError,
    InvalidLocaleFormatError,
    LingoError,
)
from lingoresolve.enums import FormatErrorPolicy, LoadStatus, MissingKeyPolicy
from lingoresolve.errors import CatalogError, FormatArgumentError


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [
            InvalidLocaleFormatError,
            CatalogError,
            CatalogSourceUnavailableError,
            CatalogParseError,
            FormatArgumentError,
        ],
    )
    def test_rooted_at_lingo_error(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, LingoError)

    def test_invalid_locale_is_value_error(self) -> None:
        error = InvalidLocaleFormatError("en_us_x")
        assert isinstance(error, ValueError)
        assert error.raw == "en_us_x"
        assert str(error) == "Malformed locale string 'en_us_x'"

    def test_catalog_error_attributes(self) -> None:
        cause = OSError("disk")
        error = CatalogSourceUnavailableError("no source", locale="de", cause=cause)
        assert error.locale == "de"
        assert error.cause is cause
        assert str(error) == "no source"

    def test_catalog_errors_share_base(self) -> None:
        assert issubclass(CatalogParseError, CatalogError)
        assert issubclass(CatalogSourceUnavailableError, CatalogError)


class TestEnums:
    def test_string_values(self) -> None:
        assert str(LoadStatus.NOT_FOUND) == "not_found"
        assert MissingKeyPolicy("bracketed") is MissingKeyPolicy.BRACKETED
        assert FormatErrorPolicy.MARKED == "marked"

    def test_members(self) -> None:
        assert [p.value for p in MissingKeyPolicy] == ["empty", "bracketed", "key"]
        assert [p.value for p in FormatErrorPolicy] == ["raw", "marked"]
        assert [s.value for s in LoadStatus] == ["success", "not_found", "error"]
