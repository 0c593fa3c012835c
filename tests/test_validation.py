"""Unit tests for the field validation rules."""

from __future__ import annotations

from decimal import Decimal

import pytest

from auropay_sdk.core.errors import ErrorCode, ValidationError
from auropay_sdk.core.validation import (
    CALLBACK_API_URL_PATTERN,
    EMAIL_PATTERN,
    NAME_PATTERN,
    PHONE_PATTERN,
    SPECIAL_CHAR_PATTERN,
    forbid_pattern,
    max_length,
    require_non_empty,
    require_pattern,
    require_positive_amount,
)


class TestRequireNonEmpty:
    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_rejects_missing_or_blank(self, value):
        with pytest.raises(ValidationError) as excinfo:
            require_non_empty(value, ErrorCode.SE0003)
        assert excinfo.value.code is ErrorCode.SE0003

    @pytest.mark.parametrize("value", ["x", " x ", 0, 12.5])
    def test_accepts_present_values(self, value):
        assert require_non_empty(value, ErrorCode.SE0003) is None


class TestForbidPattern:
    def test_rejects_special_characters(self):
        with pytest.raises(ValidationError) as excinfo:
            forbid_pattern("Invoice #1", SPECIAL_CHAR_PATTERN, ErrorCode.SE0020)
        assert excinfo.value.error_code == "SE0020"

    def test_accepts_letters_digits_and_spaces(self):
        forbid_pattern("Invoice 1", SPECIAL_CHAR_PATTERN, ErrorCode.SE0020)

    def test_absent_value_passes(self):
        forbid_pattern(None, SPECIAL_CHAR_PATTERN, ErrorCode.SE0020)


class TestRequirePattern:
    def test_requires_whole_value_to_match(self):
        with pytest.raises(ValidationError):
            require_pattern("98765432101234567", PHONE_PATTERN, ErrorCode.SE0012)

    def test_rejects_trailing_newline(self):
        with pytest.raises(ValidationError):
            require_pattern("9876543210\n", PHONE_PATTERN, ErrorCode.SE0012)

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError):
            require_pattern(9876543210, PHONE_PATTERN, ErrorCode.SE0012)

    @pytest.mark.parametrize(
        "pattern, value",
        [
            (EMAIL_PATTERN, "asha.rao+pay@example.co.in"),
            (NAME_PATTERN, "Mary Ann"),
            (PHONE_PATTERN, "919876543210"),
            (CALLBACK_API_URL_PATTERN, "https://merchant.example.com/callback?id=1"),
            (CALLBACK_API_URL_PATTERN, "http://www.example.org"),
        ],
    )
    def test_accepts_well_formed_values(self, pattern, value):
        require_pattern(value, pattern, ErrorCode.SE0013)

    @pytest.mark.parametrize(
        "pattern, value",
        [
            (EMAIL_PATTERN, "asha.rao@example"),
            (NAME_PATTERN, "R2D2"),
            (NAME_PATTERN, "a" * 71),
            (PHONE_PATTERN, "98765-43210"),
            (CALLBACK_API_URL_PATTERN, "ftp://example.com/callback"),
            (CALLBACK_API_URL_PATTERN, "merchant.example.com/callback"),
        ],
    )
    def test_rejects_malformed_values(self, pattern, value):
        with pytest.raises(ValidationError):
            require_pattern(value, pattern, ErrorCode.SE0013)


class TestMaxLength:
    def test_boundary(self):
        max_length("a" * 10, 10, ErrorCode.SE0019)
        with pytest.raises(ValidationError):
            max_length("a" * 11, 10, ErrorCode.SE0019)

    def test_absent_value_passes(self):
        max_length(None, 0, ErrorCode.SE0019)


class TestRequirePositiveAmount:
    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_missing_amount(self, value):
        with pytest.raises(ValidationError) as excinfo:
            require_positive_amount(value, ErrorCode.SE0018, ErrorCode.SE0002)
        assert excinfo.value.code is ErrorCode.SE0018

    @pytest.mark.parametrize(
        "value", [0, -1, -0.01, "0", "-5", "abc", True, float("nan"), float("inf")]
    )
    def test_invalid_amount(self, value):
        with pytest.raises(ValidationError) as excinfo:
            require_positive_amount(value, ErrorCode.SE0018, ErrorCode.SE0002)
        assert excinfo.value.code is ErrorCode.SE0002

    @pytest.mark.parametrize("value", [1, 0.01, Decimal("99.95"), "250"])
    def test_valid_amount(self, value):
        require_positive_amount(value, ErrorCode.SE0018, ErrorCode.SE0002)
