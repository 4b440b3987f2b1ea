"""Tests for raw input parsers."""

import pytest
from datetime import date

from fortune_app.data.parsers import format_birth_date, normalize_name, parse_birth_date
from fortune_app.errors import MalformedDateError, MissingInputError


class TestParseBirthDate:
    """Test parse_birth_date function."""

    def test_valid_date(self):
        assert parse_birth_date("1990-05-01") == date(1990, 5, 1)

    def test_leap_day(self):
        assert parse_birth_date("2024-02-29") == date(2024, 2, 29)

    def test_empty(self):
        with pytest.raises(MissingInputError) as exc_info:
            parse_birth_date("")
        assert exc_info.value.field == "birth_date"

    @pytest.mark.parametrize("raw", ["not-a-date", "1990-5-1", "1990/05/01", "19900501", "１９９０-05-01"])
    def test_wrong_shape(self, raw):
        with pytest.raises(MalformedDateError) as exc_info:
            parse_birth_date(raw)
        assert exc_info.value.raw_value == raw
        assert exc_info.value.expected_format == "YYYY-MM-DD"

    @pytest.mark.parametrize("raw", ["2023-02-29", "1990-04-31", "1990-13-01", "0000-01-01"])
    def test_out_of_range(self, raw):
        with pytest.raises(MalformedDateError):
            parse_birth_date(raw)


class TestNormalizeName:
    """Test normalize_name function."""

    def test_trims(self):
        assert normalize_name("  山田 花子 ") == "山田 花子"

    def test_blank(self):
        with pytest.raises(MissingInputError) as exc_info:
            normalize_name(" \t")
        assert exc_info.value.field == "name"


class TestFormatBirthDate:
    """Test format_birth_date function."""

    def test_zero_pads_month_and_day(self):
        assert format_birth_date("1990", "5", "1") == "1990-05-01"

    def test_accepts_integers(self):
        assert format_birth_date(1990, 12, 31) == "1990-12-31"

    def test_already_padded(self):
        assert format_birth_date("1990", "05", "01") == "1990-05-01"

    @pytest.mark.parametrize("parts", [("", "5", "1"), ("1990", "", "1"), ("1990", "5", None)])
    def test_missing_part(self, parts):
        assert format_birth_date(*parts) == ""
