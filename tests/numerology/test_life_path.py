"""Tests for the life-path number."""

from fortune_app.numerology import life_path_number


class TestLifePathNumber:
    """Test life_path_number function."""

    def test_sums_date_digits(self):
        """1990-05-01: 1+9+9+0+0+5+0+1 = 25 -> 7."""
        assert life_path_number("1990-05-01") == 7

    def test_other_dates(self):
        """Should reduce other dates the same way."""
        assert life_path_number("2000-01-01") == 4     # 2+1+1
        assert life_path_number("1985-12-31") == 3     # 1+9+8+5+1+2+3+1 = 30 -> 3
        assert life_path_number("2009-01-03") == 6     # 15 -> 6

    def test_empty_is_none(self):
        """Should return None for an empty birth date."""
        assert life_path_number("") is None

    def test_no_digits_is_none(self):
        """Should return None when no digit characters remain."""
        assert life_path_number("not-a-date") is None
        assert life_path_number("--") is None

    def test_non_digits_are_ignored(self):
        """Should strip separators and other characters before summing."""
        assert life_path_number("1990/05/01") == 7
        assert life_path_number("19900501") == 7
        assert life_path_number("born 1990-05-01!") == 7

    def test_all_zero_digits_map_to_one(self):
        """A digit sum of 0 still yields 1."""
        assert life_path_number("0000-00-00") == 1
