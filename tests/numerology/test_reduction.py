"""Tests for digit-root reduction."""

import pytest

from fortune_app.numerology.reduction import digit_root


class TestDigitRoot:
    """Test digit_root function."""

    def test_single_digits_unchanged(self):
        """Should return 1-9 unchanged."""
        for n in range(1, 10):
            assert digit_root(n) == n

    def test_zero_maps_to_one(self):
        """Should map a zero reduction to 1."""
        assert digit_root(0) == 1

    def test_multiples_of_nine_reduce_to_nine(self):
        """Should reduce 9, 18, 99, 999 to 9, never to 0."""
        assert digit_root(18) == 9
        assert digit_root(99) == 9
        assert digit_root(999) == 9

    @pytest.mark.parametrize("value,expected", [
        (10, 1),
        (25, 7),
        (594, 9),
        (110530, 1),
        (1999999999, 1),
    ])
    def test_multi_step_reduction(self, value, expected):
        """Should keep summing digits until a single digit remains."""
        assert digit_root(value) == expected

    def test_negative_values_use_magnitude(self):
        """Should reduce the absolute value."""
        assert digit_root(-25) == 7

    def test_range_is_one_to_nine(self):
        """Every non-negative integer reduces into 1-9."""
        for n in list(range(0, 2000)) + [2 ** 32 - 1, 2 ** 32, 10 ** 18]:
            assert 1 <= digit_root(n) <= 9
