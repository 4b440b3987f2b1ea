"""Tests for the name-energy number."""

from fortune_app.numerology import name_energy_number


class TestNameEnergyNumber:
    """Test name_energy_number function."""

    def test_ascii_name(self):
        """Hanako: code points sum to 594 -> 9."""
        assert name_energy_number("Hanako") == 9

    def test_japanese_name_with_inner_space(self):
        """山田 花子: code points (inner space included) sum to 110530 -> 1."""
        assert name_energy_number("山田 花子") == 1

    def test_surrounding_whitespace_is_trimmed(self):
        """Leading/trailing whitespace, including the ideographic space, is ignored."""
        assert name_energy_number("  Hanako\n") == name_energy_number("Hanako")
        assert name_energy_number("　山田 花子　") == name_energy_number("山田 花子")

    def test_empty_or_blank_is_none(self):
        """Should return None when nothing remains after trimming."""
        assert name_energy_number("") is None
        assert name_energy_number("   ") is None
        assert name_energy_number("　") is None

    def test_single_characters(self):
        """A=65 -> 2, B=66 -> 3."""
        assert name_energy_number("A") == 2
        assert name_energy_number("B") == 3

    def test_result_in_range(self):
        """Should always land in 1-9."""
        for name in ["Taro", "Ken", "佐藤", "Zoë", "🌸"]:
            assert 1 <= name_energy_number(name) <= 9
