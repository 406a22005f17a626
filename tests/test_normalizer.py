"""
Unit tests for core/normalizer.py
Verifies date marker removal, edge symbol trimming and project label cleaning.
"""
import pytest
from nextver.core.normalizer import remove_date_markers, trim_symbols, clean_project_label
from nextver.core.models import DEFAULT_PROJECT_LABEL


class TestRemoveDateMarkers:
    """Test removal of month_day, year-month-day and calendar phrase dates."""

    def test_month_day_token_removed(self):
        """Underscore-joined month_day tokens should be removed."""
        assert remove_date_markers("Promo_8_19") == "Promo_"
        assert remove_date_markers("12_25_Promo") == "_Promo"
        assert remove_date_markers("Promo 1_3 cut") == "Promo  cut"

    def test_year_month_day_removed(self):
        """Four-digit year joined by '-', '_' or '.' should be removed whole."""
        assert remove_date_markers("宣传片_2025-08-19") == "宣传片_"
        assert remove_date_markers("宣传片_2025.8.3") == "宣传片_"
        assert remove_date_markers("宣传片_2025_08_19") == "宣传片_"
        assert remove_date_markers("2025-2-3宣传片") == "宣传片"

    def test_calendar_phrases_removed(self):
        """年/月/日 phrases, full or partial, should be removed."""
        assert remove_date_markers("2025年8月19日宣传片") == "宣传片"
        assert remove_date_markers("宣传片2025年8月") == "宣传片"
        assert remove_date_markers("宣传片_8月19日") == "宣传片_"
        assert remove_date_markers("2025年宣传片") == "宣传片"

    def test_multiple_dates_all_removed(self):
        """Every date token in a string should be removed, left to right."""
        assert remove_date_markers("a_2025-01-02_b_3_4") == "a__b_"
        assert remove_date_markers("8月1日_to_8月9日") == "_to_"

    def test_non_dates_preserved(self):
        """Bitrate tags, version markers and long numbers are not dates."""
        assert remove_date_markers("Promo_10mbps_V3") == "Promo_10mbps_V3"
        assert remove_date_markers("Take_12345") == "Take_12345"
        assert remove_date_markers("Shot_123_456") == "Shot_123_456"

    def test_empty_input(self):
        """Empty or missing input yields an empty string."""
        assert remove_date_markers("") == ""
        assert remove_date_markers(None) == ""

    @pytest.mark.parametrize("text", [
        "宣传片_2025-08-19_V2",
        "8月2025年3日",
        "1_1_2",
        "a_2025-01-02_b_3_4",
        "2025年8月19日",
        "Promo_10mbps",
        "",
    ])
    def test_idempotent(self, text):
        """Applying twice gives the same result as applying once."""
        once = remove_date_markers(text)
        assert remove_date_markers(once) == once


class TestTrimSymbols:
    """Test stripping of separator clutter from both ends."""

    def test_separators_trimmed(self):
        """Hyphens, underscores, dots, commas and slashes are stripped at the edges."""
        assert trim_symbols("_Promo_") == "Promo"
        assert trim_symbols("--Promo..") == "Promo"
        assert trim_symbols(",/Promo\\") == "Promo"

    def test_brackets_trimmed(self):
        """ASCII and full-width brackets are stripped at the edges."""
        assert trim_symbols("(Promo)") == "Promo"
        assert trim_symbols("【宣传片】") == "宣传片"
        assert trim_symbols("（宣传片）") == "宣传片"
        assert trim_symbols("[Promo]") == "Promo"

    def test_whitespace_mixed_with_symbols(self):
        """Whitespace between edge symbols is stripped along with them."""
        assert trim_symbols("  --【宣传片】--  ") == "宣传片"
        assert trim_symbols("- _ Promo _ -") == "Promo"

    def test_inner_symbols_preserved(self):
        """Only the ends are touched."""
        assert trim_symbols("_Summer_Promo_") == "Summer_Promo"
        assert trim_symbols("Promo (cut)") == "Promo (cut"

    def test_only_symbols_gives_empty(self):
        assert trim_symbols("__--..") == ""
        assert trim_symbols("") == ""
        assert trim_symbols(None) == ""

    @pytest.mark.parametrize("text", ["- _ x", "_Promo_", " 【a】 ", "__", "a", "(_ b _)"])
    def test_idempotent(self, text):
        once = trim_symbols(text)
        assert trim_symbols(once) == once


class TestCleanProjectLabel:
    """Test raw project name → clean label conversion."""

    def test_project_extension_and_date_removed(self):
        assert clean_project_label("夏日宣传片_2025-08-19.prproj") == "夏日宣传片"
        assert clean_project_label("Promo.PRPROJ") == "Promo"

    def test_collapsed_name_uses_default(self):
        """A name that is only a date falls back to the default label."""
        assert clean_project_label("2025-08-19.prproj") == DEFAULT_PROJECT_LABEL

    def test_missing_name_uses_default(self):
        assert clean_project_label(None) == DEFAULT_PROJECT_LABEL
        assert clean_project_label("   ") == DEFAULT_PROJECT_LABEL

    def test_custom_default(self):
        assert clean_project_label("", default="Export") == "Export"
