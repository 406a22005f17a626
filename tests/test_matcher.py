"""
Unit tests for core/matcher.py
Verifies Latin and ordinal version marker detection and version string composition.
"""
import pytest
from nextver.core.matcher import extract_version, format_version, strip_extension, ORDINAL_GLYPHS
from nextver.core.models import VersionNotation, NO_VERSION


class TestLatinNotation:
    """Test "V<n>" markers."""

    @pytest.mark.parametrize("number", [1, 2, 9, 10, 42, 100])
    def test_latin_marker_detected(self, number):
        info = extract_version(f"Promo_10mbps_V{number}.mp4")
        assert info.found is True
        assert info.number == number
        assert info.notation is VersionNotation.LATIN
        assert info.matched_span == f"V{number}"

    def test_lowercase_marker_keeps_case_in_span(self):
        """The letter is case-insensitive; the span records the case as found."""
        info = extract_version("promo_v12.mov")
        assert info.number == 12
        assert info.matched_span == "v12"

    def test_marker_anywhere_in_name(self):
        info = extract_version("V7_Promo_final.mp4")
        assert info.number == 7
        assert info.matched_span == "V7"

    def test_first_marker_wins(self):
        info = extract_version("Promo_V2_V5.mp4")
        assert info.number == 2

    def test_latin_takes_precedence_over_ordinal(self):
        """Both notations present: Latin wins, the notations never mix."""
        info = extract_version("宣传片_第三版_V5.mp4")
        assert info.notation is VersionNotation.LATIN
        assert info.number == 5


class TestOrdinalNotation:
    """Test "第<glyph>版" markers."""

    @pytest.mark.parametrize("number,glyph", list(enumerate(ORDINAL_GLYPHS, start=1)))
    def test_ordinal_marker_detected(self, number, glyph):
        info = extract_version(f"宣传片_第{glyph}版.mp4")
        assert info.found is True
        assert info.number == number
        assert info.notation is VersionNotation.ORDINAL
        assert info.matched_span == f"第{glyph}版"

    def test_compound_ordinal_not_in_table_counts_as_one(self):
        """Only the ten single glyphs are mapped; "十一" is not parsed as 11."""
        info = extract_version("宣传片_第十一版.mp4")
        assert info.found is True
        assert info.number == 1
        assert info.matched_span == "第十一版"

    def test_numeral_ordinal_not_recognized(self):
        """"第11版" (numeral fallback form) is not an ordinal marker."""
        assert extract_version("宣传片_第11版.mp4").found is False


class TestNoVersion:
    """Test filenames without any marker."""

    def test_no_marker(self):
        info = extract_version("draft_final.mp4")
        assert info == NO_VERSION
        assert info.found is False
        assert info.number == 0
        assert info.notation is VersionNotation.NONE
        assert info.matched_span is None

    def test_empty_filename(self):
        assert extract_version("") == NO_VERSION

    def test_marker_in_extension_ignored(self):
        """The extension is stripped before matching."""
        assert extract_version("Promo.V2").found is False

    def test_only_last_extension_stripped(self):
        info = extract_version("cut_v2.final.mp4")
        assert info.number == 2


class TestStripExtension:

    def test_strip_extension(self):
        assert strip_extension("Promo_V1.mp4") == "Promo_V1"
        assert strip_extension("a.b.mov") == "a.b"
        assert strip_extension("no_extension") == "no_extension"


class TestFormatVersion:
    """Test composition of the next version marker."""

    def test_latin(self):
        assert format_version(4, VersionNotation.LATIN) == "V4"
        assert format_version(120, VersionNotation.LATIN) == "V120"

    def test_none_defaults_to_latin(self):
        assert format_version(1, VersionNotation.NONE) == "V1"

    def test_ordinal_within_table(self):
        assert format_version(1, VersionNotation.ORDINAL) == "第一版"
        assert format_version(3, VersionNotation.ORDINAL) == "第三版"
        assert format_version(10, VersionNotation.ORDINAL) == "第十版"

    def test_ordinal_above_table_uses_numerals(self):
        assert format_version(11, VersionNotation.ORDINAL) == "第11版"
        assert format_version(25, VersionNotation.ORDINAL) == "第25版"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            format_version(-1, VersionNotation.LATIN)
