"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/matcher.py
Detects version markers in export filenames and composes new ones.

Two notations are recognized, checked in this order (first match wins):
- LATIN:   "V" or "v" followed by digits, e.g. "Promo_10mbps_V3.mp4"
- ORDINAL: "第" + ordinal glyphs + "版", e.g. "宣传片_第三版.mp4"
"""

import re
import logging

from nextver.core.models import VersionInfo, VersionNotation, NO_VERSION

logger = logging.getLogger(__name__)

ORDINAL_GLYPHS = "一二三四五六七八九十"
ORDINAL_VALUES = {glyph: index for index, glyph in enumerate(ORDINAL_GLYPHS, start=1)}

_PATTERN_EXTENSION = re.compile(r'\.[^/.]+$')
_PATTERN_LATIN = re.compile(r'[Vv](\d+)', re.ASCII)
_PATTERN_ORDINAL = re.compile(rf'第([{ORDINAL_GLYPHS}]+)版')


def strip_extension(filename: str) -> str:
    """Drop everything from the last '.' on ("a.b.mp4" → "a.b")."""
    return _PATTERN_EXTENSION.sub('', filename)


def extract_version(filename: str) -> VersionInfo:
    """
    Find the version marker in a filename.

    Args:
        filename: Leaf filename, extension included

    Returns:
        VersionInfo with found=False, number=0, notation=NONE if no marker exists.

    Examples:
        "Promo_10mbps_V3.mp4" → (True, 3, LATIN, "V3")
        "宣传片_第二版.mov"     → (True, 2, ORDINAL, "第二版")
    """
    if not filename:
        return NO_VERSION

    name = strip_extension(filename)

    match = _PATTERN_LATIN.search(name)
    if match:
        return VersionInfo(
            found=True,
            number=int(match.group(1)),
            notation=VersionNotation.LATIN,
            matched_span=match.group(0),
        )

    match = _PATTERN_ORDINAL.search(name)
    if match:
        # Compound ordinals ("十一") are outside the table and count as 1
        number = ORDINAL_VALUES.get(match.group(1), 1)
        return VersionInfo(
            found=True,
            number=number,
            notation=VersionNotation.ORDINAL,
            matched_span=match.group(0),
        )

    return NO_VERSION


def format_version(number: int, notation: VersionNotation) -> str:
    """
    Compose the version marker for `number` in the given notation.
    Ordinals above 十 fall back to numerals: 11 → "第11版".
    NONE is written in the Latin form.
    """
    if number < 0:
        raise ValueError("Version number cannot be negative")

    if notation is VersionNotation.ORDINAL:
        if 1 <= number <= len(ORDINAL_GLYPHS):
            return f"第{ORDINAL_GLYPHS[number - 1]}版"
        return f"第{number}版"
    return f"V{number}"
