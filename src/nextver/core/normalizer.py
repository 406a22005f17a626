"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/normalizer.py
Cleans labels taken from export filenames and project names:
date markers and surrounding separator clutter are removed.
"""

import re
import logging
from typing import Optional

from nextver.core.models import DEFAULT_PROJECT_LABEL

logger = logging.getLogger(__name__)

# Pre-compiled regex patterns (performance optimization)
# Alternatives are ordered longest first so "2025_08_19" is removed whole
# instead of leaving "2025_" behind after a month_day hit.
_PATTERN_DATE = re.compile(
    r'(?<!\d)(?:'
    r'\d{4}[-_.]\d{1,2}[-_.]\d{1,2}(?!\d)'   # 2025-08-19, 2025.8.19, 2025_8_19
    r'|\d{1,4}年\d{1,2}月(?:\d{1,2}日)?'      # 2025年8月19日, 2025年8月
    r'|\d{1,2}月\d{1,2}日'                    # 8月19日
    r'|\d{4}年'                               # 2025年
    r'|\d{1,2}_\d{1,2}(?!\d)'                # 8_19
    r')',
    re.ASCII,
)
_EDGE_CHARS = r'\s\-_.,/\\()（）【】\[\]'
_PATTERN_EDGE_SYMBOLS = re.compile(rf'^[{_EDGE_CHARS}]+|[{_EDGE_CHARS}]+$')
_PATTERN_PROJECT_EXT = re.compile(r'\.prproj$', re.IGNORECASE)


def remove_date_markers(text: Optional[str]) -> str:
    """
    Remove date-like tokens from a label.

    Recognized forms:
    - month_day: "8_19", "12_25"
    - year-month-day joined by '-', '_' or '.': "2025-08-19", "2025.8.3"
    - calendar phrases: "2025年8月19日", "2025年8月", "8月19日", "2025年"

    Removal repeats until nothing matches, so the result is stable:
    remove_date_markers(remove_date_markers(s)) == remove_date_markers(s)

    Examples:
        "宣传片_2025-08-19" → "宣传片_"
        "Promo 8月19日 cut" → "Promo  cut"
    """
    if not text:
        return ""

    cleaned = text
    while True:
        stripped = _PATTERN_DATE.sub('', cleaned)
        if stripped == cleaned:
            break
        cleaned = stripped

    if cleaned != text:
        logger.debug(f"Removed date markers: '{text}' → '{cleaned}'")
    return cleaned


def trim_symbols(text: Optional[str]) -> str:
    """
    Strip whitespace and separator clutter from both ends.

    Separators: - _ . , / \\ ( ) （ ） 【 】 [ ]
    Whitespace and separators are stripped as one run, so the operation is idempotent.

    Examples:
        "_Promo_" → "Promo"
        " 【宣传片】 " → "宣传片"
    """
    if not text:
        return ""
    return _PATTERN_EDGE_SYMBOLS.sub('', text)


def clean_project_label(project_name: Optional[str], default: str = DEFAULT_PROJECT_LABEL) -> str:
    """
    Turn a raw project name into a label usable as an export base name.
    Drops the .prproj extension, date markers and edge clutter.
    Falls back to `default` when nothing is left.
    """
    if not project_name or not project_name.strip():
        return default

    label = _PATTERN_PROJECT_EXT.sub('', project_name.strip())
    label = remove_date_markers(label)
    label = trim_symbols(label)

    if not label:
        logger.debug(f"Project name '{project_name}' collapsed to empty, using '{default}'")
        return default
    return label
