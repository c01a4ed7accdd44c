"""Script-based check deciding whether a title is likely English."""

from __future__ import annotations

import re
from typing import Optional

# Checked in order; the first script found wins.
NON_LATIN_SCRIPTS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("hangul", re.compile(r"[\u3131-\u318E\uAC00-\uD7AF]")),
    ("kana", re.compile(r"[\u3040-\u309F\u30A0-\u30FF]")),
    ("cjk", re.compile(r"[\u4E00-\u9FFF]")),
    ("cyrillic", re.compile(r"[\u0400-\u04FF]")),
)


def detect_non_latin_script(text: str | None) -> Optional[str]:
    """Name of the first non-Latin script present in ``text``, if any."""
    if not text:
        return None
    for name, pattern in NON_LATIN_SCRIPTS:
        if pattern.search(text):
            return name
    return None


def is_likely_english(text: str | None) -> bool:
    """Return False as soon as one character of a listed script appears.

    Empty input counts as English.
    """
    return detect_non_latin_script(text) is None
