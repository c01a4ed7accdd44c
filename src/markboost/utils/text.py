"""Text helpers for whitespace tokenisation and prompt excerpts."""

from __future__ import annotations

from typing import List


def split_words(text: str | None) -> List[str]:
    """Split text on whitespace runs, discarding empty tokens."""
    if not text:
        return []
    return text.split()


def count_words(text: str | None) -> int:
    return len(split_words(text))


def word_excerpt(text: str | None, max_words: int) -> str:
    """Return the first ``max_words`` tokens of text joined by single spaces."""
    if max_words <= 0:
        return ""
    return " ".join(split_words(text)[:max_words])


def strip_enclosing_quotes(value: str) -> str:
    """Remove one layer of surrounding double quotes, if present."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value
