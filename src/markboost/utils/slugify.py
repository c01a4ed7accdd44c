"""Slug helpers turning note paths and filenames into URL-safe identifiers."""

from __future__ import annotations

import re

_MARKDOWN_SUFFIX = re.compile(r"\.md\Z")
_WHITESPACE = re.compile(r"\s+")
# Lowercase Latin letters, digits, Hangul syllables and hyphens survive.
_DISALLOWED = re.compile(r"[^a-z0-9\uAC00-\uD7A3-]+")
_HYPHEN_RUNS = re.compile(r"-+")


def _slugify_segment(segment: str) -> str:
    segment = segment.strip().lower()
    segment = _WHITESPACE.sub("-", segment)
    segment = segment.replace("_", "-")
    segment = _DISALLOWED.sub("", segment)
    segment = _HYPHEN_RUNS.sub("-", segment)
    return segment.strip("-")


def slugify(name_or_path: str | None) -> str:
    """Convert a filename or relative path into a slug.

    Directory structure is preserved: each path segment is slugified on its own
    and the non-empty results are joined with ``/``.

    >>> slugify("My Folder/Another_Post with_Spaces.md")
    'my-folder/another-post-with-spaces'
    >>> slugify("한글 파일 이름.md")
    '한글-파일-이름'

    Characters from scripts other than Latin and Hangul are dropped, so such
    names can collapse to an empty slug.
    """
    if not name_or_path:
        return ""

    normalized = _MARKDOWN_SUFFIX.sub("", name_or_path).replace("\\", "/")
    segments = (_slugify_segment(part) for part in normalized.split("/"))
    return "/".join(segment for segment in segments if segment)
