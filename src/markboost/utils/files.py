"""Utility helpers for locating Markdown notes on disk."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence

MARKDOWN_SUFFIX = ".md"


@dataclass(frozen=True, slots=True)
class MarkdownFile:
    """A Markdown file found under a scan root."""

    relative_path: str
    absolute_path: Path
    mtime: float

    @property
    def filename(self) -> str:
        return self.relative_path.rsplit("/", 1)[-1]


def to_posix_relative(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` using forward slashes."""
    return path.relative_to(root).as_posix()


@functools.lru_cache(maxsize=128)
def _compile_glob(pattern: str) -> re.Pattern[str]:
    parts = []
    index = 0
    while index < len(pattern):
        if pattern.startswith("**/", index):
            parts.append("(?:.*/)?")
            index += 3
        elif pattern.startswith("**", index):
            parts.append(".*")
            index += 2
        elif pattern[index] == "*":
            parts.append("[^/]*")
            index += 1
        elif pattern[index] == "?":
            parts.append("[^/]")
            index += 1
        else:
            parts.append(re.escape(pattern[index]))
            index += 1
    return re.compile("".join(parts) + r"\Z")


def matches_pattern(relative_path: str, pattern: str) -> bool:
    """Glob-style match of a root-relative POSIX path.

    ``*`` and ``?`` stay within one path segment, ``**`` spans directories and
    a leading ``**/`` also matches at the root. A pattern matching a directory
    covers everything below it.
    """
    regex = _compile_glob(pattern)
    segments = relative_path.split("/")
    return any(
        regex.match("/".join(segments[:end])) for end in range(1, len(segments) + 1)
    )


def is_ignored(relative_path: str, patterns: Iterable[str]) -> bool:
    return any(matches_pattern(relative_path, pattern) for pattern in patterns)


def iter_markdown_files(root: Path, ignore_patterns: Sequence[str] = ()) -> Iterator[MarkdownFile]:
    """Yield Markdown files below ``root`` in sorted path order, skipping ignored ones."""
    root = Path(root)
    for path in sorted(root.rglob(f"*{MARKDOWN_SUFFIX}")):
        if not path.is_file():
            continue
        relative = to_posix_relative(path, root)
        if is_ignored(relative, ignore_patterns):
            continue
        yield MarkdownFile(
            relative_path=relative,
            absolute_path=path,
            mtime=path.stat().st_mtime,
        )
