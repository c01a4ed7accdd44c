"""Markdown loading and front matter extraction.

Front matter is parsed with python-frontmatter; parse errors are not caught.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import frontmatter

from markboost.utils.files import MarkdownFile

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadedNote:
    """Body text and metadata read from a Markdown file."""

    source: MarkdownFile
    body: str
    metadata: Dict[str, Any]

    @property
    def last_modified(self) -> datetime:
        return datetime.fromtimestamp(self.source.mtime)


def split_front_matter(raw: str) -> tuple[str, Dict[str, Any]]:
    """Return ``(body, metadata)`` for raw Markdown text."""
    post = frontmatter.loads(raw)
    return post.content, dict(post.metadata)


def read_markdown(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def load_note(source: MarkdownFile) -> LoadedNote:
    """Read a Markdown file and separate its front matter from the body."""
    raw = read_markdown(source.absolute_path)
    body, metadata = split_front_matter(raw)
    LOGGER.debug("Loaded %s (%d front matter keys)", source.relative_path, len(metadata))
    return LoadedNote(source=source, body=body, metadata=metadata)
