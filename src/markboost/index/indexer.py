"""Note indexing pipeline."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from markboost.config import ScanOptions
from markboost.ingestion.markdown_loader import load_note
from markboost.models import ProcessedNode, ScanResult, SEOData, SeoOutcome
from markboost.seo.generator import SEOGenerator
from markboost.utils.files import MarkdownFile, iter_markdown_files
from markboost.utils.slugify import slugify

LOGGER = logging.getLogger(__name__)


def note_title(filename: str) -> str:
    """Title of a note: its filename without the extension, casing kept."""
    return Path(filename).stem


@dataclass(slots=True)
class IndexStats:
    notes: int = 0
    seo_generated: int = 0
    seo_skipped: Counter = field(default_factory=Counter)

    def record(self, outcome: SeoOutcome | None) -> None:
        self.notes += 1
        if outcome is None:
            return
        if isinstance(outcome, SEOData):
            self.seo_generated += 1
        else:
            self.seo_skipped[outcome.reason] += 1


class NoteIndexer:
    """Builds a :class:`ScanResult` from the Markdown notes under a root."""

    def __init__(
        self,
        options: ScanOptions,
        *,
        seo_generator: SEOGenerator | None = None,
    ) -> None:
        self.options = options
        self.slugify: Callable[[str], str] = options.slugify_fn or slugify
        self.seo_generator = seo_generator
        if options.generate_seo and self.seo_generator is None:
            self.seo_generator = SEOGenerator(options.llm_config)
        self.stats = IndexStats()

    def scan(self) -> ScanResult:
        """Index every non-ignored Markdown file under the content path."""
        root = self.options.resolve_content_path()
        LOGGER.info("Scanning %s", root)
        result = self.index_files(iter_markdown_files(root, self.options.ignore_patterns))

        collisions = result.collisions()
        LOGGER.info(
            "Indexed %d notes (SEO generated: %d, skipped: %s, slug collisions: %d)",
            self.stats.notes,
            self.stats.seo_generated,
            dict(self.stats.seo_skipped) or 0,
            len(collisions),
        )
        for simple_slug, full_slugs in collisions.items():
            LOGGER.debug("Simple slug %r shared by %s", simple_slug, ", ".join(full_slugs))
        return result

    def index_files(self, files: Iterable[MarkdownFile]) -> ScanResult:
        self.stats = IndexStats()
        result = ScanResult()
        for source in files:
            LOGGER.debug("Processing: %s", source.relative_path)
            node, outcome = self._index_single(source)
            result.add(node)
            self.stats.record(outcome)
        return result

    def _index_single(self, source: MarkdownFile) -> tuple[ProcessedNode, SeoOutcome | None]:
        note = load_note(source)
        file_path = source.relative_path
        title = note_title(source.filename)
        full_path_slug = self.slugify(file_path)

        outcome: SeoOutcome | None = None
        if self.options.generate_seo and self.seo_generator is not None:
            outcome = self.seo_generator.generate(title, note.body)

        node = ProcessedNode(
            id=full_path_slug,
            title=title,
            file_path=file_path,
            full_path_slug=full_path_slug,
            simple_slug=self.slugify(source.filename),
            content=note.body if self.options.include_content else None,
            frontmatter=note.metadata if self.options.include_frontmatter else None,
            last_modified=note.last_modified if self.options.include_last_modified else None,
            seo=outcome if isinstance(outcome, SEOData) else None,
        )
        return node, outcome


def scan_and_process_notes(options: ScanOptions) -> ScanResult:
    """Scan ``options.content_path`` and return all notes with their lookups."""
    return NoteIndexer(options).scan()
