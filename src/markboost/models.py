"""Core markboost data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Set, Tuple, Union

SkipReason = Literal["non_english", "too_short", "no_output", "error"]


@dataclass(frozen=True, slots=True)
class SEOData:
    """SEO metadata produced for a note.

    ``keywords`` is reserved for future use; nothing populates it yet.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords) if self.keywords is not None else None,
        }


@dataclass(frozen=True, slots=True)
class SeoSkipped:
    """Outcome of an SEO request that produced no metadata."""

    reason: SkipReason
    detail: str = ""


SeoOutcome = Union[SEOData, SeoSkipped]


@dataclass(frozen=True, slots=True)
class ProcessedNode:
    """Identity and optional extras for one Markdown note."""

    id: str
    title: str
    file_path: str
    full_path_slug: str
    simple_slug: str
    content: Optional[str] = None
    frontmatter: Optional[Dict[str, Any]] = None
    last_modified: Optional[datetime] = None
    seo: Optional[SEOData] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "file_path": self.file_path,
            "full_path_slug": self.full_path_slug,
            "simple_slug": self.simple_slug,
        }
        if self.content is not None:
            data["content"] = self.content
        if self.frontmatter is not None:
            data["frontmatter"] = self.frontmatter
        if self.last_modified is not None:
            data["last_modified"] = self.last_modified.isoformat()
        if self.seo is not None:
            data["seo"] = self.seo.to_dict()
        return data


@dataclass(slots=True)
class ScanResult:
    """All notes of a scan plus lookups by full-path and simple slug."""

    all_notes: List[ProcessedNode] = field(default_factory=list)
    notes_by_full_path_slug: Dict[str, ProcessedNode] = field(default_factory=dict)
    notes_by_simple_slug: Dict[str, Set[str]] = field(default_factory=dict)

    def add(self, node: ProcessedNode) -> None:
        self.all_notes.append(node)
        self.notes_by_full_path_slug[node.full_path_slug] = node
        self.notes_by_simple_slug.setdefault(node.simple_slug, set()).add(node.full_path_slug)

    def get(self, full_path_slug: str) -> Optional[ProcessedNode]:
        return self.notes_by_full_path_slug.get(full_path_slug)

    def resolve(self, simple_slug: str) -> List[str]:
        """Full-path slugs sharing ``simple_slug``, sorted."""
        return sorted(self.notes_by_simple_slug.get(simple_slug, ()))

    def collisions(self) -> Dict[str, List[str]]:
        """Simple slugs claimed by more than one note."""
        return {
            simple: sorted(full_slugs)
            for simple, full_slugs in self.notes_by_simple_slug.items()
            if len(full_slugs) > 1
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "all_notes": [node.to_dict() for node in self.all_notes],
            "notes_by_simple_slug": {
                simple: sorted(full_slugs)
                for simple, full_slugs in self.notes_by_simple_slug.items()
            },
        }
