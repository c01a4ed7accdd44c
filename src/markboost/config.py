"""Scan and model configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

DEFAULT_MODEL = "MBZUAI/LaMini-Flan-T5-783M"
DEFAULT_TASK = "text2text-generation"
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = ("**/node_modules/**", "**/.*")


class ContentPathError(ValueError):
    """Raised when the scan root is missing or not a directory."""


@dataclass(slots=True)
class LLMConfig:
    model_name: str = DEFAULT_MODEL
    task: str = DEFAULT_TASK
    min_content_length_for_seo: int = 50
    max_content_length_for_prompt: int = 250
    min_new_tokens: int = 15
    max_new_tokens: int = 120
    prompt_template_path: Path | None = None
    device: str | None = None
    local_files_only: bool = False

    def __post_init__(self) -> None:
        for name in (
            "min_content_length_for_seo",
            "max_content_length_for_prompt",
            "min_new_tokens",
            "max_new_tokens",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.min_new_tokens > self.max_new_tokens:
            raise ValueError("min_new_tokens cannot exceed max_new_tokens")
        if self.prompt_template_path is not None:
            self.prompt_template_path = Path(self.prompt_template_path)


@dataclass(slots=True)
class ScanOptions:
    content_path: Path
    ignore_patterns: Sequence[str] = DEFAULT_IGNORE_PATTERNS
    slugify_fn: Callable[[str], str] | None = None
    include_content: bool = False
    include_frontmatter: bool = False
    include_last_modified: bool = False
    generate_seo: bool = False
    llm_config: LLMConfig = field(default_factory=LLMConfig)

    def __post_init__(self) -> None:
        self.content_path = Path(self.content_path)

    def resolve_content_path(self) -> Path:
        root = self.content_path.expanduser()
        if not root.is_dir():
            raise ContentPathError(f"Content path is not a directory: {root}")
        return root
