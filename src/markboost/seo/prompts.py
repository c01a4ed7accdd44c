"""Prompt construction for SEO title and meta description generation."""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)

# Shared with the response parser; the model is asked to echo these verbatim.
TITLE_LABEL = "SEO Title:"
DESCRIPTION_LABEL = "Meta Description:"

DEFAULT_PROMPT_TEMPLATE = f"""
Based on the original title and content excerpt of the following blog post:
Original Title: "{{title}}"
Content Excerpt: "{{excerpt}}"

Please generate an SEO-optimized title (around 50-70 characters) and a meta description (around 100-160 characters).

Respond in the following format, using these exact labels. Do not include any other conversation or explanations:
{TITLE_LABEL} [Your suggested SEO title here]
{DESCRIPTION_LABEL} [Your suggested meta description here]

If it's difficult to generate a better title, you can use or slightly modify the original title.
""".strip()


class PromptTemplateError(ValueError):
    """Raised when a custom prompt template cannot be used."""


def validate_template(template: str) -> str:
    missing = [label for label in (TITLE_LABEL, DESCRIPTION_LABEL) if label not in template]
    if missing:
        raise PromptTemplateError(f"Prompt template is missing labels: {', '.join(missing)}")
    try:
        template.format(title="", excerpt="")
    except (KeyError, IndexError, ValueError) as exc:
        raise PromptTemplateError(
            f"Prompt template may only use {{title}} and {{excerpt}} placeholders: {exc}"
        ) from exc
    return template


def load_prompt_template(path: Path) -> str:
    """Read and validate a prompt template file."""
    path = Path(path)
    try:
        template = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptTemplateError(f"Cannot read prompt template {path}: {exc}") from exc
    LOGGER.info("Using prompt template from %s", path)
    return validate_template(template)


def build_seo_prompt(original_title: str, content_excerpt: str, template: str | None = None) -> str:
    """Fill the prompt template with the note title and content excerpt."""
    return (template or DEFAULT_PROMPT_TEMPLATE).format(
        title=original_title,
        excerpt=content_excerpt,
    )
