"""SEO metadata generation with a local text-generation model."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from transformers import pipeline as hf_pipeline

from markboost.config import DEFAULT_MODEL, DEFAULT_TASK, LLMConfig
from markboost.models import SeoOutcome, SeoSkipped
from markboost.seo.language import detect_non_latin_script
from markboost.seo.parser import parse_seo_response
from markboost.seo.prompts import build_seo_prompt, load_prompt_template
from markboost.utils.text import count_words, word_excerpt

logger = logging.getLogger(__name__)

PipelineFactory = Callable[..., Callable[..., Any]]


def detect_device() -> str:
    """Pick the best available torch device.

    Returns "cuda" for NVIDIA (and ROCm builds, which expose the CUDA API),
    "mps" for Apple Silicon and "cpu" otherwise.
    """
    try:
        import torch

        if torch.cuda.is_available():
            logger.debug(f"CUDA device detected: {torch.cuda.get_device_name(0)}")
            return "cuda"

        if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
            logger.debug("Apple MPS device detected")
            return "mps"

        logger.debug("No GPU detected, will use CPU")
        return "cpu"
    except ImportError:
        logger.debug("PyTorch not available for device detection")
        return "cpu"
    except Exception as e:
        logger.debug(f"Device detection failed: {e}")
        return "cpu"


def extract_generated_text(outputs: Any) -> Optional[str]:
    """Pull ``generated_text`` out of a single result or a list of results."""
    if isinstance(outputs, (list, tuple)):
        if not outputs:
            return None
        outputs = outputs[0]
    if isinstance(outputs, Mapping):
        text = outputs.get("generated_text")
    else:
        text = getattr(outputs, "generated_text", None)
    if isinstance(text, str) and text:
        return text
    return None


@dataclass(slots=True)
class GenerationSettings:
    model_name: str = DEFAULT_MODEL
    task: str = DEFAULT_TASK
    device: str | None = None
    local_files_only: bool = False


class TextGenerationModel:
    """Lazily loaded wrapper around a `transformers` generation pipeline.

    The pipeline is built on first use and reused for every later prompt, so
    a scan pays the model load at most once.
    """

    def __init__(
        self,
        settings: GenerationSettings | None = None,
        *,
        pipeline_factory: PipelineFactory | None = None,
    ) -> None:
        self.settings = settings or GenerationSettings()
        self._pipeline_factory = pipeline_factory or hf_pipeline
        self._pipeline: Callable[..., Any] | None = None

    @classmethod
    def from_config(cls, config: LLMConfig, **kwargs: Any) -> "TextGenerationModel":
        return cls(
            GenerationSettings(
                model_name=config.model_name,
                task=config.task,
                device=config.device,
                local_files_only=config.local_files_only,
            ),
            **kwargs,
        )

    @property
    def loaded(self) -> bool:
        return self._pipeline is not None

    def _load_pipeline(self) -> Callable[..., Any]:
        if self.settings.device is None:
            self.settings.device = detect_device()
        logger.info(
            "Loading %s model %s on %s",
            self.settings.task,
            self.settings.model_name,
            self.settings.device,
        )
        model_kwargs = {"local_files_only": True} if self.settings.local_files_only else None
        return self._pipeline_factory(
            self.settings.task,
            model=self.settings.model_name,
            device=self.settings.device,
            model_kwargs=model_kwargs,
        )

    def generate(self, prompt: str, *, min_new_tokens: int, max_new_tokens: int) -> Any:
        """Run the prompt and return the raw pipeline output."""
        if self._pipeline is None:
            self._pipeline = self._load_pipeline()
        return self._pipeline(
            prompt,
            min_new_tokens=min_new_tokens,
            max_new_tokens=max_new_tokens,
        )


class SEOGenerator:
    """Gate, prompt and parse SEO metadata for English notes.

    Notes whose title contains a non-Latin script or whose body is shorter
    than ``min_content_length_for_seo`` words are skipped without touching the
    model. Model failures are logged and reported as skips.
    """

    def __init__(
        self,
        config: LLMConfig | None = None,
        model: TextGenerationModel | None = None,
    ) -> None:
        self.config = config or LLMConfig()
        self.model = model or TextGenerationModel.from_config(self.config)
        self.prompt_template: str | None = None
        if self.config.prompt_template_path is not None:
            self.prompt_template = load_prompt_template(self.config.prompt_template_path)

    def check_gates(self, original_title: str, content: str) -> SeoSkipped | None:
        script = detect_non_latin_script(original_title)
        if script is not None:
            return SeoSkipped("non_english", f"{script} characters in title")

        word_count = count_words(content)
        if word_count < self.config.min_content_length_for_seo:
            return SeoSkipped(
                "too_short",
                f"{word_count} words < {self.config.min_content_length_for_seo}",
            )
        return None

    def generate(self, original_title: str, content: str) -> SeoOutcome:
        skipped = self.check_gates(original_title, content)
        if skipped is not None:
            logger.debug("Skipping SEO for %r: %s", original_title, skipped.detail)
            return skipped

        try:
            excerpt = word_excerpt(content, self.config.max_content_length_for_prompt)
            prompt = build_seo_prompt(original_title, excerpt, self.prompt_template)
            outputs = self.model.generate(
                prompt,
                min_new_tokens=self.config.min_new_tokens,
                max_new_tokens=self.config.max_new_tokens,
            )
            generated = extract_generated_text(outputs)
            if not generated:
                logger.warning(
                    "No text generated by %s for %r", self.config.model_name, original_title
                )
                return SeoSkipped("no_output")
            return parse_seo_response(generated, original_title)
        except Exception as e:
            logger.error(
                f"SEO generation failed for {original_title!r} "
                f"(model: {self.config.model_name}): {e}"
            )
            return SeoSkipped("error", str(e))
