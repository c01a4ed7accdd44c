"""Parsing of labelled SEO responses returned by the text-generation model.

Model output is free text, so parsing is label based. The parser walks a
small state machine:

``START``
    No text at all goes straight to ``DONE`` with the fallback title.
    Otherwise the labels are searched for.
``LABELLED``
    The title label was found, or the description label with text after it;
    title and description are read from their labels independently.
``UNLABELLED``
    Nothing usable was labelled; the first 160 characters of the response
    become the description and the title stays the fallback.
``DONE``
    The collected fields are returned as :class:`SEOData`.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional

from markboost.models import SEOData
from markboost.seo.prompts import DESCRIPTION_LABEL, TITLE_LABEL
from markboost.utils.text import strip_enclosing_quotes

FALLBACK_DESCRIPTION_CHARS = 160

_FLAGS = re.IGNORECASE | re.DOTALL
_TITLE_RE = re.compile(
    rf"{re.escape(TITLE_LABEL)}(.*?)(?:{re.escape(DESCRIPTION_LABEL)}|\Z)", _FLAGS
)
_DESCRIPTION_RE = re.compile(rf"{re.escape(DESCRIPTION_LABEL)}(.*)\Z", _FLAGS)


class ParseState(enum.Enum):
    START = "start"
    LABELLED = "labelled"
    UNLABELLED = "unlabelled"
    DONE = "done"


@dataclass(slots=True)
class _ParseContext:
    raw: str
    title: str
    description: Optional[str] = None
    title_match: Optional[re.Match[str]] = None
    description_match: Optional[re.Match[str]] = None


def _clean(value: str) -> str:
    return strip_enclosing_quotes(value.strip())


def _start(ctx: _ParseContext) -> ParseState:
    if not ctx.raw:
        return ParseState.DONE
    ctx.title_match = _TITLE_RE.search(ctx.raw)
    ctx.description_match = _DESCRIPTION_RE.search(ctx.raw)
    described = ctx.description_match is not None and ctx.description_match.group(1).strip()
    if ctx.title_match or described:
        return ParseState.LABELLED
    return ParseState.UNLABELLED


def _labelled(ctx: _ParseContext) -> ParseState:
    if ctx.title_match and ctx.title_match.group(1).strip():
        ctx.title = _clean(ctx.title_match.group(1)) or ctx.title
    if ctx.description_match and ctx.description_match.group(1).strip():
        ctx.description = _clean(ctx.description_match.group(1)) or None
    return ParseState.DONE


def _unlabelled(ctx: _ParseContext) -> ParseState:
    cleaned = ctx.raw.strip()
    if cleaned:
        ctx.description = strip_enclosing_quotes(cleaned[:FALLBACK_DESCRIPTION_CHARS]) or None
    return ParseState.DONE


_TRANSITIONS = {
    ParseState.START: _start,
    ParseState.LABELLED: _labelled,
    ParseState.UNLABELLED: _unlabelled,
}


def parse_seo_response(raw_text: Optional[str], fallback_title: str) -> SEOData:
    """Extract an SEO title and meta description from model output.

    The title falls back to ``fallback_title`` whenever none can be read and
    the description is ``None`` when nothing usable was found. Keywords are
    never produced.
    """
    ctx = _ParseContext(raw=raw_text or "", title=fallback_title)
    state = ParseState.START
    while state is not ParseState.DONE:
        state = _TRANSITIONS[state](ctx)
    return SEOData(title=ctx.title, description=ctx.description, keywords=None)
