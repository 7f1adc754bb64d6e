"""Post-processing for model output: turn a raw completion into a bare HTML document."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```[\w-]*[ \t]*\r?\n?(.*?)\r?\n?```$", re.DOTALL)
_DOCUMENT_START_RE = re.compile(r"<!doctype\s+html|<html[\s>]", re.IGNORECASE)
_DOCUMENT_END = "</html>"


def strip_code_fence(text: str) -> str:
    """Remove a Markdown code fence wrapped around the whole text."""
    match = _FENCE_RE.match(text.strip())
    if match:
        return match.group(1).strip()
    return text.strip()


def clean_html(text: str | None) -> str:
    """Strip fences and any preamble the model wrote before the document."""
    if not text:
        return ""

    cleaned = strip_code_fence(text)

    start = _DOCUMENT_START_RE.search(cleaned)
    if start and start.start() > 0:
        logger.debug("Dropping %d chars of preamble before HTML document", start.start())
        cleaned = cleaned[start.start():]

    # Closing fences and sign-off chatter after the document are dropped
    end = cleaned.lower().rfind(_DOCUMENT_END)
    if start and end != -1:
        cleaned = cleaned[: end + len(_DOCUMENT_END)]
    elif start and cleaned.rstrip().endswith("```"):
        cleaned = cleaned.rstrip()[:-3]

    return cleaned.strip()
