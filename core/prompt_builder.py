"""Prompt builder that turns a business description into per-style prompts."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from core.models import DEFAULT_STYLES, Style
from prompts.templates import LANDING_PAGE_PROMPT, STYLE_INSTRUCTIONS

logger = logging.getLogger(__name__)


def build_prompt(description: str, style: Style) -> str:
    """Build the landing page prompt for one style.

    Substitution is single-pass, so the description lands in the prompt
    verbatim even if it contains ``$`` placeholders of its own.
    """
    prompt = LANDING_PAGE_PROMPT.safe_substitute(
        description=description,
        style_instructions=STYLE_INSTRUCTIONS[style],
    )
    logger.debug("Built %s prompt (%d chars)", style.value, len(prompt))
    return prompt


def build_prompts(description: str, styles: Iterable[Style] = DEFAULT_STYLES) -> list[str]:
    """Return one prompt per style, in the order given."""
    return [build_prompt(description, style) for style in styles]
