"""Design generation pipeline: build per-style prompts and fan them out to the model."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterable

from core.models import DEFAULT_STYLES, Style
from core.postprocess import clean_html
from core.prompt_builder import build_prompts
from core.providers import TextGenerator
from prompts.templates import ERROR_PLACEHOLDER_HTML

logger = logging.getLogger(__name__)


async def generate_designs(
    description: str,
    generator: TextGenerator,
    styles: Iterable[Style] = DEFAULT_STYLES,
) -> list[str]:
    """Generate one landing page per style, concurrently.

    Results keep the order of ``styles``. If any call raises, the error
    propagates and the whole batch fails; a call that returns no text
    yields ERROR_PLACEHOLDER_HTML in its slot instead.
    """
    styles = tuple(styles)
    prompts = build_prompts(description, styles)
    logger.info(
        "Starting generation: %d prompts via provider=%s",
        len(prompts), generator.provider_name,
    )

    start_time = time.time()
    raw_outputs = await asyncio.gather(*(generator.generate(prompt) for prompt in prompts))
    elapsed = time.time() - start_time

    designs: list[str] = []
    for style, raw in zip(styles, raw_outputs):
        html = clean_html(raw)
        if not html:
            logger.warning("Empty generation for style=%s, using placeholder", style.value)
            html = ERROR_PLACEHOLDER_HTML
        designs.append(html)

    logger.info(
        "Generation complete in %.2fs: sizes=%s",
        elapsed, [len(d) for d in designs],
    )
    return designs


def run_generation(
    description: str,
    generator: TextGenerator,
    styles: Iterable[Style] = DEFAULT_STYLES,
) -> list[str]:
    """Synchronous entry point for callers without an event loop."""
    return asyncio.run(generate_designs(description, generator, styles))
