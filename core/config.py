"""Runtime settings read from the environment (and a local .env, if present)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"

# Range Gemini accepts for sampling temperature
TEMPERATURE_RANGE = (0.0, 2.0)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _env_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name, "").strip().upper()
    if not raw:
        return default
    # getLevelName maps known names to their numeric level, anything else to a string
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    return raw


@dataclass(frozen=True)
class Settings:
    provider: str = "gemini"
    model: str = DEFAULT_MODEL
    temperature: float = 0.9
    max_output_tokens: int = 8192
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            provider=os.environ.get("DESIGN_PROVIDER", "").strip() or "gemini",
            model=os.environ.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
            temperature=_clamp(_env_float("GEMINI_TEMPERATURE", 0.9), *TEMPERATURE_RANGE),
            max_output_tokens=_env_int("GEMINI_MAX_OUTPUT_TOKENS", 8192),
            log_level=_env_log_level("LOG_LEVEL", "INFO"),
        )
