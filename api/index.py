"""Vercel serverless entrypoint: POST a business description, get three landing page designs.

Request body: ``{"description": "..."}``.
Response body: ``{"designs": ["<!DOCTYPE html>...", ...]}``, one page per style
(Moderno, Elegante, Atrevido) in that order.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

# Vercel runs this file directly; make the project packages importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.config import Settings
from core.models import DesignRequest, RequestValidationError
from core.pipeline import run_generation
from core.providers import TextGenerator, get_generator

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

GENERIC_ERROR = "Hubo un problema al generar los diseños."


def _response(status: int, body: dict[str, Any], extra_headers: dict[str, str] | None = None) -> dict:
    headers = {
        "content-type": "application/json",
        "Access-Control-Allow-Origin": "*",
    }
    if extra_headers:
        headers.update(extra_headers)
    return {
        "statusCode": status,
        "headers": headers,
        "body": json.dumps(body, ensure_ascii=False),
    }


def _method(request: dict) -> str:
    return str(request.get("httpMethod") or request.get("method") or "").upper()


def handler(request, generator: TextGenerator | None = None):
    """Vercel Python serverless function handler."""
    if _method(request) != "POST":
        return _response(405, {"error": "Method Not Allowed"}, {"Allow": "POST"})

    try:
        design_request = DesignRequest.from_body(request.get("body"))
    except RequestValidationError as e:
        return _response(400, {"error": str(e)})
    except Exception:
        logger.exception("Could not parse request body")
        return _response(500, {"error": GENERIC_ERROR})

    try:
        if generator is None:
            generator = get_generator(
                settings.provider,
                model=settings.model,
                temperature=settings.temperature,
                max_output_tokens=settings.max_output_tokens,
            )
        designs = run_generation(design_request.description, generator)
    except Exception:
        logger.exception("Design generation failed")
        return _response(500, {"error": GENERIC_ERROR})

    logger.info("Returned %d designs", len(designs))
    return _response(200, {"designs": designs})
