"""Data models for the landing page designer."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Style(str, Enum):
    MODERN = "Moderno"
    ELEGANT = "Elegante"
    BOLD = "Atrevido"


# Positional order of the designs in every response.
DEFAULT_STYLES: tuple[Style, ...] = tuple(Style)


class RequestValidationError(ValueError):
    """The request body is missing required input."""


@dataclass(frozen=True)
class DesignRequest:
    description: str

    @classmethod
    def from_body(cls, body: Any) -> DesignRequest:
        """Parse a request body (JSON text, bytes, or an already-decoded dict).

        Raises ``json.JSONDecodeError`` for malformed JSON and
        ``RequestValidationError`` when ``description`` is missing or blank.
        """
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8")
        if isinstance(body, str):
            body = json.loads(body) if body.strip() else {}
        if body is None:
            body = {}

        description = body.get("description") if isinstance(body, dict) else None
        if not isinstance(description, str) or not description.strip():
            raise RequestValidationError("La descripción es obligatoria.")
        return cls(description=description)
