"""oneM2M response envelope unwrapping.

A "latest" request answers with ``{"m2m:cin": {..., "con": "<payload>"}}``.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from pyparkir._constants import CONTENT_INSTANCE_KEY
from pyparkir.exceptions import ParkirDataFormatError
from pyparkir.models.counters import ContentInstance


def unwrap_content(response: dict[str, Any], *, endpoint: str = "") -> ContentInstance:
    """Extract the content instance from a oneM2M response.

    Raises
    ------
    ParkirDataFormatError
        If the response carries no ``m2m:cin`` object or it has no ``con``.
    """
    cin = response.get(CONTENT_INSTANCE_KEY)
    if not isinstance(cin, dict):
        raise ParkirDataFormatError(
            f"Missing '{CONTENT_INSTANCE_KEY}' object in response",
            endpoint=endpoint,
        )
    try:
        return ContentInstance.model_validate(cin)
    except ValidationError as exc:
        raise ParkirDataFormatError(
            f"Malformed content instance: {exc.error_count()} validation error(s)",
            endpoint=endpoint,
        ) from exc
