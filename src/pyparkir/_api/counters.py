"""Parking counter endpoint.

Endpoint:
  - /~/antares-cse/antares-id/{application}/{device}/la
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from pyparkir._api._envelope import unwrap_content
from pyparkir._transport import Transport
from pyparkir.config import AntaresConfig
from pyparkir.exceptions import ParkirDataFormatError
from pyparkir.models.counters import RawCounters

_logger = logging.getLogger(__name__)


def parse_counters(
    content: str | dict[str, Any],
    *,
    observed_at: datetime | None = None,
    endpoint: str = "",
) -> RawCounters:
    """Parse a device payload into :class:`RawCounters`.

    *content* is normally the JSON-encoded ``con`` string; an already
    decoded dict is accepted as well.  Absent counters default to ``0``.

    Raises
    ------
    ParkirDataFormatError
        If the payload is not JSON, not a JSON object, or a counter is
        not a non-negative integer.
    """
    if isinstance(content, str):
        try:
            data: Any = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ParkirDataFormatError(
                f"Counter payload is not JSON: {content[:64]!r}",
                endpoint=endpoint,
            ) from exc
    else:
        data = content

    if not isinstance(data, dict):
        raise ParkirDataFormatError(
            f"Counter payload must be a JSON object, got {type(data).__name__}",
            endpoint=endpoint,
        )

    try:
        counters = RawCounters.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise ParkirDataFormatError(
            f"Invalid counter values ({fields})",
            endpoint=endpoint,
        ) from exc

    if observed_at is not None:
        counters = counters.model_copy(update={"observed_at": observed_at})
    return counters


async def fetch_latest_counters(
    config: AntaresConfig,
    transport: Transport,
) -> RawCounters:
    """Fetch the device's latest content instance and parse its counters."""
    endpoint = config.latest_path
    response = await transport.get_json(endpoint)
    cin = unwrap_content(response, endpoint=endpoint)
    counters = parse_counters(cin.content, observed_at=cin.created_at, endpoint=endpoint)
    _logger.debug(
        "Latest counters in=%d out=%d remaining=%s ct=%s",
        counters.vehicles_in_total,
        counters.vehicles_out_total,
        counters.slots_remaining_reported,
        cin.created_at,
    )
    return counters
