"""Base model and shared validators for Antares payloads.

Counter models inherit from :class:`ParkirBaseModel` which provides:

* A ``model_validator(mode="before")`` that drops ``None`` and empty
  string values so the field default is used instead.
* A ``raw`` dict that captures the original payload.

The annotated types below coerce the two date formats found on the
wire: oneM2M basic timestamps (``20261019T101500``) and the calendar
date of a stored baseline.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

# Sentinel values the device firmware sends for "not available".
_SENTINELS = frozenset({"", "null"})

_ONEM2M_TIME_FORMAT = "%Y%m%dT%H%M%S"

# JavaScript's ``Date.toDateString()`` (e.g. ``"Mon Oct 19 2026"``) always
# uses English names, whatever the host locale.
_JS_WEEKDAYS = frozenset({"Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"})
_JS_MONTHS = {
    name: number
    for number, name in enumerate(
        ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        start=1,
    )
}


def parse_antares_timestamp(value: Any) -> datetime | None:
    """Convert a oneM2M basic-format timestamp to a UTC datetime.

    Returns ``None`` when the value is missing or not in basic format;
    the timestamp is metadata and must not fail the counters around it.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    text = str(value).strip()
    # Some CSEs append fractional seconds ("20261019T101500,123456").
    text = text.split(",", 1)[0].split(".", 1)[0]
    try:
        return datetime.strptime(text, _ONEM2M_TIME_FORMAT).replace(tzinfo=UTC)
    except ValueError:
        return None


def parse_baseline_date(value: Any) -> date:
    """Convert a stored baseline date to :class:`datetime.date`."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    parts = text.split()
    if len(parts) == 4 and parts[0] in _JS_WEEKDAYS and parts[1] in _JS_MONTHS:
        _, month, day, year = parts
        if day.isdigit() and year.isdigit():
            return date(int(year), _JS_MONTHS[month], int(day))
    raise ValueError(f"unrecognised baseline date {value!r}")


AntaresTimestamp = Annotated[datetime | None, BeforeValidator(parse_antares_timestamp)]
"""Annotated type that coerces oneM2M timestamps to UTC datetimes."""

BaselineDate = Annotated[date, BeforeValidator(parse_baseline_date)]
"""Annotated type accepting ISO dates and ``Date.toDateString()`` output."""


class ParkirBaseModel(BaseModel):
    """Base for device payload models.

    Handles:
    * ``None``/empty sentinels → dropped so the field default is used
    * Stashes the original payload dict in ``raw``
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original payload dict."""

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_values(cls, values: Any) -> Any:
        """Strip sentinel values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = ParkirBaseModel._clean_dict(values)
        # Keep an explicit raw= from keyword construction.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
