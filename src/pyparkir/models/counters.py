"""Raw counter models: the oneM2M content instance and its decoded payload."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from pyparkir.models._base import AntaresTimestamp, ParkirBaseModel


class ContentInstance(BaseModel):
    """A oneM2M content instance (``m2m:cin``) as returned by Antares.

    Only ``con`` is required; the remaining attributes are resource
    metadata kept for logging and freshness display.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    resource_name: str | None = Field(default=None, validation_alias=AliasChoices("rn", "resource_name"))
    """Resource name (e.g. ``"cin_Xb3k..."``)."""
    resource_id: str | None = Field(default=None, validation_alias=AliasChoices("ri", "resource_id"))
    """Resource identifier."""
    parent_id: str | None = Field(default=None, validation_alias=AliasChoices("pi", "parent_id"))
    """Identifier of the device container."""
    created_at: AntaresTimestamp = Field(default=None, validation_alias=AliasChoices("ct", "created_at"))
    """Creation time (UTC)."""
    modified_at: AntaresTimestamp = Field(default=None, validation_alias=AliasChoices("lt", "modified_at"))
    """Last modification time (UTC)."""
    content_info: str | None = Field(default=None, validation_alias=AliasChoices("cnf", "content_info"))
    """Content type hint, usually ``"text/plain:0"``."""
    content: str | dict[str, Any] = Field(validation_alias=AliasChoices("con", "content"))
    """Device payload; normally a JSON-encoded string."""


class RawCounters(ParkirBaseModel):
    """Cumulative counters reported by the parking device.

    The totals count since the device's own epoch and only ever grow
    (in principle).  An absent counter defaults to ``0``; a present one
    must be a JSON integer (no booleans, strings or floats).
    """

    vehicles_in_total: int = Field(
        default=0,
        ge=0,
        strict=True,
        validation_alias=AliasChoices("carMasuk", "vehicles_in_total"),
    )
    """Vehicles that entered since the device epoch."""
    vehicles_out_total: int = Field(
        default=0,
        ge=0,
        strict=True,
        validation_alias=AliasChoices("carKeluar", "vehicles_out_total"),
    )
    """Vehicles that left since the device epoch."""
    slots_remaining_reported: int | None = Field(
        default=None,
        ge=0,
        strict=True,
        validation_alias=AliasChoices("slotTersisa", "slots_remaining_reported"),
    )
    """Free slots according to the device's own arithmetic, if sent."""
    observed_at: datetime | None = None
    """Creation time of the content instance the counters came from."""
