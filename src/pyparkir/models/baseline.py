"""Daily baseline model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from pyparkir.models._base import BaselineDate


class DailyBaseline(BaseModel):
    """Cumulative totals captured at the start of a calendar day.

    Subtracting the baseline from the current totals yields "today only"
    counts.  The record is persisted as
    ``{"carMasuk": ..., "carKeluar": ..., "date": "YYYY-MM-DD"}``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    baseline_in: int = Field(
        ge=0,
        validation_alias=AliasChoices("carMasuk", "baseline_in"),
        serialization_alias="carMasuk",
    )
    baseline_out: int = Field(
        ge=0,
        validation_alias=AliasChoices("carKeluar", "baseline_out"),
        serialization_alias="carKeluar",
    )
    for_date: BaselineDate = Field(
        validation_alias=AliasChoices("date", "for_date"),
        serialization_alias="date",
    )

    def to_record(self) -> dict[str, Any]:
        """Serialize to the stored record form."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls, record: Any) -> DailyBaseline:
        """Deserialize a stored record.

        Raises :class:`pydantic.ValidationError` for malformed records.
        """
        return cls.model_validate(record)
