"""Data models for Antares payloads and derived occupancy."""

from pyparkir.models._base import (
    AntaresTimestamp,
    BaselineDate,
    ParkirBaseModel,
    parse_antares_timestamp,
    parse_baseline_date,
)
from pyparkir.models.baseline import DailyBaseline
from pyparkir.models.counters import ContentInstance, RawCounters
from pyparkir.models.status import DashboardState, DerivedStatus

__all__ = [
    "AntaresTimestamp",
    "BaselineDate",
    "ContentInstance",
    "DailyBaseline",
    "DashboardState",
    "DerivedStatus",
    "ParkirBaseModel",
    "RawCounters",
    "parse_antares_timestamp",
    "parse_baseline_date",
]
