"""Derived occupancy status and the dashboard snapshot built around it."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from pyparkir._constants import CAPACITY


class DerivedStatus(BaseModel):
    """Occupancy figures for today, recomputed on every fetch cycle."""

    model_config = ConfigDict(frozen=True)

    vehicles_in_today: int = Field(ge=0)
    """Vehicles that entered since the baseline was taken."""
    vehicles_out_today: int = Field(ge=0)
    """Vehicles that left since the baseline was taken."""
    slots_occupied: int
    slots_available: int
    is_full: bool
    capacity: int = CAPACITY
    slots_remaining_reported: int = CAPACITY
    """Free slots according to the device; display only, never used above."""

    @property
    def occupancy_percent(self) -> float:
        """Occupied share of capacity in percent (may exceed 100)."""
        if self.capacity <= 0:
            return 0.0
        return self.slots_occupied / self.capacity * 100


class DashboardState(BaseModel):
    """Everything the presentation layer needs for one frame."""

    model_config = ConfigDict(frozen=True)

    status: DerivedStatus | None = None
    """Latest successful status; kept when a later cycle fails."""
    loading: bool = False
    error: str | None = None
    last_update: datetime | None = None
    """Time of the last successful cycle."""
