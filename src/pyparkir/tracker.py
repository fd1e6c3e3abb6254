"""Occupancy tracker.

Pure functions turning cumulative device counters into "today only"
figures.  The daily baseline is passed in and returned explicitly; the
caller owns the authoritative copy and persists it.
"""

from __future__ import annotations

import logging
from datetime import date

from pyparkir._constants import CAPACITY
from pyparkir.models.baseline import DailyBaseline
from pyparkir.models.counters import RawCounters
from pyparkir.models.status import DerivedStatus

_logger = logging.getLogger(__name__)


def reconcile_baseline(
    raw: RawCounters,
    current_baseline: DailyBaseline | None,
    today: date,
) -> DailyBaseline:
    """Return the baseline valid for *today*.

    A baseline already taken today is returned unchanged (same object).
    Otherwise, including the first run when *current_baseline* is
    ``None``, the current totals become the new baseline, which resets
    today's counts to zero.  The caller must persist a changed baseline
    before computing anything from it.
    """
    if current_baseline is not None and current_baseline.for_date == today:
        return current_baseline

    baseline = DailyBaseline(
        baseline_in=raw.vehicles_in_total,
        baseline_out=raw.vehicles_out_total,
        for_date=today,
    )
    _logger.info(
        "Daily baseline reset for %s (in=%d out=%d, previous=%s)",
        today.isoformat(),
        baseline.baseline_in,
        baseline.baseline_out,
        current_baseline.for_date.isoformat() if current_baseline is not None else None,
    )
    return baseline


def derive_status(
    raw: RawCounters,
    baseline: DailyBaseline,
    capacity: int = CAPACITY,
) -> DerivedStatus:
    """Compute today's occupancy from the totals and the daily baseline.

    Counts below the baseline (device reset, counter glitch) clamp to zero,
    and so does an occupancy where more vehicles left than entered today.
    The device's own ``slotTersisa`` is passed through for display and does
    not override ``slots_available``.
    """
    vehicles_in_today = max(0, raw.vehicles_in_total - baseline.baseline_in)
    vehicles_out_today = max(0, raw.vehicles_out_total - baseline.baseline_out)
    slots_occupied = max(0, vehicles_in_today - vehicles_out_today)
    slots_available = capacity - slots_occupied

    reported = raw.slots_remaining_reported
    if reported is None:
        reported = capacity
    elif reported != slots_available:
        _logger.debug(
            "Device reports %d free slots, derived %d",
            reported,
            slots_available,
        )

    return DerivedStatus(
        vehicles_in_today=vehicles_in_today,
        vehicles_out_today=vehicles_out_today,
        slots_occupied=slots_occupied,
        slots_available=slots_available,
        is_full=slots_occupied >= capacity,
        capacity=capacity,
        slots_remaining_reported=reported,
    )
