"""Plain-text rendering of the dashboard."""

from __future__ import annotations

from pyparkir._constants import CAPACITY
from pyparkir.models.status import DashboardState, DerivedStatus

TITLE = "Smart Parking System"
SUBTITLE = "Real-time monitoring via Antares IoT"

_BAR_WIDTH = 20
_LABEL_WIDTH = 18


def render_progress_bar(percent: float, width: int = _BAR_WIDTH) -> str:
    """Render ``[#####-----]``; the fill is clamped to 0..100 %."""
    clamped = min(100.0, max(0.0, percent))
    filled = int(round(clamped / 100 * width))
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def _card(label: str, value: int) -> str:
    return f"  {label:<{_LABEL_WIDTH}}{value:>4}"


def _render_status(status: DerivedStatus) -> list[str]:
    headline = "PARKING FULL" if status.is_full else "PARKING AVAILABLE"
    marker = "(X)" if status.is_full else "(O)"
    percent = status.occupancy_percent
    return [
        f"{marker} {headline}",
        f"    {status.slots_available} slot(s) available",
        "",
        f"Capacity  {status.slots_occupied} / {status.capacity}",
        f"{render_progress_bar(percent)} {round(percent)}%",
        "",
        _card("Vehicles in", status.vehicles_in_today),
        _card("Vehicles out", status.vehicles_out_today),
        _card("Occupied", status.slots_occupied),
        _card("Available", status.slots_available),
        _card("Device reports", status.slots_remaining_reported),
    ]


def render_dashboard(state: DashboardState) -> str:
    """Render one dashboard frame as text."""
    lines = [TITLE, SUBTITLE, ""]
    if state.error:
        lines += [f"!! {state.error}", ""]

    if state.status is not None:
        lines += _render_status(state.status)
    else:
        lines += [f"Waiting for data (capacity {CAPACITY} slots)"]

    lines.append("")
    if state.loading:
        lines.append("Updating data...")
    elif state.last_update is not None:
        lines.append(f"Last update: {state.last_update.strftime('%H:%M:%S')}")
    return "\n".join(lines)
