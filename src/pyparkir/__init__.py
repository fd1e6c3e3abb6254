"""pyparkir - Async parking occupancy monitor for the Antares IoT platform."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyparkir")
except PackageNotFoundError:
    __version__ = "0+local"
from pyparkir._constants import CAPACITY
from pyparkir.config import AntaresConfig
from pyparkir.exceptions import (
    ParkirConfigError,
    ParkirDataFormatError,
    ParkirError,
    ParkirTransportError,
)
from pyparkir.models import (
    ContentInstance,
    DailyBaseline,
    DashboardState,
    DerivedStatus,
    RawCounters,
)
from pyparkir.monitor import ParkingMonitor
from pyparkir.render import render_dashboard
from pyparkir.state import BaselineStore, JsonFileBaselineStore, MemoryBaselineStore
from pyparkir.tracker import derive_status, reconcile_baseline

__all__ = [
    "__version__",
    "AntaresConfig",
    "BaselineStore",
    "CAPACITY",
    "ContentInstance",
    "DailyBaseline",
    "DashboardState",
    "DerivedStatus",
    "JsonFileBaselineStore",
    "MemoryBaselineStore",
    "ParkingMonitor",
    "ParkirConfigError",
    "ParkirDataFormatError",
    "ParkirError",
    "ParkirTransportError",
    "RawCounters",
    "derive_status",
    "reconcile_baseline",
    "render_dashboard",
]
