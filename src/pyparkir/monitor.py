"""High-level async polling loop for the parking dashboard."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import Any

import aiohttp

from pyparkir._api.counters import fetch_latest_counters
from pyparkir._constants import CAPACITY
from pyparkir._scheduler import PeriodicTask
from pyparkir._transport import AntaresTransport, Transport
from pyparkir.config import AntaresConfig
from pyparkir.exceptions import ParkirDataFormatError, ParkirError, ParkirTransportError
from pyparkir.models.baseline import DailyBaseline
from pyparkir.models.status import DashboardState
from pyparkir.state.store import BaselineStore, JsonFileBaselineStore, MemoryBaselineStore
from pyparkir.tracker import derive_status, reconcile_baseline

_logger = logging.getLogger(__name__)

#: Banner text shown while the latest cycle failed.
FETCH_ERROR_MESSAGE = "Failed to fetch data from Antares"


def _default_store(config: AntaresConfig) -> BaselineStore:
    if config.baseline_path:
        return JsonFileBaselineStore(config.baseline_path, config.baseline_key)
    return MemoryBaselineStore()


class ParkingMonitor:
    """Polls Antares and keeps a live :class:`DashboardState`.

    Each cycle runs fetch → reconcile baseline → persist → derive under a
    lock, so overlapping cycles serialize and a day rollover resets the
    baseline exactly once.

    Usage::

        async with ParkingMonitor(config, on_update=print) as monitor:
            await monitor.run_forever()
    """

    def __init__(
        self,
        config: AntaresConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        store: BaselineStore | None = None,
        on_update: Callable[[DashboardState], None] | None = None,
        today: Callable[[], date] | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = None
        self._store = store if store is not None else _default_store(config)
        self._on_update = on_update
        self._today = today or config.today
        self._now = now or (lambda: datetime.now(config.tz))
        self._lock = asyncio.Lock()
        self._baseline: DailyBaseline | None = None
        self._baseline_loaded = False
        self._state = DashboardState()
        self._periodic = PeriodicTask(self.refresh, config.poll_interval, name="pyparkir-poll")

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ParkingMonitor:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = AntaresTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.stop()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> DashboardState:
        """The most recently published dashboard state."""
        return self._state

    @property
    def baseline(self) -> DailyBaseline | None:
        """The authoritative daily baseline, ``None`` before the first cycle."""
        return self._baseline

    @property
    def is_running(self) -> bool:
        return self._periodic.is_running

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise ParkirError("Monitor not initialized. Use 'async with ParkingMonitor(...) as monitor:'")
        return self._transport

    def _current_baseline(self) -> DailyBaseline | None:
        if not self._baseline_loaded:
            self._baseline = self._store.load()
            self._baseline_loaded = True
            _logger.debug("Loaded stored baseline: %s", self._baseline)
        return self._baseline

    def _adopt_baseline(self, baseline: DailyBaseline) -> None:
        """Make *baseline* authoritative and persist it."""
        self._baseline = baseline
        try:
            self._store.save(baseline)
        except OSError as exc:
            # The in-memory copy stays authoritative for this process.
            _logger.warning("Could not persist daily baseline: %s", exc)

    def _publish(self, state: DashboardState) -> None:
        self._state = state
        if self._on_update is None:
            return
        try:
            self._on_update(state)
        except Exception:
            _logger.debug("on_update callback failed", exc_info=True)

    # ------------------------------------------------------------------
    # Fetch cycle
    # ------------------------------------------------------------------

    async def refresh(self) -> DashboardState:
        """Run one fetch cycle and return the published state.

        Transport and data-format failures do not raise: they set the
        error banner and keep the previous status and baseline.  Any
        other exception propagates, but the banner state is published
        first so the dashboard never stays in ``loading``.
        """
        transport = self._require_transport()
        async with self._lock:
            self._publish(self._state.model_copy(update={"loading": True}))
            state = self._state.model_copy(update={"loading": False, "error": FETCH_ERROR_MESSAGE})
            try:
                raw = await fetch_latest_counters(self._config, transport)
            except (ParkirTransportError, ParkirDataFormatError) as exc:
                _logger.warning("Fetch cycle failed: %s", exc)
            else:
                current = self._current_baseline()
                baseline = reconcile_baseline(raw, current, self._today())
                if baseline is not current:
                    self._adopt_baseline(baseline)
                status = derive_status(raw, baseline, CAPACITY)
                state = DashboardState(
                    status=status,
                    loading=False,
                    error=None,
                    last_update=self._now(),
                )
            finally:
                self._publish(state)
            return state

    # ------------------------------------------------------------------
    # Periodic trigger
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start polling every ``config.poll_interval`` seconds."""
        self._require_transport()
        self._periodic.start()

    async def stop(self) -> None:
        """Stop polling; an in-flight cycle is cancelled."""
        await self._periodic.stop()

    async def run_forever(self) -> None:
        """Poll until cancelled or :meth:`stop` is called."""
        self.start()
        try:
            await self._periodic.wait()
        finally:
            await self.stop()
