"""Cancellable fixed-interval task."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable
from typing import Any

_logger = logging.getLogger(__name__)


class PeriodicTask:
    """Run an async callback immediately and then every *interval* seconds.

    Ticks are fixed-rate.  The callback is awaited before the next tick is
    scheduled, so runs never overlap; deadlines missed by a slow run are
    skipped.  A failing run is logged and the task keeps ticking until
    :meth:`stop` is called.
    """

    def __init__(
        self,
        callback: Callable[[], Awaitable[Any]],
        interval: float,
        *,
        name: str = "pyparkir-periodic",
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._callback = callback
        self._interval = interval
        self._name = name
        self._task: asyncio.Task[None] | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking on the running event loop (no-op if already running)."""
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name=self._name)

    async def stop(self) -> None:
        """Cancel the task and wait until it has finished."""
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def wait(self) -> None:
        """Block until the task is stopped."""
        task = self._task
        if task is None:
            return
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        while True:
            try:
                await self._callback()
            except Exception:
                _logger.exception("Periodic task %s run failed", self._name)

            deadline += self._interval
            now = loop.time()
            if deadline < now:
                missed = int((now - deadline) // self._interval) + 1
                _logger.debug("Periodic task %s skipped %d tick(s)", self._name, missed)
                deadline += missed * self._interval
            await asyncio.sleep(deadline - now)
