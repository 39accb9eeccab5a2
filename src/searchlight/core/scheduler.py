"""APScheduler-based timer for automatic index rescans.

The engine owns one `RescanScheduler` and re-arms or disarms it whenever its
settings change. Only a single recurring rescan job exists at any time.
"""
from __future__ import annotations

import asyncio
from datetime import timedelta
from typing import Awaitable, Callable, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

RESCAN_JOB_ID = "automatic-rescan"


class RescanScheduler:
    """Schedules periodic rescans using AsyncIOScheduler.

    The underlying scheduler is bound to the running event loop the first time
    a rescan is scheduled, so instances can be built before any loop exists.
    """

    def __init__(self) -> None:
        self._scheduler: Optional[AsyncIOScheduler] = None
        self._started = False

    @property
    def is_scheduled(self) -> bool:
        if self._scheduler is None:
            return False
        return self._scheduler.get_job(RESCAN_JOB_ID) is not None

    def start(self) -> None:
        """Start the underlying scheduler if not already started.

        Must be called from within a running event loop.
        """
        if self._scheduler is None:
            self._scheduler = AsyncIOScheduler(event_loop=asyncio.get_running_loop())
        if not self._started:
            self._scheduler.start(paused=False)
            self._started = True

    def shutdown(self, *, wait: bool = False) -> None:
        """Shut down the scheduler, dropping any scheduled rescan."""
        if self._scheduler is None:
            return
        self._scheduler.remove_all_jobs()
        if self._started:
            self._scheduler.shutdown(wait=wait)
            self._started = False
        self._scheduler = None

    def schedule_rescan(
        self,
        rescan: Callable[[], Awaitable[None]],
        *,
        interval: timedelta,
    ) -> None:
        """Schedule `rescan` every `interval`, replacing any previous schedule.

        Parameters
        ----------
        rescan: Callable[[], Awaitable[None]]
            Coroutine function performing one rescan cycle.
        interval: timedelta
            Period between two rescans; must be positive.
        """
        seconds = int(interval.total_seconds())
        if seconds <= 0:
            raise ValueError(f"Rescan interval must be positive, got {interval!r}")

        async def _job() -> None:
            await rescan()

        self.start()
        assert self._scheduler is not None
        self._scheduler.add_job(
            _job,
            trigger=IntervalTrigger(seconds=seconds),
            id=RESCAN_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )

    def cancel_rescan(self) -> None:
        """Remove the scheduled rescan if there is one."""
        if self.is_scheduled:
            assert self._scheduler is not None
            self._scheduler.remove_job(RESCAN_JOB_ID)
