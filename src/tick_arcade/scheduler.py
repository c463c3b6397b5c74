"""Asyncio periodic scheduler with strictly serialized ticks."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

TickCallback = Callable[[], object]
Interval = float | Callable[[], float]


class TickScheduler:
    """Run *callback* every *interval* seconds on the running event loop.

    *interval* may be a callable, read again before every wait, so speed
    changes apply from the next tick on. The callback may be sync or async;
    returning ``False`` ends the loop. At most one loop task exists at any
    time.
    """

    def __init__(
        self,
        callback: TickCallback,
        interval: Interval,
        name: str = "ticker",
    ) -> None:
        self._callback = callback
        self._interval = interval
        self.name = name
        self._task: asyncio.Task | None = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def current_interval(self) -> float:
        value = self._interval() if callable(self._interval) else self._interval
        return max(float(value), 0.0)

    def start(self) -> None:
        """Start the loop unless it is already running."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name=self.name)

    def stop(self) -> None:
        """Cancel the loop; no further tick will run."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    def reschedule(self) -> None:
        """Cancel any pending tick and restart the interval from now."""
        self.stop()
        self.start()

    async def aclose(self) -> None:
        """Cancel the loop and wait for it to unwind."""
        task, self._task = self._task, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    async def _run(self) -> None:
        try:
            while True:
                await asyncio.sleep(self.current_interval())
                result = self._callback()
                if inspect.isawaitable(result):
                    result = await result
                self.ticks += 1
                if result is False:
                    logger.info(
                        "Scheduler %s finished after %d ticks.",
                        self.name, self.ticks,
                    )
                    return
        except asyncio.CancelledError:
            logger.debug("Scheduler %s cancelled.", self.name)
            raise
        except Exception:
            logger.exception("Tick callback failed in scheduler %s.", self.name)
