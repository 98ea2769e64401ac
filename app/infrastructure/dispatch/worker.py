"""Background worker that runs dispatcher ticks at a fixed spacing."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable

import anyio

from app.domain.entities import DispatchOutcome, DispatchResult

logger = logging.getLogger(__name__)

DispatchTick = Callable[[], DispatchResult]


class DispatchWorker:
    """Drive ``tick`` periodically from a single asyncio task.

    Each tick runs in a worker thread and is awaited before the worker sleeps
    ``interval`` seconds, so ticks are serialized. A tick exceeding
    ``tick_timeout`` is abandoned; its thread keeps the tick lock until it
    finishes, and ticks attempted meanwhile report ``busy`` without touching
    the queue.
    """

    def __init__(
        self,
        tick: DispatchTick,
        *,
        interval: float = 2.0,
        tick_timeout: float = 10.0,
    ) -> None:
        self._tick = tick
        self.interval = interval
        self.tick_timeout = tick_timeout
        self._tick_lock = threading.Lock()
        self._task: asyncio.Task[None] | None = None
        self.last_result: DispatchResult | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def run_once(self) -> DispatchResult:
        """Run a single tick in the calling thread."""

        if not self._tick_lock.acquire(blocking=False):
            logger.warning("Previous dispatch tick still in flight; skipping")
            return DispatchResult(DispatchOutcome.BUSY)
        try:
            result = self._tick()
        except Exception as exc:
            logger.exception("Dispatch tick raised an unexpected error")
            result = DispatchResult(DispatchOutcome.FAILED, error=exc)
        finally:
            self._tick_lock.release()
        self.last_result = result
        return result

    async def run_tick(self) -> DispatchResult | None:
        """Run one tick off the event loop; ``None`` when it timed out."""

        result: DispatchResult | None = None
        with anyio.move_on_after(self.tick_timeout) as scope:
            result = await anyio.to_thread.run_sync(
                self.run_once, abandon_on_cancel=True
            )
        if scope.cancelled_caught:
            logger.warning(
                "Dispatch tick exceeded %.1fs and was abandoned", self.tick_timeout
            )
        return result

    async def run_forever(self) -> None:
        logger.info("Dispatcher started, one event every %.2fs", self.interval)
        try:
            while True:
                try:
                    await self.run_tick()
                except Exception:
                    logger.exception("Dispatch tick could not be scheduled")
                await anyio.sleep(self.interval)
        finally:
            logger.info("Dispatcher stopped")

    def start(self) -> None:
        """Schedule :meth:`run_forever` on the running event loop."""

        if self.is_running:
            return
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self.run_forever(), name="notification-dispatcher")

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass


__all__ = ["DispatchTick", "DispatchWorker"]
