"""
clock.py — Shared Tick Source
==============================
One repeating asyncio task that calls `target.tick()` every frame until
the target reports it is no longer active, or until cancel() is called.

Both the single-trace Stepper and the DualLaneScheduler are driven by a
Ticker.  A comparison run uses exactly one, so both lanes see the same
elapsed-time signal.

Usage (inside a running event loop):
    ticker = Ticker(scheduler)
    scheduler.play()
    ticker.start()
    …
    ticker.cancel()        # pause / reset / teardown
"""

import asyncio
import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

FRAME_S = 1 / 60


class Tickable(Protocol):
    @property
    def is_active(self) -> bool: ...

    def tick(self) -> object: ...


class Ticker:
    def __init__(self, target: Tickable, frame_s: float = FRAME_S):
        if frame_s <= 0:
            raise ValueError("frame_s must be positive")
        self.target = target
        self.frame_s = frame_s
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Start ticking.  Must be called from inside a running event loop."""
        if self.running:
            return self._task
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("ticker started (frame %.4fs)", self.frame_s)
        return self._task

    def cancel(self) -> None:
        if self.running:
            self._task.cancel()
            logger.debug("ticker cancelled")
        self._task = None

    async def wait(self) -> None:
        """Wait for the current run to end on its own (or be cancelled)."""
        if self._task is None:
            return
        task = self._task
        try:
            # shielded so cancelling the waiter leaves the ticker running
            await asyncio.shield(task)
        except asyncio.CancelledError:
            # only the ticker's own cancellation ends quietly
            if not task.cancelled():
                raise

    async def _run(self) -> None:
        while self.target.is_active:
            await asyncio.sleep(self.frame_s)
            self.target.tick()
        logger.debug("ticker stopped: target inactive")
