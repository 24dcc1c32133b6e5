"""Tests for the asyncio Ticker."""

import asyncio

import pytest

from engine.clock import Ticker


class CountingTarget:
    def __init__(self, ticks_until_done=None):
        self.ticks = 0
        self.ticks_until_done = ticks_until_done

    @property
    def is_active(self):
        return self.ticks_until_done is None or self.ticks < self.ticks_until_done

    def tick(self):
        self.ticks += 1


class TestTicker:
    def test_rejects_non_positive_frame(self):
        with pytest.raises(ValueError):
            Ticker(CountingTarget(), frame_s=0)

    def test_runs_until_target_inactive(self):
        target = CountingTarget(ticks_until_done=3)

        async def main():
            ticker = Ticker(target, frame_s=0.001)
            ticker.start()
            await ticker.wait()
            return ticker.running

        assert asyncio.run(main()) is False
        assert target.ticks == 3

    def test_cancel_stops_ticking(self):
        target = CountingTarget()

        async def main():
            ticker = Ticker(target, frame_s=0.001)
            ticker.start()
            await asyncio.sleep(0.01)
            ticker.cancel()
            stopped_at = target.ticks
            await asyncio.sleep(0.01)
            return ticker.running, stopped_at

        running, stopped_at = asyncio.run(main())
        assert running is False
        assert target.ticks == stopped_at

    def test_start_twice_reuses_task(self):
        target = CountingTarget(ticks_until_done=2)

        async def main():
            ticker = Ticker(target, frame_s=0.001)
            first = ticker.start()
            second = ticker.start()
            await ticker.wait()
            return first is second

        assert asyncio.run(main())

    def test_inactive_target_never_ticks(self):
        target = CountingTarget(ticks_until_done=0)

        async def main():
            ticker = Ticker(target, frame_s=0.001)
            ticker.start()
            await ticker.wait()

        asyncio.run(main())
        assert target.ticks == 0

    def test_start_requires_running_loop(self):
        with pytest.raises(RuntimeError):
            Ticker(CountingTarget()).start()

    def test_cancelling_waiter_leaves_ticker_running(self):
        target = CountingTarget()

        async def main():
            ticker = Ticker(target, frame_s=0.001)
            ticker.start()
            waiter = asyncio.get_running_loop().create_task(ticker.wait())
            await asyncio.sleep(0.005)
            waiter.cancel()
            with pytest.raises(asyncio.CancelledError):
                await waiter
            still_running = ticker.running
            ticker.cancel()
            return still_running

        assert asyncio.run(main()) is True

    def test_ticker_cancel_ends_wait_quietly(self):
        target = CountingTarget()

        async def main():
            ticker = Ticker(target, frame_s=0.001)
            ticker.start()
            waiter = asyncio.get_running_loop().create_task(ticker.wait())
            await asyncio.sleep(0.005)
            ticker.cancel()
            await waiter
            return waiter.cancelled()

        assert asyncio.run(main()) is False
