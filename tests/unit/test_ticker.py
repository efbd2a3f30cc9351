import asyncio

import pytest

from pawtrails.ticker import AsyncioTicker


class TestAsyncioTicker:
    def test_fires_repeatedly_until_cancelled(self):
        calls = []

        async def run():
            handle = AsyncioTicker().every(0.01, lambda: calls.append(1))
            await asyncio.sleep(0.055)
            handle.cancel()
            count = len(calls)
            await asyncio.sleep(0.03)
            return count

        count = asyncio.run(run())
        assert count >= 2
        assert len(calls) == count

    def test_cancel_twice(self):
        async def run():
            handle = AsyncioTicker().every(0.01, lambda: None)
            handle.cancel()
            handle.cancel()
            return handle.cancelled

        assert asyncio.run(run())

    def test_cancel_from_callback(self):
        calls = []

        async def run():
            holder = {}

            def callback():
                calls.append(1)
                holder["handle"].cancel()

            holder["handle"] = AsyncioTicker().every(0.005, callback)
            await asyncio.sleep(0.05)

        asyncio.run(run())
        assert calls == [1]

    def test_rejects_non_positive_interval(self):
        async def run():
            AsyncioTicker().every(0, lambda: None)

        with pytest.raises(ValueError):
            asyncio.run(run())

    def test_requires_running_loop(self):
        with pytest.raises(RuntimeError):
            AsyncioTicker().every(1.0, lambda: None)
