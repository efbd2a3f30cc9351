"""Periodic callbacks for the elapsed-time tick."""

import asyncio
from typing import Callable, Protocol


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class Ticker(Protocol):
    def every(self, interval: float, callback: Callable[[], None]) -> TickHandle: ...


class _AsyncioTick:
    def __init__(self, loop: asyncio.AbstractEventLoop, interval: float, callback: Callable[[], None]):
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._timer: asyncio.TimerHandle | None = None
        self.cancelled = False
        self._arm()

    def _arm(self) -> None:
        self._timer = self._loop.call_later(self._interval, self._fire)

    def _fire(self) -> None:
        if self.cancelled:
            return
        self._arm()
        self._callback()

    def cancel(self) -> None:
        self.cancelled = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


class AsyncioTicker:
    """Runs callbacks on an asyncio event loop, on the loop's own thread.

    Without an explicit loop, the running loop is used when ``every`` is
    called.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def every(self, interval: float, callback: Callable[[], None]) -> _AsyncioTick:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTick(loop, interval, callback)
