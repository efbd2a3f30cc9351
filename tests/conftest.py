
import pytest

from pawtrails.models import Position
from pawtrails.source import ReplaySource



class FakeClock:
    """Epoch-millisecond clock advanced by hand."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += int(seconds * 1000)


class FakeTick:
    def __init__(self, ticker, interval, callback):
        self.ticker = ticker
        self.interval = interval
        self.callback = callback
        self.cancel_count = 0

    def cancel(self):
        self.cancel_count += 1
        if self in self.ticker.active:
            self.ticker.active.remove(self)


class FakeTicker:
    """Ticker whose callbacks fire only when the test calls fire()."""

    def __init__(self):
        self.active: list[FakeTick] = []
        self.started: list[FakeTick] = []

    def every(self, interval, callback):
        tick = FakeTick(self, interval, callback)
        self.active.append(tick)
        self.started.append(tick)
        return tick

    def fire(self):
        for tick in list(self.active):
            tick.callback()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ticker():
    return FakeTicker()


@pytest.fixture
def source():
    return ReplaySource()


@pytest.fixture
def hike_positions():
    """Three fixes ~0.069 mi apart heading north, one minute apart."""
    return [
        Position(latitude=47.0, longitude=-122.0, altitude=100.0, timestamp=0),
        Position(latitude=47.001, longitude=-122.0, altitude=110.0, timestamp=60_000),
        Position(latitude=47.002, longitude=-122.0, altitude=105.0, timestamp=120_000),
    ]
