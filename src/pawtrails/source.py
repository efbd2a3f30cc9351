"""Position sources that push readings to the tracker.

A source delivers readings through callbacks and reports failures through a
separate error callback; ``subscribe`` itself never raises for permission or
timeout problems.
"""

import logging
from typing import Callable, Protocol

from pawtrails.models import Position
from pawtrails.parser import parse_gpx

logger = logging.getLogger(__name__)

PositionCallback = Callable[[Position], None]


class PositionError(Exception):
    """Error reported by a position source. Codes match the browser API."""

    PERMISSION_DENIED = 1
    POSITION_UNAVAILABLE = 2
    TIMEOUT = 3

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


ErrorCallback = Callable[[PositionError], None]


class Subscription(Protocol):
    def cancel(self) -> None: ...


class PositionSource(Protocol):
    available: bool

    def subscribe(self, on_position: PositionCallback, on_error: ErrorCallback) -> Subscription: ...


class _ReplaySubscription:
    def __init__(self, source: "ReplaySource", on_position: PositionCallback, on_error: ErrorCallback):
        self._source = source
        self.on_position = on_position
        self.on_error = on_error
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._source._remove(self)


class ReplaySource:
    """In-process source: readings are pushed by the owner.

    Readings pushed after a subscription is cancelled never reach its
    callback.
    """

    def __init__(self, available: bool = True):
        self.available = available
        self._subscriptions: list[_ReplaySubscription] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, on_position: PositionCallback, on_error: ErrorCallback) -> _ReplaySubscription:
        sub = _ReplaySubscription(self, on_position, on_error)
        self._subscriptions.append(sub)
        return sub

    def _remove(self, sub: _ReplaySubscription) -> None:
        if sub in self._subscriptions:
            self._subscriptions.remove(sub)

    def push(self, position: Position) -> None:
        for sub in list(self._subscriptions):
            if sub.active:
                sub.on_position(position)

    def fail(self, error: PositionError) -> None:
        for sub in list(self._subscriptions):
            if sub.active:
                sub.on_error(error)


class GpxReplaySource(ReplaySource):
    """Replays the track points of a GPX file in file order."""

    def __init__(self, filepath: str, elevation_scale: float = 1.0):
        super().__init__()
        self.positions = parse_gpx(filepath, elevation_scale=elevation_scale)

    def play(self) -> int:
        """Push every track point to the current subscribers.

        Returns the number of points pushed.
        """
        logger.debug("Replaying %d positions", len(self.positions))
        for position in self.positions:
            self.push(position)
        return len(self.positions)
