"""Session lifecycle controller for GPS activity recording.

The tracker owns one TrackingSession and is its only writer. State changes
happen in three places: the lifecycle commands (start/stop/reset), the
position callback and the tick callback. All of them run on the caller's
thread; sources and tickers are expected to deliver callbacks on that same
thread (an asyncio loop, for instance), so no locking is done here.
"""

import logging
import time
from typing import Callable

from pawtrails.models import GeoSample, Position, SessionStatus, TrackingSnapshot
from pawtrails.session import (
    DEFAULT_MAX_SAMPLES,
    TrackingSession,
    is_valid_elevation,
    is_valid_position,
)
from pawtrails.source import PositionError, PositionSource
from pawtrails.ticker import TickHandle, Ticker

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 1.0  # seconds

UNSUPPORTED_MESSAGE = "Geolocation is not supported by this device"

Listener = Callable[[TrackingSnapshot], None]


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


class ActivityTracker:
    """Records one activity at a time from a push-based position source.

    Lifecycle: Idle -> start() -> Recording -> stop() -> Stopped -> reset() -> Idle.
    Repeated start() while recording and stop() while not recording are
    no-ops. Source errors never propagate; they land in the snapshot's
    ``error`` field.
    """

    def __init__(
        self,
        source: PositionSource | None,
        ticker: Ticker,
        clock: Callable[[], int] | None = None,
        max_samples: int = DEFAULT_MAX_SAMPLES,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ):
        self._source = source
        self._ticker = ticker
        self._clock = clock or _wall_clock_ms
        self._tick_interval = tick_interval
        self._session = TrackingSession(max_samples=max_samples)
        self._subscription = None
        self._tick: TickHandle | None = None
        self._generation = 0
        self._listeners: list[Listener] = []

    @property
    def status(self) -> SessionStatus:
        return self._session.status

    def snapshot(self) -> TrackingSnapshot:
        return self._session.snapshot()

    def add_listener(self, listener: Listener) -> None:
        """Register a callback that receives a snapshot after every change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def start(self) -> None:
        session = self._session
        if session.status is SessionStatus.RECORDING:
            return

        if self._source is None or not getattr(self._source, "available", True):
            session.error = UNSUPPORTED_MESSAGE
            logger.warning(UNSUPPORTED_MESSAGE)
            self._notify()
            return

        session.clear()
        session.error = None
        session.started_at = self._clock()
        session.status = SessionStatus.RECORDING
        self._generation += 1
        generation = self._generation

        try:
            subscription = self._source.subscribe(
                lambda position: self._on_position(generation, position),
                lambda error: self._on_error(generation, error),
            )
        except Exception as e:
            message = getattr(e, "message", None) or str(e)
            session.error = f"Error tracking location: {message}"
            logger.warning("Position source refused subscription: %s", message)
            session.status = SessionStatus.STOPPED
            self._release()
            self._notify()
            return

        if generation != self._generation:
            # The source rejected us during subscribe (permission denied)
            subscription.cancel()
            self._notify()
            return
        self._subscription = subscription

        try:
            self._tick = self._ticker.every(
                self._tick_interval, lambda: self._on_tick(generation)
            )
        except Exception:
            session.status = SessionStatus.STOPPED
            self._release()
            raise

        logger.info("Recording started")
        self._notify()

    def stop(self) -> None:
        if self._session.status is not SessionStatus.RECORDING:
            return
        self._session.status = SessionStatus.STOPPED
        self._release()
        logger.info(
            "Recording stopped: %.2f mi, %d samples",
            self._session.cumulative_distance, len(self._session.samples),
        )
        self._notify()

    def reset(self) -> None:
        self.stop()
        session = self._session
        session.clear()
        session.error = None
        session.started_at = None
        session.status = SessionStatus.IDLE
        self._notify()

    def _release(self) -> None:
        """Drop the source subscription and the tick, even if one fails."""
        # Bump the generation first so late callbacks are ignored
        self._generation += 1
        subscription, self._subscription = self._subscription, None
        tick, self._tick = self._tick, None
        try:
            if subscription is not None:
                subscription.cancel()
        finally:
            if tick is not None:
                tick.cancel()

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation and self._session.status is SessionStatus.RECORDING

    def _on_position(self, generation: int, position: Position) -> None:
        if not self._is_current(generation):
            return
        if not is_valid_position(position.latitude, position.longitude):
            logger.debug("Skipping position without usable coordinates: %s", position)
            return

        timestamp = position.timestamp if position.timestamp is not None else self._clock()
        elevation = position.altitude
        if elevation is not None and not is_valid_elevation(elevation):
            logger.debug("Dropping unusable altitude %r", elevation)
            elevation = None
        self._session.ingest(
            GeoSample(
                timestamp=timestamp,
                latitude=position.latitude,
                longitude=position.longitude,
                elevation=elevation,
            )
        )
        self._notify()

    def _on_error(self, generation: int, error: PositionError) -> None:
        if generation != self._generation:
            return
        session = self._session
        session.error = f"Error tracking location: {error.message}"
        logger.warning("Position source error %d: %s", error.code, error.message)
        if error.code == PositionError.PERMISSION_DENIED and session.status is SessionStatus.RECORDING:
            session.status = SessionStatus.STOPPED
            self._release()
        self._notify()

    def _on_tick(self, generation: int) -> None:
        if not self._is_current(generation):
            return
        session = self._session
        # Recomputed from the clock each time so missed ticks cannot drift
        session.elapsed_seconds = max(0, (self._clock() - session.started_at) // 1000)
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self._session.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Tracking listener failed")
