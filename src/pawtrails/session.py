"""Incremental aggregation of position samples for one recording."""

import logging
import math
from collections import deque

from pawtrails.distance import distance_miles
from pawtrails.elevation import ElevationBounds, elevation_gain_step
from pawtrails.models import GeoSample, SessionStatus, TrackingSnapshot

logger = logging.getLogger(__name__)

# Maximum number of samples retained per session
DEFAULT_MAX_SAMPLES = 1000

_MS_PER_HOUR = 3_600_000


def _is_finite_number(value) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def is_valid_position(latitude, longitude) -> bool:
    """True when both coordinates are present and finite."""
    return _is_finite_number(latitude) and _is_finite_number(longitude)


def is_valid_elevation(elevation) -> bool:
    """True when an altitude reading is a finite number."""
    return _is_finite_number(elevation)


class TrackingSession:
    """Aggregate state for one recording.

    Totals are accumulated at arrival time and never recomputed from the
    retained buffer, so evicting old samples does not change them.
    """

    def __init__(self, max_samples: int = DEFAULT_MAX_SAMPLES):
        if max_samples < 1:
            raise ValueError(f"max_samples must be at least 1, got {max_samples}")
        self.max_samples = max_samples
        self.status = SessionStatus.IDLE
        self.error: str | None = None
        self.started_at: int | None = None
        self.clear()

    def clear(self) -> None:
        """Zero every cumulative field. Status and error are left alone."""
        self.samples: deque[GeoSample] = deque(maxlen=self.max_samples)
        self.cumulative_distance = 0.0
        self.cumulative_elevation_gain = 0.0
        self.bounds = ElevationBounds()
        self.current_location: tuple[float, float] | None = None
        self.current_elevation: float | None = None
        self.elapsed_seconds = 0
        self.current_speed = 0.0
        self.first_sample_at: int | None = None
        self._previous: GeoSample | None = None
        self._previous_elevation: float | None = None

    @property
    def previous_sample(self) -> GeoSample | None:
        return self._previous

    def ingest(self, sample: GeoSample) -> None:
        """Fold one sample into the running totals, in arrival order."""
        self.samples.append(sample)

        previous = self._previous
        if previous is not None:
            segment = distance_miles(
                previous.latitude, previous.longitude,
                sample.latitude, sample.longitude,
            )
            self.cumulative_distance += segment

            elapsed_ms = sample.timestamp - previous.timestamp
            if elapsed_ms > 0:
                self.current_speed = segment / (elapsed_ms / _MS_PER_HOUR)
            else:
                logger.debug("Non-positive time delta (%d ms), keeping speed", elapsed_ms)
        else:
            self.first_sample_at = sample.timestamp

        if sample.elevation is not None:
            self.cumulative_elevation_gain += elevation_gain_step(
                self._previous_elevation, sample.elevation
            )
            self.bounds.update(sample.elevation)
            self._previous_elevation = sample.elevation
            self.current_elevation = sample.elevation

        self.current_location = (sample.latitude, sample.longitude)
        self._previous = sample

    def snapshot(self) -> TrackingSnapshot:
        return TrackingSnapshot(
            status=self.status,
            error=self.error,
            samples=tuple(self.samples),
            cumulative_distance=self.cumulative_distance,
            cumulative_elevation_gain=self.cumulative_elevation_gain,
            min_elevation=self.bounds.minimum,
            max_elevation=self.bounds.maximum,
            current_location=self.current_location,
            current_elevation=self.current_elevation,
            started_at=self.started_at,
            elapsed_seconds=self.elapsed_seconds,
            current_speed=self.current_speed,
            first_sample_at=self.first_sample_at,
            last_sample_at=self._previous.timestamp if self._previous else None,
        )
