"""Elevation gain and bounds aggregation.

Gain only counts climbs between consecutive elevation-bearing readings.
Readings without elevation are skipped entirely; they neither add gain nor
replace the reference elevation for the next comparison.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pawtrails.models import GeoSample


def elevation_gain_step(previous: float | None, current: float | None) -> float:
    """Gain contributed by moving from previous to current elevation."""
    if previous is None or current is None:
        return 0.0
    delta = current - previous
    return delta if delta > 0 else 0.0


@dataclass
class ElevationBounds:
    minimum: float | None = None
    maximum: float | None = None

    def update(self, value: float) -> None:
        # The first reading seeds both bounds
        if self.minimum is None or value < self.minimum:
            self.minimum = value
        if self.maximum is None or value > self.maximum:
            self.maximum = value


def elevation_gain(samples: list[GeoSample]) -> float:
    gain = 0.0
    previous = None
    for sample in samples:
        if sample.elevation is None:
            continue
        gain += elevation_gain_step(previous, sample.elevation)
        previous = sample.elevation
    return gain


def elevation_bounds(samples: list[GeoSample]) -> ElevationBounds:
    bounds = ElevationBounds()
    for sample in samples:
        if sample.elevation is not None:
            bounds.update(sample.elevation)
    return bounds
