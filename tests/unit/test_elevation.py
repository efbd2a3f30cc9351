import pytest

from pawtrails.elevation import (
    ElevationBounds,
    elevation_bounds,
    elevation_gain,
    elevation_gain_step,
)
from pawtrails.models import GeoSample


def make_samples(elevations):
    return [
        GeoSample(timestamp=i * 1000, latitude=47.0 + i * 0.0001, longitude=-122.0, elevation=e)
        for i, e in enumerate(elevations)
    ]


class TestElevationGainStep:
    def test_climb(self):
        assert elevation_gain_step(100.0, 130.0) == 30.0

    def test_descent_is_zero(self):
        assert elevation_gain_step(100.0, 90.0) == 0.0

    def test_flat_is_zero(self):
        assert elevation_gain_step(100.0, 100.0) == 0.0

    def test_missing_values(self):
        assert elevation_gain_step(None, 100.0) == 0.0
        assert elevation_gain_step(100.0, None) == 0.0


class TestElevationBounds:
    def test_first_reading_seeds_both(self):
        bounds = ElevationBounds()
        bounds.update(250.0)
        assert bounds.minimum == 250.0
        assert bounds.maximum == 250.0

    def test_tracks_extrema(self):
        bounds = ElevationBounds()
        for value in [100.0, 90.0, 120.0, 95.0]:
            bounds.update(value)
        assert bounds.minimum == 90.0
        assert bounds.maximum == 120.0

    def test_negative_elevations(self):
        bounds = ElevationBounds()
        for value in [-20.0, -5.0, -30.0]:
            bounds.update(value)
        assert bounds.minimum == -30.0
        assert bounds.maximum == -5.0


class TestBatchHelpers:
    def test_gain_ignores_descents(self):
        samples = make_samples([100.0, 90.0, 120.0])
        assert elevation_gain(samples) == pytest.approx(30.0)

    def test_missing_elevation_skipped(self):
        samples = make_samples([100.0, None, 90.0, None, 120.0])
        assert elevation_gain(samples) == pytest.approx(30.0)
        bounds = elevation_bounds(samples)
        assert bounds.minimum == 90.0
        assert bounds.maximum == 120.0

    def test_no_elevation_data(self):
        samples = make_samples([None, None])
        assert elevation_gain(samples) == 0.0
        bounds = elevation_bounds(samples)
        assert bounds.minimum is None
        assert bounds.maximum is None
