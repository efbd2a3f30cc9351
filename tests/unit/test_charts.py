import pytest

from pawtrails.charts import generate_elevation_profile, profile_data
from pawtrails.models import GeoSample


def make_samples(elevations):
    return [
        GeoSample(timestamp=i * 60_000, latitude=47.0 + i * 0.001, longitude=-122.0, elevation=e)
        for i, e in enumerate(elevations)
    ]


class TestProfileData:
    def test_skips_missing_elevation_but_keeps_distance(self):
        distances, elevations = profile_data(make_samples([100.0, None, 120.0]))
        assert elevations == [100.0, 120.0]
        assert distances[0] == 0.0
        assert distances[1] == pytest.approx(0.138, abs=0.001)


class TestGenerateElevationProfile:
    def test_returns_png(self):
        png = generate_elevation_profile(make_samples([100.0, 110.0, 105.0, 130.0]))
        assert png.startswith(b"\x89PNG")

    def test_needs_two_elevations(self):
        with pytest.raises(ValueError):
            generate_elevation_profile(make_samples([100.0, None]))
