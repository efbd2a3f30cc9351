from pawtrails.formatters import (
    format_distance,
    format_duration,
    format_elevation,
    format_pace,
    format_speed,
    format_time,
)


class TestFormatTime:
    def test_pads_fields(self):
        assert format_time(0) == "00:00:00"
        assert format_time(65) == "00:01:05"
        assert format_time(3725) == "01:02:05"

    def test_truncates_fractions(self):
        assert format_time(59.9) == "00:00:59"


class TestFormatDuration:
    def test_minutes_only(self):
        assert format_duration(45) == "45m"

    def test_whole_hours(self):
        assert format_duration(120) == "2h"

    def test_hours_and_minutes(self):
        assert format_duration(95) == "1h 35m"


class TestOtherFormatters:
    def test_distance(self):
        assert format_distance(2.345) == "2.3 mi"

    def test_pace(self):
        assert format_pace(54, 3.0) == "18 min/mi"
        assert format_pace(30, 0) == "--"

    def test_elevation(self):
        assert format_elevation(120.6) == "121 ft"
        assert format_elevation(None) == "--"

    def test_speed(self):
        assert format_speed(2.44) == "2.4 mph"
