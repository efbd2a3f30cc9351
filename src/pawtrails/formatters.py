"""Formatting utilities for display."""


def format_time(seconds: float) -> str:
    """Format seconds as HH:MM:SS."""
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_duration(minutes: float) -> str:
    """Format minutes as Xh Ym, dropping a zero part."""
    total = int(round(minutes))
    hours = total // 60
    mins = total % 60
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def format_distance(miles: float) -> str:
    return f"{miles:.1f} mi"


def format_pace(minutes: float, distance: float) -> str:
    """Format pace in minutes per mile, or -- when no distance was covered."""
    if distance <= 0:
        return "--"
    return f"{round(minutes / distance)} min/mi"


def format_elevation(feet: float | None) -> str:
    if feet is None:
        return "--"
    return f"{round(feet)} ft"


def format_speed(mph: float) -> str:
    return f"{mph:.1f} mph"
