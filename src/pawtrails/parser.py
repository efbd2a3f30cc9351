import gpxpy

from pawtrails.models import Position


def parse_gpx(filepath: str, elevation_scale: float = 1.0) -> list[Position]:
    """Parse a GPX file and return its track points as Positions.

    Times become epoch milliseconds; elevations are multiplied by
    elevation_scale (e.g. 3.28084 for metres to feet).
    """
    with open(filepath, "r") as f:
        gpx = gpxpy.parse(f)

    positions: list[Position] = []
    for track in gpx.tracks:
        for segment in track.segments:
            for pt in segment.points:
                positions.append(
                    Position(
                        latitude=pt.latitude,
                        longitude=pt.longitude,
                        altitude=pt.elevation * elevation_scale if pt.elevation is not None else None,
                        timestamp=int(pt.time.timestamp() * 1000) if pt.time is not None else None,
                    )
                )
    return positions
