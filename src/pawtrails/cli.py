import argparse
import asyncio
import logging
import sys

from pawtrails import __version_date__, get_git_hash
from pawtrails.analysis import generate_analysis
from pawtrails.charts import generate_elevation_profile
from pawtrails.config import DEFAULTS, get_setting, load_config
from pawtrails.formatters import (
    format_distance,
    format_elevation,
    format_pace,
    format_speed,
    format_time,
)
from pawtrails.models import Pet, TrackingSnapshot
from pawtrails.source import GpxReplaySource
from pawtrails.storage import HikeStore, hike_from_snapshot
from pawtrails.ticker import AsyncioTicker
from pawtrails.tracker import ActivityTracker

logger = logging.getLogger(__name__)


def build_parser(config: dict | None = None) -> argparse.ArgumentParser:
    """Build argument parser with defaults from config file."""
    if config is None:
        config = {}

    parser = argparse.ArgumentParser(
        prog="pawtrails",
        description="Replay a recorded GPX track through the PawTrails activity tracker.",
    )
    parser.add_argument("gpx_file", help="Path to GPX file")
    parser.add_argument("--pet-name", default=None, help="Pet name; enables the post-hike analysis")
    parser.add_argument("--pet-id", default="pet-1", help="Pet id stored with the hike (default: pet-1)")
    parser.add_argument("--breed", default="Mixed Breed", help="Pet breed (default: Mixed Breed)")
    parser.add_argument("--weight", type=float, default=50.0, help="Pet weight in lb (default: 50)")
    parser.add_argument(
        "--energy",
        choices=["Low", "Medium", "High"],
        default="Medium",
        help="Pet energy level (default: Medium)",
    )
    parser.add_argument("--health-issue", action="append", default=[], help="Known health issue (repeatable)")
    parser.add_argument("--trail-name", default=None, help="Trail name for the saved hike")
    parser.add_argument("--weather", default=None, help="Weather conditions, e.g. 'Sunny, 72F'")
    parser.add_argument(
        "--save",
        nargs="?",
        const=get_setting(config, "store_path"),
        default=None,
        metavar="PATH",
        help=f"Save the hike to a JSON store (default path: {DEFAULTS['store_path']})",
    )
    parser.add_argument("--chart", default=None, metavar="PNG", help="Write an elevation profile PNG")
    parser.add_argument(
        "--max-samples",
        type=int,
        default=get_setting(config, "max_samples"),
        help=f"Samples retained in the track buffer (default: {DEFAULTS['max_samples']})",
    )
    parser.add_argument(
        "--elevation-scale",
        type=float,
        default=get_setting(config, "elevation_scale"),
        help=f"Multiplier applied to GPX elevations (default: {DEFAULTS['elevation_scale']}, metres to feet)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"pawtrails {__version_date__} ({get_git_hash()})",
    )
    return parser


async def replay_track(source: GpxReplaySource, max_samples: int, tick_interval: float) -> TrackingSnapshot:
    """Run a full start/replay/stop session and return the frozen snapshot."""
    tracker = ActivityTracker(
        source,
        AsyncioTicker(),
        max_samples=max_samples,
        tick_interval=tick_interval,
    )
    tracker.start()
    try:
        source.play()
        # Let any pending tick run before stopping
        await asyncio.sleep(0)
    finally:
        tracker.stop()
    return tracker.snapshot()


def print_summary(snapshot: TrackingSnapshot, hike) -> None:
    seconds = snapshot.recorded_seconds
    print("=== PawTrails Activity ===")
    print(f"Samples:        {len(snapshot.samples)}")
    print(f"Distance:       {format_distance(snapshot.cumulative_distance)}")
    print(f"Duration:       {format_time(seconds)}")
    print(f"Pace:           {format_pace(seconds / 60, snapshot.cumulative_distance)}")
    print(f"Last Speed:     {format_speed(snapshot.current_speed)}")
    print(f"Elevation Gain: {format_elevation(snapshot.cumulative_elevation_gain)}")
    print(f"Min Elevation:  {format_elevation(snapshot.min_elevation)}")
    print(f"Max Elevation:  {format_elevation(snapshot.max_elevation)}")
    print(f"Activity:       {hike.activity_type}")
    print(f"Terrain:        {hike.terrain}")


def main(argv: list[str] | None = None) -> None:
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = GpxReplaySource(args.gpx_file, elevation_scale=args.elevation_scale)
    except FileNotFoundError:
        print(f"Error: File not found: {args.gpx_file}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error parsing GPX file: {e}", file=sys.stderr)
        sys.exit(1)

    if len(source.positions) < 2:
        print("Error: GPX file contains fewer than 2 track points.", file=sys.stderr)
        sys.exit(1)

    try:
        snapshot = asyncio.run(
            replay_track(source, args.max_samples, get_setting(config, "tick_interval"))
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if snapshot.error:
        print(f"Error: {snapshot.error}", file=sys.stderr)
        sys.exit(1)

    hike = hike_from_snapshot(
        snapshot,
        pet_id=args.pet_id,
        trail_name=args.trail_name,
        weather=args.weather,
        duration_seconds=snapshot.recorded_seconds,
    )
    print_summary(snapshot, hike)

    if args.save:
        try:
            hike = HikeStore(args.save).save(hike)
        except (ValueError, OSError) as e:
            print(f"Error saving hike: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Saved hike {hike.id} to {args.save}")

    if args.pet_name:
        pet = Pet(
            id=args.pet_id,
            name=args.pet_name,
            breed=args.breed,
            weight=args.weight,
            energy_level=args.energy,
            health_issues=args.health_issue,
        )
        analysis = generate_analysis(hike, pet)
        print("")
        print("=== Analysis ===")
        print(analysis.overview)
        print("")
        print(f"Paw health: {analysis.paw_health_insights}")
        print(f"Rest stops: {analysis.rest_stop_recommendations}")
        print(f"Next time:  {analysis.future_suggestions}")
        print(f"Energy:     {analysis.energy_expenditure_estimate}")

    if args.chart:
        try:
            png = generate_elevation_profile(list(snapshot.samples))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        with open(args.chart, "wb") as f:
            f.write(png)
        print(f"Wrote elevation profile to {args.chart}")
