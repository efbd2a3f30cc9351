"""JSON-file storage for recorded hikes."""

import json
import logging
import time
from dataclasses import replace
from datetime import date
from pathlib import Path

from pawtrails.activity import classify_terrain, detect_activity_type
from pawtrails.models import HikeRecord, TrackingSnapshot

logger = logging.getLogger(__name__)


class HikeValidationError(ValueError):
    """Raised when a hike record is missing required data."""


def hike_from_snapshot(
    snapshot: TrackingSnapshot,
    pet_id: str,
    trail_name: str | None = None,
    notes: str | None = None,
    weather: str | None = None,
    duration_seconds: float | None = None,
) -> HikeRecord:
    """Build an unsaved hike record from a finished tracking session.

    duration_seconds defaults to the session's elapsed time, falling back to
    the span of the recorded samples when the tick never ran.
    """
    if duration_seconds is None:
        duration_seconds = snapshot.elapsed_seconds or snapshot.recorded_seconds
    distance = snapshot.cumulative_distance
    hours = duration_seconds / 3600
    avg_speed = distance / hours if hours > 0 else 0.0

    return HikeRecord(
        id="",
        pet_id=pet_id,
        date=date.today().isoformat(),
        duration=duration_seconds / 60,
        distance=distance,
        gps_data=list(snapshot.samples),
        custom_trail_name=trail_name,
        notes=notes,
        weather_conditions=weather,
        activity_type=detect_activity_type(avg_speed),
        terrain=classify_terrain(snapshot.cumulative_elevation_gain),
        elevation_gain=snapshot.cumulative_elevation_gain,
        min_elevation=snapshot.min_elevation,
        max_elevation=snapshot.max_elevation,
    )


class HikeStoreError(ValueError):
    """Raised when an existing store file cannot be read as a list of hikes."""


class HikeStore:
    """Stores hike records as a JSON list in a single file.

    Reads tolerate an unreadable file and report it as empty. Writes refuse
    to touch it so existing records are never overwritten.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> list[HikeRecord]:
        if not self.path.exists():
            return []
        try:
            with self.path.open() as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON list, got {type(data).__name__}")
            return [HikeRecord.from_dict(item) for item in data]
        except (ValueError, OSError, TypeError) as e:
            raise HikeStoreError(f"Could not read hike store {self.path}: {e}") from e

    def _load_for_read(self) -> list[HikeRecord]:
        try:
            return self._load()
        except HikeStoreError as e:
            logger.warning("%s", e)
            return []

    def _write(self, hikes: list[HikeRecord]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w") as f:
            json.dump([h.to_dict() for h in hikes], f, indent=2)

    def save(self, hike: HikeRecord) -> HikeRecord:
        """Validate and append a new hike, returning it with its assigned id."""
        if not hike.pet_id:
            raise HikeValidationError("Pet ID is required")
        if not isinstance(hike.distance, (int, float)) or hike.distance <= 0:
            raise HikeValidationError("Valid distance is required")
        if not isinstance(hike.duration, (int, float)) or hike.duration <= 0:
            raise HikeValidationError("Valid duration is required")

        hikes = self._load()
        today = date.today()
        new_id = str(int(time.time() * 1000))
        while any(h.id == new_id for h in hikes):
            new_id = str(int(new_id) + 1)

        saved = replace(
            hike,
            id=new_id,
            date=hike.date or today.isoformat(),
            custom_trail_name=hike.custom_trail_name or f"Activity on {today.isoformat()}",
        )
        hikes.append(saved)
        self._write(hikes)
        logger.info("Saved hike %s for pet %s", saved.id, saved.pet_id)
        return saved

    def all(self) -> list[HikeRecord]:
        return self._load_for_read()

    def for_pet(self, pet_id: str) -> list[HikeRecord]:
        return [h for h in self._load_for_read() if h.pet_id == pet_id]

    def get(self, hike_id: str) -> HikeRecord | None:
        for hike in self._load_for_read():
            if hike.id == hike_id:
                return hike
        return None

    def update(self, hike_id: str, **changes) -> HikeRecord | None:
        """Apply field changes to a stored hike. Returns None if not found."""
        hikes = self._load()
        for i, hike in enumerate(hikes):
            if hike.id == hike_id:
                changes.pop("id", None)
                hikes[i] = replace(hike, **changes)
                self._write(hikes)
                return hikes[i]
        logger.warning("Hike %s not found", hike_id)
        return None

    def delete(self, hike_id: str) -> bool:
        hikes = self._load()
        remaining = [h for h in hikes if h.id != hike_id]
        if len(remaining) == len(hikes):
            return False
        self._write(remaining)
        return True
