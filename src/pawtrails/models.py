from dataclasses import asdict, dataclass, field
from enum import Enum


@dataclass
class Position:
    """A raw reading delivered by a position source."""
    latitude: float | None
    longitude: float | None
    altitude: float | None = None
    timestamp: int | None = None  # ms since epoch; None = stamp on arrival


@dataclass(frozen=True)
class GeoSample:
    timestamp: int  # ms since epoch
    latitude: float
    longitude: float
    elevation: float | None = None  # feet unless the source says otherwise


class SessionStatus(Enum):
    IDLE = "Idle"
    RECORDING = "Recording"
    STOPPED = "Stopped"


@dataclass(frozen=True)
class TrackingSnapshot:
    """Read-only view of a tracking session handed to presenters."""
    status: SessionStatus
    error: str | None
    samples: tuple[GeoSample, ...]
    cumulative_distance: float  # miles
    cumulative_elevation_gain: float
    min_elevation: float | None
    max_elevation: float | None
    current_location: tuple[float, float] | None
    current_elevation: float | None
    started_at: int | None  # ms since epoch
    elapsed_seconds: int
    current_speed: float  # mph
    first_sample_at: int | None = None
    last_sample_at: int | None = None

    @property
    def is_recording(self) -> bool:
        return self.status is SessionStatus.RECORDING

    @property
    def pace_minutes_per_mile(self) -> float | None:
        if self.cumulative_distance <= 0:
            return None
        return (self.elapsed_seconds / 60) / self.cumulative_distance

    @property
    def recorded_seconds(self) -> float:
        """Time spanned by the ingested samples, independent of the tick."""
        if self.first_sample_at is None or self.last_sample_at is None:
            return 0.0
        return max(0.0, (self.last_sample_at - self.first_sample_at) / 1000)


@dataclass
class Pet:
    id: str
    name: str
    breed: str
    age: int = 0
    weight: float = 50.0  # lb
    energy_level: str = "Medium"  # Low, Medium or High
    health_issues: list[str] = field(default_factory=list)


@dataclass
class HikeRecord:
    id: str
    pet_id: str
    date: str
    duration: float  # minutes
    distance: float  # miles
    gps_data: list[GeoSample] = field(default_factory=list)
    custom_trail_name: str | None = None
    notes: str | None = None
    weather_conditions: str | None = None
    activity_type: str | None = None  # Hike, Run, Walk, Play or Other
    terrain: str | None = None  # Flat, Hilly, Mountainous, Mixed or Unknown
    elevation_gain: float | None = None  # feet
    min_elevation: float | None = None
    max_elevation: float | None = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "HikeRecord":
        values = dict(data)
        values["gps_data"] = [GeoSample(**pt) for pt in values.get("gps_data") or []]
        return cls(**values)


@dataclass
class HikeAnalysis:
    id: str
    hike_id: str
    pet_id: str
    overview: str
    paw_health_insights: str
    rest_stop_recommendations: str
    future_suggestions: str
    energy_expenditure_estimate: str
    timestamp: str  # ISO 8601
