"""Trail - A finalized, named record of a recorded path.

A Trail is produced by TrailFinalizer from a stopped recording session plus
TrailMetadata from the form collaborator. It is immutable: editing a trail
means finalizing a new one through the same metadata path.

Statistics (distance, elevation gain, duration) are copied from the session;
path_length_m() re-measures the stored geometry for audits only.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from trail_recorder.constants import TrailConfig
from trail_recorder.core.geo_calculator import GeoCalculator
from trail_recorder.model.accessibility import AccessibilityFeature, DifficultyLevel, SurfaceType
from trail_recorder.model.position_sample import PositionSample
from trail_recorder.model.waypoint import Waypoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrailMetadata:
    """Descriptive data entered by the user when saving a trail.

    Enum fields accept either the enum member or its string value; anything
    else is reported by validate_trail_metadata().

    Attributes:
        name: Trail name (required, trimmed)
        description: Optional free text (trimmed, empty becomes None)
        difficulty: Required DifficultyLevel
        surface_type: Required SurfaceType
        accessibility_features: Zero or more AccessibilityFeature tags; None means none,
            a single tag may be passed on its own
        cover_photo_uri: Optional cover photo reference
        author_id: Optional id of the recording user
    """

    name: str
    description: str | None = None
    difficulty: DifficultyLevel | str | None = None
    surface_type: SurfaceType | str | None = None
    accessibility_features: Iterable[AccessibilityFeature | str] | None = field(default_factory=tuple)
    cover_photo_uri: str | None = None
    author_id: str | None = None

    def __post_init__(self) -> None:
        """Materialize accessibility features once as a tuple (the caller may pass a generator)."""
        features = self.accessibility_features
        if features is None:
            features = ()
        elif isinstance(features, (str, AccessibilityFeature)):
            features = (features,)
        object.__setattr__(self, "accessibility_features", tuple(features))


@dataclass(frozen=True)
class Trail:
    """A recorded trail with all metadata.

    Attributes:
        id: Unique identifier assigned at finalization
        name: Display name
        description: Optional free text
        difficulty: Difficulty level
        surface_type: Dominant surface
        accessibility_features: Set of accessibility tags
        coordinates: Position samples in arrival order
        waypoints: Waypoints in insertion order
        distance_m: Recorded distance in meters
        elevation_gain_m: Cumulative positive elevation change in meters
        estimated_duration_minutes: ceil(elapsed recording seconds / 60)
        created_at: Finalization instant
        updated_at: Equal to created_at for a freshly finalized trail
        is_published: Always False at finalization
        author_id: Optional id of the recording user
        cover_photo_uri: Optional cover photo reference
    """

    id: str
    name: str
    description: str | None
    difficulty: DifficultyLevel
    surface_type: SurfaceType
    accessibility_features: frozenset[AccessibilityFeature]
    coordinates: tuple[PositionSample, ...]
    waypoints: tuple[Waypoint, ...]
    distance_m: float
    elevation_gain_m: float
    estimated_duration_minutes: int
    created_at: datetime
    updated_at: datetime
    is_published: bool = False
    author_id: str | None = None
    cover_photo_uri: str | None = None

    @property
    def waypoint_count(self) -> int:
        return len(self.waypoints)

    @property
    def start_point(self) -> PositionSample | None:
        return self.coordinates[0] if self.coordinates else None

    @property
    def end_point(self) -> PositionSample | None:
        return self.coordinates[-1] if self.coordinates else None

    def path_length_m(self) -> float:
        """Re-measure the stored geometry (vectorized haversine over all coordinates)."""
        return GeoCalculator.path_length_m(
            latitudes=[c.latitude for c in self.coordinates],
            longitudes=[c.longitude for c in self.coordinates],
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible dict for the persistence collaborator."""
        return {
            "version": TrailConfig.SERIALIZATION_VERSION,
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "difficulty": self.difficulty.value,
            "surface_type": self.surface_type.value,
            "accessibility_features": sorted(f.value for f in self.accessibility_features),
            "coordinates": [c.to_dict() for c in self.coordinates],
            "waypoints": [wp.to_dict() for wp in self.waypoints],
            "distance_m": self.distance_m,
            "elevation_gain_m": self.elevation_gain_m,
            "estimated_duration_minutes": self.estimated_duration_minutes,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "is_published": self.is_published,
            "author_id": self.author_id,
            "cover_photo_uri": self.cover_photo_uri,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Trail":
        """Create Trail from dictionary."""
        version = data.get("version")
        if version != TrailConfig.SERIALIZATION_VERSION:
            logger.warning(f"Loading trail {data.get('id')} with schema version {version}")
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            difficulty=DifficultyLevel(data["difficulty"]),
            surface_type=SurfaceType(data["surface_type"]),
            accessibility_features=frozenset(AccessibilityFeature(f) for f in data["accessibility_features"]),
            coordinates=tuple(PositionSample.from_dict(data=c) for c in data["coordinates"]),
            waypoints=tuple(Waypoint.from_dict(data=wp) for wp in data["waypoints"]),
            distance_m=data["distance_m"],
            elevation_gain_m=data["elevation_gain_m"],
            estimated_duration_minutes=data["estimated_duration_minutes"],
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
            is_published=data.get("is_published", False),
            author_id=data.get("author_id"),
            cover_photo_uri=data.get("cover_photo_uri"),
        )

    def __repr__(self) -> str:
        return (
            f"Trail({self.id[:8]}, {self.name!r}, {self.distance_m:.0f}m, "
            f"+{self.elevation_gain_m:.0f}m, {self.estimated_duration_minutes}min)"
        )
