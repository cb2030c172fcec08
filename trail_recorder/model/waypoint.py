"""Waypoint - A user-annotated point of interest along a trail.

WaypointDraft holds what the user supplies (type, location, notes).
WaypointStore turns a draft into a Waypoint by assigning an id and a
creation instant. Waypoints are never mutated; they are only removed.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from trail_recorder.constants import WaypointConfig


class WaypointType(Enum):
    """Types of waypoints a user can place along a trail."""

    REST_AREA = "rest_area"
    SCENIC_VIEWPOINT = "scenic_viewpoint"
    WATER_SOURCE = "water_source"
    RESTROOM = "restroom"
    PARKING = "parking"
    TRAILHEAD = "trailhead"
    OBSTACLE = "obstacle"
    HAZARD = "hazard"
    SURFACE_CHANGE = "surface_change"
    STEEP_SECTION = "steep_section"
    INTERSECTION = "intersection"
    INFORMATION = "information"
    PHOTO_SPOT = "photo_spot"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return WaypointConfig.TYPE_INFO[self.value]["label"]

    @property
    def category(self) -> str:
        """One of amenity, caution, navigation, interest."""
        return WaypointConfig.TYPE_INFO[self.value]["category"]

    @property
    def is_caution(self) -> bool:
        return self.category == "caution"


assert [t.value for t in WaypointType] == WaypointConfig.TYPES


@dataclass(frozen=True)
class WaypointDraft:
    """Caller-supplied waypoint data, before identity is assigned.

    Attributes:
        type: Kind of point of interest
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        elevation: Altitude in meters, if known
        name: Optional short title
        description: Optional free text
        accessibility_note: Optional note for mobility-aid users
        photo_uri: Optional reference to an attached photo
    """

    type: WaypointType
    latitude: float
    longitude: float
    elevation: float | None = None
    name: str | None = None
    description: str | None = None
    accessibility_note: str | None = None
    photo_uri: str | None = None


@dataclass(frozen=True)
class Waypoint:
    """A waypoint placed on a trail.

    Attributes:
        id: Unique identifier assigned by WaypointStore
        created_at: Instant the waypoint was added
        (remaining fields as in WaypointDraft)
    """

    id: str
    type: WaypointType
    latitude: float
    longitude: float
    created_at: datetime
    elevation: float | None = None
    name: str | None = None
    description: str | None = None
    accessibility_note: str | None = None
    photo_uri: str | None = None

    @classmethod
    def from_draft(cls, draft: WaypointDraft, waypoint_id: str, created_at: datetime) -> "Waypoint":
        return cls(
            id=waypoint_id,
            type=draft.type,
            latitude=draft.latitude,
            longitude=draft.longitude,
            created_at=created_at,
            elevation=draft.elevation,
            name=draft.name,
            description=draft.description,
            accessibility_note=draft.accessibility_note,
            photo_uri=draft.photo_uri,
        )

    @property
    def display_name(self) -> str:
        """Name if given, otherwise the type label."""
        return self.name or self.type.label

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "id": self.id,
            "type": self.type.value,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "elevation": self.elevation,
            "name": self.name,
            "description": self.description,
            "accessibility_note": self.accessibility_note,
            "photo_uri": self.photo_uri,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Waypoint":
        """Create Waypoint from dictionary."""
        return cls(
            id=data["id"],
            type=WaypointType(data["type"]),
            latitude=data["latitude"],
            longitude=data["longitude"],
            created_at=datetime.fromisoformat(data["created_at"]),
            elevation=data.get("elevation"),
            name=data.get("name"),
            description=data.get("description"),
            accessibility_note=data.get("accessibility_note"),
            photo_uri=data.get("photo_uri"),
        )

    def __repr__(self) -> str:
        return f"Waypoint({self.id[:8]}, {self.type.value}, lat={self.latitude:.5f}, lon={self.longitude:.5f})"
