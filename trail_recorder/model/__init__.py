"""Data model classes for trail recording.

- PositionSample: Geometry atom (lat, lon, optional elevation, timestamp)
- WaypointType / WaypointDraft / Waypoint: Points of interest along a trail
- WaypointStore: Ordered, owned waypoint collection with identity assignment
- DifficultyLevel / SurfaceType / AccessibilityFeature: Descriptive options
- TrailMetadata: User-entered data for finalization
- Trail: Immutable finalized record
- ValidationMessage and subclasses: Refusal reasons for invalid metadata
"""

from trail_recorder.model.accessibility import AccessibilityFeature, DifficultyLevel, SurfaceType
from trail_recorder.model.message import (
    DifficultyRequiredMessage,
    SessionStillActiveMessage,
    SurfaceTypeRequiredMessage,
    TrailNameRequiredMessage,
    TrailValidationError,
    UnknownOptionMessage,
    ValidationMessage,
)
from trail_recorder.model.position_sample import PositionSample
from trail_recorder.model.trail import Trail, TrailMetadata
from trail_recorder.model.waypoint import Waypoint, WaypointDraft, WaypointType
from trail_recorder.model.waypoint_store import WaypointStore

__all__ = [
    "PositionSample",
    "WaypointType",
    "WaypointDraft",
    "Waypoint",
    "WaypointStore",
    "DifficultyLevel",
    "SurfaceType",
    "AccessibilityFeature",
    "TrailMetadata",
    "Trail",
    "ValidationMessage",
    "TrailNameRequiredMessage",
    "DifficultyRequiredMessage",
    "SurfaceTypeRequiredMessage",
    "UnknownOptionMessage",
    "SessionStillActiveMessage",
    "TrailValidationError",
]
