"""Accessibility - Descriptive options attached to a finalized trail.

- DifficultyLevel: How demanding the trail is, with accessibility context
- SurfaceType: Dominant surface, with a note on mobility-aid suitability
- AccessibilityFeature: Tags describing available accommodations

Labels and descriptions live in TrailConfig so the option tables stay in one place.
"""

from enum import Enum

from trail_recorder.constants import TrailConfig


class DifficultyLevel(Enum):
    """Difficulty levels with accessibility context."""

    EASY = "easy"
    MODERATE = "moderate"
    DIFFICULT = "difficult"
    VERY_DIFFICULT = "very_difficult"

    @property
    def label(self) -> str:
        return TrailConfig.DIFFICULTY_INFO[self.value]["label"]

    @property
    def description(self) -> str:
        return TrailConfig.DIFFICULTY_INFO[self.value]["description"]


class SurfaceType(Enum):
    """Surface types for trails."""

    PAVED = "paved"
    GRAVEL = "gravel"
    PACKED_DIRT = "packed_dirt"
    BOARDWALK = "boardwalk"
    NATURAL = "natural"
    SAND = "sand"
    GRASS = "grass"
    MULCH = "mulch"

    @property
    def label(self) -> str:
        return TrailConfig.SURFACE_INFO[self.value]["label"]

    @property
    def accessibility_note(self) -> str:
        return TrailConfig.SURFACE_INFO[self.value]["accessibility_note"]


class AccessibilityFeature(Enum):
    """Accessibility features that can be tagged on a trail."""

    WHEELCHAIR_ACCESSIBLE = "wheelchair_accessible"
    STROLLER_FRIENDLY = "stroller_friendly"
    PAVED_SURFACE = "paved_surface"
    GENTLE_SLOPE = "gentle_slope"
    HANDRAILS = "handrails"
    REST_AREAS = "rest_areas"
    ACCESSIBLE_PARKING = "accessible_parking"
    ACCESSIBLE_RESTROOMS = "accessible_restrooms"
    TACTILE_INDICATORS = "tactile_indicators"
    AUDIO_GUIDES = "audio_guides"
    WIDE_PATH = "wide_path"
    LEVEL_TERRAIN = "level_terrain"
    SHADE_AVAILABLE = "shade_available"
    WATER_FOUNTAIN = "water_fountain"

    @property
    def label(self) -> str:
        return TrailConfig.ACCESSIBILITY_INFO[self.value]["label"]

    @property
    def description(self) -> str:
        return TrailConfig.ACCESSIBILITY_INFO[self.value]["description"]


# Enums and option tables must stay in sync (module-level assertion)
assert [d.value for d in DifficultyLevel] == TrailConfig.DIFFICULTIES
assert [s.value for s in SurfaceType] == TrailConfig.SURFACE_TYPES
assert [f.value for f in AccessibilityFeature] == TrailConfig.ACCESSIBILITY_FEATURES
