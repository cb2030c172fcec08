"""Configuration constants for Trail Recorder.

All configurable parameters are centralized here for easy tuning.

Classes:
    GeoConfig: Earth model used for distance calculations
    RecordingConfig: Recording session behaviour
    LocationConfig: Defaults for the location collaborator
    WaypointConfig: Waypoint types with labels and categories
    TrailConfig: Difficulty, surface and accessibility option tables
    FormatConfig: Display formatting thresholds
"""


class GeoConfig:
    """Earth model for geodesic calculations."""

    # Spherical Earth approximation (mean radius)
    EARTH_RADIUS_M = 6_371_000
    # At equator, 1 degree of latitude or longitude on this sphere
    # (2 * pi * 6,371 km / 360 degrees)
    METERS_PER_DEGREE_EQUATOR = 111_194.93


class RecordingConfig:
    """Recording session behaviour."""

    # Samples are applied in delivery order. When True, samples whose timestamp
    # precedes the previously accepted sample are dropped instead.
    REJECT_OUT_OF_ORDER_SAMPLES = False


class LocationConfig:
    """Defaults passed to the location collaborator while tracking."""

    DISTANCE_FILTER_M = 5  # Minimum movement before a new sample is delivered
    INTERVAL_MS = 3000  # Minimum time between delivered samples
    TIMEOUT_MS = 15000  # One-shot position lookup timeout
    HIGH_ACCURACY = True


class WaypointConfig:
    """Waypoint types a user can place along a trail."""

    CATEGORIES = ["amenity", "caution", "navigation", "interest"]

    TYPE_INFO = {
        "rest_area": {"label": "Rest Area", "category": "amenity"},
        "scenic_viewpoint": {"label": "Scenic Viewpoint", "category": "interest"},
        "water_source": {"label": "Water Source", "category": "amenity"},
        "restroom": {"label": "Restroom", "category": "amenity"},
        "parking": {"label": "Parking", "category": "amenity"},
        "trailhead": {"label": "Trailhead", "category": "navigation"},
        "obstacle": {"label": "Obstacle", "category": "caution"},
        "hazard": {"label": "Hazard", "category": "caution"},
        "surface_change": {"label": "Surface Change", "category": "caution"},
        "steep_section": {"label": "Steep Section", "category": "caution"},
        "intersection": {"label": "Trail Junction", "category": "navigation"},
        "information": {"label": "Info Sign", "category": "interest"},
        "photo_spot": {"label": "Photo Spot", "category": "interest"},
        "custom": {"label": "Custom", "category": "interest"},
    }
    TYPES = list(TYPE_INFO.keys())


assert all(
    info["category"] in WaypointConfig.CATEGORIES for info in WaypointConfig.TYPE_INFO.values()
), "Every waypoint type needs a known category"


class TrailConfig:
    """Descriptive option tables for finalized trails."""

    # Schema version written by Trail.to_dict()
    SERIALIZATION_VERSION = "1.0"

    DIFFICULTY_INFO = {
        "easy": {
            "label": "Easy",
            "description": "Flat, wide, firm surface. Suitable for all ability levels.",
        },
        "moderate": {
            "label": "Moderate",
            "description": "Some elevation change or narrow sections. Generally passable with assistance.",
        },
        "difficult": {
            "label": "Difficult",
            "description": "Steep sections, rough surface, or obstacles. Limited accessibility.",
        },
        "very_difficult": {
            "label": "Very Difficult",
            "description": "Steep, rough, narrow. Not recommended for mobility aids.",
        },
    }
    DIFFICULTIES = list(DIFFICULTY_INFO.keys())

    SURFACE_INFO = {
        "paved": {
            "label": "Paved",
            "accessibility_note": "Excellent for wheelchairs and mobility aids",
        },
        "gravel": {
            "label": "Gravel",
            "accessibility_note": "May be difficult for wheelchairs; firm gravel is passable",
        },
        "packed_dirt": {
            "label": "Packed Dirt",
            "accessibility_note": "Firm when dry; may become muddy in wet conditions",
        },
        "boardwalk": {
            "label": "Boardwalk",
            "accessibility_note": "Usually accessible; check for gaps between boards",
        },
        "natural": {
            "label": "Natural",
            "accessibility_note": "Unimproved surface; likely not wheelchair accessible",
        },
        "sand": {
            "label": "Sand",
            "accessibility_note": "Not accessible for wheelchairs without beach mats",
        },
        "grass": {
            "label": "Grass",
            "accessibility_note": "Soft surface; difficult for wheelchairs when wet",
        },
        "mulch": {
            "label": "Mulch",
            "accessibility_note": "Soft surface; generally not wheelchair accessible",
        },
    }
    SURFACE_TYPES = list(SURFACE_INFO.keys())

    ACCESSIBILITY_INFO = {
        "wheelchair_accessible": {
            "label": "Wheelchair Accessible",
            "description": "Full wheelchair access with firm, stable surface",
        },
        "stroller_friendly": {
            "label": "Stroller Friendly",
            "description": "Smooth enough for strollers and pushchairs",
        },
        "paved_surface": {
            "label": "Paved Surface",
            "description": "Asphalt, concrete, or brick surface",
        },
        "gentle_slope": {
            "label": "Gentle Slope",
            "description": "Grade does not exceed 5% (1:20)",
        },
        "handrails": {
            "label": "Handrails",
            "description": "Handrails available on slopes and stairs",
        },
        "rest_areas": {
            "label": "Rest Areas",
            "description": "Benches or rest stops along the trail",
        },
        "accessible_parking": {
            "label": "Accessible Parking",
            "description": "Designated accessible parking spaces nearby",
        },
        "accessible_restrooms": {
            "label": "Accessible Restrooms",
            "description": "ADA-compliant restroom facilities",
        },
        "tactile_indicators": {
            "label": "Tactile Indicators",
            "description": "Tactile ground surface indicators for visually impaired",
        },
        "audio_guides": {
            "label": "Audio Guides",
            "description": "Audio descriptions or guide available",
        },
        "wide_path": {
            "label": "Wide Path",
            "description": "Path width of at least 1.5 meters (5 feet)",
        },
        "level_terrain": {
            "label": "Level Terrain",
            "description": "Flat terrain with minimal elevation change",
        },
        "shade_available": {
            "label": "Shade Available",
            "description": "Tree cover or structures providing shade",
        },
        "water_fountain": {
            "label": "Water Fountain",
            "description": "Accessible drinking water available",
        },
    }
    ACCESSIBILITY_FEATURES = list(ACCESSIBILITY_INFO.keys())


class FormatConfig:
    """Display formatting thresholds for recording statistics."""

    KM_THRESHOLD_M = 1000  # Below this distances are shown in whole meters
    KM_DECIMALS = 1
