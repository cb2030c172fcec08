"""PositionSample - The fundamental geometry atom for trail recording.

A PositionSample is a single GPS fix delivered by the location collaborator:
latitude/longitude, optional elevation, and the instant it was taken.

Used by:
- GeospatialAccumulator (distance and elevation gain)
- RecordingSession (coordinate log)
- Trail (finalized geometry)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import numpy as np

from trail_recorder.core.geo_calculator import GeoCalculator


@dataclass(frozen=True)
class PositionSample:
    """A GPS position with optional elevation and a timestamp.

    Attributes:
        latitude: Latitude in decimal degrees (WGS84)
        longitude: Longitude in decimal degrees (WGS84)
        elevation: Altitude in meters, None when the receiver reports none
        timestamp: Instant the fix was taken (timezone-aware)

    Example:
        sample = PositionSample(latitude=46.985, longitude=10.295, elevation=2400.0, timestamp=now)
    """

    latitude: float
    longitude: float
    elevation: float | None
    timestamp: datetime

    def __post_init__(self) -> None:
        """Validate coordinates and normalize a NaN elevation to None."""
        if not (np.isfinite(self.latitude) and np.isfinite(self.longitude)):
            raise ValueError(f"PositionSample needs finite coordinates, got ({self.latitude}, {self.longitude})")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude {self.latitude} outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude {self.longitude} outside [-180, 180]")
        if self.timestamp.tzinfo is None or self.timestamp.utcoffset() is None:
            raise ValueError(f"PositionSample needs a timezone-aware timestamp, got {self.timestamp.isoformat()}")
        if self.elevation is not None and np.isnan(self.elevation):
            # Frozen dataclass: bypass __setattr__ for normalization
            object.__setattr__(self, "elevation", None)

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.latitude, self.longitude)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON order."""
        return (self.longitude, self.latitude)

    @property
    def has_elevation(self) -> bool:
        return self.elevation is not None

    def distance_to(self, other: "PositionSample") -> float:
        """Calculate haversine distance to another sample in meters."""
        return GeoCalculator.distance_between_m(a=self, b=other)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible dict (ISO 8601 timestamp)."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "elevation": self.elevation,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PositionSample":
        """Create PositionSample from dictionary."""
        return cls(
            latitude=data["latitude"],
            longitude=data["longitude"],
            elevation=data.get("elevation"),
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )

    def __repr__(self) -> str:
        elev = f"{self.elevation:.1f}m" if self.elevation is not None else "n/a"
        return f"PositionSample(lat={self.latitude:.5f}, lon={self.longitude:.5f}, elev={elev})"
