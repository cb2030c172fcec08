"""Geodesic calculations on Earth's surface.

Provides geographic helper functions for trail recording:
- Distance calculation (Haversine formula)
- Elevation delta between consecutive samples
- Vectorized track length for whole coordinate sequences

All calculations use a spherical Earth approximation (R = 6,371 km).
"""

from math import atan2, cos, radians, sin, sqrt
from typing import Protocol, Sequence

import numpy as np

from trail_recorder.constants import GeoConfig

# Earth's radius in meters (spherical approximation)
EARTH_RADIUS_M = GeoConfig.EARTH_RADIUS_M


class HasLatLon(Protocol):
    latitude: float
    longitude: float


class HasElevation(Protocol):
    elevation: float | None


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    Coordinates are in decimal degrees (WGS84).
    Distances and elevations are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters.
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        # Rounding can push a past 1 for near-antipodal points
        a = min(1.0, a)
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def distance_between_m(a: HasLatLon, b: HasLatLon) -> float:
        """Haversine distance between two objects exposing latitude/longitude."""
        return GeoCalculator.haversine_distance_m(
            lat1=a.latitude,
            lon1=a.longitude,
            lat2=b.latitude,
            lon2=b.longitude,
        )

    @staticmethod
    def elevation_delta_m(prev: HasElevation, curr: HasElevation) -> float | None:
        """Elevation change from prev to curr.

        Returns:
            curr.elevation - prev.elevation, or None when either elevation is missing.
        """
        if prev.elevation is None or curr.elevation is None:
            return None
        return curr.elevation - prev.elevation

    @staticmethod
    def path_length_m(latitudes: Sequence[float], longitudes: Sequence[float]) -> float:
        """Sum of consecutive haversine distances along a coordinate sequence.

        Vectorized with numpy; intended for measuring a complete track at once.

        Args:
            latitudes: Latitudes in arrival order (decimal degrees)
            longitudes: Longitudes in arrival order (decimal degrees)

        Returns:
            Total length in meters (0.0 for fewer than two points).
        """
        if len(latitudes) != len(longitudes):
            raise ValueError(f"Got {len(latitudes)} latitudes but {len(longitudes)} longitudes")
        if len(latitudes) < 2:
            return 0.0

        lat = np.radians(np.asarray(latitudes, dtype=float))
        lon = np.radians(np.asarray(longitudes, dtype=float))
        dlat = np.diff(lat)
        dlon = np.diff(lon)
        a = np.sin(dlat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(dlon / 2) ** 2
        a = np.clip(a, 0.0, 1.0)
        segments = EARTH_RADIUS_M * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
        return float(segments.sum())
