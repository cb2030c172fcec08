"""Core foundation classes for trail statistics.

This module provides the mathematical backbone for trail recording:
- GeoCalculator: Geodesic calculations (distances, elevation deltas, track length)
- GeospatialAccumulator: Running distance/elevation-gain totals for a sample stream
- Clock: Injectable time source (utc_now is the default)
"""

from trail_recorder.core.accumulator import GeospatialAccumulator
from trail_recorder.core.clock import Clock, utc_now
from trail_recorder.core.geo_calculator import GeoCalculator

__all__ = [
    # Geo calculator
    "GeoCalculator",
    # Accumulator
    "GeospatialAccumulator",
    # Clock
    "Clock",
    "utc_now",
]
