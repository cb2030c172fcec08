"""GeospatialAccumulator - Running distance and elevation gain for a sample stream.

Folds position samples into totals one at a time, without re-scanning history.
The first sample of an epoch only seeds the "previous" position.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trail_recorder.core.geo_calculator import GeoCalculator

if TYPE_CHECKING:
    from trail_recorder.model.position_sample import PositionSample


class GeospatialAccumulator:
    """Incremental distance and elevation-gain totals.

    Invariants:
        distance_m == sum of haversine distances between consecutive samples
        elevation_gain_m == sum of positive elevation deltas where both samples
        have an elevation

    Example:
        acc = GeospatialAccumulator()
        for sample in samples:
            acc.ingest(sample)
        print(acc.distance_m, acc.elevation_gain_m)
    """

    def __init__(self) -> None:
        self._distance_m = 0.0
        self._elevation_gain_m = 0.0
        self._last_sample: PositionSample | None = None
        self._sample_count = 0

    @property
    def distance_m(self) -> float:
        return self._distance_m

    @property
    def elevation_gain_m(self) -> float:
        return self._elevation_gain_m

    @property
    def last_sample(self) -> PositionSample | None:
        return self._last_sample

    @property
    def sample_count(self) -> int:
        return self._sample_count

    def reset(self) -> None:
        """Clear totals and the previous sample, starting a new epoch."""
        self._distance_m = 0.0
        self._elevation_gain_m = 0.0
        self._last_sample = None
        self._sample_count = 0

    def ingest(self, sample: PositionSample) -> float:
        """Fold one sample into the running totals.

        Args:
            sample: Next position in arrival order

        Returns:
            Distance in meters added by this sample (0.0 for the first one).
        """
        prev = self._last_sample
        added_m = 0.0

        if prev is not None:
            added_m = GeoCalculator.distance_between_m(a=prev, b=sample)
            self._distance_m += added_m

            delta = GeoCalculator.elevation_delta_m(prev=prev, curr=sample)
            if delta is not None and delta > 0:
                self._elevation_gain_m += delta

        self._last_sample = sample
        self._sample_count += 1
        return added_m

    def __repr__(self) -> str:
        return (
            f"GeospatialAccumulator(samples={self._sample_count}, "
            f"distance={self._distance_m:.1f}m, gain={self._elevation_gain_m:.1f}m)"
        )
