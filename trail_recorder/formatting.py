"""Formatting - Display strings for live recording statistics.

The display collaborator reads a SessionSnapshot and renders distance,
duration and elevation gain as value/unit pairs.
"""

from dataclasses import dataclass

from trail_recorder.constants import FormatConfig
from trail_recorder.session.recording_session import SessionSnapshot


@dataclass(frozen=True)
class FormattedStat:
    """A display value with its unit, e.g. ("1.2", "km")."""

    value: str
    unit: str

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"


def format_distance(meters: float) -> FormattedStat:
    """Whole meters below 1 km, otherwise kilometers with one decimal."""
    if meters < FormatConfig.KM_THRESHOLD_M:
        return FormattedStat(value=str(round(meters)), unit="m")
    km = meters / 1000
    return FormattedStat(value=f"{km:.{FormatConfig.KM_DECIMALS}f}", unit="km")


def format_duration(seconds: int) -> FormattedStat:
    """m:ss below one hour, h:mm from one hour on."""
    hrs = seconds // 3600
    mins = (seconds % 3600) // 60
    secs = seconds % 60

    if hrs > 0:
        return FormattedStat(value=f"{hrs}:{mins:02d}", unit="hr")
    return FormattedStat(value=f"{mins}:{secs:02d}", unit="min")


def format_elevation(meters: float) -> FormattedStat:
    return FormattedStat(value=str(round(meters)), unit="m")


def format_snapshot(snapshot: SessionSnapshot) -> dict[str, FormattedStat]:
    """Formatted distance, time and elevation for a snapshot."""
    return {
        "distance": format_distance(meters=snapshot.distance_m),
        "time": format_duration(seconds=snapshot.elapsed_seconds),
        "elevation": format_elevation(meters=snapshot.elevation_gain_m),
    }
