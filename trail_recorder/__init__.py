"""Trail Recorder - Record accessible trails from GPS samples.

Records a physical path from a stream of position samples, lets the user
annotate it with waypoints, and finalizes it into a Trail with distance,
elevation gain, duration and accessibility metadata.

Modules:
    core: Foundation classes (geo calculations, running totals, clock)
    model: Data structures (PositionSample, Waypoint, WaypointStore, Trail)
    session: Recording state machine and thread-safe session facade
    finalizer: Trail assembly and validation
    location: Contract for the location-providing collaborator
    formatting: Display strings for live statistics

Example:
    from trail_recorder import RecordingSession, TrailFinalizer
    from trail_recorder.model import TrailMetadata
"""

from trail_recorder.finalizer import TrailFinalizer
from trail_recorder.model import TrailMetadata
from trail_recorder.session import RecordingPhase, RecordingSession, SessionSnapshot

__all__ = [
    "RecordingSession",
    "RecordingPhase",
    "SessionSnapshot",
    "TrailFinalizer",
    "TrailMetadata",
]
