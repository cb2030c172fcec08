"""TrailFinalizer - Turns a stopped recording session into an immutable Trail.

Combines the session's coordinates, waypoints and statistics with the
user's TrailMetadata. Statistics are copied verbatim; nothing is recomputed.
Invalid metadata (or a session that is still active) is refused with
TrailValidationError and no Trail is produced.
"""

import logging
import math
import uuid

from trail_recorder.core.clock import Clock, utc_now
from trail_recorder.model.accessibility import AccessibilityFeature, DifficultyLevel, SurfaceType
from trail_recorder.model.message import TrailValidationError
from trail_recorder.model.trail import Trail, TrailMetadata
from trail_recorder.session.recording_session import RecordingSession, SessionSnapshot
from trail_recorder.validators import validate_session_stopped, validate_trail_metadata

logger = logging.getLogger(__name__)


def estimated_duration_minutes(elapsed_seconds: int) -> int:
    """Whole minutes needed to cover the elapsed time (rounded up)."""
    return math.ceil(elapsed_seconds / 60)


class TrailFinalizer:
    """Builds Trail records from finished sessions.

    Example:
        finalizer = TrailFinalizer()
        session.stop()
        trail = finalizer.finalize(
            session=session.snapshot(),
            metadata=TrailMetadata(name="Loop", difficulty="easy", surface_type="paved"),
        )
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def finalize(self, session: SessionSnapshot | RecordingSession, metadata: TrailMetadata) -> Trail:
        """Create a Trail from a stopped session and validated metadata.

        Args:
            session: Snapshot of a stopped session (a RecordingSession is snapshotted first)
            metadata: User-entered descriptive data

        Returns:
            New Trail with fresh id, created_at == updated_at == now, is_published False.

        Raises:
            TrailValidationError: If metadata is invalid or the session is still active.
        """
        snapshot = session.snapshot() if isinstance(session, RecordingSession) else session

        message = validate_session_stopped(phase=snapshot.phase) or validate_trail_metadata(metadata=metadata)
        if message is not None:
            message.log()
            raise TrailValidationError(message=message)

        now = self._clock()
        description = metadata.description.strip() if metadata.description else ""

        trail = Trail(
            id=str(uuid.uuid4()),
            name=metadata.name.strip(),
            description=description or None,
            difficulty=DifficultyLevel(metadata.difficulty),
            surface_type=SurfaceType(metadata.surface_type),
            accessibility_features=frozenset(AccessibilityFeature(f) for f in metadata.accessibility_features),
            coordinates=snapshot.coordinates,
            waypoints=snapshot.waypoints,
            distance_m=snapshot.distance_m,
            elevation_gain_m=snapshot.elevation_gain_m,
            estimated_duration_minutes=estimated_duration_minutes(elapsed_seconds=snapshot.elapsed_seconds),
            created_at=now,
            updated_at=now,
            is_published=False,
            author_id=metadata.author_id,
            cover_photo_uri=metadata.cover_photo_uri,
        )
        logger.info(
            f"Trail finalized: {trail.name}, {len(trail.coordinates)} points, "
            f"{trail.waypoint_count} waypoints, distance={trail.distance_m:.0f}m"
        )
        return trail
