"""Tests for TrailFinalizer.

Tests: TrailFinalizer.finalize, estimated_duration_minutes
Focus: Refusals leave no trail, statistics copied verbatim, trimming and coercion

Note: Fixtures are defined in conftest.py (clock, session, finalizer, hill_track).
"""

from typing import TYPE_CHECKING

import pytest

from trail_recorder.finalizer import TrailFinalizer, estimated_duration_minutes
from trail_recorder.model.accessibility import AccessibilityFeature, DifficultyLevel, SurfaceType
from trail_recorder.model.message import (
    SessionStillActiveMessage,
    TrailNameRequiredMessage,
    TrailValidationError,
    UnknownOptionMessage,
)
from trail_recorder.model.position_sample import PositionSample
from trail_recorder.model.trail import TrailMetadata
from trail_recorder.model.waypoint import WaypointDraft, WaypointType
from trail_recorder.session.recording_session import RecordingSession

if TYPE_CHECKING:
    from conftest import FakeClock


LOOP = TrailMetadata(name="Loop", difficulty="easy", surface_type="paved")


@pytest.fixture
def stopped_session(session: RecordingSession, clock: "FakeClock", hill_track: list[PositionSample]) -> RecordingSession:
    """Session that recorded hill_track with one waypoint over 125 s, then stopped."""
    session.start()
    for sample in hill_track:
        session.add_coordinate(sample=sample)
    session.add_waypoint(draft=WaypointDraft(type=WaypointType.REST_AREA, latitude=0.0, longitude=0.002))
    clock.advance(seconds=125)
    session.stop()
    return session


class TestEstimatedDuration:
    """estimated_duration_minutes - rounds partial minutes up."""

    @pytest.mark.parametrize(
        "seconds, minutes",
        [(0, 0), (1, 1), (59, 1), (60, 1), (61, 2), (125, 3), (3600, 60)],
    )
    def test_ceiling(self, seconds: int, minutes: int) -> None:
        assert estimated_duration_minutes(elapsed_seconds=seconds) == minutes


class TestFinalizeSuccess:
    """TrailFinalizer.finalize - valid metadata on a stopped session."""

    def test_statistics_copied_exactly(
        self, finalizer: TrailFinalizer, stopped_session: RecordingSession, clock: "FakeClock"
    ) -> None:
        snapshot = stopped_session.snapshot()
        trail = finalizer.finalize(session=snapshot, metadata=LOOP)

        assert trail.name == "Loop"
        assert trail.difficulty is DifficultyLevel.EASY
        assert trail.surface_type is SurfaceType.PAVED
        assert trail.distance_m == snapshot.distance_m
        assert trail.elevation_gain_m == snapshot.elevation_gain_m
        assert trail.coordinates == snapshot.coordinates
        assert trail.waypoints == snapshot.waypoints
        assert trail.estimated_duration_minutes == 3
        assert trail.created_at == trail.updated_at == clock()
        assert trail.is_published is False
        assert trail.id

    def test_accepts_live_session(self, finalizer: TrailFinalizer, stopped_session: RecordingSession) -> None:
        """A RecordingSession is snapshotted before finalizing."""
        trail = finalizer.finalize(session=stopped_session, metadata=LOOP)
        assert len(trail.coordinates) == 5
        assert trail.waypoint_count == 1

    def test_each_trail_gets_fresh_id(self, finalizer: TrailFinalizer, stopped_session: RecordingSession) -> None:
        first = finalizer.finalize(session=stopped_session, metadata=LOOP)
        second = finalizer.finalize(session=stopped_session, metadata=LOOP)
        assert first.id != second.id

    def test_name_and_description_trimmed(self, finalizer: TrailFinalizer, stopped_session: RecordingSession) -> None:
        metadata = TrailMetadata(
            name="  Lakeside Loop \n",
            description="   ",
            difficulty=DifficultyLevel.MODERATE,
            surface_type=SurfaceType.BOARDWALK,
        )
        trail = finalizer.finalize(session=stopped_session, metadata=metadata)
        assert trail.name == "Lakeside Loop"
        assert trail.description is None

    def test_features_and_optional_fields(self, finalizer: TrailFinalizer, stopped_session: RecordingSession) -> None:
        metadata = TrailMetadata(
            name="Loop",
            description=" Flat and shaded. ",
            difficulty="easy",
            surface_type="paved",
            accessibility_features=(f for f in ["wide_path", AccessibilityFeature.HANDRAILS, "wide_path"]),
            cover_photo_uri="file://cover.jpg",
            author_id="user-7",
        )
        trail = finalizer.finalize(session=stopped_session, metadata=metadata)
        assert trail.description == "Flat and shaded."
        assert trail.accessibility_features == frozenset({AccessibilityFeature.WIDE_PATH, AccessibilityFeature.HANDRAILS})
        assert trail.cover_photo_uri == "file://cover.jpg"
        assert trail.author_id == "user-7"

    def test_missing_features_mean_none(self, finalizer: TrailFinalizer, stopped_session: RecordingSession) -> None:
        metadata = TrailMetadata(name="Loop", difficulty="easy", surface_type="paved", accessibility_features=None)
        trail = finalizer.finalize(session=stopped_session, metadata=metadata)
        assert trail.accessibility_features == frozenset()

    def test_single_feature_string(self, finalizer: TrailFinalizer, stopped_session: RecordingSession) -> None:
        metadata = TrailMetadata(name="Loop", difficulty="easy", surface_type="paved", accessibility_features="wide_path")
        assert metadata.accessibility_features == ("wide_path",)
        trail = finalizer.finalize(session=stopped_session, metadata=metadata)
        assert trail.accessibility_features == frozenset({AccessibilityFeature.WIDE_PATH})

    def test_empty_session_still_finalizes(self, finalizer: TrailFinalizer, session: RecordingSession) -> None:
        """A session that never recorded yields an empty trail."""
        trail = finalizer.finalize(session=session, metadata=LOOP)
        assert trail.coordinates == ()
        assert trail.distance_m == 0.0
        assert trail.estimated_duration_minutes == 0


class TestFinalizeRefusals:
    """TrailFinalizer.finalize - refusals produce no trail."""

    def test_blank_name_refused(self, finalizer: TrailFinalizer, stopped_session: RecordingSession) -> None:
        metadata = TrailMetadata(name="   ", difficulty="easy", surface_type="paved")
        with pytest.raises(TrailValidationError) as exc_info:
            finalizer.finalize(session=stopped_session, metadata=metadata)
        assert isinstance(exc_info.value.message, TrailNameRequiredMessage)

    @pytest.mark.parametrize(
        "metadata",
        [
            TrailMetadata(name="Loop", surface_type="paved"),
            TrailMetadata(name="Loop", difficulty="easy"),
            TrailMetadata(name="Loop", difficulty="extreme", surface_type="paved"),
            TrailMetadata(name="Loop", difficulty="easy", surface_type="paved", accessibility_features=("jetpack",)),
        ],
    )
    def test_incomplete_or_unknown_options_refused(
        self, finalizer: TrailFinalizer, stopped_session: RecordingSession, metadata: TrailMetadata
    ) -> None:
        with pytest.raises(TrailValidationError):
            finalizer.finalize(session=stopped_session, metadata=metadata)

    def test_unknown_feature_reported(self, finalizer: TrailFinalizer, stopped_session: RecordingSession) -> None:
        metadata = TrailMetadata(name="Loop", difficulty="easy", surface_type="paved", accessibility_features=["jetpack"])
        with pytest.raises(TrailValidationError) as exc_info:
            finalizer.finalize(session=stopped_session, metadata=metadata)
        assert isinstance(exc_info.value.message, UnknownOptionMessage)
        assert exc_info.value.message.value == "jetpack"

    @pytest.mark.parametrize("pause", [False, True])
    def test_active_session_refused(
        self, finalizer: TrailFinalizer, recording_session: RecordingSession, pause: bool
    ) -> None:
        if pause:
            recording_session.pause()
        with pytest.raises(TrailValidationError) as exc_info:
            finalizer.finalize(session=recording_session, metadata=LOOP)
        assert isinstance(exc_info.value.message, SessionStillActiveMessage)

    def test_refusal_leaves_session_untouched(
        self, finalizer: TrailFinalizer, stopped_session: RecordingSession
    ) -> None:
        before = stopped_session.snapshot()
        with pytest.raises(TrailValidationError):
            finalizer.finalize(session=stopped_session, metadata=TrailMetadata(name=""))
        assert stopped_session.snapshot() == before
