"""RecordingSession - Thread-safe facade over the recording state machine.

This is the object the location and display collaborators talk to:
- User commands (start/pause/resume/stop/reset, waypoints) arrive from the UI
- Position samples arrive from the location collaborator via add_coordinate()
- The display reads snapshot() at its own refresh cadence

Every public operation runs under one lock, so a stop() racing an
add_coordinate() either includes the sample and then stops, or stops first
and drops the late sample.

Invalid commands (e.g. pause() while idle) are logged no-ops.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from statemachine.exceptions import TransitionNotAllowed

from trail_recorder.constants import RecordingConfig
from trail_recorder.core.clock import Clock, utc_now
from trail_recorder.model.position_sample import PositionSample
from trail_recorder.model.waypoint import Waypoint, WaypointDraft
from trail_recorder.model.waypoint_store import WaypointStore
from trail_recorder.session.state_machine import RecordingPhase, RecordingStateMachine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time view of a recording session for display and finalization.

    Attributes:
        phase: Current phase
        coordinates: Position samples in arrival order
        waypoints: Waypoints in insertion order
        distance_m: Running distance total
        elevation_gain_m: Running elevation gain total
        elapsed_seconds: Active recording time, excluding pauses
        captured_at: Instant the snapshot was taken
    """

    phase: RecordingPhase
    coordinates: tuple[PositionSample, ...]
    waypoints: tuple[Waypoint, ...]
    distance_m: float
    elevation_gain_m: float
    elapsed_seconds: int
    captured_at: datetime

    @property
    def is_active(self) -> bool:
        """True while recording or paused."""
        return self.phase is not RecordingPhase.IDLE

    @property
    def has_data(self) -> bool:
        return bool(self.coordinates) or bool(self.waypoints)


class RecordingSession:
    """Single active trail recording.

    Args:
        clock: Time source (defaults to UTC system time)
        reject_out_of_order: Drop samples whose timestamp precedes the last
            accepted sample instead of applying them in delivery order
        log_transitions: Attach TransitionLogger to the state machine

    Example:
        session = RecordingSession()
        session.start()
        session.add_coordinate(sample)
        session.pause()
        session.resume()
        session.stop()
        snapshot = session.snapshot()
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        reject_out_of_order: bool = RecordingConfig.REJECT_OUT_OF_ORDER_SAMPLES,
        log_transitions: bool = True,
    ) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        self.reject_out_of_order = reject_out_of_order

        self._sm, self._context = RecordingStateMachine.create(
            add_logger=log_transitions,
            waypoints=WaypointStore(clock=clock),
        )

    # =========================================================================
    # Commands
    # =========================================================================

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Args:
            event: Transition event name
            **kwargs: Arguments for transition actions (`now` is added)

        Returns:
            True if transition succeeded, False if not allowed from the current phase.
        """
        with self._lock:
            try:
                self._sm.send(event, now=self._clock(), **kwargs)
                return True
            except TransitionNotAllowed:
                logger.warning(f"Transition '{event}' not allowed from {self._sm.get_state_name()}")
                return False

    def start(self) -> bool:
        """Idle -> Recording. Clears all data from the previous session."""
        return self.try_transition("start_recording")

    def pause(self) -> bool:
        """Recording -> Paused."""
        return self.try_transition("pause_recording")

    def resume(self) -> bool:
        """Paused -> Recording."""
        return self.try_transition("resume_recording")

    def stop(self) -> bool:
        """Recording/Paused -> Idle. Recorded data stays readable."""
        return self.try_transition("stop_recording")

    def reset(self) -> None:
        """Discard all state and return to Idle (always allowed)."""
        self.try_transition("reset_session")

    def add_coordinate(self, sample: PositionSample) -> bool:
        """Append a sample while recording; dropped in any other phase.

        Returns:
            True if the sample was applied.
        """
        with self._lock:
            if not self._sm.is_recording:
                logger.debug(f"Dropped sample while {self._sm.get_state_name()}: {sample!r}")
                return False

            last = self._context.accumulator.last_sample
            if last is not None and sample.timestamp < last.timestamp:
                if self.reject_out_of_order:
                    logger.warning(f"Rejected out-of-order sample at {sample.timestamp.isoformat()}")
                    return False
                logger.warning(
                    f"Sample at {sample.timestamp.isoformat()} precedes previous sample at "
                    f"{last.timestamp.isoformat()}; applying in delivery order"
                )

            self._context.record(sample=sample)
            return True

    def add_waypoint(self, draft: WaypointDraft) -> Waypoint | None:
        """Add a waypoint while recording or paused.

        Returns:
            The created Waypoint, or None when the session is idle.
        """
        with self._lock:
            if self._sm.is_idle:
                logger.warning("Waypoint ignored: no active recording")
                return None
            return self._context.waypoints.add(draft=draft)

    def delete_waypoint(self, waypoint_id: str) -> bool:
        """Remove a waypoint in any phase. Unknown ids are a no-op."""
        with self._lock:
            return self._context.waypoints.remove(waypoint_id=waypoint_id)

    # =========================================================================
    # Read Accessors
    # =========================================================================

    @property
    def phase(self) -> RecordingPhase:
        with self._lock:
            return self._sm.phase

    @property
    def is_idle(self) -> bool:
        return self.phase is RecordingPhase.IDLE

    @property
    def is_recording(self) -> bool:
        return self.phase is RecordingPhase.RECORDING

    @property
    def is_paused(self) -> bool:
        return self.phase is RecordingPhase.PAUSED

    @property
    def is_active(self) -> bool:
        return not self.is_idle

    @property
    def coordinates(self) -> tuple[PositionSample, ...]:
        with self._lock:
            return tuple(self._context.coordinates)

    @property
    def waypoints(self) -> list[Waypoint]:
        with self._lock:
            return self._context.waypoints.list()

    @property
    def distance_m(self) -> float:
        with self._lock:
            return self._context.accumulator.distance_m

    @property
    def elevation_gain_m(self) -> float:
        with self._lock:
            return self._context.accumulator.elevation_gain_m

    @property
    def elapsed_seconds(self) -> int:
        """Elapsed active recording time as of now."""
        return self.elapsed_seconds_at(now=self._clock())

    def elapsed_seconds_at(self, now: datetime) -> int:
        """Elapsed active recording time as of an arbitrary instant."""
        with self._lock:
            return self._context.timing.elapsed_seconds_at(now=now)

    def available_actions(self) -> list[str]:
        """Events the UI may offer in the current phase."""
        with self._lock:
            return self._sm.get_available_actions()

    def snapshot(self) -> SessionSnapshot:
        """Consistent point-in-time copy of the whole session state."""
        with self._lock:
            now = self._clock()
            return SessionSnapshot(
                phase=self._sm.phase,
                coordinates=tuple(self._context.coordinates),
                waypoints=tuple(self._context.waypoints.list()),
                distance_m=self._context.accumulator.distance_m,
                elevation_gain_m=self._context.accumulator.elevation_gain_m,
                elapsed_seconds=self._context.timing.elapsed_seconds_at(now=now),
                captured_at=now,
            )

    def __repr__(self) -> str:
        return f"RecordingSession(phase={self._sm.phase.value}, context={self._context!r})"
