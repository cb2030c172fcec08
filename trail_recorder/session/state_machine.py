"""State machine for the trail recording lifecycle.

Uses python-statemachine for robust state management with:
- Clear state definitions
- Explicit event-driven transitions
- Transition actions (before_* hooks) that update the shared context
- A listener for logging transitions

States (3 states):
    IDLE: Initial and terminal. After stop, recorded data stays readable.
    RECORDING: Samples are accepted and elapsed time accrues.
    PAUSED: Samples are dropped and elapsed time is frozen.

Transitions:
    IDLE -> RECORDING: start_recording (clears all session data)
    RECORDING -> PAUSED: pause_recording
    PAUSED -> RECORDING: resume_recording (paused interval excluded from elapsed time)
    RECORDING/PAUSED -> IDLE: stop_recording (data kept until next start or reset)
    ANY -> IDLE: reset_session (discards all data)

Events fired from a state that does not allow them raise TransitionNotAllowed
here; RecordingSession.try_transition() turns them into logged no-ops.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from statemachine import State, StateMachine

from trail_recorder.core.accumulator import GeospatialAccumulator
from trail_recorder.model.position_sample import PositionSample
from trail_recorder.model.waypoint_store import WaypointStore
from trail_recorder.session.timing import SessionTiming

logger = logging.getLogger(__name__)


class RecordingPhase(Enum):
    """Phase of the recording state machine (values match state ids)."""

    IDLE = "idle"
    RECORDING = "recording"
    PAUSED = "paused"


@dataclass
class RecordingContext:
    """Shared context/model for the recording state machine.

    Holds everything a session accumulates between start and the next
    start/reset: the coordinate log, running totals, waypoints and timing.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model. It stores the current state value.
    """

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    coordinates: list[PositionSample] = field(default_factory=list)
    accumulator: GeospatialAccumulator = field(default_factory=GeospatialAccumulator)
    waypoints: WaypointStore = field(default_factory=WaypointStore)
    timing: SessionTiming = field(default_factory=SessionTiming)

    def clear(self) -> None:
        """Discard all recorded data (state value is left to the machine)."""
        self.coordinates = []
        self.accumulator.reset()
        self.waypoints.clear()
        self.timing.clear()

    def record(self, sample: PositionSample) -> float:
        """Append a sample to the log and fold it into the totals."""
        self.coordinates.append(sample)
        return self.accumulator.ingest(sample=sample)

    def __repr__(self) -> str:
        return (
            f"RecordingContext(state={self.state}, "
            f"coordinates={len(self.coordinates)}, "
            f"waypoints={len(self.waypoints)}, "
            f"distance={self.accumulator.distance_m:.1f}m)"
        )


class TransitionLogger:
    """Listener that logs every accepted state transition.

    Usage:
        sm = RecordingStateMachine(context=context)
        sm.add_listener(TransitionLogger())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")


class RecordingStateMachine(StateMachine):
    """State machine for the trail recording workflow.

    See module docstring for the transition table. Transition actions expect
    the current instant as `now` (supplied by RecordingSession from its clock).
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    idle = State("Idle", initial=True)
    recording = State("Recording")
    paused = State("Paused")

    # ==========================================================================
    # Transitions
    # ==========================================================================

    start_recording = idle.to(recording)
    pause_recording = recording.to(paused)
    resume_recording = paused.to(recording)
    stop_recording = recording.to(idle) | paused.to(idle)
    # Always available: abandon the session without finalizing
    reset_session = idle.to(idle) | recording.to(idle) | paused.to(idle)

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_recording(self) -> bool:
        return self.recording.is_active

    @property
    def is_paused(self) -> bool:
        return self.paused.is_active

    @property
    def phase(self) -> RecordingPhase:
        return RecordingPhase(self.model.state)

    # ==========================================================================
    # Transition Actions (before_* hooks)
    # ==========================================================================

    def before_start_recording(self, now: datetime) -> None:
        """Begin a new epoch: previous session data is discarded."""
        self.context.clear()
        self.context.timing.start(now=now)

    def before_pause_recording(self, now: datetime) -> None:
        self.context.timing.pause(now=now)

    def before_resume_recording(self, now: datetime) -> None:
        self.context.timing.resume(now=now)

    def before_stop_recording(self, now: datetime) -> None:
        self.context.timing.stop(now=now)

    def before_reset_session(self) -> None:
        self.context.clear()

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(self, context: RecordingContext | None = None, start_value: str | None = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or RecordingContext()
        super().__init__(model=model, start_value=start_value)

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    @property
    def context(self) -> RecordingContext:
        """Alias for model."""
        return self.model

    def get_state_name(self) -> str:
        return getattr(self, self.model.state).name

    def get_available_actions(self) -> list[str]:
        """Events allowed from the current state."""
        return [t.event for t in self.current_state.transitions]

    def __repr__(self) -> str:
        return f"RecordingStateMachine(state={self.get_state_name()}, model={self.context!r})"

    @staticmethod
    def create(add_logger: bool = True, **kwargs: Any) -> tuple["RecordingStateMachine", RecordingContext]:
        """Factory method to create state machine with context and optional logging listener.

        Args:
            add_logger: If True, adds TransitionLogger.
            **kwargs: Passed to RecordingContext (e.g. a WaypointStore with a custom clock)

        Returns:
            Tuple of (RecordingStateMachine, RecordingContext)
        """
        context = RecordingContext(**kwargs)
        sm = RecordingStateMachine(context=context)
        if add_logger:
            sm.add_listener(TransitionLogger())
        return sm, context
