"""Recording session engine.

- RecordingStateMachine: python-statemachine lifecycle (Idle/Recording/Paused)
- RecordingContext: Model holding coordinates, totals, waypoints and timing
- RecordingSession: Thread-safe facade used by the collaborators
- SessionSnapshot: Point-in-time session state
- SessionTiming: Pure elapsed-time computation
"""

from trail_recorder.session.recording_session import RecordingSession, SessionSnapshot
from trail_recorder.session.state_machine import (
    RecordingContext,
    RecordingPhase,
    RecordingStateMachine,
    TransitionLogger,
)
from trail_recorder.session.timing import SessionTiming

__all__ = [
    "RecordingSession",
    "SessionSnapshot",
    "RecordingStateMachine",
    "RecordingContext",
    "RecordingPhase",
    "TransitionLogger",
    "SessionTiming",
]
