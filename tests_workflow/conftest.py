"""Shared pytest fixtures for trail_recorder workflow tests.

Keep conftest.py minimal: workflow tests drive the real engine end to end,
only the clock and the location provider are replaced.

COORDINATE SYSTEM:
    Tests walk along the equator (lat=0) eastwards from lon=0, where
    0.001° of longitude ≈ 111.2 m.
"""

from datetime import datetime, timedelta, timezone

import pytest

from trail_recorder.location import (
    ErrorCallback,
    LocationError,
    LocationErrorCode,
    LocationOptions,
    LocationProvider,
    LocationSubscription,
    SampleCallback,
)
from trail_recorder.model.position_sample import PositionSample
from trail_recorder.session.state_machine import RecordingContext, RecordingStateMachine

T0 = datetime(2024, 9, 14, 9, 30, 0, tzinfo=timezone.utc)

SMAndCtx = tuple[RecordingStateMachine, RecordingContext]


class SteppingClock:
    """Clock the test advances explicitly."""

    def __init__(self) -> None:
        self.now = T0

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class ScriptedSubscription(LocationSubscription):
    def __init__(self) -> None:
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False


class ScriptedGPS(LocationProvider):
    """Provider whose watch delivers samples when the test calls walk_to()."""

    def __init__(self, clock: SteppingClock) -> None:
        self.clock = clock
        self._subscription: ScriptedSubscription | None = None
        self._on_sample: SampleCallback | None = None
        self._on_error: ErrorCallback | None = None
        self.last: PositionSample | None = None

    def request_permission(self) -> bool:
        return True

    def get_current_position(self, options: LocationOptions) -> PositionSample:
        if self.last is None:
            raise LocationError(LocationErrorCode.POSITION_UNAVAILABLE, "No fix yet")
        return self.last

    def watch_position(
        self,
        on_sample: SampleCallback,
        on_error: ErrorCallback,
        options: LocationOptions,
    ) -> LocationSubscription:
        self._on_sample = on_sample
        self._on_error = on_error
        self._subscription = ScriptedSubscription()
        return self._subscription

    def walk_to(self, lon: float, elevation: float | None, seconds: float = 10) -> PositionSample:
        """Advance the clock and deliver a fix at (0, lon) if a watch is active."""
        self.clock.advance(seconds=seconds)
        sample = PositionSample(latitude=0.0, longitude=lon, elevation=elevation, timestamp=self.clock())
        self.last = sample
        if self._subscription is not None and self._subscription.active and self._on_sample is not None:
            self._on_sample(sample)
        return sample


@pytest.fixture
def stepping_clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def gps(stepping_clock: SteppingClock) -> ScriptedGPS:
    return ScriptedGPS(clock=stepping_clock)


@pytest.fixture
def sm_and_ctx() -> SMAndCtx:
    """Fresh state machine in Idle, without the logging listener."""
    return RecordingStateMachine.create(add_logger=False)
