"""Shared pytest fixtures for trail_recorder tests.

Provides FakeClock, FakeLocationProvider and reusable sample tracks.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Tests use coordinates on the equator (lat=0) near the prime meridian (lon~0)
    where the math is simple: 1 degree of longitude ≈ 111,195 meters on a
    6,371 km sphere. 0.001° ≈ 111.2 m.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from trail_recorder.finalizer import TrailFinalizer
from trail_recorder.location import (
    ErrorCallback,
    LocationError,
    LocationOptions,
    LocationProvider,
    LocationSubscription,
    SampleCallback,
)
from trail_recorder.model.position_sample import PositionSample
from trail_recorder.session.recording_session import RecordingSession

T0 = datetime(2024, 6, 1, 8, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# FAKE CLOCK
# =============================================================================


class FakeClock:
    """Manually advanced clock; call it to read the current instant."""

    def __init__(self, start: datetime = T0) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


# =============================================================================
# FAKE LOCATION PROVIDER
# =============================================================================


class FakeSubscription(LocationSubscription):
    def __init__(self) -> None:
        self._active = True
        self.cancel_count = 0

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self.cancel_count += 1
        self._active = False


class FakeLocationProvider(LocationProvider):
    """Location provider driven by the test.

    emit() delivers a sample to the active watch, fail() delivers an error.
    """

    def __init__(self, permission: bool = True, current: PositionSample | None = None) -> None:
        self.permission = permission
        self.current = current
        self.current_error: LocationError | None = None
        self.watch_options: LocationOptions | None = None
        self.watch_count = 0
        self._on_sample: SampleCallback | None = None
        self._on_error: ErrorCallback | None = None
        self.subscription: FakeSubscription | None = None

    def request_permission(self) -> bool:
        return self.permission

    def get_current_position(self, options: LocationOptions) -> PositionSample:
        if self.current_error is not None:
            raise self.current_error
        assert self.current is not None, "Test must set current or current_error"
        return self.current

    def watch_position(
        self,
        on_sample: SampleCallback,
        on_error: ErrorCallback,
        options: LocationOptions,
    ) -> LocationSubscription:
        self._on_sample = on_sample
        self._on_error = on_error
        self.watch_options = options
        self.watch_count += 1
        self.subscription = FakeSubscription()
        return self.subscription

    @property
    def watching(self) -> bool:
        return self.subscription is not None and self.subscription.active

    def emit(self, sample: PositionSample) -> None:
        if self.watching and self._on_sample is not None:
            self._on_sample(sample)

    def fail(self, error: LocationError) -> None:
        if self.watching and self._on_error is not None:
            self._on_error(error)


# =============================================================================
# SAMPLE FACTORIES
# =============================================================================


SampleFactory = Callable[..., PositionSample]


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at 2024-06-01 08:00 UTC."""
    return FakeClock()


@pytest.fixture
def make_sample(clock: FakeClock) -> SampleFactory:
    """Build a PositionSample stamped with the fake clock's current instant."""

    def _make(lon: float, lat: float = 0.0, elevation: float | None = None) -> PositionSample:
        return PositionSample(latitude=lat, longitude=lon, elevation=elevation, timestamp=clock())

    return _make


@pytest.fixture
def hill_track() -> list[PositionSample]:
    """Five samples heading east along the equator, 0.001° (~111 m) apart.

    Elevations [100, 95, 110, 108, 120]: gain = (110-95) + (120-108) = 27 m.
    Timestamps 10 s apart.
    """
    elevations = [100.0, 95.0, 110.0, 108.0, 120.0]
    return [
        PositionSample(
            latitude=0.0,
            longitude=0.001 * i,
            elevation=elev,
            timestamp=T0 + timedelta(seconds=10 * i),
        )
        for i, elev in enumerate(elevations)
    ]


# =============================================================================
# ENGINE FIXTURES
# =============================================================================


@pytest.fixture
def session(clock: FakeClock) -> RecordingSession:
    """Idle session reading time from the fake clock."""
    return RecordingSession(clock=clock)


@pytest.fixture
def recording_session(session: RecordingSession) -> RecordingSession:
    """Session already in Recording phase."""
    session.start()
    return session


@pytest.fixture
def finalizer(clock: FakeClock) -> TrailFinalizer:
    return TrailFinalizer(clock=clock)


@pytest.fixture
def provider() -> FakeLocationProvider:
    return FakeLocationProvider()
