"""Location - Contract for the position-providing collaborator.

The engine does not talk to GPS hardware. A platform adapter implements
LocationProvider; LocationTracker binds it to a RecordingSession:

1. sync() subscribes to the provider while the session is recording and
   cancels the subscription in any other phase
2. Delivered samples become current_location and go to add_coordinate()
3. Errors (permission denied, timeout) are kept in last_error and logged;
   they never change the session phase

Retries for location acquisition are the provider's concern.
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from trail_recorder.constants import LocationConfig
from trail_recorder.model.position_sample import PositionSample
from trail_recorder.session.recording_session import RecordingSession

logger = logging.getLogger(__name__)


class LocationErrorCode(Enum):
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"


class LocationError(Exception):
    """Failure reported by a location provider.

    Attributes:
        code: Failure category
    """

    def __init__(self, code: LocationErrorCode, message: str = "") -> None:
        super().__init__(message or code.value)
        self.code = code


@dataclass(frozen=True)
class LocationOptions:
    """Filtering and accuracy settings for position updates.

    Attributes:
        distance_filter_m: Minimum movement before a new sample is delivered
        interval_ms: Minimum time between delivered samples
        timeout_ms: Timeout for a one-shot position lookup
        high_accuracy: Request the most accurate fix available
    """

    distance_filter_m: float = LocationConfig.DISTANCE_FILTER_M
    interval_ms: int = LocationConfig.INTERVAL_MS
    timeout_ms: int = LocationConfig.TIMEOUT_MS
    high_accuracy: bool = LocationConfig.HIGH_ACCURACY


SampleCallback = Callable[[PositionSample], None]
ErrorCallback = Callable[[LocationError], None]


class LocationSubscription(ABC):
    """Handle for an active position watch."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True until cancel() is called."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop delivering samples. Calling it again has no effect."""


class LocationProvider(ABC):
    """Abstract source of position samples."""

    @abstractmethod
    def request_permission(self) -> bool:
        """Ask for location access. Returns True if granted."""

    @abstractmethod
    def get_current_position(self, options: LocationOptions) -> PositionSample:
        """One-shot position lookup.

        Raises:
            LocationError: If no position could be obtained.
        """

    @abstractmethod
    def watch_position(
        self,
        on_sample: SampleCallback,
        on_error: ErrorCallback,
        options: LocationOptions,
    ) -> LocationSubscription:
        """Start delivering filtered samples until the subscription is cancelled."""


class LocationTracker:
    """Forwards provider samples into a RecordingSession while it records.

    Call sync() after every session command so the watch follows the phase.

    Example:
        tracker = LocationTracker(provider=gps, session=session)
        session.start()
        tracker.sync()
        ...
        session.stop()
        tracker.sync()  # cancels the watch
    """

    def __init__(
        self,
        provider: LocationProvider,
        session: RecordingSession,
        options: LocationOptions | None = None,
    ) -> None:
        self.provider = provider
        self.session = session
        self.options = options or LocationOptions()
        self.current_location: PositionSample | None = None
        self.last_error: LocationError | None = None
        self._subscription: LocationSubscription | None = None
        self._lock = threading.Lock()

    @property
    def is_tracking(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def request_permission(self) -> bool:
        granted = self.provider.request_permission()
        if not granted:
            self._on_error(LocationError(LocationErrorCode.PERMISSION_DENIED, "Location permission denied"))
        return granted

    def sync(self) -> bool:
        """Subscribe while recording, unsubscribe otherwise.

        Returns:
            True if a watch is active after the call.
        """
        with self._lock:
            should_track = self.session.is_recording
            if should_track and not self.is_tracking:
                self._subscription = self.provider.watch_position(
                    on_sample=self._on_sample,
                    on_error=self._on_error,
                    options=self.options,
                )
                logger.info(
                    f"Location tracking started (filter={self.options.distance_filter_m}m, "
                    f"interval={self.options.interval_ms}ms)"
                )
            elif not should_track and self._subscription is not None:
                self._cancel_subscription()
            return self.is_tracking

    def locate_once(self) -> PositionSample | None:
        """One-shot lookup, e.g. to place a waypoint at the current position.

        Returns:
            The sample, or None if the provider failed (see last_error).
        """
        try:
            sample = self.provider.get_current_position(options=self.options)
        except LocationError as e:
            self._on_error(e)
            return None
        self.current_location = sample
        self.last_error = None
        return sample

    def close(self) -> None:
        with self._lock:
            self._cancel_subscription()

    def _cancel_subscription(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
            logger.info("Location tracking stopped")

    def _on_sample(self, sample: PositionSample) -> None:
        self.current_location = sample
        self.last_error = None
        self.session.add_coordinate(sample=sample)

    def _on_error(self, error: LocationError) -> None:
        self.last_error = error
        logger.warning(f"Location error ({error.code.value}): {error}")
