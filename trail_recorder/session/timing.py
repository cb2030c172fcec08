"""SessionTiming - Elapsed recording time excluding paused intervals.

Timing is plain state (start instant, total paused time, open pause, stop
instant). Elapsed time is a pure function of that state and a given instant,
so it is correct regardless of how often (or whether) a display timer ticks.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

ONE_SECOND = timedelta(seconds=1)


@dataclass
class SessionTiming:
    """Timing state of one recording session.

    Attributes:
        started_at: Instant start() was accepted, None before the first start
        total_paused: Sum of completed paused intervals
        paused_at: Start of the current pause, None unless paused
        stopped_at: Instant stop() was accepted, None while active
    """

    started_at: datetime | None = None
    total_paused: timedelta = timedelta(0)
    paused_at: datetime | None = None
    stopped_at: datetime | None = None

    def clear(self) -> None:
        self.started_at = None
        self.total_paused = timedelta(0)
        self.paused_at = None
        self.stopped_at = None

    def start(self, now: datetime) -> None:
        self.clear()
        self.started_at = now

    def pause(self, now: datetime) -> None:
        self.paused_at = now

    def resume(self, now: datetime) -> None:
        if self.paused_at is not None:
            self.total_paused += max(now - self.paused_at, timedelta(0))
        self.paused_at = None

    def stop(self, now: datetime) -> None:
        """Freeze timing; an open pause is closed at the stop instant."""
        self.resume(now=now)
        self.stopped_at = now

    def elapsed_at(self, now: datetime) -> timedelta:
        """Active recording time as of `now`.

        The clock is effectively frozen at the stop instant once stopped and at
        the pause instant while paused.
        """
        if self.started_at is None:
            return timedelta(0)
        effective_now = self.stopped_at or self.paused_at or now
        elapsed = effective_now - self.started_at - self.total_paused
        return max(elapsed, timedelta(0))

    def elapsed_seconds_at(self, now: datetime) -> int:
        """Whole elapsed seconds as of `now` (floored)."""
        return self.elapsed_at(now=now) // ONE_SECOND
