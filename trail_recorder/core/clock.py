"""Clock abstraction for time-dependent session state.

The session never reads global time directly; it calls an injected clock so
elapsed time can be computed for any instant and tests can control time.
"""

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware current UTC time."""
    return datetime.now(timezone.utc)
