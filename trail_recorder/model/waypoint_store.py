"""WaypointStore - Ordered, owned collection of waypoints for one session.

Assigns identity on add, keeps insertion order, and hands out copies so
callers can never change the stored collection through a returned list.
"""

import logging
import uuid
from collections.abc import Iterator

from trail_recorder.core.clock import Clock, utc_now
from trail_recorder.model.waypoint import Waypoint, WaypointDraft

logger = logging.getLogger(__name__)


class WaypointStore:
    """Insertion-ordered waypoints keyed by id.

    Example:
        store = WaypointStore()
        wp = store.add(draft=WaypointDraft(type=WaypointType.HAZARD, latitude=0.0, longitude=0.0))
        store.remove(waypoint_id=wp.id)
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._waypoints: dict[str, Waypoint] = {}

    @staticmethod
    def _next_waypoint_id() -> str:
        return str(uuid.uuid4())

    def add(self, draft: WaypointDraft) -> Waypoint:
        """Create a waypoint from draft data and append it.

        Returns:
            The created Waypoint with a fresh id and created_at = now.
        """
        waypoint_id = self._next_waypoint_id()
        while waypoint_id in self._waypoints:
            waypoint_id = self._next_waypoint_id()

        waypoint = Waypoint.from_draft(draft=draft, waypoint_id=waypoint_id, created_at=self._clock())
        self._waypoints[waypoint.id] = waypoint
        logger.info(f"Added waypoint {waypoint.id} ({waypoint.type.value})")
        return waypoint

    def remove(self, waypoint_id: str) -> bool:
        """Remove the waypoint with this id if present.

        Returns:
            True if a waypoint was removed, False if the id was unknown.
        """
        removed = self._waypoints.pop(waypoint_id, None)
        if removed is None:
            logger.debug(f"Waypoint {waypoint_id} not found, nothing removed")
            return False
        logger.info(f"Removed waypoint {waypoint_id}")
        return True

    def clear(self) -> None:
        self._waypoints.clear()

    def get(self, waypoint_id: str) -> Waypoint | None:
        return self._waypoints.get(waypoint_id)

    def list(self) -> list[Waypoint]:
        """Current waypoints in insertion order (a new list on every call)."""
        return list(self._waypoints.values())

    def __len__(self) -> int:
        return len(self._waypoints)

    def __contains__(self, waypoint_id: object) -> bool:
        return waypoint_id in self._waypoints

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self.list())

    def __repr__(self) -> str:
        return f"WaypointStore({len(self._waypoints)} waypoints)"
