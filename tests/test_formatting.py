"""Tests for display formatting of live statistics."""

from typing import TYPE_CHECKING

import pytest

from trail_recorder.formatting import FormattedStat, format_distance, format_duration, format_elevation, format_snapshot
from trail_recorder.model.position_sample import PositionSample
from trail_recorder.session.recording_session import RecordingSession

if TYPE_CHECKING:
    from conftest import FakeClock


class TestFormatDistance:
    @pytest.mark.parametrize(
        "meters, expected",
        [(0.0, "0 m"), (12.4, "12 m"), (999.4, "999 m"), (1000.0, "1.0 km"), (1234.0, "1.2 km"), (15_680.0, "15.7 km")],
    )
    def test_units(self, meters: float, expected: str) -> None:
        assert str(format_distance(meters=meters)) == expected


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, FormattedStat("0:00", "min")), (65, FormattedStat("1:05", "min")), (3599, FormattedStat("59:59", "min"))],
    )
    def test_under_one_hour(self, seconds: int, expected: FormattedStat) -> None:
        assert format_duration(seconds=seconds) == expected

    def test_hours_and_minutes(self) -> None:
        assert format_duration(seconds=3600) == FormattedStat("1:00", "hr")
        assert format_duration(seconds=2 * 3600 + 7 * 60 + 59) == FormattedStat("2:07", "hr")


class TestFormatSnapshot:
    def test_snapshot_fields(
        self, session: RecordingSession, clock: "FakeClock", hill_track: list[PositionSample]
    ) -> None:
        session.start()
        for sample in hill_track:
            session.add_coordinate(sample=sample)
        clock.advance(seconds=90)
        stats = format_snapshot(snapshot=session.snapshot())
        assert str(stats["distance"]) == "445 m"
        assert str(stats["time"]) == "1:30 min"
        assert stats["elevation"] == format_elevation(meters=27.0) == FormattedStat("27", "m")
