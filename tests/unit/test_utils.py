"""
Unit tests for utilities and configuration.
"""

import json
import uuid
from datetime import date, datetime, timedelta

import pytest
from pydantic import ValidationError

from habittracker.config import TrackerSettings
from habittracker.utils.dates import (
    Clock,
    FixedClock,
    SystemClock,
    format_date,
    is_same_calendar_day,
    start_of_day,
    to_local_date,
)
from habittracker.utils.event_log import log_event
from habittracker.utils.ids import new_id


class TestDates:
    """Test cases for date helpers."""

    def test_same_calendar_day(self):
        assert is_same_calendar_day(
            datetime(2025, 10, 22, 0, 0), datetime(2025, 10, 22, 23, 59)
        )
        assert is_same_calendar_day(date(2025, 10, 22), datetime(2025, 10, 22, 12))
        assert not is_same_calendar_day(
            datetime(2025, 10, 22, 23, 59), datetime(2025, 10, 23, 0, 0)
        )

    def test_to_local_date(self):
        assert to_local_date(datetime(2025, 10, 22, 9)) == date(2025, 10, 22)
        assert to_local_date(date(2025, 10, 22)) == date(2025, 10, 22)

    def test_start_of_day(self):
        assert start_of_day(date(2025, 10, 22)) == datetime(2025, 10, 22)

    @pytest.mark.parametrize(
        "day, expected",
        [
            (date(2025, 10, 1), "Wednesday, October 1st, 2025"),
            (date(2025, 10, 2), "Thursday, October 2nd, 2025"),
            (date(2025, 10, 3), "Friday, October 3rd, 2025"),
            (date(2025, 10, 11), "Saturday, October 11th, 2025"),
            (date(2025, 10, 22), "Wednesday, October 22nd, 2025"),
        ],
    )
    def test_format_date(self, day, expected):
        assert format_date(day) == expected

    def test_fixed_clock(self, fixed_now):
        clock = FixedClock(fixed_now)

        assert clock.now() == fixed_now
        assert clock.today() == date(2025, 10, 22)
        assert clock.is_today(date(2025, 10, 22))

        clock.advance(timedelta(days=1))

        assert not clock.is_today(date(2025, 10, 22))

    def test_clock_is_abstract(self):
        with pytest.raises(TypeError):
            Clock()

    def test_system_clock(self):
        clock = SystemClock()

        assert clock.is_today(datetime.now())


class TestIdsAndLogging:
    """Test cases for id generation and event logging."""

    def test_new_id_is_uuid4(self):
        value = new_id()

        assert uuid.UUID(value).version == 4
        assert new_id() != value

    def test_log_event_writes_json_line(self, capsys):
        log_event("TEST_EVENT", activityId="1", count=2)

        event = json.loads(capsys.readouterr().out)
        assert event["eventType"] == "TEST_EVENT"
        assert event["activityId"] == "1"
        assert event["count"] == 2
        assert "timestamp" in event

    def test_log_event_serialises_dates(self, capsys):
        log_event("TEST_EVENT", day=date(2025, 10, 22))

        assert json.loads(capsys.readouterr().out)["day"] == "2025-10-22"


class TestTrackerSettings:
    """Test cases for environment-driven settings."""

    def test_defaults(self):
        settings = TrackerSettings.from_env({})

        assert settings.seed_defaults is True
        assert settings.week_starts_on == 0
        assert settings.log_events is True

    def test_from_env(self):
        settings = TrackerSettings.from_env(
            {
                "HABIT_TRACKER_SEED_DEFAULTS": "no",
                "HABIT_TRACKER_WEEK_STARTS_ON": "6",
                "HABIT_TRACKER_LOG_EVENTS": "0",
            }
        )

        assert settings.seed_defaults is False
        assert settings.week_starts_on == 6
        assert settings.log_events is False

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            TrackerSettings.from_env({"HABIT_TRACKER_WEEK_STARTS_ON": "7"})

        with pytest.raises(ValidationError):
            TrackerSettings.from_env({"HABIT_TRACKER_LOG_EVENTS": "maybe"})
