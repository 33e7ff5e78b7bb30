"""
Date helpers for the HabitTracker application.

Completions are grouped by calendar day in local time, ignoring the time of
day. Naive datetimes are taken to be local already; aware datetimes are
converted to the local timezone before their date is read.

Classes:
    Clock: Source of the current time
    SystemClock: Clock backed by the system time
    FixedClock: Clock frozen at a given moment (tests, replays)

Functions:
    to_local_date: Calendar day of a date or datetime
    is_same_calendar_day: Compare two values by calendar day
    format_date: Long human readable date, e.g. "Monday, October 20th, 2025"
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta
from typing import Union

DateLike = Union[date, datetime]


def to_local_date(value: DateLike) -> date:
    """Return the local calendar day of a date or datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def is_same_calendar_day(a: DateLike, b: DateLike) -> bool:
    return to_local_date(a) == to_local_date(b)


def start_of_day(value: DateLike) -> datetime:
    """Midnight (naive, local) at the start of the given day."""
    return datetime.combine(to_local_date(value), time.min)


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_date(value: DateLike) -> str:
    """
    Format a day the way the dashboard header shows it.

    Example:
        >>> format_date(date(2025, 10, 22))
        'Wednesday, October 22nd, 2025'
    """
    day = to_local_date(value)
    return f"{day.strftime('%A')}, {day.strftime('%B')} {_ordinal(day.day)}, {day.year}"


class Clock(ABC):
    """
    Source of the current time.

    Subclasses implement ``now``; the calendar-day helpers are shared.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current local time."""

    def today(self) -> date:
        return to_local_date(self.now())

    def is_today(self, value: DateLike) -> bool:
        return is_same_calendar_day(value, self.now())


class SystemClock(Clock):
    """Clock returning the local system time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """
    Clock frozen at a given moment.

    Attributes:
        moment: The datetime returned by ``now``
    """

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, delta: timedelta) -> None:
        self.moment = self.moment + delta
