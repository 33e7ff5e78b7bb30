"""
Utility functions and helpers for the HabitTracker application.

This module contains the capabilities the store and services depend on:
a clock with calendar-day comparisons, id generation, and structured event
logging.
"""

from .dates import (
    Clock,
    FixedClock,
    SystemClock,
    format_date,
    is_same_calendar_day,
    to_local_date,
)
from .event_log import log_event
from .ids import new_id

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "format_date",
    "is_same_calendar_day",
    "to_local_date",
    "log_event",
    "new_id",
]
