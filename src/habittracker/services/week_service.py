"""
Week view projections for the HabitTracker application.

Builds the data behind the weekly grid: the seven days of the week around a
reference day, a human readable label for the range, and one row per
selected activity telling which days it was completed.

Functions:
    week_start: First day of the week containing a reference day
    week_days: The seven days of that week
    format_week_range: Label such as "Week from 20-26 October 2025"
    select_activities: Filter activities by selected ids, keeping store order
    build_week_grid: Completion grid for the selected activities
"""

from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..models.activity import Activity, ActivityState
from ..utils.dates import Clock, DateLike, SystemClock, to_local_date
from .projections import completion_id_on

DAYS_IN_WEEK = 7


def week_start(reference: DateLike, week_starts_on: int = 0) -> date:
    """
    Return the first day of the week containing ``reference``.

    Args:
        reference: Any day in the week
        week_starts_on: Weekday the week starts on (0=Monday ... 6=Sunday)
    """
    day = to_local_date(reference)
    offset = (day.weekday() - week_starts_on) % DAYS_IN_WEEK
    return day - timedelta(days=offset)


def week_days(reference: DateLike, week_starts_on: int = 0) -> Tuple[date, ...]:
    start = week_start(reference, week_starts_on)
    return tuple(start + timedelta(days=i) for i in range(DAYS_IN_WEEK))


def format_week_range(reference: DateLike, week_starts_on: int = 0) -> str:
    """
    Describe the week containing ``reference``.

    Weeks inside one month use the full month name; weeks that span two
    months abbreviate both. The year is the year of the last day.

    Example:
        >>> format_week_range(date(2025, 10, 22))
        'Week from 20-26 October 2025'
        >>> format_week_range(date(2025, 10, 1))
        'Week from 29 Sep-5 Oct 2025'
    """
    days = week_days(reference, week_starts_on)
    start, end = days[0], days[-1]

    if start.month == end.month:
        return f"Week from {start.day}-{end.day} {start.strftime('%B')} {end.year}"

    return (
        f"Week from {start.day} {start.strftime('%b')}"
        f"-{end.day} {end.strftime('%b')} {end.year}"
    )


def select_activities(
    activities: Iterable[Activity], selected_ids: Optional[Iterable[str]] = None
) -> Tuple[Activity, ...]:
    """
    Keep only the selected activities, in the order the store holds them.

    Passing None selects every activity.
    """
    if selected_ids is None:
        return tuple(activities)
    wanted = set(selected_ids)
    return tuple(a for a in activities if a.id in wanted)


def build_week_grid(
    state: ActivityState,
    reference: Optional[DateLike] = None,
    selected_ids: Optional[Sequence[str]] = None,
    clock: Optional[Clock] = None,
    week_starts_on: int = 0,
) -> Dict[str, Any]:
    """
    Build the weekly completion grid.

    Args:
        state: Snapshot to read from
        reference: Any day of the week to show, defaults to today
        selected_ids: Activity ids to include, None for all
        clock: Clock deciding what "today" is
        week_starts_on: Weekday the week starts on

    Returns:
        Dictionary with:
        - label: week range label
        - days: the seven dates of the week
        - rows: one entry per activity with ``activity`` and ``cells``; each
          cell holds ``date``, ``completed``, ``completion_id``, ``is_today``
    """
    clock = clock or SystemClock()
    reference = reference if reference is not None else clock.now()
    days = week_days(reference, week_starts_on)

    rows: List[Dict[str, Any]] = []
    for activity in select_activities(state.activities, selected_ids):
        cells = []
        for day in days:
            completion_id = completion_id_on(state.completions, activity.id, day)
            cells.append(
                {
                    "date": day,
                    "completed": completion_id is not None,
                    "completion_id": completion_id,
                    "is_today": clock.is_today(day),
                }
            )
        rows.append({"activity": activity, "cells": cells})

    return {
        "label": format_week_range(reference, week_starts_on),
        "days": days,
        "rows": rows,
    }
