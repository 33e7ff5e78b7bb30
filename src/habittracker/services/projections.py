"""
Read-only projections over activity completions.

These are pure functions: they scan the completions they are given and
never modify them. Same-day matching compares calendar days in local time.

Functions:
    today_completed_count: Number of completions made today
    today_completions_for: Today's completions of one activity
    is_completed_on: Whether an activity was completed on a given day
    completion_id_on: Id of an activity's completion on a given day
"""

from typing import Iterable, Optional, Tuple

from ..models.activity import ActivityCompletion
from ..utils.dates import Clock, DateLike, SystemClock, is_same_calendar_day


def today_completed_count(
    completions: Iterable[ActivityCompletion], clock: Optional[Clock] = None
) -> int:
    """
    Count the completions whose ``completed_at`` falls on the current day.

    Args:
        completions: Completion records to scan
        clock: Clock deciding what "today" is, defaults to SystemClock

    Returns:
        Number of completions dated today
    """
    clock = clock or SystemClock()
    return sum(1 for c in completions if clock.is_today(c.completed_at))


def today_completions_for(
    completions: Iterable[ActivityCompletion],
    activity_id: str,
    clock: Optional[Clock] = None,
) -> Tuple[ActivityCompletion, ...]:
    """
    Return today's completions of one activity, in their original order.

    Args:
        completions: Completion records to scan
        activity_id: Activity to match
        clock: Clock deciding what "today" is, defaults to SystemClock
    """
    clock = clock or SystemClock()
    return tuple(
        c
        for c in completions
        if c.activity_id == activity_id and clock.is_today(c.completed_at)
    )


def _first_on(
    completions: Iterable[ActivityCompletion], activity_id: str, day: DateLike
) -> Optional[ActivityCompletion]:
    for completion in completions:
        if completion.activity_id == activity_id and is_same_calendar_day(
            completion.completed_at, day
        ):
            return completion
    return None


def is_completed_on(
    completions: Iterable[ActivityCompletion], activity_id: str, day: DateLike
) -> bool:
    """True if any completion of ``activity_id`` shares a calendar day with ``day``."""
    return _first_on(completions, activity_id, day) is not None


def completion_id_on(
    completions: Iterable[ActivityCompletion], activity_id: str, day: DateLike
) -> Optional[str]:
    """Id of the first completion of ``activity_id`` on ``day``, or None."""
    completion = _first_on(completions, activity_id, day)
    return completion.id if completion is not None else None
