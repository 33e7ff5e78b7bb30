"""
Pytest configuration and shared fixtures for HabitTracker tests.

Every fixture here uses a FixedClock so "today" is deterministic.

Fixtures:
    fixed_now: The moment treated as "now" (Wednesday 22 October 2025, 14:30)
    clock: FixedClock frozen at fixed_now
    store: Seeded ActivityStore with event logging disabled
    activity_service: ActivityService on top of the store with sequential ids
    completion_factory: Helper building ActivityCompletion records
    sample_completions: Completions dated yesterday, today and tomorrow
"""

from datetime import datetime, timedelta
from itertools import count
from typing import List

import pytest

from habittracker.models.activity import ActivityCompletion
from habittracker.services.activity_service import ActivityService
from habittracker.services.activity_store import ActivityStore, initial_activity_state
from habittracker.utils.dates import FixedClock

FIXED_NOW = datetime(2025, 10, 22, 14, 30, 0)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def store(clock) -> ActivityStore:
    """
    Fixture that provides a seeded store.

    Returns:
        ActivityStore: Store with the three default activities and no completions
    """
    return ActivityStore(
        initial_state=initial_activity_state(clock), clock=clock, log_events=False
    )


@pytest.fixture
def activity_service(store) -> ActivityService:
    """
    Fixture that provides an ActivityService with predictable ids.

    Ids are "id-1", "id-2", ... in creation order.
    """
    counter = count(1)
    return ActivityService(store, id_factory=lambda: f"id-{next(counter)}")


def make_completion(
    completion_id: str, activity_id: str, completed_at: datetime, notes=None
) -> ActivityCompletion:
    return ActivityCompletion(
        id=completion_id,
        activity_id=activity_id,
        completed_at=completed_at,
        notes=notes,
        created_at=completed_at,
    )


@pytest.fixture
def completion_factory():
    """Fixture that returns the make_completion helper."""
    return make_completion


@pytest.fixture
def sample_completions(fixed_now) -> List[ActivityCompletion]:
    """
    Fixture that provides completions around the fixed "now".

    Two are dated today (activities "1" and "2"), one yesterday and one
    tomorrow (both activity "1").
    """
    return [
        make_completion("c-today-1", "1", fixed_now.replace(hour=7)),
        make_completion("c-yesterday", "1", fixed_now - timedelta(days=1)),
        make_completion("c-today-2", "2", fixed_now.replace(hour=23, minute=59)),
        make_completion("c-tomorrow", "1", fixed_now + timedelta(days=1)),
    ]
