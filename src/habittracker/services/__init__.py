"""
Service layer for the HabitTracker application.

This module contains the store that owns the tracker state, the pure
projections derived from it, and the services that turn user intents into
store commands.

Classes:
    ActivityStore: In-memory state holder with a single dispatch entry point
    ActivityService: Intent layer for adding, completing and deleting activities
"""

from .activity_service import ActivityService, create_service
from .activity_store import (
    ActivityStore,
    activity_reducer,
    create_store,
    initial_activity_state,
)
from .projections import (
    completion_id_on,
    is_completed_on,
    today_completed_count,
    today_completions_for,
)
from .week_service import build_week_grid, format_week_range, week_days

__all__ = [
    "ActivityService",
    "create_service",
    "ActivityStore",
    "activity_reducer",
    "create_store",
    "initial_activity_state",
    "completion_id_on",
    "is_completed_on",
    "today_completed_count",
    "today_completions_for",
    "build_week_grid",
    "format_week_range",
    "week_days",
]
