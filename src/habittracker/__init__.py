"""
HabitTracker: in-memory habit tracking core.

This package provides the state management behind a habit tracker: users
define recurring activities, mark daily completions with optional notes,
and view a weekly grid of completion history.

Modules:
    models: Activities, completions, state snapshots and commands (Pydantic)
    services: Store, projections, intent and week-view services
    utils: Clock, id generation and structured event logging
    config: Environment-driven settings

Version: 0.1.0
"""

__version__ = "0.1.0"

from .config import TrackerSettings
from .models import Activity, ActivityCompletion, ActivityState, Frequency
from .services import ActivityService, ActivityStore, create_service, create_store

__all__ = [
    "Activity",
    "ActivityCompletion",
    "ActivityState",
    "Frequency",
    "ActivityService",
    "ActivityStore",
    "TrackerSettings",
    "create_service",
    "create_store",
]
