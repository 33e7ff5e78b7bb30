"""
Data models for the HabitTracker application.

This module contains the Pydantic models for activities, completions, the
aggregate state snapshot, and the commands that transform it.

Classes:
    Activity: Model representing a recurring habit
    ActivityCompletion: Model for a completion record
    ActivityState: Immutable snapshot of the tracker
    Frequency: Enum for advisory target frequency
    CommandType: Enum of store command tags
"""

from .activity import Activity, ActivityCompletion, ActivityState, Frequency
from .commands import (
    ActivityCommand,
    AddActivity,
    CommandType,
    CompleteActivity,
    DeleteActivity,
    RemoveCompletion,
    parse_command,
)

__all__ = [
    "Activity",
    "ActivityCompletion",
    "ActivityState",
    "Frequency",
    "ActivityCommand",
    "AddActivity",
    "CommandType",
    "CompleteActivity",
    "DeleteActivity",
    "RemoveCompletion",
    "parse_command",
]
