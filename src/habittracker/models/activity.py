"""
Activity data models for the HabitTracker application.

This module defines the core domain entities used to represent habits and
their completions. All models are immutable: the store replaces snapshots
instead of mutating them, so every instance can be shared safely between
old and new states.

Classes:
    Frequency: Enum defining the advisory target frequency of an activity
    Activity: Pydantic model for a recurring habit definition
    ActivityCompletion: Pydantic model for a single completion record
    ActivityState: Aggregate root holding activities and completions
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Frequency(str, Enum):
    """
    Enumeration of supported target frequencies.

    The frequency is advisory only. The store never enforces it; it is
    shown next to the activity name and may be used by callers to decide
    whether a second completion on the same day makes sense.
    """

    DAILY = "daily"
    WEEKLY = "weekly"


class Activity(BaseModel):
    """
    Pydantic model representing a user-defined recurring activity.

    Attributes:
        id: Unique identifier, immutable after creation
        name: Display name (stripped, must not be empty)
        description: Free text, may be empty
        target_frequency: Advisory frequency (Frequency enum)
        created_at: Creation timestamp

    Example:
        >>> activity = Activity(
        ...     id="4",
        ...     name="  Meditation ",
        ...     created_at=datetime(2025, 10, 20, 8, 0),
        ... )
        >>> activity.name
        'Meditation'
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique activity identifier")
    name: str = Field(..., description="Activity display name")
    description: str = Field(default="", description="Activity description")
    target_frequency: Frequency = Field(
        default=Frequency.DAILY, description="Advisory target frequency"
    )
    created_at: datetime = Field(
        default_factory=datetime.now, description="Creation timestamp"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """
        Strip the name and reject blank values.

        Raises:
            ValueError: If the name is empty after stripping
        """
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("Activity name cannot be empty")
        return cleaned

    @field_validator("description")
    @classmethod
    def clean_description(cls, v: str) -> str:
        return v.strip()


class ActivityCompletion(BaseModel):
    """
    Pydantic model for a record that an activity was performed on a day.

    ``completed_at`` carries the calendar day (and time) of the completion;
    ``created_at`` is when the record itself was made, which differs when a
    past day is ticked in the week grid.

    Attributes:
        id: Unique completion identifier
        activity_id: Id of the completed activity
        completed_at: Day and time of completion
        notes: Optional annotation, blank notes become None
        created_at: Record creation timestamp
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique completion identifier")
    activity_id: str = Field(..., min_length=1, description="Completed activity id")
    completed_at: datetime = Field(..., description="Completion day and time")
    notes: Optional[str] = Field(default=None, description="Completion notes")
    created_at: datetime = Field(
        default_factory=datetime.now, description="Record creation timestamp"
    )

    @field_validator("notes")
    @classmethod
    def clean_notes(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class ActivityState(BaseModel):
    """
    Immutable snapshot of all activities and completions.

    Both sequences are tuples kept in insertion order. A new snapshot is
    produced for every change, so a reference to an older state keeps
    describing exactly what it described when it was handed out.
    """

    model_config = ConfigDict(frozen=True)

    activities: Tuple[Activity, ...] = ()
    completions: Tuple[ActivityCompletion, ...] = ()

    @model_validator(mode="after")
    def check_references(self) -> "ActivityState":
        """
        Enforce unique ids and that every completion points to an activity.

        Raises:
            ValueError: On a duplicate activity or completion id, or a
                completion whose activity is not in the state
        """
        activity_ids = set()
        for activity in self.activities:
            if activity.id in activity_ids:
                raise ValueError(f"Duplicate activity id: {activity.id}")
            activity_ids.add(activity.id)

        completion_ids = set()
        for completion in self.completions:
            if completion.id in completion_ids:
                raise ValueError(f"Duplicate completion id: {completion.id}")
            completion_ids.add(completion.id)
            if completion.activity_id not in activity_ids:
                raise ValueError(
                    f"Completion {completion.id} refers to unknown activity "
                    f"{completion.activity_id}"
                )

        return self

    def get_activity(self, activity_id: str) -> Optional[Activity]:
        """Return the activity with the given id, or None."""
        for activity in self.activities:
            if activity.id == activity_id:
                return activity
        return None

    def has_activity(self, activity_id: str) -> bool:
        return self.get_activity(activity_id) is not None

    def has_completion(self, completion_id: str) -> bool:
        return any(c.id == completion_id for c in self.completions)
